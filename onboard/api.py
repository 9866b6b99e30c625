"""REST API routes: service metadata, tool listing, and tool invocation."""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .config import settings
from .tools import execute_tool, get_tool, tool_manifest, UnknownToolError

logger = logging.getLogger(__name__)


# ── Pydantic schemas ──────────────────────────────────────────

class ExampleQueries(BaseModel):
    category: str
    queries: List[str]


class ServiceMetadata(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    description: str
    version: str
    author: str
    tags: List[str]
    logo: str
    example_queries: List[ExampleQueries] = []


class ToolResponse(BaseModel):
    text: str
    data: Dict[str, Any]
    ui: Optional[Dict[str, Any]] = None


METADATA = ServiceMetadata(
    title="Onboard Scheduler DAIN Service",
    description="A DAIN service for onboarding employees and managing their schedules.",
    version="1.0.0",
    author="Aaron C. and Dylan L. for BeachHacks 2025",
    tags=["schedule", "onboarding", "employees", "management", "HR"],
    logo="https://icons.veryicon.com/png/o/miscellaneous/unicons/schedule-19.png",
    example_queries=[
        ExampleQueries(
            category="Management",
            queries=["Good morning!", "Add a new employee.", "Remove an employee."],
        ),
    ],
)


async def verify_api_key(request: Request):
    """Reject requests without the configured service key. No-op when no key is set."""
    if not settings.dain_api_key:
        return
    if request.headers.get(settings.api_key_header) != settings.dain_api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")


router = APIRouter(dependencies=[Depends(verify_api_key)])


# ── Metadata ──────────────────────────────────────────────────

@router.get("/metadata", response_model=ServiceMetadata)
async def get_metadata():
    return METADATA


# ── Tools ─────────────────────────────────────────────────────

@router.get("/tools")
async def list_tools():
    return tool_manifest()


@router.get("/tools/{tool_id}")
async def describe_tool(tool_id: str):
    tool = get_tool(tool_id)
    if not tool:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_id}")
    return tool.describe()


@router.post("/tools/{tool_id}", response_model=ToolResponse)
async def invoke_tool(tool_id: str, args: Optional[Dict[str, Any]] = Body(None)):
    try:
        result = await execute_tool(tool_id, args)
    except UnknownToolError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False, include_input=False),
        )
    return result.to_dict()
