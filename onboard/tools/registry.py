"""Tool registry — decorator-based tool registration and lookup."""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Awaitable, Dict, List, Optional, Type

from pydantic import BaseModel

from ..ui import UI

logger = logging.getLogger(__name__)


class EmptyInput(BaseModel):
    pass


class EmptyOutput(BaseModel):
    pass


@dataclass
class ToolResult:
    text: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
    ui: Optional[UI] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "data": self.data,
            "ui": self.ui.to_dict() if self.ui is not None else None,
        }


@dataclass
class ToolDef:
    id: str
    name: str
    description: str
    input: Type[BaseModel]
    output: Type[BaseModel]
    handler: Callable[..., Awaitable[ToolResult]]
    category: str = ""

    def describe(self) -> Dict[str, Any]:
        """Descriptor advertised to the hosting framework."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "input": self.input.model_json_schema(),
            "output": self.output.model_json_schema(),
        }


_tools: Dict[str, ToolDef] = {}


def register_tool(
    tool_id: str,
    name: str,
    description: str = "",
    input: Optional[Type[BaseModel]] = None,
    output: Optional[Type[BaseModel]] = None,
    category: str = "",
):
    """Decorator to register a tool handler.

    The handler receives one validated instance of ``input``.
    """
    def decorator(func):
        tool = ToolDef(
            id=tool_id,
            name=name,
            description=description or func.__doc__ or "",
            input=input or EmptyInput,
            output=output or EmptyOutput,
            handler=func,
            category=category,
        )
        _tools[tool_id] = tool
        logger.info(f"Registered tool: {tool_id}")
        return func
    return decorator


def get_tool(tool_id: str) -> Optional[ToolDef]:
    return _tools.get(tool_id)


def all_tools() -> Dict[str, ToolDef]:
    return dict(_tools)


def tool_manifest() -> List[Dict[str, Any]]:
    return [tool.describe() for _, tool in sorted(_tools.items())]
