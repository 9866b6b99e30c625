"""Schedule tools — schedule entry form, roster echo, and the availability chart."""
import logging
from typing import Any

from pydantic import BaseModel, Field

from ... import store
from ...ui import CardUI, ChartUI, ChartKeys, FormUI, FormField, FormSubmit
from ..registry import register_tool, ToolResult, EmptyInput
from .employees import RosterOutput

logger = logging.getLogger(__name__)

# Placeholder series until the chart is built from stored availability.
HOURLY_STAFFING = [
    {"hour": "00:00", "employees": 1},
    {"hour": "01:00", "employees": 1},
    {"hour": "02:00", "employees": 2},
    {"hour": "03:00", "employees": 2},
    {"hour": "04:00", "employees": 3},
]


class NewScheduleInput(BaseModel):
    day: str = Field(description="Day of the week")


class GenerateScheduleInput(BaseModel):
    start: str = Field(description="Start time")
    end: str = Field(description="End time")


class ScheduleOutput(BaseModel):
    schedule: Any = None


@register_tool(
    "create-new-schedule",
    name="Create New Schedule",
    description="Create a new schedule for the employees.",
    input=NewScheduleInput,
    output=RosterOutput,
    category="schedule",
)
async def create_new_schedule(params: NewScheduleInput) -> ToolResult:
    await store.select_employees()

    form = FormUI(
        title="Create New Schedule",
        description="Create a new schedule for the employees.",
        render_mode="page",
        fields=[
            FormField(name="start", label="Start Time", type="string", widget="text", required=True),
            FormField(name="end", label="End Time", type="string", widget="text", required=True),
        ],
        on_submit=FormSubmit(tool="display-graph-availability"),
    )
    return ToolResult(
        text="Do not output anything. Wait for the form submission, then generate a schedule.",
        data={},
        ui=form,
    )


@register_tool(
    "generate-schedule",
    name="Generate Schedule",
    description="Generate a schedule for the employees.",
    input=GenerateScheduleInput,
    output=ScheduleOutput,
    category="schedule",
)
async def generate_schedule(params: GenerateScheduleInput) -> ToolResult:
    # No scheduling is applied yet: the roster is returned as-is.
    rows = await store.select_employees()

    return ToolResult(
        text="Generate schedule for the employees based on the availability.",
        data={"schedule": rows},
        ui=CardUI(title="Schedule Generated", content=f"Schedule generated for {len(rows)} employees"),
    )


@register_tool(
    "display-graph-availability",
    name="Display Graph Availability",
    description="Display a graph of everyone's availability",
    category="schedule",
)
async def display_graph_availability(params: EmptyInput) -> ToolResult:
    chart = ChartUI(
        chart_type="bar",
        title="Employee Availability",
        render_mode="page",
        data=HOURLY_STAFFING,
        data_keys=ChartKeys(x="hour", y="employees"),
        description="Employee availability displayed for 3/22",
    )
    return ToolResult(
        text="Now generate-schedule using the day and availabilities.",
        data={},
        ui=chart,
    )
