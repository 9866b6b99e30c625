"""Employee roster tools — create, remove, update and view employee records."""
import logging
from typing import Any, Optional

from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError

from ... import store
from ...llm import convert_availability
from ...ui import CardUI, TableUI, TableColumn
from ..registry import register_tool, ToolResult, EmptyInput

logger = logging.getLogger(__name__)

NO_AVAILABILITY = "None"


class CreateEmployeeInput(BaseModel):
    """Input parameters for the employee creation"""
    id: Optional[int] = Field(None, description="ID of the employee")
    name: str = Field(description="Name of the employee")
    availability: Optional[str] = Field(None, description="Availability of the employee")


class EmployeeOutput(BaseModel):
    id: int
    name: str
    availability: str


class RemoveEmployeeInput(BaseModel):
    """Input parameters for the employee removal"""
    name: str = Field(description="Name of the employee")
    id: Optional[int] = Field(None, description="ID of the employee")


class RemovedEmployeeOutput(BaseModel):
    id: int
    name: str


class UpdateEmployeeInput(BaseModel):
    """Input parameters for the employee update"""
    id: Optional[int] = Field(None, description="ID of the employee")
    name: Optional[str] = Field(None, description="Name of the employee")
    availability: Optional[str] = Field(None, description="Availability of the employee")
    updater: str = Field(description="What parameter is being updated?")


class UpdateEmployeeOutput(BaseModel):
    success: bool


class RosterOutput(BaseModel):
    database: Any = None


@register_tool(
    "create-employee",
    name="Create Employee",
    description="Create a user in the employee schedule",
    input=CreateEmployeeInput,
    output=EmployeeOutput,
    category="employees",
)
async def create_employee(params: CreateEmployeeInput) -> ToolResult:
    if params.availability is not None:
        availability = await convert_availability(params.availability)
    else:
        availability = NO_AVAILABILITY

    row = await store.insert_employee(name=params.name, availability=availability, id=params.id)

    return ToolResult(
        text=f"User created: {row['name']}",
        data=row,
        ui=CardUI(title="User Created", content=f"Name {row['name']}"),
    )


@register_tool(
    "remove-employee",
    name="Remove Employee",
    description="Remove a user from the schedule",
    input=RemoveEmployeeInput,
    output=RemovedEmployeeOutput,
    category="employees",
)
async def remove_employee(params: RemoveEmployeeInput) -> ToolResult:
    # Matched on name only; the id is accepted but not part of the filter.
    await store.delete_employees("name", params.name)

    return ToolResult(
        text="Employee successfully removed. Show user a success screen",
        data={"id": 0, "name": "removed"},
        ui=CardUI(title="User Removed", content=f"Name {params.name}"),
    )


@register_tool(
    "update-employee",
    name="Update Employee",
    description="Update a user in the schedule",
    input=UpdateEmployeeInput,
    output=UpdateEmployeeOutput,
    category="employees",
)
async def update_employee(params: UpdateEmployeeInput) -> ToolResult:
    """Replace one field, chosen by ``updater``, matching on the other key.

    The outcome of the write is not checked: store errors are logged and
    success is still reported. Converter errors propagate.
    """
    if params.updater == "id":
        match, values = ("name", params.name), {"id": params.id}
    elif params.updater == "name":
        match, values = ("id", params.id), {"name": params.name}
    elif params.updater == "availability":
        availability = await convert_availability(params.availability or "")
        match, values = ("name", params.name), {"availability": availability}
    else:
        logger.info(f"update-employee: nothing to update for updater={params.updater!r}")
        match, values = None, None

    if match:
        try:
            await store.update_employees(*match, **values)
        except SQLAlchemyError as e:
            logger.warning(f"update-employee: {params.updater} update failed: {e}", exc_info=True)

    return ToolResult(
        text="Employee successfully updated. Show user a success screen",
        data={"success": True},
        ui=CardUI(title="User Updated", content=f"Name {params.name}"),
    )


@register_tool(
    "view-employee-userbase",
    name="View Employees",
    description="View all employees in the roster. Show a table of the availability of each employee.",
    output=RosterOutput,
    category="employees",
)
async def view_employees(params: EmptyInput) -> ToolResult:
    rows = await store.select_employees()

    table = TableUI(
        columns=[
            TableColumn(key="id", header="ID", type="number"),
            TableColumn(key="name", header="Name", type="text"),
            TableColumn(key="availability", header="Availability", type="text"),
        ],
        rows=rows,
    )
    return ToolResult(
        text="Employee roster displayed",
        data={"database": rows},
        ui=table,
    )
