"""Employee store — the four roster operations the tools use.

Every call opens its own session and commits before returning. Driver errors
are not caught here; they reach the tool handler unchanged.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update, delete

from . import database
from .models import Employee

logger = logging.getLogger(__name__)

_FILTER_COLUMNS = {
    "id": Employee.id,
    "name": Employee.name,
}


def _column(field: str):
    try:
        return _FILTER_COLUMNS[field]
    except KeyError:
        raise ValueError(f"Cannot filter employees on '{field}'") from None


async def insert_employee(name: str, availability: str, id: Optional[int] = None) -> Dict[str, Any]:
    """Insert one employee and return the stored row."""
    async with database.async_session_factory() as db:
        employee = Employee(id=id, name=name, availability=availability)
        db.add(employee)
        await db.commit()
        await db.refresh(employee)
        logger.info(f"Employee inserted: {employee.name} (id={employee.id})")
        return employee.to_dict()


async def delete_employees(field: str, value: Any) -> int:
    """Delete every row whose ``field`` equals ``value``. Returns the row count."""
    async with database.async_session_factory() as db:
        result = await db.execute(delete(Employee).where(_column(field) == value))
        await db.commit()
        logger.info(f"Employees deleted where {field}={value!r}: {result.rowcount}")
        return result.rowcount


async def update_employees(field: str, value: Any, **values) -> int:
    """Set ``values`` on every row whose ``field`` equals ``value``."""
    async with database.async_session_factory() as db:
        result = await db.execute(
            update(Employee).where(_column(field) == value).values(**values)
        )
        await db.commit()
        logger.info(f"Employees updated where {field}={value!r} -> {sorted(values)}: {result.rowcount}")
        return result.rowcount


async def select_employees() -> List[Dict[str, Any]]:
    """Fetch the full roster in the store's own order."""
    async with database.async_session_factory() as db:
        result = await db.execute(select(Employee))
        return [e.to_dict() for e in result.scalars().all()]
