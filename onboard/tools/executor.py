"""Tool executor — validates arguments and dispatches to the registered handler."""
import logging
import time
from typing import Any, Dict, Optional

from .registry import get_tool, ToolResult

logger = logging.getLogger(__name__)


class UnknownToolError(LookupError):
    def __init__(self, tool_id: str):
        super().__init__(f"Unknown tool: {tool_id}")
        self.tool_id = tool_id


async def execute_tool(tool_id: str, args: Optional[Dict[str, Any]] = None) -> ToolResult:
    """Execute a registered tool by id.

    Raises UnknownToolError for an unregistered id and pydantic.ValidationError
    when ``args`` do not match the tool's input schema; the handler is not called
    in either case. Handler errors are logged and re-raised.
    """
    tool = get_tool(tool_id)
    if not tool:
        logger.warning(f"Unknown tool: {tool_id}")
        raise UnknownToolError(tool_id)

    params = tool.input.model_validate(args or {})

    arg_str = ", ".join(f"{k}={v!r}" for k, v in params.model_dump(exclude_none=True).items())
    logger.info(f"Executing tool: {tool_id}({arg_str})")
    t0 = time.monotonic()

    try:
        result = await tool.handler(params)
    except Exception as e:
        logger.error(f"Tool {tool_id} failed: {e}", exc_info=True)
        raise

    elapsed = time.monotonic() - t0
    logger.info(f"Tool {tool_id}: {elapsed:.1f}s")
    return result
