"""Tool system — registry and executor."""
from .registry import register_tool, get_tool, all_tools, tool_manifest, ToolResult, ToolDef
from .executor import execute_tool, UnknownToolError

# Auto-import builtin tools to trigger @register_tool decorators
from .builtin import *  # noqa
