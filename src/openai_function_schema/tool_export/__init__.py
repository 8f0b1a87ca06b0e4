"""Function tool exports."""

from .function_tool_builder import (
    ToolDefinitionError,
    build_function_tool,
    build_manifest_tools,
    render_tool_definitions,
    write_tool_definitions,
)
from .tool_models import FunctionTool

__all__ = [
    "FunctionTool",
    "ToolDefinitionError",
    "build_function_tool",
    "build_manifest_tools",
    "render_tool_definitions",
    "write_tool_definitions",
]
