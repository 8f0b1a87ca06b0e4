"""Generate JSON Schemas compatible with OpenAI's function calling API."""

import logging

from .schema_generation import Schema, SchemaSerializationError
from .schema_normalization import enforce_openai_subset
from .tool_export import FunctionTool, build_function_tool

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FunctionTool",
    "Schema",
    "SchemaSerializationError",
    "build_function_tool",
    "enforce_openai_subset",
]
