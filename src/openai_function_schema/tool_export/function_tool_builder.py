"""Function tool building and manifest export service."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from openai_function_schema.configuration.runtime_settings import (
    Manifest,
    OutputSettings,
    ToolSpec,
)
from openai_function_schema.schema_generation import Schema, resolve_type_reference

from .tool_models import FunctionTool

_LOGGER = logging.getLogger(__name__)

_TOOL_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,64}$")


class ToolDefinitionError(Exception):
    """Raised when a function tool definition is invalid."""


def build_function_tool(
    name: str,
    parameters: Schema,
    *,
    description: str | None = None,
    strict: bool = True,
) -> FunctionTool:
    """Build a function tool, rejecting names the API does not accept."""
    if not _TOOL_NAME_PATTERN.fullmatch(name):
        raise ToolDefinitionError(
            f"Tool name '{name}' must be 1-64 characters of letters, digits, '_' or '-'."
        )
    return FunctionTool(name=name, description=description, parameters=parameters, strict=strict)


def build_manifest_tools(manifest: Manifest) -> list[FunctionTool]:
    """Build every tool declared in ``manifest`` in declaration order.

    Raises:
      SchemaSerializationError: If a schema cannot be generated or parsed.
      TypeReferenceError: If a tool's type reference cannot be imported.
      ToolDefinitionError: If a tool name is invalid.
    """
    tools = []
    for tool_spec in manifest.tools:
        tools.append(
            build_function_tool(
                tool_spec.name,
                _load_parameters(tool_spec),
                description=tool_spec.description,
            )
        )
        _LOGGER.debug("Built function tool %s", tool_spec.name)
    return tools


def render_tool_definitions(tools: Iterable[FunctionTool], output: OutputSettings) -> str:
    payload: list[dict[str, Any]] = [tool.as_dict() for tool in tools]
    return json.dumps(payload, indent=output.indent, ensure_ascii=output.ensure_ascii)


def write_tool_definitions(
    tools: Iterable[FunctionTool], output_path: Path | str, output: OutputSettings
) -> Path:
    """Write tool definitions as a JSON list and return the resolved path."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_tool_definitions(tools, output) + "\n", encoding="utf-8")
    return destination.resolve()


def _load_parameters(tool_spec: ToolSpec) -> Schema:
    if tool_spec.type_reference is not None:
        return Schema.from_type(resolve_type_reference(tool_spec.type_reference))
    if tool_spec.schema_path is None:
        raise ToolDefinitionError(f"Tool '{tool_spec.name}' has no schema source.")
    return Schema.from_text(tool_spec.schema_path.read_bytes())
