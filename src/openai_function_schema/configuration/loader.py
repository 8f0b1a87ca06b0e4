"""Manifest loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Manifest, OutputSettings, ToolSpec

_LOGGER = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the manifest file is invalid."""


def load_manifest(manifest_path: Path | str) -> Manifest:
    """Load and validate the function tool manifest."""
    path = Path(manifest_path)
    if not path.exists():
        raise ConfigurationError(f"Manifest file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Manifest file is not valid UTF-8: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse manifest file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Manifest root must be a mapping.")

    output = _parse_output_section(parsed.get("output"))
    tools = _parse_tools_section(parsed.get("tools"), path.parent)
    _LOGGER.debug("Loaded manifest %s with %d tool(s)", path, len(tools))
    return Manifest(path=path, output=output, tools=tools)


def _parse_output_section(value: Any) -> OutputSettings:
    if value is None:
        return OutputSettings()
    section = _require_mapping(value, "output")
    indent = _require_non_negative_int(section.get("indent", 2), "output.indent")
    ensure_ascii = section.get("ensure_ascii", False)
    if not isinstance(ensure_ascii, bool):
        raise ConfigurationError("output.ensure_ascii must be a boolean.")
    return OutputSettings(indent=indent, ensure_ascii=ensure_ascii)


def _parse_tools_section(value: Any, base_path: Path) -> tuple[ToolSpec, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("Manifest section 'tools' must be a list.")
    if not value:
        raise ConfigurationError("Manifest section 'tools' must contain at least one tool.")

    tools: list[ToolSpec] = []
    seen_names: set[str] = set()
    for index, entry in enumerate(value):
        tool = _parse_tool_entry(entry, f"tools[{index}]", base_path)
        if tool.name in seen_names:
            raise ConfigurationError(f"Duplicate tool name in manifest: {tool.name}")
        seen_names.add(tool.name)
        tools.append(tool)
    return tuple(tools)


def _parse_tool_entry(value: Any, label: str, base_path: Path) -> ToolSpec:
    entry = _require_mapping(value, label)
    name = _require_non_empty_string(entry.get("name"), f"{label}.name")
    description = _optional_string(entry.get("description"), f"{label}.description")
    type_reference = _optional_string(entry.get("type"), f"{label}.type")
    schema_path_value = _optional_string(entry.get("schema_path"), f"{label}.schema_path")

    if (type_reference is None) == (schema_path_value is None):
        raise ConfigurationError(f"{label} must set exactly one of 'type' or 'schema_path'.")

    schema_path = None
    if schema_path_value is not None:
        schema_path = _resolve_path(base_path, schema_path_value)
        if not schema_path.exists():
            raise ConfigurationError(f"Schema file not found: {schema_path}")

    return ToolSpec(
        name=name,
        description=description,
        type_reference=type_reference,
        schema_path=schema_path,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Manifest section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
