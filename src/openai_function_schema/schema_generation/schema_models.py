"""OpenAI-compatible schema entity."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from openai_function_schema.schema_normalization import enforce_openai_subset

from .schema_builder import generate_json_schema, parse_json_text, to_json_value


@dataclass(frozen=True)
class Schema:
    """A JSON Schema that is compatible with OpenAI's function calling API."""

    value: Any

    @classmethod
    def from_type(cls, target: Any) -> Schema:
        """Generate the schema of a Python type and restrict it to the OpenAI subset."""
        return cls(value=enforce_openai_subset(generate_json_schema(target)))

    @classmethod
    def from_value(cls, value: Mapping[str, Any] | bool) -> Schema:
        """Restrict an existing schema; the input itself is left untouched."""
        return cls(value=enforce_openai_subset(to_json_value(value)))

    @classmethod
    def from_text(cls, text: str | bytes) -> Schema:
        return cls(value=enforce_openai_subset(parse_json_text(text)))

    def to_json(self, *, indent: int | None = 2, ensure_ascii: bool = False) -> str:
        return json.dumps(self.value, indent=indent, ensure_ascii=ensure_ascii)
