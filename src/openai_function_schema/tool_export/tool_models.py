"""Function tool entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from openai_function_schema.schema_generation import Schema


@dataclass(frozen=True)
class FunctionTool:
    """OpenAI function tool definition backed by a normalized schema."""

    name: str
    description: str | None
    parameters: Schema
    strict: bool = True

    def as_dict(self) -> dict[str, Any]:
        function: dict[str, Any] = {"name": self.name}
        if self.description:
            function["description"] = self.description
        function["parameters"] = self.parameters.value
        function["strict"] = self.strict
        return {"type": "function", "function": function}
