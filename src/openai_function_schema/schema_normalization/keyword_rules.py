"""Keyword tables for the OpenAI JSON Schema subset."""

from __future__ import annotations

STRIPPED_KEYWORDS: tuple[str, ...] = (
    "minLength",
    "maxLength",
    "pattern",
    "format",
    "minimum",
    "maximum",
    "multipleOf",
    "patternProperties",
    "unevaluatedProperties",
    "propertyNames",
    "minProperties",
    "maxProperties",
    "unevaluatedItems",
    "contains",
    "minContains",
    "maxContains",
    "minItems",
    "maxItems",
    "uniqueItems",
)

# Rewritten in this order; a later key overwrites an earlier one on the same node.
UNION_KEYWORDS: tuple[str, ...] = ("oneOf", "allOf")
UNION_TARGET_KEYWORD = "anyOf"

OBJECT_TYPE = "object"
