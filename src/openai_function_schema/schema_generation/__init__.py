"""Schema generation exports."""

from .schema_builder import (
    SchemaSerializationError,
    TypeReferenceError,
    generate_json_schema,
    parse_json_text,
    resolve_type_reference,
    to_json_value,
)
from .schema_models import Schema

__all__ = [
    "Schema",
    "SchemaSerializationError",
    "TypeReferenceError",
    "generate_json_schema",
    "parse_json_text",
    "resolve_type_reference",
    "to_json_value",
]
