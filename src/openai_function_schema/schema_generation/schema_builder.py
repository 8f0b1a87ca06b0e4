"""Upstream schema generation and JSON value conversion."""

from __future__ import annotations

import importlib
import json
import logging
from typing import Any

from pydantic import PydanticUserError, TypeAdapter

_LOGGER = logging.getLogger(__name__)


class SchemaSerializationError(Exception):
    """Raised when a schema representation cannot be converted into a JSON value."""


class TypeReferenceError(Exception):
    """Raised when a ``module:attribute`` type reference cannot be resolved."""


def generate_json_schema(target: Any) -> Any:
    """Generate a JSON Schema for ``target`` with pydantic and return it as a JSON value.

    Args:
      target: Any type pydantic can build a ``TypeAdapter`` for (models,
        dataclasses, ``TypedDict``, builtins, unions, ...).

    Returns:
      The generated schema converted to plain JSON data.

    Raises:
      SchemaSerializationError: If pydantic cannot produce a JSON Schema for the
        type or the produced schema is not representable as JSON.
    """
    try:
        generated = TypeAdapter(target).json_schema()
    except PydanticUserError as exc:
        raise SchemaSerializationError(
            f"Cannot generate JSON schema for {_describe(target)}: {exc}"
        ) from exc
    _LOGGER.debug("Generated JSON schema for %s", _describe(target))
    return to_json_value(generated)


def to_json_value(value: Any) -> Any:
    """Return a detached copy of ``value`` that contains JSON data only.

    Tuples become lists and non-string scalar keys become strings, the same way
    ``json.dumps`` renders them.
    """
    try:
        return json.loads(json.dumps(value, allow_nan=False))
    except (TypeError, ValueError) as exc:
        raise SchemaSerializationError(f"Schema is not representable as JSON: {exc}") from exc


def parse_json_text(text: str | bytes) -> Any:
    """Parse JSON schema text into a JSON value.

    Bytes are decoded as UTF-8, UTF-16 or UTF-32 the way ``json.loads`` detects them;
    undecodable input is reported like any other invalid text.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise SchemaSerializationError(f"Invalid JSON schema text: {exc}") from exc


def resolve_type_reference(reference: str) -> Any:
    """Import the object named by ``package.module:Qualified.Name``."""
    module_name, separator, qualified_name = reference.strip().partition(":")
    if not separator or not module_name or module_name.startswith(".") or not qualified_name:
        raise TypeReferenceError(
            f"Type reference must look like 'package.module:Name', got: {reference!r}"
        )
    try:
        resolved: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise TypeReferenceError(f"Cannot import module '{module_name}': {exc}") from exc

    for attribute in qualified_name.split("."):
        try:
            resolved = getattr(resolved, attribute)
        except AttributeError as exc:
            raise TypeReferenceError(
                f"'{attribute}' not found while resolving {reference!r}"
            ) from exc
    return resolved


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON number")


def _describe(target: Any) -> str:
    return getattr(target, "__qualname__", None) or repr(target)
