"""In-place rewrite passes that restrict a JSON Schema to the OpenAI subset."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from .keyword_rules import OBJECT_TYPE, STRIPPED_KEYWORDS, UNION_KEYWORDS, UNION_TARGET_KEYWORD

_LOGGER = logging.getLogger(__name__)


def enforce_openai_subset(document: Any) -> Any:
    """Run every subset pass over ``document`` in place and return it.

    The passes are applied in a fixed order: constraint keywords are stripped,
    ``oneOf``/``allOf`` become ``anyOf``, object schemas are closed and finally
    every declared property is listed as required. None of them raise; nodes
    with an unexpected shape are left as they are.
    """
    strip_constraint_keywords(document)
    replace_unions_with_any_of(document)
    close_object_schemas(document)
    require_all_properties(document)
    _LOGGER.debug("Applied OpenAI subset passes to %s document", type(document).__name__)
    return document


def strip_constraint_keywords(node: Any) -> None:
    """Delete constraint keywords the target dialect rejects."""
    if isinstance(node, MutableMapping):
        for keyword in STRIPPED_KEYWORDS:
            node.pop(keyword, None)
        for value in node.values():
            strip_constraint_keywords(value)
    elif isinstance(node, list):
        for item in node:
            strip_constraint_keywords(item)


def replace_unions_with_any_of(node: Any) -> None:
    """Move ``oneOf`` and ``allOf`` values under ``anyOf``."""
    if isinstance(node, MutableMapping):
        for keyword in UNION_KEYWORDS:
            if keyword in node:
                node[UNION_TARGET_KEYWORD] = node.pop(keyword)
        for value in node.values():
            replace_unions_with_any_of(value)
    elif isinstance(node, list):
        for item in node:
            replace_unions_with_any_of(item)


def close_object_schemas(node: Any) -> None:
    """Set ``additionalProperties: false`` on every ``type: object`` node."""
    if isinstance(node, MutableMapping):
        if node.get("type") == OBJECT_TYPE:
            node["additionalProperties"] = False
        for value in node.values():
            close_object_schemas(value)
    elif isinstance(node, list):
        for item in node:
            close_object_schemas(item)


def require_all_properties(node: Any) -> None:
    """Append every declared property name to an existing ``required`` list.

    Existing entries keep their order. A node without a ``required`` list is
    not given one.
    """
    if isinstance(node, MutableMapping):
        properties = node.get("properties")
        required = node.get("required")
        if isinstance(properties, MutableMapping) and isinstance(required, list):
            for name in properties:
                if name not in required:
                    required.append(name)
        for value in node.values():
            require_all_properties(value)
    elif isinstance(node, list):
        for item in node:
            require_all_properties(item)
