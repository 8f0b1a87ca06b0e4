"""Schema normalization exports."""

from .keyword_rules import STRIPPED_KEYWORDS, UNION_KEYWORDS, UNION_TARGET_KEYWORD
from .subset_passes import (
    close_object_schemas,
    enforce_openai_subset,
    replace_unions_with_any_of,
    require_all_properties,
    strip_constraint_keywords,
)

__all__ = [
    "STRIPPED_KEYWORDS",
    "UNION_KEYWORDS",
    "UNION_TARGET_KEYWORD",
    "close_object_schemas",
    "enforce_openai_subset",
    "replace_unions_with_any_of",
    "require_all_properties",
    "strip_constraint_keywords",
]
