"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_MANIFEST_FILENAME,
    build_placeholder_manifest,
    write_placeholder_manifest,
)
from .loader import ConfigurationError, load_manifest
from .runtime_settings import Manifest, OutputSettings, ToolSpec

__all__ = [
    "Manifest",
    "OutputSettings",
    "ToolSpec",
    "ConfigurationError",
    "load_manifest",
    "DEFAULT_MANIFEST_FILENAME",
    "build_placeholder_manifest",
    "write_placeholder_manifest",
]
