"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class OutputSettings:
    """JSON rendering options for written schemas and tool definitions."""

    indent: int = 2
    ensure_ascii: bool = False


@dataclass(frozen=True)
class ToolSpec:
    """One function tool declared in the manifest.

    Exactly one of ``type_reference`` and ``schema_path`` is set.
    """

    name: str
    description: str | None
    type_reference: str | None
    schema_path: Path | None


@dataclass(frozen=True)
class Manifest:
    """Top-level manifest aggregate."""

    path: Path
    output: OutputSettings
    tools: tuple[ToolSpec, ...]
