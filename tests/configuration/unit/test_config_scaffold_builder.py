"""Manifest scaffold tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from openai_function_schema.configuration import (
    DEFAULT_MANIFEST_FILENAME,
    build_placeholder_manifest,
    write_placeholder_manifest,
)


def test_placeholder_manifest_is_valid_yaml_with_required_markers() -> None:
    scaffold = build_placeholder_manifest()
    parsed = yaml.safe_load(scaffold)

    assert parsed["output"] == {"indent": 2, "ensure_ascii": False}
    assert parsed["tools"][0]["name"] == "<REQUIRED>"
    assert parsed["tools"][0]["type"] == "<REQUIRED>"
    assert "schema_path" in scaffold


def test_write_placeholder_manifest_refuses_to_overwrite(tmp_path: Path) -> None:
    destination = tmp_path / DEFAULT_MANIFEST_FILENAME

    written = write_placeholder_manifest(destination)

    assert written == destination.resolve()
    assert destination.read_text(encoding="utf-8") == build_placeholder_manifest()
    with pytest.raises(FileExistsError):
        write_placeholder_manifest(destination)
