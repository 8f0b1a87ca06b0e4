"""Manifest scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_MANIFEST_FILENAME = "function-tools.yaml"

_MANIFEST_SCAFFOLD_TEMPLATE = """# Function tool manifest for openai-function-schema.
# Replace every <REQUIRED> placeholder before running export-tools.
# Replace <OPTIONAL> placeholders only when your setup needs them.

output:
  # Indentation of the written JSON; 0 keeps newlines without indentation.
  indent: 2
  ensure_ascii: false

tools:
  # Each tool sets exactly one schema source: a type reference or a schema file.
  - name: "<REQUIRED>"
    description: "<OPTIONAL>"
    # Importable type, for example "myapp.models:CreateUser".
    type: "<REQUIRED>"
  # - name: "<OPTIONAL>"
  #   description: "<OPTIONAL>"
  #   # JSON Schema file, relative to this manifest.
  #   schema_path: "<OPTIONAL>"
"""


def build_placeholder_manifest() -> str:
    """Build a YAML manifest template with placeholders and inline guidance."""
    return _MANIFEST_SCAFFOLD_TEMPLATE


def write_placeholder_manifest(output_path: Path | str) -> Path:
    """Write the placeholder manifest to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Manifest file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_manifest(), encoding="utf-8")
    return destination.resolve()
