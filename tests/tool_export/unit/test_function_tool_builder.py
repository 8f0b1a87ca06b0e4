"""Function tool export tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from openai_function_schema.configuration.runtime_settings import (
    Manifest,
    OutputSettings,
    ToolSpec,
)
from openai_function_schema.schema_generation import (
    Schema,
    SchemaSerializationError,
    TypeReferenceError,
)
from openai_function_schema.tool_export import (
    ToolDefinitionError,
    build_function_tool,
    build_manifest_tools,
    render_tool_definitions,
    write_tool_definitions,
)

_SEARCH_SCHEMA = {
    "type": "object",
    "properties": {
        "query": {"type": "string", "minLength": 1},
        "limit": {"type": "integer", "maximum": 50},
    },
    "required": ["query"],
}


def _write_schema(tmp_path: Path) -> Path:
    path = tmp_path / "search.json"
    path.write_text(json.dumps(_SEARCH_SCHEMA), encoding="utf-8")
    return path


def test_function_tool_as_dict_matches_api_shape() -> None:
    tool = build_function_tool(
        "search", Schema.from_value(_SEARCH_SCHEMA), description="Search the catalogue"
    )

    assert tool.as_dict() == {
        "type": "function",
        "function": {
            "name": "search",
            "description": "Search the catalogue",
            "parameters": {
                "type": "object",
                "properties": {"query": {"type": "string"}, "limit": {"type": "integer"}},
                "required": ["query", "limit"],
                "additionalProperties": False,
            },
            "strict": True,
        },
    }


def test_function_tool_without_description_omits_the_key() -> None:
    tool = build_function_tool("ping", Schema.from_value({"type": "object"}), strict=False)

    function = tool.as_dict()["function"]

    assert "description" not in function
    assert function["strict"] is False


@pytest.mark.parametrize("name", ["", "has space", "dots.not.allowed", "x" * 65])
def test_invalid_tool_names_are_rejected(name: str) -> None:
    with pytest.raises(ToolDefinitionError):
        build_function_tool(name, Schema.from_value({"type": "object"}))


def test_build_manifest_tools_loads_schema_files_and_type_references(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "export_sample_models.py").write_text(
        "from pydantic import BaseModel\n\n\n"
        "class Ping(BaseModel):\n"
        "    target: str\n",
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    manifest = Manifest(
        path=tmp_path / "function-tools.yaml",
        output=OutputSettings(),
        tools=(
            ToolSpec(
                name="search",
                description="Search",
                type_reference=None,
                schema_path=_write_schema(tmp_path),
            ),
            ToolSpec(
                name="ping",
                description=None,
                type_reference="export_sample_models:Ping",
                schema_path=None,
            ),
        ),
    )

    tools = build_manifest_tools(manifest)

    assert [tool.name for tool in tools] == ["search", "ping"]
    assert tools[0].parameters.value["required"] == ["query", "limit"]
    assert tools[1].parameters.value["properties"] == {
        "target": {"title": "Target", "type": "string"}
    }
    assert tools[1].parameters.value["additionalProperties"] is False


def test_build_manifest_tools_propagates_type_reference_errors(tmp_path: Path) -> None:
    manifest = Manifest(
        path=tmp_path / "function-tools.yaml",
        output=OutputSettings(),
        tools=(
            ToolSpec(
                name="broken",
                description=None,
                type_reference="no_such_module_for_tests:Model",
                schema_path=None,
            ),
        ),
    )

    with pytest.raises(TypeReferenceError):
        build_manifest_tools(manifest)


def test_render_and_write_use_output_settings(tmp_path: Path) -> None:
    tools = [build_function_tool("search", Schema.from_value({"type": "string"}))]

    rendered = render_tool_definitions(tools, OutputSettings(indent=0, ensure_ascii=True))
    written = write_tool_definitions(tools, tmp_path / "tools.json", OutputSettings())

    assert rendered.startswith("[\n{\n")
    assert written == (tmp_path / "tools.json").resolve()
    assert json.loads(written.read_text(encoding="utf-8"))[0]["function"]["name"] == "search"


def test_build_manifest_tools_reports_undecodable_schema_files(tmp_path: Path) -> None:
    schema_path = tmp_path / "broken.json"
    schema_path.write_bytes(b'{"description": "\xff"}')
    manifest = Manifest(
        path=tmp_path / "function-tools.yaml",
        output=OutputSettings(),
        tools=(
            ToolSpec(name="broken", description=None, type_reference=None, schema_path=schema_path),
        ),
    )

    with pytest.raises(SchemaSerializationError, match="Invalid JSON schema text"):
        build_manifest_tools(manifest)
