"""Pytest configuration and fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from typedoc_lookup.config import Settings
from typedoc_lookup.engine import DocsEngine
from typedoc_lookup.models import SymbolNode

DOCS_URL = "https://docs.example"
PROJECT_REPO = "https://github.com/example/hindenburg"
DEPENDENCY_REPO = "https://github.com/example/skeldjs"

VENDORED_WORKER = "node_modules/@skeldjs/core/dist/lib/Worker.d.ts"

# Generated line 3: column 0 has no original, column 4 maps to original
# line 10 column 2. Generated line 5 column 0 maps to original line 11 column 2.
WORKER_SOURCE_MAP = {
    "version": 3,
    "file": "Worker.d.ts",
    "sourceRoot": "",
    "sources": ["../../src/lib/Worker.ts"],
    "names": [],
    "mappings": ";;A,IASE;;AACA",
}


def _signature(node_id: int, name: str, **fields: Any) -> dict[str, Any]:
    return {"id": node_id, "name": name, "kindString": "Call signature", **fields}


def _intrinsic(name: str) -> dict[str, Any]:
    return {"type": "intrinsic", "name": name}


API_MODEL: dict[str, Any] = {
    "id": 0,
    "name": "hindenburg",
    "kind": 1,
    "kindString": "Project",
    "children": [
        {
            "id": 1,
            "name": "Foo",
            "kindString": "Class",
            "sources": [{"fileName": "src/Foo.ts", "line": 5, "character": 13}],
            "children": [
                {
                    "id": 2,
                    "name": "bar",
                    "kindString": "Method",
                    "sources": [{"fileName": "src/Foo.ts", "line": 12, "character": 4}],
                    "signatures": [
                        _signature(
                            3,
                            "bar",
                            parameters=[
                                {
                                    "id": 4,
                                    "name": "value",
                                    "kindString": "Parameter",
                                    "type": _intrinsic("string"),
                                    "comment": {"text": "The value to bar.\n"},
                                }
                            ],
                            type=_intrinsic("void"),
                            comment={"shortText": "Bars a value.", "returns": "Nothing.\n"},
                        )
                    ],
                },
                {
                    "id": 5,
                    "name": "qux",
                    "kindString": "Method",
                    "flags": {"isStatic": True},
                    "signatures": [
                        _signature(6, "qux", type=_intrinsic("number")),
                        _signature(
                            7,
                            "qux",
                            parameters=[
                                {
                                    "id": 8,
                                    "name": "n",
                                    "kindString": "Parameter",
                                    "flags": {"isOptional": True},
                                    "type": _intrinsic("number"),
                                }
                            ],
                            type=_intrinsic("number"),
                        ),
                        _signature(9, "qux", type=_intrinsic("string")),
                    ],
                },
                {
                    "id": 10,
                    "name": "dispose",
                    "kindString": "Method",
                    "inheritedFrom": {"type": "reference", "name": "Base.dispose", "id": 21},
                    "signatures": [_signature(11, "dispose", type=_intrinsic("void"))],
                },
                {
                    "id": 12,
                    "name": "size",
                    "kindString": "Property",
                    "type": _intrinsic("number"),
                },
            ],
        },
        {
            "id": 20,
            "name": "Base",
            "kindString": "Class",
            "children": [
                {
                    "id": 21,
                    "name": "dispose",
                    "kindString": "Method",
                    "signatures": [_signature(22, "dispose", type=_intrinsic("void"))],
                }
            ],
        },
        {
            "id": 30,
            "name": "Worker",
            "kindString": "Class",
            "typeParameter": [
                {"id": 31, "name": "T", "kindString": "Type parameter", "type": {"type": "reference", "name": "Base", "id": 20}}
            ],
            "extendedTypes": [{"type": "reference", "name": "Base", "id": 20}],
            "sources": [
                {"fileName": VENDORED_WORKER, "line": 3, "character": 4},
                {"fileName": "src/Worker.ts", "line": 40, "character": 0},
            ],
            "comment": {
                "shortText": "A worker, see {@link Foo.bar | the bar method}.",
                "text": "Workers run\nin the background.\n\nThey never stop.",
                "tags": [{"tag": "example", "text": "\nconst worker = new Worker();\n"}],
            },
        },
        {
            "id": 40,
            "name": "Color",
            "kindString": "Enumeration",
            "children": [
                {"id": 41, "name": "Red", "kindString": "Enumeration member", "defaultValue": "0"},
                {"id": 42, "name": "Green", "kindString": "Enumeration member", "defaultValue": "1"},
            ],
        },
        {
            "id": 50,
            "name": "PacketId",
            "kindString": "Type alias",
            "type": {
                "type": "union",
                "types": [
                    {"type": "literal", "value": "hello"},
                    {"type": "literal", "value": 4},
                ],
            },
        },
        {
            "id": 60,
            "name": "createWorker",
            "kindString": "Function",
            "signatures": [
                _signature(
                    61,
                    "createWorker",
                    typeParameter=[{"id": 62, "name": "K", "kindString": "Type parameter"}],
                    parameters=[
                        {
                            "id": 63,
                            "name": "base",
                            "kindString": "Parameter",
                            "type": {"type": "reference", "name": "Base", "id": 20},
                        }
                    ],
                    type={"type": "reference", "name": "Worker", "id": 30},
                )
            ],
        },
        {
            "id": 70,
            "name": "VERSION",
            "kindString": "Variable",
            "flags": {"isConst": True},
            "type": {"type": "literal", "value": "1.0.0"},
        },
    ],
}


@pytest.fixture
def api_model() -> SymbolNode:
    """The fixture API model, validated."""
    return SymbolNode.model_validate(API_MODEL)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a temp API model and vendored tree."""
    docs_path = tmp_path / "docs" / "out.json"
    docs_path.parent.mkdir(parents=True)
    docs_path.write_text(json.dumps(API_MODEL))

    return Settings(
        docs_path=docs_path,
        docs_base_url=DOCS_URL,
        project_repo_url=PROJECT_REPO,
        project_package="@skeldjs/hindenburg",
        dependency_repo_url=DEPENDENCY_REPO,
        vendored_prefix="node_modules/@skeldjs/",
        vendored_root=tmp_path / "node_modules" / "@skeldjs",
    )


@pytest.fixture
def vendored_source_map(test_settings: Settings) -> Path:
    """Write the companion source map of the vendored Worker declaration file."""
    map_path = test_settings.vendored_root / "core" / "dist" / "lib" / "Worker.d.ts.map"
    map_path.parent.mkdir(parents=True)
    map_path.write_text(json.dumps(WORKER_SOURCE_MAP))
    return map_path


@pytest.fixture
def engine(test_settings: Settings) -> DocsEngine:
    """Engine loaded from the fixture API model on disk."""
    return DocsEngine.load(test_settings)
