from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from drafttree import DraftConverter  # noqa: E402

BlockFactory = Callable[..., dict[str, Any]]
ContentFactory = Callable[..., dict[str, Any]]


@pytest.fixture()
def make_block() -> BlockFactory:
    counter = {"value": 0}

    def _create(
        type: str = "unstyled",
        text: str = "",
        depth: int = 0,
        styles: list[tuple[int, int, str]] | None = None,
        entities: list[tuple[int, int, str | int]] | None = None,
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        counter["value"] += 1
        return {
            "key": f"b{counter['value']}",
            "type": type,
            "text": text,
            "depth": depth,
            "inlineStyleRanges": [
                {"offset": offset, "length": length, "style": style}
                for offset, length, style in styles or []
            ],
            "entityRanges": [
                {"offset": offset, "length": length, "key": key}
                for offset, length, key in entities or []
            ],
            "data": data or {},
        }

    return _create


@pytest.fixture()
def make_content() -> ContentFactory:
    def _create(*blocks: dict[str, Any], entity_map: dict[str, Any] | None = None) -> dict[str, Any]:
        return {"blocks": list(blocks), "entityMap": entity_map or {}}

    return _create


@pytest.fixture()
def converter() -> DraftConverter:
    return DraftConverter()


@pytest.fixture()
def rich_content(make_block: BlockFactory, make_content: ContentFactory) -> dict[str, Any]:
    """A document touching every default handler."""
    return make_content(
        make_block("header-one", "Title"),
        make_block("unstyled", "Hello world", styles=[(0, 5, "BOLD")], entities=[(6, 5, "0")]),
        make_block("unordered-list-item", "one"),
        make_block("unordered-list-item", "nested", depth=1),
        make_block("table-cell", "a", depth=0),
        make_block("table-cell", "b", depth=1),
        make_block("atomic", " ", entities=[(0, 1, "1")]),
        make_block("code-block", "print('hi')"),
        entity_map={
            "0": {"type": "LINK", "mutability": "MUTABLE", "data": {"url": "https://example.com"}},
            "1": {"type": "IMAGE", "mutability": "IMMUTABLE", "data": {"src": "cat.png", "alt": "cat"}},
        },
    )


@pytest.fixture()
def draft_file(tmp_path: Path, rich_content: dict[str, Any]) -> Path:
    path = tmp_path / "content.json"
    path.write_text(json.dumps(rich_content), encoding="utf-8")
    return path
