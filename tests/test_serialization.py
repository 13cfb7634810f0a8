from __future__ import annotations

import json
from pathlib import Path

import pytest

from drafttree import DraftConverter, InvalidDraftContentError, dump_tree, load_draft
from drafttree.serialization import dumps_tree


def test_load_draft_reads_json_file(draft_file: Path) -> None:
    content = load_draft(draft_file)

    assert len(content.blocks) == 8
    assert set(content.entity_map) == {"0", "1"}


def test_load_draft_rejects_non_draft_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"hello": "world"}), encoding="utf-8")

    with pytest.raises(InvalidDraftContentError):
        load_draft(path)


def test_dump_tree_creates_parent_directories(draft_file: Path, tmp_path: Path) -> None:
    result = DraftConverter().convert(load_draft(draft_file))
    target = tmp_path / "nested" / "out" / "doc.json"

    dump_tree(result.doc, target)

    assert json.loads(target.read_text(encoding="utf-8")) == result.doc.to_dict()


def test_dumps_tree_keeps_unicode() -> None:
    result = DraftConverter().convert(
        {"blocks": [{"type": "unstyled", "text": "héllo ✓"}], "entityMap": {}}
    )

    dumped = dumps_tree(result.doc, indent=None)

    assert "héllo ✓" in dumped
    assert "\n" not in dumped
