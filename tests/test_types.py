from __future__ import annotations

from typing import Any

import pytest

from drafttree import (
    Block,
    DraftContent,
    EntityRange,
    InlineStyleRange,
    InvalidDraftContentError,
    is_draft_content,
    is_entity_range,
    is_inline_style_range,
)


def test_from_dict_parses_blocks_and_entities(make_block: Any, make_content: Any) -> None:
    payload = make_content(
        make_block("header-two", "Hi", styles=[(0, 2, "BOLD")], entities=[(0, 2, 7)]),
        entity_map={7: {"type": "LINK", "data": {"url": "u"}}},
    )

    content = DraftContent.from_dict(payload)

    block = content.blocks[0]
    assert block.type == "header-two"
    assert block.inline_style_ranges == (InlineStyleRange(0, 2, "BOLD"),)
    assert block.entity_ranges == (EntityRange(0, 2, "7"),)
    entity = content.entity(7)
    assert entity is not None and entity.type == "LINK"
    assert entity.mutability == "MUTABLE"


def test_from_dict_applies_block_defaults() -> None:
    content = DraftContent.from_dict({"blocks": [{"key": "k"}], "entityMap": {}})

    block = content.blocks[0]
    assert (block.type, block.text, block.depth) == ("unstyled", "", 0)
    assert not block.has_ranges


def test_from_dict_returns_existing_content() -> None:
    content = DraftContent(blocks=(Block("unstyled"),))
    assert DraftContent.from_dict(content) is content


@pytest.mark.parametrize("payload", [None, [], {"blocks": []}, {"entityMap": {}}])
def test_from_dict_rejects_non_draft_input(payload: Any) -> None:
    with pytest.raises(InvalidDraftContentError):
        DraftContent.from_dict(payload)


def test_from_dict_rejects_malformed_ranges() -> None:
    payload = {
        "blocks": [{"type": "unstyled", "text": "x", "inlineStyleRanges": [{"offset": 0}]}],
        "entityMap": {},
    }
    with pytest.raises(InvalidDraftContentError, match="Malformed"):
        DraftContent.from_dict(payload)


def test_negative_depth_is_rejected() -> None:
    with pytest.raises(ValueError):
        Block("unordered-list-item", depth=-1)


def test_to_dict_uses_draft_keys(make_block: Any, make_content: Any) -> None:
    payload = make_content(make_block("unstyled", "x", styles=[(0, 1, "ITALIC")]))

    dumped = DraftContent.from_dict(payload).to_dict()

    assert dumped["blocks"][0]["inlineStyleRanges"] == [{"offset": 0, "length": 1, "style": "ITALIC"}]
    assert dumped["entityMap"] == {}


def test_predicates() -> None:
    assert is_draft_content({"blocks": [], "entityMap": {}})
    assert not is_draft_content({"blocks": []})
    assert is_inline_style_range({"offset": 0, "length": 1, "style": "BOLD"})
    assert is_inline_style_range(InlineStyleRange(0, 1, "BOLD"))
    assert is_entity_range({"offset": 0, "length": 1, "key": 0})
    assert not is_entity_range(InlineStyleRange(0, 1, "BOLD"))
