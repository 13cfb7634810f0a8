"""JSON loading and dumping helpers."""

from __future__ import annotations

import json

from .nodes import Node
from .types import DraftContent
from .utils import PathLike, ensure_output_directory, get_logger, to_path

__all__ = ["dump_tree", "dumps_tree", "load_draft"]

LOGGER = get_logger("drafttree.serialization")


def load_draft(path: PathLike) -> DraftContent:
    """Read a Draft.js raw content JSON file."""
    source = to_path(path)
    LOGGER.debug("Loading Draft.js content from %s", source)
    with source.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    return DraftContent.from_dict(payload)


def dumps_tree(doc: Node, indent: int | None = 2) -> str:
    return json.dumps(doc.to_dict(), indent=indent, ensure_ascii=False)


def dump_tree(doc: Node, path: PathLike, indent: int | None = 2) -> None:
    destination = to_path(path)
    ensure_output_directory(destination)
    destination.write_text(dumps_tree(doc, indent=indent) + "\n", encoding="utf-8")
    LOGGER.debug("Wrote document tree to %s", destination)