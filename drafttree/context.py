"""Per-call contexts handed to mapping handlers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Mapping, Union

from .cursor import BlockCursor
from .diagnostics import Unmatched
from .nodes import Mark, Node, TextNode
from .types import Block, Entity, InlineStyleRange

if TYPE_CHECKING:
    from .converter import DraftConverter

__all__ = [
    "ATTACHED",
    "Attached",
    "BlockContext",
    "BlockHandler",
    "BlockOutcome",
    "EntityMarkHandler",
    "EntityNodeHandler",
    "InlineContext",
    "InlineStyleHandler",
]


class Attached(enum.Enum):
    """Sentinel type returned by handlers that attached their output themselves."""

    TOKEN = "attached"

    def __repr__(self) -> str:
        return "ATTACHED"


ATTACHED = Attached.TOKEN


@dataclass(slots=True)
class InlineContext:
    """State available while resolving ranges of a single block."""

    converter: "DraftConverter"
    block: Block
    entity_map: Mapping[str, Entity]
    doc: Node
    unmatched: Unmatched


@dataclass(slots=True)
class BlockContext:
    """State available to block handlers during one conversion."""

    converter: "DraftConverter"
    cursor: BlockCursor
    entity_map: Mapping[str, Entity]
    doc: Node
    unmatched: Unmatched

    @property
    def block(self) -> Block:
        block = self.cursor.current
        if block is None:
            raise IndexError(f"Cursor index {self.cursor.index} is outside the block sequence")
        return block

    def inline(self, block: Block | None = None) -> InlineContext:
        return InlineContext(
            converter=self.converter,
            block=block if block is not None else self.block,
            entity_map=self.entity_map,
            doc=self.doc,
            unmatched=self.unmatched,
        )

    def split(self, block: Block | None = None) -> list[TextNode]:
        """Split ``block`` (default: the current block) into marked text nodes."""
        return self.converter.split_text_by_entity_ranges_and_inline_style_ranges(self.inline(block))


BlockOutcome = Union[Node, TextNode, Attached, None]
BlockHandler = Callable[[BlockContext], BlockOutcome]
InlineStyleHandler = Union[Mark, Callable[[InlineStyleRange, InlineContext], Union[Mark, None]]]
EntityMarkHandler = Union[Mark, Callable[[Entity, InlineContext], Union[Mark, None]]]
EntityNodeHandler = Union[Node, Callable[[Entity, InlineContext], Union[Node, None]]]
