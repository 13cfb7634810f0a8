"""Shared read cursor over the flat block sequence."""

from __future__ import annotations

from typing import Sequence

from .types import Block

__all__ = ["BlockCursor"]


class BlockCursor:
    """Single mutable index into a block sequence.

    Multi-block handlers (lists, tables) move the cursor themselves; the
    converter resumes from wherever they leave it and then steps once more.
    """

    def __init__(self, blocks: Sequence[Block], index: int = 0) -> None:
        self._blocks = blocks
        self._index = index

    def __len__(self) -> int:
        return len(self._blocks)

    def __repr__(self) -> str:
        return f"BlockCursor(index={self._index}, total={len(self._blocks)})"

    @property
    def blocks(self) -> Sequence[Block]:
        return self._blocks

    @property
    def index(self) -> int:
        return self._index

    @index.setter
    def index(self, value: int) -> None:
        self._index = value

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._blocks)

    @property
    def current(self) -> Block | None:
        return self._at(self._index)

    def peek(self) -> Block | None:
        """Return the next block without moving."""
        return self._at(self._index + 1)

    def peek_prev(self) -> Block | None:
        """Return the previous block without moving."""
        return self._at(self._index - 1)

    def advance(self) -> Block | None:
        """Step forward and return the block that was current before the move."""
        block = self.current
        self._index += 1
        return block

    def retreat(self) -> Block | None:
        """Step back and return the block that was current before the move."""
        block = self.current
        self._index -= 1
        return block

    def _at(self, position: int) -> Block | None:
        if 0 <= position < len(self._blocks):
            return self._blocks[position]
        return None
