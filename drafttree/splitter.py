"""Split annotated block text into minimal runs with a constant range set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .types import EntityRange, InlineStyleRange, Range

__all__ = ["TextRun", "sort_ranges", "split_runs"]


@dataclass(frozen=True, slots=True)
class TextRun:
    """Contiguous slice of text covered by exactly the same ranges."""

    text: str
    ranges: tuple[Range, ...] = ()
    positions: tuple[int, ...] = ()


def sort_ranges(
    entity_ranges: Iterable[EntityRange],
    inline_style_ranges: Iterable[InlineStyleRange],
) -> list[Range]:
    """Order ranges by start offset, shorter first on a shared start.

    Entity ranges precede style ranges when offset and length tie.
    """
    ranges: list[Range] = [*entity_ranges, *inline_style_ranges]
    return sorted(ranges, key=lambda item: (item.offset, item.length))


def split_runs(text: str, ranges: Sequence[Range]) -> list[TextRun]:
    """Split ``text`` wherever the set of covering ranges changes.

    Ranges are identified by position in ``ranges``, so two identical ranges
    still count twice. The concatenated run texts always equal ``text``.
    """
    size = len(text)
    covering: list[list[int]] = [[] for _ in range(size)]
    for position, item in enumerate(ranges):
        start = max(item.offset, 0)
        end = min(item.offset + item.length, size)
        for index in range(start, end):
            covering[index].append(position)

    runs: list[TextRun] = []
    current: list[int] = []
    current_set: frozenset[int] = frozenset()
    buffer: list[str] = []
    for index, char in enumerate(text):
        active = covering[index]
        active_set = frozenset(active)
        if active_set != current_set:
            if buffer:
                runs.append(_make_run(buffer, ranges, current))
            buffer = []
            current = active
            current_set = active_set
        buffer.append(char)
    if buffer:
        runs.append(_make_run(buffer, ranges, current))
    return runs


def _make_run(buffer: list[str], ranges: Sequence[Range], positions: list[int]) -> TextRun:
    return TextRun("".join(buffer), tuple(ranges[i] for i in positions), tuple(positions))
