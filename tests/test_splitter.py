from __future__ import annotations

from drafttree.splitter import sort_ranges, split_runs
from drafttree.types import EntityRange, InlineStyleRange


def test_split_without_ranges_yields_single_run() -> None:
    runs = split_runs("plain", [])

    assert [run.text for run in runs] == ["plain"]
    assert runs[0].ranges == ()


def test_split_empty_text_yields_nothing() -> None:
    assert split_runs("", [InlineStyleRange(0, 3, "BOLD")]) == []


def test_split_overlapping_ranges() -> None:
    bold = InlineStyleRange(0, 4, "BOLD")
    italic = InlineStyleRange(2, 4, "ITALIC")

    runs = split_runs("abcdefg", [bold, italic])

    assert [run.text for run in runs] == ["ab", "cd", "ef", "g"]
    assert [run.ranges for run in runs] == [(bold,), (bold, italic), (italic,), ()]


def test_split_concatenation_equals_text() -> None:
    text = "The quick brown fox"
    ranges = [
        InlineStyleRange(4, 5, "BOLD"),
        InlineStyleRange(0, 19, "ITALIC"),
        EntityRange(10, 5, "0"),
    ]

    runs = split_runs(text, ranges)

    assert "".join(run.text for run in runs) == text
    for left, right in zip(runs, runs[1:]):
        assert set(left.positions) != set(right.positions)


def test_identical_ranges_are_tracked_by_position() -> None:
    first = InlineStyleRange(0, 2, "BOLD")
    second = InlineStyleRange(0, 2, "BOLD")

    runs = split_runs("hi!", [first, second])

    assert runs[0].positions == (0, 1)
    assert len(runs[0].ranges) == 2
    assert runs[1].text == "!"


def test_out_of_bounds_ranges_are_clipped() -> None:
    runs = split_runs("abc", [InlineStyleRange(1, 10, "BOLD")])

    assert [run.text for run in runs] == ["a", "bc"]


def test_offsets_count_code_points_outside_bmp() -> None:
    emoji = InlineStyleRange(1, 1, "BOLD")

    runs = split_runs("a😀b", [emoji])

    assert [run.text for run in runs] == ["a", "😀", "b"]
    assert [run.ranges for run in runs] == [(), (emoji,), ()]


def test_sort_ranges_orders_by_offset_then_length_entities_first() -> None:
    style = InlineStyleRange(0, 3, "BOLD")
    short = InlineStyleRange(0, 1, "ITALIC")
    entity = EntityRange(0, 3, "0")
    later = EntityRange(2, 1, "1")

    ordered = sort_ranges([later, entity], [style, short])

    assert ordered == [short, entity, style, later]
