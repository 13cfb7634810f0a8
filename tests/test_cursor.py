from __future__ import annotations

from drafttree import Block, BlockCursor


def _blocks(count: int) -> list[Block]:
    return [Block("unstyled", text=str(index)) for index in range(count)]


def test_advance_returns_previous_current() -> None:
    cursor = BlockCursor(_blocks(3))

    first = cursor.advance()

    assert first is not None and first.text == "0"
    assert cursor.index == 1
    assert cursor.current is not None and cursor.current.text == "1"


def test_peek_and_peek_prev_do_not_move() -> None:
    cursor = BlockCursor(_blocks(3), index=1)

    assert cursor.peek().text == "2"  # type: ignore[union-attr]
    assert cursor.peek_prev().text == "0"  # type: ignore[union-attr]
    assert cursor.index == 1


def test_out_of_range_reads_return_none() -> None:
    cursor = BlockCursor(_blocks(1))

    assert cursor.peek_prev() is None
    assert cursor.peek() is None
    cursor.advance()
    assert cursor.exhausted
    assert cursor.current is None
    assert cursor.advance() is None


def test_retreat_steps_back() -> None:
    cursor = BlockCursor(_blocks(2), index=1)

    previous = cursor.retreat()

    assert previous is not None and previous.text == "1"
    assert cursor.index == 0
    assert len(cursor) == 2
