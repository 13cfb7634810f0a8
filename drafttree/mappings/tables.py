"""Group consecutive table-cell blocks into a table."""

from __future__ import annotations

from ..context import BlockContext
from ..nodes import Node, add_child, create_node
from .blocks import block_to_node_registry

__all__ = ["TABLE_CELL_TYPE", "build_table"]

TABLE_CELL_TYPE = "table-cell"


@block_to_node_registry.handler(TABLE_CELL_TYPE)
def build_table(context: BlockContext) -> Node:
    """Consume consecutive table cells starting at the cursor.

    Cell depth counts up by one along a row; any other step starts a new row.
    """
    cursor = context.cursor
    table = create_node("table")
    row: Node | None = None
    previous = context.block
    while True:
        current = context.block
        if row is None or previous.depth + 1 != current.depth:
            row = create_node("tableRow")
            add_child(table, row)
        add_child(
            row,
            create_node("tableCell", content=[create_node("paragraph", content=context.split(current))]),
        )
        following = cursor.peek()
        if following is None or following.type != TABLE_CELL_TYPE:
            break
        previous = cursor.advance()
    return table
