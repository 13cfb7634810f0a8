"""Rebuild nested list trees from flat, depth-annotated list blocks.

Draft.js stores list items as a flat sequence where only ``depth`` hints at
nesting. A run of same-kind items is consumed in one pass: each item is placed
by walking down from the working root along "last item → its nested list",
and the finished top-level list is attached once at the end of the run. A
change of list kind always starts a new top-level list.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..context import BlockContext
from ..nodes import Node, add_child, create_node, is_list_node
from ..types import Block
from .blocks import block_to_node_registry

__all__ = ["LIST_KINDS", "ListKind", "build_list", "list_kind_for"]


@dataclass(frozen=True, slots=True)
class ListKind:
    """Node names used for one Draft.js list block type."""

    list_type: str
    item_type: str

    @property
    def checkable(self) -> bool:
        return self.item_type == "taskItem"


LIST_KINDS: dict[str, ListKind] = {
    "unordered-list-item": ListKind("bulletList", "listItem"),
    "ordered-list-item": ListKind("orderedList", "listItem"),
    "checkable-list-item": ListKind("taskList", "taskItem"),
}


def list_kind_for(block_type: str) -> ListKind:
    return LIST_KINDS.get(block_type, LIST_KINDS["ordered-list-item"])


@block_to_node_registry.handler(*LIST_KINDS)
def build_list(context: BlockContext) -> Node:
    """Consume the run of same-kind list blocks starting at the cursor."""
    cursor = context.cursor
    block_type = context.block.type
    kind = list_kind_for(block_type)
    root = create_node(kind.list_type)
    while True:
        _insert_item(root, _create_item(context, context.block, kind), context.block.depth, kind)
        following = cursor.peek()
        if following is None or following.type != block_type:
            break
        cursor.advance()
    return root


def _create_item(context: BlockContext, block: Block, kind: ListKind) -> Node:
    attrs = {"checked": bool(block.data.get("checked"))} if kind.checkable else None
    return create_node(
        kind.item_type,
        attrs,
        [create_node("paragraph", content=context.split(block))],
    )


def _insert_item(root: Node, item: Node, depth: int, kind: ListKind) -> None:
    container = root
    level = 0
    while level < depth:
        last_item = container.last_child()
        if not isinstance(last_item, Node):
            break
        nested = last_item.last_child()
        if not is_list_node(nested):
            # Depth jumped past what has been built; open one level only.
            nested = create_node(kind.list_type)
            add_child(last_item, nested)
            container = nested
            break
        container = nested
        level += 1
    add_child(container, item)
