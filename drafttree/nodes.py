"""Tree document primitives (ProseMirror-style nodes and marks)."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Union

from .exceptions import TreeBuilderError

__all__ = [
    "LIST_NODE_TYPES",
    "Mark",
    "Node",
    "TextNode",
    "TreeNode",
    "add_child",
    "add_child_to_list",
    "add_mark",
    "create_document",
    "create_mark",
    "create_node",
    "create_text",
    "is_document",
    "is_list_node",
    "is_node",
    "is_text",
    "node_from_dict",
]

LIST_NODE_TYPES = frozenset({"bulletList", "orderedList", "taskList"})


@dataclass(slots=True)
class Mark:
    """Inline annotation attached to a text node."""

    type: str
    attrs: dict[str, Any] | None = None

    def copy(self) -> "Mark":
        return Mark(self.type, deepcopy(self.attrs))

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": self.type}
        if self.attrs is not None:
            payload["attrs"] = dict(self.attrs)
        return payload


@dataclass(slots=True)
class TextNode:
    """Leaf node holding literal text; never has children."""

    text: str
    marks: list[Mark] | None = None

    @property
    def type(self) -> str:
        return "text"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": "text", "text": self.text}
        if self.marks is not None:
            payload["marks"] = [mark.to_dict() for mark in self.marks]
        return payload


@dataclass(slots=True)
class Node:
    """Container node of the output tree."""

    type: str
    attrs: dict[str, Any] | None = None
    content: list["TreeNode"] | None = None
    marks: list[Mark] | None = None

    @property
    def children(self) -> list["TreeNode"]:
        return self.content if self.content is not None else []

    def last_child(self) -> "TreeNode | None":
        if not self.content:
            return None
        return self.content[-1]

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": self.type}
        if self.attrs is not None:
            payload["attrs"] = dict(self.attrs)
        if self.content is not None:
            payload["content"] = [child.to_dict() for child in self.content]
        if self.marks is not None:
            payload["marks"] = [mark.to_dict() for mark in self.marks]
        return payload


TreeNode = Union[Node, TextNode]


def create_node(
    type: str,
    attrs: Mapping[str, Any] | None = None,
    content: Iterable[TreeNode | None] | None = None,
    marks: Iterable[Mark | None] | None = None,
) -> Node:
    node = Node(type, dict(attrs) if attrs is not None else None)
    if content is not None:
        add_child(node, list(content))
    if marks is not None:
        add_mark(node, list(marks))
    return node


def create_mark(type: str, attrs: Mapping[str, Any] | None = None) -> Mark:
    return Mark(type, dict(attrs) if attrs is not None else None)


def create_text(text: str, marks: Iterable[Mark] | None = None) -> TextNode | None:
    """Create a text node, or ``None`` for empty text."""
    if not text:
        return None
    return TextNode(text, list(marks) if marks is not None else None)


def create_document() -> Node:
    return Node("doc", content=[])


def add_child(
    node: Node | None,
    child: TreeNode | Iterable[TreeNode | None] | None,
) -> Node:
    """Append ``child`` (a node, a list of nodes, or ``None``) to ``node``.

    Returns the parent. ``None`` entries are skipped.
    """
    if node is None:
        if child is None:
            raise TreeBuilderError("Cannot add a null child to a null parent.")
        raise TreeBuilderError("Cannot add a child to a null parent.")
    if child is None:
        return node
    if isinstance(node, TextNode):
        raise TreeBuilderError("Text nodes cannot hold children.")
    if node.content is None:
        node.content = []
    if isinstance(child, (Node, TextNode)):
        node.content.append(child)
    else:
        node.content.extend(item for item in child if item is not None)
    return node


def add_mark(
    node: TreeNode | None,
    mark: Mark | Iterable[Mark | None] | None,
) -> TreeNode:
    """Append ``mark`` (a mark, a list of marks, or ``None``) to ``node``."""
    if node is None:
        if mark is None:
            raise TreeBuilderError("Cannot add a null mark to a null node.")
        raise TreeBuilderError("Cannot add a mark to a null node.")
    if mark is None:
        return node
    if node.marks is None:
        node.marks = []
    if isinstance(mark, Mark):
        node.marks.append(mark)
    else:
        node.marks.extend(item for item in mark if item is not None)
    return node


def add_child_to_list(parent: Node, child: Node, append: bool = True) -> None:
    """Add ``child`` to a list node while keeping list structure intact.

    Nested lists are attached to the last existing item when ``append`` is
    true; other content is wrapped in a new ``listItem``.
    """
    if not is_list_node(parent):
        add_child(parent, child)
        return
    if child.type in ("listItem", "taskItem"):
        add_child(parent, child)
        return
    if is_list_node(child) and append:
        last_item = parent.last_child()
        if isinstance(last_item, Node):
            add_child(last_item, child)
            return
    if child.type == "paragraph" and not child.content:
        return
    add_child(parent, add_child(create_node("listItem"), child))


def is_document(value: object) -> bool:
    if isinstance(value, Node):
        return value.type == "doc"
    return isinstance(value, Mapping) and value.get("type") == "doc"


def is_text(value: object) -> bool:
    if isinstance(value, TextNode):
        return True
    return isinstance(value, Mapping) and value.get("type") == "text"


def is_node(value: object) -> bool:
    """Return ``True`` for non-text tree nodes."""
    if isinstance(value, Node):
        return True
    return isinstance(value, Mapping) and "type" in value and value.get("type") != "text"


def is_list_node(value: object) -> bool:
    if isinstance(value, Node):
        return value.type in LIST_NODE_TYPES
    return isinstance(value, Mapping) and value.get("type") in LIST_NODE_TYPES


def node_from_dict(payload: Mapping[str, Any]) -> TreeNode:
    marks = payload.get("marks")
    parsed_marks = (
        [Mark(item["type"], dict(item["attrs"]) if item.get("attrs") is not None else None) for item in marks]
        if marks is not None
        else None
    )
    if payload.get("type") == "text":
        return TextNode(str(payload.get("text", "")), parsed_marks)
    attrs = payload.get("attrs")
    content = payload.get("content")
    return Node(
        str(payload["type"]),
        dict(attrs) if attrs is not None else None,
        [node_from_dict(item) for item in content] if content is not None else None,
        parsed_marks,
    )
