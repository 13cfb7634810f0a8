"""Block type → node mapping and the default single-block handlers."""

from __future__ import annotations

from ..context import ATTACHED, BlockContext, BlockHandler, BlockOutcome
from ..nodes import Node, add_child, create_node, create_text
from ..registry import HandlerRegistry

__all__ = [
    "HEADING_LEVELS",
    "block_to_node_registry",
    "map_block_to_node",
]

HEADING_LEVELS: dict[str, int] = {
    "header-one": 1,
    "header-two": 2,
    "header-three": 3,
    "header-four": 4,
    "header-five": 5,
    "header-six": 6,
}

block_to_node_registry: HandlerRegistry[BlockHandler] = HandlerRegistry(name="block")


@block_to_node_registry.handler("unstyled", "section", "article")
def map_to_paragraph_node(context: BlockContext) -> Node:
    block = context.block
    paragraph = create_node("paragraph")
    if not block.has_ranges:
        # Plain text, fast path
        return add_child(paragraph, create_text(block.text))
    return add_child(paragraph, context.split())


@block_to_node_registry.handler(*HEADING_LEVELS)
def map_to_heading_node(context: BlockContext) -> Node:
    level = HEADING_LEVELS.get(context.block.type, 1)
    return create_node("heading", {"level": level}, context.split())


@block_to_node_registry.handler("blockquote")
def map_to_blockquote_node(context: BlockContext) -> Node:
    return create_node("blockquote", content=[create_node("paragraph", content=context.split())])


@block_to_node_registry.handler("code-block")
def map_to_code_block_node(context: BlockContext) -> Node:
    return add_child(create_node("codeBlock"), create_text(context.block.text))


@block_to_node_registry.handler("atomic")
def map_atomic_block(context: BlockContext) -> BlockOutcome:
    """Atomic blocks carry entities that become standalone nodes.

    Without ranges the text is kept as a paragraph. Several resolved entities
    are attached to the document directly, in range order. Style ranges have
    no text to mark once the block is emitted, so they are reported unmatched.
    """
    block = context.block
    if not block.has_ranges:
        return add_child(create_node("paragraph"), create_text(block.text))

    inline = context.inline()
    nodes = [
        node
        for node in (context.converter.map_entity_to_node(item, inline) for item in block.entity_ranges)
        if node is not None
    ]
    if not nodes:
        return None
    for style_range in block.inline_style_ranges:
        context.unmatched.add_inline_style(style_range)
    if len(nodes) == 1:
        return nodes[0]
    add_child(context.doc, nodes)
    return ATTACHED


def map_block_to_node(context: BlockContext, registry: HandlerRegistry[BlockHandler]) -> BlockOutcome:
    """Dispatch the current block to its registered handler."""
    handler = registry.get(context.block.type)
    if handler is None:
        return None
    return handler(context)
