"""
drafttree - convert Draft.js raw content into ProseMirror-style document trees.

Quick Start:
    >>> from drafttree import DraftConverter
    >>> result = DraftConverter().convert(raw_content)
    >>> result.doc.to_dict()
    >>> result.unmatched.blocks

Extension points (per key with a mapping, wholesale with a HandlerRegistry):
    - block_handlers: Draft block type -> node handler
    - inline_style_handlers: inline style name -> mark
    - entity_mark_handlers: entity type -> mark
    - entity_node_handlers: entity type -> node

For CLI usage, use the 'drafttree' command after installation.
"""

from drafttree.context import ATTACHED, BlockContext, InlineContext
from drafttree.converter import ConverterOptions, DraftConverter, convert_draft_to_tree
from drafttree.cursor import BlockCursor
from drafttree.diagnostics import ConversionResult, Unmatched
from drafttree.exceptions import (
    DraftTreeError,
    HandlerRegistrationError,
    InvalidDraftContentError,
    TreeBuilderError,
)
from drafttree.mappings import (
    block_to_node_registry,
    entity_to_mark_registry,
    entity_to_node_registry,
    inline_style_registry,
)
from drafttree.nodes import (
    Mark,
    Node,
    TextNode,
    add_child,
    add_child_to_list,
    add_mark,
    create_document,
    create_mark,
    create_node,
    create_text,
    is_document,
    is_list_node,
    is_node,
    is_text,
    node_from_dict,
)
from drafttree.registry import HandlerRegistry
from drafttree.serialization import dump_tree, load_draft
from drafttree.splitter import split_runs
from drafttree.types import (
    Block,
    DraftContent,
    Entity,
    EntityRange,
    InlineStyleRange,
    is_draft_content,
    is_entity_range,
    is_inline_style_range,
)

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Conversion
    "DraftConverter",
    "ConverterOptions",
    "ConversionResult",
    "Unmatched",
    "convert_draft_to_tree",
    # Handler plumbing
    "ATTACHED",
    "BlockContext",
    "BlockCursor",
    "HandlerRegistry",
    "InlineContext",
    "block_to_node_registry",
    "entity_to_mark_registry",
    "entity_to_node_registry",
    "inline_style_registry",
    # Source model
    "Block",
    "DraftContent",
    "Entity",
    "EntityRange",
    "InlineStyleRange",
    "is_draft_content",
    "is_entity_range",
    "is_inline_style_range",
    # Tree model
    "Mark",
    "Node",
    "TextNode",
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
    "split_runs",
    # Serialization
    "dump_tree",
    "load_draft",
    # Exceptions
    "DraftTreeError",
    "HandlerRegistrationError",
    "InvalidDraftContentError",
    "TreeBuilderError",
    # Version info
    "__version__",
]
