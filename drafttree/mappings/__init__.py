"""Default mapping registries; importing this package registers every handler."""

from __future__ import annotations

from .blocks import HEADING_LEVELS, block_to_node_registry, map_block_to_node
from .entities import (
    entity_to_mark_registry,
    entity_to_node_registry,
    map_entity_to_mark,
    map_entity_to_node,
)
from .inline_styles import (
    INLINE_STYLE_PREFIX_RULES,
    inline_style_registry,
    inline_style_to_mark_mapping,
    map_inline_style_to_mark,
)
from .lists import LIST_KINDS, ListKind, build_list
from .tables import TABLE_CELL_TYPE, build_table

__all__ = [
    "HEADING_LEVELS",
    "INLINE_STYLE_PREFIX_RULES",
    "LIST_KINDS",
    "ListKind",
    "TABLE_CELL_TYPE",
    "block_to_node_registry",
    "build_list",
    "build_table",
    "entity_to_mark_registry",
    "entity_to_node_registry",
    "inline_style_registry",
    "inline_style_to_mark_mapping",
    "map_block_to_node",
    "map_entity_to_mark",
    "map_entity_to_node",
    "map_inline_style_to_mark",
]
