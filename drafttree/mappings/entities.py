"""Entity type → mark / node mappings."""

from __future__ import annotations

from copy import deepcopy

from ..context import EntityMarkHandler, EntityNodeHandler, InlineContext
from ..nodes import Mark, Node, create_mark, create_node
from ..registry import HandlerRegistry
from ..types import Entity

__all__ = [
    "entity_to_mark_registry",
    "entity_to_node_registry",
    "map_entity_to_mark",
    "map_entity_to_node",
]

entity_to_mark_registry: HandlerRegistry[EntityMarkHandler] = HandlerRegistry(name="entity mark")
entity_to_node_registry: HandlerRegistry[EntityNodeHandler] = HandlerRegistry(name="entity node")


@entity_to_mark_registry.handler("LINK")
def _link(entity: Entity, context: InlineContext) -> Mark:
    return create_mark(
        "link",
        {"href": entity.data.get("url"), "target": entity.data.get("target")},
    )


@entity_to_node_registry.handler("HORIZONTAL_RULE")
def _horizontal_rule(entity: Entity, context: InlineContext) -> Node:
    return create_node("horizontalRule")


@entity_to_node_registry.handler("IMAGE")
def _image(entity: Entity, context: InlineContext) -> Node:
    return create_node(
        "image",
        {"src": entity.data.get("src"), "alt": entity.data.get("alt")},
    )


def map_entity_to_mark(
    entity: Entity,
    context: InlineContext,
    registry: HandlerRegistry[EntityMarkHandler],
) -> Mark | None:
    handler = registry.get(entity.type)
    if handler is None:
        return None
    if isinstance(handler, Mark):
        return handler.copy()
    return handler(entity, context)


def map_entity_to_node(
    entity: Entity,
    context: InlineContext,
    registry: HandlerRegistry[EntityNodeHandler],
) -> Node | None:
    handler = registry.get(entity.type)
    if handler is None:
        return None
    if isinstance(handler, Node):
        return deepcopy(handler)
    return handler(entity, context)
