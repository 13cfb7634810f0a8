"""Draft.js raw content → nested tree document conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from .context import (
    BlockContext,
    BlockHandler,
    BlockOutcome,
    EntityMarkHandler,
    EntityNodeHandler,
    InlineContext,
    InlineStyleHandler,
)
from .cursor import BlockCursor
from .diagnostics import ConversionResult, Unmatched
from .mappings import (
    block_to_node_registry,
    entity_to_mark_registry,
    entity_to_node_registry,
    inline_style_registry,
    map_entity_to_mark,
    map_inline_style_to_mark,
)
from .mappings import map_block_to_node as dispatch_block
from .mappings import map_entity_to_node as resolve_entity_node
from .nodes import Mark, Node, TextNode, add_child, add_mark, create_document
from .registry import HandlerRegistry, resolve_registry
from .splitter import sort_ranges, split_runs
from .types import DraftContent, Entity, EntityRange, InlineStyleRange, Range
from .utils import get_logger, time_block

__all__ = ["ConverterOptions", "DraftConverter", "convert_draft_to_tree"]

LOGGER = get_logger("drafttree.converter")

Override = Union[HandlerRegistry[Any], Mapping[str, Any], None]


@dataclass(slots=True)
class ConverterOptions:
    """Options controlling how Draft.js content is converted.

    Each handler option is either a :class:`HandlerRegistry` that replaces the
    defaults wholesale, or a mapping whose entries override defaults per key.
    """

    block_handlers: Override = None
    inline_style_handlers: Override = None
    entity_mark_handlers: Override = None
    entity_node_handlers: Override = None
    contain_handler_errors: bool = True


class DraftConverter:
    """Convert Draft.js raw content into a ProseMirror-style document tree.

    Registries are fixed at construction; all per-call state lives in the
    contexts created by :meth:`convert`, so one instance can be shared.
    """

    def __init__(
        self,
        options: ConverterOptions | None = None,
        *,
        block_handlers: Override = None,
        inline_style_handlers: Override = None,
        entity_mark_handlers: Override = None,
        entity_node_handlers: Override = None,
        contain_handler_errors: bool | None = None,
    ) -> None:
        self.options = options or ConverterOptions()
        self.contain_handler_errors = (
            contain_handler_errors if contain_handler_errors is not None else self.options.contain_handler_errors
        )
        self.block_handlers: HandlerRegistry[BlockHandler] = resolve_registry(
            block_to_node_registry,
            block_handlers if block_handlers is not None else self.options.block_handlers,
        )
        self.inline_style_handlers: HandlerRegistry[InlineStyleHandler] = resolve_registry(
            inline_style_registry,
            inline_style_handlers if inline_style_handlers is not None else self.options.inline_style_handlers,
        )
        self.entity_mark_handlers: HandlerRegistry[EntityMarkHandler] = resolve_registry(
            entity_to_mark_registry,
            entity_mark_handlers if entity_mark_handlers is not None else self.options.entity_mark_handlers,
        )
        self.entity_node_handlers: HandlerRegistry[EntityNodeHandler] = resolve_registry(
            entity_to_node_registry,
            entity_node_handlers if entity_node_handlers is not None else self.options.entity_node_handlers,
        )

    def convert(self, content: DraftContent | Mapping[str, Any]) -> ConversionResult:
        draft = DraftContent.from_dict(content)
        doc = create_document()
        unmatched = Unmatched()
        cursor = BlockCursor(draft.blocks)
        context = BlockContext(
            converter=self,
            cursor=cursor,
            entity_map=draft.entity_map,
            doc=doc,
            unmatched=unmatched,
        )

        with time_block(LOGGER, "Draft.js to tree conversion"):
            while not cursor.exhausted:
                mapped = self.map_block_to_node(context)
                if isinstance(mapped, (Node, TextNode)):
                    add_child(doc, mapped)
                cursor.advance()

        result = ConversionResult(doc=doc, unmatched=unmatched, block_count=len(draft.blocks))
        LOGGER.info("%s", result)
        return result

    def map_block_to_node(self, context: BlockContext) -> BlockOutcome:
        """Run the handler for the current block, recording it when unmatched.

        A failing handler is logged and its block treated as unmatched. The
        cursor, the document and the diagnostics are rolled back to where they
        were before the handler ran, so blocks it had consumed are mapped again.
        """
        start = context.cursor.index
        block = context.block
        attached = len(context.doc.children)
        checkpoint = context.unmatched.checkpoint()
        LOGGER.debug("Mapping block %d (%s)", start, block.type)
        try:
            mapped = dispatch_block(context, self.block_handlers)
        except Exception:
            if not self.contain_handler_errors:
                raise
            LOGGER.exception("Block handler for %r failed at index %d", block.type, start)
            context.cursor.index = start
            del context.doc.children[attached:]
            context.unmatched.rollback(checkpoint)
            mapped = None
        if mapped is None:
            LOGGER.debug("Unmatched block %d (%s)", start, block.type)
            context.unmatched.add_block(block)
        return mapped

    def map_range_to_mark(self, item: Range, context: InlineContext) -> Mark | None:
        if isinstance(item, InlineStyleRange):
            return self._map_inline_style(item, context)
        entity = self._lookup_entity(item, context)
        if entity is None:
            return None
        try:
            mark = map_entity_to_mark(entity, context, self.entity_mark_handlers)
        except Exception:
            if not self.contain_handler_errors:
                raise
            LOGGER.exception("Entity mark handler for %r failed", entity.type)
            mark = None
        if mark is None:
            LOGGER.debug("Unmatched entity %r (%s) as mark", item.key, entity.type)
            context.unmatched.add_entity(item.key, entity)
        return mark

    def map_entity_to_node(self, item: EntityRange, context: InlineContext) -> Node | None:
        entity = self._lookup_entity(item, context)
        if entity is None:
            return None
        try:
            node = resolve_entity_node(entity, context, self.entity_node_handlers)
        except Exception:
            if not self.contain_handler_errors:
                raise
            LOGGER.exception("Entity node handler for %r failed", entity.type)
            node = None
        if node is None:
            LOGGER.debug("Unmatched entity %r (%s) as node", item.key, entity.type)
            context.unmatched.add_entity(item.key, entity)
        return node

    def split_text_by_entity_ranges_and_inline_style_ranges(self, context: InlineContext) -> list[TextNode]:
        """Split the block text into text nodes carrying the overlapping marks.

        Every range is resolved once per block; each run gets its own copies
        of the marks of the ranges covering it.
        """
        block = context.block
        ranges = sort_ranges(block.entity_ranges, block.inline_style_ranges)
        marks = [self.map_range_to_mark(item, context) for item in ranges]
        nodes: list[TextNode] = []
        for run in split_runs(block.text, ranges):
            node = TextNode(run.text)
            for position in run.positions:
                mark = marks[position]
                add_mark(node, mark.copy() if mark is not None else None)
            nodes.append(node)
        return nodes

    def _map_inline_style(self, item: InlineStyleRange, context: InlineContext) -> Mark | None:
        try:
            mark = map_inline_style_to_mark(item, context, self.inline_style_handlers)
        except Exception:
            if not self.contain_handler_errors:
                raise
            LOGGER.exception("Inline style handler for %r failed", item.style)
            mark = None
        if mark is None:
            LOGGER.debug("Unmatched inline style %r in block %r", item.style, context.block.key)
            context.unmatched.add_inline_style(item)
        return mark

    @staticmethod
    def _lookup_entity(item: EntityRange, context: InlineContext) -> Entity | None:
        entity = context.entity_map.get(item.key)
        if entity is None:
            LOGGER.warning("Entity %r referenced by block %r is missing from the entity map", item.key, context.block.key)
            context.unmatched.add_entity(item.key, None)
        return entity


def convert_draft_to_tree(
    content: DraftContent | Mapping[str, Any],
    options: ConverterOptions | None = None,
    **overrides: Override,
) -> ConversionResult:
    """Convenience wrapper around :class:`DraftConverter`."""

    converter = DraftConverter(options, **overrides)
    return converter.convert(content)
