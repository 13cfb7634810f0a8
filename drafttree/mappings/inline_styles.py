"""Inline style name → mark mapping."""

from __future__ import annotations

from typing import Callable

from ..context import InlineContext, InlineStyleHandler
from ..nodes import Mark, create_mark
from ..registry import HandlerRegistry
from ..types import InlineStyleRange

__all__ = [
    "INLINE_STYLE_PREFIX_RULES",
    "inline_style_registry",
    "inline_style_to_mark_mapping",
    "map_inline_style_to_mark",
]

inline_style_to_mark_mapping: dict[str, Mark] = {
    "BOLD": Mark("bold"),
    "CODE": Mark("code"),
    "KEYBOARD": Mark("code"),
    "ITALIC": Mark("italic"),
    "STRIKETHROUGH": Mark("strike"),
    "UNDERLINE": Mark("underline"),
    "SUBSCRIPT": Mark("subscript"),
    "SUPERSCRIPT": Mark("superscript"),
    "HIGHLIGHT": Mark("highlight"),
}

inline_style_registry: HandlerRegistry[InlineStyleHandler] = HandlerRegistry(
    inline_style_to_mark_mapping, name="inline style"
)

INLINE_STYLE_PREFIX_RULES: tuple[tuple[str, Callable[[str], Mark]], ...] = (
    ("bgcolor-", lambda value: create_mark("highlight", {"color": value})),
    ("fontfamily-", lambda value: create_mark("textStyle", {"fontFamily": value})),
)


def map_inline_style_to_mark(
    style_range: InlineStyleRange,
    context: InlineContext,
    registry: HandlerRegistry[InlineStyleHandler],
) -> Mark | None:
    """Resolve a style range: exact name first, then the prefix rules."""
    style = style_range.style
    handler = registry.get(style)
    if handler is not None:
        if isinstance(handler, Mark):
            return handler.copy()
        return handler(style_range, context)
    for prefix, factory in INLINE_STYLE_PREFIX_RULES:
        if style.startswith(prefix):
            return factory(style[len(prefix) :])
    return None
