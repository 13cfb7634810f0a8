"""Draft.js raw content model consumed by the converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Union

from .exceptions import InvalidDraftContentError

__all__ = [
    "Block",
    "DraftContent",
    "Entity",
    "EntityRange",
    "InlineStyleRange",
    "Range",
    "is_draft_content",
    "is_entity_range",
    "is_inline_style_range",
]


@dataclass(frozen=True, slots=True)
class InlineStyleRange:
    """Span of a block's text carrying a named inline style."""

    offset: int
    length: int
    style: str

    def to_dict(self) -> dict[str, Any]:
        return {"offset": self.offset, "length": self.length, "style": self.style}


@dataclass(frozen=True, slots=True)
class EntityRange:
    """Span of a block's text referencing an entity by key."""

    offset: int
    length: int
    key: str

    def to_dict(self) -> dict[str, Any]:
        return {"offset": self.offset, "length": self.length, "key": self.key}


Range = Union[InlineStyleRange, EntityRange]


@dataclass(frozen=True, slots=True)
class Entity:
    """Out-of-line object (link, image, ...) referenced from entity ranges."""

    type: str
    mutability: str = "MUTABLE"
    data: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "mutability": self.mutability, "data": dict(self.data)}


@dataclass(frozen=True, slots=True)
class Block:
    """A single flat Draft.js block."""

    type: str
    text: str = ""
    key: str = ""
    depth: int = 0
    inline_style_ranges: tuple[InlineStyleRange, ...] = ()
    entity_ranges: tuple[EntityRange, ...] = ()
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Block depth must be non-negative, got {self.depth}")

    @property
    def has_ranges(self) -> bool:
        return bool(self.inline_style_ranges or self.entity_ranges)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "type": self.type,
            "text": self.text,
            "depth": self.depth,
            "inlineStyleRanges": [item.to_dict() for item in self.inline_style_ranges],
            "entityRanges": [item.to_dict() for item in self.entity_ranges],
            "data": dict(self.data),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Block":
        return cls(
            key=str(payload.get("key", "")),
            type=str(payload.get("type", "unstyled")),
            text=str(payload.get("text") or ""),
            depth=int(payload.get("depth") or 0),
            inline_style_ranges=tuple(
                InlineStyleRange(
                    offset=int(item["offset"]),
                    length=int(item["length"]),
                    style=str(item["style"]),
                )
                for item in payload.get("inlineStyleRanges") or ()
            ),
            entity_ranges=tuple(
                EntityRange(
                    offset=int(item["offset"]),
                    length=int(item["length"]),
                    key=str(item["key"]),
                )
                for item in payload.get("entityRanges") or ()
            ),
            data=dict(payload.get("data") or {}),
        )


@dataclass(frozen=True, slots=True)
class DraftContent:
    """Draft.js raw content state: ordered blocks plus the entity map."""

    blocks: Sequence[Block] = ()
    entity_map: Mapping[str, Entity] = field(default_factory=dict)

    def entity(self, key: str | int) -> Entity | None:
        return self.entity_map.get(str(key))

    def to_dict(self) -> dict[str, Any]:
        return {
            "blocks": [block.to_dict() for block in self.blocks],
            "entityMap": {key: entity.to_dict() for key, entity in self.entity_map.items()},
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "DraftContent":
        if isinstance(payload, DraftContent):
            return payload
        if not is_draft_content(payload):
            raise InvalidDraftContentError()
        try:
            blocks = tuple(Block.from_dict(item) for item in payload["blocks"])
            entity_map = {
                str(key): Entity(
                    type=str(value["type"]),
                    mutability=str(value.get("mutability", "MUTABLE")),
                    data=dict(value.get("data") or {}),
                )
                for key, value in (payload["entityMap"] or {}).items()
            }
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise InvalidDraftContentError(f"Malformed Draft.js raw content: {exc}") from exc
        return cls(blocks=blocks, entity_map=entity_map)


def is_draft_content(value: object) -> bool:
    """Return ``True`` when ``value`` looks like Draft.js raw content."""

    if isinstance(value, DraftContent):
        return True
    return isinstance(value, Mapping) and "blocks" in value and "entityMap" in value


def is_inline_style_range(value: object) -> bool:
    if isinstance(value, InlineStyleRange):
        return True
    return isinstance(value, Mapping) and "style" in value


def is_entity_range(value: object) -> bool:
    if isinstance(value, EntityRange):
        return True
    return isinstance(value, Mapping) and "key" in value
