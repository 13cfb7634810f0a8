"""Non-fatal conversion diagnostics and the per-call result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .nodes import Node
from .types import Block, Entity, InlineStyleRange

__all__ = ["ConversionResult", "Unmatched"]


@dataclass(slots=True)
class Unmatched:
    """Blocks, entities and inline styles the registries could not resolve."""

    blocks: list[Block] = field(default_factory=list)
    entities: dict[str, Entity | None] = field(default_factory=dict)
    inline_styles: list[InlineStyleRange] = field(default_factory=list)

    def add_block(self, block: Block) -> None:
        self.blocks.append(block)

    def add_entity(self, key: str, entity: Entity | None) -> None:
        self.entities[key] = entity

    def add_inline_style(self, style_range: InlineStyleRange) -> None:
        self.inline_styles.append(style_range)

    def checkpoint(self) -> tuple[int, int, dict[str, Entity | None]]:
        return len(self.blocks), len(self.inline_styles), dict(self.entities)

    def rollback(self, checkpoint: tuple[int, int, dict[str, Entity | None]]) -> None:
        """Drop everything recorded since ``checkpoint`` was taken."""
        block_count, style_count, entities = checkpoint
        del self.blocks[block_count:]
        del self.inline_styles[style_count:]
        self.entities.clear()
        self.entities.update(entities)

    @property
    def empty(self) -> bool:
        return not (self.blocks or self.entities or self.inline_styles)

    def counts(self) -> dict[str, int]:
        return {
            "blocks": len(self.blocks),
            "entities": len(self.entities),
            "inlineStyles": len(self.inline_styles),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "blocks": [block.to_dict() for block in self.blocks],
            "entities": {
                key: entity.to_dict() if entity is not None else None
                for key, entity in self.entities.items()
            },
            "inlineStyles": [item.to_dict() for item in self.inline_styles],
        }


@dataclass(slots=True)
class ConversionResult:
    """Document tree produced by one conversion plus its diagnostics."""

    doc: Node
    unmatched: Unmatched = field(default_factory=Unmatched)
    block_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"doc": self.doc.to_dict(), "unmatched": self.unmatched.to_dict()}

    def __str__(self) -> str:
        counts = self.unmatched.counts()
        return (
            "ConversionResult(blocks={blocks}, nodes={nodes}, unmatched_blocks={ub}, "
            "unmatched_entities={ue}, unmatched_styles={us})"
        ).format(
            blocks=self.block_count,
            nodes=len(self.doc.children),
            ub=counts["blocks"],
            ue=counts["entities"],
            us=counts["inlineStyles"],
        )
