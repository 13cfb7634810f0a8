from __future__ import annotations

import pytest

from drafttree import HandlerRegistrationError, HandlerRegistry
from drafttree.registry import resolve_registry


def test_decorator_registers_under_every_key() -> None:
    registry: HandlerRegistry[object] = HandlerRegistry(name="block")

    @registry.handler("a", "b")
    def handler() -> str:
        return "ok"

    assert registry.get("a") is handler
    assert registry.get("b") is handler
    assert list(registry.names()) == ["a", "b"]
    assert "a" in registry and len(registry) == 2


def test_duplicate_registration_is_rejected_unless_replacing() -> None:
    registry = HandlerRegistry({"x": 1}, name="block")

    with pytest.raises(HandlerRegistrationError, match="Block 'x' is already registered"):
        registry.register("x", 2)

    registry.register("x", 3, replace=True)
    assert registry.get("x") == 3


def test_merged_overrides_per_key_without_touching_defaults() -> None:
    defaults = HandlerRegistry({"x": 1, "y": 2})

    merged = defaults.merged({"y": 20, "z": 30})

    assert merged.as_dict() == {"x": 1, "y": 20, "z": 30}
    assert defaults.as_dict() == {"x": 1, "y": 2}


def test_resolve_registry_policies() -> None:
    defaults = HandlerRegistry({"x": 1, "y": 2})
    replacement = HandlerRegistry({"z": 3})

    kept = resolve_registry(defaults, None)
    assert kept is not defaults and kept.as_dict() == defaults.as_dict()
    assert resolve_registry(defaults, replacement) is replacement
    assert resolve_registry(defaults, {"x": 10}).as_dict() == {"x": 10, "y": 2}
