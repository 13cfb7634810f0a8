"""Keyed handler registries backing the converter's override points."""

from __future__ import annotations

from typing import Callable, Dict, Generic, Iterable, Mapping, TypeVar, Union

from .exceptions import HandlerRegistrationError

__all__ = ["HandlerRegistry", "resolve_registry"]

H = TypeVar("H")


class HandlerRegistry(Generic[H]):
    """Registry mapping a type tag or style name to its handler."""

    def __init__(self, handlers: Mapping[str, H] | None = None, *, name: str = "handler") -> None:
        self.name = name
        self._handlers: Dict[str, H] = dict(handlers or {})

    def register(self, key: str, handler: H, *, replace: bool = False) -> None:
        if key in self._handlers and not replace:
            raise HandlerRegistrationError(f"{self.name.capitalize()} '{key}' is already registered")
        self._handlers[key] = handler

    def handler(self, *keys: str) -> Callable[[H], H]:
        """Decorator registering the wrapped callable under every key."""

        def decorator(func: H) -> H:
            for key in keys:
                self.register(key, func)
            return func

        return decorator

    def get(self, key: str) -> H | None:
        return self._handlers.get(key)

    def names(self) -> Iterable[str]:
        return sorted(self._handlers.keys())

    def as_dict(self) -> Dict[str, H]:
        return dict(self._handlers)

    def copy(self) -> "HandlerRegistry[H]":
        return HandlerRegistry(self._handlers, name=self.name)

    def merged(self, overrides: Mapping[str, H]) -> "HandlerRegistry[H]":
        """Return a copy where ``overrides`` take precedence over existing keys."""
        registry = self.copy()
        for key, handler in overrides.items():
            registry.register(key, handler, replace=True)
        return registry

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"HandlerRegistry(name={self.name!r}, keys={list(self.names())!r})"


def resolve_registry(
    defaults: HandlerRegistry[H],
    override: Union[HandlerRegistry[H], Mapping[str, H], None],
) -> HandlerRegistry[H]:
    """Pick the registry a converter should use for one override point.

    A :class:`HandlerRegistry` replaces the defaults wholesale, a plain mapping
    is merged over them per key, and ``None`` keeps the defaults.
    """
    if override is None:
        return defaults.copy()
    if isinstance(override, HandlerRegistry):
        return override
    return defaults.merged(override)
