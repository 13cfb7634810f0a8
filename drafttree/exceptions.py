"""
Custom exceptions for drafttree.

Conversion itself never raises for bad data; unresolved blocks, entities and
styles are reported through :class:`drafttree.diagnostics.Unmatched`. The
exceptions below signal caller mistakes.
"""


class DraftTreeError(Exception):
    """Base exception for all drafttree errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown drafttree error occurred."


class TreeBuilderError(DraftTreeError):
    """Raised when a child or mark is attached to a missing parent."""

    @property
    def default_message(self) -> str:
        return "Cannot attach to a missing parent node."


class InvalidDraftContentError(DraftTreeError):
    """Raised when the input is not Draft.js raw content."""

    @property
    def default_message(self) -> str:
        return "Input is not Draft.js raw content (expected 'blocks' and 'entityMap')."


class HandlerRegistrationError(DraftTreeError):
    """Raised when a handler key is registered twice."""

    @property
    def default_message(self) -> str:
        return "Handler is already registered."
