"""Selector builder error types."""

from __future__ import annotations

from selector_builder.model import COUNT_MESSAGE, ORDER_MESSAGE, PartKind


class SelectorError(Exception):
    """Base error for selector parts that violate the composition rules."""

    def __init__(self, message: str, kind: PartKind | None = None) -> None:
        self.kind = kind
        super().__init__(message)


class OrderError(SelectorError):
    """Raised when a part is appended after a part of higher rank."""

    def __init__(self, kind: PartKind, previous_rank: int) -> None:
        self.previous_rank = previous_rank
        super().__init__(ORDER_MESSAGE, kind=kind)


class CountError(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(COUNT_MESSAGE, kind=kind)
