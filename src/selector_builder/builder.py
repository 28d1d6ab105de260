"""Fluent CSS selector builder.

Example:
    SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
    renders as ``a[href$=".png"]:focus``.

Parts must follow the order element, id, class, attribute, pseudo-class,
pseudo-element.  Element, id and pseudo-element may appear at most once.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from selector_builder.errors import CountError, OrderError
from selector_builder.model import PartKind

__all__ = ["SelectorBuilder", "Stringifiable"]

logger = logging.getLogger(__name__)


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that renders itself as a selector string."""

    def stringify(self) -> str: ...


class SelectorBuilder:
    """Mutable builder for one compound (or combined) selector.

    Every part method validates before it mutates, so a rejected call leaves
    the builder exactly as it was.  Methods return ``self`` for chaining.
    """

    def __init__(self) -> None:
        self._text = ""
        self._used_once: set[PartKind] = set()
        self._last_rank = 0

    @property
    def last_rank(self) -> int:
        return self._last_rank

    @property
    def used_once(self) -> frozenset[PartKind]:
        return frozenset(self._used_once)

    # --- parts ---------------------------------------------------------------

    def append(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Append a *kind* part rendered from *value*.

        Raises :class:`OrderError` if *kind* ranks below the last part and
        :class:`CountError` if a once-only kind is repeated.
        """
        if kind.rank < self._last_rank:
            logger.debug(
                "Rejected %s after rank %d: out of order", kind.value, self._last_rank
            )
            raise OrderError(kind, self._last_rank)
        if kind.once_only and kind in self._used_once:
            logger.debug("Rejected %s: already present", kind.value)
            raise CountError(kind)

        self._text += kind.render(value)
        if kind.once_only:
            self._used_once.add(kind)
        self._last_rank = kind.rank
        logger.debug("Appended %s %r -> %r", kind.value, value, self._text)
        return self

    def element(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.PSEUDO_ELEMENT, value)

    # --- combination ---------------------------------------------------------

    def combine(
        self, first: Stringifiable, combinator: str, second: Stringifiable
    ) -> SelectorBuilder:
        """Replace this builder's selector with ``first combinator second``.

        The combinator is used verbatim.  Any parts appended earlier are
        discarded and the ordering state starts over.
        """
        self._text = f"{first.stringify()} {combinator} {second.stringify()}"
        self._used_once.clear()
        self._last_rank = 0
        logger.debug("Combined with %r -> %r", combinator, self._text)
        return self

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"
