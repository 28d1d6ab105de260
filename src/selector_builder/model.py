"""Selector part model: PartKind enum and the ordering rules shared by all builders."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class PartKind(Enum):
    """One of the six fragment categories a compound selector is made of."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position in the required order: element (1) .. pseudo-element (6)."""
        return RANKS[self]

    @property
    def once_only(self) -> bool:
        return self in ONCE_ONLY

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's prefix/suffix, e.g. ``#main`` or ``[href]``."""
        return TEMPLATES[self].format(value=value)


# Parts must appear in non-decreasing rank; equal ranks may repeat.
RANKS: MappingProxyType[PartKind, int] = MappingProxyType(
    {
        PartKind.ELEMENT: 1,
        PartKind.ID: 2,
        PartKind.CLASS: 3,
        PartKind.ATTRIBUTE: 4,
        PartKind.PSEUDO_CLASS: 5,
        PartKind.PSEUDO_ELEMENT: 6,
    }
)

TEMPLATES: MappingProxyType[PartKind, str] = MappingProxyType(
    {
        PartKind.ELEMENT: "{value}",
        PartKind.ID: "#{value}",
        PartKind.CLASS: ".{value}",
        PartKind.ATTRIBUTE: "[{value}]",
        PartKind.PSEUDO_CLASS: ":{value}",
        PartKind.PSEUDO_ELEMENT: "::{value}",
    }
)

ONCE_ONLY: frozenset[PartKind] = frozenset(
    {PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT}
)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
COUNT_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
