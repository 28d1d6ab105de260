"""Facade: free functions that start a fresh builder chain.

    from selector_builder import facade as css

    css.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

from selector_builder.builder import SelectorBuilder, Stringifiable

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    first: Stringifiable, combinator: str, second: Stringifiable
) -> SelectorBuilder:
    """Join two selectors with *combinator* into a new builder."""
    return SelectorBuilder().combine(first, combinator, second)
