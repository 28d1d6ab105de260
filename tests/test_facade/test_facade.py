"""Tests for the facade entry points."""

import pytest

import selector_builder
from selector_builder import facade as css
from selector_builder.builder import SelectorBuilder
from selector_builder.errors import CountError, OrderError


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestEntryPoints:
    @pytest.mark.parametrize(
        "entry, expected",
        [
            (css.element, "div"),
            (css.id, "#div"),
            (css.class_, ".div"),
            (css.attr, "[div]"),
            (css.pseudo_class, ":div"),
            (css.pseudo_element, "::div"),
        ],
    )
    def test_each_entry_starts_a_builder(self, entry, expected):
        b = entry("div")
        assert isinstance(b, SelectorBuilder)
        assert b.stringify() == expected

    def test_each_call_returns_a_fresh_builder(self):
        first = css.id("a")
        second = css.id("b")
        assert first is not second
        assert first.stringify() == "#a"
        assert second.stringify() == "#b"

    def test_package_reexports_facade(self):
        assert selector_builder.element is css.element
        assert selector_builder.combine is css.combine


# ---------------------------------------------------------------------------
# Chains
# ---------------------------------------------------------------------------


class TestChains:
    def test_element_id_class_attr(self):
        assert css.element("a").id("main").class_("x").attr("href").stringify() == "a#main.x[href]"

    def test_id_with_classes(self):
        assert (
            css.id("main").class_("container").class_("editable").stringify()
            == "#main.container.editable"
        )

    def test_classes_only(self):
        assert css.class_("a").class_("b").class_("c").stringify() == ".a.b.c"

    def test_id_twice_fails(self):
        with pytest.raises(CountError):
            css.id("a").id("b")

    def test_element_after_class_fails(self):
        with pytest.raises(OrderError):
            css.class_("x").element("div")

    def test_pseudo_element_then_pseudo_element_fails(self):
        with pytest.raises(CountError):
            css.pseudo_element("after").pseudo_element("before")


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_sibling(self):
        result = css.combine(css.element("div").id("main"), "+", css.element("span"))
        assert result.stringify() == "div#main + span"

    def test_child(self):
        result = css.combine(css.element("ul"), ">", css.element("li").pseudo_class("last-child"))
        assert result.stringify() == "ul > li:last-child"

    def test_nested(self):
        result = css.combine(
            css.element("div").id("main").class_("container").class_("draggable"),
            "+",
            css.combine(
                css.element("table").id("data"),
                "~",
                css.combine(
                    css.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    css.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert result.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_left_nested(self):
        result = css.combine(
            css.combine(css.element("a"), ">", css.element("b")),
            "~",
            css.element("c"),
        )
        assert result.stringify() == "a > b ~ c"

    def test_stringify_twice(self):
        result = css.combine(css.element("a"), "+", css.element("b"))
        assert result.stringify() == result.stringify()
