# -*- coding: utf-8 -*-
"""
test_markup_node

Tests for the immutable markup tree and its serializer.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import dataclasses

import pytest
from markupsafe import Markup

from freeinput.core.markup import MarkupNode, tag


class TestTagHelper:
    """Verify attribute and child normalization."""

    def test_class_keyword_and_dropped_values(self) -> None:
        node = tag("div", class_="box", id=None, hidden=False, title="t")

        assert node.attrs == (("class", "box"), ("title", "t"))

    def test_name_attribute_does_not_clash_with_tag_name(self) -> None:
        node = tag("input", id="f", name="f", type="file")

        assert node.tag == "input"
        assert node.attrs == (("id", "f"), ("name", "f"), ("type", "file"))

    def test_true_attribute_uses_its_name(self) -> None:
        assert tag("input", disabled=True).get("disabled") == "disabled"

    def test_children_are_flattened(self) -> None:
        node = tag("ul", [tag("li", "a"), None, (tag("li", "b"), "tail")])

        assert [child.tag for child in node.element_children] == ["li", "li"]
        assert node.children[-1] == "tail"

    def test_numbers_become_text(self) -> None:
        assert tag("span", 3).children == ("3",)

    def test_node_is_frozen(self) -> None:
        node = tag("div")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.tag = "span"  # type: ignore[misc]


class TestInspection:
    """Verify lookup helpers."""

    def test_find_and_iter(self) -> None:
        tree = tag("div", tag("p", tag("em", "x")), tag("em", "y"))

        assert [node.tag for node in tree.iter()] == ["div", "p", "em", "em"]
        assert tree.find("em").children == ("x",)
        assert tree.find("table") is None

    def test_attribute_helpers(self) -> None:
        node = tag("div", id="a", class_="one two")

        assert node.attributes == {"id": "a", "class": "one two"}
        assert node.has_class("two")
        assert not node.has_class("three")
        assert node.get("missing", "fallback") == "fallback"


class TestRendering:
    """Verify HTML serialization."""

    def test_attribute_values_are_escaped(self) -> None:
        html = tag("a", "x", title='say "hi" & <go>').render()

        assert html == '<a title="say &#34;hi&#34; &amp; &lt;go&gt;">x</a>'

    def test_void_elements_have_no_closing_tag(self) -> None:
        assert tag("input", type="file").render() == '<input type="file"/>'

    def test_markup_children_are_not_escaped(self) -> None:
        assert tag("p", Markup("<b>x</b>")).render() == "<p><b>x</b></p>"

    def test_html_protocol(self) -> None:
        node = tag("p", "x")

        assert isinstance(node.__html__(), Markup)
        assert node.__html__() == "<p>x</p>"
        assert str(Markup("{}").format(node)) == "<p>x</p>"

    def test_mixed_children_indented(self) -> None:
        html = tag("div", "intro", tag("p", "body")).render(indent=4)

        assert html == "<div>\n    intro\n    <p>body</p>\n</div>"

    def test_equal_structure_equal_nodes(self) -> None:
        assert MarkupNode("p", (), ("x",)) == tag("p", "x")


# The End
