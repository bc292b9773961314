# -*- coding: utf-8 -*-
"""
node

Immutable markup tree used to describe HTML fragments before serialization.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com

A ``MarkupNode`` holds a tag name, an ordered tuple of ``(name, value)``
attribute pairs and an ordered tuple of children. Children are either nested
nodes or text; text is escaped on output unless it is a ``markupsafe.Markup``
instance. Nodes expose ``__html__`` so Jinja2 templates insert them verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Union

from markupsafe import Markup, escape

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)

Child = Union["MarkupNode", str]


@dataclass(frozen=True)
class MarkupNode:
    """One HTML element with ordered attributes and children."""

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    children: tuple[Child, ...] = ()

    # === Inspection ===
    @property
    def attributes(self) -> dict[str, str]:
        """Return attributes as an insertion-ordered dictionary."""
        return dict(self.attrs)

    def get(self, name: str, default: str | None = None) -> str | None:
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    def has_attr(self, name: str) -> bool:
        return any(key == name for key, _ in self.attrs)

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple((self.get("class") or "").split())

    def has_class(self, token: str) -> bool:
        return token in self.classes

    @property
    def element_children(self) -> tuple["MarkupNode", ...]:
        return tuple(child for child in self.children if isinstance(child, MarkupNode))

    def iter(self) -> Iterator["MarkupNode"]:
        """Yield this node and every descendant node in document order."""
        yield self
        for child in self.element_children:
            yield from child.iter()

    def find(self, tag: str) -> "MarkupNode | None":
        """Return the first descendant (or self) with the given tag name."""
        for node in self.iter():
            if node.tag == tag:
                return node
        return None

    # === Serialization ===
    def render(self, indent: int | None = None) -> str:
        """Serialize the tree to HTML, optionally pretty-printed."""
        if indent is None:
            return "".join(self._render_compact())
        return "\n".join(self._render_lines(" " * indent, 0))

    def __html__(self) -> Markup:
        return Markup(self.render())

    def __str__(self) -> str:
        return self.render()

    def _open_tag(self) -> str:
        parts = [self.tag]
        for name, value in self.attrs:
            parts.append(f'{name}="{escape(value)}"')
        if self.tag in VOID_ELEMENTS:
            return "<" + " ".join(parts) + "/>"
        return "<" + " ".join(parts) + ">"

    def _render_compact(self) -> Iterator[str]:
        yield self._open_tag()
        if self.tag in VOID_ELEMENTS:
            return
        for child in self.children:
            if isinstance(child, MarkupNode):
                yield from child._render_compact()
            else:
                yield str(escape(child))
        yield f"</{self.tag}>"

    def _render_lines(self, unit: str, depth: int) -> Iterator[str]:
        pad = unit * depth
        if self.tag in VOID_ELEMENTS:
            yield pad + self._open_tag()
            return
        if not self.element_children:
            yield pad + "".join(self._render_compact())
            return
        yield pad + self._open_tag()
        for child in self.children:
            if isinstance(child, MarkupNode):
                yield from child._render_lines(unit, depth + 1)
            else:
                yield unit * (depth + 1) + str(escape(child))
        yield pad + f"</{self.tag}>"


def _flatten(children: Iterable[Any]) -> Iterator[Child]:
    for child in children:
        if child is None or child is False:
            continue
        if isinstance(child, (list, tuple)):
            yield from _flatten(child)
        elif isinstance(child, MarkupNode):
            yield child
        elif isinstance(child, Markup) or hasattr(child, "__html__"):
            yield Markup(child)
        else:
            yield str(child)


def _normalize_attrs(attrs: Mapping[str, Any]) -> Iterator[tuple[str, str]]:
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        key = name[:-1] if name.endswith("_") else name
        if value is True:
            yield key, key
        else:
            yield key, str(value)


def tag(tag_name: str, /, *children: Any, **attrs: Any) -> MarkupNode:
    """Build a ``MarkupNode``.

    ``class_`` maps to ``class``; ``None`` and ``False`` values are dropped and
    ``True`` renders as ``name="name"``. ``None`` children are skipped and
    nested sequences are flattened.
    """

    return MarkupNode(
        tag=tag_name,
        attrs=tuple(_normalize_attrs(attrs)),
        children=tuple(_flatten(children)),
    )


__all__ = ["Child", "MarkupNode", "VOID_ELEMENTS", "tag"]


# The End
