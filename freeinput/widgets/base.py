# -*- coding: utf-8 -*-
"""
base

Base widget class.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict
from abc import ABC, abstractmethod

from ..core.configuration import current_settings
from ..core.markup import MarkupNode


class BaseWidget(ABC):
    """
    Base Widget Class

    Widgets render markup fragments for a single input control and convert
    the value the client publishes for it.
    """
    key: str = "base"
    assets_css: tuple[str, ...] = ()
    assets_js: tuple[str, ...] = ()

    class Meta:
        css: tuple[str, ...] = ()
        js: tuple[str, ...] = ()

    def __init__(self, input_id: str, **config: Any) -> None:
        self.input_id = input_id
        self.config: dict[str, Any] = config

    def get_assets(self) -> Dict[str, list[str]]:
        """
        Return widget assets:
        {
            "css": [...],
            "js": [...],
        }
        Priority: class attributes + Meta; preserve order, remove duplicates.
        Relative paths are prefixed with the configured static segment.
        """

        css: list[str] = []
        js: list[str] = []

        # class-level
        css.extend(getattr(self, "assets_css", ()))
        js.extend(getattr(self, "assets_js", ()))

        # Meta-level
        meta = getattr(self, "Meta", None)
        if meta:
            css.extend(getattr(meta, "css", ()))
            js.extend(getattr(meta, "js", ()))

        static = current_settings().static_url_segment

        def _resolve(path: str) -> str:
            if "://" in path or path.startswith("/"):
                return path
            return f"{static}/{path}"

        # dedup while preserving order
        def _uniq(seq):
            seen = set()
            for x in seq:
                x = _resolve(x)
                if x not in seen:
                    seen.add(x)
                    yield x

        return {"css": list(_uniq(css)), "js": list(_uniq(js))}

    def get_title(self) -> str:
        label = self.config.get("label")
        if label:
            return str(label)
        name = self.input_id.replace("_", " ")
        return name[:1].upper() + name[1:]

    # === Markup Generation ===
    @abstractmethod
    def render(self) -> MarkupNode:
        """Markup fragment for the control."""
        raise NotImplementedError

    # === Value Converters ===
    def to_python(self, value: Any) -> Any:
        return value

# The End
