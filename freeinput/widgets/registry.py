# -*- coding: utf-8 -*-
"""
registry

Widget registry.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Type

from ..core.exceptions import WidgetNotFound
from .base import BaseWidget

logger = logging.getLogger(__name__)


class WidgetRegistry:
    def __init__(self) -> None:
        self._by_key: Dict[str, Type[BaseWidget]] = {}

    def register(self, key: str):
        """Decorator to register a widget by key."""
        def _decorator(cls: Type[BaseWidget]) -> Type[BaseWidget]:
            previous = self._by_key.get(key)
            if previous is not None and previous is not cls:
                logger.warning(
                    "Widget key '%s' re-registered: %s replaces %s",
                    key,
                    cls.__name__,
                    previous.__name__,
                )
            cls.key = key
            self._by_key[key] = cls
            return cls
        return _decorator

    def get(self, key: str) -> Type[BaseWidget] | None:
        return self._by_key.get(key)

    def keys(self) -> list[str]:
        return list(self._by_key)

    def create(self, key: str, input_id: str, **config: Any) -> BaseWidget:
        """Instantiate the widget registered under ``key``."""
        cls = self.get(key)
        if cls is None:
            raise WidgetNotFound(f"Widget '{key}' is not registered")
        return cls(input_id, **config)

registry = WidgetRegistry()

# The End
