# -*- coding: utf-8 -*-
"""
__init__

Utilities for working with form input widgets.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# widgets/__init__.py
from __future__ import annotations

from .base import BaseWidget
from .registry import WidgetRegistry, registry

# Import built-in widgets so they register themselves:
from .file import FileInputWidget, file_input  # noqa: F401

__all__ = ["BaseWidget", "FileInputWidget", "WidgetRegistry", "file_input", "registry"]

# The End
