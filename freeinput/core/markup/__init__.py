# -*- coding: utf-8 -*-
"""
markup

Markup tree primitives.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .node import MarkupNode, VOID_ELEMENTS, tag

__all__ = ["MarkupNode", "VOID_ELEMENTS", "tag"]


# The End
