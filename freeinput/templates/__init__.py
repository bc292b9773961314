# -*- coding: utf-8 -*-
"""
templates

Template integration for widget markup.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .rendering import TemplateRenderer, register_template_globals, render_fragment

__all__ = ["TemplateRenderer", "register_template_globals", "render_fragment"]


# The End
