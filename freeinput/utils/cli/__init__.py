# -*- coding: utf-8 -*-
"""
cli

CLI utilities for the free-input toolkit.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .commands import RenderCommand
from .entrypoint import FreeInputCLI, cli

__all__ = ["FreeInputCLI", "RenderCommand", "cli"]


# The End
