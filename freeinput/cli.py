# -*- coding: utf-8 -*-
"""
cli

Entry point for the free-input CLI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .utils.cli import FreeInputCLI, cli

__all__ = ["FreeInputCLI", "cli"]


# The End
