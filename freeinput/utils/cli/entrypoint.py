# -*- coding: utf-8 -*-
"""
cli

Click entry point for the free-input toolkit.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import click

from .commands import RenderCommand


class FreeInputCLI:
    """Aggregate all CLI commands exposed by the package."""

    def __init__(self) -> None:
        """Create command instances required to build the CLI group."""
        self._render_command = RenderCommand()

    def create_cli(self) -> click.Group:
        """Build the Click group with all registered commands."""
        group = click.Group(
            name="freeinput",
            help="Command line tools for free-input widgets.",
        )
        group.add_command(self._render_command.to_click_command())
        return group


cli = FreeInputCLI().create_cli()


# The End
