# -*- coding: utf-8 -*-
"""
commands

Click command factories for the free-input CLI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Optional, Sequence

import click

from ...core.configuration import current_settings
from ...core.exceptions import CssUnitError, InvalidInputIdError
from ...widgets import file_input


class RenderCommand:
    """Produce the `render` command printing a file input fragment."""

    def execute(
        self,
        input_id: str,
        label: Optional[str],
        multiple: bool,
        accept: Sequence[str],
        width: Optional[str],
        indent: Optional[int],
    ) -> None:
        """Build the control and echo its HTML."""
        try:
            node = file_input(
                input_id,
                label=label,
                multiple=multiple,
                accept=list(accept),
                width=width,
            )
        except (CssUnitError, InvalidInputIdError) as error:
            raise click.BadParameter(str(error)) from error
        if indent is None:
            indent = current_settings().render_indent
        click.echo(node.render(indent=indent))

    def to_click_command(self) -> click.Command:
        """Return a Click command configured for fragment rendering."""
        return click.Command(
            name="render",
            callback=self.execute,
            params=[
                click.Argument(["input_id"], required=True),
                click.Option(["--label"], default=None, help="Label text."),
                click.Option(
                    ["--multiple"],
                    is_flag=True,
                    default=False,
                    help="Allow selecting several files at once.",
                ),
                click.Option(
                    ["--accept"],
                    multiple=True,
                    help="MIME type or extension hint; may be repeated.",
                ),
                click.Option(["--width"], default=None, help="CSS width, e.g. 400px."),
                click.Option(
                    ["--indent"],
                    type=click.IntRange(min=0),
                    default=None,
                    help="Pretty-print with this many spaces per level.",
                ),
            ],
            help="Print the HTML of a file upload control.",
        )


# The End
