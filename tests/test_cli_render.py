# -*- coding: utf-8 -*-
"""
test_cli_render

Tests for the `render` CLI command.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from click.testing import CliRunner

from freeinput.cli import cli


class TestRenderCommand:
    """Verify fragment output from the command line."""

    def test_render_with_options(self) -> None:
        result = CliRunner().invoke(
            cli,
            ["render", "file1", "--label", "Choose CSV File", "--accept", "text/csv", "--accept", ".csv"],
        )

        assert result.exit_code == 0
        assert result.output.strip() == (
            '<div class="form-group shiny-input-container">'
            "<label>Choose CSV File</label>"
            '<input id="file1" name="file1" type="file" accept="text/csv,.csv"/>'
            '<div id="file1_progress" '
            'class="progress progress-striped active shiny-file-input-progress">'
            '<div class="progress-bar"></div>'
            "</div>"
            "</div>"
        )

    def test_render_multiple_and_width_indented(self) -> None:
        result = CliRunner().invoke(
            cli, ["render", "pics", "--multiple", "--width", "300", "--indent", "2"]
        )

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == '<div class="form-group shiny-input-container" style="width: 300px;">'
        assert lines[1] == '  <input id="pics" name="pics" type="file" multiple="multiple"/>'

    def test_invalid_width_fails(self) -> None:
        result = CliRunner().invoke(cli, ["render", "pics", "--width", "huge"])

        assert result.exit_code != 0
        assert "huge" in result.output


# The End
