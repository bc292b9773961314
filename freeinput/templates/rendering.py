# -*- coding: utf-8 -*-
"""
templates.rendering

Helpers for embedding widget markup in Jinja2 templates and FastAPI views.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, select_autoescape

from ..core.configuration import FreeInputSettings, current_settings, register_settings_observer
from ..core.markup import MarkupNode
from ..widgets import file_input, registry


def register_template_globals(env: Environment) -> Environment:
    """Expose widget constructors and the static asset prefix as template globals."""

    env.globals.setdefault("file_input", file_input)
    env.globals.setdefault("widget", _render_widget)
    env.globals["static_url"] = current_settings().static_url_segment
    return env


def _render_widget(key: str, input_id: str, **config: Any) -> MarkupNode:
    return registry.create(key, input_id, **config).render()


class TemplateRenderer:
    """Provide cached access to a Jinja2 environment with widget globals."""

    _environment: Environment | None = None

    @classmethod
    def get_environment(cls) -> Environment:
        """Return the shared environment used for template strings."""

        if cls._environment is None:
            env = Environment(autoescape=select_autoescape(default_for_string=True))
            cls._environment = register_template_globals(env)
        return cls._environment

    @classmethod
    def reset(cls) -> None:
        cls._environment = None

    @classmethod
    def on_settings_changed(cls, settings: FreeInputSettings) -> None:
        """Drop the cached environment so globals pick up new settings."""

        del settings
        cls.reset()

    @classmethod
    def render_string(cls, source: str, context: Mapping[str, Any] | None = None) -> str:
        """Render ``source`` with ``context`` and the widget globals installed."""

        return cls.get_environment().from_string(source).render(**dict(context or {}))

    @staticmethod
    def templates(directory: str | Path) -> Jinja2Templates:
        """Return ``Jinja2Templates`` for ``directory`` with widget globals installed."""

        templates = Jinja2Templates(directory=str(directory))
        register_template_globals(templates.env)
        return templates


register_settings_observer(TemplateRenderer.on_settings_changed)


def render_fragment(
    node: MarkupNode,
    *,
    status_code: int = 200,
    indent: int | None = None,
) -> HTMLResponse:
    """Serialize ``node`` into an ``HTMLResponse`` for use in FastAPI views."""

    if indent is None:
        indent = current_settings().render_indent
    return HTMLResponse(node.render(indent=indent), status_code=status_code)


# The End
