# -*- coding: utf-8 -*-
"""conftest

Shared testing utilities for free-input test-suite fixtures.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from freeinput.core.configuration import FreeInputSettings, configure, reset_settings
from freeinput.templates import TemplateRenderer


class WidgetState:
    """Manage global settings and renderer caches during tests."""

    def reset(self) -> None:
        """Install default settings and drop the cached template environment."""

        reset_settings()
        configure(FreeInputSettings())
        TemplateRenderer.reset()


widget_state = WidgetState()


@pytest.fixture(autouse=True)
def clean_widget_state():
    """Run every test against default settings."""

    widget_state.reset()
    yield
    widget_state.reset()


__all__ = ["widget_state"]


# The End
