# -*- coding: utf-8 -*-
"""
test_settings

Tests for environment driven settings and the settings manager.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from freeinput.core.configuration import (
    FreeInputSettings,
    configure,
    current_settings,
    register_settings_observer,
    unregister_settings_observer,
)
from freeinput.core.configuration.conf import DEFAULT_MAX_UPLOAD_SIZE, SettingsManager


class TestFreeInputSettings:
    """Verify parsing of environment variables."""

    def test_defaults(self) -> None:
        settings = FreeInputSettings.from_env({})

        assert settings.max_upload_size == DEFAULT_MAX_UPLOAD_SIZE
        assert settings.static_url_segment == "/static"
        assert settings.render_indent is None

    def test_values_from_env(self) -> None:
        settings = FreeInputSettings.from_env(
            {
                "FREEINPUT_MAX_UPLOAD_SIZE": "1024",
                "FREEINPUT_STATIC_URL_SEGMENT": "assets/",
                "FREEINPUT_RENDER_INDENT": "2",
                "UNRELATED": "x",
            }
        )

        assert settings.max_upload_size == 1024
        assert settings.static_url_segment == "/assets"
        assert settings.render_indent == 2

    def test_invalid_numbers_fall_back(self) -> None:
        settings = FreeInputSettings.from_env(
            {"FREEINPUT_MAX_UPLOAD_SIZE": "lots", "FREEINPUT_RENDER_INDENT": "wide"}
        )

        assert settings.max_upload_size == DEFAULT_MAX_UPLOAD_SIZE
        assert settings.render_indent is None


class TestSettingsManager:
    """Verify storage and observer notification."""

    def test_lazy_initialisation(self, monkeypatch) -> None:
        monkeypatch.setenv("FREEINPUT_MAX_UPLOAD_SIZE", "77")
        manager = SettingsManager()

        assert manager.current().max_upload_size == 77

    def test_observers_are_notified(self) -> None:
        seen: list[FreeInputSettings] = []
        register_settings_observer(seen.append)
        try:
            new = FreeInputSettings(max_upload_size=1)
            configure(new)
            assert seen == [new]
            assert current_settings() is new
        finally:
            unregister_settings_observer(seen.append)

        configure(FreeInputSettings())
        assert len(seen) == 1


# The End
