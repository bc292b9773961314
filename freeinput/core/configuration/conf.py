# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the free-input package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from threading import RLock
from typing import Callable, Mapping

DEFAULT_MAX_UPLOAD_SIZE = 5 * 1024 * 1024


@dataclass
class FreeInputSettings:
    """Container for widget configuration derived from environment variables."""

    max_upload_size: int = DEFAULT_MAX_UPLOAD_SIZE
    static_url_segment: str = "/static"
    render_indent: int | None = None

    def __post_init__(self) -> None:
        """Normalize the static prefix and reject negative limits."""
        if self.max_upload_size < 0:
            self.max_upload_size = DEFAULT_MAX_UPLOAD_SIZE
        self.static_url_segment = self._normalize_prefix(self.static_url_segment)
        if self.render_indent is not None and self.render_indent < 0:
            self.render_indent = None

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "FREEINPUT_",
    ) -> "FreeInputSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        max_upload_size = cls._to_int(
            data.get("MAX_UPLOAD_SIZE"), default=DEFAULT_MAX_UPLOAD_SIZE
        )
        static_segment = data.get("STATIC_URL_SEGMENT") or "/static"
        indent_raw = data.get("RENDER_INDENT")
        render_indent = cls._to_int(indent_raw, default=-1) if indent_raw else None
        return cls(
            max_upload_size=max_upload_size,
            static_url_segment=static_segment,
            render_indent=render_indent,
        )

    @staticmethod
    def _to_int(value: str | None, *, default: int) -> int:
        """Return an integer from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Ensure paths contain a single leading slash and no trailing one."""
        stripped = value.strip().strip("/")
        if not stripped:
            return ""
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``FreeInputSettings`` instance."""

    def __init__(self, initial: FreeInputSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[FreeInputSettings], None]] = []

    def configure(self, settings: FreeInputSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> FreeInputSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = FreeInputSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Drop the active settings so the next access reloads the environment."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[FreeInputSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[FreeInputSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: FreeInputSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> FreeInputSettings:
    """Return the active settings instance used by free-input components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Forget configured settings; the environment is read again on next access."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[FreeInputSettings], None]) -> None:
    """Subscribe to configuration changes for global singletons."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[FreeInputSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "DEFAULT_MAX_UPLOAD_SIZE",
    "FreeInputSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
