# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for form input construction.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class FreeInputError(Exception):
    """Base class for free-input specific exceptions."""


class InvalidInputIdError(FreeInputError, ValueError):
    """Raised when a control identifier is empty or not a string."""


class CssUnitError(FreeInputError, ValueError):
    """Raised when a value cannot be used as a CSS length."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f'"{value}" is not a valid CSS unit '
            '(e.g., "100%", "400px", "auto")'
        )
        self.value = value


class UploadValueError(FreeInputError, ValueError):
    """Raised when a published upload value does not match the record contract."""


class WidgetNotFound(FreeInputError, KeyError):
    """Raised when a widget key is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


# The End
