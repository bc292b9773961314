# -*- coding: utf-8 -*-
"""
css

Validation and normalization of CSS length values.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from typing import Any

from .exceptions import CssUnitError

logger = logging.getLogger(__name__)

CSS_KEYWORDS = frozenset(
    {"auto", "inherit", "initial", "unset", "fit-content", "min-content", "max-content"}
)
CSS_UNITS = (
    "%", "em", "rem", "ex", "ch", "in", "cm", "mm", "pt", "pc", "px",
    "vh", "vw", "vmin", "vmax",
)

_NUMBER = r"(?:\d+(?:\.\d+)?|\.\d+)"
_NUMBER_RE = re.compile(rf"^{_NUMBER}$")
_LENGTH_RE = re.compile(rf"^{_NUMBER}(?:{'|'.join(sorted(map(re.escape, CSS_UNITS), key=len, reverse=True))})$")
_FUNCTION_RE = re.compile(r"^(?:calc|var)\([-+*/%.,\w\s()]+\)$")


def _balanced(text: str) -> bool:
    """Parentheses must close in order and the outer call must span the whole value."""
    depth = 0
    for pos, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0 or (depth == 0 and pos != len(text) - 1):
                return False
    return depth == 0


def _format_number(value: int | float) -> str:
    if isinstance(value, float):
        if not math.isfinite(value):
            raise CssUnitError(value)
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return str(value)


def validate_css_unit(value: Any) -> str | None:
    """Return ``value`` as a CSS length string or raise ``CssUnitError``.

    Plain numbers are treated as pixels. ``None`` passes through so callers can
    omit the style entirely.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise CssUnitError(value)
    if isinstance(value, (int, float)):
        if value < 0:
            raise CssUnitError(value)
        normalized = f"{_format_number(value)}px"
        logger.debug("Normalized numeric CSS length %r to %s", value, normalized)
        return normalized
    if not isinstance(value, str):
        raise CssUnitError(value)

    text = value.strip()
    if not text:
        raise CssUnitError(value)
    if _NUMBER_RE.match(text):
        normalized = f"{text}px"
        logger.debug("Normalized unitless CSS length %r to %s", value, normalized)
        return normalized
    if text in CSS_KEYWORDS or _LENGTH_RE.match(text):
        return text
    if _FUNCTION_RE.match(text) and _balanced(text):
        return text
    raise CssUnitError(value)


__all__ = ["CSS_KEYWORDS", "CSS_UNITS", "validate_css_unit"]


# The End
