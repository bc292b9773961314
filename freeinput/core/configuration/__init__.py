# -*- coding: utf-8 -*-
"""
configuration

Configuration helpers for free-input core.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import (
    FreeInputSettings,
    configure,
    current_settings,
    register_settings_observer,
    reset_settings,
    unregister_settings_observer,
)

__all__ = [
    "FreeInputSettings",
    "configure",
    "current_settings",
    "register_settings_observer",
    "reset_settings",
    "unregister_settings_observer",
]


# The End
