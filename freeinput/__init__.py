# -*- coding: utf-8 -*-
"""
__init__

Form input widgets entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .core.configuration.conf import FreeInputSettings, configure, current_settings
from .core.css import validate_css_unit
from .core.exceptions import (
    CssUnitError,
    FreeInputError,
    InvalidInputIdError,
    UploadValueError,
    WidgetNotFound,
)
from .core.markup import MarkupNode, tag
from .core.uploads import UploadRecord, parse_upload_value, records_to_columns
from .meta import __version__
from .widgets import BaseWidget, FileInputWidget, file_input, registry

__all__ = [
    "BaseWidget",
    "CssUnitError",
    "FileInputWidget",
    "FreeInputError",
    "FreeInputSettings",
    "InvalidInputIdError",
    "MarkupNode",
    "UploadRecord",
    "UploadValueError",
    "WidgetNotFound",
    "__version__",
    "configure",
    "current_settings",
    "file_input",
    "parse_upload_value",
    "records_to_columns",
    "registry",
    "tag",
    "validate_css_unit",
]

# The End
