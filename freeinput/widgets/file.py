# -*- coding: utf-8 -*-
"""
file

File upload control.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com

``file_input`` builds the markup for a file upload control: a
``div.form-group.shiny-input-container`` holding an optional ``label``, the
``input[type=file]`` and a progress bar placeholder the client binding animates
while a transfer runs.

Once an upload completes, the value published under the control id holds one
row per file with these columns:

* ``name``: the filename provided by the browser. This is *not* the path to
  read to get at the uploaded data (see ``datapath``).
* ``size``: the size of the uploaded data, in bytes.
* ``type``: the MIME type reported by the browser (for example
  ``text/plain``), or an empty string if the browser did not know.
* ``datapath``: the path to a temp file that contains the uploaded data. This
  file may be deleted if the user performs another upload.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from ..core.configuration import current_settings
from ..core.css import validate_css_unit
from ..core.exceptions import InvalidInputIdError, UploadValueError
from ..core.markup import MarkupNode, tag
from ..core.uploads import UploadRecord, parse_upload_value
from .base import BaseWidget
from .registry import registry

logger = logging.getLogger(__name__)

CONTAINER_CLASS = "form-group shiny-input-container"
PROGRESS_CLASS = "progress progress-striped active shiny-file-input-progress"
PROGRESS_BAR_CLASS = "progress-bar"


def _label_node(label: Any) -> MarkupNode | None:
    node = tag("label", label)
    if all(child == "" for child in node.children):
        return None
    return node


def file_input(
    id: str,
    label: Any = None,
    multiple: bool = False,
    accept: str | Iterable[str] | None = None,
    width: str | int | float | None = None,
) -> MarkupNode:
    """Create a file upload control that can be used to upload one or more files.

    ``multiple`` lets the user select several files at once. ``accept`` is a
    list of MIME types or extensions hinting the browser at the expected files;
    a single string counts as one entry. ``width`` is any CSS length accepted by
    ``validate_css_unit``; an invalid width raises ``CssUnitError`` and nothing
    is built.
    """

    if not isinstance(id, str) or not id:
        raise InvalidInputIdError(f"File input id must be a non-empty string, got {id!r}")

    if isinstance(accept, str):
        accept = [accept]
    accept_values = [str(item) for item in accept or ()]
    style = f"width: {validate_css_unit(width)};" if width is not None else None

    input_attrs: dict[str, Any] = {"id": id, "name": id, "type": "file"}
    if multiple:
        input_attrs["multiple"] = "multiple"
    if accept_values:
        input_attrs["accept"] = ",".join(accept_values)
    input_tag = tag("input", **input_attrs)

    logger.debug(
        "Built file input '%s' (multiple=%s, accept=%s, width=%s)",
        id,
        bool(multiple),
        input_attrs.get("accept"),
        style,
    )

    return tag(
        "div",
        _label_node(label),
        input_tag,
        tag(
            "div",
            tag("div", class_=PROGRESS_BAR_CLASS),
            id=f"{id}_progress",
            class_=PROGRESS_CLASS,
        ),
        class_=CONTAINER_CLASS,
        style=style,
    )


@registry.register("file")
class FileInputWidget(BaseWidget):
    """Widget wrapper around ``file_input`` with upload value conversion."""

    def render(self) -> MarkupNode:
        return file_input(
            self.input_id,
            label=self.config.get("label"),
            multiple=bool(self.config.get("multiple", False)),
            accept=self.config.get("accept"),
            width=self.config.get("width"),
        )

    def to_python(self, value: Any) -> tuple[UploadRecord, ...] | None:
        """Parse the published value and check it against the control's limits.

        A ``max_upload_size`` of ``None`` in the widget config disables the size
        check; ``0`` admits only empty files.
        """
        try:
            records = parse_upload_value(value)
        except UploadValueError:
            logger.error("Rejected upload value for '%s'", self.input_id)
            raise
        if records is None:
            return None

        if len(records) > 1 and not self.config.get("multiple", False):
            msg = f"File input '{self.input_id}' accepts a single file, got {len(records)}"
            logger.error(msg)
            raise UploadValueError(msg)

        limit = self.config.get("max_upload_size", current_settings().max_upload_size)
        for record in records:
            if limit is not None and record.size > limit:
                msg = (
                    f"File '{record.name}' for '{self.input_id}' is {record.size} bytes, "
                    f"above the {limit} byte limit"
                )
                logger.error(msg)
                raise UploadValueError(msg)
        return records

# The End
