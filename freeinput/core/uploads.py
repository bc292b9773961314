# -*- coding: utf-8 -*-
"""
uploads

Typed view of the value published for a file upload control.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com

After an upload completes the host framework publishes, under the control id,
one row per file with ``name``, ``size``, ``type`` and ``datapath`` columns.
``datapath`` points at transient storage owned by the upload handler and may
disappear once another upload replaces the value.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import UploadValueError

UPLOAD_COLUMNS = ("name", "size", "type", "datapath")


class UploadRecord(BaseModel):
    """Single uploaded file as reported by the upload handler."""

    model_config = ConfigDict(frozen=True)

    name: str                      # filename given by the browser, not a path to read
    size: int = Field(ge=0)        # bytes
    type: str = ""                 # MIME type, empty when the browser did not know
    datapath: str                  # temp file holding the uploaded bytes

    @property
    def path(self) -> Path:
        return Path(self.datapath)


def _rows_from_columns(columns: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    missing = [col for col in ("name", "size", "datapath") if col not in columns]
    if missing:
        raise UploadValueError(f"Upload value is missing columns: {', '.join(missing)}")
    if not isinstance(columns["name"], (list, tuple)):
        return [columns]
    present = [col for col in UPLOAD_COLUMNS if col in columns]
    scalar = [col for col in present if not isinstance(columns[col], (list, tuple))]
    if scalar:
        raise UploadValueError(f"Upload value columns are not lists: {', '.join(scalar)}")
    lengths = {col: len(columns[col]) for col in present}
    if len(set(lengths.values())) > 1:
        raise UploadValueError(f"Upload value columns differ in length: {lengths}")
    count = lengths["name"]
    return [
        {col: columns[col][idx] for col in UPLOAD_COLUMNS if col in columns}
        for idx in range(count)
    ]


def parse_upload_value(value: Any) -> tuple[UploadRecord, ...] | None:
    """Convert a published upload value into ``UploadRecord`` rows.

    Accepts ``None`` (nothing uploaded yet), a sequence of row mappings, a
    single row mapping, or a column mapping of equal-length lists. Returns
    ``None`` when there are no rows.
    """

    if value is None:
        return None
    if isinstance(value, Mapping):
        rows: Sequence[Any] = _rows_from_columns(value)
    elif isinstance(value, (list, tuple)):
        rows = value
    else:
        raise UploadValueError(
            f"Upload value must be a mapping or a sequence, got {type(value).__name__}"
        )
    if not rows:
        return None

    records: list[UploadRecord] = []
    for idx, row in enumerate(rows):
        if isinstance(row, UploadRecord):
            records.append(row)
            continue
        if not isinstance(row, Mapping):
            raise UploadValueError(f"Upload row {idx} is not a mapping")
        try:
            records.append(UploadRecord.model_validate(dict(row)))
        except ValidationError as exc:
            raise UploadValueError(f"Upload row {idx} is invalid: {exc}") from exc
    return tuple(records)


def records_to_columns(records: Iterable[UploadRecord] | None) -> dict[str, list[Any]]:
    """Return records in column-oriented form, the tabular shape of the value."""
    columns: dict[str, list[Any]] = {col: [] for col in UPLOAD_COLUMNS}
    for record in records or ():
        for col in UPLOAD_COLUMNS:
            columns[col].append(getattr(record, col))
    return columns


__all__ = [
    "UPLOAD_COLUMNS",
    "UploadRecord",
    "parse_upload_value",
    "records_to_columns",
]


# The End
