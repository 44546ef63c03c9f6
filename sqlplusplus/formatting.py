# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Display text for typed column values."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

import numpy as np

from sqlplusplus.driver.types import CellValue, NativeType

NULL_TEXT = "<null>"
UNSUPPORTED_TEXT = "unsupported type"


def _trim_float(text: str) -> str:
    # shortest round-trip form, without a trailing ".0"
    return text[:-2] if text.endswith(".0") else text


def _format_boolean(value: Any) -> str:
    return "TRUE" if value else "FALSE"


def _format_bytes(value: Any) -> str:
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8", errors="replace")
    return f'"{value}"'


def _format_double(value: Any) -> str:
    if isinstance(value, Decimal):
        return format(value, "f")
    return _trim_float(repr(float(value)))


def _format_float(value: Any) -> str:
    return _trim_float(str(np.float32(value)))


def _format_integer(value: Any) -> str:
    return str(int(value))


def _format_timestamp(value: Any) -> str:
    """Render as ``Y-M-D H:M:S.fraction Z<tz hours>``, no zero padding.

    The fraction is in nanoseconds; naive values have a zero offset.
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    offset = value.utcoffset()
    tz_hours = int(offset.total_seconds() / 3600) if offset is not None else 0
    return (
        f"{value.year}-{value.month}-{value.day} "
        f"{value.hour}:{value.minute}:{value.second}.{value.microsecond * 1000} "
        f"Z{tz_hours}"
    )


FORMATTERS: dict[NativeType, Callable[[Any], str]] = {
    NativeType.BOOLEAN: _format_boolean,
    NativeType.BYTES: _format_bytes,
    NativeType.DOUBLE: _format_double,
    NativeType.FLOAT: _format_float,
    NativeType.INT64: _format_integer,
    NativeType.UINT64: _format_integer,
    NativeType.TIMESTAMP: _format_timestamp,
}


def format_value(cell: CellValue) -> str:
    """Decode a cell into display text. Nulls render as ``<null>`` for every type."""
    if cell.is_null:
        return NULL_TEXT
    formatter = FORMATTERS.get(cell.native_type)
    if formatter is None:
        return UNSUPPORTED_TEXT
    return formatter(cell.payload)
