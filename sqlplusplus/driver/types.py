# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Column and cell types exchanged with the database driver."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

import numpy as np
from sqlalchemy import types as sqltypes

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 1

_TEXT_OR_BINARY = (
    sqltypes.String,
    sqltypes.LargeBinary,
    sqltypes.BINARY,
    sqltypes.VARBINARY,
)


class NativeType(Enum):
    """In-memory representation of a column value as reported by the driver."""
    BOOLEAN = "boolean"
    BYTES = "bytes"
    DOUBLE = "double"
    FLOAT = "float"
    INT64 = "int64"
    UINT64 = "uint64"
    TIMESTAMP = "timestamp"
    OTHER = "other"

    @classmethod
    def of_value(cls, value: Any) -> "NativeType":
        """Classify a DBAPI value. None has no native type of its own."""
        # bool is an int subclass, test it first
        if isinstance(value, (bool, np.bool_)):
            return cls.BOOLEAN
        if isinstance(value, np.float32):
            return cls.FLOAT
        if isinstance(value, (float, Decimal, np.floating)):
            return cls.DOUBLE
        if isinstance(value, (int, np.integer)):
            value = int(value)
            if INT64_MIN <= value <= INT64_MAX:
                return cls.INT64
            if 0 <= value <= UINT64_MAX:
                return cls.UINT64
            return cls.OTHER
        if isinstance(value, (str, bytes, bytearray, memoryview)):
            return cls.BYTES
        if isinstance(value, (datetime, date)):
            return cls.TIMESTAMP
        return cls.OTHER

    @classmethod
    def of_sql_type(cls, sql_type: Any) -> "NativeType":
        """Map a SQLAlchemy column type to a native type tag."""
        if sql_type is None or isinstance(sql_type, sqltypes.NullType):
            return cls.OTHER
        if isinstance(sql_type, sqltypes.Boolean):
            return cls.BOOLEAN
        if isinstance(sql_type, sqltypes.Integer):
            return cls.INT64
        if isinstance(sql_type, sqltypes.REAL):
            return cls.FLOAT
        if isinstance(sql_type, (sqltypes.Float, sqltypes.Numeric)):
            return cls.DOUBLE
        if isinstance(sql_type, _TEXT_OR_BINARY):
            return cls.BYTES
        if isinstance(sql_type, (sqltypes.DateTime, sqltypes.Date)):
            return cls.TIMESTAMP
        return cls.OTHER


@dataclass(frozen=True)
class ColumnDescriptor:
    """Name and declared native type of a result column."""
    name: str
    native_type: NativeType = NativeType.OTHER


@dataclass(frozen=True)
class CellValue:
    """A single column value of the current row.

    ``payload`` is None when the value is null; ``native_type`` is then the
    column's declared type and is kept only as a hint.
    """
    native_type: NativeType
    payload: Any = None
    is_null: bool = False

    @classmethod
    def null(cls, native_type: NativeType = NativeType.OTHER) -> "CellValue":
        return cls(native_type=native_type, is_null=True)

    @classmethod
    def from_value(cls, value: Any, declared: NativeType = NativeType.OTHER) -> "CellValue":
        if value is None:
            return cls.null(declared)
        return cls(native_type=NativeType.of_value(value), payload=value)
