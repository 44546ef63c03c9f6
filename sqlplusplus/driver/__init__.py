# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Database driver layer - connections, statements and typed cell values."""

from sqlplusplus.driver.connection import DatabaseConnection, Statement
from sqlplusplus.driver.errors import ConnectionLostError, DatabaseError
from sqlplusplus.driver.types import CellValue, ColumnDescriptor, NativeType

__all__ = [
    "DatabaseConnection",
    "Statement",
    "DatabaseError",
    "ConnectionLostError",
    "CellValue",
    "ColumnDescriptor",
    "NativeType",
]
