# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Paginated row fetch over a single executed statement."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from sqlplusplus.driver.connection import Statement
from sqlplusplus.driver.errors import DatabaseError
from sqlplusplus.driver.types import ColumnDescriptor
from sqlplusplus.formatting import format_value

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
# .describe shows the whole listing in one page
UNBOUNDED_PAGE_SIZE = sys.maxsize


@dataclass
class ResultPage:
    """One batch of formatted rows."""
    columns: list[ColumnDescriptor] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    null_columns: set[int] = field(default_factory=set)  # 0-based, null in any row
    was_exhausted: bool = False

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return len(self.rows) == 0


class ResultPager:
    """The active statement: an executed statement, its columns and fetch progress.

    A page that ends exactly on the last row is reported as exhausted, so the
    exhausted page is always the final one. To know that, the pager advances one
    row past the page and keeps that row for the next call.
    """

    def __init__(self, statement: Statement):
        self.statement = statement
        self.columns = statement.columns
        self.exhausted = False
        self._row_pending = False
        self.rows_fetched = 0

    def fetch_page(self, max_rows: int = DEFAULT_PAGE_SIZE) -> ResultPage:
        """Fetch up to ``max_rows`` rows.

        Raises:
            ValueError: if max_rows < 1
            DatabaseError: if the result set was already exhausted, or the driver fails
        """
        if max_rows < 1:
            raise ValueError(f"max_rows must be at least 1, got {max_rows}")
        if self.exhausted:
            raise DatabaseError("fetch", "result set is exhausted")

        page = ResultPage(columns=self.columns)
        while page.row_count < max_rows:
            if not self._row_pending and not self.statement.fetch():
                page.was_exhausted = True
                break
            self._row_pending = False
            page.rows.append(self._read_row(page.null_columns))

        if not page.was_exhausted:
            if self.statement.fetch():
                self._row_pending = True
            else:
                page.was_exhausted = True

        self.exhausted = page.was_exhausted
        self.rows_fetched += page.row_count
        logger.debug(
            "Fetched page of %d rows (total %d, exhausted=%s)",
            page.row_count, self.rows_fetched, page.was_exhausted,
        )
        return page

    def _read_row(self, null_columns: set[int]) -> list[str]:
        row = []
        for position in range(1, len(self.columns) + 1):
            cell = self.statement.column_value(position)
            if cell.is_null:
                null_columns.add(position - 1)
            row.append(format_value(cell))
        return row

    def close(self) -> None:
        self.statement.close()
