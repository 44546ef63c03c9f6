# Copyright (c) 2025 Kenneth Stott
#
# Renders result pages and status messages with Rich.

"""Terminal output for the REPL."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sqlplusplus.driver.errors import DatabaseError
from sqlplusplus.formatting import NULL_TEXT
from sqlplusplus.pager import ResultPage

NO_ROWS_MESSAGE = "No rows returned"
NO_ACTIVE_STATEMENT_MESSAGE = "No active statement"


def build_table(page: ResultPage) -> Table:
    """Build a Rich table for a page: bold header, italic null cells."""
    table = Table(show_header=True, header_style="bold")
    for column in page.columns:
        # names come from the database and are never markup
        table.add_column(Text(column.name))

    for row in page.rows:
        cells = []
        for idx, value in enumerate(row):
            # quoted text can never equal the bare null marker
            if idx in page.null_columns and value == NULL_TEXT:
                cells.append(Text(value, style="italic"))
            else:
                cells.append(Text(value))
        table.add_row(*cells)
    return table


class ResultRenderer:
    """Writes pages to stdout and errors to stderr."""

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def show_page(self, page: ResultPage) -> None:
        if page.is_empty:
            self.console.print(NO_ROWS_MESSAGE)
            return
        self.console.print(build_table(page))
        self.console.print(f"Fetched {page.row_count} rows", markup=False)

    def show_no_active_statement(self) -> None:
        self.console.print(NO_ACTIVE_STATEMENT_MESSAGE)

    def show_error(self, error: DatabaseError) -> None:
        self.err_console.print(Text(f"Error {error.context}: {error.message}", style="red"))

    def show_fatal(self, error: DatabaseError) -> None:
        self.err_console.print(Text(f"Fatal error {error.context}: {error.message}", style="bold red"))
