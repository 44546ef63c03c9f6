# Copyright (c) 2025 Kenneth Stott
#
# .describe - column metadata for a table.

"""Describe flow: a catalog query run through the ordinary statement path."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlplusplus.pager import UNBOUNDED_PAGE_SIZE

if TYPE_CHECKING:
    from sqlplusplus.commands.dispatcher import CommandDispatcher


def describe_table(dispatcher: CommandDispatcher, table_name: str) -> None:
    """Show name, nullability and type(length) of each column of ``table_name``.

    The table name is bound as the query's single parameter, and the whole
    listing is shown as one page.
    """
    statement = dispatcher.session.connection.prepare_describe(table_name)
    dispatcher.run_statement(statement, UNBOUNDED_PAGE_SIZE)
