# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Routes logical lines to meta-command handlers or statement execution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from sqlplusplus.commands.base import Command, CommandKind, parse_command
from sqlplusplus.commands.describe import describe_table
from sqlplusplus.driver.connection import Statement
from sqlplusplus.driver.errors import ConnectionLostError, DatabaseError
from sqlplusplus.pager import ResultPager

if TYPE_CHECKING:
    from sqlplusplus.session import Session

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Dispatches commands against a session.

    Statement-scoped DatabaseErrors are reported and leave the session with no
    active statement. ConnectionLostError propagates to the caller.
    """

    def __init__(self, session: Session):
        self.session = session
        self._handlers: dict[CommandKind, Callable[[Command], bool]] = {
            CommandKind.EXIT: self._handle_exit,
            CommandKind.CONTINUE_FETCH: self._handle_continue,
            CommandKind.DESCRIBE: self._handle_describe,
            CommandKind.SQL: self._handle_sql,
        }

    def dispatch(self, line: str) -> bool:
        """Handle one logical line.

        Returns:
            True if the REPL should exit, False otherwise.
        """
        command = parse_command(line)
        logger.debug("Dispatching %s: %s", command.kind.value, command.text)
        return self._handlers[command.kind](command)

    def _handle_exit(self, command: Command) -> bool:
        return True

    def _handle_continue(self, command: Command) -> bool:
        pager = self.session.active_statement
        if pager is None:
            self.session.renderer.show_no_active_statement()
            return False
        self._show_next_page(pager, self.session.page_size)
        return False

    def _handle_describe(self, command: Command) -> bool:
        describe_table(self, command.argument)
        self.session.history.add(command.line)
        return False

    def _handle_sql(self, command: Command) -> bool:
        self.session.deactivate()
        try:
            statement = self.session.connection.prepare(command.text)
        except ConnectionLostError:
            raise
        except DatabaseError as e:
            self.session.renderer.show_error(e)
            return False

        if self.execute(statement):
            self.session.history.add(command.line)
            self.show_first_page(statement, self.session.page_size)
        return False

    def run_statement(self, statement: Statement, page_size: int) -> None:
        """Execute a prepared statement and show its first page."""
        if self.execute(statement):
            self.show_first_page(statement, page_size)

    def execute(self, statement: Statement) -> bool:
        """Execute ``statement``, superseding any active statement.

        Returns:
            True on success; on failure the error is reported and the
            statement closed.
        """
        self.session.deactivate()
        try:
            statement.execute()
        except ConnectionLostError:
            statement.close()
            raise
        except DatabaseError as e:
            statement.close()
            self.session.renderer.show_error(e)
            return False
        return True

    def show_first_page(self, statement: Statement, page_size: int) -> None:
        pager = ResultPager(statement)
        self.session.activate(pager)
        self._show_next_page(pager, page_size)

    def _show_next_page(self, pager: ResultPager, page_size: int) -> None:
        try:
            page = pager.fetch_page(page_size)
        except ConnectionLostError:
            self.session.deactivate()
            raise
        except DatabaseError as e:
            self.session.deactivate()
            self.session.renderer.show_error(e)
            return

        self.session.renderer.show_page(page)
        if page.was_exhausted:
            self.session.deactivate()
