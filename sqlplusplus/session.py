# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""REPL session: input accumulation, dispatch and the active statement."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from sqlplusplus.commands.dispatcher import CommandDispatcher
from sqlplusplus.driver.connection import DatabaseConnection
from sqlplusplus.pager import DEFAULT_PAGE_SIZE, ResultPager
from sqlplusplus.render import ResultRenderer
from sqlplusplus.repl.history import LineHistory
from sqlplusplus.repl.input import InputAccumulator
from sqlplusplus.repl.reader import CONTINUATION_PROMPT, PROMPT, LineReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No statement has unfetched rows."""


@dataclass(frozen=True)
class Active:
    """A statement whose result set may still have rows to page through."""
    pager: ResultPager


StatementState = Union[Idle, Active]

IDLE = Idle()


class Session:
    """Top-level REPL state. Single-threaded; one iteration at a time.

    At most one statement is active. It is replaced by every new statement or
    .describe, and dropped when exhausted or when any of its operations fail.
    """

    def __init__(
        self,
        connection: DatabaseConnection,
        reader: LineReader,
        history: Optional[LineHistory] = None,
        renderer: Optional[ResultRenderer] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.connection = connection
        self.reader = reader
        self.history = history if history is not None else LineHistory()
        self.renderer = renderer or ResultRenderer()
        self.page_size = page_size
        self.state: StatementState = IDLE
        self.accumulator = InputAccumulator()
        self.dispatcher = CommandDispatcher(self)

    @property
    def active_statement(self) -> Optional[ResultPager]:
        if isinstance(self.state, Active):
            return self.state.pager
        return None

    def activate(self, pager: ResultPager) -> None:
        self.deactivate()
        self.state = Active(pager)

    def deactivate(self) -> None:
        """Close the active statement, if any, and return to Idle."""
        if isinstance(self.state, Active):
            self.state.pager.close()
            logger.debug("Active statement released")
        self.state = IDLE

    @property
    def prompt(self) -> str:
        return CONTINUATION_PROMPT if self.accumulator.continuing else PROMPT

    def feed(self, line: str) -> bool:
        """Process one raw input line.

        Returns:
            True if the REPL should exit, False otherwise.
        """
        result = self.accumulator.feed(line)
        self.reader.set_multiline(result.continuing)
        if result.logical_line is None:
            return False
        # blank input never reaches the dispatcher
        if not result.logical_line.strip():
            return False
        return self.dispatcher.dispatch(result.logical_line)

    def run(self) -> None:
        """Read and process lines until .exit or end of input."""
        while True:
            try:
                line = self.reader.read_line(self.prompt)
                if line is None:
                    break
                if self.feed(line):
                    break
            except KeyboardInterrupt:
                # discard the partial statement and prompt again
                self.accumulator.reset()
                self.reader.set_multiline(False)

    def close(self) -> None:
        self.deactivate()
