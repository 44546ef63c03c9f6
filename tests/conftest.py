# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Pytest configuration and shared fixtures."""

from contextlib import contextmanager
from io import StringIO
from typing import Optional

import pytest
from rich.console import Console

from sqlplusplus.driver.connection import DatabaseConnection
from sqlplusplus.render import ResultRenderer
from sqlplusplus.repl.history import LineHistory
from sqlplusplus.session import Session


class ScriptedReader:
    """Line reader that replays a fixed list of lines, then signals end of input."""

    def __init__(self, lines: list[str]):
        self.lines = list(lines)
        self.prompts: list[str] = []
        self.multiline_calls: list[bool] = []
        self.masked_reads: list[bool] = []
        self._masked = False

    def read_line(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        self.masked_reads.append(self._masked)
        if not self.lines:
            return None
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line

    def set_multiline(self, enabled: bool) -> None:
        self.multiline_calls.append(enabled)

    @contextmanager
    def masked(self):
        self._masked = True
        try:
            yield
        finally:
            self._masked = False


class CapturingRenderer(ResultRenderer):
    """Renderer writing to in-memory buffers."""

    def __init__(self):
        self.out = StringIO()
        self.err = StringIO()
        super().__init__(
            console=Console(file=self.out, width=200),
            err_console=Console(file=self.err, width=200),
        )

    @property
    def output(self) -> str:
        return self.out.getvalue()

    @property
    def errors(self) -> str:
        return self.err.getvalue()


@pytest.fixture
def connection():
    """In-memory SQLite connection with an ``items`` table."""
    conn = DatabaseConnection.connect("sqlite:///:memory:")
    for sql in (
        "CREATE TABLE items (id INTEGER NOT NULL PRIMARY KEY, name VARCHAR(40) NOT NULL, "
        "price REAL, note TEXT)",
        "INSERT INTO items VALUES (1, 'widget', 2.5, NULL)",
        "INSERT INTO items VALUES (2, 'gadget', NULL, 'fragile')",
        "INSERT INTO items VALUES (3, 'doohickey', 10.0, NULL)",
    ):
        statement = conn.prepare(sql)
        statement.execute()
        statement.close()
    yield conn
    conn.close()


@pytest.fixture
def renderer():
    return CapturingRenderer()


@pytest.fixture
def make_session(connection, renderer):
    """Build a Session over the SQLite fixture reading the given lines."""

    def factory(lines: list, page_size: int = 20) -> Session:
        return Session(
            connection,
            ScriptedReader(lines),
            history=LineHistory(),
            renderer=renderer,
            page_size=page_size,
        )

    return factory


@pytest.fixture
def make_reader():
    """Factory for ScriptedReader instances."""
    return ScriptedReader
