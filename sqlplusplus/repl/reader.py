# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Line readers used by the REPL loop."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, Protocol

import click
from prompt_toolkit import PromptSession

from sqlplusplus.repl.history import LineHistory

PROMPT = "SQL++ > "
CONTINUATION_PROMPT = "SQL++ (cont.) > "
PASSWORD_PROMPT = "Password > "


def _is_compatible_terminal() -> bool:
    """Check if terminal is compatible with prompt_toolkit."""
    # IntelliJ/PyCharm terminal sets TERMINAL_EMULATOR
    if "TERMINAL_EMULATOR" in os.environ:
        return False
    if os.environ.get("TERM_PROGRAM") == "JetBrains-JediTerm":
        return False
    if not sys.stdin.isatty():
        return False
    return True


class LineReader(Protocol):
    """What the session needs from a line editor."""

    def read_line(self, prompt: str) -> Optional[str]:
        """Return the next line, or None at end of input."""
        ...

    def set_multiline(self, enabled: bool) -> None:
        ...

    def masked(self):
        """Context manager masking typed input while active."""
        ...


class PromptLineReader:
    """prompt_toolkit line editor with persistent history recall."""

    def __init__(self, history: LineHistory):
        self.history = history
        self._masked = False
        self._session = PromptSession(history=history, wrap_lines=False)

    def read_line(self, prompt: str) -> Optional[str]:
        try:
            return self._session.prompt(prompt, is_password=self._masked)
        except EOFError:
            return None

    def set_multiline(self, enabled: bool) -> None:
        # wrap long input over several rows instead of scrolling sideways
        self._session.wrap_lines = enabled

    @contextmanager
    def masked(self) -> Iterator[None]:
        self._masked = True
        try:
            yield
        finally:
            self._masked = False


class PlainLineReader:
    """Fallback for pipes and terminals prompt_toolkit cannot drive."""

    def __init__(self):
        self._masked = False

    def read_line(self, prompt: str) -> Optional[str]:
        try:
            if self._masked:
                return click.prompt(
                    prompt.rstrip(),
                    hide_input=True,
                    default="",
                    show_default=False,
                    prompt_suffix=" ",
                )
            return input(prompt)
        except (EOFError, click.exceptions.Abort):
            return None

    def set_multiline(self, enabled: bool) -> None:
        pass

    @contextmanager
    def masked(self) -> Iterator[None]:
        self._masked = True
        try:
            yield
        finally:
            self._masked = False


def create_line_reader(history: LineHistory) -> LineReader:
    if _is_compatible_terminal():
        return PromptLineReader(history)
    return PlainLineReader()
