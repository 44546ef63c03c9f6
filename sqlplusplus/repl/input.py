# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Joins continued input lines into complete logical lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

CONTINUATION_MARKER = "\\"


class InputState(Enum):
    NORMAL = "normal"
    CONTINUATION = "continuation"


@dataclass(frozen=True)
class FeedResult:
    """Outcome of feeding one raw line.

    ``logical_line`` is None while more input is expected. ``continuing`` tells
    the caller to switch to the continuation prompt and multi-line rendering.
    """
    logical_line: Optional[str]
    continuing: bool


class InputAccumulator:
    """Accumulates raw lines until one does not end with a backslash."""

    def __init__(self):
        self.state = InputState.NORMAL
        self._fragments: list[str] = []

    @property
    def continuing(self) -> bool:
        return self.state is InputState.CONTINUATION

    @property
    def pending(self) -> list[str]:
        return list(self._fragments)

    def feed(self, line: str) -> FeedResult:
        if line.endswith(CONTINUATION_MARKER):
            self._fragments.append(line[:-1])
            self.state = InputState.CONTINUATION
            return FeedResult(logical_line=None, continuing=True)

        self._fragments.append(line)
        logical_line = "".join(self._fragments)
        self.reset()
        return FeedResult(logical_line=logical_line, continuing=False)

    def reset(self) -> None:
        """Drop pending fragments and return to the normal state."""
        self._fragments = []
        self.state = InputState.NORMAL
