# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Persistent history of submitted logical lines."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

from prompt_toolkit.history import History

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 10000


class LineHistory(History):
    """Capped, file-backed history.

    Only lines passed to add() are recorded; the prompt's own automatic
    appends are ignored, so .exit, .it and continuation fragments never
    reach the file. Also serves as the prompt_toolkit history for recall.
    """

    def __init__(self, max_length: int = DEFAULT_MAX_HISTORY):
        super().__init__()
        self._entries: list[str] = []
        self._max_length = DEFAULT_MAX_HISTORY
        self.set_max_length(max_length)

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def max_length(self) -> int:
        return self._max_length

    def __len__(self) -> int:
        return len(self._entries)

    def set_max_length(self, max_length: int) -> None:
        if max_length < 1:
            raise ValueError(f"History size must be at least 1, got {max_length}")
        self._max_length = max_length
        self._trim()

    def add(self, line: str) -> bool:
        """Record a line. Returns False for blanks and repeats of the last entry."""
        if not line.strip():
            return False
        if self._entries and self._entries[-1] == line:
            return False
        self._entries.append(line)
        self._trim()
        # keep prompt_toolkit's in-memory view in step for up-arrow recall
        super().append_string(line)
        return True

    def _trim(self) -> None:
        if len(self._entries) > self._max_length:
            del self._entries[: len(self._entries) - self._max_length]

    def load(self, path: Union[str, Path]) -> int:
        """Load entries from ``path``. A missing file is not an error."""
        path = Path(path)
        if not path.exists():
            logger.debug("No history file at %s", path)
            return 0
        with open(path, encoding="utf-8", errors="replace") as f:
            count = sum(1 for line in f if self.add(line.rstrip("\r\n")))
        logger.debug("Loaded %d history entries from %s", count, path)
        return count

    def save(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for entry in self._entries:
                f.write(entry + "\n")
        logger.debug("Saved %d history entries to %s", len(self._entries), path)

    # prompt_toolkit History interface

    def load_history_strings(self) -> Iterable[str]:
        return reversed(self._entries)

    def store_string(self, string: str) -> None:
        pass

    def append_string(self, string: str) -> None:
        pass
