# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""REPL input handling.

- InputAccumulator: joins backslash-continued lines
- LineHistory: persistent, capped history of submitted lines
- PromptLineReader / PlainLineReader: line editors
"""

from sqlplusplus.repl.history import DEFAULT_MAX_HISTORY, LineHistory
from sqlplusplus.repl.input import FeedResult, InputAccumulator, InputState
from sqlplusplus.repl.reader import (
    CONTINUATION_PROMPT,
    PASSWORD_PROMPT,
    PROMPT,
    LineReader,
    PlainLineReader,
    PromptLineReader,
    create_line_reader,
)

__all__ = [
    "DEFAULT_MAX_HISTORY",
    "LineHistory",
    "FeedResult",
    "InputAccumulator",
    "InputState",
    "CONTINUATION_PROMPT",
    "PASSWORD_PROMPT",
    "PROMPT",
    "LineReader",
    "PlainLineReader",
    "PromptLineReader",
    "create_line_reader",
]
