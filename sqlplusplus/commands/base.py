# Copyright (c) 2025 Kenneth Stott
#
# Base types for REPL commands.

"""Classification of logical lines into meta-commands and SQL."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

EXIT_COMMAND = ".exit"
CONTINUE_COMMAND = ".it"
DESCRIBE_PREFIX = ".describe "


class CommandKind(Enum):
    EXIT = "exit"
    CONTINUE_FETCH = "continue_fetch"
    DESCRIBE = "describe"
    SQL = "sql"


@dataclass(frozen=True)
class Command:
    """A classified logical line."""
    kind: CommandKind
    text: str  # trimmed logical line
    line: str = ""  # logical line as entered, recorded in history
    argument: str = ""  # table name for DESCRIBE

    @property
    def records_history(self) -> bool:
        return self.kind in (CommandKind.DESCRIBE, CommandKind.SQL)


# Exact-match meta-commands
META_COMMANDS: dict[str, CommandKind] = {
    EXIT_COMMAND: CommandKind.EXIT,
    CONTINUE_COMMAND: CommandKind.CONTINUE_FETCH,
}


def parse_command(line: str) -> Command:
    """Classify a logical line. First match wins: exact meta-commands,
    then the .describe prefix, then SQL.
    """
    text = line.strip()
    kind = META_COMMANDS.get(text)
    if kind is not None:
        return Command(kind=kind, text=text, line=line)
    if text.startswith(DESCRIBE_PREFIX):
        return Command(
            kind=CommandKind.DESCRIBE,
            text=text,
            line=line,
            argument=text[len(DESCRIBE_PREFIX):].strip(),
        )
    return Command(kind=CommandKind.SQL, text=text, line=line)
