# Copyright (c) 2025 Kenneth Stott
#
# REPL commands.

"""REPL commands: meta-commands (.exit, .it, .describe) and SQL dispatch."""

from sqlplusplus.commands.base import (
    CONTINUE_COMMAND,
    DESCRIBE_PREFIX,
    EXIT_COMMAND,
    META_COMMANDS,
    Command,
    CommandKind,
    parse_command,
)
from sqlplusplus.commands.describe import describe_table
from sqlplusplus.commands.dispatcher import CommandDispatcher

__all__ = [
    "CONTINUE_COMMAND",
    "DESCRIBE_PREFIX",
    "EXIT_COMMAND",
    "META_COMMANDS",
    "Command",
    "CommandKind",
    "parse_command",
    "describe_table",
    "CommandDispatcher",
]
