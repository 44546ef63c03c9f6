# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Command-line interface for SQL++."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from sqlplusplus import __version__
from sqlplusplus.core.config import ClientConfig
from sqlplusplus.driver.connection import DatabaseConnection
from sqlplusplus.driver.errors import DatabaseError
from sqlplusplus.render import ResultRenderer
from sqlplusplus.repl.history import LineHistory
from sqlplusplus.repl.reader import PASSWORD_PROMPT, LineReader, create_line_reader
from sqlplusplus.session import Session

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _enable_debug_logging() -> Path:
    # Write debug logs to file (keeps the terminal clean)
    log_file = Path(".sqlplusplus/debug.log")
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))
    logging.getLogger("sqlplusplus").addHandler(file_handler)
    logging.getLogger("sqlplusplus").setLevel(logging.DEBUG)
    return log_file


def read_password(reader: LineReader) -> str:
    """Prompt for the password with masked input."""
    with reader.masked():
        password = reader.read_line(PASSWORD_PROMPT)
    return password or ""


def _load_history(history: LineHistory, path: Optional[Path]) -> None:
    if path is None:
        return
    try:
        history.load(path)
    except OSError as e:
        logger.warning("Could not read history file %s: %s", path, e)


def _save_history(history: LineHistory, path: Optional[Path]) -> None:
    if path is None:
        return
    try:
        history.save(path)
    except OSError as e:
        err_console.print(f"[yellow]Could not save history to {path}:[/yellow] {e}")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="sqlplusplus")
@click.option(
    "--connectionString", "-c", "connection_string",
    help="SQLAlchemy URL of the database to connect to.",
)
@click.option(
    "--username", "-u",
    help="Username to authenticate with.",
)
@click.option(
    "--password", "-p",
    help="Password to authenticate with. Prompted for (masked) when omitted.",
)
@click.option(
    "--historyFile", "history_file",
    type=click.Path(dir_okay=False),
    help="History file path. Defaults to $HOME/.sqlplusplus_history.",
)
@click.option(
    "--maxHistorySize", "max_history_size",
    type=click.IntRange(min=1),
    help="Maximum number of history entries kept. Defaults to 10000.",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML config file. Command-line options take precedence.",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Write debug logs to .sqlplusplus/debug.log.",
)
def main(
    connection_string: Optional[str],
    username: Optional[str],
    password: Optional[str],
    history_file: Optional[str],
    max_history_size: Optional[int],
    config_path: Optional[str],
    debug: bool,
):
    """SQL++ - interactive SQL client with paginated, type-aware results.

    \b
    Meta-commands:
        .exit              Leave the client
        .it                Fetch the next 20 rows of the active statement
        .describe <table>  Show column names, nullability and types

    End a line with a backslash to continue the statement on the next line.

    \b
    Examples:
        sqlplusplus -c sqlite:///app.db
        sqlplusplus -c "oracle+oracledb://db:1521/?service_name=XE" -u scott
    """
    if debug:
        log_file = _enable_debug_logging()
        console.print(f"[dim]Debug logs: {log_file}[/dim]")

    try:
        cfg = ClientConfig.from_yaml(config_path) if config_path else ClientConfig()
        cfg = cfg.merged(
            connection_string=connection_string,
            username=username,
            password=password,
            history_file=history_file,
            max_history_size=max_history_size,
        )
    except Exception as e:
        err_console.print(f"[red]Config error:[/red] {e}")
        sys.exit(1)

    if not cfg.connection_string:
        raise click.UsageError("Missing option '-c' / '--connectionString'.")

    history = LineHistory(max_length=cfg.max_history_size)
    history_path = cfg.resolve_history_path()
    _load_history(history, history_path)

    reader = create_line_reader(history)
    renderer = ResultRenderer(console=console, err_console=err_console)

    if cfg.password is None:
        cfg = cfg.merged(password=read_password(reader))

    try:
        connection = DatabaseConnection.connect(
            cfg.connection_string,
            username=cfg.username,
            password=cfg.password,
        )
    except DatabaseError as e:
        renderer.show_fatal(e)
        sys.exit(1)

    session = Session(
        connection,
        reader,
        history=history,
        renderer=renderer,
        page_size=cfg.page_size,
    )
    exit_code = 0
    try:
        session.run()
    except DatabaseError as e:
        renderer.show_fatal(e)
        exit_code = 1
    finally:
        session.close()
        connection.close()
        _save_history(history, history_path)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
