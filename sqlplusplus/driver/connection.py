# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""SQLAlchemy-backed statement, column and value provider.

The REPL core talks to the database only through this module:

- DatabaseConnection: opens the connection and prepares statements
- Statement: execute, row advance, positional column reads

Supports any backend SQLAlchemy has a dialect for:
- Oracle: oracle+oracledb://host:1521/?service_name=XE
- PostgreSQL: postgresql://host:5432/db
- SQLite: sqlite:///path/to/file.db or sqlite:///:memory:
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import String, create_engine, text
from sqlalchemy.engine import Connection, CursorResult, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from sqlplusplus.driver.errors import DatabaseError, translate
from sqlplusplus.driver.types import CellValue, ColumnDescriptor, NativeType

logger = logging.getLogger(__name__)

# Catalog queries for .describe, one bound parameter each.
# Columns: Name, Null? (Y/N), Type rendered as type(length).
ORACLE_DESCRIBE_QUERY = (
    'select column_name as "Name", '
    'nullable as "Null?", '
    "concat(concat(concat(data_type,'('),data_length),')') as \"Type\" "
    "from all_tab_columns where table_name = :table_name"
)

SQLITE_DESCRIBE_QUERY = (
    'select name as "Name", '
    "case when \"notnull\" then 'N' else 'Y' end as \"Null?\", "
    'type as "Type" '
    "from pragma_table_info(:table_name) order by cid"
)

INFORMATION_SCHEMA_DESCRIBE_QUERY = (
    'select column_name as "Name", '
    "case when is_nullable = 'NO' then 'N' else 'Y' end as \"Null?\", "
    "concat(data_type, '(', coalesce(character_maximum_length, numeric_precision), ')') "
    'as "Type" '
    "from information_schema.columns where table_name = :table_name "
    "order by ordinal_position"
)

DESCRIBE_QUERIES = {
    "oracle": ORACLE_DESCRIBE_QUERY,
    "sqlite": SQLITE_DESCRIBE_QUERY,
}

DESCRIBE_COLUMNS = ("Name", "Null?", "Type")


class Statement:
    """A prepared statement and, once executed, its open result set.

    Column positions are 1-based and fixed once the statement has executed.
    """

    def __init__(
        self,
        connection: Connection,
        sql: str,
        executable: Any = None,
        params: Optional[dict[str, Any]] = None,
    ):
        self.sql = sql
        self._connection = connection
        self._executable = executable
        self._params = params or {}
        self._result: Optional[CursorResult] = None
        self._row: Optional[tuple] = None
        self._columns: list[ColumnDescriptor] = []

    @property
    def parameters(self) -> dict[str, Any]:
        return dict(self._params)

    @property
    def columns(self) -> list[ColumnDescriptor]:
        return list(self._columns)

    @property
    def num_columns(self) -> int:
        return len(self._columns)

    def execute(self) -> None:
        """Run the statement and describe its result columns."""
        logger.debug("Executing: %s", self.sql)
        try:
            if self._executable is not None:
                result = self._connection.execute(self._executable, self._params)
            else:
                result = self._connection.exec_driver_sql(self.sql)
        except SQLAlchemyError as e:
            raise translate("execute", e) from e

        self._result = result
        self._columns = self._describe(result)
        logger.debug("Statement returned %d columns", len(self._columns))

    def _describe(self, result: CursorResult) -> list[ColumnDescriptor]:
        if not result.returns_rows:
            return []
        declared = {}
        selected = getattr(self._executable, "selected_columns", None)
        if selected is not None:
            declared = {col.name: NativeType.of_sql_type(col.type) for col in selected}
        return [
            ColumnDescriptor(name=name, native_type=declared.get(name, NativeType.OTHER))
            for name in result.keys()
        ]

    def fetch(self) -> bool:
        """Advance to the next row. Returns False once the result set is exhausted."""
        if self._result is None:
            raise DatabaseError("fetch", "statement has not been executed")
        if not self._result.returns_rows:
            self._row = None
            return False
        try:
            row = self._result.fetchone()
        except SQLAlchemyError as e:
            raise translate("fetch", e) from e
        self._row = tuple(row) if row is not None else None
        return self._row is not None

    def column_value(self, position: int) -> CellValue:
        """Read column ``position`` (1-based) of the current row."""
        if self._row is None:
            raise DatabaseError("fetch", "no current row")
        if not 1 <= position <= len(self._row):
            raise DatabaseError("fetch", f"column position {position} out of range")
        declared = self._columns[position - 1].native_type
        return CellValue.from_value(self._row[position - 1], declared)

    def close(self) -> None:
        if self._result is not None:
            self._result.close()
            logger.debug("Closed statement: %s", self.sql)
        self._row = None


class DatabaseConnection:
    """A single open connection to the database."""

    def __init__(self, engine: Engine, connection: Connection):
        self.engine = engine
        self._connection = connection

    @classmethod
    def connect(
        cls,
        url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> "DatabaseConnection":
        """Open a connection, applying credentials to the URL when given.

        Raises:
            DatabaseError: with context ``connect`` on any failure
        """
        try:
            sa_url = make_url(url)
            if username:
                sa_url = sa_url.set(username=username)
            if password:
                sa_url = sa_url.set(password=password)
            logger.debug("Connecting to %s", sa_url.render_as_string(hide_password=True))
            engine = create_engine(sa_url)
            connection = engine.connect().execution_options(isolation_level="AUTOCOMMIT")
        except SQLAlchemyError as e:
            raise translate("connect", e) from e
        except ImportError as e:
            # DBAPI module for the dialect is not installed
            raise DatabaseError("connect", str(e)) from e
        return cls(engine, connection)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def prepare(self, sql: str) -> Statement:
        if not sql.strip():
            raise DatabaseError("prepare", "empty statement")
        return Statement(self._connection, sql)

    def prepare_describe(self, table_name: str) -> Statement:
        """Prepare the catalog query listing the columns of ``table_name``."""
        query = DESCRIBE_QUERIES.get(self.dialect, INFORMATION_SCHEMA_DESCRIBE_QUERY)
        typed_columns = {name: String for name in DESCRIBE_COLUMNS}
        executable = text(query).columns(**typed_columns)
        return Statement(
            self._connection,
            query,
            executable=executable,
            params={"table_name": table_name},
        )

    def close(self) -> None:
        self._connection.close()
        self.engine.dispose()
        logger.debug("Connection closed")
