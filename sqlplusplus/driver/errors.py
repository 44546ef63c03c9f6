# Copyright (c) 2025 Kenneth Stott
#
# Driver error types.

"""Errors raised at the database driver boundary."""

from __future__ import annotations

from sqlalchemy.exc import DBAPIError, SQLAlchemyError


class DatabaseError(Exception):
    """A driver failure tagged with the operation that raised it."""

    def __init__(self, context: str, message: str):
        super().__init__(message)
        self.context = context
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConnectionLostError(DatabaseError):
    """The connection was invalidated; the session cannot continue."""


def translate(context: str, exc: SQLAlchemyError) -> DatabaseError:
    """Wrap a SQLAlchemy exception in a DatabaseError for ``context``."""
    if isinstance(exc, DBAPIError):
        message = str(exc.orig) if exc.orig is not None else str(exc)
        if exc.connection_invalidated:
            return ConnectionLostError(context, message)
        return DatabaseError(context, message)
    return DatabaseError(context, str(exc))
