"""Traced wrapper around a :mod:`sqlite3` connection."""

import sqlite3
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Union

from reqidlog.exceptions import NotFoundError
from reqidlog.tracing import trace_query

if TYPE_CHECKING:
    from reqidlog.logger import RequestScopedLogger

__all__ = ("TracedConnection",)

Parameters = Union[Sequence[Any], Mapping[str, Any]]


class TracedConnection:
    """Run statements on a SQLite connection and trace each one.

    ``ctx`` is passed straight through to the logger's request id getter.
    """

    __slots__ = ("connection", "logger")

    def __init__(self, connection: sqlite3.Connection, logger: "RequestScopedLogger") -> None:
        self.connection = connection
        self.logger = logger

    def execute(self, ctx: Any, sql: str, parameters: Parameters = ()) -> sqlite3.Cursor:
        with trace_query(self.logger, ctx, sql) as query:
            cursor = self.connection.execute(sql, parameters)
            query.rows_affected = cursor.rowcount
        return cursor

    def execute_many(self, ctx: Any, sql: str, seq_of_parameters: "Iterable[Parameters]") -> sqlite3.Cursor:
        with trace_query(self.logger, ctx, sql) as query:
            cursor = self.connection.executemany(sql, seq_of_parameters)
            query.rows_affected = cursor.rowcount
        return cursor

    def select_one(self, ctx: Any, sql: str, parameters: Parameters = ()) -> Any:
        """Fetch the first matching row.

        Raises:
            NotFoundError: If the query matched nothing.
        """
        with trace_query(self.logger, ctx, sql) as query:
            row = self.connection.execute(sql, parameters).fetchone()
            if row is None:
                raise NotFoundError
            query.rows_affected = 1
        return row

    def commit(self) -> None:
        self.connection.commit()

    def rollback(self) -> None:
        self.connection.rollback()

    def close(self) -> None:
        self.connection.close()
