"""Glue for timing a statement and handing it to :meth:`RequestScopedLogger.trace`."""

from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from reqidlog.logger import RequestScopedLogger

__all__ = ("QueryTrace", "trace_query")


@dataclass(slots=True)
class QueryTrace:
    """What the traced block reports back about the statement it ran."""

    sql: str = ""
    rows_affected: int = -1

    def result(self) -> "tuple[str, int]":
        return self.sql, self.rows_affected


@contextmanager
def trace_query(logger: "RequestScopedLogger", ctx: Any, sql: str = "") -> "Generator[QueryTrace, None, None]":
    """Time the ``with`` block and trace it on exit.

    An exception escaping the block is passed to ``trace`` as the error and then
    re-raised unchanged.

    Example:
        >>> with trace_query(logger, ctx, "SELECT 1") as query:
        ...     query.rows_affected = cursor.execute(query.sql).rowcount
    """
    query = QueryTrace(sql=sql)
    begin = logger.clock()
    try:
        yield query
    except Exception as exc:
        logger.trace(ctx, begin, query.result, exc)
        raise
    logger.trace(ctx, begin, query.result)
