"""Literal masking for SQL text before it reaches a log line."""

from typing import Optional

import sqlglot
from sqlglot import exp
from sqlglot.errors import ParseError, TokenError

from reqidlog.utils.logging import get_logger

__all__ = ("mask_literals",)

logger = get_logger("redaction")


def mask_literals(sql: str, dialect: "Optional[str]" = None) -> str:
    """Replace every literal in ``sql`` with a ``?`` placeholder.

    Args:
        sql: SQL text to redact.
        dialect: sqlglot dialect used for parsing and rendering.

    Returns:
        The redacted SQL, or the original text when it cannot be parsed.
    """
    if not sql or not sql.strip():
        return sql

    try:
        parsed = sqlglot.parse_one(sql, read=dialect)
    except (ParseError, TokenError) as e:
        logger.warning("Failed to parse SQL for literal masking: %s", str(e)[:100])
        return sql

    for literal in list(parsed.find_all(exp.Literal)):
        literal.replace(exp.Placeholder())
    return parsed.sql(dialect=dialect)
