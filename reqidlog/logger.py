"""Query logger that stamps every line with a request identifier.

The logger follows the usual database logging contract (``info``, ``warn``,
``error`` and ``trace`` for executed statements) and adds a ``req_id:`` field
whose value is pulled from the caller's context on each call.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from reqidlog import _colors as c
from reqidlog.config import DEFAULT_CONFIG, LoggerConfig, LogLevel
from reqidlog.exceptions import is_record_not_found
from reqidlog.protocols import ReqIdGetter, ResultProducer, Writer
from reqidlog.redaction import mask_literals
from reqidlog.utils.caller import file_with_line_num
from reqidlog.utils.logging import get_correlation_id
from reqidlog.utils.text import format_duration, format_elapsed_ms

__all__ = (
    "LogTemplates",
    "RequestScopedLogger",
    "always_empty_req_id",
    "build_templates",
    "correlation_id_req_id",
    "new",
)

UNKNOWN_ROWS = -1


def always_empty_req_id(ctx: Any) -> str:
    """Default getter: no request identifier."""
    return ""


def correlation_id_req_id(ctx: Any) -> str:
    """Use the correlation ID bound to the current context variable scope."""
    return get_correlation_id() or ""


@dataclass(frozen=True, slots=True)
class LogTemplates:
    """The six ``%``-style format strings a logger writes with."""

    info: str
    warn: str
    error: str
    trace: str
    trace_warn: str
    trace_error: str


def build_templates(colorful: bool) -> LogTemplates:
    """Build the template set for plain or ANSI-colored output.

    Placeholders, in order:

    - info / warn / error: caller location, request id
    - trace: caller location, elapsed ms, rows, sql, request id
    - trace_warn / trace_error: caller location, slow-query message or error,
      elapsed ms, rows, sql, request id
    """
    if not colorful:
        return LogTemplates(
            info="%s\t[info] req_id:%s ",
            warn="%s\t[warn] req_id:%s ",
            error="%s\t[error] req_id:%s ",
            trace="%s\t[%.3fms] [rows:%s] %s req_id:%s ",
            trace_warn="%s %s\t[%.3fms] [rows:%s] %s req_id:%s ",
            trace_error="%s %s\t[%.3fms] [rows:%s] %s req_id:%s ",
        )
    return LogTemplates(
        info=f"{c.GREEN}%s\t{c.RESET}{c.GREEN}[info] req_id:%s {c.RESET}",
        warn=f"{c.BLUE_BOLD}%s\t{c.RESET}{c.MAGENTA}[warn] req_id:%s {c.RESET}",
        error=f"{c.MAGENTA}%s\t{c.RESET}{c.RED}[error] req_id:%s {c.RESET}",
        trace=f"{c.GREEN}%s\t{c.RESET}{c.YELLOW}[%.3fms] {c.BLUE_BOLD}[rows:%s]{c.RESET} %s req_id:%s ",
        trace_warn=(
            f"{c.GREEN}%s {c.YELLOW}%s\t{c.RESET}{c.RED_BOLD}[%.3fms] {c.YELLOW}[rows:%s]{c.MAGENTA} %s req_id:%s {c.RESET}"
        ),
        trace_error=(
            f"{c.RED_BOLD}%s {c.MAGENTA_BOLD}%s\t{c.RESET}{c.YELLOW}[%.3fms] {c.BLUE_BOLD}[rows:%s]{c.RESET} %s req_id:%s "
        ),
    )


@dataclass(frozen=True, slots=True)
class RequestScopedLogger:
    """Immutable query logger; use :meth:`log_mode` to get a copy at another level.

    Instances are safe to share between threads and tasks. Nothing here locks;
    the writer is responsible for serializing its own output.
    """

    writer: Writer
    config: LoggerConfig
    templates: LogTemplates
    req_id_getter: ReqIdGetter = always_empty_req_id
    clock: Callable[[], int] = field(default=time.perf_counter_ns)

    @property
    def level(self) -> LogLevel:
        return self.config.level

    def log_mode(self, level: "Union[LogLevel, int, str]") -> "RequestScopedLogger":
        """Return a copy of this logger at ``level``; the receiver is left untouched."""
        return replace(self, config=self.config.replace(level=LogLevel.parse(level)))

    def info(self, ctx: Any, msg: str, *args: Any) -> None:
        if self.level >= LogLevel.INFO:
            self.writer.printf(self.templates.info + msg, file_with_line_num(), self.req_id_getter(ctx), *args)

    def warn(self, ctx: Any, msg: str, *args: Any) -> None:
        if self.level >= LogLevel.WARN:
            self.writer.printf(self.templates.warn + msg, file_with_line_num(), self.req_id_getter(ctx), *args)

    def error(self, ctx: Any, msg: str, *args: Any) -> None:
        if self.level >= LogLevel.ERROR:
            self.writer.printf(self.templates.error + msg, file_with_line_num(), self.req_id_getter(ctx), *args)

    def trace(self, ctx: Any, begin: int, fc: ResultProducer, err: "Optional[BaseException]" = None) -> None:
        """Log an executed statement.

        ``fc`` is only called when a line is actually written. At most one line is
        written, chosen in this order: error, slow query, then (at ``INFO`` only)
        the plain trace.

        Args:
            ctx: Context handed to the request id getter.
            begin: Start time, in nanoseconds from the logger's ``clock``.
            fc: Producer of ``(sql, rows_affected)``; ``-1`` rows renders as ``-``.
            err: The exception raised by the statement, if any.
        """
        level = self.level
        if level <= LogLevel.SILENT:
            return

        elapsed = self.clock() - begin
        elapsed_ms = format_elapsed_ms(elapsed)
        req_id = self.req_id_getter(ctx)
        config = self.config
        threshold = config.slow_threshold_ns

        if (
            err is not None
            and level >= LogLevel.ERROR
            and (not is_record_not_found(err) or not config.ignore_record_not_found_error)
        ):
            sql, rows = self._produce(fc)
            self.writer.printf(self.templates.trace_error, file_with_line_num(), err, elapsed_ms, rows, sql, req_id)
        elif elapsed > threshold and threshold != 0 and level >= LogLevel.WARN:
            sql, rows = self._produce(fc)
            slow_log = f"SLOW SQL >= {format_duration(threshold)}"
            self.writer.printf(self.templates.trace_warn, file_with_line_num(), slow_log, elapsed_ms, rows, sql, req_id)
        elif level == LogLevel.INFO:
            sql, rows = self._produce(fc)
            self.writer.printf(self.templates.trace, file_with_line_num(), elapsed_ms, rows, sql, req_id)

    def _produce(self, fc: ResultProducer) -> "tuple[str, Union[int, str]]":
        sql, rows = fc()
        if self.config.mask_literals:
            sql = mask_literals(sql, self.config.dialect)
        return sql, "-" if rows == UNKNOWN_ROWS else rows


def new(
    writer: Writer,
    config: "Optional[LoggerConfig]" = None,
    req_id_getter: "Optional[ReqIdGetter]" = None,
    *,
    clock: "Optional[Callable[[], int]]" = None,
) -> RequestScopedLogger:
    """Create a request-scoped query logger.

    Args:
        writer: Sink that receives the format string and its arguments.
        config: Level and rendering options; copied so later edits do not leak in.
            Defaults to :data:`~reqidlog.config.DEFAULT_CONFIG`.
        req_id_getter: Extracts the request id from the ``ctx`` passed to each call.
            Defaults to :func:`always_empty_req_id`.
        clock: Nanosecond clock used to measure elapsed time in :meth:`RequestScopedLogger.trace`.

    Returns:
        A new logger.
    """
    config = (config or DEFAULT_CONFIG).copy()
    return RequestScopedLogger(
        writer=writer,
        config=config,
        templates=build_templates(config.colorful),
        req_id_getter=req_id_getter or always_empty_req_id,
        clock=clock or time.perf_counter_ns,
    )
