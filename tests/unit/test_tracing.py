"""Unit tests for the trace_query context manager."""

import os

import pytest

from reqidlog import LoggerConfig, LogLevel, NotFoundError, QueryTrace, new, trace_query
from tests.conftest import FakeClock, RecordingWriter


def test_query_trace_defaults() -> None:
    assert QueryTrace().result() == ("", -1)


def test_trace_query_success(writer: RecordingWriter, clock: FakeClock) -> None:
    logger = new(writer, LoggerConfig(level=LogLevel.INFO), lambda ctx: ctx, clock=clock)
    clock.now = 1_000
    with trace_query(logger, "req-1", "INSERT INTO t VALUES (1)") as query:
        clock.now = 3_001_000
        query.rows_affected = 1

    fmt, args = writer.calls[0]
    assert fmt == logger.templates.trace
    assert args[1:] == (3.0, 1, "INSERT INTO t VALUES (1)", "req-1")


def test_trace_query_sql_set_inside_block(writer: RecordingWriter, clock: FakeClock) -> None:
    logger = new(writer, LoggerConfig(level=LogLevel.INFO), clock=clock)
    with trace_query(logger, None) as query:
        query.sql = "SELECT 2"
    assert writer.calls[0][1][3] == "SELECT 2"
    assert writer.calls[0][1][2] == "-"


def test_trace_query_reraises_and_logs_error(writer: RecordingWriter, clock: FakeClock) -> None:
    logger = new(writer, LoggerConfig(level=LogLevel.ERROR), clock=clock)
    err = RuntimeError("disk I/O error")
    with pytest.raises(RuntimeError) as exc_info, trace_query(logger, None, "DELETE FROM t"):
        raise err

    assert exc_info.value is err
    fmt, args = writer.calls[0]
    assert fmt == logger.templates.trace_error
    assert args[1] is err
    assert args[4] == "DELETE FROM t"


def test_trace_query_ignored_not_found_still_reraises(writer: RecordingWriter, clock: FakeClock) -> None:
    logger = new(writer, LoggerConfig(level=LogLevel.ERROR, ignore_record_not_found_error=True), clock=clock)
    with pytest.raises(NotFoundError), trace_query(logger, None, "SELECT 1"):
        raise NotFoundError
    assert writer.calls == []


def test_trace_query_location_points_at_with_block(writer: RecordingWriter, clock: FakeClock) -> None:
    logger = new(writer, LoggerConfig(level=LogLevel.INFO), clock=clock)
    with trace_query(logger, None, "SELECT 1"):
        pass
    filename = writer.calls[0][1][0].rsplit(":", 1)[0]
    assert os.path.basename(filename) == "test_tracing.py"
