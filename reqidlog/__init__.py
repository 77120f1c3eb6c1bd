"""reqidlog: request-scoped SQL query logging."""

from reqidlog import adapters, exceptions, utils
from reqidlog.config import DEFAULT_CONFIG, LoggerConfig, LogLevel
from reqidlog.exceptions import ImproperConfigurationError, NotFoundError, ReqIdLogError, is_record_not_found
from reqidlog.logger import (
    LogTemplates,
    RequestScopedLogger,
    always_empty_req_id,
    build_templates,
    correlation_id_req_id,
    new,
)
from reqidlog.protocols import ReqIdGetter, ResultProducer, Writer
from reqidlog.tracing import QueryTrace, trace_query
from reqidlog.writers import LoggingWriter, StreamWriter

__version__ = "0.1.0"

__all__ = (
    "DEFAULT_CONFIG",
    "ImproperConfigurationError",
    "LogLevel",
    "LogTemplates",
    "LoggerConfig",
    "LoggingWriter",
    "NotFoundError",
    "QueryTrace",
    "ReqIdGetter",
    "ReqIdLogError",
    "RequestScopedLogger",
    "ResultProducer",
    "StreamWriter",
    "Writer",
    "__version__",
    "adapters",
    "always_empty_req_id",
    "build_templates",
    "correlation_id_req_id",
    "exceptions",
    "is_record_not_found",
    "new",
    "trace_query",
    "utils",
)
