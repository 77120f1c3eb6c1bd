"""Default :class:`~reqidlog.protocols.Writer` implementations."""

import logging
import sys
import threading
from typing import IO, Any, Optional

from reqidlog.utils.logging import get_logger

__all__ = ("LoggingWriter", "StreamWriter")


class LoggingWriter:
    """Forward formatted query lines to a stdlib logger.

    Arguments are handed to :mod:`logging` unformatted, so substitution only happens
    when a handler actually emits the record.
    """

    __slots__ = ("level", "logger")

    def __init__(self, logger: "Optional[logging.Logger]" = None, level: int = logging.INFO) -> None:
        self.logger = logger or get_logger("sql")
        self.level = level

    def printf(self, format: str, *args: Any) -> None:  # noqa: A002
        self.logger.log(self.level, format, *args)


class StreamWriter:
    """Write one formatted line per call to a text stream."""

    __slots__ = ("_lock", "prefix", "stream")

    def __init__(self, stream: "Optional[IO[str]]" = None, prefix: str = "") -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.prefix = prefix
        self._lock = threading.Lock()

    def printf(self, format: str, *args: Any) -> None:  # noqa: A002
        line = format % args if args else format
        with self._lock:
            self.stream.write(f"{self.prefix}{line}\n")
            self.stream.flush()
