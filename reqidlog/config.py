"""Configuration objects for request-scoped query logging."""

from dataclasses import dataclass, replace
from datetime import timedelta
from enum import IntEnum
from typing import Any, Optional, Union

from sqlglot import Dialect

from reqidlog.exceptions import ImproperConfigurationError

__all__ = ("DEFAULT_CONFIG", "LogLevel", "LoggerConfig")


class LogLevel(IntEnum):
    """Ordered log levels; higher values let more through."""

    SILENT = 1
    ERROR = 2
    WARN = 3
    INFO = 4

    @classmethod
    def parse(cls, value: "Union[LogLevel, int, str]") -> "LogLevel":
        """Coerce a level name or number into a :class:`LogLevel`.

        Args:
            value: A member, its integer value, or a case-insensitive name.

        Raises:
            ImproperConfigurationError: If the value names no level.

        Returns:
            The matching level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARNING":
                name = "WARN"
            if name in cls.__members__:
                return cls[name]
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        msg = f"Unknown log level: {value!r}"
        raise ImproperConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class LoggerConfig:
    """Level, slow-query threshold and rendering switches for a query logger.

    Instances are frozen; use :meth:`replace` to derive a changed copy. The bare
    constructor gives plain output, while :data:`DEFAULT_CONFIG` turns colors on
    for terminal use.
    """

    level: LogLevel = LogLevel.WARN
    slow_threshold: timedelta = timedelta(milliseconds=200)
    colorful: bool = False
    ignore_record_not_found_error: bool = False
    mask_literals: bool = False
    dialect: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel.parse(self.level))
        threshold: Any = self.slow_threshold
        if isinstance(threshold, (int, float)) and not isinstance(threshold, bool):
            threshold = timedelta(seconds=threshold)
        if not isinstance(threshold, timedelta):
            msg = f"slow_threshold must be a timedelta or seconds, got {type(threshold).__name__}"
            raise ImproperConfigurationError(msg)
        if threshold < timedelta(0):
            msg = "slow_threshold must not be negative"
            raise ImproperConfigurationError(msg)
        object.__setattr__(self, "slow_threshold", threshold)
        if self.dialect is not None:
            try:
                Dialect.get_or_raise(self.dialect)
            except ValueError as e:
                msg = f"Unknown SQL dialect: {self.dialect!r}"
                raise ImproperConfigurationError(msg) from e

    @property
    def slow_threshold_ns(self) -> int:
        """Slow-query threshold in nanoseconds; zero means disabled."""

        return (self.slow_threshold // timedelta(microseconds=1)) * 1000

    def copy(self) -> "LoggerConfig":
        """Return an equal, independent copy."""

        return LoggerConfig(
            level=self.level,
            slow_threshold=self.slow_threshold,
            colorful=self.colorful,
            ignore_record_not_found_error=self.ignore_record_not_found_error,
            mask_literals=self.mask_literals,
            dialect=self.dialect,
        )

    def replace(self, **changes: Any) -> "LoggerConfig":
        """Return a copy with the given fields swapped."""

        return replace(self, **changes)


DEFAULT_CONFIG = LoggerConfig(level=LogLevel.WARN, slow_threshold=timedelta(milliseconds=200), colorful=True)
