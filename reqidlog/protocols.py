"""Collaborator contracts consumed by the request-scoped logger."""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from typing_extensions import TypeAlias

__all__ = ("ReqIdGetter", "ResultProducer", "Writer")


@runtime_checkable
class Writer(Protocol):
    """Sink for formatted log lines.

    Implementations must tolerate concurrent ``printf`` calls.
    """

    def printf(self, format: str, *args: Any) -> None:  # noqa: A002
        """Substitute ``args`` into ``format`` (``%`` style) and write the result."""
        ...


ReqIdGetter: TypeAlias = Callable[[Any], str]
"""Pulls a request identifier out of an execution context."""

ResultProducer: TypeAlias = Callable[[], "tuple[str, int]"]
"""Lazily yields ``(sql, rows_affected)``; ``-1`` rows means unknown."""
