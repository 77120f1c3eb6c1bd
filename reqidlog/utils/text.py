"""Text helpers for rendering durations."""

from datetime import timedelta
from typing import Union

__all__ = ("format_duration", "format_elapsed_ms", "to_nanoseconds")

_MICROSECOND = 1_000
_MILLISECOND = 1_000_000
_SECOND = 1_000_000_000
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE


def to_nanoseconds(value: "Union[timedelta, int]") -> int:
    """Convert a timedelta (or a nanosecond count) to integer nanoseconds."""
    if isinstance(value, timedelta):
        return (value // timedelta(microseconds=1)) * _MICROSECOND
    return int(value)


def _trim(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(value: "Union[timedelta, int]") -> str:
    """Render a duration in compact form.

    Sub-second values use a single unit (``750ns``, ``1.5µs``, ``200ms``);
    longer ones are split into hours, minutes and seconds (``1.5s``, ``1m30s``, ``2h0m0s``).

    Args:
        value: Duration as a timedelta or integer nanoseconds.

    Returns:
        The formatted duration.
    """
    ns = to_nanoseconds(value)
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns == 0:
        return "0s"
    if ns < _MICROSECOND:
        return f"{sign}{ns}ns"
    if ns < _MILLISECOND:
        return f"{sign}{_trim(ns, _MICROSECOND)}µs"
    if ns < _SECOND:
        return f"{sign}{_trim(ns, _MILLISECOND)}ms"
    hours, ns = divmod(ns, _HOUR)
    minutes, ns = divmod(ns, _MINUTE)
    seconds = _trim(ns, _SECOND)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def format_elapsed_ms(elapsed_ns: int) -> float:
    """Elapsed nanoseconds as fractional milliseconds."""
    return elapsed_ns / 1e6
