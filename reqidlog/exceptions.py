from typing import Any, Optional

__all__ = ("ImproperConfigurationError", "NotFoundError", "ReqIdLogError", "is_record_not_found")


class ReqIdLogError(Exception):
    """Base exception class from which all reqidlog exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``ReqIdLogError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(ReqIdLogError):
    """Improper configuration."""


class NotFoundError(ReqIdLogError):
    """The query ran but matched no record."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "record not found"
        super().__init__(message)


def is_record_not_found(err: "Optional[BaseException]") -> bool:
    """Check whether ``err`` is, or was raised from, a :class:`NotFoundError`.

    Only explicit wrapping (``raise ... from``) is followed. An exception that was merely
    raised while handling a ``NotFoundError`` is a different failure and does not count.

    Args:
        err: The exception to classify.

    Returns:
        True if a ``NotFoundError`` appears anywhere in the chain.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, NotFoundError):
            return True
        seen.add(id(err))
        err = err.__cause__
    return False
