"""Call-site introspection for log lines."""

import contextlib
import os
import sys
from typing import Optional

__all__ = ("file_with_line_num",)

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep
_SKIPPED_FILES = frozenset({os.path.abspath(contextlib.__file__)})


def file_with_line_num(skip_dirs: "Optional[tuple[str, ...]]" = None) -> str:
    """Return ``"file:line"`` of the nearest frame outside this package.

    Frames belonging to ``contextlib`` are skipped as well so that traces emitted
    from context managers point at the ``with`` block.

    Args:
        skip_dirs: Extra directory prefixes to treat as internal.

    Returns:
        The caller location, or an empty string when the whole stack is internal.
    """
    internal = (_PACKAGE_DIR, *(os.path.abspath(d) + os.sep for d in skip_dirs or ()))
    frame = sys._getframe(1)  # noqa: SLF001
    while frame is not None:
        filename = frame.f_code.co_filename
        path = os.path.abspath(filename)
        if not path.startswith(internal) and path not in _SKIPPED_FILES:
            return f"{filename}:{frame.f_lineno}"
        frame = frame.f_back  # type: ignore[assignment]
    return ""
