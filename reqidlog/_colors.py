"""ANSI escape sequences used by the colorful templates."""

__all__ = (
    "BLUE",
    "BLUE_BOLD",
    "CYAN",
    "GREEN",
    "MAGENTA",
    "MAGENTA_BOLD",
    "RED",
    "RED_BOLD",
    "RESET",
    "WHITE",
    "YELLOW",
    "YELLOW_BOLD",
)

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
BLUE_BOLD = "\033[34;1m"
MAGENTA_BOLD = "\033[35;1m"
RED_BOLD = "\033[31;1m"
YELLOW_BOLD = "\033[33;1m"
