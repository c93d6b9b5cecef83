"""Terminal color helpers for compact error output.

ANSI colors with TTY detection and NO_COLOR / FORCE_COLOR support. Only
used by ``QuireError.format_compact()``; exception messages themselves
(``str(exc)``) are always plain text.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

_COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "green": "\033[32m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
}

ColorName = Literal["reset", "bold", "green", "bright_red", "bright_green"]

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _should_use_colors() -> bool:
    """Check if the terminal supports colors and the user allows them.

    Respects FORCE_COLOR (wins), then NO_COLOR (https://no-color.org/),
    then falls back to ``sys.stdout.isatty()``.
    """
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _should_use_colors()


def supports_color() -> bool:
    """Whether colorized output is enabled for this process."""
    return _USE_COLORS


def colorize(text: str, *colors: ColorName) -> str:
    """Wrap ``text`` in the given ANSI colors when colors are enabled."""
    if not _USE_COLORS or not colors:
        return text
    prefix = "".join(_COLORS.get(color, "") for color in colors)
    if not prefix:
        return text
    return f"{prefix}{text}{_COLORS['reset']}"


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return _ANSI_ESCAPE.sub("", text)


def error_code(text: str) -> str:
    return colorize(text, "bright_red", "bold")


def hint(text: str) -> str:
    return colorize(text, "green")


def suggestion(text: str) -> str:
    return colorize(text, "bright_green", "bold")


def format_error_header(code: str | None, message: str) -> str:
    """Format an error header, prefixed with its code when there is one.

    Example:
        >>> format_error_header("Q-RUN-001", "No inner block bound")
        'Q-RUN-001: No inner block bound'  # without colors

    """
    if code:
        return f"{error_code(code)}: {message}"
    return message
