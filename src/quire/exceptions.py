"""Exceptions for quire.

Exception Hierarchy:
QuireError (base)
├── ParameterError       # Template called without its required arguments
├── NoInnerBlockError    # emit_yield() with no inner block bound
└── InvalidModeError     # Component created with an unsupported mode

All errors are raised synchronously at the point of failure and unwind the
whole render; a failing render produces no output. Errors raised by user
template code propagate unchanged.

Example:
    ```
    ParameterError: Missing template parameter 'titel' for page()
      Hint: Did you mean 'title'?
    ```

"""

from __future__ import annotations

from difflib import get_close_matches
from enum import Enum

from quire.utils import terminal


class ErrorCode(Enum):
    """Searchable error codes for quire errors.

    Format: Q-{CATEGORY}-{NUMBER}
    Categories: PAR (parameters), RUN (runtime), CFG (configuration)
    """

    MISSING_PARAMETER = "Q-PAR-001"
    NO_INNER_BLOCK = "Q-RUN-001"
    INVALID_MODE = "Q-CFG-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'parameter', 'runtime', 'config')."""
        prefix = self.value.split("-")[1]
        return {
            "PAR": "parameter",
            "RUN": "runtime",
            "CFG": "config",
        }.get(prefix, "unknown")


class QuireError(Exception):
    """Base exception for all quire errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
        hint: Optional actionable suggestion shown by ``format_compact()``.
    """

    code: ErrorCode | None = None
    hint: str | None = None

    def format_compact(self) -> str:
        """Format the error as a short, optionally colorized diagnostic.

        Format::

            Q-RUN-001: No inner block given
              Hint: Pass inner_block= to render(), or bind one with apply()

        """
        parts = [terminal.format_error_header(self.code.value if self.code else None, str(self))]
        if self.hint:
            parts.append(f"  {terminal.hint('Hint:')} {self.hint}")
        return "\n".join(parts)


class ParameterError(QuireError, TypeError):
    """A template was invoked with arguments that cannot satisfy its signature.

    Raised before the template runs, when a required positional parameter is
    not covered by the supplied arguments, or a required keyword-only
    parameter is missing from the supplied keyword arguments.

    Attributes:
        parameter: Name of the first missing parameter.
        template_name: ``__qualname__`` of the template, when known.
    """

    code = ErrorCode.MISSING_PARAMETER

    def __init__(
        self,
        parameter: str,
        template_name: str | None = None,
        *,
        supplied: frozenset[str] | None = None,
    ):
        self.parameter = parameter
        self.template_name = template_name
        message = f"Missing template parameter {parameter!r}"
        if template_name:
            message += f" for {template_name}()"
        if supplied:
            matches = get_close_matches(parameter, supplied, n=1, cutoff=0.6)
            if matches:
                self.hint = f"Did you mean {terminal.suggestion(repr(matches[0]))}?"
        super().__init__(message)


class NoInnerBlockError(QuireError):
    """``emit_yield()`` was called but no inner block is bound."""

    code = ErrorCode.NO_INNER_BLOCK
    hint = "Pass inner_block= to render(), or bind one with apply()"

    def __init__(self, message: str = "No inner block given"):
        super().__init__(message)


class InvalidModeError(QuireError, ValueError):
    """A component was created with a markup mode other than html or xml."""

    code = ErrorCode.INVALID_MODE
    hint = "Use Mode.HTML, Mode.XML, 'html' or 'xml'"

    def __init__(self, mode: object):
        self.mode = mode
        super().__init__(f"Invalid mode {mode!r}")


__all__ = [
    "ErrorCode",
    "InvalidModeError",
    "NoInnerBlockError",
    "ParameterError",
    "QuireError",
]
