"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for cursor boundary failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Direction",
]


class Direction(StrEnum):
    """Direction of the navigation attempt that produced an error.

    Inherits from ``StrEnum`` so log records and JSON output receive plain
    strings (``"forward"``) rather than the ``"Direction.FORWARD"`` repr.

    Members:
        FORWARD: next() or peek_next()
        BACKWARD: prev() or peek_prev()
        NONE: value(), which reads without moving
    """

    FORWARD = "forward"
    BACKWARD = "backward"
    NONE = "none"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Boundary errors (stepping or reading off either end)
    """

    STEP_PAST_END = 1001
    STEP_BEFORE_START = 1002
    VALUE_UNPOSITIONED = 1003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for handling the error
        position: Cursor position when the error occurred (None if unknown)
        length: Length of the underlying text (None if unknown)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    position: int | None = None
    length: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[STEP_PAST_END]: Cannot step forward past the end of the text
              --> position 6 of 6
              = help: Treat this as end of input or step backward

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
