"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, Direction


class CharStreamError(Exception):
    """Base exception for all charstream errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CharStreamError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class OutOfBoundsError(CharStreamError):
    """A step or read would leave the valid character range.

    Always recoverable: the caller may step the other way, stop, or treat
    the error as end of input. The cursor is left in a consistent state.

    Attributes:
        direction: Direction of the failed attempt
        position: Cursor position after the failure

    Example:
        >>> stream = CharStream("a")
        >>> stream.next()
        'a'
        >>> try:
        ...     stream.next()
        ... except OutOfBoundsError as e:
        ...     print(e.direction, e.position)
        forward 1
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        direction: Direction = Direction.NONE,
        position: int | None = None,
    ) -> None:
        """Initialize OutOfBoundsError.

        Args:
            message: Error message string OR Diagnostic object
            direction: Direction of the failed attempt
            position: Cursor position after the failure
        """
        super().__init__(message)
        self.direction = direction
        self.position = position
