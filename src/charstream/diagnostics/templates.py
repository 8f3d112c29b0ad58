"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def step_past_end(position: int, length: int) -> Diagnostic:
        """Forward step from the last character or from the exhausted state.

        Args:
            position: Position the cursor was left at (always ``length``)
            length: Number of characters in the text

        Returns:
            Diagnostic for STEP_PAST_END
        """
        return Diagnostic(
            code=DiagnosticCode.STEP_PAST_END,
            message="Cannot step forward past the end of the text",
            hint="Treat this as end of input or step backward",
            position=position,
            length=length,
        )

    @staticmethod
    def step_before_start(position: int, length: int) -> Diagnostic:
        """Backward step from the first character or before any forward step.

        Args:
            position: Position the cursor was left at (unchanged)
            length: Number of characters in the text

        Returns:
            Diagnostic for STEP_BEFORE_START
        """
        return Diagnostic(
            code=DiagnosticCode.STEP_BEFORE_START,
            message="Cannot step backward before the start of the text",
            hint="Step forward instead",
            position=position,
            length=length,
        )

    @staticmethod
    def value_unpositioned(position: int, length: int) -> Diagnostic:
        """Read of the current character while no character is under the cursor.

        Args:
            position: Current position (-1 before the first step, or ``length``)
            length: Number of characters in the text

        Returns:
            Diagnostic for VALUE_UNPOSITIONED
        """
        if position < 0:
            msg = "No current character: the cursor has not been advanced yet"
            hint = "Call next() or peek_next() before reading the value"
        else:
            msg = "No current character: the cursor is past the end of the text"
            hint = "Call prev() or peek_prev() to move back onto the text"
        return Diagnostic(
            code=DiagnosticCode.VALUE_UNPOSITIONED,
            message=msg,
            hint=hint,
            position=position,
            length=length,
        )
