"""Cursor states and pure transition functions.

A cursor is in exactly one of three states:

    Unstarted  - before the first character (no call to next() yet)
    At(index)  - a character is under the cursor, 0 <= index < length
    Exhausted  - one past the last character

States are immutable values. Transitions return a NEW state and never touch
the text, so every rule here can be tested without a CharStream.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeAlias

from charstream.constants import UNSTARTED_POSITION

__all__ = [
    "At",
    "CursorState",
    "Exhausted",
    "Unstarted",
    "position_of",
    "step_backward",
    "step_forward",
]


@dataclass(frozen=True, slots=True)
class Unstarted:
    """Cursor has not been advanced yet."""


@dataclass(frozen=True, slots=True)
class At:
    """Cursor is on the character at ``index``.

    Attributes:
        index: Offset of the current character (0-indexed)
    """

    index: int

    def __post_init__(self) -> None:
        """Validate index is non-negative.

        Raises:
            ValueError: If index is negative
        """
        if self.index < 0:
            msg = f"At.index must be >= 0, got {self.index}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Exhausted:
    """Cursor has stepped off the end of the text."""


CursorState: TypeAlias = Unstarted | At | Exhausted


def step_forward(state: CursorState, length: int) -> CursorState:
    """Compute the state after one forward step.

    Never fails: a step off the end lands in Exhausted, and Exhausted is
    terminal for forward steps.

    Args:
        state: Current state
        length: Number of characters in the text

    Returns:
        At(index) if a character is now under the cursor, else Exhausted

    Example:
        >>> step_forward(Unstarted(), 3)
        At(index=0)
        >>> step_forward(At(2), 3)
        Exhausted()
        >>> step_forward(Unstarted(), 0)
        Exhausted()
    """
    match state:
        case Unstarted():
            candidate = 0
        case At(index=index):
            candidate = index + 1
        case Exhausted():
            return state
    if candidate >= length:
        return Exhausted()
    return At(candidate)


def step_backward(state: CursorState, length: int) -> CursorState | None:
    """Compute the state after one backward step.

    Unlike step_forward, a failed backward step does not move the cursor to
    Unstarted: the caller keeps the current state.

    Args:
        state: Current state
        length: Number of characters in the text

    Returns:
        The new At state, or None if there is no character to step back to

    Example:
        >>> step_backward(At(2), 3)
        At(index=1)
        >>> step_backward(Exhausted(), 3)
        At(index=2)
        >>> step_backward(At(0), 3) is None
        True
        >>> step_backward(Unstarted(), 3) is None
        True
    """
    match state:
        case At(index=index) if index > 0:
            return At(index - 1)
        case Exhausted() if length > 0:
            return At(length - 1)
        case _:
            return None


def position_of(state: CursorState, length: int) -> int:
    """Integer view of a state.

    Returns:
        -1 for Unstarted, the index for At, ``length`` for Exhausted
    """
    match state:
        case Unstarted():
            return UNSTARTED_POSITION
        case At(index=index):
            return index
        case Exhausted():
            return length
