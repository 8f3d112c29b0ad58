"""Bidirectional character cursor.

CharStream owns an immutable ``str`` and a single mutable state cell. The
caller can hold one shared reference and navigate through it: only the
state changes, the text never does.

Navigation contract:
    - next() / peek_next(): a failing forward step moves the cursor to the
      exhausted state, and every further forward step fails the same way.
    - prev() / peek_prev(): a failing backward step leaves the cursor where
      it was. prev() from the first character stays on the first character.
    - peek_next() / peek_prev() COMMIT the step. They differ from next() /
      prev() only in returning the stream itself, for chaining with value().
    - look_next() / look_prev() are the non-destructive variants.

Unit of iteration is one Unicode code point (one ``str`` element).

Thread Safety:
    Not thread-safe. Navigation from several threads is undefined.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from charstream.constants import DEFAULT_ENCODING
from charstream.diagnostics import Direction, ErrorTemplate, OutOfBoundsError
from charstream.state import (
    At,
    CursorState,
    Exhausted,
    Unstarted,
    position_of,
    step_backward,
    step_forward,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ["CharStream"]

logger = logging.getLogger(__name__)


class CharStream:
    """Bidirectional cursor over the characters of a string.

    Example:
        >>> stream = CharStream("foobar")
        >>> stream.next()
        'f'
        >>> stream.next()
        'o'
        >>> stream.prev()
        'f'
        >>> stream.peek_next().value()
        'o'
        >>> stream.position
        1
    """

    __slots__ = ("_state", "_text")

    def __init__(self, text: str) -> None:
        """Create a cursor positioned before the first character.

        Args:
            text: Source text (one step per code point)
        """
        self._text = text
        self._state: CursorState = Unstarted()

    @classmethod
    def from_bytes(cls, data: bytes, encoding: str = DEFAULT_ENCODING) -> CharStream:
        """Decode bytes and create a cursor over the resulting text.

        Args:
            data: Encoded text
            encoding: Codec name (default: UTF-8)

        Returns:
            New CharStream in the unstarted state

        Raises:
            UnicodeDecodeError: If data is not valid in the given encoding
        """
        return cls(data.decode(encoding))

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """The underlying text."""
        return self._text

    @property
    def state(self) -> CursorState:
        """Current state: Unstarted(), At(index) or Exhausted()."""
        return self._state

    @property
    def position(self) -> int:
        """Integer position: -1 before the start, len(text) past the end."""
        return position_of(self._state, len(self._text))

    @property
    def is_started(self) -> bool:
        """True once the cursor has left the unstarted state."""
        return not isinstance(self._state, Unstarted)

    @property
    def is_exhausted(self) -> bool:
        """True if the cursor has stepped off the end of the text."""
        return isinstance(self._state, Exhausted)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next(self) -> str:
        """Advance by one character and return it.

        Returns:
            Character now under the cursor

        Raises:
            OutOfBoundsError: If the step would go past the end. The cursor
                is left exhausted.
        """
        return self._char_at(self._forward())

    def prev(self) -> str:
        """Retreat by one character and return it.

        Returns:
            Character now under the cursor

        Raises:
            OutOfBoundsError: If there is no earlier character. The cursor
                does not move.
        """
        return self._char_at(self._backward())

    def peek_next(self) -> Self:
        """Advance by one character and return this stream.

        Commits the step, exactly like next().

        Raises:
            OutOfBoundsError: If the step would go past the end
        """
        self._forward()
        return self

    def peek_prev(self) -> Self:
        """Retreat by one character and return this stream.

        Commits the step, exactly like prev().

        Raises:
            OutOfBoundsError: If there is no earlier character
        """
        self._backward()
        return self

    def value(self) -> str:
        """Return the character under the cursor without moving.

        Raises:
            OutOfBoundsError: If the cursor is unstarted or exhausted
        """
        if isinstance(self._state, At):
            return self._char_at(self._state)
        position = self.position
        logger.debug("value() called while unpositioned at position %d", position)
        raise OutOfBoundsError(
            ErrorTemplate.value_unpositioned(position, len(self._text)),
            direction=Direction.NONE,
            position=position,
        )

    def look_next(self) -> str | None:
        """Return the character next() would return, without moving.

        Returns:
            Next character, or None if next() would fail
        """
        state = step_forward(self._state, len(self._text))
        if isinstance(state, At):
            return self._text[state.index]
        return None

    def look_prev(self) -> str | None:
        """Return the character prev() would return, without moving.

        Returns:
            Previous character, or None if prev() would fail
        """
        state = step_backward(self._state, len(self._text))
        if state is None:
            return None
        return self._text[state.index]

    # ------------------------------------------------------------------
    # Transition helpers
    # ------------------------------------------------------------------

    def _forward(self) -> At:
        length = len(self._text)
        state = step_forward(self._state, length)
        # Exhausted is committed even though the step fails
        self._state = state
        if isinstance(state, At):
            return state
        logger.debug("Forward step past end of %d-character text", length)
        raise OutOfBoundsError(
            ErrorTemplate.step_past_end(length, length),
            direction=Direction.FORWARD,
            position=length,
        )

    def _backward(self) -> At:
        length = len(self._text)
        state = step_backward(self._state, length)
        if state is None:
            position = self.position
            logger.debug("Backward step before start at position %d", position)
            raise OutOfBoundsError(
                ErrorTemplate.step_before_start(position, length),
                direction=Direction.BACKWARD,
                position=position,
            )
        self._state = state
        return state

    def _char_at(self, state: At) -> str:
        return self._text[state.index]

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._text)

    def __iter__(self) -> Iterator[str]:
        """Yield the remaining characters, stepping forward until exhausted.

        Consumes the stream: afterwards it is in the exhausted state.
        """
        while True:
            try:
                yield self.next()
            except OutOfBoundsError:
                return

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharStream):
            return NotImplemented
        return self._text == other._text and self._state == other._state

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(text={self._text!r}, state={self._state!r})"
