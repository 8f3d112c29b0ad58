"""Structural protocol for bidirectional character iterators.

Python 3.13+.
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable

__all__ = ["BidirectionalIterator"]


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
@runtime_checkable
class BidirectionalIterator(Protocol):
    """Cursor that can step both ways over a sequence of characters.

    Implementations raise OutOfBoundsError when a step or read leaves the
    text. The peek_* methods commit the step and return the cursor itself
    for chaining.
    """

    def next(self) -> str:
        """Step forward and return the character now under the cursor."""
        ...

    def prev(self) -> str:
        """Step backward and return the character now under the cursor."""
        ...

    def peek_next(self) -> Self:
        """Step forward and return the cursor."""
        ...

    def peek_prev(self) -> Self:
        """Step backward and return the cursor."""
        ...

    def value(self) -> str:
        """Return the character under the cursor without moving."""
        ...
