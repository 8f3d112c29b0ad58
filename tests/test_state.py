"""Tests for cursor states and transition functions."""

from __future__ import annotations

import pytest

from charstream.state import (
    At,
    Exhausted,
    Unstarted,
    position_of,
    step_backward,
    step_forward,
)


class TestAt:
    """Test the At state value."""

    def test_negative_index_rejected(self) -> None:
        """At cannot hold a negative index."""
        with pytest.raises(ValueError, match="must be >= 0"):
            At(-1)

    def test_states_are_immutable(self) -> None:
        """States are frozen dataclasses."""
        state = At(3)

        with pytest.raises(AttributeError):
            state.index = 4  # type: ignore[misc]

    def test_states_compare_by_value(self) -> None:
        """Equal indices give equal states."""
        assert At(2) == At(2)
        assert Unstarted() == Unstarted()
        assert Exhausted() != Unstarted()


class TestStepForward:
    """Test forward transitions."""

    @pytest.mark.parametrize(
        ("state", "length", "expected"),
        [
            (Unstarted(), 3, At(0)),
            (Unstarted(), 0, Exhausted()),
            (At(0), 3, At(1)),
            (At(1), 3, At(2)),
            (At(2), 3, Exhausted()),
            (Exhausted(), 3, Exhausted()),
            (Exhausted(), 0, Exhausted()),
        ],
    )
    def test_transitions(self, state: object, length: int, expected: object) -> None:
        """Each state advances to the documented successor."""
        assert step_forward(state, length) == expected  # type: ignore[arg-type]


class TestStepBackward:
    """Test backward transitions."""

    @pytest.mark.parametrize(
        ("state", "length", "expected"),
        [
            (Unstarted(), 3, None),
            (At(0), 3, None),
            (At(1), 3, At(0)),
            (At(2), 3, At(1)),
            (Exhausted(), 3, At(2)),
            (Exhausted(), 0, None),
        ],
    )
    def test_transitions(self, state: object, length: int, expected: object) -> None:
        """Each state retreats to the documented predecessor, or None."""
        assert step_backward(state, length) == expected  # type: ignore[arg-type]


class TestPositionOf:
    """Test the integer position view."""

    def test_unstarted_is_minus_one(self) -> None:
        assert position_of(Unstarted(), 5) == -1

    def test_at_is_index(self) -> None:
        assert position_of(At(3), 5) == 3

    def test_exhausted_is_length(self) -> None:
        assert position_of(Exhausted(), 5) == 5
