"""Shared constants for charstream.

Single source of truth for values used by both the state layer and the
stream API.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DEFAULT_ENCODING",
    "UNSTARTED_POSITION",
]

# ============================================================================
# POSITION VIEW
# ============================================================================

# Integer position reported before the first call to next().
# The exhausted position is len(text) and has no fixed constant.
UNSTARTED_POSITION: int = -1

# ============================================================================
# INPUT DECODING
# ============================================================================

# Encoding used by CharStream.from_bytes() when none is given.
DEFAULT_ENCODING: str = "utf-8"
