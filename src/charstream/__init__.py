"""charstream - bidirectional character cursor over immutable text.

Walk a string forward and backward one code point at a time. Stepping off
either end raises OutOfBoundsError and never corrupts the cursor.

Public API:
    CharStream - The cursor (next, prev, peek_next, peek_prev, value)
    BidirectionalIterator - Structural protocol CharStream satisfies
    CursorState - Unstarted | At | Exhausted

Exceptions:
    CharStreamError - Base exception class
    OutOfBoundsError - A step or read would leave the text

Submodules:
    charstream.state - Cursor states and pure transition functions
    charstream.diagnostics - Diagnostic codes, templates, and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import CharStreamError, OutOfBoundsError
from .protocols import BidirectionalIterator
from .state import At, CursorState, Exhausted, Unstarted
from .stream import CharStream

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("charstream")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "At",
    "BidirectionalIterator",
    "CharStream",
    "CharStreamError",
    "CursorState",
    "Exhausted",
    "OutOfBoundsError",
    "Unstarted",
    "__version__",
]
