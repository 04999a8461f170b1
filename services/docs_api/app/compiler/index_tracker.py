"""
Insertion cursor for a single compilation.
"""

from __future__ import annotations

from typing import Tuple

# Index 0 belongs to the document's own implicit structure.
DOCUMENT_START_INDEX = 1


def utf16_len(text: str) -> int:
    """Length in UTF-16 code units, the unit Docs API indexes count in."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


class IndexTracker:
    """
    Next free insertion position in the destination text stream.

    Construct a fresh tracker per compilation; never share one.
    """

    def __init__(self, start: int = DOCUMENT_START_INDEX) -> None:
        if start < 0:
            raise ValueError(f"cursor must be non-negative, got {start}")
        self._cursor = start

    @property
    def cursor(self) -> int:
        return self._cursor

    def reserve(self, length: int) -> Tuple[int, int]:
        """
        Return [cursor, cursor + length) for the next block and advance
        past it plus its trailing newline.
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        start = self._cursor
        end = start + length
        self._cursor = end + 1
        return start, end
