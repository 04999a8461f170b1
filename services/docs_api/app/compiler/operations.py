"""
Edit operations understood by the Google Docs batchUpdate endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Sequence, Union


class HeadingStyle(str, Enum):
    HEADING_1 = "HEADING_1"
    HEADING_2 = "HEADING_2"


@dataclass(frozen=True)
class InsertText:
    location: int
    text: str

    def to_request(self) -> Dict[str, Any]:
        return {
            "insertText": {
                "location": {"index": self.location},
                "text": self.text,
            }
        }


@dataclass(frozen=True)
class UpdateParagraphStyle:
    """Applies a named style to the half-open range [start, end)."""

    start: int
    end: int
    style: HeadingStyle

    def to_request(self) -> Dict[str, Any]:
        return {
            "updateParagraphStyle": {
                "range": {
                    "startIndex": self.start,
                    "endIndex": self.end,
                },
                "paragraphStyle": {
                    "namedStyleType": self.style.value,
                },
                "fields": "namedStyleType",
            }
        }


Operation = Union[InsertText, UpdateParagraphStyle]


def to_requests(operations: Sequence[Operation]) -> List[Dict[str, Any]]:
    """Wire form of an operation list, order preserved."""
    return [op.to_request() for op in operations]
