"""
Turns classified blocks into the ordered edit script.
"""

from __future__ import annotations

from typing import Iterable, List

from services.docs_api.app.compiler.classifier import ClassifiedBlock
from services.docs_api.app.compiler.index_tracker import IndexTracker, utf16_len
from services.docs_api.app.compiler.operations import (
    InsertText,
    Operation,
    UpdateParagraphStyle,
)


def emit_operations(blocks: Iterable[ClassifiedBlock]) -> List[Operation]:
    """
    One InsertText per block, followed directly by an UpdateParagraphStyle
    over the inserted range for headings. Every block ends with "\\n".
    """
    tracker = IndexTracker()
    operations: List[Operation] = []

    for block in blocks:
        start, end = tracker.reserve(utf16_len(block.text))
        operations.append(InsertText(location=start, text=block.text + "\n"))

        style = block.kind.heading_style
        if style is not None:
            operations.append(UpdateParagraphStyle(start=start, end=end, style=style))

    return operations
