"""
Block classification and plain-text extraction.

Classification is presence based: a block containing an <h1> or </h1>
tag anywhere is a level-1 heading, even when the heading tag is nested
inside other markup. <h1> wins over <h2>; anything else is a paragraph.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from services.docs_api.app.compiler.entities import decode_entities
from services.docs_api.app.compiler.operations import HeadingStyle
from services.docs_api.app.compiler.segmenter import RawBlock


class BlockKind(str, Enum):
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    PARAGRAPH = "paragraph"

    @property
    def heading_style(self) -> Optional[HeadingStyle]:
        return _HEADING_STYLES.get(self)


_HEADING_STYLES = {
    BlockKind.HEADING1: HeadingStyle.HEADING_1,
    BlockKind.HEADING2: HeadingStyle.HEADING_2,
}

# Checked in order; first match wins.
_HEADING_PRECEDENCE = (
    ("h1", BlockKind.HEADING1),
    ("h2", BlockKind.HEADING2),
)


@dataclass(frozen=True)
class ClassifiedBlock:
    kind: BlockKind
    text: str

    @property
    def is_heading(self) -> bool:
        return self.kind is not BlockKind.PARAGRAPH


def detect_kind(block: RawBlock) -> BlockKind:
    for tag_name, kind in _HEADING_PRECEDENCE:
        if any(t.is_named(tag_name) for t in block.tokens):
            return kind
    return BlockKind.PARAGRAPH


def extract_text(block: RawBlock) -> str:
    """Drop every tag span, then decode entities and trim."""
    text = "".join(t.raw for t in block.tokens if not t.is_tag)
    return decode_entities(text).strip()


def classify(block: RawBlock) -> ClassifiedBlock:
    return ClassifiedBlock(kind=detect_kind(block), text=extract_text(block))
