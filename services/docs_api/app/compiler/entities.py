"""
Character entity decoding for block text.
"""

from __future__ import annotations

from typing import Tuple

# Applied in this exact order, so "&amp;lt;" decodes all the way to "<".
ENTITY_DECODE_ORDER: Tuple[Tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
)


def decode_entities(text: str) -> str:
    for entity, literal in ENTITY_DECODE_ORDER:
        text = text.replace(entity, literal)
    return text
