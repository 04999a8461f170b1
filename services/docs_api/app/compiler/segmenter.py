"""
Block segmentation: splits a token stream at <p> / </p> boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from services.docs_api.app.compiler.tokenizer import Token

BLOCK_SEPARATOR_TAG = "p"


@dataclass(frozen=True)
class RawBlock:
    """Tokens between two paragraph boundaries, in source order."""

    tokens: Tuple[Token, ...]

    @property
    def raw(self) -> str:
        return "".join(t.raw for t in self.tokens)

    def has_content(self) -> bool:
        return bool(self.raw.strip())


def segment(tokens: Sequence[Token]) -> List[RawBlock]:
    """
    Group tokens into candidate blocks, dropping whitespace-only ones.

    Heading tags are not separators: a heading stays inside whatever
    paragraph segment surrounds it and is recognized by the classifier.
    Input with no <p> tags at all becomes a single block.
    """
    blocks: List[RawBlock] = []
    current: List[Token] = []

    for token in tokens:
        if token.is_named(BLOCK_SEPARATOR_TAG):
            blocks.append(RawBlock(tuple(current)))
            current = []
        else:
            current.append(token)
    blocks.append(RawBlock(tuple(current)))

    return [b for b in blocks if b.has_content()]
