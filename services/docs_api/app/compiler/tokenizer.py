"""
Tokenizer for the restricted markup subset.

Splits markup into a flat stream of TEXT and TAG tokens. A TAG is any
"<" followed by at least one non-">" character, up to the next ">" or
the end of input. Nothing is nested or validated; the stream is
lossless, so joining every token's raw text reproduces the input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

_TAG_RE = re.compile(r"</?[^>]+(?:>|\Z)")
_TAG_NAME_RE = re.compile(r"</?([A-Za-z][A-Za-z0-9]*)")


class TokenType(str, Enum):
    TEXT = "text"
    TAG = "tag"


@dataclass(frozen=True)
class Token:
    type: TokenType
    raw: str
    name: Optional[str] = None  # lower-cased tag name, TAG only
    closed: bool = False  # TAG ended with ">" rather than end of input

    @property
    def is_tag(self) -> bool:
        return self.type is TokenType.TAG

    def is_named(self, name: str) -> bool:
        """True for a complete tag (open or close) with exactly this name."""
        return self.is_tag and self.closed and self.name == name


def _tag_token(raw: str) -> Token:
    m = _TAG_NAME_RE.match(raw)
    return Token(
        type=TokenType.TAG,
        raw=raw,
        name=m.group(1).lower() if m else None,
        closed=raw.endswith(">"),
    )


def tokenize(markup: str) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    for m in _TAG_RE.finditer(markup):
        if m.start() > pos:
            tokens.append(Token(TokenType.TEXT, markup[pos:m.start()]))
        tokens.append(_tag_token(m.group(0)))
        pos = m.end()
    if pos < len(markup):
        tokens.append(Token(TokenType.TEXT, markup[pos:]))
    return tokens
