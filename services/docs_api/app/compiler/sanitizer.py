"""
Removes executable <script> spans from untrusted markup.

Runs before any other compiler stage.
"""

from __future__ import annotations

import re

# Non-greedy up to the first closing tag; [^<] also spans newlines.
_SCRIPT_RE = re.compile(
    r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>",
    re.IGNORECASE,
)

# Unpaired UTF-16 halves, e.g. from a JSON "\ud800" escape.
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")

REPLACEMENT_CHARACTER = "\ufffd"


def sanitize(markup: str) -> str:
    """
    Return markup with every <script>...</script> span (and its content) removed.

    Removal repeats until nothing matches, so a span split by an inner one
    ("<scr<script></script>ipt>") cannot reassemble. Lone surrogates are
    replaced with U+FFFD, which keeps the UTF-16 length unchanged.
    """
    previous = None
    while previous != markup:
        previous = markup
        markup = _SCRIPT_RE.sub("", markup)
    return _LONE_SURROGATE_RE.sub(REPLACEMENT_CHARACTER, markup)
