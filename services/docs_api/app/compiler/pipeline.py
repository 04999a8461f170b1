"""
Markup → edit script compiler.

    raw markup → sanitize → tokenize → segment → classify → emit

Pure and synchronous; every string input yields a (possibly empty)
operation list, and no state survives between calls.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Tuple

from common.docpub_common.logging.logger import get_logger
from services.docs_api.app.compiler.classifier import ClassifiedBlock, classify
from services.docs_api.app.compiler.emitter import emit_operations
from services.docs_api.app.compiler.operations import Operation, to_requests
from services.docs_api.app.compiler.sanitizer import sanitize
from services.docs_api.app.compiler.segmenter import segment
from services.docs_api.app.compiler.tokenizer import tokenize

logger = get_logger("compiler.markup.compile")


def parse_blocks(markup: str) -> List[ClassifiedBlock]:
    """Sanitize, segment and classify markup into blocks, in source order."""
    tokens = tokenize(sanitize(markup))
    return [classify(raw) for raw in segment(tokens)]


def compile_blocks(markup: str) -> Tuple[List[ClassifiedBlock], List[Operation]]:
    """
    Compile markup and keep the classified blocks alongside the operations,
    for callers that report per-block metrics.
    """
    blocks = parse_blocks(markup)
    operations = emit_operations(blocks)

    kinds = Counter(b.kind.value for b in blocks)
    logger.debug(
        "compiled blocks=%d operations=%d kinds=%s",
        len(blocks),
        len(operations),
        dict(kinds),
        extra={"component": "compiler", "stage": "compile", "feature": "markup"},
    )
    return blocks, operations


def compile_markup(markup: str) -> List[Operation]:
    """Compile markup into the ordered operation list for one document."""
    return compile_blocks(markup)[1]


def compile_to_requests(markup: str) -> List[Dict[str, Any]]:
    """Compile markup straight to batchUpdate request dicts."""
    return to_requests(compile_markup(markup))
