"""
Re-export the compiler entry points.

Usage:
    from services.docs_api.app.compiler import compile_markup
"""

from services.docs_api.app.compiler.classifier import BlockKind, ClassifiedBlock
from services.docs_api.app.compiler.index_tracker import IndexTracker, utf16_len
from services.docs_api.app.compiler.operations import (
    HeadingStyle,
    InsertText,
    Operation,
    UpdateParagraphStyle,
    to_requests,
)
from services.docs_api.app.compiler.pipeline import (
    compile_blocks,
    compile_markup,
    compile_to_requests,
    parse_blocks,
)

__all__ = [
    "BlockKind",
    "ClassifiedBlock",
    "HeadingStyle",
    "IndexTracker",
    "InsertText",
    "Operation",
    "UpdateParagraphStyle",
    "compile_blocks",
    "compile_markup",
    "compile_to_requests",
    "parse_blocks",
    "to_requests",
    "utf16_len",
]
