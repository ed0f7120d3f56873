"""Lexeme-class sub-scanners for the loxscan scanner.

Each scanner is a mixin that recognizes one multi-character lexeme class
(comments, strings, numbers, identifiers). The Scanner class composes
them and supplies the cursor primitives they rely on.
"""

from __future__ import annotations

from loxscan.lexer.scanners.comment import CommentScannerMixin
from loxscan.lexer.scanners.identifier import IdentifierScannerMixin
from loxscan.lexer.scanners.number import NumberScannerMixin
from loxscan.lexer.scanners.string import StringScannerMixin

__all__ = [
    "CommentScannerMixin",
    "IdentifierScannerMixin",
    "NumberScannerMixin",
    "StringScannerMixin",
]
