"""Identifier and reserved word scanner mixin."""

from __future__ import annotations

from loxscan.lexer.charsets import is_alphanumeric
from loxscan.tokens import KEYWORDS, LiteralValue, TokenType


class IdentifierScannerMixin:
    """Mixin providing identifier scanning with keyword lookup.

    Consumes the longest run of identifier characters, so ``classic`` is
    one IDENTIFIER rather than CLASS followed by ``ic``.

    """

    # These will be set by the Scanner class
    _source: str
    _start: int
    _current: int

    def _peek(self) -> str:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None) -> None:
        raise NotImplementedError

    def _scan_identifier(self) -> None:
        """Scan the rest of an identifier whose first character was consumed."""
        while is_alphanumeric(self._peek()):
            self._advance()

        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))
