"""Number literal scanner mixin."""

from __future__ import annotations

from loxscan.lexer.charsets import is_digit
from loxscan.tokens import LiteralValue, TokenType


class NumberScannerMixin:
    """Mixin providing number literal scanning.

    Grammar: ``DIGIT+ ( "." DIGIT+ )?``. No sign and no exponent; a
    trailing dot without a digit after it is left for the next lexeme.

    """

    # These will be set by the Scanner class
    _source: str
    _start: int
    _current: int

    def _peek(self) -> str:
        raise NotImplementedError

    def _peek_next(self) -> str:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None) -> None:
        raise NotImplementedError

    def _scan_number(self) -> None:
        """Scan the rest of a number whose first digit was consumed."""
        while is_digit(self._peek()):
            self._advance()

        # Fractional part
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self._source[self._start : self._current]))
