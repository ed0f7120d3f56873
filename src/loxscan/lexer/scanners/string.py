"""String literal scanner mixin."""

from __future__ import annotations

from loxscan.diagnostics import DiagnosticKind
from loxscan.tokens import LiteralValue, TokenType


class StringScannerMixin:
    """Mixin providing string literal scanning.

    Strings are delimited by double quotes, may span lines, and carry no
    escape sequences: the literal is the raw text between the quotes.

    """

    # These will be set by the Scanner class
    _source: str
    _start: int
    _current: int
    _line: int

    def _peek(self) -> str:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _is_at_end(self) -> bool:
        raise NotImplementedError

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None) -> None:
        raise NotImplementedError

    def _error(self, kind: DiagnosticKind) -> None:
        raise NotImplementedError

    def _scan_string(self) -> None:
        """Scan the rest of a string literal after its opening quote.

        Reports an unterminated string at the line where input ran out
        and emits nothing in that case.
        """
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self._error(DiagnosticKind.UNTERMINATED_STRING)
            return

        # The closing quote
        self._advance()

        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenType.STRING, value)
