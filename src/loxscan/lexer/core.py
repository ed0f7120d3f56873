"""Single-pass scanner with fixed one/two-character lookahead.

Walks the source once, left to right. Each step consumes one character,
dispatches on it, and either emits a token, skips it, or hands off to a
lexeme-class sub-scanner (string, number, identifier, comment).

Malformed input never stops the pass: errors go to a diagnostic sink
and scanning resumes with the next character.

Thread Safety:
Scanner instances own their cursor state. Create one per source string,
or per thread; they share only immutable module-level tables.

"""

from __future__ import annotations

from loxscan.diagnostics import DiagnosticCollector, DiagnosticKind, DiagnosticSink
from loxscan.lexer.charsets import (
    EQUAL_SUFFIXED_TOKENS,
    INLINE_WHITESPACE,
    SINGLE_CHAR_TOKENS,
    is_alpha,
    is_digit,
)
from loxscan.lexer.scanners import (
    CommentScannerMixin,
    IdentifierScannerMixin,
    NumberScannerMixin,
    StringScannerMixin,
)
from loxscan.tokens import LiteralValue, Token, TokenType
from loxscan.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    CommentScannerMixin,
    StringScannerMixin,
    NumberScannerMixin,
    IdentifierScannerMixin,
):
    """Converts source text into a flat list of tokens.

    Usage:
            >>> for token in Scanner("var x = 1;").scan_tokens():
            ...     print(token)
        VAR var None
        IDENTIFIER x None
        EQUAL = None
        NUMBER 1 1.0
        SEMICOLON ; None
        EOF  None

    Args:
        source: Full source text
        sink: Receives ``report(line, message)`` for each lexical error.
            A fresh DiagnosticCollector is used when omitted.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_tokens",
        "_start",
        "_current",
        "_line",
        "_start_line",  # Line of the current lexeme's first character
        "sink",
    )

    def __init__(self, source: str, *, sink: DiagnosticSink | None = None) -> None:
        self._source = source
        self._source_len = len(source)
        self.sink: DiagnosticSink = sink if sink is not None else DiagnosticCollector()
        self._reset()

    def _reset(self) -> None:
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1

    @property
    def source(self) -> str:
        return self._source

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source into tokens.

        Each call is a fresh pass from the start of the source, so calling
        it twice yields structurally identical lists (and reports any
        diagnostics twice).

        Returns:
            Tokens in source order, always ending with exactly one EOF.

        Complexity: O(n) where n = len(source)
        """
        self._reset()
        while not self._is_at_end():
            # Beginning of the next lexeme
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        logger.debug(
            "Scanned %d characters into %d tokens (%d lines)",
            self._source_len,
            len(self._tokens),
            self._line,
        )
        return self._tokens

    def _scan_token(self) -> None:
        """Consume one character and dispatch on it."""
        char = self._advance()

        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type is not None:
            self._add_token(token_type)
            return

        pair = EQUAL_SUFFIXED_TOKENS.get(char)
        if pair is not None:
            with_equal, alone = pair
            self._add_token(with_equal if self._match("=") else alone)
            return

        if char == "/":
            if self._match("/"):
                self._skip_line_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif char in INLINE_WHITESPACE:
            pass
        elif char == "\n":
            self._line += 1
        elif char == '"':
            self._scan_string()
        elif is_digit(char):
            self._scan_number()
        elif is_alpha(char):
            self._scan_identifier()
        else:
            self._error(DiagnosticKind.UNEXPECTED_CHARACTER)

    # =========================================================================
    # Cursor primitives
    # =========================================================================

    def _is_at_end(self) -> bool:
        return self._current >= self._source_len

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self._source[self._current]
        self._current += 1
        return char

    def _peek(self) -> str:
        """Current character without consuming, or "" at end of input."""
        if self._current >= self._source_len:
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        """Character after the current one, or "" past end of input."""
        if self._current + 1 >= self._source_len:
            return ""
        return self._source[self._current + 1]

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self._current >= self._source_len:
            return False
        if self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    # =========================================================================
    # Output
    # =========================================================================

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None) -> None:
        text = self._source[self._start : self._current]
        self._tokens.append(Token(token_type, text, literal, self._start_line))

    def _error(self, kind: DiagnosticKind) -> None:
        logger.debug("line %d: %s (offset %d)", self._line, kind.value, self._start)
        self.sink.report(self._line, kind.value)
