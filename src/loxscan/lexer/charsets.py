"""Character classes and dispatch tables for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Identifier characters are ASCII only. The empty string (the end-of-input
sentinel returned by peek) is a member of none of them.

Usage:
    from loxscan.lexer.charsets import DIGITS

    if char in DIGITS:  # O(1) lookup
        ...
"""

from __future__ import annotations

from types import MappingProxyType

from loxscan.tokens import TokenType

DIGITS: frozenset[str] = frozenset("0123456789")

# Characters that may start an identifier
IDENTIFIER_START: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)

# Characters that may continue an identifier
IDENTIFIER_CHARS: frozenset[str] = IDENTIFIER_START | DIGITS

# Skipped without producing a token; newline is handled separately
INLINE_WHITESPACE: frozenset[str] = frozenset(" \r\t")

SINGLE_CHAR_TOKENS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }
)

# Operators that may absorb a following "=": char -> (with "=", alone)
EQUAL_SUFFIXED_TOKENS: MappingProxyType[str, tuple[TokenType, TokenType]] = MappingProxyType(
    {
        "!": (TokenType.BANG_EQUAL, TokenType.BANG),
        "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
        "<": (TokenType.LESS_EQUAL, TokenType.LESS),
        ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    }
)


def is_digit(char: str) -> bool:
    """Check if character is an ASCII decimal digit."""
    return char in DIGITS


def is_alpha(char: str) -> bool:
    """Check if character can start an identifier (ASCII letter or underscore)."""
    return char in IDENTIFIER_START


def is_alphanumeric(char: str) -> bool:
    """Check if character can continue an identifier."""
    return char in IDENTIFIER_CHARS
