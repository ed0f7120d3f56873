"""Token and TokenType definitions for the loxscan scanner.

The scanner produces a list of Token objects that a parser consumes.
Each Token has a type, the raw lexeme, an optional decoded literal,
and the line it started on.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).
KEYWORDS is a read-only mapping.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenType(Enum):
    """Token types produced by the scanner.

    Organized by category:
    - Single-character punctuation
    - One or two character operators
    - Literals
    - Reserved words
    - End of input

    """

    # Single-character tokens
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two character tokens
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()  # fooVar
    STRING = auto()  # "text"
    NUMBER = auto()  # 42, 3.14

    # Reserved words
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # End of input
    EOF = auto()


# Exact-match table: a lexeme is a reserved word iff it is a key here.
KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)

LiteralValue = float | str | None


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        lexeme: Exact source substring consumed ("" for EOF)
        literal: Decoded value: float for NUMBER, inner text for STRING,
            None for everything else
        line: 1-indexed line of the token's first character

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    lexeme: str
    literal: LiteralValue
    line: int

    def __str__(self) -> str:
        """Render as ``TYPE lexeme literal`` (the driver's output format)."""
        return f"{self.type.name} {self.lexeme} {self.literal}"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lexeme = self.lexeme
        if len(lexeme) > 20:
            lexeme = lexeme[:17] + "..."
        if self.literal is None:
            return f"Token({self.type.name}, {lexeme!r}, line {self.line})"
        return f"Token({self.type.name}, {lexeme!r}, {self.literal!r}, line {self.line})"

    @property
    def is_keyword(self) -> bool:
        """True if this token is one of the reserved words."""
        return self.lexeme in KEYWORDS and KEYWORDS[self.lexeme] is self.type
