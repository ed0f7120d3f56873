"""Single-pass scanner for Lox source text.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (dispatch + cursor primitives)
├── charsets.py          # Character classes, operator tables
└── scanners/            # Lexeme-class sub-scanners
    ├── comment.py       # // line comments
    ├── string.py        # "string" literals
    ├── number.py        # 123 and 1.5 literals
    └── identifier.py    # identifiers and reserved words

Usage:
    >>> from loxscan.lexer import Scanner
    >>> for token in Scanner("print 1;").scan_tokens():
    ...     print(repr(token))
Token(PRINT, 'print', line 1)
Token(NUMBER, '1', 1.0, line 1)
Token(SEMICOLON, ';', line 1)
Token(EOF, '', line 1)

"""

from loxscan.lexer.core import Scanner

__all__ = ["Scanner"]
