"""
loxscan: Lexical scanner for the Lox scripting language

Turns Lox source text into a flat list of classified tokens for a parser
to consume. One forward pass, fixed lookahead, and error recovery: bad
characters and unterminated strings are reported, never raised.

Quick Start:
    >>> from loxscan import scan
    >>> result = scan('print "hi" + 1;')
    >>> [t.type.name for t in result.tokens]
    ['PRINT', 'STRING', 'PLUS', 'NUMBER', 'SEMICOLON', 'EOF']
    >>> result.ok
    True

    >>> # Or drive the Scanner with your own diagnostic sink
    >>> import sys
    >>> from loxscan import Scanner, StreamReporter
    >>> tokens = Scanner("@", sink=StreamReporter(sys.stdout)).scan_tokens()
    [line 1] Error: Unexpected character.

Command line:
    python -m loxscan script.lox      # scan a file
    python -m loxscan                 # interactive prompt
"""

from loxscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from loxscan.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticKind,
    DiagnosticSink,
    StreamReporter,
)
from loxscan.errors import LoxscanError, ScanError, SerializationError
from loxscan.lexer import Scanner
from loxscan.result import ScanResult
from loxscan.serialization import token_from_dict, token_to_dict, tokens_from_json, tokens_to_json
from loxscan.tokens import KEYWORDS, Token, TokenType

__version__ = "0.1.0"


def scan(source: str) -> ScanResult:
    """Scan source text, collecting diagnostics alongside the tokens.

    Args:
        source: Lox source text

    Returns:
        ScanResult with the EOF-terminated tokens and any diagnostics

    Example:
        >>> result = scan('"open')
        >>> [t.type.name for t in result.tokens]
        ['EOF']
        >>> [d.kind for d in result.diagnostics]
        [<DiagnosticKind.UNTERMINATED_STRING: 'Unterminated string.'>]
    """
    sink = DiagnosticCollector()
    tokens = Scanner(source, sink=sink).scan_tokens()
    return ScanResult(tuple(tokens), sink.diagnostics)


__all__ = [
    "KEYWORDS",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "DiagnosticSink",
    "LoxscanError",
    "ScanConfig",
    "ScanError",
    "ScanResult",
    "Scanner",
    "SerializationError",
    "StreamReporter",
    "Token",
    "TokenType",
    "__version__",
    "get_scan_config",
    "reset_scan_config",
    "scan",
    "scan_config_context",
    "set_scan_config",
    "token_from_dict",
    "token_to_dict",
    "tokens_from_json",
    "tokens_to_json",
]
