"""Token serialization: JSON round-trip for scanner output.

Converts Token values to/from JSON-compatible dicts. Useful for:
- Handing tokens to a parser in another process
- Golden-file tests and debugging

All output is deterministic (sorted keys).

Example:
    from loxscan import Scanner
    from loxscan.serialization import tokens_to_json, tokens_from_json

    tokens = Scanner("var x = 1;").scan_tokens()
    assert tokens_from_json(tokens_to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from loxscan.errors import SerializationError
from loxscan.tokens import Token, TokenType

_REQUIRED_KEYS = ("type", "lexeme", "literal", "line")


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a Token to a JSON-compatible dict.

    The type is stored by enum name so the output is stable across
    reorderings of TokenType.

    """
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def token_from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a Token from a dict produced by token_to_dict.

    Raises:
        SerializationError: If keys are missing, the type is unknown, or
            the literal does not fit the type.

    """
    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        msg = f"Missing field(s) in serialized token: {', '.join(missing)}"
        raise SerializationError(msg)

    try:
        token_type = TokenType[data["type"]]
    except KeyError:
        msg = f"Unknown token type: {data['type']!r}"
        raise SerializationError(msg) from None

    literal = data["literal"]
    if token_type is TokenType.NUMBER:
        if isinstance(literal, bool) or not isinstance(literal, (int, float)):
            msg = f"NUMBER literal must be a number, got {literal!r}"
            raise SerializationError(msg)
        literal = float(literal)
    elif token_type is TokenType.STRING:
        if not isinstance(literal, str):
            msg = f"STRING literal must be a string, got {literal!r}"
            raise SerializationError(msg)
    elif literal is not None:
        msg = f"{token_type.name} token cannot carry a literal, got {literal!r}"
        raise SerializationError(msg)

    line = data["line"]
    if isinstance(line, bool) or not isinstance(line, int) or line < 1:
        msg = f"Line must be a positive integer, got {line!r}"
        raise SerializationError(msg)

    return Token(token_type, data["lexeme"], literal, line)


def tokens_to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize tokens to a JSON array string.

    Args:
        tokens: Tokens in source order.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps([token_to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def tokens_from_json(data: str) -> list[Token]:
    """Deserialize tokens from a JSON array string.

    Raises:
        SerializationError: If the top level is not an array or any
            element is not a valid serialized token.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise SerializationError(msg)
    tokens = []
    for item in raw:
        if not isinstance(item, dict):
            msg = f"Expected a token object, got {type(item).__name__}"
            raise SerializationError(msg)
        tokens.append(token_from_dict(item))
    return tokens


__all__ = [
    "token_from_dict",
    "token_to_dict",
    "tokens_from_json",
    "tokens_to_json",
]
