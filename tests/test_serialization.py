"""Tests for loxscan.serialization: token JSON round-trip."""

import json

import pytest

from loxscan import scan
from loxscan.errors import SerializationError
from loxscan.serialization import token_from_dict, token_to_dict, tokens_from_json, tokens_to_json
from loxscan.tokens import Token, TokenType


class TestTokenDict:
    def test_to_dict(self) -> None:
        token = Token(TokenType.NUMBER, "3.5", 3.5, 2)
        assert token_to_dict(token) == {"type": "NUMBER", "lexeme": "3.5", "literal": 3.5, "line": 2}

    def test_integral_number_literal_becomes_float(self) -> None:
        token = token_from_dict({"type": "NUMBER", "lexeme": "3", "literal": 3, "line": 1})
        assert token.literal == 3.0
        assert isinstance(token.literal, float)

    @pytest.mark.parametrize(
        "data,fragment",
        [
            ({"type": "NUMBER", "lexeme": "1"}, "Missing field"),
            ({"type": "LET", "lexeme": "let", "literal": None, "line": 1}, "Unknown token type"),
            ({"type": "NUMBER", "lexeme": "1", "literal": "1", "line": 1}, "NUMBER literal"),
            ({"type": "NUMBER", "lexeme": "1", "literal": True, "line": 1}, "NUMBER literal"),
            ({"type": "STRING", "lexeme": '"a"', "literal": None, "line": 1}, "STRING literal"),
            ({"type": "PLUS", "lexeme": "+", "literal": "+", "line": 1}, "cannot carry"),
            ({"type": "PLUS", "lexeme": "+", "literal": None, "line": 0}, "Line"),
        ],
    )
    def test_invalid_dicts(self, data: dict, fragment: str) -> None:
        with pytest.raises(SerializationError, match=fragment):
            token_from_dict(data)


class TestTokensJson:
    def test_round_trip_of_scanned_source(self) -> None:
        tokens = scan('class A {\n  go() { print "hi" + 1.5; }\n}').tokens
        assert tuple(tokens_from_json(tokens_to_json(tokens))) == tokens

    def test_output_is_deterministic(self) -> None:
        tokens = scan("var x = 1;").tokens
        assert tokens_to_json(tokens) == tokens_to_json(tokens)
        assert '"lexeme"' in tokens_to_json(tokens).split('"line"')[0]

    def test_indent(self) -> None:
        text = tokens_to_json(scan("1").tokens, indent=2)
        assert "\n  {" in text

    def test_top_level_must_be_list(self) -> None:
        with pytest.raises(SerializationError, match="JSON array"):
            tokens_from_json(json.dumps({"type": "EOF"}))

    def test_elements_must_be_objects(self) -> None:
        with pytest.raises(SerializationError, match="token object"):
            tokens_from_json("[1]")
