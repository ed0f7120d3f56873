"""Tests for the scanner's per-character dispatch.

Covers punctuation, one/two character operators, slash versus comment,
whitespace handling, and the token fields produced for each.
"""

import pytest

from loxscan.lexer import Scanner
from loxscan.tokens import Token, TokenType


def types(source: str) -> list[TokenType]:
    return [t.type for t in Scanner(source).scan_tokens()]


class TestPunctuation:
    """Single-character tokens need no lookahead."""

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("(", TokenType.LEFT_PAREN),
            (")", TokenType.RIGHT_PAREN),
            ("{", TokenType.LEFT_BRACE),
            ("}", TokenType.RIGHT_BRACE),
            (",", TokenType.COMMA),
            (".", TokenType.DOT),
            ("-", TokenType.MINUS),
            ("+", TokenType.PLUS),
            (";", TokenType.SEMICOLON),
            ("*", TokenType.STAR),
            ("/", TokenType.SLASH),
        ],
    )
    def test_single_char(self, char: str, expected: TokenType) -> None:
        tokens = Scanner(char).scan_tokens()
        assert tokens == [Token(expected, char, None, 1), Token(TokenType.EOF, "", None, 1)]

    def test_adjacent_punctuation(self) -> None:
        assert types("(){};") == [
            TokenType.LEFT_PAREN,
            TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE,
            TokenType.RIGHT_BRACE,
            TokenType.SEMICOLON,
            TokenType.EOF,
        ]

    def test_minus_is_not_part_of_number(self) -> None:
        tokens = Scanner("-5").scan_tokens()
        assert tokens[0].type == TokenType.MINUS
        assert tokens[1].type == TokenType.NUMBER
        assert tokens[1].literal == 5.0


class TestOperators:
    """Operators that may absorb a following '='."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("!=", TokenType.BANG_EQUAL),
            ("==", TokenType.EQUAL_EQUAL),
            ("<=", TokenType.LESS_EQUAL),
            (">=", TokenType.GREATER_EQUAL),
        ],
    )
    def test_two_char_operator_is_one_token(self, source: str, expected: TokenType) -> None:
        tokens = Scanner(source).scan_tokens()
        assert len(tokens) == 2
        assert tokens[0].type == expected
        assert tokens[0].lexeme == source

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("!x", TokenType.BANG),
            ("= 1", TokenType.EQUAL),
            ("<1", TokenType.LESS),
            ("> ", TokenType.GREATER),
        ],
    )
    def test_one_char_fallback(self, source: str, expected: TokenType) -> None:
        tokens = Scanner(source).scan_tokens()
        assert tokens[0].type == expected
        assert tokens[0].lexeme == source[0]

    @pytest.mark.parametrize("source", ["!", "=", "<", ">"])
    def test_operator_at_end_of_input(self, source: str) -> None:
        tokens = Scanner(source).scan_tokens()
        assert len(tokens) == 2
        assert tokens[0].lexeme == source

    def test_triple_equal_is_equal_equal_then_equal(self) -> None:
        assert types("===") == [TokenType.EQUAL_EQUAL, TokenType.EQUAL, TokenType.EOF]

    def test_bang_bang_equal(self) -> None:
        assert types("!!=") == [TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EOF]

    def test_space_breaks_operator(self) -> None:
        assert types("! =") == [TokenType.BANG, TokenType.EQUAL, TokenType.EOF]


class TestSlashAndComments:
    """'/' is division unless doubled, which starts a line comment."""

    def test_comment_produces_no_token(self) -> None:
        assert types("// nothing here") == [TokenType.EOF]

    def test_comment_ends_at_newline(self) -> None:
        tokens = Scanner("// note\n+").scan_tokens()
        assert tokens[0].type == TokenType.PLUS
        assert tokens[0].line == 2

    def test_comment_after_code(self) -> None:
        assert types("1 / 2 // half") == [
            TokenType.NUMBER,
            TokenType.SLASH,
            TokenType.NUMBER,
            TokenType.EOF,
        ]

    def test_comment_swallows_operators(self) -> None:
        assert types("//!= \"unterminated @") == [TokenType.EOF]

    def test_slash_before_newline(self) -> None:
        tokens = Scanner("/\n/").scan_tokens()
        assert [(t.type, t.line) for t in tokens] == [
            (TokenType.SLASH, 1),
            (TokenType.SLASH, 2),
            (TokenType.EOF, 2),
        ]


class TestWhitespace:
    """Whitespace separates lexemes and is otherwise ignored."""

    @pytest.mark.parametrize("source", ["", " ", "\t", "\r", "\n", " \r\n\t\n"])
    def test_whitespace_only(self, source: str) -> None:
        assert types(source) == [TokenType.EOF]

    def test_crlf_counts_one_line(self) -> None:
        tokens = Scanner("a\r\nb").scan_tokens()
        assert [t.line for t in tokens] == [1, 2, 2]

    def test_form_feed_is_unexpected(self) -> None:
        scanner = Scanner("\f")
        assert [t.type for t in scanner.scan_tokens()] == [TokenType.EOF]
        assert len(scanner.sink) == 1


class TestStatement:
    """A realistic statement exercises every branch together."""

    def test_var_declaration(self) -> None:
        tokens = Scanner('var greeting = "hi" + 2.5; // done').scan_tokens()
        assert [(t.type, t.lexeme, t.literal) for t in tokens] == [
            (TokenType.VAR, "var", None),
            (TokenType.IDENTIFIER, "greeting", None),
            (TokenType.EQUAL, "=", None),
            (TokenType.STRING, '"hi"', "hi"),
            (TokenType.PLUS, "+", None),
            (TokenType.NUMBER, "2.5", 2.5),
            (TokenType.SEMICOLON, ";", None),
            (TokenType.EOF, "", None),
        ]

    def test_class_body(self) -> None:
        source = "class A < B {\n  init() { this.x = !nil; }\n}"
        assert types(source) == [
            TokenType.CLASS,
            TokenType.IDENTIFIER,
            TokenType.LESS,
            TokenType.IDENTIFIER,
            TokenType.LEFT_BRACE,
            TokenType.IDENTIFIER,
            TokenType.LEFT_PAREN,
            TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE,
            TokenType.THIS,
            TokenType.DOT,
            TokenType.IDENTIFIER,
            TokenType.EQUAL,
            TokenType.BANG,
            TokenType.NIL,
            TokenType.SEMICOLON,
            TokenType.RIGHT_BRACE,
            TokenType.RIGHT_BRACE,
            TokenType.EOF,
        ]

    def test_returns_list(self) -> None:
        assert isinstance(Scanner("1").scan_tokens(), list)

    def test_source_property(self) -> None:
        assert Scanner("print 1;").source == "print 1;"
