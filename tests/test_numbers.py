"""Test numeric literals."""

import pytest

from loxscan.tokens import Token, TokenType

from .conftest import assert_lexemes, assert_types


class TestNumberLiteral:
    def test_arithmetic(self, scan_all, reporter):
        tokens = scan_all("3 * 4 / 9.0 - 0")
        assert tokens == [
            Token(TokenType.NUMBER, "3", 3.0, 0),
            Token(TokenType.STAR, "*", None, 0),
            Token(TokenType.NUMBER, "4", 4.0, 0),
            Token(TokenType.SLASH, "/", None, 0),
            Token(TokenType.NUMBER, "9.0", 9.0, 0),
            Token(TokenType.MINUS, "-", None, 0),
            Token(TokenType.NUMBER, "0", 0.0, 0),
            Token(TokenType.EOF, "", None, 0),
        ]
        assert not reporter.had_error

    @pytest.mark.parametrize(
        ("source", "value"),
        [("123", 123.0), ("1.5", 1.5), ("007", 7.0), ("0.25", 0.25)],
    )
    def test_values(self, lex, source, value):
        tokens = lex(source)
        assert_types(tokens, [TokenType.NUMBER])
        assert tokens[0].lexeme == source
        assert tokens[0].literal == value
        assert isinstance(tokens[0].literal, float)

    def test_lexeme_kept_verbatim(self, lex):
        tokens = lex("9.0")
        assert tokens[0].lexeme == "9.0"
        assert tokens[0].literal == 9


class TestFractionLookahead:
    def test_trailing_dot_is_separate(self, lex, reporter):
        tokens = lex("3.")
        assert_types(tokens, [TokenType.NUMBER, TokenType.DOT])
        assert_lexemes(tokens, ["3", "."])
        assert not reporter.had_error

    def test_method_call_after_number(self, lex):
        tokens = lex("3.abs")
        assert_types(tokens, [TokenType.NUMBER, TokenType.DOT, TokenType.IDENTIFIER])

    def test_leading_dot_is_separate(self, lex):
        tokens = lex(".5")
        assert_types(tokens, [TokenType.DOT, TokenType.NUMBER])
        assert tokens[1].literal == 5.0

    def test_only_one_fraction(self, lex):
        tokens = lex("1.2.3")
        assert_types(tokens, [TokenType.NUMBER, TokenType.DOT, TokenType.NUMBER])
        assert_lexemes(tokens, ["1.2", ".", "3"])


class TestNumberBoundaries:
    def test_digit_then_letters(self, lex, reporter):
        tokens = lex("3abc")
        assert_types(tokens, [TokenType.NUMBER, TokenType.IDENTIFIER])
        assert_lexemes(tokens, ["3", "abc"])
        assert not reporter.had_error

    def test_no_exponent(self, lex):
        tokens = lex("1e5")
        assert_types(tokens, [TokenType.NUMBER, TokenType.IDENTIFIER])
        assert_lexemes(tokens, ["1", "e5"])

    def test_no_hex(self, lex):
        tokens = lex("0x1F")
        assert_lexemes(tokens, ["0", "x1F"])

    def test_negative_is_minus_then_number(self, lex):
        tokens = lex("-2")
        assert_types(tokens, [TokenType.MINUS, TokenType.NUMBER])


class TestNonAsciiDigits:
    def test_arabic_indic_digit_reported(self, lex, reporter):
        tokens = lex("٣")
        assert tokens == [Token(TokenType.NUMBER, "٣", 0.0, 0)]
        assert reporter.had_error
        assert reporter.messages == ["Invalid number literal: ٣"]

    def test_mixed_scripts_reported_once(self, lex, reporter):
        tokens = lex("1٣ + 2")
        assert_types(tokens, [TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER])
        assert tokens[0].literal == 0.0
        assert tokens[2].literal == 2.0
        assert reporter.messages == ["Invalid number literal: 1٣"]
