"""
Tests for the token vocabulary and classification helpers
=========================================================

Covers the keyword, operator and paren lookups, the identifier rule,
free-standing lexeme classification, and token formatting.
"""

import pytest

from toylang.errors import SourceLocation, ToylangError
from toylang.lexer import (
    Token,
    TokenKind,
    Operator,
    Paren,
    ParenType,
    ParenKind,
    Symbol,
    KEYWORDS,
    OPERATORS,
    PARENS,
    is_keyword,
    keyword_from_text,
    is_operator,
    operator_from_text,
    paren_from_char,
    classify_lexeme,
    is_valid_identifier,
    LexerError,
    InvalidKeyword,
    InvalidIdentifier,
    IntegerOverflow,
    UnknownCharacter,
    UnknownOperator,
    UnknownParen,
)


# =============================================================================
# Keyword Lookup
# =============================================================================

class TestKeywords:
    """Tests for keyword_from_text() and is_keyword()."""

    def test_keyword_set(self):
        assert KEYWORDS == {"fn", "let"}

    @pytest.mark.parametrize("text", ["fn", "let"])
    def test_keywords_accepted(self, text):
        assert is_keyword(text)
        assert keyword_from_text(text) == text

    @pytest.mark.parametrize("text", ["Let", "lett", "", "func"])
    def test_non_keywords_rejected(self, text):
        assert not is_keyword(text)
        with pytest.raises(InvalidKeyword) as exc_info:
            keyword_from_text(text)
        assert exc_info.value.text == text


# =============================================================================
# Operator Lookup
# =============================================================================

class TestOperators:
    """Tests for operator_from_text() and is_operator()."""

    def test_every_spelling(self):
        """Each Operator member is found by its own spelling."""
        for operator in Operator:
            assert operator_from_text(operator.value) is operator

    def test_fifteen_operators(self):
        assert len(OPERATORS) == 15

    def test_two_char_preferred(self):
        """'==' is EQUAL, never ASSIGNMENT."""
        assert operator_from_text("==") is Operator.EQUAL
        assert operator_from_text("=") is Operator.ASSIGNMENT

    @pytest.mark.parametrize("text", ["+=", "%", ":", "", "=>", "---"])
    def test_unknown_operator(self, text):
        assert not is_operator(text)
        with pytest.raises(UnknownOperator) as exc_info:
            operator_from_text(text)
        assert exc_info.value.text == text

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            OPERATORS["%"] = Operator.DIVIDE


# =============================================================================
# Paren Lookup
# =============================================================================

class TestParens:
    """Tests for paren_from_char()."""

    @pytest.mark.parametrize("char,paren_type,paren_kind", [
        ("(", ParenType.ROUND, ParenKind.OPEN),
        (")", ParenType.ROUND, ParenKind.CLOSE),
        ("[", ParenType.SQUARE, ParenKind.OPEN),
        ("]", ParenType.SQUARE, ParenKind.CLOSE),
        ("{", ParenType.CURLY, ParenKind.OPEN),
        ("}", ParenType.CURLY, ParenKind.CLOSE),
    ])
    def test_mapping(self, char, paren_type, paren_kind):
        paren = paren_from_char(char)
        assert paren == Paren(paren_type, paren_kind)
        assert paren.char == char

    def test_unknown_paren(self):
        with pytest.raises(UnknownParen) as exc_info:
            paren_from_char("<")
        assert exc_info.value.char == "<"

    def test_six_parens(self):
        assert len(PARENS) == 6


# =============================================================================
# Identifier Rule
# =============================================================================

class TestIdentifierRule:
    """Tests for is_valid_identifier()."""

    @pytest.mark.parametrize("text", ["a", "_", "$", "$x", "a_1$", "Foo2"])
    def test_valid(self, text):
        assert is_valid_identifier(text)

    @pytest.mark.parametrize("text", ["", "1a", "a-b", "a b", "été"])
    def test_invalid(self, text):
        assert not is_valid_identifier(text)


# =============================================================================
# Lexeme Classification
# =============================================================================

class TestClassifyLexeme:
    """Tests for classify_lexeme()."""

    def test_semicolon(self):
        assert classify_lexeme(";") == Token.symbol(Symbol.SEMICOLON)

    def test_paren(self):
        assert classify_lexeme("{") == Token.paren(ParenType.CURLY, ParenKind.OPEN)

    def test_operator(self):
        assert classify_lexeme("->") == Token.operator(Operator.ARROW)

    def test_integer(self):
        assert classify_lexeme("42") == Token.integer(42)

    def test_signed_integer(self):
        """A sign is part of an integer lexeme when it is not an operator."""
        assert classify_lexeme("-7") == Token.integer(-7)

    def test_keyword(self):
        assert classify_lexeme("let") == Token.keyword("let")

    def test_identifier(self):
        assert classify_lexeme("$foo") == Token.identifier("$foo")

    def test_invalid(self):
        with pytest.raises(InvalidIdentifier) as exc_info:
            classify_lexeme("a-b")
        assert exc_info.value.text == "a-b"

    def test_integer_overflow(self):
        with pytest.raises(IntegerOverflow):
            classify_lexeme("99999999999")


# =============================================================================
# Token Data Class
# =============================================================================

class TestToken:
    """Token equality and formatting."""

    def test_equality_ignores_location(self):
        assert Token.identifier("x", line=3, column=4) == Token.identifier("x")

    def test_kind_matters(self):
        assert Token.identifier("let") != Token.keyword("let")

    def test_factories_set_kind(self):
        assert Token.integer(1).kind is TokenKind.INTEGER_CONSTANT
        assert Token.string("s").kind is TokenKind.STRING_CONSTANT
        assert Token.comment("//").kind is TokenKind.COMMENT

    def test_is_symbol(self):
        assert Token.symbol(Symbol.EOF).is_symbol(Symbol.EOF)
        assert not Token.symbol(Symbol.EOF).is_symbol(Symbol.NEWLINE)
        assert not Token.identifier("EOF").is_symbol(Symbol.EOF)

    def test_str(self):
        assert str(Token.keyword("fn")) == "Keyword('fn')"
        assert str(Token.integer(5)) == "IntegerConstant(5)"
        assert str(Token.operator(Operator.ARROW)) == "Operator('->')"
        assert str(Token.paren(ParenType.SQUARE, ParenKind.CLOSE)) == "Paren(']')"
        assert str(Token.symbol(Symbol.NEWLINE)) == "Symbol(NEWLINE)"

    def test_repr(self):
        assert repr(Token.identifier("x")) == "Token(IDENTIFIER, 'x')"
        assert repr(Token.integer(7, line=2, column=5)) == "Token(INTEGER_CONSTANT, 7, 2:5)"

    def test_location(self):
        token = Token.identifier("x", line=2, column=5, filename="a.toy")
        assert token.location == SourceLocation("a.toy", 2, 5)

    def test_immutable(self):
        token = Token.identifier("x")
        with pytest.raises(AttributeError):
            token.value = "y"


# =============================================================================
# Error Formatting
# =============================================================================

class TestErrorFormatting:
    """LexerError message layout."""

    def test_hierarchy(self):
        assert issubclass(LexerError, ToylangError)
        assert issubclass(UnknownCharacter, LexerError)

    def test_without_location(self):
        assert str(LexerError("boom")) == "error: boom"

    def test_with_location_and_hint(self):
        error = LexerError(
            "boom",
            SourceLocation("a.toy", 1, 3),
            hint="try again",
            source_line="ab#",
        )
        assert str(error).splitlines() == [
            "a.toy:1:3: error: boom",
            "    ab#",
            "      ^",
            "hint: try again",
        ]

    def test_lone_colon_hint(self):
        assert UnknownCharacter(":").hint == "did you mean '::'?"
        assert UnknownCharacter("#").hint is None
