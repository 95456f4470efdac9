"""
toylang Lexer
=============

This package turns toylang source text into a list of tokens.

Pipeline
--------
    source lines → into_chars() → character buffer → Lexer.tokenize() → tokens

Usage
-----
>>> from toylang.lexer import tokenize_source
>>> [str(t) for t in tokenize_source("x::y")]
["Identifier('x')", "Operator('::')", "Identifier('y')", 'Symbol(EOF)']
"""

from toylang.lexer.errors import (
    LexerError,
    UnknownCharacter,
    UnknownOperator,
    UnknownParen,
    InvalidKeyword,
    InvalidIdentifier,
    UnsupportedFloat,
    IntegerOverflow,
    UnterminatedString,
    UnterminatedBlockComment,
)
from toylang.lexer.lexer import Lexer, tokenize_source, tokenize_lines, tokenize_file
from toylang.lexer.rules import is_valid_identifier
from toylang.lexer.source import into_chars, read_lines
from toylang.lexer.tokens import (
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
)

__all__ = [
    # Lexer
    "Lexer",
    "tokenize_source",
    "tokenize_lines",
    "tokenize_file",
    "into_chars",
    "read_lines",
    # Tokens
    "Token",
    "TokenKind",
    "Operator",
    "Paren",
    "ParenType",
    "ParenKind",
    "Symbol",
    "KEYWORDS",
    "OPERATORS",
    "PARENS",
    # Classification
    "is_keyword",
    "keyword_from_text",
    "is_operator",
    "operator_from_text",
    "paren_from_char",
    "classify_lexeme",
    "is_valid_identifier",
    # Errors
    "LexerError",
    "UnknownCharacter",
    "UnknownOperator",
    "UnknownParen",
    "InvalidKeyword",
    "InvalidIdentifier",
    "UnsupportedFloat",
    "IntegerOverflow",
    "UnterminatedString",
    "UnterminatedBlockComment",
]
