"""
toylang - Lexer and Build Front End for the toylang Language
=============================================================

toylang is a small language with ``fn`` and ``let`` keywords, integer and
string literals, and a handful of operators. This package provides its
lexical analyzer and a command-line build front end.

Main Components
---------------
- **lexer**: Hand-written tokenizer producing a flat token list
- **cli**: ``toyc build`` command that tokenizes a file and dumps the tokens

Quick Start
-----------
    >>> from toylang import tokenize_source
    >>> tokens = tokenize_source("fn f() -> x;")
    >>> tokens[-1]
    Token(SYMBOL, EOF, 1:13)

Or use the command-line tool:
    $ toyc build -i main.toy -o build/
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from toylang.errors import ToylangError, SourceLocation
from toylang.lexer import (
    Lexer,
    LexerError,
    Token,
    TokenKind,
    tokenize_source,
    tokenize_lines,
    tokenize_file,
)

__all__ = [
    "__version__",
    "ToylangError",
    "SourceLocation",
    "Lexer",
    "LexerError",
    "Token",
    "TokenKind",
    "tokenize_source",
    "tokenize_lines",
    "tokenize_file",
]
