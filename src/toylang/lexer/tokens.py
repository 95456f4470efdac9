"""
Token Vocabulary
================

This module defines the tokens produced by the lexer and the fixed lookup
tables used to classify them.

Token Kinds
-----------
| Kind             | Payload                | Example        |
|------------------|------------------------|----------------|
| KEYWORD          | keyword name (str)     | let, fn        |
| IDENTIFIER       | name (str)             | x, _tmp, $ref  |
| INTEGER_CONSTANT | value (int, 32-bit)    | 42             |
| STRING_CONSTANT  | unescaped contents     | "a\\"b"        |
| OPERATOR         | Operator member        | ==, ->, ::     |
| PAREN            | Paren(type, kind)      | ( ] {          |
| SYMBOL           | Symbol member          | ; NEWLINE EOF  |
| COMMENT          | raw text incl. markers | // note        |

The keyword, operator and paren tables are module-level read-only data
and can be shared by any number of Lexer instances.

Example
-------
>>> operator_from_text("->")
<Operator.ARROW: '->'>
>>> classify_lexeme("let")
Token(KEYWORD, 'let')
"""

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Optional, Union

from toylang.errors import SourceLocation
from toylang.lexer.errors import (
    IntegerOverflow,
    InvalidIdentifier,
    InvalidKeyword,
    UnknownOperator,
    UnknownParen,
)
from toylang.lexer.rules import is_valid_identifier


# =============================================================================
# Enumerations
# =============================================================================

class TokenKind(Enum):
    """Top-level classification of a token."""
    KEYWORD = auto()
    IDENTIFIER = auto()
    INTEGER_CONSTANT = auto()
    STRING_CONSTANT = auto()
    OPERATOR = auto()
    PAREN = auto()
    SYMBOL = auto()
    COMMENT = auto()


class Operator(Enum):
    """Operators, valued by their source spelling."""

    # === Logical ===
    NOT = "!"
    AND = "&"
    OR = "|"

    # === Arithmetic ===
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    # === Comparison ===
    LESS_THAN = "<"
    GREATER_THAN = ">"
    EQUAL = "=="
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="

    # === Other ===
    ASSIGNMENT = "="
    DOUBLE_COLON = "::"
    ARROW = "->"


class ParenType(Enum):
    ROUND = auto()
    SQUARE = auto()
    CURLY = auto()


class ParenKind(Enum):
    OPEN = auto()
    CLOSE = auto()


@dataclass(frozen=True)
class Paren:
    """A bracket character split into its shape and direction."""
    type: ParenType
    kind: ParenKind

    @property
    def char(self) -> str:
        """The source character for this paren."""
        return _PAREN_CHARS[self]


class Symbol(Enum):
    """Structural markers that carry no payload."""
    SEMICOLON = auto()
    NEWLINE = auto()
    EOF = auto()


# =============================================================================
# Lookup Tables
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({"fn", "let"})

OPERATORS: MappingProxyType = MappingProxyType(
    {op.value: op for op in Operator}
)

# Two-character spellings are tried before their one-character prefixes
TWO_CHAR_OPERATORS: frozenset[str] = frozenset(
    spelling for spelling in OPERATORS if len(spelling) == 2
)

PARENS: MappingProxyType = MappingProxyType({
    "(": Paren(ParenType.ROUND, ParenKind.OPEN),
    ")": Paren(ParenType.ROUND, ParenKind.CLOSE),
    "[": Paren(ParenType.SQUARE, ParenKind.OPEN),
    "]": Paren(ParenType.SQUARE, ParenKind.CLOSE),
    "{": Paren(ParenType.CURLY, ParenKind.OPEN),
    "}": Paren(ParenType.CURLY, ParenKind.CLOSE),
})

_PAREN_CHARS = MappingProxyType({paren: char for char, paren in PARENS.items()})

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# Token Data Class
# =============================================================================

TokenValue = Union[str, int, Operator, Paren, Symbol]


@dataclass(frozen=True)
class Token:
    """
    A single token from toylang source.

    Only ``kind`` and ``value`` take part in equality, so a token built
    with one of the factory classmethods compares equal to a scanned one
    regardless of where the scanned token appeared.

    Attributes:
        kind: The TokenKind classification
        value: Payload; str for keywords, identifiers, strings and
            comments, int for integers, or an Operator/Paren/Symbol member
        line: Line number in source (1-indexed, 0 if unknown)
        column: Column number in source (1-indexed, 0 if unknown)
        filename: Name of the source file
    """
    kind: TokenKind
    value: TokenValue
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)
    filename: str = field(default="<input>", compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.line:
            return f"Token({self.kind.name}, {self._payload()}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self._payload()})"

    def __str__(self) -> str:
        """Format as 'Kind(payload)' for token dumps."""
        name = self.kind.name.title().replace("_", "")
        if self.kind is TokenKind.SYMBOL:
            return f"{name}({self.value.name})"
        return f"{name}({self._payload()})"

    def _payload(self) -> str:
        if isinstance(self.value, Operator):
            return repr(self.value.value)
        if isinstance(self.value, Paren):
            return repr(self.value.char)
        if isinstance(self.value, Symbol):
            return self.value.name
        return repr(self.value)

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_symbol(self, symbol: Symbol) -> bool:
        """Return True if this token is the given structural marker."""
        return self.kind is TokenKind.SYMBOL and self.value is symbol

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def keyword(cls, name: str, **position) -> "Token":
        return cls(TokenKind.KEYWORD, name, **position)

    @classmethod
    def identifier(cls, name: str, **position) -> "Token":
        return cls(TokenKind.IDENTIFIER, name, **position)

    @classmethod
    def integer(cls, value: int, **position) -> "Token":
        return cls(TokenKind.INTEGER_CONSTANT, value, **position)

    @classmethod
    def string(cls, contents: str, **position) -> "Token":
        return cls(TokenKind.STRING_CONSTANT, contents, **position)

    @classmethod
    def operator(cls, op: Operator, **position) -> "Token":
        return cls(TokenKind.OPERATOR, op, **position)

    @classmethod
    def paren(cls, paren_type: ParenType, paren_kind: ParenKind, **position) -> "Token":
        return cls(TokenKind.PAREN, Paren(paren_type, paren_kind), **position)

    @classmethod
    def symbol(cls, symbol: Symbol, **position) -> "Token":
        return cls(TokenKind.SYMBOL, symbol, **position)

    @classmethod
    def comment(cls, text: str, **position) -> "Token":
        return cls(TokenKind.COMMENT, text, **position)


# =============================================================================
# Classification Helpers
# =============================================================================

def is_keyword(text: str) -> bool:
    return text in KEYWORDS


def keyword_from_text(text: str) -> str:
    """
    Return text unchanged if it is a keyword.

    Raises:
        InvalidKeyword: If text is not one of the fixed keywords
    """
    if text not in KEYWORDS:
        raise InvalidKeyword(text)
    return text


def is_operator(text: str) -> bool:
    return text in OPERATORS


def operator_from_text(text: str) -> Operator:
    """
    Map an operator spelling to its Operator member.

    Two-character spellings are checked first so that '==' never resolves
    to ASSIGNMENT; a one-character spelling is only accepted on its own.

    Raises:
        UnknownOperator: If text is not an operator spelling
    """
    if text in TWO_CHAR_OPERATORS:
        return OPERATORS[text]
    if len(text) == 1 and text in OPERATORS:
        return OPERATORS[text]
    raise UnknownOperator(text)


def paren_from_char(char: str) -> Paren:
    """
    Map one of ()[]{} to its Paren.

    Raises:
        UnknownParen: For any other character
    """
    try:
        return PARENS[char]
    except KeyError:
        raise UnknownParen(char) from None


def parse_int32(text: str) -> Optional[int]:
    """
    Parse an optionally signed run of ASCII digits as a 32-bit integer.

    Returns None if text is not an integer spelling at all.

    Raises:
        IntegerOverflow: If the digits are well-formed but out of range
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise IntegerOverflow(text)
    return value


def classify_lexeme(text: str) -> Token:
    """
    Classify one free-standing lexeme as a token.

    The checks run in a fixed order: semicolon, paren, operator, integer,
    keyword and finally identifier.

    Raises:
        InvalidIdentifier: If text matches none of the rules
        IntegerOverflow: If text is an out-of-range integer
    """
    if text == ";":
        return Token.symbol(Symbol.SEMICOLON)
    if text in PARENS:
        return Token(TokenKind.PAREN, PARENS[text])
    if is_operator(text):
        return Token.operator(operator_from_text(text))
    value = parse_int32(text)
    if value is not None:
        return Token.integer(value)
    if is_keyword(text):
        return Token.keyword(keyword_from_text(text))
    if is_valid_identifier(text):
        return Token.identifier(text)
    raise InvalidIdentifier(text)
