"""
toylang Lexer (Tokenizer)
=========================

This module implements the hand-written scanner that turns toylang source
text into a flat list of tokens.

The scanner walks a single immutable character buffer once, left to right,
with a cursor and one character of lookahead. It never looks further ahead
than the next character, which is enough to tell apart:

- ``->`` from ``-``, ``::`` from ``:``
- ``==``, ``<=``, ``>=`` from ``=``, ``<``, ``>``
- ``//`` and ``/*`` comments from ``/``

Token Rules
-----------
- Whitespace (space, tab) is skipped.
- A run of line terminators, including blank lines that hold only spaces
  or tabs, produces a single NEWLINE.
- Strings open with ``'``, ``"`` or a backtick and close on the same
  character. A backslash makes the next character literal.
- A backslash outside a string starts a legacy string that runs up to the
  next ``"``.
- Integer literals are signed 32-bit. Floats are rejected.
- A NUL character ends the scan.

Example Usage
-------------
>>> from toylang.lexer import tokenize_source
>>> for token in tokenize_source("let x = 5;"):
...     print(token)
Keyword('let')
Identifier('x')
Operator('=')
IntegerConstant(5)
Symbol(SEMICOLON)
Symbol(EOF)
"""

import logging
import string
from pathlib import Path
from typing import Iterable, Optional, Union

from toylang.errors import SourceLocation
from toylang.lexer.errors import (
    IntegerOverflow,
    InvalidIdentifier,
    UnknownCharacter,
    UnsupportedFloat,
    UnterminatedBlockComment,
    UnterminatedString,
)
from toylang.lexer.rules import IDENT_CHARS, IDENT_START, is_valid_identifier
from toylang.lexer.source import into_chars, read_lines
from toylang.lexer.tokens import (
    INT32_MAX,
    PARENS,
    Operator,
    Symbol,
    Token,
    TokenKind,
    is_keyword,
    operator_from_text,
    paren_from_char,
)

logger = logging.getLogger(__name__)


DIGITS = frozenset(string.digits)
WHITESPACE = frozenset(" \t")
LINE_TERMINATORS = frozenset("\r\n")
QUOTES = frozenset("'\"`")

# Operators that are always a single character
SINGLE_CHAR_OPERATORS = frozenset("!&|+*<>=")

# Single-character operators that become two-character ones when followed by '='
EQUALS_SUFFIXED = frozenset("<>=")


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes toylang source code.

    Usage:
        lexer = Lexer(source_text, "main.toy")
        tokens = lexer.tokenize()

    or, from an iterable of lines:

        lexer = Lexer.from_lines(open("main.toy"), "main.toy")

    The token list is only returned once the whole buffer has been scanned.
    Any error aborts the pass and the tokens gathered so far are dropped.

    Attributes:
        source: The character buffer being tokenized
        filename: Name of the source file (for error reporting)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        # Current position in source
        self._pos = 0
        self._line = 1
        self._column = 1

        # Track line start position for error reporting
        self._line_start_pos = 0

    @classmethod
    def from_lines(cls, lines: Iterable[str], filename: str = "<input>") -> "Lexer":
        """Create a lexer over lines, each followed by one injected '\\n'."""
        return cls(into_chars(lines), filename)

    def tokenize(self) -> list[Token]:
        """
        Scan the whole buffer.

        Returns:
            The tokens in source order, ending with exactly one EOF symbol

        Raises:
            LexerError: On the first malformed construct in scan order
        """
        self._pos = 0
        self._line = 1
        self._column = 1
        self._line_start_pos = 0

        tokens: list[Token] = []

        while not self._at_end():
            char = self._peek()

            if char in WHITESPACE:
                self._advance()
                continue

            # NUL is the end-of-input sentinel
            if char == "\0":
                ignored = len(self.source) - self._pos - 1
                if ignored:
                    logger.debug(
                        f"NUL at {self.filename}:{self._line}:{self._column}, "
                        f"ignoring {ignored} trailing characters"
                    )
                break

            if char in LINE_TERMINATORS:
                newline = self._make_token(TokenKind.SYMBOL, Symbol.NEWLINE)
                self._advance()
                if not (tokens and tokens[-1].is_symbol(Symbol.NEWLINE)):
                    tokens.append(newline)
                continue

            tokens.append(self._scan_token())

        tokens.append(self._make_token(TokenKind.SYMBOL, Symbol.EOF))

        logger.debug(f"Tokenized {self.filename}: {len(tokens)} tokens, {self._line} lines")
        return tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """
        Look at the current character without advancing.

        Returns empty string if past end of source.
        """
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        """
        Consume and return the current character, advancing position.

        Updates line and column tracking. A '\\r' only ends a line when it
        is not the first half of a '\\r\\n' pair.
        """
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n" or (char == "\r" and self._peek() != "\n"):
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character if it matches expected."""
        if self._peek() == expected:
            self._advance()
            return True
        return False

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(
        self,
        kind: TokenKind,
        value,
        start_line: Optional[int] = None,
        start_column: Optional[int] = None,
    ) -> Token:
        return Token(
            kind=kind,
            value=value,
            line=start_line or self._line,
            column=start_column or self._column,
            filename=self.filename,
        )

    def _location(self, line: int, column: int) -> SourceLocation:
        return SourceLocation(self.filename, line, column)

    def _source_line(self, line_start_pos: Optional[int] = None) -> str:
        """Get the text of the line starting at line_start_pos (default: current)."""
        if line_start_pos is None:
            line_start_pos = self._line_start_pos
        end = len(self.source)
        for terminator in LINE_TERMINATORS:
            found = self.source.find(terminator, line_start_pos)
            if found != -1:
                end = min(end, found)
        return self.source[line_start_pos:end]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Token:
        """Scan one token starting at the current (non-blank) character."""
        start_line = self._line
        start_column = self._column

        char = self._peek()

        if char == "/":
            return self._scan_slash(start_line, start_column)

        if char in IDENT_START:
            return self._scan_word(start_line, start_column)

        if char in DIGITS:
            return self._scan_number(start_line, start_column)

        if char in PARENS:
            self._advance()
            return self._make_token(
                TokenKind.PAREN, paren_from_char(char), start_line, start_column
            )

        if char in SINGLE_CHAR_OPERATORS:
            self._advance()
            spelling = char
            if char in EQUALS_SUFFIXED and self._match("="):
                spelling += "="
            return self._make_token(
                TokenKind.OPERATOR, operator_from_text(spelling), start_line, start_column
            )

        if char == "-":
            self._advance()
            op = Operator.ARROW if self._match(">") else Operator.SUBTRACT
            return self._make_token(TokenKind.OPERATOR, op, start_line, start_column)

        if char == ":":
            self._advance()
            if self._match(":"):
                return self._make_token(
                    TokenKind.OPERATOR, Operator.DOUBLE_COLON, start_line, start_column
                )
            raise UnknownCharacter(
                char, self._location(start_line, start_column), self._source_line()
            )

        if char == ";":
            self._advance()
            return self._make_token(TokenKind.SYMBOL, Symbol.SEMICOLON, start_line, start_column)

        if char in QUOTES:
            return self._scan_string(start_line, start_column)

        if char == "\\":
            return self._scan_legacy_string(start_line, start_column)

        raise UnknownCharacter(
            char, self._location(start_line, start_column), self._source_line()
        )

    def _scan_slash(self, start_line: int, start_column: int) -> Token:
        """Scan a line comment, a block comment or the divide operator."""
        line_start_pos = self._line_start_pos
        self._advance()  # consume /

        # Line comment: stops before the terminator so NEWLINE is still emitted
        if self._peek() == "/":
            chars = ["/"]
            while not self._at_end() and self._peek() not in LINE_TERMINATORS:
                chars.append(self._advance())
            return self._make_token(TokenKind.COMMENT, "".join(chars), start_line, start_column)

        if self._peek() == "*":
            chars = ["/", self._advance()]
            while not self._at_end():
                char = self._advance()
                chars.append(char)
                if char == "*" and self._peek() == "/":
                    chars.append(self._advance())
                    return self._make_token(
                        TokenKind.COMMENT, "".join(chars), start_line, start_column
                    )
            raise UnterminatedBlockComment(
                "".join(chars),
                self._location(start_line, start_column),
                self._source_line(line_start_pos),
            )

        return self._make_token(TokenKind.OPERATOR, Operator.DIVIDE, start_line, start_column)

    def _scan_word(self, start_line: int, start_column: int) -> Token:
        """
        Scan an identifier or keyword.

        Keywords are looked up first; anything else must satisfy the
        identifier rule.
        """
        chars = []
        while self._peek() and self._peek() in IDENT_CHARS:
            chars.append(self._advance())

        word = "".join(chars)

        if is_keyword(word):
            return self._make_token(TokenKind.KEYWORD, word, start_line, start_column)

        if not is_valid_identifier(word):
            raise InvalidIdentifier(word, self._location(start_line, start_column))

        return self._make_token(TokenKind.IDENTIFIER, word, start_line, start_column)

    def _scan_number(self, start_line: int, start_column: int) -> Token:
        """
        Scan a decimal integer literal.

        A '.' after the digits means a float: the fractional digits are
        consumed so the error shows the full literal, then it is rejected.
        """
        chars = []
        while self._peek() in DIGITS:
            chars.append(self._advance())

        if self._peek() == ".":
            chars.append(self._advance())
            while self._peek() in DIGITS:
                chars.append(self._advance())
            raise UnsupportedFloat(
                "".join(chars),
                self._location(start_line, start_column),
                self._source_line(),
            )

        text = "".join(chars)
        value = int(text)
        if value > INT32_MAX:
            raise IntegerOverflow(
                text, self._location(start_line, start_column), self._source_line()
            )
        return self._make_token(TokenKind.INTEGER_CONSTANT, value, start_line, start_column)

    def _scan_string(self, start_line: int, start_column: int) -> Token:
        """
        Scan a string delimited by ', " or a backtick.

        Only the opening delimiter closes the string; the other two quote
        characters are plain content. A backslash is dropped and the
        character after it is copied as-is.
        """
        line_start_pos = self._line_start_pos
        delimiter = self._advance()

        chars = []
        escaped = False
        while not self._at_end():
            char = self._advance()

            if escaped:
                chars.append(char)
                escaped = False
                continue

            if char == "\\":
                escaped = True
                continue

            if char == delimiter:
                return self._make_token(
                    TokenKind.STRING_CONSTANT, "".join(chars), start_line, start_column
                )

            chars.append(char)

        partial = self._make_token(
            TokenKind.STRING_CONSTANT, "".join(chars), start_line, start_column
        )
        raise UnterminatedString(
            partial,
            self._location(start_line, start_column),
            self._source_line(line_start_pos),
            delimiter=delimiter,
        )

    def _scan_legacy_string(self, start_line: int, start_column: int) -> Token:
        """Scan a string introduced by a bare backslash and closed by '"'."""
        line_start_pos = self._line_start_pos
        self._advance()  # consume backslash

        chars = []
        while not self._at_end():
            char = self._advance()
            if char == '"':
                return self._make_token(
                    TokenKind.STRING_CONSTANT, "".join(chars), start_line, start_column
                )
            chars.append(char)

        partial = self._make_token(
            TokenKind.STRING_CONSTANT, "".join(chars), start_line, start_column
        )
        raise UnterminatedString(
            partial,
            self._location(start_line, start_column),
            self._source_line(line_start_pos),
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize_source(source: str, filename: str = "<input>") -> list[Token]:
    """Tokenize a source string as-is."""
    return Lexer(source, filename).tokenize()


def tokenize_lines(lines: Iterable[str], filename: str = "<input>") -> list[Token]:
    """Tokenize an ordered sequence of lines."""
    return Lexer.from_lines(lines, filename).tokenize()


def tokenize_file(path: Union[str, Path]) -> list[Token]:
    """
    Read and tokenize a source file.

    Raises:
        OSError: If the file cannot be read
        LexerError: If the contents cannot be tokenized
    """
    logger.debug(f"Reading {path}")
    return tokenize_lines(read_lines(path), str(path))
