"""
Lexer Error Hierarchy
=====================

Exception Hierarchy
-------------------
LexerError (base for all tokenizer errors)
├── UnknownCharacter - byte not matched by any lexical rule
├── UnknownOperator - operator helper given an unsupported spelling
├── UnknownParen - paren helper given a non-paren character
├── InvalidKeyword - text is not a keyword
├── InvalidIdentifier - text is neither keyword nor valid identifier
├── UnsupportedFloat - numeric literal with a decimal point
├── IntegerOverflow - integer literal outside the signed 32-bit range
├── UnterminatedString - end of input inside a string literal
└── UnterminatedBlockComment - end of input inside /* ... */

Every error is terminal: the scan aborts on the first one and no tokens
are returned.

Error Message Format
--------------------
    main.toy:3:9: error: unsupported float literal '3.14'
        let x = 3.14;
                ^
    hint: only integer literals are supported
"""

from typing import TYPE_CHECKING, Optional

from toylang.errors import ToylangError, SourceLocation

if TYPE_CHECKING:
    from toylang.lexer.tokens import Token

# Indentation of the quoted source line in error messages
QUOTE_INDENT = "    "


# =============================================================================
# Base Lexer Exception
# =============================================================================

class LexerError(ToylangError):
    """
    Base exception for all lexer errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Render the header, the quoted source line with a caret, and the hint.

            main.toy:1:5: error: unknown character '#' (0x23)
                let #x = 1;
                    ^
        """
        prefix = f"{self.location}: " if self.location else ""
        lines = [f"{prefix}error: {self.message}"]
        lines.extend(self._context_lines())
        if self.hint:
            lines.append(f"hint: {self.hint}")
        return "\n".join(lines)

    def _context_lines(self) -> list[str]:
        """The offending source line and a caret under its column, if known."""
        if self.source_line is None or self.location is None:
            return []
        quoted = QUOTE_INDENT + self.source_line
        if self.location.column < 1:
            return [quoted]
        caret = QUOTE_INDENT + " " * (self.location.column - 1) + "^"
        return [quoted, caret]


# =============================================================================
# Scanning Errors
# =============================================================================

class UnknownCharacter(LexerError):
    """A character that no lexical rule accepts, e.g. '#' or a lone ':'."""

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        hint = None
        if char == ":":
            hint = "did you mean '::'?"
        super().__init__(
            f"unknown character {char!r} (0x{ord(char):02X})",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UnsupportedFloat(LexerError):
    """
    Numeric literal containing a decimal point.

    The literal is scanned through its fractional digits so the message
    shows the whole thing, then rejected.
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        super().__init__(
            f"unsupported float literal '{text}'",
            location=location,
            hint="only integer literals are supported",
            source_line=source_line,
        )


class IntegerOverflow(LexerError):
    """Integer literal that does not fit in a signed 32-bit integer."""

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        super().__init__(
            f"integer literal '{text}' out of range",
            location=location,
            hint="integer literals must not exceed 2147483647",
            source_line=source_line,
        )


class UnterminatedString(LexerError):
    """
    End of input reached inside a string literal.

    Attributes:
        token: The partial StringConstant accumulated before input ran out
    """

    def __init__(
        self,
        token: "Token",
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        delimiter: str = '"',
    ):
        self.token = token
        super().__init__(
            f"unterminated string {token.value!r}",
            location=location,
            hint=f"add closing {delimiter!r} to complete the string",
            source_line=source_line,
        )


class UnterminatedBlockComment(LexerError):
    """End of input reached inside a /* ... */ comment."""

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        super().__init__(
            "block comment missing closing '*/'",
            location=location,
            hint="add */ to terminate the comment",
            source_line=source_line,
        )


# =============================================================================
# Classification Errors
# =============================================================================

class UnknownOperator(LexerError):
    """Operator lookup given a spelling outside the operator table."""

    def __init__(self, text: str, location: Optional[SourceLocation] = None):
        self.text = text
        super().__init__(f"unknown operator '{text}'", location=location)


class UnknownParen(LexerError):
    """Paren lookup given a character that is not one of ()[]{}."""

    def __init__(self, char: str, location: Optional[SourceLocation] = None):
        self.char = char
        super().__init__(f"unknown paren character {char!r}", location=location)


class InvalidKeyword(LexerError):
    """Keyword lookup given text that is not 'fn' or 'let'."""

    def __init__(self, text: str, location: Optional[SourceLocation] = None):
        self.text = text
        super().__init__(f"invalid keyword '{text}'", location=location)


class InvalidIdentifier(LexerError):
    """Text that is neither a keyword nor a valid identifier."""

    def __init__(self, text: str, location: Optional[SourceLocation] = None):
        self.text = text
        super().__init__(
            f"invalid identifier '{text}'",
            location=location,
            hint="identifiers start with a letter, '_' or '$'",
        )
