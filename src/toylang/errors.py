"""
toylang Error Hierarchy
=======================

This module defines the root of the exception hierarchy for toylang.
All exceptions inherit from ToylangError, allowing callers to catch every
toylang-related error with a single except clause if desired.

Exception Hierarchy
-------------------
ToylangError (base)
└── LexerError (tokenizer-related, see toylang.lexer.errors)

Each exception captures source location information (filename, line, column)
when applicable, so diagnostics can point straight at the offending text.
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class ToylangError(Exception):
    """
    Base exception for all toylang errors.

        try:
            tokens = tokenize_file("main.toy")
        except ToylangError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
