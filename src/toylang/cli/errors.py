"""
CLI Exit Codes and Error Reporting
==================================

Maps the exceptions a ``toyc`` command can raise onto a message for
stderr and a process exit code.

| Exception                          | Exit code    |
|------------------------------------|--------------|
| LexerError / other ToylangError    | BUILD_ERROR  |
| click.BadParameter                 | INVALID_ARGS |
| OSError (unreadable input, output  | INVALID_ARGS |
| path under a file, ...)            |              |
| UnicodeDecodeError                 | INVALID_ARGS |
| anything else                      | INTERNAL_ERROR |
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from toylang.errors import ToylangError
from toylang.lexer.errors import LexerError


class ExitCode(IntEnum):
    """Process exit codes for toyc."""
    SUCCESS = 0
    BUILD_ERROR = 1      # The input file does not tokenize
    INVALID_ARGS = 2     # Bad options, unreadable input or unusable output path
    INTERNAL_ERROR = 3   # Bug in toyc itself


def exit_code_for(error: BaseException) -> ExitCode:
    """Choose the exit code for an exception raised during a build."""
    if isinstance(error, ToylangError):
        return ExitCode.BUILD_ERROR
    if isinstance(error, (click.BadParameter, OSError, UnicodeDecodeError)):
        return ExitCode.INVALID_ARGS
    return ExitCode.INTERNAL_ERROR


def describe_error(error: BaseException) -> str:
    """
    Render an exception as the text printed on stderr.

    Lexer errors are printed untouched since they already start with a
    location and 'error:'.
    """
    if isinstance(error, LexerError):
        return str(error)
    if isinstance(error, UnicodeDecodeError):
        return f"Error: input is not valid UTF-8 ({error.reason} at byte {error.start})"
    if isinstance(error, OSError) and error.filename is not None:
        return f"Error: cannot use '{error.filename}': {error.strerror}"
    if exit_code_for(error) is ExitCode.INTERNAL_ERROR:
        return f"Internal error: {error}"
    return f"Error: {error}"


def handle_cli_exception(error: BaseException, verbose: bool = False) -> NoReturn:
    """
    Report an exception raised by a CLI command and exit.

    With verbose set, internal errors also print their traceback.

    Raises:
        SystemExit: Always
    """
    code = exit_code_for(error)
    click.echo(describe_error(error), err=True)
    if verbose and code is ExitCode.INTERNAL_ERROR:
        traceback.print_exc()
    sys.exit(code)
