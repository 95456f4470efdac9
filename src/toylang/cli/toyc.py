"""
toyc - toylang Build Command-Line Interface
===========================================

This module implements the ``toyc`` command. Its only subcommand,
``build``, tokenizes a toylang source file and prints the token list.

Usage Examples
--------------
See what a build would do without touching the filesystem:
    $ toyc build -i main.toy -o build/

Tokenize and write the token dump to build/main.tokens:
    $ toyc --mode run build -i main.toy -o build/

Verbose mode:
    $ toyc -v --mode run build -i main.toy -o build/

Modes
-----
dry-run (default)
    Tokenize and print; report the files that would be written.
run
    Tokenize and print; create the output directory if needed and write
    ``<input stem>.tokens`` into it.

Exit Codes
----------
0 - Success
1 - Tokenizer error in the input file
2 - Invalid arguments, unreadable input or unusable output path
3 - Internal error
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import click

from toylang import __version__
from toylang.cli.errors import handle_cli_exception
from toylang.lexer import Token, tokenize_file

logger = logging.getLogger(__name__)

# Extension of the token dump written in run mode
TOKEN_DUMP_SUFFIX = ".tokens"


# =============================================================================
# Build Configuration
# =============================================================================

class Mode(Enum):
    """Whether a build may touch the filesystem."""
    DRY_RUN = "dry-run"
    RUN = "run"


@dataclass
class BuildOptions:
    """
    Options for a single build.

    Attributes:
        input_file: Source file to tokenize
        output_dir: Directory that receives the token dump
        mode: DRY_RUN only reports, RUN writes files
        verbose: Print extra progress information
    """
    input_file: Path
    output_dir: Path
    mode: Mode = Mode.DRY_RUN
    verbose: bool = False

    @property
    def output_file(self) -> Path:
        return self.output_dir / (self.input_file.stem + TOKEN_DUMP_SUFFIX)


@dataclass
class BuildResult:
    """
    Result of a build.

    Attributes:
        tokens: Token list produced by the lexer
        dump: Printable token dump
        written: Files written to disk (empty for a dry run)
    """
    tokens: list[Token]
    dump: str
    written: list[Path] = field(default_factory=list)


# =============================================================================
# Build Steps
# =============================================================================

def format_token_dump(tokens: list[Token]) -> str:
    """
    Format tokens one per line as 'line:column  Kind(payload)'.

    >>> from toylang.lexer import tokenize_source
    >>> print(format_token_dump(tokenize_source("x;")))
    1:1    Identifier('x')
    1:2    Symbol(SEMICOLON)
    1:3    Symbol(EOF)
    """
    lines = []
    for token in tokens:
        position = f"{token.line}:{token.column}"
        lines.append(f"{position:<6} {token}")
    return "\n".join(lines)


def prepare_output_dir(path: Path) -> bool:
    """
    Create the output directory if it does not already exist.

    Returns:
        True if the directory was created

    Raises:
        click.BadParameter: If path exists but is not a directory
    """
    if path.exists():
        if not path.is_dir():
            raise click.BadParameter(
                f"output path '{path}' exists and is not a directory",
                param_hint="'--output-dir'",
            )
        return False
    path.mkdir(parents=True)
    logger.info(f"Created output directory {path}")
    return True


def run_build(options: BuildOptions) -> BuildResult:
    """
    Tokenize the input file and, in run mode, write the token dump.

    Raises:
        LexerError: If the input cannot be tokenized
        OSError: If the input cannot be read or the output written
    """
    tokens = tokenize_file(options.input_file)
    result = BuildResult(tokens=tokens, dump=format_token_dump(tokens))

    if options.mode is Mode.RUN:
        prepare_output_dir(options.output_dir)
        options.output_file.write_text(result.dump + "\n", encoding="utf-8")
        logger.info(f"Wrote {len(tokens)} tokens to {options.output_file}")
        result.written.append(options.output_file)

    return result


# =============================================================================
# CLI Context
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores the options given to the top-level ``toyc`` group.
    """

    def __init__(self) -> None:
        self.mode: Mode = Mode.DRY_RUN
        self.verbose: bool = False

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "--mode",
    type=click.Choice([m.value for m in Mode]),
    default=Mode.DRY_RUN.value,
    show_default=True,
    help="dry-run only prints what would happen; run may alter the filesystem",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__, prog_name="toyc")
@pass_context
def main(ctx: Context, mode: str, verbose: bool) -> None:
    """
    Build toylang programs.

    Use 'toyc build --help' for the build options.
    """
    ctx.mode = Mode(mode)
    ctx.verbose = verbose
    ctx.setup_logging()


# =============================================================================
# Build Command
# =============================================================================

@main.command()
@click.option(
    "-i", "--input-file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="toylang source file to build",
)
@click.option(
    "-o", "--output-dir",
    required=True,
    type=click.Path(file_okay=True, path_type=Path),
    help="Directory for build output",
)
@pass_context
def build(ctx: Context, input_file: Path, output_dir: Path) -> None:
    """
    Tokenize a source file and print its tokens.

    \b
    Examples:
        toyc build -i main.toy -o build/
        toyc --mode run build -i main.toy -o build/
    """
    options = BuildOptions(
        input_file=input_file,
        output_dir=output_dir,
        mode=ctx.mode,
        verbose=ctx.verbose,
    )

    click.echo(f"Compiling {input_file} into {output_dir}")

    try:
        result = run_build(options)
    except Exception as e:
        handle_cli_exception(e, verbose=options.verbose)

    click.echo(result.dump)

    if options.mode is Mode.DRY_RUN:
        click.echo(f"Dry run: would write {options.output_file}")
    elif options.verbose:
        for path in result.written:
            click.echo(f"Wrote {path}")


if __name__ == "__main__":
    main()
