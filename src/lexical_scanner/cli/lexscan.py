"""
lexscan - Lexical Scanner Command-Line Interface
================================================

This module implements the command-line interface for the lexical scanner.
It reads a source file, scans it into tokens, and prints the token stream.

Usage Examples
--------------
Print tokens as a table:
    $ lexscan program.txt

JSON output for other tools:
    $ lexscan program.txt --format json -o tokens.json

Custom reserved words:
    $ lexscan program.txt -r "if,else,while,return"

Verbose mode (debug logging):
    $ lexscan -v program.txt

Copyright (c) 2026 Lexical Scanner Contributors
"""

from pathlib import Path
from typing import Optional
import codecs
import json
import logging

import click

from lexical_scanner import __version__
from lexical_scanner.cli.errors import handle_cli_exception
from lexical_scanner.config import ScannerConfig, parse_word_list
from lexical_scanner.scanner import LexicalScanner, Token

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def validate_encoding(encoding: str) -> None:
    """
    Check that a source encoding name is known to Python.

    Raises:
        click.BadParameter: If no codec is registered under the name
    """
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise click.BadParameter(
            f"Unknown encoding: '{encoding}'",
            param_hint="'-e' / '--encoding' or LEXSCAN_ENCODING",
        ) from None


def format_tokens_text(tokens: list[Token]) -> str:
    """Format tokens as an aligned table, one token per line."""
    lines = []
    for token in tokens:
        position = f"{token.line}:{token.column}"
        lines.append(f"{position:<8} {token.kind.name:<16} {token.lexeme}")
    return "\n".join(lines)


def format_tokens_json(tokens: list[Token]) -> str:
    """Format tokens as a JSON array of objects."""
    return json.dumps([token.as_dict() for token in tokens], indent=2)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format for the token stream",
)
@click.option(
    "-r", "--reserved-words",
    type=str,
    default=None,
    help="Comma-separated reserved words replacing the built-in table "
         "(overrides LEXSCAN_RESERVED_WORDS)",
)
@click.option(
    "-e", "--encoding",
    type=str,
    default=None,
    help="Source file encoding (default: utf-8, or LEXSCAN_ENCODING)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="lexscan")
def main(
    input_file: Path,
    output: Optional[Path],
    output_format: str,
    reserved_words: Optional[str],
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Tokenize a source file.

    INPUT_FILE is the source text to scan.

    Scanning stops at the first malformed lexeme, which is reported with
    its file, line and column. The exit code is 0 on success, 1 on a
    lexical error, 2 for invalid arguments and 3 for internal errors.

    \b
    Examples:
        lexscan prog.txt                  # Token table on stdout
        lexscan prog.txt -f json          # JSON array
        lexscan prog.txt -o tokens.txt    # Write to a file
        lexscan prog.txt -r "if,else"     # Custom reserved words
    """
    setup_logging(verbose)

    config = ScannerConfig.from_env()
    if reserved_words is not None:
        config.reserved_words = parse_word_list(reserved_words)
    if encoding:
        config.encoding = encoding

    try:
        validate_encoding(config.encoding)

        scanner = LexicalScanner.from_file(input_file, config)
        tokens = list(scanner.tokenize())

        if output_format.lower() == "json":
            text = format_tokens_json(tokens)
        else:
            text = format_tokens_text(tokens)

        if output:
            output.write_text(text + "\n", encoding="utf-8")
            if verbose:
                click.echo(f"Wrote {len(tokens)} tokens to {output}")
        elif text:
            click.echo(text)

        logger.debug(f"Scanned {len(tokens)} tokens from {input_file}")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
