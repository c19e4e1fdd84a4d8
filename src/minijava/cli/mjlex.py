"""
mjlex - MiniJava Lexer Command-Line Interface
=============================================

This module implements the command-line interface for the MiniJava lexer.
It tokenizes a source file and prints one token per line, which is handy
for checking what a parser will be fed.

Usage Examples
--------------
Tokenize a file:
    $ mjlex Factorial.java

Tokenize the built-in sample program:
    $ mjlex --sample

Read from stdin, JSON output:
    $ echo 'int x;' | mjlex - --format json

Fail on lexical errors (for scripts and CI):
    $ mjlex --strict Factorial.java

Exit Codes
----------
0 - Success
1 - Lexical errors found (--strict only)
2 - Invalid arguments or unreadable input
3 - Internal error
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from minijava import __version__
from minijava.cli.errors import handle_cli_exception
from minijava.lexer import Lexer, LexerOptions, Token


logger = logging.getLogger(__name__)


# The classic MiniJava Factorial program, used by --sample
SAMPLE_PROGRAM = """\
class Factorial {
    public static void main(String[] a) {
        System.out.println(new Fac().ComputeFac(10));
    }
}

class Fac {
    public int ComputeFac(int num) {
        int num_aux;
        if (num < 1)
            num_aux = 1;
        else
            num_aux = num * (this.ComputeFac(num-1));
        return num_aux;
    }
}
"""


# =============================================================================
# Helpers
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def read_source(input_file: Optional[Path], sample: bool) -> tuple[str, str]:
    """
    Work out where the source comes from.

    Returns:
        Tuple of (source_text, display_name)

    Raises:
        click.BadParameter: If both a file and --sample are given
    """
    if sample:
        if input_file is not None:
            raise click.BadParameter(
                "INPUT_FILE cannot be combined with --sample",
                param_hint="'--sample'",
            )
        return SAMPLE_PROGRAM, "<sample>"

    if input_file is None or str(input_file) == "-":
        return sys.stdin.read(), "<stdin>"

    return input_file.read_text(encoding="utf-8"), str(input_file)


def token_to_dict(token: Token) -> dict:
    """JSON-friendly form of a token."""
    return {
        "type": token.type.name,
        "text": token.text,
        "line": token.line,
        "column": token.column,
    }


def format_tokens(tokens: list[Token], show_eof: bool = False) -> str:
    """
    Render tokens as text, one per line, followed by a total.

    The EOF token is left out of the listing and the count unless show_eof
    is set.
    """
    listed = [t for t in tokens if show_eof or not t.is_eof()]
    lines = [str(token) for token in listed]
    lines.append("")
    lines.append(f"Total tokens: {len(listed)}")
    return "\n".join(lines)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--sample",
    is_flag=True,
    help="Tokenize the built-in Factorial sample program",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option(
    "--show-eof",
    is_flag=True,
    help="Include the EOF token in text output",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Report ERROR tokens as errors and exit with status 1",
)
@click.option(
    "--strict-comments",
    is_flag=True,
    help="Warn about block comments that are never closed",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mjlex")
def main(
    input_file: Optional[Path],
    sample: bool,
    output_format: str,
    show_eof: bool,
    strict: bool,
    strict_comments: bool,
    verbose: bool,
) -> None:
    """
    Tokenize MiniJava source code.

    INPUT_FILE is the MiniJava source file to tokenize. Use '-' or omit it
    to read from standard input.

    \b
    Examples:
        mjlex Factorial.java            # Print tokens
        mjlex --sample                  # Tokenize the sample program
        mjlex -f json Main.java         # JSON output
        mjlex --strict Main.java        # Exit 1 on invalid characters

    Unrecognized characters never stop the scan: they show up as ERROR
    tokens in the listing. With --strict they are also reported on stderr
    and the exit status is 1.
    """
    setup_logging(verbose)

    try:
        source, name = read_source(input_file, sample)

        overrides = {"filename": name}
        if strict_comments:
            overrides["strict_comments"] = True
        options = LexerOptions.from_env(**overrides)
        logger.debug(f"Lexer options: {options}")

        if verbose:
            click.echo(f"Tokenizing {name}...", err=True)

        lexer = Lexer(source, options=options)
        tokens = lexer.tokenize()

        if output_format.lower() == "json":
            click.echo(json.dumps([token_to_dict(t) for t in tokens], indent=2))
        else:
            click.echo(format_tokens(tokens, show_eof=show_eof))

        for warning in lexer.diagnostics.warnings:
            click.echo(warning, err=True)

        if verbose:
            click.echo(
                f"{lexer.diagnostics.error_count()} invalid characters, "
                f"{lexer.diagnostics.warning_count()} warnings",
                err=True,
            )

        if strict:
            lexer.diagnostics.raise_if_errors()

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
