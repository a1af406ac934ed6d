"""
gfc - G Front End Command-Line Interface
========================================

Reads a G source file and either parses it or dumps its tokens.

Usage Examples
--------------
Parse declarations:
    $ gfc program.G
    let u8 x equal 5

Dump the token stream:
    $ gfc --tokens program.G
    <U8>
    <Ident="x">
    <=>
    <Decimal=5 trail="">
    <;>
    <EndOfFile>

Treat malformed literals (such as `1e`) as errors:
    $ gfc -W program.G
"""

import logging
from pathlib import Path

import click

from gfront import __version__
from gfront.cli.errors import handle_cli_exception
from gfront.frontend import Frontend, FrontendOptions

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s" if verbose else "%(levelname)s: %(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-t", "--tokens", "dump_tokens",
    is_flag=True,
    help="Print the token stream instead of parsing",
)
@click.option(
    "-W", "--warnings-as-errors",
    is_flag=True,
    help="Treat malformed literal warnings as errors",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Source file encoding",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="gfc")
def main(
    input_file: Path,
    dump_tokens: bool,
    warnings_as_errors: bool,
    encoding: str,
    verbose: bool,
) -> None:
    """
    Tokenize or parse a G source file.

    INPUT_FILE is the G source file (.G) to read.

    \b
    Examples:
        gfc program.G                # Print parsed declarations
        gfc --tokens program.G       # Print one token per line
        gfc -W program.G             # Fail on malformed literals
    """
    setup_logging(verbose)
    logger.debug("Reading %s (encoding=%s)", input_file, encoding)

    options = FrontendOptions(
        warnings_as_errors=warnings_as_errors,
        encoding=encoding,
    )
    frontend = Frontend(options)

    try:
        if dump_tokens:
            result = frontend.tokenize_file(input_file)
            for token in result.tokens:
                click.echo(str(token))
        else:
            result = frontend.parse_file(input_file)
            for declaration in result.declarations:
                click.echo(str(declaration))

        if verbose:
            click.echo(
                f"{input_file}: {len(result.warnings)} warning(s)",
                err=True,
            )

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
