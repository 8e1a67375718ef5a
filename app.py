#!/usr/bin/env python3

import sys

import click
from dotenv import load_dotenv

from bracket_validator.error_details import get_error_human_message
from bracket_validator.repl import run_repl
from bracket_validator.utils.logging import get_logger, setup_logging
from bracket_validator.validation import ValidationService, validate

logger = get_logger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """Bracket Validator - check (), [] and {} are balanced"""
    if ctx.invoked_subcommand is None:
        run_repl()


@cli.command()
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Append a description of the error to invalid results",
)
def repl(verbose) -> None:
    """Read lines interactively and validate each one"""
    # Without the flag, fall back to REPL_VERBOSE
    run_repl(verbose=verbose or None)


@cli.command()
@click.argument("texts", nargs=-1, required=True)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Append a description of the error to invalid results",
)
def check(texts, verbose) -> None:
    """Validate each TEXT argument; exit status 1 if any is invalid.

    Put -- before arguments that start with a dash:

    \b
        check -- "-(]"
    """
    failed = False
    for text in texts:
        result = validate(text)
        failed = failed or result.failed
        click.echo(result.format(verbose=verbose))

    if failed:
        sys.exit(1)


@cli.command("check-file")
@click.argument("path", type=click.Path(dir_okay=True, allow_dash=True))
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Append a description of the error to invalid results",
)
def check_file(path, verbose) -> None:
    """Validate every line of a text file (use - for stdin).

    Prints one result per line followed by a summary. Exit status is 1
    when any line is invalid and 2 when the file cannot be read.
    """
    service = ValidationService(verbose=verbose)
    try:
        with click.open_file(path, "r", encoding="utf-8") as f:
            results = service.validate_all(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {path}: {e}")
        click.echo(get_error_human_message(e), err=True)
        sys.exit(2)

    report = service.format_report(results)
    if report:
        click.echo(report)
    click.echo(service.summary(results))

    if service.has_errors(results):
        sys.exit(1)


def main() -> None:
    load_dotenv()
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
