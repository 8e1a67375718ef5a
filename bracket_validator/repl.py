"""Interactive read, validate, print loop."""

import sys
from typing import TextIO

import click

from bracket_validator.config import get_settings
from bracket_validator.utils.logging import get_logger
from bracket_validator.validation import validate

logger = get_logger(__name__)


def run_repl(
    stream: TextIO | None = None,
    prompt: str | None = None,
    verbose: bool | None = None,
) -> int:
    """Repeatedly read a line, validate it and print the result.

    The loop stops at end of input or on Ctrl-C.

    Args:
        stream: Input stream, defaults to stdin
        prompt: Prompt line, defaults to the configured REPL_PROMPT
        verbose: Print error descriptions, defaults to REPL_VERBOSE

    Returns:
        Number of lines validated
    """
    settings = get_settings().repl
    if stream is None:
        stream = sys.stdin
    if prompt is None:
        prompt = settings.prompt
    if verbose is None:
        verbose = settings.verbose

    count = 0
    try:
        while True:
            click.echo(prompt)
            line = stream.readline()
            if not line:
                break

            result = validate(line.rstrip("\r\n"))
            count += 1
            logger.debug("Line validated", count=count, valid=result.valid)

            click.echo(result.format(verbose=verbose))
            click.echo()
    except KeyboardInterrupt:
        click.echo()

    logger.info(f"Interactive session ended after {count} lines")
    return count
