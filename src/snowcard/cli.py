"""CLI entry point for greeting card generation.

Fields not given as options are read from standard input, one line each:
    printf 'Alex\\nSam\\nHi!\\n\\n' | snowcard
    snowcard --recipient Alex --sender Sam --message "Hi!" --year 2030 --seed 7
"""

import logging
import sys
from typing import TextIO

import click
from dotenv import load_dotenv

load_dotenv()

from snowcard.compute import run  # noqa: E402
from snowcard.config import ConfigError, load_settings  # noqa: E402
from snowcard.logging_config import setup_logging  # noqa: E402
from snowcard.models import DEFAULT_YEAR, GreetingFields  # noqa: E402
from snowcard.renderers.card import render_card  # noqa: E402

logger = logging.getLogger(__name__)

_CTX = dict(help_option_names=["-h", "--help"], show_default=True)

# (option name, prompt) in stdin line order
_PROMPTS = (
    ("recipient", "Recipient name: "),
    ("sender", "Sender name: "),
    ("message", "Custom message: "),
    ("year", f"Year [{DEFAULT_YEAR}]: "),
)


def _ask(prompt: str, stdin: TextIO) -> str:
    """Prompt on stderr and read one line. EOF reads as an empty line."""
    click.echo(prompt, nl=False, err=True)
    return stdin.readline().rstrip("\r\n")


@click.command(context_settings=_CTX)
@click.option("--recipient", help="Recipient name. Prompted for when omitted.")
@click.option("--sender", help="Sender name. Prompted for when omitted.")
@click.option("--message", help="Custom message. Prompted for when omitted.")
@click.option("--year", help=f"Year in the title (empty = {DEFAULT_YEAR}).")
@click.option(
    "--flakes",
    type=click.IntRange(min=0),
    help="Number of snowflakes. Defaults to $SNOWCARD_FLAKES or 85.",
)
@click.option(
    "--seed",
    type=click.IntRange(min=0),
    help="Seed for reproducible snow. Defaults to $SNOWCARD_SEED.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug-level logging.")
@click.version_option(package_name="snowcard")
def main(
    recipient: str | None,
    sender: str | None,
    message: str | None,
    year: str | None,
    flakes: int | None,
    seed: int | None,
    verbose: bool,
) -> None:
    """Print a Christmas card with a snowy church and tree."""
    try:
        settings = load_settings()
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    setup_logging(logging.DEBUG if verbose else settings.log_level_value)

    given = {
        "recipient": recipient,
        "sender": sender,
        "message": message,
        "year": year,
    }
    if any(value is None for value in given.values()):
        for name, prompt in _PROMPTS:
            if given[name] is None:
                given[name] = _ask(prompt, sys.stdin)
        click.echo(err=True)

    fields = GreetingFields.from_input(**given)
    logger.debug("Greeting fields: %s", fields)

    card = run(
        fields,
        flake_count=settings.flake_count if flakes is None else flakes,
        seed=settings.seed if seed is None else seed,
    )
    logger.info("Rendering card with seed %d", card.seed)
    click.echo(render_card(card), nl=False)


if __name__ == "__main__":
    main()
