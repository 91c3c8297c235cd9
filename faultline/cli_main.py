"""Command-line interface for Faultline.

Compare how fail-fast, error-value and fallback designs respond to the same
stream of failing requests.
"""

from __future__ import annotations

import importlib.metadata as _metadata
import logging
import sys
from typing import Optional

import click
from dotenv import load_dotenv
from rich.panel import Panel

from faultline.cli.commands import demo, simulate, validate
from faultline.cli.utils import FaultlineConsole
from faultline.config import get_settings

console = FaultlineConsole()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _get_version() -> str:
    """Return the installed version of faultline."""
    try:
        return _metadata.version("faultline")
    except _metadata.PackageNotFoundError:
        return "0.1.0-dev"


@click.group(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "max_content_width": 100
    },
    invoke_without_command=True
)
@click.version_option(_get_version(), message="Faultline v%(version)s")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Diagnostics level on stderr (default: FAULTLINE_LOG_LEVEL or WARNING)",
)
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]) -> None:
    """Faultline: how failure handling shapes availability.

    Feed the same requests, some of them missing, through three designs
    and compare what survives.

    \b
    Basic workflow:
      faultline demo                     # How one unwrap unwinds into a crash
      faultline simulate                 # Compare unsafe, safe and resilient
      faultline validate requests.yaml   # Check a custom request sequence

    \b
    Examples:
      faultline simulate --policy unsafe
      faultline simulate -f requests.yaml --json
      faultline --log-level INFO simulate
    """
    # Load environment variables from .env file, but don't override existing ones
    load_dotenv(override=False)
    get_settings.cache_clear()
    settings = get_settings()

    level = (log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if ctx.invoked_subcommand is None:
        console.print()
        console.print(
            Panel.fit(
                "[primary]Faultline: failure propagation simulator[/primary]\n\n"
                "All systems carry a distribution of potential failures.\n"
                "The question is how your design responds.\n\n"
                "Get started: [info]faultline simulate[/info]",
                border_style="primary"
            )
        )
        console.print()
        console.print("Run [info]faultline --help[/info] for available commands.")
        console.print()


# Register commands
main.add_command(simulate.simulate)
main.add_command(demo.demo)
main.add_command(validate.validate)


if __name__ == "__main__":
    sys.exit(main())
