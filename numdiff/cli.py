from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Optional

import click

from numdiff.cmd_diff import Diff
from numdiff.config import COLOR_MODES
from numdiff.setup_logging import LOG_FILE_ENV, setup_logging

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def run_cmd(args: list[str], options: dict[str, Any]) -> None:
    cmd = Diff(
        Path.cwd(),
        os.environ.copy(),
        args,
        sys.stdin,
        sys.stdout,
        sys.stderr,
        options,
    )
    cmd.execute()

    sys.exit(cmd.status)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("old", type=click.Path(dir_okay=False, allow_dash=True))
@click.argument("new", type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "-U",
    "--context",
    "context",
    type=click.IntRange(min=0),
    metavar="<n>",
    help="Keep up to 2*<n> unchanged lines before each change (default 3).",
)
@click.option(
    "--elide/--no-elide",
    "elide",
    default=None,
    help="Mark unchanged lines dropped from the context.",
)
@click.option(
    "--color",
    "color",
    type=click.Choice(COLOR_MODES),
    help="When to color the output.",
)
@click.option(
    "--config",
    "config",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read settings from this file instead of ~/.numdiffrc.",
)
@click.option(
    "--log-level",
    "log_level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.option(
    "--log-file",
    "log_file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=LOG_FILE_ENV,
    help="Also write log records to this file.",
)
def cli(
    old: str,
    new: str,
    context: Optional[int],
    elide: Optional[bool],
    color: Optional[str],
    config: Optional[Path],
    log_level: str,
    log_file: Optional[Path],
) -> None:
    """Compare OLD and NEW line by line, ignoring differences in digits.

    Exits with 0 when the files compare equal, 1 when they differ and
    2 on trouble. Use - to read one side from standard input.
    """
    setup_logging(level=log_level, log_file=log_file)

    run_cmd(
        [old, new],
        {"context": context, "elide": elide, "color": color, "config": config},
    )


if __name__ == "__main__":
    cli()
