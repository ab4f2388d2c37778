#!/usr/bin/env python3
"""
daybook CLI
------------

Command-line interface for the journal → Hugo content conversion.

Commands:
    - convert: Split a journal export into daily pages and month indexes

Usage:
    daybook convert journal.txt content/docs
    daybook convert journal.txt content/docs --dry-run
    daybook -v convert journal.txt content/docs --strict
"""
from __future__ import annotations

import click
from pathlib import Path

from daybook.core.paths import LOG_DIR
from daybook.core.cli import setup_logger


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """daybook Journal Conversion Pipeline"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    logger = setup_logger(Path(log_dir), "journal2md")
    ctx.obj["logger"] = logger
    ctx.call_on_close(logger.close)


# Import and register commands from submodules
from .text import convert

cli.add_command(convert)


if __name__ == "__main__":
    cli(obj={})
