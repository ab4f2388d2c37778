"""
Text Conversion Commands
-------------------------

Commands for converting a journal export to Markdown.

Commands:
    - convert: Convert export to daily pages (txt → md)
"""
from __future__ import annotations

import click
from pathlib import Path

from daybook.core.logging_manager import DaybookLogger, handle_cli_error
from daybook.pipeline.journal2md import convert_file, preview_file


@click.command()
@click.argument("input", type=click.Path(dir_okay=False))
@click.argument("output", type=click.Path(file_okay=False))
@click.option(
    "--strict",
    is_flag=True,
    help="Fail when two entries fall on the same day instead of overwriting",
)
@click.option(
    "--dayfirst",
    is_flag=True,
    help="Read ambiguous numeric dates (03/05/2021) as day/month",
)
@click.option(
    "--no-fix-text",
    is_flag=True,
    help="Do not repair text encoding issues before parsing",
)
@click.option("--dry-run", is_flag=True, help="Preview pages without writing files")
@click.pass_context
def convert(
    ctx: click.Context,
    input: str,
    output: str,
    strict: bool,
    dayfirst: bool,
    no_fix_text: bool,
    dry_run: bool,
) -> None:
    """
    Convert a journal export into daily Markdown pages.

    Every entry becomes OUTPUT/<yyyy-MM>/<yyyyMMdd>.md and every month
    folder gets an _index.md section page.
    """
    logger: DaybookLogger = ctx.obj["logger"]
    input_path = Path(input)
    output_path = Path(output)

    try:
        if dry_run:
            click.echo("📝 Converting journal to Markdown (DRY RUN - no files will be modified)...")
            click.echo()
            days = preview_file(
                input_path, dayfirst=dayfirst, fix_text=not no_fix_text
            )
            click.echo(f"Would write {len(days)} pages:")
            for day in days:
                target = output_path / day.month_folder / day.file_name
                click.echo(f"  • {target}  ({day.day_of_month}. {day.title})")
            months = sorted({day.month_folder for day in days})
            click.echo(f"\nWould write {len(months)} month indexes")
            click.echo("\n💡 Run without --dry-run to execute conversion")
            return

        click.echo("📝 Converting journal to Markdown...")
        stats = convert_file(
            input_path=input_path,
            output_dir=output_path,
            strict=strict,
            dayfirst=dayfirst,
            fix_text=not no_fix_text,
            logger=logger,
        )

        click.echo("\n✅ Conversion complete:")
        click.echo(f"  Pages written: {stats.entries_written}")
        if stats.entries_overwritten:
            click.echo(f"  Pages overwritten: {stats.entries_overwritten}")
        if stats.duplicates:
            click.echo(f"  Duplicate days: {stats.duplicates}")
        click.echo(f"  Month indexes: {stats.indexes_created}")
        click.echo(f"  Duration: {stats.duration():.2f}s")

    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "convert",
            additional_context={"input": input, "output": output},
        )


__all__ = ["convert"]
