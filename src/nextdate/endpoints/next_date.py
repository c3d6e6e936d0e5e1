#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging

import click
from rich.console import Console
from rich.table import Table

from nextdate.engine import RecurrenceEngine
from nextdate.exceptions import InvalidDateError, RecurrenceError
from nextdate.time_utils import format_date, parse_date, today

logger = logging.getLogger(__name__)


def _resolve_now(now: str | None):
    if not now:
        return today()
    try:
        return parse_date(now)
    except InvalidDateError:
        raise click.BadParameter("invalid 'now' date format", param_hint="--now")


@click.command()
@click.option(
    "--now", default=None, help="Reference date, YYYYMMDD. Defaults to today."
)
@click.option("--date", "date_", required=True, help="Scheduled date, YYYYMMDD.")
@click.option("--repeat", required=True, help='Recurrence rule, eg "d 7" or "w 1,3".')
@click.option("--strict", is_flag=True, help="Reject surplus rule tokens.")
@click.option(
    "--count",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Number of upcoming occurrences to show.",
)
@click.option("--verbose", is_flag=True, help="Log the computation.")
def next_date_cli(
    now: str | None,
    date_: str,
    repeat: str,
    strict: bool = False,
    count: int = 1,
    verbose: bool = False,
) -> None:
    """Print the next date on which a recurring task is due."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    reference = _resolve_now(now)
    engine = RecurrenceEngine(strict=strict)
    try:
        if count == 1:
            click.echo(engine.next_date(reference, date_, repeat))
            return
        occurrences = engine.upcoming(reference, date_, repeat, count)
    except RecurrenceError as e:
        raise click.ClickException(e.message)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Date", style="white")
    for i, occurrence in enumerate(occurrences, start=1):
        table.add_row(str(i), occurrence)
    console = Console()
    console.print(
        f"Rule [bold]{repeat}[/bold] from {date_}, after {format_date(reference)}:"
    )
    console.print(table)


if __name__ == "__main__":
    next_date_cli()
