# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from dayslice.configuration import resolve_entries_path
from dayslice.model.time_entry import TimeEntry
from dayslice.repository.configuration import CONFIGURATION_REPO
from dayslice.repository.time_entry import EntriesFileError, TimeEntryRepository
from dayslice.service.calendar import month_day_totals
from dayslice.service.category import aggregate_by_category, sorted_category_summaries
from dayslice.service.lane import assign_lanes
from dayslice.service.spectrum import segment_occupancy, stack_layers
from dayslice.service.split import (
    process_day_entries,
    process_range_entries,
    split_cross_day_entries,
)
from dayslice.terminal.parse import parse_date, parse_month
from dayslice.view.views.category import category_summary_report
from dayslice.view.views.header import header
from dayslice.view.views.month import month_view
from dayslice.view.views.spectrum import spectrum_view
from dayslice.view.views.timeline import day_timeline_view, range_entries_view

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"

FileOption = Annotated[
    Optional[Path],
    typer.Option(
        "--file",
        "-f",
        help="YAML or JSON export of time entries (defaults to the configured entries_path)",
    ),
]
DateOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
]


def _load_entries(file: Optional[Path]) -> list[TimeEntry]:
    config = CONFIGURATION_REPO.get_config()
    path = file if file is not None else resolve_entries_path(config)
    try:
        return TimeEntryRepository(path).get_all_time_entries()
    except EntriesFileError as e:
        Console(stderr=True).print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def day(date: DateOption = None, file: FileOption = None) -> None:
    """
    show the timeline and category summary of a day
    """
    config = CONFIGURATION_REPO.get_config()
    target = date if date is not None else pendulum.today("local")

    day_entries = process_day_entries(_load_entries(file), target)

    day_timeline_view(
        target,
        assign_lanes(day_entries),
        config["timeline_granularity"],
        config["unknown_task_title"],
    )
    category_summary_report(
        sorted_category_summaries(
            aggregate_by_category(
                day_entries,
                config["uncategorized_name"],
                config["uncategorized_color"],
            )
        )
    )


def range_(
    start: Annotated[
        pendulum.DateTime,
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ],
    end: Annotated[
        pendulum.DateTime,
        typer.Option("--end", "-e", parser=parse_date, help=DATE_HELP),
    ],
    file: FileOption = None,
) -> None:
    """
    list the clipped entries of every day in a range
    """
    if end < start:
        raise typer.BadParameter("--end must not be before --start")

    config = CONFIGURATION_REPO.get_config()
    range_entries_view(
        process_range_entries(_load_entries(file), start, end),
        config["unknown_task_title"],
    )


def month(
    month: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--month",
            "-m",
            parser=parse_month,
            help="valid inputs: YYYY-MM, this, last, next",
        ),
    ] = None,
    file: FileOption = None,
) -> None:
    """
    show the tracked time of every day of a month
    """
    target = month if month is not None else pendulum.today("local")
    grouped = split_cross_day_entries(_load_entries(file))
    month_view(target, month_day_totals(grouped, target))


def categories(date: DateOption = None, file: FileOption = None) -> None:
    """
    show the tracked time of a day per category
    """
    config = CONFIGURATION_REPO.get_config()
    target = date if date is not None else pendulum.today("local")

    header(f"categories {target.in_tz('local').format('YYYY-MM-DD ddd')}")
    category_summary_report(
        sorted_category_summaries(
            aggregate_by_category(
                process_day_entries(_load_entries(file), target),
                config["uncategorized_name"],
                config["uncategorized_color"],
            )
        )
    )


def spectrum(date: DateOption = None, file: FileOption = None) -> None:
    """
    show the tracked time of a day in 20-minute segments
    """
    target = date if date is not None else pendulum.today("local")
    day_entries = process_day_entries(_load_entries(file), target)
    spectrum_view(
        target, segment_occupancy(day_entries), len(stack_layers(day_entries))
    )
