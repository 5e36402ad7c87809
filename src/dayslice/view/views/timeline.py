# SPDX-License-Identifier: MIT

from typing import cast

import pendulum
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dayslice.model.time_entry import ClippedTimeEntry, LaidOutEntry
from dayslice.service.split import calculate_total_minutes
from dayslice.time import (
    datetime_to_display_local_time_str,
    minutes_to_str,
    start_of_day,
)
from dayslice.view.views.header import header

CROSS_DAY_MARKER = "↔"


def _entry_label(entry: ClippedTimeEntry, unknown_task_title: str) -> str:
    label = escape(entry["task_title"] or unknown_task_title)
    if entry["is_cross_day_segment"]:
        # Dashed borders in the web view; a marker and italics here
        label = f"[italic]{CROSS_DAY_MARKER} {label}[/italic]"
    color = entry["category_color"]
    if color:
        label = f"[{color}]{label}[/{color}]"
    return label


def day_timeline_view(
    day: pendulum.DateTime,
    laid_out: list[LaidOutEntry],
    granularity: int = 60,
    unknown_task_title: str = "Unknown Task",
) -> None:
    """
    Display a vertical timeline of one local day with one column per lane.

    Args:
        day: Any instant within the day to display
        laid_out: Entries clipped to the day, with lanes assigned
        granularity: Minutes per timeline row
        unknown_task_title: Label for entries without a task title
    """
    header(day.in_tz("local").format("YYYY-MM-DD ddd"))

    lane_count = laid_out[0]["lane_count"] if laid_out else 1

    table = Table(box=box.SIMPLE)
    table.add_column("time")
    for lane in range(lane_count):
        table.add_column(f"lane {lane}")

    day_start = start_of_day(day)
    slot_start = day_start
    day_after = day_start.add(days=1).start_of("day")
    while slot_start < day_after:
        slot_end = min(slot_start.add(minutes=granularity), day_after)
        cells = [""] * lane_count
        for entry in laid_out:
            entry_start = cast(pendulum.DateTime, entry["start_at"])
            entry_end = cast(pendulum.DateTime, entry["end_at"])
            if entry_start < slot_end and entry_end > slot_start:
                cells[entry["lane"]] = _entry_label(entry, unknown_task_title)
        table.add_row(datetime_to_display_local_time_str(slot_start), *cells)
        slot_start = slot_end

    console = Console()
    console.print(table)


def day_entries_table(
    entries: list[ClippedTimeEntry],
    unknown_task_title: str = "Unknown Task",
) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("id")
    table.add_column("start")
    table.add_column("end")
    table.add_column("duration", justify="right")
    table.add_column("task")
    table.add_column("category")
    table.add_column("note")

    for entry in entries:
        table.add_row(
            escape(entry["id"]),
            datetime_to_display_local_time_str(
                cast(pendulum.DateTime, entry["start_at"])
            ),
            datetime_to_display_local_time_str(cast(pendulum.DateTime, entry["end_at"])),
            minutes_to_str(entry["duration_minutes"] or 0),
            _entry_label(entry, unknown_task_title),
            escape(entry["category_name"] or ""),
            escape(entry["note"] or ""),
        )
    return table


def range_entries_view(
    by_day: dict[str, list[ClippedTimeEntry]],
    unknown_task_title: str = "Unknown Task",
) -> None:
    """Display the clipped entries of every day of a range, one table per day."""
    header("range")

    console = Console()
    for key, entries in by_day.items():
        total = calculate_total_minutes(entries)
        console.print(
            f"[bold]{key}[/bold]  [bright_black]{minutes_to_str(total)}[/bright_black]"
        )
        if len(entries) == 0:
            console.print("  [bright_black]no tracked time[/bright_black]")
            continue
        console.print(day_entries_table(entries, unknown_task_title))
