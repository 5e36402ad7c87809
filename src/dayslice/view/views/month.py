# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from dayslice.model.category_summary import DayTotal
from dayslice.time import datetime_from_local_date_str, minutes_to_str, start_of_month
from dayslice.view.views.header import header

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def _day_cell(day_total: DayTotal) -> str:
    day_number = datetime_from_local_date_str(day_total["date_key"]).day
    if day_total["entry_count"] == 0:
        return f"[bright_black]{day_number:>2}[/bright_black]"
    return (
        f"[bold]{day_number:>2}[/bold] [cyan]{minutes_to_str(day_total['minutes'])}[/cyan]"
        f" [bright_black]({day_total['entry_count']})[/bright_black]"
    )


def month_view(month: pendulum.DateTime, day_totals: list[DayTotal]) -> None:
    """
    Display a month grid with the tracked time and the number of segments of
    every day.
    """
    header(start_of_month(month).format("MMMM YYYY"))

    table = Table(box=box.SIMPLE)
    for weekday in WEEKDAYS:
        table.add_column(weekday)

    # Leading blanks up to the first weekday of the month (Monday = 0)
    row: list[str] = [""] * start_of_month(month).weekday()
    for day_total in day_totals:
        row.append(_day_cell(day_total))
        if len(row) == 7:
            table.add_row(*row)
            row = []
    if row:
        table.add_row(*row, *([""] * (7 - len(row))))

    total = sum(day_total["minutes"] for day_total in day_totals)

    console = Console()
    console.print(table)
    console.print(f"  [bold]total[/bold] {minutes_to_str(total)}")
