# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dayslice.model.category_summary import CategorySummary
from dayslice.time import minutes_to_str


def category_summary_table(categories: list[CategorySummary]) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("category")
    table.add_column("minutes", justify="right")
    table.add_column("duration", justify="right")

    total = 0
    for category in categories:
        total += category["minutes"]
        table.add_row(
            f"[{category['color']}]●[/{category['color']}] {escape(category['name'])}",
            str(category["minutes"]),
            minutes_to_str(category["minutes"]),
        )

    table.add_row("", str(total), minutes_to_str(total), style="bold")
    return table


def category_summary_report(categories: list[CategorySummary]) -> None:
    console = Console()
    if len(categories) == 0:
        console.print("[bright_black]no tracked time[/bright_black]")
        return
    console.print(category_summary_table(categories))
