# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from dayslice import configuration
from dayslice.repository.configuration import CONFIGURATION_REPO
from dayslice.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "entries_path",
        str(configuration.resolve_entries_path(config)),
    )
    table.add_row("uncategorized_name", config["uncategorized_name"])
    table.add_row("uncategorized_color", config["uncategorized_color"])
    table.add_row("unknown_task_title", config["unknown_task_title"])
    table.add_row("timeline_granularity", str(config["timeline_granularity"]))
    table.add_row("log_level", config["log_level"])

    console.print(table)
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", help="Show report headers"),
    ] = None,
    entries_path: Annotated[
        Optional[str],
        typer.Option("--entries-path", help="Default YAML or JSON entries export"),
    ] = None,
    remove_entries_path: Annotated[
        bool,
        typer.Option("--remove-entries-path", help="Use the default data directory"),
    ] = False,
    uncategorized_name: Annotated[
        Optional[str], typer.Option("--uncategorized-name")
    ] = None,
    uncategorized_color: Annotated[
        Optional[str], typer.Option("--uncategorized-color")
    ] = None,
    unknown_task_title: Annotated[
        Optional[str], typer.Option("--unknown-task-title")
    ] = None,
    timeline_granularity: Annotated[
        Optional[int],
        typer.Option("--timeline-granularity", help="Minutes per timeline row"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=f"One of {', '.join(LOG_LEVELS)}"),
    ] = None,
) -> None:
    """Update configuration settings."""
    console = Console()

    if timeline_granularity is not None and not (1 <= timeline_granularity <= 1440):
        console.print("[red]Error: timeline granularity must be 1 to 1440 minutes[/red]")
        raise typer.Exit(1)
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            console.print(f"[red]Error: unknown log level '{log_level}'[/red]")
            raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        entries_path=entries_path,
        remove_entries_path=remove_entries_path,
        uncategorized_name=uncategorized_name,
        uncategorized_color=uncategorized_color,
        unknown_task_title=unknown_task_title,
        timeline_granularity=timeline_granularity,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    if log_level is not None:
        logging.getLogger(configuration.APP_NAME).setLevel(log_level)

    console.print("[green]Configuration updated[/green]")
