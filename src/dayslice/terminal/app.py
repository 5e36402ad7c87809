# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from dayslice.configuration import APP_NAME
from dayslice.terminal import configuration, view
from dayslice.terminal.custom_typer import OrderedAliasedTyperGroup
from dayslice.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="dayslice - Day-clipped timelines of tracked time",
    no_args_is_help=True,
)
app.command(name="day, d")(view.day)
app.command(name="range, r")(view.range_)
app.command(name="month, m")(view.month)
app.command(name="categories, c")(view.categories)
app.command(name="spectrum, s")(view.spectrum)
app.add_typer(configuration.app, name="config, cf")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    dayslice - Day-clipped timelines of tracked time

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        logging.getLogger(APP_NAME).setLevel(logging.DEBUG)


def run() -> None:
    app()
