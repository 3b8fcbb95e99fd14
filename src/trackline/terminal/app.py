# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from trackline.terminal import configuration, view
from trackline.terminal.custom_typer import OrderedTyperGroup
from trackline.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="trackline - Paged calendar timeline with non-overlapping event lanes",
    no_args_is_help=True,
)
app.command(name="page, p")(view.page)
app.command(name="lanes, l")(view.lanes)
app.command(name="grid, g")(view.grid)
app.command(name="show, s")(view.show)
app.add_typer(configuration.app, name="config, c")


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=verbose)],
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("trackline").setLevel(level)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log layout decisions to stderr"),
    ] = False,
) -> None:
    """
    trackline - Paged calendar timeline with non-overlapping event lanes

    Global options that apply to all commands.
    """
    setup_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
