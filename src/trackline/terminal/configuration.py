# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from trackline import configuration
from trackline.model.view_mode import ViewMode
from trackline.repository.configuration import CONFIGURATION_REPO
from trackline.service.page import locale_from_str
from trackline.service.validate import interval_policy_from_str
from trackline.terminal.custom_typer import AliasedTyperGroup
from trackline.time import week_day_from_str

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("week_start", str(config["week_start"]))
    table.add_row("default_view_mode", str(config["default_view_mode"]))
    table.add_row("invalid_interval_policy", str(config["invalid_interval_policy"]))
    table.add_row("locale", str(config["locale"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("day_width", str(config["day_width"]))
    table.add_row("config_file", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory holding events.yaml",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    week_start: Annotated[
        Optional[str],
        typer.Option("--week-start", help="First day of week pages, e.g. monday or sunday"),
    ] = None,
    default_view_mode: Annotated[
        Optional[ViewMode],
        typer.Option(
            "--default-view-mode",
            case_sensitive=False,
            help="View mode used when --mode is not given",
        ),
    ] = None,
    invalid_interval_policy: Annotated[
        Optional[str],
        typer.Option(
            "--invalid-interval-policy",
            help="What to do with events that end before they start: reject or swap",
        ),
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", help="Locale for month and day names, e.g. en or fr"),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above views",
        ),
    ] = None,
    day_width: Annotated[
        Optional[int],
        typer.Option("--day-width", min=4, help="Width of each date column in the grid"),
    ] = None,
) -> None:
    """Update configuration settings."""
    try:
        if week_start is not None:
            week_day_from_str(week_start)
        if invalid_interval_policy is not None:
            interval_policy_from_str(invalid_interval_policy)
        if locale is not None:
            locale = locale_from_str(locale)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        week_start=week_start.strip().lower() if week_start is not None else None,
        default_view_mode=default_view_mode.value if default_view_mode is not None else None,
        invalid_interval_policy=invalid_interval_policy,
        locale=locale,
        show_header=show_header,
        day_width=day_width,
    )
    view()
