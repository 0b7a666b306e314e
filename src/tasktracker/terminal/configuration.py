# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tasktracker import configuration
from tasktracker.color import DueColor, DueColorScheme
from tasktracker.repository.configuration import CONFIGURATION_REPO
from tasktracker.terminal.custom_typer import AliasedTyperGroup
from tasktracker.terminal.validate import (
    validate_log_level,
    validate_reminder_moments,
    validate_threshold,
)
from tasktracker.view.util import color_dot

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()


def __enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", __enabled(config["show_header"]))
    table.add_row("clear_ids_on_view", __enabled(config["clear_ids_on_view"]))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("reminder_moments", ", ".join(config["reminder_moments"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("log_path", str(configuration.LOG_PATH))
    console.print(table)

    scheme = DueColorScheme.from_config(config)
    colors_table = Table(title="Due-Date Color Thresholds")
    colors_table.add_column("Color")
    colors_table.add_column("Minimum days remaining")
    colors_table.add_row(
        f"{color_dot(DueColor.BLUE)} blue", f"≥ {scheme.blue_min_days} (no due date = blue)"
    )
    colors_table.add_row(
        f"{color_dot(DueColor.YELLOW)} yellow", f"≥ {scheme.yellow_min_days}"
    )
    colors_table.add_row(
        f"{color_dot(DueColor.ORANGE)} orange", f"≥ {scheme.orange_min_days}"
    )
    colors_table.add_row(
        f"{color_dot(DueColor.RED)} red", f"≥ {scheme.red_min_days} (crimson below red)"
    )
    console.print(colors_table)

    if not scheme.is_ordered():
        console.print(
            "[yellow]Order must be blue ≥ yellow ≥ orange ≥ red for a sensible gradient.[/yellow]"
        )


@app.command("set, s")
def set(
    blue_min_days: Annotated[
        Optional[int],
        typer.Option("--blue", callback=validate_threshold, help="0-365"),
    ] = None,
    yellow_min_days: Annotated[
        Optional[int],
        typer.Option("--yellow", callback=validate_threshold, help="0-365"),
    ] = None,
    orange_min_days: Annotated[
        Optional[int],
        typer.Option("--orange", callback=validate_threshold, help="0-365"),
    ] = None,
    red_min_days: Annotated[
        Optional[int],
        typer.Option("--red", callback=validate_threshold, help="0-365"),
    ] = None,
    reminder_moments: Annotated[
        Optional[list[str]],
        typer.Option(
            "--reminder",
            "-r",
            callback=validate_reminder_moments,
            help="repeatable: at_due, one_hour, one_day",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool], typer.Option("--clear-ids/--keep-ids")
    ] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="go back to the default")
    ] = False,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", callback=validate_log_level)
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        clear_ids_on_view=clear_ids_on_view,
        blue_min_days=blue_min_days,
        yellow_min_days=yellow_min_days,
        orange_min_days=orange_min_days,
        red_min_days=red_min_days,
        reminder_moments=reminder_moments,
        log_level=log_level,
    )
    view()


@app.command("reset-colors, rc")
def reset_colors() -> None:
    """Restore the default due-date color thresholds."""
    defaults = DueColorScheme()
    CONFIGURATION_REPO.update_config(
        blue_min_days=defaults.blue_min_days,
        yellow_min_days=defaults.yellow_min_days,
        orange_min_days=defaults.orange_min_days,
        red_min_days=defaults.red_min_days,
    )
    view()
