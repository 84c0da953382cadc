# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from caretrack import configuration
from caretrack.model.category import category_keys
from caretrack.repository.configuration import CONFIGURATION_REPO
from caretrack.terminal.custom_typer import AliasedTyperGroup

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
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("month_cell_limit", str(config["month_cell_limit"]))
    table.add_row("default_category", config["default_category"])

    console.print(table)


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding the stored data"),
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="use the default data directory")
    ] = False,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    month_cell_limit: Annotated[
        Optional[int],
        typer.Option("--month-cell-limit", min=1, help="activities listed per day cell"),
    ] = None,
    default_category: Annotated[
        Optional[str], typer.Option("--default-category")
    ] = None,
) -> None:
    if default_category is not None and default_category not in category_keys():
        raise typer.BadParameter(
            f"Unknown category '{default_category}', expected one of {', '.join(category_keys())}"
        )

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        month_cell_limit=month_cell_limit,
        default_category=default_category,
    )
    CONFIGURATION_REPO.flush()

    view()
