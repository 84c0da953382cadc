# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from caretrack.model.category import category_keys
from caretrack.repository.configuration import CONFIGURATION_REPO
from caretrack.session import get_session
from caretrack.terminal.custom_typer import AliasedTyperGroup
from caretrack.terminal.parse import parse_date_key, parse_time, resolve_id
from caretrack.validate import ValidationError, validate_title
from caretrack.view import activity as activity_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def complete_category(incomplete: str) -> list[str]:
    return [key for key in category_keys() if key.startswith(incomplete)]


def _resolve_activity_id(id: str) -> str:
    session = get_session()
    return resolve_id(
        id, [activity["id"] for activity in session.activities.get_all_activities()]
    )


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(help="activity title")],
    time_hhmm: Annotated[
        str,
        typer.Option(
            "--time", "-t", parser=parse_time, help="valid input: HH:MM (24-hour)"
        ),
    ],
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date_key,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1; defaults to the day cursor",
        ),
    ] = None,
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", autocompletion=complete_category),
    ] = None,
) -> None:
    session = get_session()
    config = CONFIGURATION_REPO.get_config()

    try:
        validate_title(title)
    except ValidationError as e:
        raise typer.BadParameter(str(e))
    if category is not None and category not in category_keys():
        raise typer.BadParameter(
            f"Unknown category '{category}', expected one of {', '.join(category_keys())}"
        )

    date_key = date if date is not None else session.view_state.get_day_date()
    id = session.activities.add(
        title, date_key, time_hhmm, category or config["default_category"]
    )
    if id is None:
        raise typer.BadParameter("Activity could not be added")

    new_activity = session.activities.get_activity(id)
    if new_activity is not None:
        activity_view.single_activity_view(session.ledger.balance, new_activity)


@app.command("done, d", no_args_is_help=True)
def done(id: str) -> None:
    """Toggle an activity done; completing it earns its category points."""
    session = get_session()
    real_id = _resolve_activity_id(id)

    transaction = session.economy.toggle_activity_done(real_id)

    console = Console()
    if transaction is not None:
        console.print(f"[green]+{transaction['amount']} pts[/green]")
    else:
        console.print("marked not done")


@app.command("title, t", no_args_is_help=True)
def title(id: str, new_title: str) -> None:
    session = get_session()
    real_id = _resolve_activity_id(id)
    try:
        clean_title = validate_title(new_title)
    except ValidationError as e:
        raise typer.BadParameter(str(e))

    session.activities.update_title(real_id, clean_title)

    activity = session.activities.get_activity(real_id)
    if activity is not None:
        activity_view.single_activity_view(session.ledger.balance, activity)


@app.command("time, ti", no_args_is_help=True)
def time(
    id: str,
    new_time: Annotated[
        str, typer.Argument(parser=parse_time, help="valid input: HH:MM (24-hour)")
    ],
) -> None:
    """Move an activity to another time on the same day."""
    session = get_session()
    real_id = _resolve_activity_id(id)

    session.activities.update_time(real_id, new_time)

    activity = session.activities.get_activity(real_id)
    if activity is not None:
        activity_view.single_activity_view(session.ledger.balance, activity)


@app.command("delete, del", no_args_is_help=True)
def delete(id: str) -> None:
    session = get_session()
    real_id = _resolve_activity_id(id)
    session.activities.delete(real_id)


@app.command("clear, cl")
def clear(
    date: Annotated[
        Optional[str],
        typer.Argument(
            parser=parse_date_key,
            help="day to clear; defaults to the day cursor",
        ),
    ] = None,
    done_only: Annotated[
        bool, typer.Option("--done", help="only remove completed activities")
    ] = False,
) -> None:
    session = get_session()
    date_key = date if date is not None else session.view_state.get_day_date()

    if done_only:
        removed = session.activities.clear_done(date_key)
    else:
        removed = session.activities.clear_day(date_key)

    console = Console()
    console.print(f"removed {removed} activities from {date_key}")
