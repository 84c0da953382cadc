# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from caretrack.session import get_session
from caretrack.terminal.custom_typer import AliasedTyperGroup
from caretrack.terminal.parse import parse_date_key
from caretrack.view import activity as activity_view
from caretrack.view import calendar as calendar_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("day, d")
def day(
    date: Annotated[
        Optional[str],
        typer.Argument(
            parser=parse_date_key,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    offset: Annotated[
        int, typer.Option("--offset", "-o", help="move the day cursor by days")
    ] = 0,
    show_empty: Annotated[
        bool, typer.Option("--all-hours", "-a", help="show hours with nothing scheduled")
    ] = False,
) -> None:
    session = get_session()

    if date is not None:
        session.view_state.set_day_date(date)
    date_key = session.view_state.get_day_date()
    if offset != 0:
        date_key = session.view_state.shift_day_date(offset)

    activity_view.day_view(
        session.ledger.balance,
        date_key,
        session.calendar.day_view(date_key),
        show_empty=show_empty,
    )


@app.command("month, m")
def month(
    year: Annotated[Optional[int], typer.Option("--year", "-y")] = None,
    month: Annotated[
        Optional[int],
        typer.Option("--month", "-m", min=1, max=12, help="1 is January"),
    ] = None,
    offset: Annotated[
        int, typer.Option("--offset", "-o", help="move the month cursor by months")
    ] = 0,
    today: Annotated[
        bool, typer.Option("--today", help="jump back to the current month first")
    ] = False,
) -> None:
    session = get_session()

    if today:
        session.view_state.reset_month_cursor()
    cursor_year, cursor_month = session.view_state.get_month_cursor()
    if year is not None or month is not None:
        cursor_year = year if year is not None else cursor_year
        cursor_month = month - 1 if month is not None else cursor_month
        session.view_state.set_month_cursor(cursor_year, cursor_month)
    if offset != 0:
        cursor_year, cursor_month = session.view_state.shift_month_cursor(offset)

    calendar_view.month_view(
        session.ledger.balance,
        cursor_year,
        cursor_month,
        session.calendar.month_grid(cursor_year, cursor_month),
    )


@app.command("year, y")
def year(
    year: Annotated[Optional[int], typer.Argument()] = None,
    offset: Annotated[
        int, typer.Option("--offset", "-o", help="move the year cursor by years")
    ] = 0,
    today: Annotated[
        bool, typer.Option("--today", help="jump back to the current year first")
    ] = False,
) -> None:
    session = get_session()

    if today:
        session.view_state.reset_year_cursor()
    if year is not None:
        session.view_state.set_year_cursor(year)
    cursor_year = session.view_state.get_year_cursor()
    if offset != 0:
        cursor_year = session.view_state.shift_year_cursor(offset)

    calendar_view.year_view(
        session.ledger.balance, cursor_year, session.calendar.year_view(cursor_year)
    )
