# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from caretrack import time
from caretrack.const import UNTITLED
from caretrack.model.calendar import MonthCell, MonthSummary
from caretrack.view.color import DONE_COLOR, OUTSIDE_MONTH_COLOR, TODAY_COLOR
from caretrack.view.header import header

WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def _render_cell(cell: MonthCell, today_key: str) -> Text:
    text = Text()
    if cell["date_key"] == today_key:
        day_style = TODAY_COLOR
    elif cell["in_current_month"]:
        day_style = "bold"
    else:
        day_style = OUTSIDE_MONTH_COLOR
    text.append(f"{cell['day']}\n", style=day_style)
    for activity in cell["activities"]:
        style = DONE_COLOR if activity["done"] else "white"
        if not cell["in_current_month"]:
            style = OUTSIDE_MONTH_COLOR
        text.append(
            f"{time.time_hhmm_of(activity['when'])} {activity['title'] or UNTITLED}\n",
            style=style,
        )
    if cell["remainder"] > 0:
        text.append(f"+{cell['remainder']} more", style="dim")
    return text


def month_view(balance: int, year: int, month: int, cells: list[MonthCell]) -> None:
    header(balance, "month")

    title = pendulum.date(year, month + 1, 1).format("MMMM YYYY")
    month_table = Table(box=box.SQUARE, title=title, show_lines=True)
    for weekday_name in WEEKDAY_NAMES:
        month_table.add_column(weekday_name, width=14, vertical="top")

    today_key = time.today_key()
    for row_start in range(0, len(cells), 7):
        month_table.add_row(
            *[
                _render_cell(cell, today_key)
                for cell in cells[row_start : row_start + 7]
            ]
        )

    console = Console()
    console.print(month_table)


def year_view(balance: int, year: int, summaries: list[MonthSummary]) -> None:
    header(balance, "year")

    year_table = Table(box=box.SIMPLE, title=str(year))
    year_table.add_column("month")
    year_table.add_column("items", justify="right")

    for summary in summaries:
        month_name = pendulum.date(year, summary["month"] + 1, 1).format("MMM")
        count_style = "dim" if summary["count"] == 0 else "white"
        year_table.add_row(
            month_name, Text(str(summary["count"]), style=count_style)
        )

    console = Console()
    console.print(year_table)
