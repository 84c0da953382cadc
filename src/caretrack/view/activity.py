# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from caretrack import time
from caretrack.const import UNTITLED
from caretrack.model.activity import Activity
from caretrack.model.calendar import HourBucket
from caretrack.model.category import label_for, points_for
from caretrack.terminal.parse import short_id
from caretrack.view.color import DONE_COLOR
from caretrack.view.header import header


def activity_line(activity: Activity) -> Text:
    state = "[x]" if activity["done"] else "[ ]"
    style = DONE_COLOR if activity["done"] else "white"
    line = Text()
    line.append(f"{state} ", style=style)
    line.append(time.time_hhmm_of(activity["when"]), style="cyan")
    line.append(f" {activity['title'] or UNTITLED}", style=style)
    line.append(f" ({label_for(activity['category'])})", style="dim")
    return line


def day_view(
    balance: int, date_key: str, buckets: list[HourBucket], show_empty: bool = False
) -> None:
    """
    Display a day as a timeline of hour rows.

    Args:
        balance: Current point balance for the header
        date_key: The day being displayed
        buckets: The 24 hour buckets of the day
        show_empty: Whether to print hours without activities
    """
    header(balance, "day")

    console = Console()
    console.print(f"\n[bold]{time.date_key_to_display_str(date_key)}[/bold]\n")

    day_table = Table(box=box.SIMPLE, show_header=False)
    day_table.add_column("hour", style="dim", no_wrap=True)
    day_table.add_column("id", no_wrap=True)
    day_table.add_column("activity")

    row_count = 0
    for bucket in buckets:
        if len(bucket["activities"]) == 0:
            if show_empty:
                day_table.add_row(f"{bucket['hour']:02d}:00", "", "")
            continue
        for index, activity in enumerate(bucket["activities"]):
            hour_label = f"{bucket['hour']:02d}:00" if index == 0 else ""
            day_table.add_row(
                hour_label, short_id(activity["id"]), activity_line(activity)
            )
            row_count += 1

    if row_count == 0 and not show_empty:
        console.print("  nothing scheduled")
        return
    console.print(day_table)


def single_activity_view(balance: int, activity: Activity) -> None:
    header(balance, "activity")

    activity_table = Table(box=box.SIMPLE)
    activity_table.add_column("property")
    activity_table.add_column("value")

    activity_table.add_row("id", activity["id"])
    activity_table.add_row("title", activity["title"] or UNTITLED)
    activity_table.add_row("date", time.date_key_of(activity["when"]))
    activity_table.add_row("time", time.time_hhmm_of(activity["when"]))
    activity_table.add_row("category", label_for(activity["category"]))
    activity_table.add_row("points", str(points_for(activity["category"])))
    activity_table.add_row("done", str(activity["done"]))

    console = Console()
    console.print(activity_table)
