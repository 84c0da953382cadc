# SPDX-License-Identifier: MIT

import pendulum

from caretrack import time
from caretrack.const import HOURS_PER_DAY, MONTH_CELL_LIMIT, MONTH_GRID_CELLS
from caretrack.model.calendar import HourBucket, MonthCell, MonthSummary
from caretrack.repository.activity import ActivityRepository


def month_grid_dates(year: int, month: int) -> list[pendulum.Date]:
    """The 42 consecutive days (6 Sunday-first weeks) covering a month.

    Args:
        year: Calendar year
        month: 0-indexed month (0 is January)

    Returns:
        Dates starting on the Sunday on or before the first of the month
    """
    first = pendulum.date(year, month + 1, 1)
    # isoweekday() is 7 for Sunday, so this maps Sunday to 0
    first_weekday = first.isoweekday() % 7
    grid_start = first.subtract(days=first_weekday)
    return [grid_start.add(days=offset) for offset in range(MONTH_GRID_CELLS)]


class CalendarProjector:
    """Read-only day, month and year views, recomputed on every call."""

    def __init__(
        self, activities: ActivityRepository, cell_limit: int = MONTH_CELL_LIMIT
    ) -> None:
        self.activities = activities
        self.cell_limit = cell_limit

    def day_view(self, date_key: str) -> list[HourBucket]:
        buckets: list[HourBucket] = [
            {"hour": hour, "activities": []} for hour in range(HOURS_PER_DAY)
        ]
        for activity in self.activities.by_day(date_key):
            buckets[time.hour_of(activity["when"])]["activities"].append(activity)
        return buckets

    def month_grid(self, year: int, month: int) -> list[MonthCell]:
        cells: list[MonthCell] = []
        for date in month_grid_dates(year, month):
            date_key = time.date_key(date)
            day_activities = self.activities.by_day(date_key)
            shown = day_activities[: self.cell_limit]
            cells.append(
                {
                    "date_key": date_key,
                    "day": date.day,
                    "in_current_month": date.year == year and date.month == month + 1,
                    "activities": shown,
                    "remainder": len(day_activities) - len(shown),
                }
            )
        return cells

    def year_view(self, year: int) -> list[MonthSummary]:
        grouped = self.activities.group_by_month(year)
        return [
            {"year": year, "month": month, "count": len(grouped[month])}
            for month in range(12)
        ]
