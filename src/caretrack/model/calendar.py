# SPDX-License-Identifier: MIT

from typing import TypedDict

from caretrack.model.activity import Activity


class HourBucket(TypedDict):
    hour: int
    activities: list[Activity]


class MonthCell(TypedDict):
    date_key: str
    day: int
    in_current_month: bool
    activities: list[Activity]
    remainder: int


class MonthSummary(TypedDict):
    year: int
    month: int
    count: int
