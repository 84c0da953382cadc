# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from caretrack import time
from caretrack.const import (
    DEFAULT_TAB,
    KEY_ACTIVE_LIST_ID,
    KEY_DAY_DATE,
    KEY_MONTH_CURSOR,
    KEY_TAB,
    KEY_YEAR_CURSOR,
    LOGGER,
    TABS,
)
from caretrack.model.entity_id import EntityId
from caretrack.repository.store import KeyValueStore


class ViewStateRepository:
    """Cursor scalars of the day, month and year views.

    Every value falls back to its default when missing or malformed.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def get_day_date(self) -> str:
        day_date = self._store.read(KEY_DAY_DATE, None)
        if isinstance(day_date, str):
            try:
                time.date_from_key(day_date)
                return day_date
            except time.FormatError:
                LOGGER.warning("Ignoring stored day cursor %r", day_date)
        return time.today_key()

    def set_day_date(self, date_key: str) -> None:
        time.date_from_key(date_key)
        self._store.write(KEY_DAY_DATE, date_key)

    def shift_day_date(self, delta: int) -> str:
        date_key = time.shift_day(self.get_day_date(), delta)
        self.set_day_date(date_key)
        return date_key

    def get_month_cursor(self) -> tuple[int, int]:
        """The (year, 0-indexed month) shown by the month view."""
        cursor = self._store.read(KEY_MONTH_CURSOR, None)
        if (
            isinstance(cursor, dict)
            and isinstance(cursor.get("y"), int)
            and isinstance(cursor.get("m"), int)
            and 0 <= cursor["m"] <= 11
        ):
            return cursor["y"], cursor["m"]
        today = pendulum.today("local")
        return today.year, today.month - 1

    def set_month_cursor(self, year: int, month: int) -> None:
        if not 0 <= month <= 11:
            raise ValueError(f"Month must be between 0 and 11, got {month}")
        self._store.write(KEY_MONTH_CURSOR, {"y": year, "m": month})

    def shift_month_cursor(self, delta: int) -> tuple[int, int]:
        year, month = time.shift_month(*self.get_month_cursor(), delta)
        self.set_month_cursor(year, month)
        return year, month

    def reset_month_cursor(self) -> tuple[int, int]:
        """Point the month view back at the current month."""
        today = pendulum.today("local")
        self.set_month_cursor(today.year, today.month - 1)
        return today.year, today.month - 1

    def get_year_cursor(self) -> int:
        year = self._store.read(KEY_YEAR_CURSOR, None)
        if isinstance(year, int):
            return year
        return pendulum.today("local").year

    def set_year_cursor(self, year: int) -> None:
        self._store.write(KEY_YEAR_CURSOR, year)

    def shift_year_cursor(self, delta: int) -> int:
        year = time.shift_year(self.get_year_cursor(), delta)
        self.set_year_cursor(year)
        return year

    def reset_year_cursor(self) -> int:
        year = pendulum.today("local").year
        self.set_year_cursor(year)
        return year

    def get_active_list_id(self) -> Optional[EntityId]:
        active_list_id = self._store.read(KEY_ACTIVE_LIST_ID, None)
        if isinstance(active_list_id, str):
            return active_list_id
        return None

    def set_active_list_id(self, list_id: Optional[EntityId]) -> None:
        self._store.write(KEY_ACTIVE_LIST_ID, list_id)

    def get_tab(self) -> str:
        tab = self._store.read(KEY_TAB, DEFAULT_TAB)
        if tab in TABS:
            return tab
        return DEFAULT_TAB

    def set_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab '{tab}'")
        self._store.write(KEY_TAB, tab)
