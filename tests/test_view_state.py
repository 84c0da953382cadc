"""Tests for the persisted view cursors."""

import pendulum
import pytest

from caretrack import time
from caretrack.const import KEY_DAY_DATE, KEY_MONTH_CURSOR, KEY_TAB
from caretrack.repository.store import MemoryStore
from caretrack.repository.view_state import ViewStateRepository


@pytest.fixture
def view_state(store: MemoryStore) -> ViewStateRepository:
    return ViewStateRepository(store)


class TestDayCursor:
    def test_defaults_to_today(self, view_state: ViewStateRepository) -> None:
        assert view_state.get_day_date() == time.today_key()

    def test_shift_day_crosses_month(self, view_state: ViewStateRepository) -> None:
        view_state.set_day_date("2024-02-28")

        assert view_state.shift_day_date(2) == "2024-03-01"
        assert view_state.get_day_date() == "2024-03-01"

    def test_malformed_stored_day_falls_back(self) -> None:
        view_state = ViewStateRepository(MemoryStore({KEY_DAY_DATE: '"2024-13-01"'}))
        assert view_state.get_day_date() == time.today_key()

    def test_set_rejects_malformed_key(self, view_state: ViewStateRepository) -> None:
        with pytest.raises(time.FormatError):
            view_state.set_day_date("03/01/2024")


class TestMonthCursor:
    def test_defaults_to_current_month(self, view_state: ViewStateRepository) -> None:
        today = pendulum.today("local")
        assert view_state.get_month_cursor() == (today.year, today.month - 1)

    def test_shift_wraps_year(self, view_state: ViewStateRepository) -> None:
        view_state.set_month_cursor(2024, 11)

        assert view_state.shift_month_cursor(1) == (2025, 0)
        assert view_state.shift_month_cursor(-2) == (2024, 10)

    def test_reset_returns_to_current_month(
        self, view_state: ViewStateRepository
    ) -> None:
        view_state.set_month_cursor(1999, 4)
        today = pendulum.today("local")

        assert view_state.reset_month_cursor() == (today.year, today.month - 1)
        assert view_state.get_month_cursor() == (today.year, today.month - 1)

    def test_stored_layout(self, store: MemoryStore) -> None:
        ViewStateRepository(store).set_month_cursor(2024, 1)
        assert store.read(KEY_MONTH_CURSOR, None) == {"y": 2024, "m": 1}

    def test_out_of_range_month_is_rejected(
        self, view_state: ViewStateRepository
    ) -> None:
        with pytest.raises(ValueError):
            view_state.set_month_cursor(2024, 12)

    def test_malformed_stored_cursor_falls_back(self) -> None:
        store = MemoryStore({KEY_MONTH_CURSOR: '{"y": 2024, "m": 14}'})
        today = pendulum.today("local")
        assert ViewStateRepository(store).get_month_cursor() == (
            today.year,
            today.month - 1,
        )


class TestYearCursorAndTab:
    def test_shift_year(self, view_state: ViewStateRepository) -> None:
        view_state.set_year_cursor(2024)
        assert view_state.shift_year_cursor(-1) == 2023
        assert view_state.get_year_cursor() == 2023

    def test_reset_year(self, view_state: ViewStateRepository) -> None:
        view_state.set_year_cursor(1999)
        year = pendulum.today("local").year

        assert view_state.reset_year_cursor() == year
        assert view_state.get_year_cursor() == year

    def test_unknown_stored_tab_falls_back(self) -> None:
        view_state = ViewStateRepository(MemoryStore({KEY_TAB: '"settings"'}))
        assert view_state.get_tab() == "schedule"

    def test_set_tab(self, view_state: ViewStateRepository) -> None:
        view_state.set_tab("rewards")
        assert view_state.get_tab() == "rewards"
        with pytest.raises(ValueError):
            view_state.set_tab("settings")

    def test_active_list_id(self, view_state: ViewStateRepository) -> None:
        assert view_state.get_active_list_id() is None
        view_state.set_active_list_id("list-1")
        assert view_state.get_active_list_id() == "list-1"
