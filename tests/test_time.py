"""Tests for date key and instant helpers."""

import pendulum
import pytest

from caretrack import time


class TestDateKey:
    def test_date_key_pads_components(self) -> None:
        assert time.date_key(pendulum.date(2024, 3, 1)) == "2024-03-01"

    def test_date_key_uses_local_calendar_day_of_instant(self) -> None:
        late_evening = pendulum.local(2024, 3, 1, 23, 45)
        assert time.date_key(late_evening) == "2024-03-01"

    def test_date_key_of_instant_in_another_zone_uses_local_day(self) -> None:
        instant = pendulum.local(2024, 6, 15, 9, 0).in_tz("UTC")
        assert time.date_key_of(instant) == "2024-06-15"

    def test_date_from_key_rejects_malformed(self) -> None:
        with pytest.raises(time.FormatError):
            time.date_from_key("2024-3-1")

    def test_date_from_key_rejects_impossible_day(self) -> None:
        with pytest.raises(time.FormatError):
            time.date_from_key("2023-02-29")


class TestComposeInstant:
    def test_compose_builds_local_instant(self) -> None:
        instant = time.compose_instant("2024-03-01", "14:30")
        assert time.date_key_of(instant) == "2024-03-01"
        assert time.hour_of(instant) == 14
        assert time.time_hhmm_of(instant) == "14:30"

    def test_compose_midnight_stays_on_same_day(self) -> None:
        instant = time.compose_instant("2024-12-31", "00:00")
        assert time.date_key_of(instant) == "2024-12-31"
        assert time.hour_of(instant) == 0

    @pytest.mark.parametrize("bad_time", ["9:00", "24:00", "12:60", "noon", ""])
    def test_compose_rejects_malformed_time(self, bad_time: str) -> None:
        with pytest.raises(time.FormatError):
            time.compose_instant("2024-03-01", bad_time)


class TestIsoRoundTrip:
    def test_iso_string_restores_same_instant(self) -> None:
        instant = time.compose_instant("2024-03-01", "08:15")
        restored = time.datetime_from_str(time.datetime_to_iso_str(instant))
        assert restored == instant
        assert time.date_key_of(restored) == "2024-03-01"

    def test_utc_string_is_read_into_local_time(self) -> None:
        instant = time.compose_instant("2024-07-04", "10:00")
        utc_str = instant.in_tz("UTC").isoformat()
        assert time.datetime_from_str(utc_str) == instant


class TestCursorNavigation:
    def test_shift_day_crosses_month_end(self) -> None:
        assert time.shift_day("2024-02-28", 1) == "2024-02-29"
        assert time.shift_day("2024-02-29", 1) == "2024-03-01"

    def test_shift_day_backwards_crosses_year(self) -> None:
        assert time.shift_day("2024-01-01", -1) == "2023-12-31"

    def test_shift_month_december_forward_increments_year(self) -> None:
        assert time.shift_month(2024, 11, 1) == (2025, 0)

    def test_shift_month_january_backward_decrements_year(self) -> None:
        assert time.shift_month(2024, 0, -1) == (2023, 11)

    def test_shift_month_within_year(self) -> None:
        assert time.shift_month(2024, 4, 2) == (2024, 6)

    def test_shift_year(self) -> None:
        assert time.shift_year(2024, -1) == 2023
