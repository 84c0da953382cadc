# SPDX-License-Identifier: MIT

import re
from typing import cast

import pendulum

DATE_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})$")


class FormatError(ValueError):
    pass


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_key() -> str:
    return date_key(pendulum.today("local"))


def date_key(date: pendulum.Date | pendulum.DateTime) -> str:
    """Canonical YYYY-MM-DD key built from local calendar components."""
    if isinstance(date, pendulum.DateTime):
        date = date.in_tz("local")
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def date_from_key(key: str) -> pendulum.Date:
    match = DATE_KEY_PATTERN.match(key)
    if not match:
        raise FormatError(f"Date must be in YYYY-MM-DD format, got '{key}'")
    year, month, day = (int(part) for part in match.groups())
    try:
        return pendulum.date(year, month, day)
    except ValueError as e:
        raise FormatError(f"Invalid date '{key}': {e}") from e


def parse_time_hhmm(time_hhmm: str) -> tuple[int, int]:
    match = TIME_PATTERN.match(time_hhmm)
    if not match:
        raise FormatError(f"Time must be in HH:MM format, got '{time_hhmm}'")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23:
        raise FormatError(f"Hour must be between 0 and 23, got {hour}")
    if minute > 59:
        raise FormatError(f"Minute must be between 0 and 59, got {minute}")
    return hour, minute


def compose_instant(key: str, time_hhmm: str) -> pendulum.DateTime:
    """Build a local instant from a date key and a 24-hour HH:MM time.

    Raises:
        FormatError: If either the key or the time is malformed
    """
    date = date_from_key(key)
    hour, minute = parse_time_hhmm(time_hhmm)
    return pendulum.local(date.year, date.month, date.day, hour, minute)


def hour_of(instant: pendulum.DateTime) -> int:
    return instant.in_tz("local").hour


def date_key_of(instant: pendulum.DateTime) -> str:
    return date_key(instant)


def time_hhmm_of(instant: pendulum.DateTime) -> str:
    return instant.in_tz("local").format("HH:mm")


def shift_day(key: str, delta: int) -> str:
    return date_key(date_from_key(key).add(days=delta))


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, 0-indexed month) cursor, wrapping across year boundaries."""
    shifted = pendulum.date(year, month + 1, 1).add(months=delta)
    return shifted.year, shifted.month - 1


def shift_year(year: int, delta: int) -> int:
    return year + delta


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise FormatError(f"Expected a date and time, got '{datetime}'")
    return cast(pendulum.DateTime, parsed).in_tz("local")


def datetime_to_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def date_key_to_display_str(key: str) -> str:
    return date_from_key(key).format("YYYY-MM-DD ddd")
