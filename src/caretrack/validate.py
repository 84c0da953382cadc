# SPDX-License-Identifier: MIT

from typing import Optional

from caretrack.time import FormatError, parse_time_hhmm


class ValidationError(ValueError):
    pass


def validate_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("Title cannot be empty")
    return title.strip()


def validate_time_hhmm(time_hhmm: Optional[str]) -> str:
    if time_hhmm is None:
        raise ValidationError("Time is required")
    try:
        parse_time_hhmm(time_hhmm)
    except FormatError as e:
        raise ValidationError(str(e)) from e
    return time_hhmm
