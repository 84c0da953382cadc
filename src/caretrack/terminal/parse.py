# SPDX-License-Identifier: MIT

import re
from typing import Iterable, Optional

import pendulum
import typer

from caretrack import time
from caretrack.model.entity_id import EntityId
from caretrack.validate import ValidationError, validate_time_hhmm


def parse_date_key(date_param: Optional[str | int]) -> Optional[str]:
    """
    Parse a day into a YYYY-MM-DD date key.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a day offset
    from today such as 1 or -1.
    """
    if date_param is None:
        return None

    date_str = str(date_param)

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
        try:
            time.date_from_key(date_str)
        except time.FormatError as e:
            raise typer.BadParameter(str(e))
        return date_str

    if re.match(r"^-?\d+$", date_str):
        return time.date_key(pendulum.today("local").add(days=int(date_str)))

    if date_str == "today" or date_str == "t":
        return time.date_key(pendulum.today("local"))
    if date_str == "yesterday" or date_str == "y":
        return time.date_key(pendulum.yesterday("local"))
    if date_str == "tomorrow" or date_str == "o":
        return time.date_key(pendulum.tomorrow("local"))
    raise typer.BadParameter("Incorrect date format")


def parse_time(time_param: Optional[str]) -> Optional[str]:
    """Validate a HH:MM time, zero-padding a single digit hour."""
    if time_param is None:
        return None
    time_str = time_param
    if re.match(r"^\d:\d{2}$", time_str):
        time_str = f"0{time_str}"
    try:
        return validate_time_hhmm(time_str)
    except ValidationError as e:
        raise typer.BadParameter(str(e))


def resolve_id(id_prefix: str, candidates: Iterable[EntityId]) -> EntityId:
    """
    Resolve a unique id prefix against a set of ids.

    Raises:
        typer.BadParameter: If no id or more than one id matches
    """
    matches = [candidate for candidate in candidates if candidate.startswith(id_prefix)]
    if len(matches) == 0:
        raise typer.BadParameter(f"No entry matches id '{id_prefix}'")
    if len(matches) > 1:
        raise typer.BadParameter(
            f"Id '{id_prefix}' is ambiguous ({len(matches)} matches)"
        )
    return matches[0]


def short_id(id: EntityId) -> str:
    return id[:8]
