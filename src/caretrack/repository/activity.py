# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Callable, Optional

from caretrack import time
from caretrack.const import KEY_EVENTS, LOGGER
from caretrack.model.activity import Activity
from caretrack.model.category import Category
from caretrack.model.entity_id import EntityId, IdFactory, generate_entity_id
from caretrack.repository.store import KeyValueStore
from caretrack.template.activity import get_activity_template
from caretrack.validate import ValidationError, validate_time_hhmm, validate_title


class ActivityRepository:
    def __init__(
        self, store: KeyValueStore, id_factory: IdFactory = generate_entity_id
    ) -> None:
        self._store = store
        self._id_factory = id_factory
        self._activities: Optional[list[Activity]] = None

    @property
    def activities(self) -> list[Activity]:
        if self._activities is None:
            self.__load_data()
        if self._activities is None:
            raise ValueError()
        return self._activities

    def __load_data(self) -> None:
        self._activities = []
        raw_activities = self._store.read(KEY_EVENTS, [])
        if not isinstance(raw_activities, list):
            LOGGER.warning("Ignoring stored events: expected a list")
            return
        for raw_activity in raw_activities:
            try:
                self._activities.append(
                    self.__convert_activity_for_deserialization(raw_activity)
                )
            except (KeyError, TypeError, ValueError) as e:
                LOGGER.warning("Skipping unreadable activity %r: %s", raw_activity, e)

    def __save_data(self) -> None:
        self._store.write(
            KEY_EVENTS,
            [
                self.__convert_activity_for_serialization(activity)
                for activity in self.activities
            ],
        )

    def __convert_activity_for_serialization(
        self, activity: Activity
    ) -> dict[str, Any]:
        serializable_activity: dict[str, Any] = dict(activity)
        serializable_activity["when"] = time.datetime_to_iso_str(activity["when"])
        return serializable_activity

    def __convert_activity_for_deserialization(self, raw: dict[str, Any]) -> Activity:
        # Older layouts stored the instant under "whenISO"
        when = raw["when"] if "when" in raw else raw["whenISO"]
        return {
            "id": str(raw["id"]),
            "title": str(raw.get("title") or ""),
            "when": time.datetime_from_str(when),
            "category": str(raw.get("category") or Category.OTHER),
            "done": bool(raw.get("done", False)),
        }

    def __find(self, id: EntityId) -> Optional[Activity]:
        for activity in self.activities:
            if activity["id"] == id:
                return activity
        return None

    def add(
        self,
        title: Optional[str],
        date_key: str,
        time_hhmm: Optional[str],
        category: str = Category.OTHER,
    ) -> Optional[EntityId]:
        """Create a new, not yet done activity.

        Returns:
            The new activity id, or None when the title is blank or the time
            is missing or malformed (nothing is stored in that case)
        """
        try:
            clean_title = validate_title(title)
            clean_time = validate_time_hhmm(time_hhmm)
            when = time.compose_instant(date_key, clean_time)
        except (ValidationError, time.FormatError) as e:
            LOGGER.debug("Rejected activity: %s", e)
            return None

        activity = get_activity_template()
        activity["id"] = self._id_factory()
        activity["title"] = clean_title
        activity["when"] = when
        activity["category"] = category
        self.activities.append(activity)
        self.__save_data()
        return activity["id"]

    def toggle_done(self, id: EntityId) -> Optional[Activity]:
        """Flip the done flag of an activity.

        Returns:
            A copy of the activity when it just became done, otherwise None
        """
        activity = self.__find(id)
        if activity is None:
            LOGGER.debug("toggle_done: no activity %s", id)
            return None
        activity["done"] = not activity["done"]
        self.__save_data()
        if activity["done"]:
            return deepcopy(activity)
        return None

    def update_title(self, id: EntityId, title: str) -> bool:
        activity = self.__find(id)
        if activity is None:
            LOGGER.debug("update_title: no activity %s", id)
            return False
        activity["title"] = title
        self.__save_data()
        return True

    def update_time(self, id: EntityId, time_hhmm: str) -> bool:
        """Move an activity to another time of day, keeping its date."""
        activity = self.__find(id)
        if activity is None:
            LOGGER.debug("update_time: no activity %s", id)
            return False
        try:
            clean_time = validate_time_hhmm(time_hhmm)
        except ValidationError as e:
            LOGGER.debug("Rejected time edit: %s", e)
            return False
        activity["when"] = time.compose_instant(
            time.date_key_of(activity["when"]), clean_time
        )
        self.__save_data()
        return True

    def delete(self, id: EntityId) -> bool:
        activity = self.__find(id)
        if activity is None:
            return False
        self.activities.remove(activity)
        self.__save_data()
        return True

    def clear_day(self, date_key: str) -> int:
        """Remove every activity on a day. Returns the number removed."""
        return self.__remove_where(
            lambda activity: time.date_key_of(activity["when"]) == date_key
        )

    def clear_done(self, date_key: str) -> int:
        """Remove the completed activities on a day. Returns the number removed."""
        return self.__remove_where(
            lambda activity: activity["done"]
            and time.date_key_of(activity["when"]) == date_key
        )

    def __remove_where(self, predicate: Callable[[Activity], bool]) -> int:
        initial_count = len(self.activities)
        self._activities = [
            activity for activity in self.activities if not predicate(activity)
        ]
        removed_count = initial_count - len(self.activities)
        if removed_count > 0:
            self.__save_data()
        return removed_count

    def get_activity(self, id: EntityId) -> Optional[Activity]:
        activity = self.__find(id)
        if activity is None:
            return None
        return deepcopy(activity)

    def get_all_activities(self) -> list[Activity]:
        return deepcopy(self.activities)

    def by_day(self, date_key: str) -> list[Activity]:
        """Activities on a day, ordered by instant then insertion order."""
        day_activities = [
            activity
            for activity in self.activities
            if time.date_key_of(activity["when"]) == date_key
        ]
        return deepcopy(sorted(day_activities, key=lambda activity: activity["when"]))

    def by_month(self, year: int, month: int) -> list[Activity]:
        """Activities within a (year, 0-indexed month), in instant order."""
        if not 0 <= month <= 11:
            raise ValueError(f"Month must be between 0 and 11, got {month}")
        return self.group_by_month(year)[month]

    def group_by_month(self, year: int) -> dict[int, list[Activity]]:
        """Group a year's activities by 0-indexed month, each in instant order."""
        grouped: dict[int, list[Activity]] = {month: [] for month in range(12)}
        for activity in sorted(self.activities, key=lambda activity: activity["when"]):
            when = activity["when"].in_tz("local")
            if when.year == year:
                grouped[when.month - 1].append(deepcopy(activity))
        return grouped
