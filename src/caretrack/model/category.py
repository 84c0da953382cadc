# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict

UNKNOWN_CATEGORY_POINTS = 1


class Category(StrEnum):
    FEEDING = "feeding"
    NAP = "nap"
    TUMMY = "tummy"
    BATH = "bath"
    PLAY = "play"
    CLASS = "class"
    DOCTOR = "doctor"
    OTHER = "other"


class CategoryDefinition(TypedDict):
    key: Category
    label: str
    points: int


CATEGORIES: tuple[CategoryDefinition, ...] = (
    {"key": Category.FEEDING, "label": "Feeding", "points": 8},
    {"key": Category.NAP, "label": "Nap", "points": 6},
    {"key": Category.TUMMY, "label": "Tummy Time", "points": 8},
    {"key": Category.BATH, "label": "Bath", "points": 6},
    {"key": Category.PLAY, "label": "Play", "points": 4},
    {"key": Category.CLASS, "label": "Class", "points": 12},
    {"key": Category.DOCTOR, "label": "Doctor", "points": 20},
    {"key": Category.OTHER, "label": "Other", "points": 3},
)


def points_for(category: str) -> int:
    """Points earned for completing an activity, 1 for unknown categories."""
    for definition in CATEGORIES:
        if definition["key"] == category:
            return definition["points"]
    return UNKNOWN_CATEGORY_POINTS


def label_for(category: str) -> str:
    for definition in CATEGORIES:
        if definition["key"] == category:
            return definition["label"]
    return category.title()


def category_keys() -> list[str]:
    return [str(definition["key"]) for definition in CATEGORIES]
