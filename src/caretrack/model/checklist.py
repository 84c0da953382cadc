# SPDX-License-Identifier: MIT

from typing import TypedDict

from caretrack.model.entity_id import EntityId


class ChecklistItem(TypedDict):
    id: EntityId
    text: str
    done: bool


class Checklist(TypedDict):
    id: EntityId
    name: str
    items: list[ChecklistItem]
