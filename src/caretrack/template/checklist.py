# SPDX-License-Identifier: MIT

from caretrack.model.checklist import Checklist
from caretrack.model.entity_id import generate_entity_id

SEEDED_CHECKLIST_NAMES = ("Hospital Bag", "Diaper Bag")


def get_checklist_template(name: str) -> Checklist:
    return {"id": generate_entity_id(), "name": name, "items": []}


def get_seeded_checklists() -> list[Checklist]:
    return [get_checklist_template(name) for name in SEEDED_CHECKLIST_NAMES]
