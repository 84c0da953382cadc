# SPDX-License-Identifier: MIT

from caretrack.model.activity import Activity
from caretrack.model.category import Category
from caretrack.time import now_local


def get_activity_template() -> Activity:
    return {
        "id": "",
        "title": "",
        "when": now_local(),
        "category": Category.OTHER,
        "done": False,
    }
