# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from caretrack.model.entity_id import EntityId


class Activity(TypedDict):
    id: EntityId
    title: str
    when: pendulum.DateTime
    category: str
    done: bool
