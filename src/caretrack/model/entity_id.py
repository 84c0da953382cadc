# SPDX-License-Identifier: MIT

import uuid
from typing import Callable, TypeAlias

EntityId: TypeAlias = str

IdFactory: TypeAlias = Callable[[], EntityId]


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())
