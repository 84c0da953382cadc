# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from caretrack.model.entity_id import EntityId

DEFAULT_COUPON_ICON = "🎟️"


class Coupon(TypedDict):
    id: EntityId
    reward_key: str
    label: str
    cost: int
    tier: str
    icon: str
    issued: pendulum.DateTime
