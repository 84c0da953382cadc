# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import NotRequired, TypedDict


class Tier(StrEnum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    SPECIAL = "Special"


TIER_ORDER: tuple[Tier, ...] = (Tier.SMALL, Tier.MEDIUM, Tier.LARGE, Tier.SPECIAL)


class RewardDefinition(TypedDict):
    key: str
    label: str
    cost: int
    tier: Tier
    icon: NotRequired[str]
