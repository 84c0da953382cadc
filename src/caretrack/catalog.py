# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from caretrack.model.reward import TIER_ORDER, RewardDefinition, Tier

REWARD_CATALOG: tuple[RewardDefinition, ...] = (
    # Small (10-50)
    {
        "key": "foot",
        "label": "Foot massage",
        "cost": 10,
        "tier": Tier.SMALL,
        "icon": "🦶",
    },
    {
        "key": "back",
        "label": "Back rub",
        "cost": 15,
        "tier": Tier.SMALL,
        "icon": "💆‍♀️",
    },
    {
        "key": "diapers3",
        "label": "I change the next 3 diapers",
        "cost": 20,
        "tier": Tier.SMALL,
        "icon": "🍼",
    },
    {
        "key": "shower",
        "label": "Uninterrupted shower time",
        "cost": 25,
        "tier": Tier.SMALL,
        "icon": "🫧",
    },
    {
        "key": "bedtime",
        "label": "I do the bedtime routine",
        "cost": 30,
        "tier": Tier.SMALL,
        "icon": "🌙",
    },
    {
        "key": "snack",
        "label": "Favorite snack/dessert run",
        "cost": 50,
        "tier": Tier.SMALL,
        "icon": "🍰",
    },
    # Medium (75-150)
    {
        "key": "morning",
        "label": "I handle all baby duties (morning)",
        "cost": 75,
        "tier": Tier.MEDIUM,
        "icon": "☀️",
    },
    {
        "key": "spa",
        "label": "Full at-home spa setup",
        "cost": 100,
        "tier": Tier.MEDIUM,
        "icon": "🕯️",
    },
    {
        "key": "breakfast",
        "label": "Breakfast in bed",
        "cost": 100,
        "tier": Tier.MEDIUM,
        "icon": "🥞",
    },
    {
        "key": "housework",
        "label": "I handle ALL housework for a day",
        "cost": 150,
        "tier": Tier.MEDIUM,
        "icon": "🧹",
    },
    # Large (200-400)
    {
        "key": "date",
        "label": "Planned at-home date night",
        "cost": 200,
        "tier": Tier.LARGE,
        "icon": "💖",
    },
    {
        "key": "movie",
        "label": "Her choice: movie & snacks night",
        "cost": 200,
        "tier": Tier.LARGE,
        "icon": "🎬",
    },
    {
        "key": "daytrip",
        "label": "Day trip to a favorite place",
        "cost": 300,
        "tier": Tier.LARGE,
        "icon": "🧺",
    },
    {
        "key": "nochores",
        "label": "No chores, no baby duty day",
        "cost": 400,
        "tier": Tier.LARGE,
        "icon": "🏖️",
    },
    # Special (500+)
    {
        "key": "weekend",
        "label": "Weekend getaway",
        "cost": 500,
        "tier": Tier.SPECIAL,
        "icon": "✈️",
    },
    {
        "key": "dreamday",
        "label": "Her dream day (you plan everything)",
        "cost": 600,
        "tier": Tier.SPECIAL,
        "icon": "🌟",
    },
)


def get_reward(key: str) -> Optional[RewardDefinition]:
    for reward in REWARD_CATALOG:
        if reward["key"] == key:
            return deepcopy(reward)
    return None


def get_all_rewards() -> list[RewardDefinition]:
    return deepcopy(list(REWARD_CATALOG))


def rewards_by_tier() -> dict[Tier, list[RewardDefinition]]:
    grouped: dict[Tier, list[RewardDefinition]] = {tier: [] for tier in TIER_ORDER}
    for reward in get_all_rewards():
        grouped[reward["tier"]].append(reward)
    return grouped


def affordable_rewards(balance: int) -> list[RewardDefinition]:
    return [reward for reward in get_all_rewards() if reward["cost"] <= balance]


def reward_keys() -> list[str]:
    return [reward["key"] for reward in REWARD_CATALOG]
