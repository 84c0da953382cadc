"""Tests for the reward catalog and category table."""

from caretrack import catalog
from caretrack.model.category import category_keys, label_for, points_for
from caretrack.model.reward import TIER_ORDER, Tier


class TestRewardCatalog:
    def test_keys_are_unique(self) -> None:
        keys = catalog.reward_keys()
        assert len(keys) == len(set(keys)) == 16

    def test_get_reward(self) -> None:
        reward = catalog.get_reward("foot")
        assert reward is not None
        assert reward["cost"] == 10
        assert reward["tier"] == Tier.SMALL
        assert catalog.get_reward("pony") is None

    def test_returned_rewards_are_copies(self) -> None:
        reward = catalog.get_reward("foot")
        assert reward is not None
        reward["cost"] = 0
        assert catalog.get_reward("foot") == catalog.REWARD_CATALOG[0]

    def test_rewards_by_tier_follow_tier_order(self) -> None:
        grouped = catalog.rewards_by_tier()
        assert list(grouped) == list(TIER_ORDER)
        assert [r["key"] for r in grouped[Tier.SPECIAL]] == ["weekend", "dreamday"]

    def test_affordable_rewards(self) -> None:
        assert [r["key"] for r in catalog.affordable_rewards(15)] == ["foot", "back"]
        assert catalog.affordable_rewards(9) == []


class TestCategories:
    def test_points_per_category(self) -> None:
        assert points_for("doctor") == 20
        assert points_for("class") == 12
        assert points_for("other") == 3
        assert points_for("unlisted") == 1

    def test_labels(self) -> None:
        assert label_for("tummy") == "Tummy Time"
        assert label_for("unlisted") == "Unlisted"

    def test_keys(self) -> None:
        assert category_keys()[0] == "feeding"
        assert len(category_keys()) == 8
