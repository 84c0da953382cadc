# SPDX-License-Identifier: MIT

from typing import Any, Callable, Optional

import pendulum

from caretrack import catalog, time
from caretrack.const import KEY_REDEMPTIONS, LOGGER
from caretrack.model.activity import Activity
from caretrack.model.category import label_for, points_for
from caretrack.model.coupon import DEFAULT_COUPON_ICON, Coupon
from caretrack.model.entity_id import EntityId, IdFactory, generate_entity_id
from caretrack.model.ledger import (
    InsufficientFunds,
    Redemption,
    RedemptionFailed,
    RewardReference,
    Transaction,
    TransactionKind,
)
from caretrack.model.reward import Tier
from caretrack.repository.activity import ActivityRepository
from caretrack.repository.coupon import CouponInventory
from caretrack.repository.ledger import PointsLedger
from caretrack.repository.store import KeyValueStore


class RewardEconomy:
    """Moves points between completed activities, the ledger and coupons.

    A redemption is one state transition: either the ledger is debited and
    a coupon is issued, or neither happens.
    """

    def __init__(
        self,
        store: KeyValueStore,
        activities: ActivityRepository,
        ledger: PointsLedger,
        coupons: CouponInventory,
        clock: Callable[[], pendulum.DateTime] = time.now_local,
        id_factory: IdFactory = generate_entity_id,
    ) -> None:
        self._store = store
        self.activities = activities
        self.ledger = ledger
        self.coupons = coupons
        self._clock = clock
        self._id_factory = id_factory

    def toggle_activity_done(self, id: EntityId) -> Optional[Transaction]:
        """Toggle an activity, crediting its category points when it becomes done.

        Marking it not done again keeps the points already earned.
        """
        completed = self.activities.toggle_done(id)
        if completed is None:
            return None
        return self.__credit_completion(completed)

    def complete_activity(self, id: EntityId) -> Optional[Transaction]:
        """Mark an activity done. Already done or missing activities earn nothing."""
        activity = self.activities.get_activity(id)
        if activity is None or activity["done"]:
            return None
        return self.toggle_activity_done(id)

    def __credit_completion(self, activity: Activity) -> Transaction:
        reason = f"{label_for(activity['category'])}: {activity['title']}"
        return self.ledger.credit(
            points_for(activity["category"]), reason, activity_id=activity["id"]
        )

    def redeem(
        self, reward_key: str
    ) -> Optional[Coupon | InsufficientFunds | RedemptionFailed]:
        """Spend points on a catalog reward and issue a coupon for it.

        Returns:
            The issued coupon, InsufficientFunds when the balance is too low,
            RedemptionFailed when the coupon could not be stored (the points
            are refunded), or None for a reward key that is not in the catalog
        """
        reward = catalog.get_reward(reward_key)
        if reward is None:
            LOGGER.debug("redeem: no reward %s", reward_key)
            return None

        balance = self.ledger.balance
        if reward["cost"] > balance:
            return InsufficientFunds(balance=balance, cost=reward["cost"])

        # Mint before debiting so a failed mint leaves the ledger untouched
        coupon: Coupon = {
            "id": self._id_factory(),
            "reward_key": reward["key"],
            "label": reward["label"],
            "cost": reward["cost"],
            "tier": reward.get("tier") or Tier.SMALL,
            "icon": reward.get("icon") or DEFAULT_COUPON_ICON,
            "issued": self._clock(),
        }
        reference: RewardReference = {
            "key": coupon["reward_key"],
            "label": coupon["label"],
            "tier": coupon["tier"],
            "icon": coupon["icon"],
            "coupon_id": coupon["id"],
        }

        result = self.ledger.debit(
            coupon["cost"], f"Redeemed: {coupon['label']}", reward=reference
        )
        if isinstance(result, InsufficientFunds):
            return result

        try:
            self.coupons.issue(coupon)
        except ValueError as e:
            LOGGER.warning("Could not issue coupon for %s: %s", reward_key, e)
            self.ledger.credit(
                coupon["cost"], f"Refund: {coupon['label']}", reward=reference
            )
            return RedemptionFailed(reward_key=reward_key, reason=str(e))

        self._store.write(
            KEY_REDEMPTIONS,
            [
                self.__convert_redemption_for_serialization(redemption)
                for redemption in self.redemption_history()
            ],
        )
        LOGGER.info("Redeemed %s for %d points", coupon["reward_key"], coupon["cost"])
        return coupon

    def use_coupon(self, id: EntityId) -> bool:
        """Claim a coupon. Points are not returned."""
        return self.coupons.use_coupon(id)

    def redemption_history(self) -> list[Redemption]:
        """Redemptions in the order they happened, read from the ledger."""
        history = self.ledger.get_history()
        refunded = {
            transaction["reward"]["coupon_id"]
            for transaction in history
            if transaction["kind"] == TransactionKind.EARN
            and transaction["reward"] is not None
        }
        redemptions: list[Redemption] = []
        for transaction in history:
            reward = transaction["reward"]
            if transaction["kind"] != TransactionKind.SPEND or reward is None:
                continue
            if reward["coupon_id"] in refunded:
                continue
            redemptions.append(
                {
                    "coupon_id": reward["coupon_id"],
                    "reward_key": reward["key"],
                    "label": reward["label"],
                    "cost": transaction["amount"],
                    "tier": reward["tier"],
                    "icon": reward["icon"],
                    "redeemed": transaction["timestamp"],
                }
            )
        return redemptions

    def __convert_redemption_for_serialization(
        self, redemption: Redemption
    ) -> dict[str, Any]:
        serializable_redemption: dict[str, Any] = dict(redemption)
        serializable_redemption["redeemed"] = time.datetime_to_iso_str(
            redemption["redeemed"]
        )
        return serializable_redemption
