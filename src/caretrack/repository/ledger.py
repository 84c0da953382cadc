# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Callable, Optional

import pendulum

from caretrack import time
from caretrack.const import (
    KEY_LEDGER,
    KEY_POINTS,
    KEY_REDEMPTIONS,
    LOGGER,
    OPENING_BALANCE_REASON,
)
from caretrack.model.coupon import DEFAULT_COUPON_ICON
from caretrack.model.entity_id import EntityId
from caretrack.model.ledger import (
    InsufficientFunds,
    RewardReference,
    Transaction,
    TransactionKind,
)
from caretrack.model.reward import Tier
from caretrack.repository.store import KeyValueStore

REWARD_REFERENCE_FIELDS = ("key", "label", "tier", "icon", "coupon_id")


class PointsLedger:
    """Point balance backed by an append-only transaction history.

    The balance is always the sum of earned minus spent amounts. Nothing
    is ever removed from the history; a reversal is a new transaction.
    """

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], pendulum.DateTime] = time.now_local,
    ) -> None:
        self._store = store
        self._clock = clock
        self._history: Optional[list[Transaction]] = None

    @property
    def history(self) -> list[Transaction]:
        if self._history is None:
            self.__load_data()
        if self._history is None:
            raise ValueError()
        return self._history

    @property
    def balance(self) -> int:
        return self.total_earned() - self.total_spent()

    def __load_data(self) -> None:
        self._history = []
        raw_history = self._store.read(KEY_LEDGER, [])
        if isinstance(raw_history, list):
            for raw_transaction in raw_history:
                try:
                    self._history.append(
                        self.__convert_transaction_for_deserialization(raw_transaction)
                    )
                except (KeyError, TypeError, ValueError) as e:
                    LOGGER.warning(
                        "Skipping unreadable transaction %r: %s", raw_transaction, e
                    )

        if len(self._history) == 0:
            self.__import_legacy_balance()

        if self.balance < 0:
            LOGGER.warning("Stored ledger has a negative balance, starting empty")
            self._history = []
            self.__save_data()

    def __import_legacy_balance(self) -> None:
        """Seed an empty history from a stored balance and redemption list.

        The opening Earn covers the balance plus every imported redemption,
        so the balance after the import equals the stored one.
        """
        stored_points = self._store.read(KEY_POINTS, 0)
        if not isinstance(stored_points, int) or stored_points < 0:
            stored_points = 0

        spends: list[Transaction] = []
        raw_redemptions = self._store.read(KEY_REDEMPTIONS, [])
        if isinstance(raw_redemptions, list):
            for raw_redemption in raw_redemptions:
                try:
                    spends.append(self.__convert_redemption_to_spend(raw_redemption))
                except (KeyError, TypeError, ValueError) as e:
                    LOGGER.warning(
                        "Skipping unreadable redemption %r: %s", raw_redemption, e
                    )

        opening_amount = stored_points + sum(spend["amount"] for spend in spends)
        if opening_amount == 0:
            return
        self.history.append(
            self.__new_transaction(
                TransactionKind.EARN, opening_amount, OPENING_BALANCE_REASON
            )
        )
        self.history.extend(spends)
        self.__save_data()
        LOGGER.info(
            "Imported opening balance of %d points and %d redemptions",
            opening_amount,
            len(spends),
        )

    def __save_data(self) -> None:
        self._store.write(
            KEY_LEDGER,
            [
                self.__convert_transaction_for_serialization(transaction)
                for transaction in self.history
            ],
        )
        self._store.write(KEY_POINTS, self.balance)

    def __convert_transaction_for_serialization(
        self, transaction: Transaction
    ) -> dict[str, Any]:
        serializable_transaction: dict[str, Any] = deepcopy(dict(transaction))
        serializable_transaction["timestamp"] = time.datetime_to_iso_str(
            transaction["timestamp"]
        )
        return serializable_transaction

    def __convert_transaction_for_deserialization(
        self, raw: dict[str, Any]
    ) -> Transaction:
        amount = int(raw["amount"])
        if amount <= 0:
            raise ValueError(f"amount must be positive, got {amount}")
        return {
            "kind": TransactionKind(raw["kind"]),
            "amount": amount,
            "reason": str(raw.get("reason") or ""),
            "timestamp": time.datetime_from_str(raw["timestamp"]),
            "activity_id": raw.get("activity_id"),
            "reward": self.__convert_reward_for_deserialization(raw.get("reward")),
        }

    def __convert_reward_for_deserialization(
        self, raw: Any
    ) -> Optional[RewardReference]:
        if raw is None:
            return None
        if not isinstance(raw, dict) or any(
            not isinstance(raw.get(field), str) for field in REWARD_REFERENCE_FIELDS
        ):
            # The amount still counts toward the balance without the reference
            LOGGER.warning("Dropping unreadable reward reference %r", raw)
            return None
        return {
            "key": raw["key"],
            "label": raw["label"],
            "tier": raw["tier"],
            "icon": raw["icon"],
            "coupon_id": raw["coupon_id"],
        }

    def __convert_redemption_to_spend(self, raw: dict[str, Any]) -> Transaction:
        # Older layouts used "id", "reward" and "date" for the coupon id,
        # reward key and redemption time
        coupon_id = raw["coupon_id"] if "coupon_id" in raw else raw["id"]
        reward_key = raw["reward_key"] if "reward_key" in raw else raw["reward"]
        redeemed = raw["redeemed"] if "redeemed" in raw else raw["date"]
        amount = int(raw["cost"])
        if amount <= 0:
            raise ValueError(f"cost must be positive, got {amount}")
        label = str(raw.get("label") or reward_key)
        return {
            "kind": TransactionKind.SPEND,
            "amount": amount,
            "reason": f"Redeemed: {label}",
            "timestamp": time.datetime_from_str(redeemed),
            "activity_id": None,
            "reward": {
                "key": str(reward_key),
                "label": label,
                "tier": str(raw.get("tier") or Tier.SMALL),
                "icon": str(raw.get("icon") or DEFAULT_COUPON_ICON),
                "coupon_id": str(coupon_id),
            },
        }

    def __new_transaction(
        self,
        kind: TransactionKind,
        amount: int,
        reason: str,
        activity_id: Optional[EntityId] = None,
        reward: Optional[RewardReference] = None,
    ) -> Transaction:
        return {
            "kind": kind,
            "amount": amount,
            "reason": reason,
            "timestamp": self._clock(),
            "activity_id": activity_id,
            "reward": reward,
        }

    def credit(
        self,
        amount: int,
        reason: str,
        activity_id: Optional[EntityId] = None,
        reward: Optional[RewardReference] = None,
    ) -> Transaction:
        """Append an Earn transaction. Amounts below one are raised to one."""
        transaction = self.__new_transaction(
            TransactionKind.EARN,
            max(amount, 1),
            reason,
            activity_id=activity_id,
            reward=reward,
        )
        self.history.append(transaction)
        self.__save_data()
        LOGGER.info("Credited %d points (%s)", transaction["amount"], reason)
        return deepcopy(transaction)

    def debit(
        self, amount: int, reason: str, reward: Optional[RewardReference] = None
    ) -> Transaction | InsufficientFunds:
        """Append a Spend transaction if the balance covers it.

        Returns:
            The new transaction, or InsufficientFunds with nothing changed
        """
        if amount <= 0:
            raise ValueError(f"Debit amount must be positive, got {amount}")
        balance = self.balance
        if amount > balance:
            LOGGER.debug("Debit of %d refused, balance is %d", amount, balance)
            return InsufficientFunds(balance=balance, cost=amount)
        transaction = self.__new_transaction(
            TransactionKind.SPEND, amount, reason, reward=reward
        )
        self.history.append(transaction)
        self.__save_data()
        LOGGER.info("Debited %d points (%s)", amount, reason)
        return deepcopy(transaction)

    def total_earned(self) -> int:
        return sum(
            transaction["amount"]
            for transaction in self.history
            if transaction["kind"] == TransactionKind.EARN
        )

    def total_spent(self) -> int:
        return sum(
            transaction["amount"]
            for transaction in self.history
            if transaction["kind"] == TransactionKind.SPEND
        )

    def get_history(self) -> list[Transaction]:
        return deepcopy(self.history)
