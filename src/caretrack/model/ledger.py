# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import NamedTuple, Optional, TypedDict

import pendulum

from caretrack.model.entity_id import EntityId


class TransactionKind(StrEnum):
    EARN = "earn"
    SPEND = "spend"


class RewardReference(TypedDict):
    key: str
    label: str
    tier: str
    icon: str
    coupon_id: EntityId


class Transaction(TypedDict):
    kind: TransactionKind
    amount: int
    reason: str
    timestamp: pendulum.DateTime
    activity_id: Optional[EntityId]
    reward: Optional[RewardReference]


class Redemption(TypedDict):
    coupon_id: EntityId
    reward_key: str
    label: str
    cost: int
    tier: str
    icon: str
    redeemed: pendulum.DateTime


class InsufficientFunds(NamedTuple):
    """Result of a debit or redemption the balance cannot cover."""

    balance: int
    cost: int

    @property
    def shortfall(self) -> int:
        return self.cost - self.balance


class RedemptionFailed(NamedTuple):
    """Result of a redemption whose coupon could not be issued.

    The points were refunded with a compensating Earn transaction.
    """

    reward_key: str
    reason: str
