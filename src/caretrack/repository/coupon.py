# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from caretrack import time
from caretrack.const import KEY_COUPONS, LOGGER
from caretrack.model.coupon import DEFAULT_COUPON_ICON, Coupon
from caretrack.model.entity_id import EntityId
from caretrack.model.reward import Tier
from caretrack.repository.store import KeyValueStore


class CouponInventory:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self._coupons: Optional[list[Coupon]] = None

    @property
    def coupons(self) -> list[Coupon]:
        if self._coupons is None:
            self.__load_data()
        if self._coupons is None:
            raise ValueError()
        return self._coupons

    def __load_data(self) -> None:
        self._coupons = []
        raw_coupons = self._store.read(KEY_COUPONS, [])
        if not isinstance(raw_coupons, list):
            LOGGER.warning("Ignoring stored coupons: expected a list")
            return
        for raw_coupon in raw_coupons:
            try:
                self._coupons.append(
                    self.__convert_coupon_for_deserialization(raw_coupon)
                )
            except (KeyError, TypeError, ValueError) as e:
                LOGGER.warning("Skipping unreadable coupon %r: %s", raw_coupon, e)

    def __save_data(self) -> None:
        self._store.write(
            KEY_COUPONS,
            [
                self.__convert_coupon_for_serialization(coupon)
                for coupon in self.coupons
            ],
        )

    def __convert_coupon_for_serialization(self, coupon: Coupon) -> dict[str, Any]:
        serializable_coupon: dict[str, Any] = dict(coupon)
        serializable_coupon["issued"] = time.datetime_to_iso_str(coupon["issued"])
        return serializable_coupon

    def __convert_coupon_for_deserialization(self, raw: dict[str, Any]) -> Coupon:
        # Older layouts used "reward" and "date" for the key and issue time
        reward_key = raw["reward_key"] if "reward_key" in raw else raw["reward"]
        issued = raw["issued"] if "issued" in raw else raw["date"]
        return {
            "id": str(raw["id"]),
            "reward_key": str(reward_key),
            "label": str(raw.get("label") or reward_key),
            "cost": int(raw["cost"]),
            "tier": str(raw.get("tier") or Tier.SMALL),
            "icon": str(raw.get("icon") or DEFAULT_COUPON_ICON),
            "issued": time.datetime_from_str(issued),
        }

    def issue(self, coupon: Coupon) -> None:
        if self.get_coupon(coupon["id"]) is not None:
            raise ValueError(f"Coupon {coupon['id']} is already issued")
        self.coupons.append(deepcopy(coupon))
        self.__save_data()

    def use_coupon(self, id: EntityId) -> bool:
        """Consume a coupon. Returns False when it is not in the inventory."""
        for coupon in self.coupons:
            if coupon["id"] == id:
                self.coupons.remove(coupon)
                self.__save_data()
                LOGGER.info("Used coupon %s (%s)", id, coupon["label"])
                return True
        LOGGER.debug("use_coupon: no coupon %s", id)
        return False

    def get_coupon(self, id: EntityId) -> Optional[Coupon]:
        for coupon in self.coupons:
            if coupon["id"] == id:
                return deepcopy(coupon)
        return None

    def get_all_coupons(self) -> list[Coupon]:
        return deepcopy(self.coupons)

    def list_coupons(self) -> list[Coupon]:
        """Coupons with the most recently issued first."""
        return list(reversed(self.get_all_coupons()))
