# SPDX-License-Identifier: MIT

from typing import Callable, Optional

import pendulum

from caretrack import configuration, time
from caretrack.const import MONTH_CELL_LIMIT
from caretrack.model.entity_id import IdFactory, generate_entity_id
from caretrack.repository.activity import ActivityRepository
from caretrack.repository.checklist import ChecklistRepository
from caretrack.repository.configuration import CONFIGURATION_REPO
from caretrack.repository.coupon import CouponInventory
from caretrack.repository.ledger import PointsLedger
from caretrack.repository.store import JsonFileStore, KeyValueStore
from caretrack.repository.view_state import ViewStateRepository
from caretrack.service.calendar import CalendarProjector
from caretrack.service.economy import RewardEconomy


class Session:
    """The stores and services of one interactive session, sharing one store."""

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], pendulum.DateTime] = time.now_local,
        id_factory: IdFactory = generate_entity_id,
        cell_limit: int = MONTH_CELL_LIMIT,
    ) -> None:
        self.store = store
        self.activities = ActivityRepository(store, id_factory=id_factory)
        self.ledger = PointsLedger(store, clock=clock)
        self.coupons = CouponInventory(store)
        self.economy = RewardEconomy(
            store,
            self.activities,
            self.ledger,
            self.coupons,
            clock=clock,
            id_factory=id_factory,
        )
        self.calendar = CalendarProjector(self.activities, cell_limit=cell_limit)
        self.view_state = ViewStateRepository(store)
        self.checklists = ChecklistRepository(store, id_factory=id_factory)


_session: Optional[Session] = None


def get_session() -> Session:
    global _session
    if _session is None:
        config = CONFIGURATION_REPO.get_config()
        _session = Session(
            JsonFileStore(configuration.DATA_PATH),
            cell_limit=config["month_cell_limit"],
        )
    return _session


def set_session(session: Optional[Session]) -> None:
    global _session
    _session = session
