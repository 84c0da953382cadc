# SPDX-License-Identifier: MIT

import logging

LOGGER = logging.getLogger(__package__)

# Persisted keys
KEY_EVENTS = "events"
KEY_POINTS = "points"
KEY_LEDGER = "ledger"
KEY_REDEMPTIONS = "redemptions"
KEY_COUPONS = "coupons"
KEY_CHECKLISTS = "checklists"
KEY_DAY_DATE = "dayDate"
KEY_MONTH_CURSOR = "monthCursor"
KEY_YEAR_CURSOR = "yearCursor"
KEY_ACTIVE_LIST_ID = "activeListId"
KEY_TAB = "tab"

UNTITLED = "(untitled)"
DEFAULT_TAB = "schedule"
TABS = ("schedule", "month", "year", "rewards", "checklists")

HOURS_PER_DAY = 24
MONTH_GRID_CELLS = 42
MONTH_CELL_LIMIT = 3

OPENING_BALANCE_REASON = "opening balance"
