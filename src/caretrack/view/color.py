# SPDX-License-Identifier: MIT

DONE_COLOR = "bright_black"
OUTSIDE_MONTH_COLOR = "grey50"
TODAY_COLOR = "bold dark_orange"
EARN_COLOR = "green"
SPEND_COLOR = "red"

TIER_COLORS = {
    "Small": "tan",
    "Medium": "grey74",
    "Large": "gold1",
    "Special": "plum1",
}


def tier_color(tier: str) -> str:
    return TIER_COLORS.get(tier, "white")
