# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from caretrack.model.coupon import Coupon
from caretrack.model.ledger import (
    InsufficientFunds,
    Redemption,
    RedemptionFailed,
    Transaction,
    TransactionKind,
)
from caretrack.model.reward import RewardDefinition, Tier
from caretrack.terminal.parse import short_id
from caretrack.time import datetime_to_display_str
from caretrack.view.color import EARN_COLOR, SPEND_COLOR, tier_color
from caretrack.view.header import header


def balance_view(balance: int, total_earned: int, total_spent: int) -> None:
    header(balance, "points")

    balance_table = Table(box=box.SIMPLE)
    balance_table.add_column("property")
    balance_table.add_column("value", justify="right")
    balance_table.add_row("balance", str(balance))
    balance_table.add_row("earned", str(total_earned))
    balance_table.add_row("spent", str(total_spent))

    console = Console()
    console.print(balance_table)


def history_view(balance: int, transactions: list[Transaction]) -> None:
    header(balance, "history")

    history_table = Table(box=box.SIMPLE)
    history_table.add_column("when")
    history_table.add_column("points", justify="right")
    history_table.add_column("reason")

    for transaction in transactions:
        if transaction["kind"] == TransactionKind.EARN:
            amount = Text(f"+{transaction['amount']}", style=EARN_COLOR)
        else:
            amount = Text(f"-{transaction['amount']}", style=SPEND_COLOR)
        history_table.add_row(
            datetime_to_display_str(transaction["timestamp"]),
            amount,
            transaction["reason"],
        )

    console = Console()
    console.print(history_table)


def rewards_view(
    balance: int, rewards_by_tier: dict[Tier, list[RewardDefinition]]
) -> None:
    header(balance, "rewards")

    console = Console()
    for tier, rewards in rewards_by_tier.items():
        rewards_table = Table(
            box=box.SIMPLE, title=str(tier), title_style=tier_color(tier)
        )
        rewards_table.add_column("key")
        rewards_table.add_column("reward")
        rewards_table.add_column("cost", justify="right")
        for reward in rewards:
            affordable = reward["cost"] <= balance
            style = "white" if affordable else "dim"
            rewards_table.add_row(
                Text(reward["key"], style=style),
                Text(
                    f"{reward.get('icon', '')} {reward['label']}".strip(), style=style
                ),
                Text(f"{reward['cost']} pts", style=style),
            )
        console.print(rewards_table)


def coupons_view(balance: int, coupons: list[Coupon]) -> None:
    header(balance, "coupons")

    console = Console()
    if len(coupons) == 0:
        console.print("  No coupons yet. Redeem a reward to add one here.")
        return

    coupons_table = Table(box=box.SIMPLE)
    coupons_table.add_column("id")
    coupons_table.add_column("coupon")
    coupons_table.add_column("cost", justify="right")
    coupons_table.add_column("earned")

    for coupon in coupons:
        coupons_table.add_row(
            short_id(coupon["id"]),
            Text(
                f"{coupon['icon']} {coupon['label']}",
                style=tier_color(coupon["tier"]),
            ),
            f"{coupon['cost']} pts",
            datetime_to_display_str(coupon["issued"]),
        )
    console.print(coupons_table)


def redemptions_view(balance: int, redemptions: list[Redemption]) -> None:
    header(balance, "redemptions")

    redemptions_table = Table(box=box.SIMPLE)
    redemptions_table.add_column("when")
    redemptions_table.add_column("reward")
    redemptions_table.add_column("cost", justify="right")

    for redemption in redemptions:
        redemptions_table.add_row(
            datetime_to_display_str(redemption["redeemed"]),
            f"{redemption['icon']} {redemption['label']}",
            f"{redemption['cost']} pts",
        )

    console = Console()
    console.print(redemptions_table)


def insufficient_funds_view(result: InsufficientFunds) -> None:
    console = Console()
    console.print(
        f"[red]Not enough points:[/red] need {result.cost}, "
        f"have {result.balance} ({result.shortfall} short)"
    )


def redemption_failed_view(result: RedemptionFailed) -> None:
    console = Console()
    console.print(
        f"[red]Could not add a coupon for '{result.reward_key}':[/red] "
        f"{result.reason}. Your points were refunded."
    )
