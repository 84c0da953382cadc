# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console

from caretrack import catalog
from caretrack.model.ledger import InsufficientFunds, RedemptionFailed
from caretrack.session import get_session
from caretrack.terminal.custom_typer import AliasedTyperGroup
from caretrack.view import economy as economy_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def complete_reward(incomplete: str) -> list[str]:
    return [key for key in catalog.reward_keys() if key.startswith(incomplete)]


@app.command("list, ls")
def list_rewards() -> None:
    session = get_session()
    economy_view.rewards_view(session.ledger.balance, catalog.rewards_by_tier())


@app.command("redeem, r", no_args_is_help=True)
def redeem(
    key: Annotated[str, typer.Argument(autocompletion=complete_reward)],
) -> None:
    session = get_session()

    result = session.economy.redeem(key)

    if result is None:
        raise typer.BadParameter(f"Unknown reward '{key}'")
    if isinstance(result, InsufficientFunds):
        economy_view.insufficient_funds_view(result)
        raise typer.Exit(1)
    if isinstance(result, RedemptionFailed):
        economy_view.redemption_failed_view(result)
        raise typer.Exit(1)

    console = Console()
    console.print(
        f"Coupon added: {result['icon']} {result['label']} (-{result['cost']} pts)"
    )


@app.command("history, h")
def history() -> None:
    session = get_session()
    economy_view.redemptions_view(
        session.ledger.balance, session.economy.redemption_history()
    )
