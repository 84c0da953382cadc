# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from caretrack.session import get_session
from caretrack.terminal.custom_typer import AliasedTyperGroup
from caretrack.view import economy as economy_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("balance, b")
def balance() -> None:
    session = get_session()
    economy_view.balance_view(
        session.ledger.balance,
        session.ledger.total_earned(),
        session.ledger.total_spent(),
    )


@app.command("history, h")
def history(
    limit: Annotated[
        Optional[int], typer.Option("--limit", "-l", min=1, help="most recent only")
    ] = None,
) -> None:
    session = get_session()
    transactions = session.ledger.get_history()
    if limit is not None:
        transactions = transactions[-limit:]
    economy_view.history_view(session.ledger.balance, transactions)
