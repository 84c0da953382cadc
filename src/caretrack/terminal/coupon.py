# SPDX-License-Identifier: MIT

import typer
from rich.console import Console

from caretrack.session import get_session
from caretrack.terminal.custom_typer import AliasedTyperGroup
from caretrack.terminal.parse import resolve_id
from caretrack.view import economy as economy_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_coupons() -> None:
    session = get_session()
    economy_view.coupons_view(session.ledger.balance, session.coupons.list_coupons())


@app.command("use, u", no_args_is_help=True)
def use(id: str) -> None:
    session = get_session()
    real_id = resolve_id(
        id, [coupon["id"] for coupon in session.coupons.get_all_coupons()]
    )
    coupon = session.coupons.get_coupon(real_id)

    session.economy.use_coupon(real_id)

    if coupon is not None:
        console = Console()
        console.print(f"Coupon used: {coupon['icon']} {coupon['label']}")
