# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from caretrack.terminal import (
    activity,
    checklist,
    configuration,
    coupon,
    points,
    reward,
    view,
)
from caretrack.terminal.custom_typer import AliasedTyperGroup
from caretrack.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="caretrack - Caregiving schedule with points and rewards",
    no_args_is_help=True,
)
app.add_typer(activity.app, name="activity, ac")
app.add_typer(view.app, name="view, v")
app.add_typer(points.app, name="points, p")
app.add_typer(reward.app, name="reward, r")
app.add_typer(coupon.app, name="coupon, co")
app.add_typer(checklist.app, name="checklist, cl")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
) -> None:
    """
    caretrack - Caregiving schedule with points and rewards

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
