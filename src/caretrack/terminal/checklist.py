# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from caretrack.model.checklist import Checklist
from caretrack.session import get_session
from caretrack.terminal.custom_typer import AliasedTyperGroup
from caretrack.terminal.parse import resolve_id
from caretrack.view import checklist as checklist_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _active_checklist(list_id: Optional[str]) -> Checklist:
    session = get_session()
    checklists = session.checklists.get_all_checklists()
    if list_id is not None:
        real_id = resolve_id(list_id, [checklist["id"] for checklist in checklists])
        session.view_state.set_active_list_id(real_id)
    active_id = session.view_state.get_active_list_id()
    for checklist in checklists:
        if checklist["id"] == active_id:
            return checklist
    if len(checklists) == 0:
        raise typer.BadParameter("There are no checklists, add one first")
    # Fall back to the first list when the stored one is gone
    session.view_state.set_active_list_id(checklists[0]["id"])
    return checklists[0]


def _show() -> None:
    session = get_session()
    checklist_view.checklists_view(
        session.ledger.balance,
        session.checklists.get_all_checklists(),
        session.view_state.get_active_list_id(),
    )


@app.command("list, ls")
def list_checklists() -> None:
    _show()


@app.command("add-list, al", no_args_is_help=True)
def add_list(name: str) -> None:
    session = get_session()
    list_id = session.checklists.add_list(name)
    if list_id is None:
        raise typer.BadParameter("List name cannot be empty")
    session.view_state.set_active_list_id(list_id)
    _show()


@app.command("delete-list, dl", no_args_is_help=True)
def delete_list(list_id: str) -> None:
    session = get_session()
    checklists = session.checklists.get_all_checklists()
    real_id = resolve_id(list_id, [checklist["id"] for checklist in checklists])
    session.checklists.delete_list(real_id)
    if session.view_state.get_active_list_id() == real_id:
        session.view_state.set_active_list_id(None)
    _show()


@app.command("add-item, ai", no_args_is_help=True)
def add_item(
    text: str,
    list_id: Annotated[Optional[str], typer.Option("--list", "-l")] = None,
) -> None:
    session = get_session()
    checklist = _active_checklist(list_id)
    if session.checklists.add_item(checklist["id"], text) is None:
        raise typer.BadParameter("Item text cannot be empty")
    _show()


@app.command("toggle, t", no_args_is_help=True)
def toggle(
    item_id: str,
    list_id: Annotated[Optional[str], typer.Option("--list", "-l")] = None,
) -> None:
    session = get_session()
    checklist = _active_checklist(list_id)
    real_id = resolve_id(item_id, [item["id"] for item in checklist["items"]])
    session.checklists.toggle_item(checklist["id"], real_id)
    _show()


@app.command("delete-item, di", no_args_is_help=True)
def delete_item(
    item_id: str,
    list_id: Annotated[Optional[str], typer.Option("--list", "-l")] = None,
) -> None:
    session = get_session()
    checklist = _active_checklist(list_id)
    real_id = resolve_id(item_id, [item["id"] for item in checklist["items"]])
    session.checklists.delete_item(checklist["id"], real_id)
    _show()
