# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from caretrack.model.checklist import Checklist
from caretrack.model.entity_id import EntityId
from caretrack.terminal.parse import short_id
from caretrack.view.color import DONE_COLOR
from caretrack.view.header import header


def checklists_view(
    balance: int, checklists: list[Checklist], active_list_id: Optional[EntityId]
) -> None:
    header(balance, "checklists")

    console = Console()
    for checklist in checklists:
        marker = "*" if checklist["id"] == active_list_id else " "
        checklist_table = Table(
            box=box.SIMPLE,
            title=f"{marker} {checklist['name']} ({short_id(checklist['id'])})",
            title_justify="left",
        )
        checklist_table.add_column("id")
        checklist_table.add_column("item")

        # Unchecked items first, then checked ones
        ordered = [item for item in checklist["items"] if not item["done"]] + [
            item for item in checklist["items"] if item["done"]
        ]
        for item in ordered:
            state = "[x]" if item["done"] else "[ ]"
            style = DONE_COLOR if item["done"] else "white"
            checklist_table.add_row(
                short_id(item["id"]), Text(f"{state} {item['text']}", style=style)
            )
        console.print(checklist_table)
