# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tazita.model.entry import Entry
from tazita.time import datetime_to_display_local_datetime_str
from tazita.view.util import format_coffee_type, theme_colors
from tazita.view.views.header import header


def entries_view(
    username: Optional[str],
    report_name: str,
    entries: list[Entry],
) -> None:
    """Display entries in a table, oldest first."""
    header(username, report_name)

    colors = theme_colors()
    entries_table = Table(box=box.SIMPLE, header_style=f"bold {colors['accent']}")
    entries_table.add_column("id")
    entries_table.add_column("logged")
    entries_table.add_column("date")
    entries_table.add_column("type")
    entries_table.add_column("notes")

    for entry in sorted(entries, key=lambda entry: entry["timestamp"]):
        entries_table.add_row(
            entry["id"][:8],
            datetime_to_display_local_datetime_str(entry["timestamp"]),
            entry.get("date") or "",
            format_coffee_type(entry.get("type")),
            escape(entry.get("notes") or ""),
        )

    console = Console()
    if not entries:
        console.print(f"  [{colors['accent']}]No coffees logged[/{colors['accent']}]")
        return
    console.print(entries_table)


def single_entry_view(username: Optional[str], entry: Entry) -> None:
    """Display detailed view of a single entry."""
    header(username, "entry")

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", entry["id"])
    entry_table.add_row("type", format_coffee_type(entry.get("type")))
    entry_table.add_row(
        "timestamp", datetime_to_display_local_datetime_str(entry["timestamp"])
    )
    entry_table.add_row("date", entry.get("date") or "")
    entry_table.add_row("notes", escape(entry.get("notes") or ""))

    console = Console()
    console.print(entry_table)
