# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tazita.model.result import Failure, SaveResult
from tazita.view.views.header import header


def migrate_view(username: Optional[str], outcomes: dict[str, SaveResult]) -> None:
    header(username, "migrate")

    migrate_table = Table(box=box.SIMPLE)
    migrate_table.add_column("user")
    migrate_table.add_column("result")

    for user, outcome in outcomes.items():
        if isinstance(outcome, Failure):
            migrate_table.add_row(user, f"[red]Error: {escape(outcome.reason)}[/red]")
        else:
            migrate_table.add_row(user, "[green]Migrated[/green]")

    console = Console()
    if not outcomes:
        console.print("  No local users to migrate")
        return
    console.print(migrate_table)
