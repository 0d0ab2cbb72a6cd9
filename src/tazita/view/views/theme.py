# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tazita.model.theme import THEMES, Theme
from tazita.view.views.header import header


def themes_view(username: Optional[str], current: Theme) -> None:
    header(username, "themes")

    themes_table = Table(box=box.SIMPLE)
    themes_table.add_column("")
    themes_table.add_column("id")
    themes_table.add_column("name")
    themes_table.add_column("palette")

    for theme in THEMES:
        palette = " ".join(
            f"[on {color}]  [/on {color}]" for color in theme["colors"].values()
        )
        themes_table.add_row(
            "●" if theme["id"] == current else "",
            theme["id"],
            f"{theme['emoji']} {theme['name']}",
            palette,
        )

    console = Console()
    console.print(themes_table)
