# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tazita.model.coffee_type import COFFEE_TYPES, CoffeeType
from tazita.model.stats import Counters
from tazita.service.streak import streak_message
from tazita.view.util import bar, plural, theme_colors
from tazita.view.views.header import header


def stats_view(
    username: Optional[str],
    counters: Counters,
    streak: int,
    histogram: dict[CoffeeType, int],
    favorite: Optional[CoffeeType],
) -> None:
    """
    Counters, the current streak and per-type preferences.

    today  month  year  streak
    ──────────────────────────
    2      31     210   4 days
    """
    header(username, "stats")

    colors = theme_colors()
    console = Console()

    counters_table = Table(box=box.SIMPLE, header_style=f"bold {colors['accent']}")
    counters_table.add_column("today")
    counters_table.add_column("month")
    counters_table.add_column("year")
    counters_table.add_column("streak")
    counters_table.add_row(
        str(counters["today"]),
        str(counters["month"]),
        str(counters["year"]),
        f"{streak} {plural(streak, 'day', 'days')}",
    )
    console.print(counters_table)

    text, subtext = streak_message(streak)
    console.print(f"  [bold {colors['text']}]{text}[/bold {colors['text']}] {subtext}")
    console.print()

    total = sum(histogram.values())
    if total == 0:
        accent = colors["accent"]
        console.print(f"  [{accent}]No stats yet, log your first coffee ☕[/{accent}]")
        return

    if favorite is not None:
        info = next(info for info in COFFEE_TYPES if info["id"] == favorite)
        count = histogram.get(favorite, 0)
        console.print(
            f"  🏆 Favorite: [bold]{info['emoji']} {info['name']}[/bold] "
            f"({count} {plural(count, 'time', 'times')})"
        )

    types_table = Table(box=box.SIMPLE, header_style=f"bold {colors['accent']}")
    types_table.add_column("type")
    types_table.add_column("count", justify="right")
    types_table.add_column("share", justify="right")
    types_table.add_column("")

    max_count = max(max(histogram.values()), 1)
    ranked = sorted(
        COFFEE_TYPES, key=lambda info: histogram.get(info["id"], 0), reverse=True
    )
    for info in ranked:
        count = histogram.get(info["id"], 0)
        if count == 0:
            continue
        types_table.add_row(
            f"{info['emoji']} {info['name']}",
            str(count),
            f"{count / total * 100:.0f}%",
            f"[{info['color']}]{bar(count / max_count * 100)}[/{info['color']}]",
        )
    console.print(types_table)
