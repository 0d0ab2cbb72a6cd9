# SPDX-License-Identifier: MIT

import calendar
from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tazita.model.entry import Entry
from tazita.service.stats import WEEKDAY_NAMES, day_intensity, entries_for_month
from tazita.time import datetime_to_local_date
from tazita.view.util import theme_colors
from tazita.view.views.header import header


def get_day_style(count: int) -> str:
    """Shade a day by how many coffees it had: 1, 2, then 3 or more."""
    colors = theme_colors()
    intensity = day_intensity(count)
    if intensity == 0:
        return ""
    if intensity == 1:
        return f"{colors['text']} on {colors['background']}"
    if intensity == 2:
        return f"{colors['text']} on {colors['primary']}"
    return f"bold {colors['text']} on {colors['secondary']}"


def calendar_view(
    username: Optional[str],
    entries: list[Entry],
    year: int,
    month: int,
    today: pendulum.Date,
) -> None:
    """
    Month grid starting on Sunday, each day showing its coffee count.

     Sun  Mon  Tue  Wed  Thu  Fri  Sat
                1    2·1  3    4·2  5
    """
    header(username, pendulum.date(year, month, 1).format("MMMM YYYY"))

    colors = theme_colors()
    counts: dict[int, int] = {}
    for entry in entries_for_month(entries, year, month):
        day = datetime_to_local_date(entry["timestamp"]).day
        counts[day] = counts.get(day, 0) + 1

    calendar_table = Table(box=box.SIMPLE, header_style=f"bold {colors['accent']}")
    for day_name in WEEKDAY_NAMES:
        calendar_table.add_column(day_name, justify="center")

    weeks = calendar.Calendar(firstweekday=calendar.SUNDAY).monthdayscalendar(
        year, month
    )
    for week in weeks:
        row: list[Text] = []
        for day in week:
            if day == 0:
                row.append(Text(""))
                continue
            count = counts.get(day, 0)
            label = f"{day}·{count}" if count else str(day)
            style = get_day_style(count)
            if (year, month, day) == (today.year, today.month, today.day):
                style = f"{style} underline".strip()
            row.append(Text(label, style=style))
        calendar_table.add_row(*row)

    console = Console()
    console.print(calendar_table)
    accent = colors["accent"]
    console.print(f"  [{accent}]{sum(counts.values())} coffees this month[/{accent}]")
