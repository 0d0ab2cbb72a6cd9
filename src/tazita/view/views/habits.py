# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tazita.model.stats import Habits
from tazita.service.stats import WEEKDAY_NAMES
from tazita.view.util import bar, theme_colors
from tazita.view.views.header import header

TIME_OF_DAY_LABELS = {
    "morning": "🌅 Morning (6-12)",
    "afternoon": "☀️ Afternoon (12-18)",
    "night": "🌙 Night (18-6)",
}


def habits_view(
    username: Optional[str], habits: Habits, show_details: bool = False
) -> None:
    range_label = "last 30 days" if habits["time_range"] == "30days" else "all time"
    header(username, f"habits ({range_label})")

    colors = theme_colors()
    header_style = f"bold {colors['accent']}"
    bar_style = colors["primary"]
    console = Console()

    weekly = habits["weekly"]
    weekly_table = Table(title="Weekly pattern", box=box.SIMPLE, header_style=header_style)
    weekly_table.add_column("day")
    weekly_table.add_column("count", justify="right")
    weekly_table.add_column("")
    for day_name, count, height in zip(
        WEEKDAY_NAMES, weekly["counts"], weekly["heights"]
    ):
        weekly_table.add_row(
            day_name, str(count), f"[{bar_style}]{bar(height)}[/{bar_style}]"
        )
    console.print(weekly_table)

    monthly = habits["monthly"]
    monthly_table = Table(
        title="Last 6 months", box=box.SIMPLE, header_style=header_style
    )
    monthly_table.add_column("month")
    monthly_table.add_column("count", justify="right")
    monthly_table.add_column("")
    for month_name, count in zip(monthly["months"], monthly["counts"]):
        monthly_table.add_row(
            month_name,
            str(count),
            f"[{bar_style}]{bar(count / monthly['max'] * 100)}[/{bar_style}]",
        )
    console.print(monthly_table)

    distribution = habits["time_distribution"]
    time_table = Table(title="Favorite hours", box=box.SIMPLE, header_style=header_style)
    time_table.add_column("time of day")
    time_table.add_column("count", justify="right")
    time_table.add_column("share", justify="right")
    time_table.add_column("")
    for name, label in TIME_OF_DAY_LABELS.items():
        bucket = distribution[name]  # type: ignore[literal-required]
        time_table.add_row(
            label,
            str(bucket["count"]),
            f"{bucket['percent']}%",
            f"[{bar_style}]{bar(bucket['percent'])}[/{bar_style}]",
        )
    console.print(time_table)

    records = habits["records"]
    records_table = Table(title="Records", box=box.SIMPLE, header_style=header_style)
    records_table.add_column("streak")
    records_table.add_column("max in one day")
    records_table.add_column("total")
    records_table.add_row(
        str(records["streak"]), str(records["max_per_day"]), str(records["total"])
    )
    console.print(records_table)

    errors = [detail for detail in weekly["details"] if detail["error"] is not None]
    if errors:
        console.print(
            f"  [yellow]{len(errors)} entries skipped in the weekly pattern[/yellow]"
        )

    if show_details:
        details_table = Table(
            title="Weekly pattern details", box=box.SIMPLE, header_style=header_style
        )
        details_table.add_column("id")
        details_table.add_column("date")
        details_table.add_column("day")
        details_table.add_column("error")
        for detail in weekly["details"]:
            details_table.add_row(
                detail["entry_id"][:8],
                detail["date"] or "",
                detail["day_name"] or "",
                f"[red]{escape(detail['error'])}[/red]" if detail["error"] else "",
            )
        console.print(details_table)
