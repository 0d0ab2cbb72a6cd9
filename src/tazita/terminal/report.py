# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer

from tazita.model.stats import TimeRange
from tazita.service.stats import (
    compute_habits,
    compute_stats,
    compute_type_histogram,
    favorite_type,
)
from tazita.service.streak import compute_streak
from tazita.terminal.parse import parse_month
from tazita.terminal.session import get_session, require_store
from tazita.time import now_utc
from tazita.view.views import calendar as calendar_report
from tazita.view.views import habits as habits_report
from tazita.view.views import stats as stats_report

TIME_RANGES = ["all", "30days"]


def stats(ctx: typer.Context) -> None:
    """Today, month and year counters, streak and favorite types."""
    store = require_store(ctx)
    session = get_session(ctx)

    entries = store.entries
    now = now_utc()
    stats_report.stats_view(
        session.username,
        compute_stats(entries, now),
        compute_streak(entries, now),
        compute_type_histogram(entries),
        favorite_type(entries),
    )


def habits(
    ctx: typer.Context,
    time_range: Annotated[
        Optional[str],
        typer.Option("--range", "-r", help="all, 30days"),
    ] = None,
    details: Annotated[
        bool,
        typer.Option("--details", help="List how each entry was bucketed by weekday"),
    ] = False,
) -> None:
    """Weekly pattern, monthly evolution, favorite hours and records."""
    store = require_store(ctx)
    session = get_session(ctx)

    selected_range = time_range or session.config["default_time_range"]
    if selected_range not in TIME_RANGES:
        typer.echo(
            f"Invalid range: {selected_range}. Valid options: {', '.join(TIME_RANGES)}"
        )
        raise typer.Exit(1)

    habits_report.habits_view(
        session.username,
        compute_habits(store.entries, cast(TimeRange, selected_range), now_utc()),
        show_details=details,
    )


def calendar(
    ctx: typer.Context,
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help="YYYY-MM, defaults to this month"),
    ] = None,
) -> None:
    """Month calendar shaded by coffees per day."""
    store = require_store(ctx)
    session = get_session(ctx)

    year, month_number = parse_month(month)
    calendar_report.calendar_view(
        session.username,
        store.entries,
        year,
        month_number,
        now_utc().in_tz("local").date(),
    )
