# SPDX-License-Identifier: MIT

import logging
import math
from collections import Counter
from typing import Optional

import pendulum

from tazita.model.coffee_type import COFFEE_TYPE_IDS, CoffeeType, normalize_coffee_type
from tazita.model.entry import Entry
from tazita.model.stats import (
    Counters,
    Habits,
    MonthlyEvolution,
    Records,
    TimeBucket,
    TimeDistribution,
    TimeRange,
    WeekdayDetail,
    WeeklyPattern,
)
from tazita.service.bucket import (
    BucketError,
    logical_day,
    month_bucket,
    time_of_day_bucket,
    weekday_index,
)
from tazita.service.streak import compute_streak
from tazita.time import datetime_to_local_date_str

log = logging.getLogger(__name__)

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
MONTH_NAMES = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

RECENT_DAYS = 30
EVOLUTION_MONTHS = 6


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def filter_entries(
    entries: list[Entry], time_range: TimeRange, now: pendulum.DateTime
) -> list[Entry]:
    """Restrict entries to the selected range; "30days" keeps the last 30 days."""
    if time_range == "all":
        return list(entries)
    cutoff = now.in_tz("local").subtract(days=RECENT_DAYS)
    return [entry for entry in entries if entry["timestamp"] >= cutoff]


def compute_stats(entries: list[Entry], now: pendulum.DateTime) -> Counters:
    local_now = now.in_tz("local")
    today = local_now.date()

    today_count = 0
    month_count = 0
    year_count = 0
    for entry in entries:
        local = entry["timestamp"].in_tz("local")
        if local.year != local_now.year:
            continue
        year_count += 1
        if local.month == local_now.month:
            month_count += 1
            if local.date() == today:
                today_count += 1

    return {"today": today_count, "month": month_count, "year": year_count}


def compute_weekly_pattern(entries: list[Entry]) -> WeeklyPattern:
    """
    Count entries per weekday of their logical day (0 = Sunday).

    Entries whose date cannot be parsed are skipped and reported in
    ``details`` with an error instead of a weekday.
    """
    counts = [0] * 7
    details: list[WeekdayDetail] = []

    for entry in entries:
        raw_date = entry.get("date")
        date_str = None if raw_date is None else str(raw_date)
        try:
            day = logical_day(entry)
        except BucketError as e:
            log.warning("Skipping entry %s: %s", entry.get("id"), e)
            details.append(
                {
                    "entry_id": entry.get("id", ""),
                    "date": date_str,
                    "day": None,
                    "day_name": None,
                    "error": str(e),
                }
            )
            continue

        weekday = weekday_index(day)
        counts[weekday] += 1
        details.append(
            {
                "entry_id": entry.get("id", ""),
                "date": day.format("YYYY-MM-DD"),
                "day": weekday,
                "day_name": WEEKDAY_NAMES[weekday],
                "error": None,
            }
        )

    max_count = max(max(counts), 1)
    heights = [count / max_count * 100 for count in counts]

    return {"counts": counts, "max": max_count, "heights": heights, "details": details}


def compute_monthly_evolution(
    entries: list[Entry], now: pendulum.DateTime
) -> MonthlyEvolution:
    """Entries per calendar month for the six months ending at ``now``, oldest first."""
    month_start = now.in_tz("local").start_of("month")
    buckets = Counter(month_bucket(entry) for entry in entries)

    months: list[str] = []
    counts: list[int] = []
    for i in range(EVOLUTION_MONTHS - 1, -1, -1):
        month = month_start.subtract(months=i)
        months.append(MONTH_NAMES[month.month - 1])
        counts.append(buckets[(month.year, month.month)])

    return {"months": months, "counts": counts, "max": max(max(counts), 1)}


def _time_bucket(count: int, total: int) -> TimeBucket:
    percent = _round_half_up(count / total * 100) if total else 0
    return {"count": count, "percent": percent}


def compute_time_distribution(entries: list[Entry]) -> TimeDistribution:
    buckets = Counter(time_of_day_bucket(entry) for entry in entries)
    total = sum(buckets.values())
    return {
        "morning": _time_bucket(buckets["morning"], total),
        "afternoon": _time_bucket(buckets["afternoon"], total),
        "night": _time_bucket(buckets["night"], total),
    }


def compute_type_histogram(entries: list[Entry]) -> dict[CoffeeType, int]:
    histogram: dict[CoffeeType, int] = {}
    for entry in entries:
        coffee_type = normalize_coffee_type(entry.get("type"))
        histogram[coffee_type] = histogram.get(coffee_type, 0) + 1
    return histogram


def favorite_type(entries: list[Entry]) -> Optional[CoffeeType]:
    """Most logged type; ties go to the earlier type in the catalogue."""
    histogram = compute_type_histogram(entries)
    if not histogram:
        return None
    return max(COFFEE_TYPE_IDS, key=lambda type_id: histogram.get(type_id, 0))


def compute_records(entries: list[Entry], now: pendulum.DateTime) -> Records:
    if not entries:
        return {"streak": 0, "max_per_day": 0, "total": 0}

    day_counts = Counter(
        datetime_to_local_date_str(entry["timestamp"]) for entry in entries
    )

    return {
        "streak": compute_streak(entries, now),
        "max_per_day": max(day_counts.values()),
        "total": len(entries),
    }


def compute_habits(
    entries: list[Entry], time_range: TimeRange, now: pendulum.DateTime
) -> Habits:
    """
    Everything the habits view shows.

    The range filter narrows the weekly pattern, time of day and records.
    Monthly evolution has its own six month window and always reads the
    full collection.
    """
    filtered = filter_entries(entries, time_range, now)
    return {
        "time_range": time_range,
        "weekly": compute_weekly_pattern(filtered),
        "monthly": compute_monthly_evolution(entries, now),
        "time_distribution": compute_time_distribution(filtered),
        "records": compute_records(filtered, now),
    }


def entries_for_date(entries: list[Entry], day: pendulum.Date) -> list[Entry]:
    day_str = day.format("YYYY-MM-DD")
    return [
        entry
        for entry in entries
        if datetime_to_local_date_str(entry["timestamp"]) == day_str
    ]


def entries_for_month(entries: list[Entry], year: int, month: int) -> list[Entry]:
    return [entry for entry in entries if month_bucket(entry) == (year, month)]


def day_intensity(count: int) -> int:
    """Calendar shading level: 0 for none, then 1, 2 and 3 for three or more."""
    return min(count, 3)
