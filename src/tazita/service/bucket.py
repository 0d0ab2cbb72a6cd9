# SPDX-License-Identifier: MIT

import pendulum

from tazita.model.entry import Entry
from tazita.model.stats import TimeOfDay
from tazita.time import date_from_parts, datetime_to_local_date


class BucketError(Exception):
    """Raised when an entry cannot be placed in a bucket."""

    pass


def timestamp_day(entry: Entry) -> pendulum.Date:
    """Local calendar date of the entry's timestamp."""
    return datetime_to_local_date(entry["timestamp"])


def parse_logical_date(date_str: str) -> pendulum.Date:
    """
    Parse a 'YYYY-MM-DD' string from its explicit components.

    The string is never parsed as an instant, so no timezone shift can move
    the result to a neighbouring day.
    """
    parts = date_str.split("-")
    if len(parts) != 3:
        raise BucketError(f"Invalid date format: {date_str!r}")
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError:
        raise BucketError(f"Invalid date format: {date_str!r}")
    try:
        return date_from_parts(year, month, day)
    except ValueError:
        raise BucketError(f"Invalid calendar date: {date_str!r}")


def logical_day(entry: Entry) -> pendulum.Date:
    """
    The calendar day an entry counts toward.

    An explicit ``date`` wins over the timestamp; older records without one
    fall back to the local date of ``timestamp``.
    """
    date_str = entry.get("date")
    if date_str:
        if not isinstance(date_str, str):
            raise BucketError(f"Invalid date for entry: {date_str!r}")
        return parse_logical_date(date_str)
    if entry.get("timestamp") is None:
        raise BucketError("Entry has neither date nor timestamp")
    return timestamp_day(entry)


def weekday_index(day: pendulum.Date) -> int:
    # isoweekday: Monday=1 .. Sunday=7
    return day.isoweekday() % 7


def weekday_bucket(entry: Entry) -> int:
    """Weekday of the logical day, 0 = Sunday."""
    return weekday_index(logical_day(entry))


def month_bucket(entry: Entry) -> tuple[int, int]:
    local = entry["timestamp"].in_tz("local")
    return local.year, local.month


def time_of_day_bucket(entry: Entry) -> TimeOfDay:
    hour = entry["timestamp"].in_tz("local").hour
    if 6 <= hour < 12:
        return "morning"
    if 12 <= hour < 18:
        return "afternoon"
    return "night"
