# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum

DATE_STR_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    """Parse an ISO-8601 instant. Naive strings are taken as UTC."""
    return cast(pendulum.DateTime, pendulum.parse(datetime)).in_tz("UTC")


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_to_local_date(datetime: pendulum.DateTime) -> pendulum.Date:
    """Local calendar date of an instant."""
    return datetime.in_tz("local").date()


def datetime_to_local_date_str(datetime: pendulum.DateTime) -> str:
    """Convert a pendulum.DateTime to a local date string in 'YYYY-MM-DD' format."""
    return datetime.in_tz("local").format("YYYY-MM-DD")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd HH:mm")


def date_from_parts(year: int, month: int, day: int) -> pendulum.Date:
    """
    Build a calendar date from explicit components.

    Raises ValueError for components that do not name a real calendar day.
    """
    return pendulum.Date(year, month, day)

def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")

def is_date_str(value: str) -> bool:
    return DATE_STR_PATTERN.match(value) is not None
