# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from tazita.service.bucket import BucketError, parse_logical_date
from tazita.time import date_to_str, is_date_str, now_local


def parse_date(date_param: Optional[str]) -> Optional[str]:
    """
    Resolve a day argument to 'YYYY-MM-DD'.

    Accepts YYYY-MM-DD, today/t, yesterday/y, or a day offset such as -2.
    """
    if date_param is None:
        return None

    date = date_param.strip()

    if is_date_str(date):
        try:
            parse_logical_date(date)
        except BucketError as e:
            raise typer.BadParameter(str(e))
        return date

    today = now_local().date()
    if date == "today" or date == "t":
        return date_to_str(today)
    if date == "yesterday" or date == "y":
        return date_to_str(today.subtract(days=1))

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return date_to_str(today.add(days=int(date)))

    raise typer.BadParameter("Incorrect date format, expected YYYY-MM-DD")


def parse_day(date_param: Optional[str]) -> pendulum.Date:
    date = parse_date(date_param)
    if date is None:
        return now_local().date()
    return parse_logical_date(date)


def parse_month(month_param: Optional[str]) -> tuple[int, int]:
    """Resolve 'YYYY-MM' to (year, month); None means the current month."""
    if month_param is None:
        today = now_local()
        return today.year, today.month

    match = re.match(r"^(\d{4})-(\d{1,2})$", month_param.strip())
    if match is None:
        raise typer.BadParameter("Incorrect month format, expected YYYY-MM")
    year, month = int(match.group(1)), int(match.group(2))
    if month < 1 or month > 12:
        raise typer.BadParameter(f"Month must be between 1 and 12, got {month}")
    return year, month
