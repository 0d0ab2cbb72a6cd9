# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

TimeRange = Literal["all", "30days"]
TimeOfDay = Literal["morning", "afternoon", "night"]


class Counters(TypedDict):
    today: int
    month: int
    year: int


class WeekdayDetail(TypedDict):
    entry_id: str
    date: Optional[str]
    day: Optional[int]
    day_name: Optional[str]
    error: Optional[str]


class WeeklyPattern(TypedDict):
    counts: list[int]
    max: int
    heights: list[float]
    details: list[WeekdayDetail]


class MonthlyEvolution(TypedDict):
    months: list[str]
    counts: list[int]
    max: int


class TimeBucket(TypedDict):
    count: int
    percent: int


class TimeDistribution(TypedDict):
    morning: TimeBucket
    afternoon: TimeBucket
    night: TimeBucket


class Records(TypedDict):
    streak: int
    max_per_day: int
    total: int


class Habits(TypedDict):
    time_range: TimeRange
    weekly: WeeklyPattern
    monthly: MonthlyEvolution
    time_distribution: TimeDistribution
    records: Records
