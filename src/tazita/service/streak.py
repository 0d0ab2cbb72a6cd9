# SPDX-License-Identifier: MIT

import math

import pendulum

from tazita.model.entry import Entry
from tazita.time import datetime_to_local_date, datetime_to_local_date_str

STREAK_MESSAGES: list[tuple[int, float, str, str]] = [
    (0, 0, "¡Empezá hoy! 🌟", "Tu primera taza te espera"),
    (1, 2, "¡Buen comienzo! ☕", "Seguí así"),
    (3, 6, "¡Vas bien! 🔥", "Racha en progreso"),
    (7, 13, "¡Una semana! 🎉", "¡Increíble constancia!"),
    (14, 20, "¡Dos semanas! 🌟", "Eres una leyenda"),
    (21, 29, "¡Casi un mes! 👑", "¡Esto es café puro!"),
    (30, math.inf, "¡LEYENDA! 🏆", "Maestro del café"),
]


def compute_streak(entries: list[Entry], now: pendulum.DateTime) -> int:
    """
    Count consecutive days with at least one entry, ending today.

    Days come from the local date of each timestamp. The i-th most recent
    distinct day must be exactly i days before today; a day further back
    than that is a gap and ends the walk. No entry today means a streak of 0.
    """
    if not entries:
        return 0

    days = sorted(
        {datetime_to_local_date_str(entry["timestamp"]) for entry in entries},
        reverse=True,
    )
    today = datetime_to_local_date(now)

    streak = 0
    for i, day_str in enumerate(days):
        day = pendulum.Date.fromisoformat(day_str)
        diff_days = today.toordinal() - day.toordinal()
        if diff_days == i:
            streak += 1
        elif diff_days > i:
            break

    return streak


def streak_message(streak: int) -> tuple[str, str]:
    for low, high, text, subtext in STREAK_MESSAGES:
        if low <= streak <= high:
            return text, subtext
    return STREAK_MESSAGES[0][2], STREAK_MESSAGES[0][3]
