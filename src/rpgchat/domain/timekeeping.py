"""World clock and weather helpers."""
from __future__ import annotations

from typing import Tuple

HOURS_PER_DAY = 24

CLEAR_WEATHER = "Ясно"
# Cumulative thresholds on a 1-100 roll.
WEATHER_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (10, "Морось"),
    (20, "Ветер"),
    (25, "Туман"),
)


def advance_hour(day: int, hour: int) -> tuple[int, int]:
    """Return ``(day, hour)`` one hour later."""
    hour += 1
    if hour >= HOURS_PER_DAY:
        return day + 1, 0
    return day, hour


def weather_for_roll(roll: int) -> str:
    for threshold, weather in WEATHER_THRESHOLDS:
        if roll <= threshold:
            return weather
    return CLEAR_WEATHER


def format_clock(day: int, hour: int) -> str:
    return f"День {day}, {hour:02d}:00"
