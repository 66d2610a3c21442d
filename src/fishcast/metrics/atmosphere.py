"""
Atmospheric classifiers: pressure trend, wind naming, season.
"""

import math
from typing import Iterable, Literal, Optional

PressureTrend = Literal["falling_fast", "falling", "stable", "rising", "rising_fast"]
Season = Literal["winter", "spring", "summer", "autumn"]

# hPa change across the rolling window
PRESSURE_FAST_HPA = 2.0
PRESSURE_SLOW_HPA = 0.8

# 8-point compass, traditional Mediterranean wind names
WIND_NAMES = [
    "North (Tramontana)",
    "Northeast (Grecale)",
    "East (Levante)",
    "Southeast (Sirocco)",
    "South (Ostro)",
    "Southwest (Libeccio)",
    "West (Ponente)",
    "Northwest (Maestrale)",
]


def pressure_trend(history: Iterable[Optional[float]]) -> PressureTrend:
    """
    Classify the change between the oldest and newest pressure readings.

    Args:
        history: Pressure readings (hPa), oldest first. Missing or NaN
            readings are skipped.

    Returns:
        One of falling_fast, falling, stable, rising, rising_fast

    Examples:
        >>> pressure_trend([1015.0, 1014.0, 1012.5])
        'falling_fast'
        >>> pressure_trend([1012.0, 1012.3])
        'stable'
        >>> pressure_trend([1010.0])
        'stable'
    """
    readings = [p for p in history if p is not None and not math.isnan(p)]
    if len(readings) < 2:
        return "stable"

    change = readings[-1] - readings[0]

    if change <= -PRESSURE_FAST_HPA:
        return "falling_fast"
    elif change <= -PRESSURE_SLOW_HPA:
        return "falling"
    elif change >= PRESSURE_FAST_HPA:
        return "rising_fast"
    elif change >= PRESSURE_SLOW_HPA:
        return "rising"
    else:
        return "stable"


def wind_direction_name(degrees: float) -> str:
    """
    Name the compass sector a wind blows from.

    Examples:
        >>> wind_direction_name(350)
        'North (Tramontana)'
        >>> wind_direction_name(225)
        'Southwest (Libeccio)'
    """
    sector = int(((degrees % 360.0) + 22.5) // 45.0) % 8
    return WIND_NAMES[sector]


def season_for_month(month: int) -> Season:
    """
    Fishing season for a calendar month (1-12).

    Seasons follow the local fishing calendar rather than astronomical
    quarters: summer runs through September and autumn through December.

    Examples:
        >>> season_for_month(4)
        'spring'
        >>> season_for_month(9)
        'summer'
        >>> season_for_month(12)
        'autumn'
        >>> season_for_month(1)
        'winter'
    """
    if 3 <= month <= 5:
        return "spring"
    if 6 <= month <= 9:
        return "summer"
    if 10 <= month <= 12:
        return "autumn"
    return "winter"
