"""
Hourly snapshot construction from a forecast frame.

The frame is indexed by local timestamps (DatetimeIndex, one row per hour)
with any subset of HOURLY_COLUMNS; absent columns are treated as missing.
"""

import logging
from typing import Dict, List

import pandas as pd

from ..metrics.astronomy import SunTimes, sun_times
from .builder import build_snapshot
from .schemas import EnvironmentalSnapshot, FishingMode, RawConditions

logger = logging.getLogger(__name__)

HOURLY_COLUMNS = [
    'water_temp_c',
    'air_temp_c',
    'wave_height_m',
    'wind_speed_kmh',
    'wind_direction_deg',
    'precipitation_mm',
    'cloud_cover_pct',
    'pressure_hpa',
]

PRESSURE_WINDOW_HOURS = 3
TEMP_CHANGE_HOURS = 24


def _value(row: pd.Series, column: str):
    value = row[column]
    return None if pd.isna(value) else float(value)


def build_hourly_snapshots(
    latitude: float,
    longitude: float,
    frame: pd.DataFrame,
    fishing_mode: FishingMode = "shore"
) -> List[EnvironmentalSnapshot]:
    """
    Build one snapshot per hourly row.

    Each row sees a trailing 3-hour pressure window and the water
    temperature 24 rows earlier (when available). Land detection uses the
    whole wave column: a frame without any valid wave height is on land.

    Args:
        latitude: Latitude (degrees)
        longitude: Longitude (degrees)
        frame: Hourly observations indexed by timestamp
        fishing_mode: Shore or boat

    Returns:
        Snapshots in frame order
    """
    if frame.empty:
        return []

    if not isinstance(frame.index, pd.DatetimeIndex):
        raise ValueError("Hourly frame must have a DatetimeIndex")

    unknown = set(frame.columns) - set(HOURLY_COLUMNS)
    if unknown:
        logger.debug(f"Ignoring unknown hourly columns: {sorted(unknown)}")

    data = frame.reindex(columns=HOURLY_COLUMNS)
    wave_samples = [None if pd.isna(v) else float(v) for v in data['wave_height_m']]
    pressures = data['pressure_hpa']
    water_temps = data['water_temp_c']

    # Sun events only change per calendar day
    day_sun_times: Dict[object, SunTimes] = {}

    snapshots = []
    for i, (timestamp, row) in enumerate(data.iterrows()):
        when = timestamp.to_pydatetime()

        day = when.date()
        if day not in day_sun_times:
            day_sun_times[day] = sun_times(when, latitude, longitude)

        window = pressures.iloc[max(0, i - PRESSURE_WINDOW_HOURS):i + 1]
        previous_temp = None
        if i >= TEMP_CHANGE_HOURS:
            previous = water_temps.iloc[i - TEMP_CHANGE_HOURS]
            previous_temp = None if pd.isna(previous) else float(previous)

        raw = RawConditions(
            latitude=latitude,
            longitude=longitude,
            when=when,
            water_temp_c=_value(row, 'water_temp_c'),
            water_temp_previous_c=previous_temp,
            air_temp_c=_value(row, 'air_temp_c'),
            wave_height_m=_value(row, 'wave_height_m'),
            wind_speed_kmh=_value(row, 'wind_speed_kmh'),
            wind_direction_deg=_value(row, 'wind_direction_deg'),
            precipitation_mm=_value(row, 'precipitation_mm'),
            cloud_cover_pct=_value(row, 'cloud_cover_pct'),
            pressure_history_hpa=[None if pd.isna(p) else float(p) for p in window],
            wave_samples_m=wave_samples,
            fishing_mode=fishing_mode,
            sun_times=day_sun_times[day],
        )
        snapshots.append(build_snapshot(raw))

    logger.debug(f"Built {len(snapshots)} hourly snapshots for ({latitude}, {longitude})")
    return snapshots
