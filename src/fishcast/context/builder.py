"""
Environmental Context Builder for fishcast

Turns raw, possibly incomplete observations into a canonical
EnvironmentalSnapshot.

Derived quantities:
- Region and season
- Water clarity and current (heuristics)
- Pressure trend from recent history
- Time-of-day bucket, solunar window, moon state
- Tidal flow

Design Principles:
- Never raises on malformed numeric input (NaN, None, out of range)
- Every substitution is logged
- Water temperature falls back to the region x month climatology
"""

import logging
import math
from typing import Optional

from ..metrics.astronomy import local_hour, moon_state, solunar_window, sun_times, time_of_day
from ..metrics.atmosphere import pressure_trend, season_for_month
from ..metrics.oceanography import clarity_estimate, current_estimate, tide_estimate
from ..regions import classify_region, get_region_profile
from .schemas import EnvironmentalSnapshot, RawConditions

logger = logging.getLogger(__name__)

STANDARD_PRESSURE_HPA = 1013.25
WATER_TEMP_RANGE_C = (-2.0, 35.0)
DEFAULT_CLOUD_COVER_PCT = 50.0


def _is_valid(value: Optional[float]) -> bool:
    return value is not None and not math.isnan(value)


def _or_default(value: Optional[float], default: float, name: str) -> float:
    if _is_valid(value):
        return value
    logger.debug(f"Missing {name}; using {default}")
    return default


def resolve_water_temp(raw: RawConditions, climatology: float) -> float:
    """
    Observed water temperature, or the climatological mean when the
    observation is missing or physically implausible.

    Args:
        raw: Raw conditions
        climatology: Region x month mean water temperature (°C)

    Returns:
        Water temperature (°C)
    """
    value = raw.water_temp_c

    if not _is_valid(value):
        logger.debug(f"Missing water temperature; using climatology {climatology}°C")
        return climatology

    low, high = WATER_TEMP_RANGE_C
    if not low <= value <= high:
        logger.warning(
            f"Water temperature {value}°C outside [{low}, {high}] at "
            f"({raw.latitude}, {raw.longitude}); using climatology {climatology}°C"
        )
        return climatology

    return value


def detect_land(raw: RawConditions) -> bool:
    """
    A point is on land when the marine feed returned samples but none of
    them is a valid wave height. No samples at all means "unknown" (sea).
    """
    if raw.wave_samples_m is None:
        return False
    return not any(_is_valid(sample) for sample in raw.wave_samples_m)


def build_snapshot(raw: RawConditions) -> EnvironmentalSnapshot:
    """
    Build the canonical snapshot for one point in time.

    Args:
        raw: Raw observations (any numeric field may be missing or NaN)

    Returns:
        EnvironmentalSnapshot with every field populated

    Examples:
        >>> from datetime import datetime, timezone
        >>> raw = RawConditions(latitude=41.0, longitude=29.0,
        ...                     when=datetime(2025, 1, 10, 12, tzinfo=timezone.utc))
        >>> snap = build_snapshot(raw)
        >>> snap.region.value, snap.season, snap.pressure_hpa
        ('MARMARA', 'winter', 1013.25)
    """
    when = raw.when
    region = classify_region(raw.latitude, raw.longitude)
    region_profile = get_region_profile(region)

    climatology = region_profile.climatological_water_temp(when.month)
    water_temp = resolve_water_temp(raw, climatology)

    water_temp_change = 0.0
    if water_temp == raw.water_temp_c and _is_valid(raw.water_temp_previous_c):
        water_temp_change = abs(water_temp - raw.water_temp_previous_c)

    wave = max(0.0, _or_default(raw.wave_height_m, 0.0, 'wave height'))
    wind = max(0.0, _or_default(raw.wind_speed_kmh, 0.0, 'wind speed'))
    direction = _or_default(raw.wind_direction_deg, 0.0, 'wind direction') % 360.0
    rain = max(0.0, _or_default(raw.precipitation_mm, 0.0, 'precipitation'))
    cloud = min(100.0, max(0.0, _or_default(raw.cloud_cover_pct, DEFAULT_CLOUD_COVER_PCT, 'cloud cover')))

    air_temp = raw.air_temp_c if _is_valid(raw.air_temp_c) else None

    pressures = [p for p in raw.pressure_history_hpa if _is_valid(p)]
    pressure = pressures[-1] if pressures else STANDARD_PRESSURE_HPA
    if not pressures:
        logger.debug(f"No pressure readings; using {STANDARD_PRESSURE_HPA} hPa")

    hour = local_hour(when)
    illumination, phase = moon_state(when)
    times = raw.sun_times or sun_times(when, raw.latitude, raw.longitude)

    return EnvironmentalSnapshot(
        when=when,
        latitude=raw.latitude,
        longitude=raw.longitude,
        region=region,
        season=season_for_month(when.month),
        water_temp_c=water_temp,
        water_temp_change_c=water_temp_change,
        air_temp_c=air_temp,
        wave_height_m=wave,
        wind_speed_kmh=wind,
        wind_direction_deg=direction,
        precipitation_mm=rain,
        cloud_cover_pct=cloud,
        pressure_hpa=pressure,
        pressure_trend=pressure_trend(pressures),
        clarity=clarity_estimate(wave, wind, rain),
        current_ms=current_estimate(wave, wind, region_profile.current_multiplier),
        tide_flow=tide_estimate(hour, phase)['flow'],
        moon_illumination=min(1.0, max(0.0, illumination)),
        moon_phase=min(1.0, max(0.0, phase)),
        solunar=solunar_window(when, raw.latitude, raw.longitude),
        time_of_day=time_of_day(hour, times),
        is_land=detect_land(raw),
        fishing_mode=raw.fishing_mode,
    )
