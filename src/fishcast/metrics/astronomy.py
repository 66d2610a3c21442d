"""
Sun and Moon Timing for Activity Windows

Computes the astronomical inputs of the suitability engine with ephem:
- Sun times (civil dawn, sunrise, sunset, civil dusk) as local fractional hours
- Time-of-day bucket (dawn/day/dusk/night)
- Moon illumination and synodic phase
- Solunar window classification (major/minor/none)

Times are interpreted in the timezone of the datetime passed in; naive
datetimes are treated as UTC. A location-local timezone gives the most
readable sun times, but any timezone buckets the hours correctly.
"""

import logging
from datetime import datetime, timezone
from typing import Literal, Tuple

import ephem
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

TimeOfDay = Literal["dawn", "day", "dusk", "night"]
SolunarWindow = Literal["major", "minor", "none"]

CIVIL_TWILIGHT_HORIZON = '-6'
HOURS_PER_DAY = 24.0

# Dawn/dusk offset from sunrise/sunset when civil twilight never ends
TWILIGHT_FALLBACK_HOURS = 0.5

# Padding (hours) around the sun events that bound each bucket
DAWN_LEAD_HOURS = 0.5
GOLDEN_HOUR = 1.0
DUSK_TAIL_HOURS = 0.5

MAJOR_WINDOW_HOURS = 2.0
MINOR_WINDOW_HOURS = 1.0


class SunTimes(BaseModel):
    """Sun event times for one local day, as fractional local hours."""

    dawn: float = Field(..., description="Civil dawn (hour)")
    sunrise: float = Field(..., description="Sunrise (hour)")
    sunset: float = Field(..., description="Sunset (hour)")
    dusk: float = Field(..., description="Civil dusk (hour)")


# Used when the sun never rises or never sets (polar day/night)
DEFAULT_SUN_TIMES = SunTimes(dawn=5.5, sunrise=6.0, sunset=18.0, dusk=18.5)


def _to_utc(when: datetime) -> datetime:
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


def _ephem_date(when: datetime) -> ephem.Date:
    return ephem.Date(_to_utc(when).replace(tzinfo=None))


def _local_hour(event: ephem.Date, tz) -> float:
    local = event.datetime().replace(tzinfo=timezone.utc).astimezone(tz)
    return local.hour + local.minute / 60.0 + local.second / 3600.0


def _observer(latitude: float, longitude: float, when: datetime) -> ephem.Observer:
    obs = ephem.Observer()
    obs.lat = str(latitude)
    obs.lon = str(longitude)
    obs.date = _ephem_date(when)
    return obs


def local_hour(when: datetime) -> float:
    """Fractional hour of day in the datetime's own timezone."""
    return when.hour + when.minute / 60.0 + when.second / 3600.0


def sun_times(when: datetime, latitude: float, longitude: float) -> SunTimes:
    """
    Compute the sun events of the local day containing `when`.

    Args:
        when: Any time on the day of interest
        latitude: Latitude (degrees)
        longitude: Longitude (degrees)

    Returns:
        SunTimes in local fractional hours. Falls back to DEFAULT_SUN_TIMES
        when the sun does not rise or set on that day.

    The events are searched in order (sunrise, then the sunset after it)
    and reported as increasing hours starting from dawn, so values past 24
    mean "after the next local midnight". This happens when the datetime's
    timezone is far from the location's solar time, e.g. UTC input for a
    Pacific coordinate. When civil twilight never ends (white nights),
    dawn and dusk are placed TWILIGHT_FALLBACK_HOURS around sunrise and
    sunset.
    """
    tz = when.tzinfo or timezone.utc
    local_midnight = when.replace(hour=0, minute=0, second=0, microsecond=0)
    if local_midnight.tzinfo is None:
        local_midnight = local_midnight.replace(tzinfo=timezone.utc)

    obs = _observer(latitude, longitude, local_midnight)
    sun = ephem.Sun()

    try:
        sunrise = obs.next_rising(sun)
        obs.date = sunrise
        sunset = obs.next_setting(sun)
    except ephem.CircumpolarError as e:
        logger.debug(f"No sun events at ({latitude}, {longitude}) on {when.date()}: {e}")
        return DEFAULT_SUN_TIMES

    try:
        obs.horizon = CIVIL_TWILIGHT_HORIZON
        dawn = float(obs.previous_rising(sun, use_center=True))
        obs.date = sunset
        dusk = float(obs.next_setting(sun, use_center=True))
    except ephem.CircumpolarError as e:
        logger.debug(f"No civil twilight at ({latitude}, {longitude}) on {when.date()}: {e}")
        dawn = float(sunrise) - TWILIGHT_FALLBACK_HOURS / HOURS_PER_DAY
        dusk = float(sunset) + TWILIGHT_FALLBACK_HOURS / HOURS_PER_DAY

    start = _local_hour(ephem.Date(dawn), tz)
    return SunTimes(
        dawn=start,
        sunrise=start + (float(sunrise) - dawn) * HOURS_PER_DAY,
        sunset=start + (float(sunset) - dawn) * HOURS_PER_DAY,
        dusk=start + (dusk - dawn) * HOURS_PER_DAY,
    )


def time_of_day(hour: float, times: SunTimes) -> TimeOfDay:
    """
    Bucket a local hour into dawn/day/dusk/night.

    - dawn: from half an hour before civil dawn to an hour after sunrise
    - day: until an hour before sunset
    - dusk: until half an hour after civil dusk
    - night: everything else

    Sun times past midnight (see sun_times) are matched against the hour of
    the neighbouring day as well.

    Examples:
        >>> times = SunTimes(dawn=5.5, sunrise=6.0, sunset=18.0, dusk=18.5)
        >>> time_of_day(6.5, times)
        'dawn'
        >>> time_of_day(12.0, times)
        'day'
        >>> time_of_day(17.5, times)
        'dusk'
        >>> time_of_day(23.0, times)
        'night'
    """
    for h in (hour, hour + HOURS_PER_DAY, hour - HOURS_PER_DAY):
        if times.dawn - DAWN_LEAD_HOURS <= h < times.sunrise + GOLDEN_HOUR:
            return "dawn"
        if times.sunrise + GOLDEN_HOUR <= h < times.sunset - GOLDEN_HOUR:
            return "day"
        if times.sunset - GOLDEN_HOUR <= h < times.dusk + DUSK_TAIL_HOURS:
            return "dusk"
    return "night"


def moon_state(when: datetime) -> Tuple[float, float]:
    """
    Moon illumination and synodic phase at a given time.

    Returns:
        Tuple of (illumination 0-1, phase 0-1 where 0 = new and 0.5 = full)
    """
    date = _ephem_date(when)

    moon = ephem.Moon()
    moon.compute(date)
    illumination = float(moon.moon_phase)

    previous_new = ephem.previous_new_moon(date)
    next_new = ephem.next_new_moon(date)
    phase = (float(date) - float(previous_new)) / (float(next_new) - float(previous_new))

    return illumination, phase


def solunar_window(when: datetime, latitude: float, longitude: float) -> SolunarWindow:
    """
    Classify a time against the solunar feeding windows.

    - major: within MAJOR_WINDOW_HOURS of lunar transit, approximated as the
      midpoint between the latest moonrise and the following moonset
    - minor: within MINOR_WINDOW_HOURS of a moonrise or moonset
    - none: otherwise, or when the moon does not rise/set at this location

    Args:
        when: Time to classify
        latitude: Latitude (degrees)
        longitude: Longitude (degrees)

    Returns:
        'major', 'minor' or 'none'
    """
    obs = _observer(latitude, longitude, when)
    moon = ephem.Moon()
    now = float(obs.date)

    try:
        rise = obs.previous_rising(moon)
        following_set = obs.next_setting(moon, start=rise)
        transit = (float(rise) + float(following_set)) / 2.0

        events = [
            rise,
            obs.next_rising(moon),
            obs.previous_setting(moon),
            obs.next_setting(moon),
        ]
    except ephem.CircumpolarError as e:
        logger.debug(f"No moon events at ({latitude}, {longitude}) near {when}: {e}")
        return "none"

    if abs(now - transit) <= MAJOR_WINDOW_HOURS / 24.0:
        return "major"

    if any(abs(now - float(event)) <= MINOR_WINDOW_HOURS / 24.0 for event in events):
        return "minor"

    return "none"
