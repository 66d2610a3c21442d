"""
Heuristic Oceanography Estimates

Water clarity, surface current and tidal flow derived from the surface
observations that weather and marine feeds actually provide.

These are rules of thumb, not physical models:
- Waves stir up sediment, wind mixes the surface, rain carries runoff
- Current grows with wave energy and wind drag
- Tidal streams are strongest around new and full moon (spring tides)
"""

import math

CLARITY_MIN = 5.0
CLARITY_MAX = 100.0
CLARITY_WAVE_COEFF = 15.0    # per metre of wave height
CLARITY_WIND_COEFF = 0.8     # per km/h of wind
CLARITY_RAIN_COEFF = 5.0     # per mm of rain

CURRENT_WAVE_COEFF = 0.35
CURRENT_WIND_COEFF = 0.018
CURRENT_MIN_MS = 0.05

# Semi-diurnal tide: two cycles per day
TIDE_PERIOD_HOURS = 12.0


def clarity_estimate(wave_height: float, wind_speed: float, rain: float) -> float:
    """
    Estimate water clarity on a 0-100 scale (0 = mud, 100 = crystal).

    Args:
        wave_height: Wave height (m)
        wind_speed: Wind speed (km/h)
        rain: Precipitation (mm)

    Returns:
        Clarity clamped to [CLARITY_MIN, CLARITY_MAX]

    Examples:
        >>> clarity_estimate(0.0, 0.0, 0.0)
        100.0
        >>> clarity_estimate(1.0, 10.0, 1.0)
        72.0
        >>> clarity_estimate(4.0, 60.0, 10.0)
        5.0
    """
    clarity = CLARITY_MAX
    clarity -= wave_height * CLARITY_WAVE_COEFF
    clarity -= wind_speed * CLARITY_WIND_COEFF
    clarity -= rain * CLARITY_RAIN_COEFF
    return max(CLARITY_MIN, min(CLARITY_MAX, clarity))


def current_estimate(wave_height: float, wind_speed: float, region_multiplier: float = 1.0) -> float:
    """
    Estimate surface current speed (m/s).

    Enclosed seas and straits amplify current through region_multiplier.

    Examples:
        >>> round(current_estimate(1.0, 10.0), 3)
        0.53
        >>> current_estimate(0.0, 0.0)
        0.05
    """
    current = (wave_height * CURRENT_WAVE_COEFF + wind_speed * CURRENT_WIND_COEFF) * region_multiplier
    return max(CURRENT_MIN_MS, current)


def tide_estimate(hour: float, moon_phase: float) -> dict:
    """
    Simple harmonic tide approximation.

    Args:
        hour: Local hour of day (fractional)
        moon_phase: Position in synodic cycle (0 = new, 0.5 = full)

    Returns:
        Dict with 'level' (-1 to 1) and 'flow' (0 to 1.5)

    Examples:
        >>> tide_estimate(0.0, 0.0)['flow']
        1.5
        >>> round(tide_estimate(3.0, 0.25)['flow'], 3)
        0.0
    """
    # 1.0 at spring tides (new/full), 0.0 at neap tides (quarters)
    spring_factor = abs(math.cos(2.0 * math.pi * moon_phase))
    angle = (hour / TIDE_PERIOD_HOURS) * 2.0 * math.pi

    level = math.sin(angle)
    flow = abs(math.cos(angle)) * (0.5 + spring_factor)

    return {'level': level, 'flow': flow}
