"""
Derived Environmental Metrics for fishcast

Shape functions and estimators that turn raw observations into the
quantities the suitability scorer works with.

Available metrics:
- Membership curves (fuzzy trapezoid, Gaussian bell, wind, lunar phase)
- Oceanography heuristics (clarity, current, tide)
- Atmospheric classifiers (pressure trend, wind naming, season)
- Astronomy (sun times, time of day, moon state, solunar windows)
"""

from .shapes import (
    fuzzy_trapezoid,
    gaussian_score,
    in_arc,
    wind_score,
    lunar_phase_multiplier,
)

from .oceanography import (
    clarity_estimate,
    current_estimate,
    tide_estimate,
)

from .atmosphere import (
    PressureTrend,
    Season,
    pressure_trend,
    wind_direction_name,
    season_for_month,
)

from .astronomy import (
    SunTimes,
    TimeOfDay,
    SolunarWindow,
    DEFAULT_SUN_TIMES,
    local_hour,
    sun_times,
    time_of_day,
    moon_state,
    solunar_window,
)

__all__ = [
    # Membership curves
    'fuzzy_trapezoid',
    'gaussian_score',
    'in_arc',
    'wind_score',
    'lunar_phase_multiplier',
    # Oceanography
    'clarity_estimate',
    'current_estimate',
    'tide_estimate',
    # Atmosphere
    'PressureTrend',
    'Season',
    'pressure_trend',
    'wind_direction_name',
    'season_for_month',
    # Astronomy
    'SunTimes',
    'TimeOfDay',
    'SolunarWindow',
    'DEFAULT_SUN_TIMES',
    'local_hour',
    'sun_times',
    'time_of_day',
    'moon_state',
    'solunar_window',
]
