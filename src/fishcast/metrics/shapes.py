"""
Membership Curves for Suitability Scoring

Reusable numeric curves that turn a raw environmental value into a 0-1
suitability factor.

Design Principles:
- Never return exactly 0 (a single bad parameter must not exclude a species)
- Deterministic, side-effect free
- Degenerate ranges handled without division errors
"""

import math
from typing import Optional, Tuple

FUZZY_FLOOR = 0.15
GAUSSIAN_FLOOR = 0.1

# Gaussian plateau half-width in native units (e.g. +/-2 degC)
GAUSSIAN_PLATEAU = 2.0

STORM_WIND_KMH = 50.0
STORM_WIND_SCORE = 0.1

WIND_ARC_PREFERRED = 1.0
WIND_ARC_SECONDARY = 0.7
WIND_ARC_OTHER = 0.45
WIND_ARC_NEUTRAL = 0.7

# (speed above, multiplier), checked strongest first
WIND_SPEED_SCALING = (
    (40.0, 0.5),
    (28.0, 0.7),
    (20.0, 0.85),
)

NEW_MOON_BONUS = 1.15
FULL_MOON_BONUS = 1.10
QUARTER_MOON_BONUS = 1.05
SYZYGY_WINDOW = 0.05
QUARTER_WINDOW = 0.03

Arc = Tuple[float, float]


def fuzzy_trapezoid(
    value: float,
    min_value: float,
    opt_min: float,
    opt_max: float,
    max_value: float
) -> float:
    """
    Trapezoidal fuzzy membership.

    - 1.0 inside [opt_min, opt_max]
    - FUZZY_FLOOR at or beyond [min_value, max_value]
    - Linear interpolation in between

    Examples:
        >>> fuzzy_trapezoid(15, 7, 11, 19, 23)
        1.0
        >>> fuzzy_trapezoid(7, 7, 11, 19, 23)
        0.15
        >>> round(fuzzy_trapezoid(9, 7, 11, 19, 23), 3)
        0.575
    """
    if opt_min <= value <= opt_max:
        return 1.0

    if value <= min_value or value >= max_value:
        return FUZZY_FLOOR

    if value < opt_min:
        return FUZZY_FLOOR + (1.0 - FUZZY_FLOOR) * (value - min_value) / (opt_min - min_value)

    return FUZZY_FLOOR + (1.0 - FUZZY_FLOOR) * (max_value - value) / (max_value - opt_max)


def gaussian_score(
    value: float,
    min_value: float,
    optimum: float,
    max_value: float
) -> float:
    """
    Bell-curve membership peaked at the optimum.

    Within +/-GAUSSIAN_PLATEAU of the optimum the score is 1.0. Outside it
    decays as exp(-((value - optimum) / half_range) ** 2), where half_range is
    half the tolerance span, and is floored at GAUSSIAN_FLOOR.

    Examples:
        >>> gaussian_score(16.0, 7, 15, 23)
        1.0
        >>> round(gaussian_score(23.0, 7, 15, 23), 3)
        0.368
        >>> gaussian_score(60.0, 7, 15, 23)
        0.1
    """
    distance = abs(value - optimum)
    if distance <= GAUSSIAN_PLATEAU:
        return 1.0

    half_range = (max_value - min_value) / 2.0
    if half_range <= 0:
        return GAUSSIAN_FLOOR

    score = math.exp(-((value - optimum) / half_range) ** 2)
    return max(GAUSSIAN_FLOOR, score)


def in_arc(direction: float, arc: Optional[Arc]) -> bool:
    """
    Check whether a compass direction lies inside an arc.

    Arcs are (start, end) in degrees, clockwise; start > end wraps through north.

    Examples:
        >>> in_arc(10, (315, 45))
        True
        >>> in_arc(180, (315, 45))
        False
    """
    if arc is None:
        return False

    direction = direction % 360.0
    start, end = arc

    if start <= end:
        return start <= direction <= end
    return direction >= start or direction <= end


def wind_score(
    direction: float,
    speed: float,
    preferred_arc: Optional[Arc] = None,
    secondary_arc: Optional[Arc] = None
) -> float:
    """
    Direction- and region-aware wind suitability.

    Args:
        direction: Wind direction (degrees, meteorological "from")
        speed: Wind speed (km/h)
        preferred_arc: Region's preferred direction arc, or None for open water
        secondary_arc: Region's acceptable direction arc

    Returns:
        Score between STORM_WIND_SCORE and 1.0

    Examples:
        >>> wind_score(30, 10, (0, 90), (270, 360))
        1.0
        >>> wind_score(30, 60, (0, 90), (270, 360))
        0.1
        >>> wind_score(180, 10)
        0.7
    """
    if speed >= STORM_WIND_KMH:
        return STORM_WIND_SCORE

    if preferred_arc is None and secondary_arc is None:
        score = WIND_ARC_NEUTRAL
    elif in_arc(direction, preferred_arc):
        score = WIND_ARC_PREFERRED
    elif in_arc(direction, secondary_arc):
        score = WIND_ARC_SECONDARY
    else:
        score = WIND_ARC_OTHER

    for threshold, multiplier in WIND_SPEED_SCALING:
        if speed > threshold:
            score *= multiplier
            break

    return score


def lunar_phase_multiplier(phase: float) -> float:
    """
    Modest multiplicative bonus around the principal lunar phases.

    Args:
        phase: Position in the synodic cycle (0 = new, 0.25 = first quarter,
            0.5 = full, 0.75 = last quarter)

    Examples:
        >>> lunar_phase_multiplier(0.01)
        1.15
        >>> lunar_phase_multiplier(0.5)
        1.1
        >>> lunar_phase_multiplier(0.4)
        1.0
    """
    phase = phase % 1.0

    if phase <= SYZYGY_WINDOW or phase >= 1.0 - SYZYGY_WINDOW:
        return NEW_MOON_BONUS
    if abs(phase - 0.5) <= SYZYGY_WINDOW:
        return FULL_MOON_BONUS
    if abs(phase - 0.25) <= QUARTER_WINDOW or abs(phase - 0.75) <= QUARTER_WINDOW:
        return QUARTER_MOON_BONUS
    return 1.0
