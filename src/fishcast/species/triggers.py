"""
Trigger Registry for Species Scoring

A trigger is a (predicate, bonus, label) entry evaluated uniformly for every
species that lists it. Universal triggers apply to all species regardless of
their list (solunar windows, rapid pressure rise, temperature shock).

Species-specific penalties are declared in the species YAML and resolved
through PENALTY_CONDITIONS, so no species needs a hand-written branch in the
scorer.
"""

from typing import TYPE_CHECKING, Callable, Dict, List, NamedTuple, Optional, Tuple

if TYPE_CHECKING:
    from ..context.schemas import EnvironmentalSnapshot
    from .catalog import SpeciesProfile

# Thresholds
WAVE_HIGH_M = 0.8
WAVE_CALM_M = 0.4
MOON_FULL_FRACTION = 0.85
MOON_NEW_FRACTION = 0.15
DARK_NIGHT_FRACTION = 0.3
LIT_NIGHT_FRACTION = 0.5
CLOUD_COVER_PCT = 60.0
CLEAR_SKY_PCT = 20.0
SUNSHINE_CLOUD_PCT = 40.0
CURRENT_HIGH_MS = 0.6
CURRENT_LOW_MS = 0.3
WARM_WATER_C = 22.0
COLD_WATER_C = 14.0
CLEAN_WATER = 70.0
TURBID_WATER = 50.0
DIRTY_WATER = 30.0
TIDAL_FLOW = 0.5
WIND_MODERATE_KMH = (10.0, 25.0)
ROCK_SURGE_M = (0.4, 1.5)
SCHOOLING_EFFICIENCY = 0.85
STABLE_TEMP_CHANGE_C = 1.0
TEMP_SHOCK_C = 3.0

# Strong current bonus is scaled by current_preference relative to this
CURRENT_PREFERENCE_REF = 0.5
CURRENT_SCALE_MAX = 1.5

Predicate = Callable[['EnvironmentalSnapshot', 'SpeciesProfile'], bool]
Scale = Callable[['EnvironmentalSnapshot', 'SpeciesProfile'], float]


class Trigger(NamedTuple):
    """A condition that adds (or removes) bonus points when it holds."""

    predicate: Predicate
    bonus: float
    label: str
    scale: Optional[Scale] = None


def _pressure_drop_scale(snapshot, profile) -> float:
    fast = 1.5 if snapshot.pressure_trend == "falling_fast" else 1.0
    return profile.pressure_sensitivity * fast


def _current_preference_scale(snapshot, profile) -> float:
    return min(CURRENT_SCALE_MAX, profile.current_preference / CURRENT_PREFERENCE_REF)


TRIGGERS: Dict[str, Trigger] = {
    'pressure_drop': Trigger(
        lambda s, p: s.pressure_trend in ("falling", "falling_fast"),
        5.0, "Pressure drop", _pressure_drop_scale
    ),
    'wave_high': Trigger(lambda s, p: s.wave_height_m > WAVE_HIGH_M, 5.0, "Foamy water"),
    'calm_water': Trigger(lambda s, p: s.wave_height_m < WAVE_CALM_M, 5.0, "Calm water"),
    'moon_full': Trigger(lambda s, p: s.moon_illumination > MOON_FULL_FRACTION, 5.0, "Full moon"),
    'moon_new': Trigger(lambda s, p: s.moon_illumination < MOON_NEW_FRACTION, 5.0, "New moon"),
    'cloud_cover': Trigger(lambda s, p: s.cloud_cover_pct > CLOUD_COVER_PCT, 3.0, "Cloud cover"),
    'clear_sky': Trigger(lambda s, p: s.cloud_cover_pct < CLEAR_SKY_PCT, 3.0, "Clear sky"),
    'sunshine': Trigger(
        lambda s, p: s.time_of_day == "day" and s.cloud_cover_pct < SUNSHINE_CLOUD_PCT,
        3.0, "Sunshine"
    ),
    'stable_weather': Trigger(
        lambda s, p: s.pressure_trend == "stable" and s.water_temp_change_c < STABLE_TEMP_CHANGE_C,
        5.0, "Stable weather"
    ),
    'current_high': Trigger(
        lambda s, p: s.current_ms > CURRENT_HIGH_MS,
        5.0, "Strong current", _current_preference_scale
    ),
    'current_medium': Trigger(
        lambda s, p: CURRENT_LOW_MS <= s.current_ms <= CURRENT_HIGH_MS, 4.0, "Moderate current"
    ),
    'current_low': Trigger(lambda s, p: s.current_ms < CURRENT_LOW_MS, 3.0, "Slack current"),
    'tidal_flow': Trigger(lambda s, p: s.tide_flow > TIDAL_FLOW, 5.0, "Tidal flow"),
    'night_dark': Trigger(
        lambda s, p: s.time_of_day == "night" and s.moon_illumination < DARK_NIGHT_FRACTION,
        5.0, "Dark night"
    ),
    'light_night': Trigger(
        lambda s, p: s.time_of_day == "night" and s.moon_illumination < LIT_NIGHT_FRACTION,
        4.0, "Harbour lights"
    ),
    'warm_water': Trigger(lambda s, p: s.water_temp_c > WARM_WATER_C, 4.0, "Warm water"),
    'cold_water': Trigger(lambda s, p: s.water_temp_c < COLD_WATER_C, 4.0, "Cold water"),
    'clean_water': Trigger(lambda s, p: s.clarity > CLEAN_WATER, 5.0, "Clear water"),
    'turbid_water': Trigger(lambda s, p: s.clarity < TURBID_WATER, 5.0, "Turbid water"),
    'dirty_water': Trigger(lambda s, p: s.clarity < DIRTY_WATER, 5.0, "Coloured water"),
    'wind_moderate': Trigger(
        lambda s, p: WIND_MODERATE_KMH[0] <= s.wind_speed_kmh <= WIND_MODERATE_KMH[1],
        3.0, "Fresh breeze"
    ),
    'school_fish': Trigger(
        lambda s, p: p.seasonal_efficiency[s.season] >= SCHOOLING_EFFICIENCY,
        3.0, "Bait schools"
    ),
    'rocks': Trigger(
        lambda s, p: ROCK_SURGE_M[0] <= s.wave_height_m <= ROCK_SURGE_M[1],
        3.0, "Rock surge"
    ),

    # Universal
    'solunar_major': Trigger(lambda s, p: s.solunar == "major", 4.0, "Solunar major"),
    'solunar_minor': Trigger(lambda s, p: s.solunar == "minor", 2.0, "Solunar minor"),
    'pressure_rising_fast': Trigger(
        lambda s, p: s.pressure_trend == "rising_fast",
        -6.0, "Rapid pressure rise", lambda s, p: p.pressure_sensitivity
    ),
    'temperature_shock': Trigger(
        lambda s, p: s.water_temp_change_c > TEMP_SHOCK_C, -4.0, "Temperature shock"
    ),
}

UNIVERSAL_TRIGGERS = ('solunar_major', 'solunar_minor', 'pressure_rising_fast', 'temperature_shock')

PENALTY_CONDITIONS: Dict[str, Callable[['EnvironmentalSnapshot', float], bool]] = {
    'clarity_below': lambda s, threshold: s.clarity < threshold,
    'rain_above': lambda s, threshold: s.precipitation_mm > threshold,
    'wave_above': lambda s, threshold: s.wave_height_m > threshold,
    'current_above': lambda s, threshold: s.current_ms > threshold,
    'water_temp_below': lambda s, threshold: s.water_temp_c < threshold,
    'water_temp_above': lambda s, threshold: s.water_temp_c > threshold,
}


def evaluate_triggers(
    snapshot: 'EnvironmentalSnapshot',
    profile: 'SpeciesProfile'
) -> List[Tuple[str, float]]:
    """
    Evaluate the species' triggers followed by the universal ones.

    Args:
        snapshot: Environmental snapshot
        profile: Species profile

    Returns:
        List of (label, bonus) for every trigger that fired, in evaluation order
        (scaled triggers whose bonus scales to zero do not fire)
    """
    fired = []

    for name in list(profile.triggers) + list(UNIVERSAL_TRIGGERS):
        trigger = TRIGGERS[name]
        if not trigger.predicate(snapshot, profile):
            continue

        bonus = trigger.bonus
        if trigger.scale is not None:
            bonus *= trigger.scale(snapshot, profile)
            if bonus == 0:
                continue
        fired.append((trigger.label, bonus))

    return fired
