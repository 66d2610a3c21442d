"""
Species Suitability Scoring Engine for fishcast

Scores how favorable conditions are to pursue a species, given one
environmental snapshot.

The score combines five weighted components:
- Seasonal baseline (species efficiency in the current season)
- Temperature fit (Gaussian around the species optimum)
- Environmental composite (wave, clarity, wind and region match)
- Activity-time fit (activity pattern vs time of day)
- Trigger bonus (generic trigger registry, clamped)

The raw total is multiplied by the lunar phase multiplier, then penalties
are applied in a fixed order: wave, wind, rain, boat-only category, and the
species' own declarative penalties. Wave and wind danger cutoffs replace the
trigger list and reason with a single danger label.

Design Principles:
- Config-driven (weights and thresholds in config/scoring.yaml)
- Deterministic unless a random generator is injected
- Never raises on odd numeric input; always returns a bounded score
- Explainable (component breakdown, trigger labels, reason string)
"""

import logging
import math
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..confidence import compute_chaos_index, noise_sigma
from ..context.schemas import EnvironmentalSnapshot
from ..metrics.shapes import fuzzy_trapezoid, gaussian_score, lunar_phase_multiplier, wind_score
from ..regions import get_region_profile
from ..settings import get_config_dir
from .catalog import Advice, SpeciesProfile, TemperatureTolerance, WavePreference
from .triggers import PENALTY_CONDITIONS, evaluate_triggers

logger = logging.getLogger(__name__)

REASON_UNFAVORABLE = "conditions unfavorable"
REASON_LOW = "low activity"
REASON_MODERATE = "moderate activity"
REASON_FAVORABLE = "favorable conditions"


# ============================================================================
# Configuration
# ============================================================================

class WavePenaltyConfig(BaseModel):
    danger_m: float
    danger_factor: float
    rough_m: float
    rough_factor: float
    danger_label: str


class WindPenaltyConfig(BaseModel):
    danger_kmh: float
    danger_factor: float
    rough_kmh: float
    rough_factor: float
    danger_label: str


class RainPenaltyConfig(BaseModel):
    heavy_mm: float
    heavy_factor: float
    moderate_mm: float
    moderate_factor: float


class BoatPenaltyConfig(BaseModel):
    factor: float
    label: str


class PenaltyConfig(BaseModel):
    wave: WavePenaltyConfig
    wind: WindPenaltyConfig
    rain: RainPenaltyConfig
    boat_only: BoatPenaltyConfig
    danger_cap: float


class ReasonBands(BaseModel):
    unfavorable_below: float
    low_below: float
    favorable_from: float


class NoiseConfig(BaseModel):
    base_sigma: float
    chaos_scale: float


class RankingConfig(BaseModel):
    min_score: float
    limit: int
    dominance_scaling: bool = False
    dominance_factor: float = 0.85


class ScoringConfig(BaseModel):
    """Weights, thresholds and tables driving the scorer."""

    model_config = ConfigDict(frozen=True)

    weights: Dict[str, float]
    environmental_blend: Dict[str, float]
    region_mismatch_score: float
    trigger_bonus_limits: Tuple[float, float]
    activity_table: Dict[str, Dict[str, float]]
    clarity_preferences: Dict[str, Tuple[float, float, float, float]]
    penalties: PenaltyConfig
    bounds: Dict[str, Tuple[float, float]]
    reason_bands: ReasonBands
    noise: NoiseConfig
    daily_weights: Dict[str, Dict[str, float]]
    day_peak_hours: List[int]
    day_peak_weight: float
    ranking: RankingConfig


@lru_cache(maxsize=None)
def _load_scoring_config(config_path: Path) -> ScoringConfig:
    if not config_path.exists():
        raise FileNotFoundError(f"Scoring config not found: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    required = ['weights', 'environmental_blend', 'activity_table', 'penalties', 'bounds']
    missing = [field for field in required if field not in config]
    if missing:
        raise ValueError(f"Invalid scoring config: missing fields {missing}")

    weight_keys = {'seasonal', 'temperature', 'environmental', 'activity'}
    if set(config['weights']) != weight_keys:
        raise ValueError(f"Scoring weights must define exactly {sorted(weight_keys)}")

    # Validate environmental blend sums to 1.0 (within tolerance)
    total = sum(config['environmental_blend'].values())
    if abs(total - 1.0) > 0.01:
        raise ValueError(f"Environmental blend must sum to 1.0, got {total}")

    try:
        return ScoringConfig(**config)
    except ValidationError as e:
        raise ValueError(f"Invalid scoring config: {e}") from e


def load_scoring_config(config_dir: Optional[Path] = None) -> ScoringConfig:
    """
    Load scoring configuration from config/scoring.yaml.

    Raises:
        FileNotFoundError: If scoring.yaml doesn't exist
        ValueError: If the config is invalid

    Examples:
        >>> config = load_scoring_config()
        >>> config.weights['temperature']
        25.0
    """
    return _load_scoring_config(Path(config_dir or get_config_dir()) / "scoring.yaml")


# ============================================================================
# Result model
# ============================================================================

class ScoredRecommendation(BaseModel):
    """Suitability score for one species under one snapshot."""

    model_config = ConfigDict(frozen=True)

    species_id: str = Field(..., description="Species identifier")
    name: str = Field(..., description="Display name")
    icon: str = Field("", description="Display icon")
    category: str = Field(..., description="Species category tag")
    score: float = Field(..., ge=0.0, le=100.0, description="Bounded suitability score")
    reason: str = Field(..., description="Short explanation of the score band")
    triggers: List[str] = Field(default_factory=list, description="Active trigger labels")
    lead_trigger: Optional[str] = Field(None, description="Label of the first positive trigger")
    advice: Advice = Field(..., description="Region-resolved tackle advice")
    note: str = Field("", description="Species note")
    components: Dict[str, float] = Field(..., description="Score breakdown")
    danger: bool = Field(False, description="Score suppressed by a danger cutoff")
    when: datetime = Field(..., description="Time of the snapshot scored")


# ============================================================================
# Component scores
# ============================================================================

def score_temperature_fit(water_temp: float, tolerance: TemperatureTolerance) -> float:
    """
    Temperature fit (0.1-1) from the species tolerance range.

    Examples:
        >>> tol = TemperatureTolerance(min=7, optimum=15, max=23)
        >>> score_temperature_fit(15.0, tol)
        1.0
    """
    return gaussian_score(water_temp, tolerance.min, tolerance.optimum, tolerance.max)


def score_wave_fit(wave_height: float, preference: WavePreference) -> float:
    """
    Wave fit: plateau of ideal +/- tolerance/2, fading to the floor at
    ideal +/- 2*tolerance.

    Examples:
        >>> pref = WavePreference(ideal=0.9, tolerance=0.5)
        >>> score_wave_fit(1.0, pref)
        1.0
        >>> score_wave_fit(3.0, pref)
        0.15
    """
    ideal = preference.ideal
    tol = preference.tolerance
    return fuzzy_trapezoid(wave_height, ideal - 2 * tol, ideal - tol / 2, ideal + tol / 2, ideal + 2 * tol)


def score_clarity_fit(clarity: float, preference: str, config: ScoringConfig) -> float:
    """
    Clarity fit for a preference category; 'any' always fits.

    Examples:
        >>> config = load_scoring_config()
        >>> score_clarity_fit(90.0, 'clear', config)
        1.0
        >>> score_clarity_fit(90.0, 'any', config)
        1.0
    """
    if preference == "any":
        return 1.0
    return fuzzy_trapezoid(clarity, *config.clarity_preferences[preference])


def score_environmental(
    snapshot: EnvironmentalSnapshot,
    profile: SpeciesProfile,
    config: ScoringConfig
) -> Tuple[float, Dict[str, float]]:
    """
    Weighted environmental blend (0-1) and its parts.

    Returns:
        Tuple of (blend, {wave, clarity, wind, region})
    """
    region = get_region_profile(snapshot.region)
    blend = config.environmental_blend

    parts = {
        'wave': score_wave_fit(snapshot.wave_height_m, profile.wave),
        'clarity': score_clarity_fit(snapshot.clarity, profile.clarity_preference, config),
        'wind': wind_score(
            snapshot.wind_direction_deg,
            snapshot.wind_speed_kmh,
            region.preferred_wind_arc,
            region.secondary_wind_arc
        ),
        'region': 1.0 if snapshot.region in profile.regions else config.region_mismatch_score,
    }

    total = sum(blend[key] * value for key, value in parts.items())
    return total, parts


def score_activity(time_of_day: str, pattern: str, config: ScoringConfig) -> float:
    """Activity fit (0-1) from the pattern x time-of-day table."""
    return config.activity_table[pattern][time_of_day]


def uncertainty_noise(sigma: float, rng) -> float:
    """
    Gaussian jitter via the Box-Muller transform.

    Args:
        sigma: Standard deviation (score points)
        rng: Random source with a random() method returning [0, 1)
            (numpy.random.Generator or random.Random)

    Returns:
        Noise term in score points
    """
    u = 0.0
    while u == 0.0:
        u = rng.random()
    v = rng.random()
    z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
    return z * sigma


def classify_reason(score: float, lead_trigger: Optional[str], config: ScoringConfig) -> str:
    """
    Reason string from fixed score bands.

    Examples:
        >>> config = load_scoring_config()
        >>> classify_reason(10.0, None, config)
        'conditions unfavorable'
        >>> classify_reason(80.0, 'Pressure drop', config)
        'Pressure drop'
        >>> classify_reason(80.0, None, config)
        'favorable conditions'
        >>> classify_reason(55.0, 'Pressure drop', config)
        'moderate activity'
    """
    bands = config.reason_bands

    if score < bands.unfavorable_below:
        return REASON_UNFAVORABLE
    elif score < bands.low_below:
        return REASON_LOW
    elif score >= bands.favorable_from:
        return lead_trigger or REASON_FAVORABLE
    else:
        return REASON_MODERATE


def apply_penalties(
    score: float,
    snapshot: EnvironmentalSnapshot,
    profile: SpeciesProfile,
    config: ScoringConfig
) -> Tuple[float, List[str], Optional[str]]:
    """
    Apply multiplicative penalties in fixed order.

    Order: wave, wind, rain, boat-only category, species-specific.

    Returns:
        Tuple of (penalized score, penalty labels, danger label or None)
    """
    penalties = config.penalties
    labels = []
    danger = None

    # Wave
    wave = penalties.wave
    if snapshot.wave_height_m > wave.danger_m:
        score *= wave.danger_factor
        danger = wave.danger_label
    elif snapshot.wave_height_m > wave.rough_m:
        score *= wave.rough_factor

    # Wind
    wind = penalties.wind
    if snapshot.wind_speed_kmh >= wind.danger_kmh:
        score *= wind.danger_factor
        danger = danger or wind.danger_label
    elif snapshot.wind_speed_kmh > wind.rough_kmh:
        score *= wind.rough_factor

    # Rain
    rain = penalties.rain
    if snapshot.precipitation_mm > rain.heavy_mm:
        score *= rain.heavy_factor
    elif snapshot.precipitation_mm > rain.moderate_mm:
        score *= rain.moderate_factor

    # Boat-only species from the shore
    if profile.requires_boat and snapshot.fishing_mode == "shore":
        score *= penalties.boat_only.factor
        labels.append(penalties.boat_only.label)

    # Species-specific
    for penalty in profile.penalties:
        if PENALTY_CONDITIONS[penalty.condition](snapshot, penalty.threshold):
            score *= penalty.factor
            labels.append(penalty.label)

    return score, labels, danger


# ============================================================================
# Scorer
# ============================================================================

def score_species(
    snapshot: EnvironmentalSnapshot,
    profile: SpeciesProfile,
    config: Optional[ScoringConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> ScoredRecommendation:
    """
    Compute the suitability score of one species for one snapshot.

    Args:
        snapshot: Environmental snapshot
        profile: Species profile
        config: Scoring config (defaults to config/scoring.yaml)
        rng: Optional random generator; when given, Gaussian noise scaled by
            the chaos index is added to the raw score

    Returns:
        ScoredRecommendation with bounded score, reason and trigger labels

    Examples:
        >>> from datetime import datetime
        >>> from fishcast.species.catalog import load_species_profile
        >>> snap = EnvironmentalSnapshot(when=datetime(2025, 1, 10, 7), season='winter',
        ...                              water_temp_c=15.0, region='MARMARA', time_of_day='dawn')
        >>> result = score_species(snap, load_species_profile('sea_bass'))
        >>> result.score >= 65
        True
    """
    config = config or load_scoring_config()
    weights = config.weights

    seasonal = profile.seasonal_efficiency[snapshot.season] * weights['seasonal']
    temperature = score_temperature_fit(snapshot.water_temp_c, profile.temperature) * weights['temperature']
    env_blend, env_parts = score_environmental(snapshot, profile, config)
    environmental = env_blend * weights['environmental']
    activity = score_activity(snapshot.time_of_day, profile.activity_pattern, config) * weights['activity']

    fired = evaluate_triggers(snapshot, profile)
    low, high = config.trigger_bonus_limits
    trigger = max(low, min(high, sum(bonus for _, bonus in fired)))

    noise = 0.0
    if rng is not None:
        chaos = compute_chaos_index(
            snapshot.wind_speed_kmh, snapshot.wave_height_m, snapshot.water_temp_change_c
        )
        sigma = noise_sigma(chaos, config.noise.base_sigma, config.noise.chaos_scale)
        noise = uncertainty_noise(sigma, rng)

    raw = seasonal + temperature + environmental + activity + trigger + noise
    lunar = lunar_phase_multiplier(snapshot.moon_phase)
    boosted = raw * lunar

    penalized, penalty_labels, danger = apply_penalties(boosted, snapshot, profile, config)

    floor, ceiling = config.bounds['instant']
    if danger:
        penalized = min(penalized, config.penalties.danger_cap)
    score = max(floor, min(ceiling, penalized))

    lead = next((label for label, bonus in fired if bonus > 0), None)
    if danger:
        labels = [danger]
        reason = danger
    else:
        labels = [label for label, _ in fired] + penalty_labels
        reason = classify_reason(score, lead, config)

    components = {
        'seasonal': seasonal,
        'temperature': temperature,
        'environmental': environmental,
        'activity': activity,
        'trigger': trigger,
        'noise': noise,
        'lunar_multiplier': lunar,
        'penalty_multiplier': penalized / boosted if boosted > 0 else 1.0,
        **{f"env_{key}": value for key, value in env_parts.items()},
    }

    return ScoredRecommendation(
        species_id=profile.id,
        name=profile.name,
        icon=profile.icon,
        category=profile.category,
        score=score,
        reason=reason,
        triggers=labels,
        lead_trigger=lead,
        advice=profile.advice_for(snapshot.region),
        note=profile.note,
        components=components,
        danger=danger is not None,
        when=snapshot.when,
    )


def score_catalog(
    snapshot: EnvironmentalSnapshot,
    catalog: List[SpeciesProfile],
    config: Optional[ScoringConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> List[ScoredRecommendation]:
    """
    Score every species allowed in the snapshot's region, in catalog order.

    A snapshot on land yields an empty list without evaluating any species.
    """
    if snapshot.is_land:
        logger.info(f"Point ({snapshot.latitude}, {snapshot.longitude}) is on land; no species scored")
        return []

    config = config or load_scoring_config()
    return [
        score_species(snapshot, profile, config, rng)
        for profile in catalog
        if profile.allowed_in(snapshot.region)
    ]
