"""
Temporal Aggregation of Hourly Suitability Scores

Collapses hourly ScoredRecommendations into the two figures users see:

- Daily score: activity-weighted mean over the day's hours, clamped into the
  daily band. Hours a species is naturally active in weigh more (night
  feeders at night, day feeders mid-morning and mid-afternoon). Triggers and
  advice come from the best weighted hour.
- Instant score: the current hour smoothed with its neighbours (h-1, h, h+1),
  keeping the current hour's own reason and triggers. Dangerous hours keep
  their own (capped) score.

Design Principles:
- Operates on already-scored hours (no re-scoring)
- Weights are config-driven (config/scoring.yaml daily_weights)
- Species are aggregated independently
"""

import logging
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..context.schemas import EnvironmentalSnapshot
from ..species.catalog import SpeciesProfile
from ..species.scoring import ScoredRecommendation, ScoringConfig, classify_reason, load_scoring_config

logger = logging.getLogger(__name__)

SMOOTHING_RADIUS_HOURS = 1


def hourly_weight(
    snapshot: EnvironmentalSnapshot,
    activity_pattern: str,
    config: Optional[ScoringConfig] = None
) -> float:
    """
    Weight of one hour in a species' daily average.

    Args:
        snapshot: The hour's snapshot (time of day and local hour)
        activity_pattern: Species activity pattern
        config: Scoring config

    Returns:
        Positive weight

    Examples:
        >>> from datetime import datetime
        >>> snap = EnvironmentalSnapshot(when=datetime(2025, 6, 1, 10), season='summer',
        ...                              water_temp_c=20.0, time_of_day='day')
        >>> hourly_weight(snap, 'day')
        1.8
        >>> hourly_weight(snap, 'night')
        0.5
    """
    config = config or load_scoring_config()

    if (
        activity_pattern == "day"
        and snapshot.time_of_day == "day"
        and snapshot.when.hour in config.day_peak_hours
    ):
        return config.day_peak_weight

    return config.daily_weights[activity_pattern][snapshot.time_of_day]


def daily_score(
    hourly: Sequence[ScoredRecommendation],
    snapshots: Sequence[EnvironmentalSnapshot],
    activity_pattern: str,
    config: Optional[ScoringConfig] = None
) -> ScoredRecommendation:
    """
    Activity-weighted daily score for one species.

    Args:
        hourly: The species' scored hours
        snapshots: Snapshots the hours were scored from (same order)
        activity_pattern: Species activity pattern
        config: Scoring config

    Returns:
        The best weighted hour's recommendation, carrying the daily score
        and a reason derived from it

    Raises:
        ValueError: If no hours are given or the sequences differ in length
    """
    if not hourly:
        raise ValueError("Cannot aggregate an empty day")
    if len(hourly) != len(snapshots):
        raise ValueError(f"Got {len(hourly)} scored hours for {len(snapshots)} snapshots")

    config = config or load_scoring_config()

    scores = np.array([result.score for result in hourly])
    weights = np.array([hourly_weight(snap, activity_pattern, config) for snap in snapshots])

    floor, ceiling = config.bounds['daily']
    score = float(np.clip(np.average(scores, weights=weights), floor, ceiling))

    best = hourly[int(np.argmax(scores * weights))]
    reason = best.reason if best.danger else classify_reason(score, best.lead_trigger, config)

    return best.model_copy(update={'score': score, 'reason': reason})


def instant_score(
    hourly: Sequence[ScoredRecommendation],
    index: int
) -> ScoredRecommendation:
    """
    Smooth hour `index` with its available neighbours.

    Hours scored 40, 60, 80 smooth the middle hour to 60; the first hour
    only has one neighbour and smooths to 50. Reason and triggers stay
    those of hour `index`. A dangerous hour is never smoothed: calm
    neighbours must not lift it back above the danger cap.
    """
    if not 0 <= index < len(hourly):
        raise IndexError(f"Hour index {index} out of range for {len(hourly)} hours")

    if hourly[index].danger:
        return hourly[index]

    window = hourly[max(0, index - SMOOTHING_RADIUS_HOURS):index + SMOOTHING_RADIUS_HOURS + 1]
    score = float(np.mean([result.score for result in window]))

    return hourly[index].model_copy(update={'score': score})


def _group_by_species(
    hourly_results: Sequence[Sequence[ScoredRecommendation]],
    snapshots: Sequence[EnvironmentalSnapshot]
) -> Dict[str, tuple]:
    grouped: Dict[str, tuple] = OrderedDict()
    for results, snapshot in zip(hourly_results, snapshots):
        for result in results:
            hours, snaps = grouped.setdefault(result.species_id, ([], []))
            hours.append(result)
            snaps.append(snapshot)
    return grouped


def aggregate_daily(
    hourly_results: Sequence[Sequence[ScoredRecommendation]],
    snapshots: Sequence[EnvironmentalSnapshot],
    catalog: Sequence[SpeciesProfile],
    config: Optional[ScoringConfig] = None
) -> List[ScoredRecommendation]:
    """
    Daily scores for every species scored during the day, in catalog order.

    Args:
        hourly_results: Per-hour lists of results (e.g. from score_catalog)
        snapshots: The day's hourly snapshots (same order)
        catalog: Species catalog (activity patterns and ordering)
        config: Scoring config

    Returns:
        One daily ScoredRecommendation per species
    """
    config = config or load_scoring_config()
    grouped = _group_by_species(hourly_results, snapshots)

    daily = []
    for profile in catalog:
        if profile.id not in grouped:
            continue
        hours, snaps = grouped[profile.id]
        daily.append(daily_score(hours, snaps, profile.activity_pattern, config))

    logger.debug(f"Aggregated {len(snapshots)} hours into {len(daily)} daily scores")
    return daily


def aggregate_instant(
    hourly_results: Sequence[Sequence[ScoredRecommendation]],
    index: int
) -> List[ScoredRecommendation]:
    """
    Smoothed instant scores for every species scored at hour `index`.
    """
    grouped = _group_by_species(hourly_results, [None] * len(hourly_results))

    instant = []
    for result in hourly_results[index]:
        hours, _ = grouped[result.species_id]
        position = next(i for i, hour in enumerate(hours) if hour.when == result.when)
        instant.append(instant_score(hours, position))

    return instant
