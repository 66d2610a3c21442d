"""
Recommendation Ranking and Forecast Assembly

Turns scored species into the ranked, explained lists users read:
- rank_recommendations: threshold, stable sort, optional dominance scaling, truncate
- tactic_advice: one tactical hint from the day's conditions
- rate_day: qualitative day rating
- build_forecast: multi-day ForecastResponse with confidence and best days
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..confidence import classify_confidence_with_reasoning, interpret_confidence_for_user
from ..context.schemas import EnvironmentalSnapshot
from ..metrics.atmosphere import wind_direction_name
from ..regions import get_region_profile
from ..species.scoring import ScoredRecommendation, ScoringConfig, load_scoring_config
from .schemas import DayConditions, DayForecast, DayRating, ForecastResponse, RecommendationItem

logger = logging.getLogger(__name__)

EXCELLENT_DAY = 85.0
GOOD_DAY = 65.0
BEST_DAY = 75.0

DEFAULT_TACTIC = "Standard conditions: trust your local knowledge of the spot."


def to_item(result: ScoredRecommendation, score: Optional[float] = None) -> RecommendationItem:
    """Format a scored result for display."""
    advice = result.advice
    return RecommendationItem(
        species_id=result.species_id,
        name=result.name,
        icon=result.icon,
        category=result.category,
        score=round(result.score if score is None else score, 1),
        reason=result.reason,
        triggers=", ".join(result.triggers),
        trigger_labels=list(result.triggers),
        bait=advice.bait,
        rig=advice.rig,
        hook=advice.hook,
        depth=advice.depth,
        note=result.note,
        danger=result.danger,
        components={key: round(value, 2) for key, value in result.components.items()},
    )


def rank_recommendations(
    results: Sequence[ScoredRecommendation],
    config: Optional[ScoringConfig] = None,
    min_score: Optional[float] = None,
    limit: Optional[int] = None,
    dominance_scaling: Optional[bool] = None
) -> List[RecommendationItem]:
    """
    Rank scored species for display.

    Results scoring below min_score are dropped, the rest sorted by score
    descending. The sort is stable, so equal scores keep their input
    (catalog) order. With dominance scaling, every entry but the top one is
    scaled down by the configured factor to emphasise the leader.

    Args:
        results: Scored species, in catalog order
        config: Scoring config (ranking defaults)
        min_score: Override of the minimum score
        limit: Override of the maximum number of items
        dominance_scaling: Override of the dominance scaling switch

    Returns:
        Ranked RecommendationItems, best first
    """
    ranking = (config or load_scoring_config()).ranking
    min_score = ranking.min_score if min_score is None else min_score
    limit = ranking.limit if limit is None else limit
    dominance_scaling = ranking.dominance_scaling if dominance_scaling is None else dominance_scaling

    kept = [result for result in results if result.score >= min_score]
    ranked = sorted(kept, key=lambda result: result.score, reverse=True)[:limit]

    if not dominance_scaling:
        return [to_item(result) for result in ranked]

    return [
        to_item(result, result.score if position == 0 else result.score * ranking.dominance_factor)
        for position, result in enumerate(ranked)
    ]


def tactic_advice(snapshot: EnvironmentalSnapshot) -> str:
    """
    One tactical hint for the conditions, most pressing first.

    Examples:
        >>> from datetime import datetime
        >>> snap = EnvironmentalSnapshot(when=datetime(2025, 1, 10, 12), season='winter',
        ...                              water_temp_c=12.0, clarity=20.0)
        >>> tactic_advice(snap)
        'Very murky water: use scented bait or rattling, glow lures.'
    """
    if snapshot.pressure_trend in ("falling", "falling_fast"):
        return "Pressure is dropping: predators turn aggressive, fish large lures."
    if snapshot.clarity < 30:
        return "Very murky water: use scented bait or rattling, glow lures."
    if snapshot.clarity > 85:
        return "Crystal clear water: downsize and switch to a fluorocarbon leader."
    if snapshot.tide_flow > 1.0:
        return "Strong tidal stream: ambush at channel mouths."
    if snapshot.water_temp_change_c > 3:
        return (
            f"Sudden temperature change ({snapshot.water_temp_change_c:.1f}°C): "
            f"fish are sluggish, retrieve slowly."
        )
    if snapshot.wind_speed_kmh > 35:
        return "Hard wind: shelter in the lee of the coast."
    if snapshot.current_ms > 0.8:
        return "Strong current: heavy sinkers or jigheads, work the bottom."
    if snapshot.moon_illumination > 0.9 and snapshot.cloud_cover_pct < 20:
        return "Bright moonlight: dark lures that throw a silhouette work best."
    return DEFAULT_TACTIC


def rate_day(score: float) -> DayRating:
    """
    Qualitative rating of a day score.

    Examples:
        >>> rate_day(90.0)
        'excellent'
        >>> rate_day(70.0)
        'good'
        >>> rate_day(65.0)
        'weak'
    """
    if score > EXCELLENT_DAY:
        return "excellent"
    elif score > GOOD_DAY:
        return "good"
    else:
        return "weak"


def describe_conditions(snapshot: EnvironmentalSnapshot) -> DayConditions:
    """Representative conditions of a day, for display."""
    region = get_region_profile(snapshot.region)
    return DayConditions(
        water_temp_c=round(snapshot.water_temp_c, 1),
        water_temp_change_c=round(snapshot.water_temp_change_c, 1),
        wave_height_m=round(snapshot.wave_height_m, 2),
        wind_speed_kmh=round(snapshot.wind_speed_kmh),
        wind_direction=wind_direction_name(snapshot.wind_direction_deg),
        pressure_hpa=round(snapshot.pressure_hpa, 1),
        pressure_trend=snapshot.pressure_trend,
        cloud_cover_pct=snapshot.cloud_cover_pct,
        precipitation_mm=snapshot.precipitation_mm,
        current_ms=round(snapshot.current_ms, 2),
        clarity=round(snapshot.clarity),
        tide_flow=round(snapshot.tide_flow, 2),
        moon_phase=round(snapshot.moon_phase, 3),
        salinity_psu=region.salinity_psu,
    )


def build_forecast(
    days: Sequence[Tuple[EnvironmentalSnapshot, Sequence[ScoredRecommendation]]],
    config: Optional[ScoringConfig] = None
) -> ForecastResponse:
    """
    Assemble a multi-day forecast.

    Args:
        days: One (representative snapshot, daily results) pair per day, in
            date order
        config: Scoring config

    Returns:
        ForecastResponse with ranked species per day and the best days

    Raises:
        ValueError: If no days are given
    """
    if not days:
        raise ValueError("Cannot build a forecast without days")

    config = config or load_scoring_config()
    first = days[0][0]
    region = get_region_profile(first.region)
    is_land = any(snapshot.is_land for snapshot, _ in days)

    forecast_days = []
    best_days = []

    for snapshot, results in days:
        ranked = [] if is_land else rank_recommendations(results, config)
        score = ranked[0].score if ranked else config.bounds['daily'][0]

        confidence = classify_confidence_with_reasoning(
            snapshot.wind_speed_kmh, snapshot.wave_height_m, snapshot.water_temp_change_c
        )

        day = DayForecast(
            day=snapshot.when.date(),
            score=score,
            rating=rate_day(score),
            confidence=confidence.confidence,
            confidence_percent=round(confidence.percent),
            confidence_reasoning=confidence.reasoning,
            confidence_advice=interpret_confidence_for_user(confidence.confidence),
            tactic=tactic_advice(snapshot),
            conditions=describe_conditions(snapshot),
            species=ranked,
        )
        forecast_days.append(day)

        if score > BEST_DAY:
            best_days.append(day.day)

    logger.info(
        f"Built {len(forecast_days)}-day forecast for ({first.latitude}, {first.longitude}) "
        f"in {region.name}: {len(best_days)} best days"
    )

    return ForecastResponse(
        latitude=first.latitude,
        longitude=first.longitude,
        region=first.region.value,
        region_name=region.name,
        region_tip=region.tip,
        is_land=is_land,
        days=forecast_days,
        best_days=best_days,
    )
