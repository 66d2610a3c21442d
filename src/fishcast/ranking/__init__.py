"""Ranking, explanation and forecast assembly for fishcast."""

from .schemas import (
    DayRating,
    RecommendationItem,
    DayConditions,
    DayForecast,
    ForecastResponse,
)

from .recommend import (
    to_item,
    rank_recommendations,
    tactic_advice,
    rate_day,
    describe_conditions,
    build_forecast,
)

__all__ = [
    # Schemas
    'DayRating',
    'RecommendationItem',
    'DayConditions',
    'DayForecast',
    'ForecastResponse',
    # Ranking
    'to_item',
    'rank_recommendations',
    'tactic_advice',
    'rate_day',
    'describe_conditions',
    'build_forecast',
]
