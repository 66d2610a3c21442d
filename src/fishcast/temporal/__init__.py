"""Temporal aggregation of hourly scores (daily and instant)."""

from .aggregation import (
    hourly_weight,
    daily_score,
    instant_score,
    aggregate_daily,
    aggregate_instant,
)

__all__ = [
    'hourly_weight',
    'daily_score',
    'instant_score',
    'aggregate_daily',
    'aggregate_instant',
]
