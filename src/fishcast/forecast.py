"""
End-to-end forecast pipeline for fishcast.

Hourly observations for one location go in; a ranked, explained multi-day
ForecastResponse comes out:

    frame -> hourly snapshots -> hourly scores -> daily scores -> forecast
"""

import logging
from collections import OrderedDict
from typing import List, Optional

import numpy as np
import pandas as pd

from .context import EnvironmentalSnapshot, FishingMode, build_hourly_snapshots
from .ranking import ForecastResponse, build_forecast
from .species import SpeciesProfile, ScoringConfig, load_catalog, load_scoring_config, score_catalog
from .temporal import aggregate_daily

logger = logging.getLogger(__name__)

# Hour whose conditions stand for the whole day in the forecast
REPRESENTATIVE_HOUR = 12


def _representative(snapshots: List[EnvironmentalSnapshot]) -> EnvironmentalSnapshot:
    return min(snapshots, key=lambda snap: abs(snap.hour - REPRESENTATIVE_HOUR))


def forecast_from_frame(
    latitude: float,
    longitude: float,
    frame: pd.DataFrame,
    fishing_mode: FishingMode = "shore",
    catalog: Optional[List[SpeciesProfile]] = None,
    config: Optional[ScoringConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> ForecastResponse:
    """
    Build a multi-day forecast from hourly observations.

    Args:
        latitude: Latitude (degrees)
        longitude: Longitude (degrees)
        frame: Hourly observations indexed by local timestamp (see HOURLY_COLUMNS)
        fishing_mode: Shore or boat
        catalog: Species catalog (defaults to config/catalog.yaml)
        config: Scoring config (defaults to config/scoring.yaml)
        rng: Optional random generator for scoring noise

    Returns:
        ForecastResponse, one day per local date in the frame

    Raises:
        ValueError: If the frame is empty
    """
    snapshots = build_hourly_snapshots(latitude, longitude, frame, fishing_mode)
    if not snapshots:
        raise ValueError("Cannot forecast from an empty frame")

    catalog = catalog if catalog is not None else load_catalog()
    config = config or load_scoring_config()

    by_day = OrderedDict()
    for snapshot in snapshots:
        by_day.setdefault(snapshot.when.date(), []).append(snapshot)

    days = []
    for day, day_snapshots in by_day.items():
        hourly_results = [score_catalog(snap, catalog, config, rng) for snap in day_snapshots]
        daily = aggregate_daily(hourly_results, day_snapshots, catalog, config)
        days.append((_representative(day_snapshots), daily))
        logger.debug(f"{day}: {len(daily)} species scored over {len(day_snapshots)} hours")

    return build_forecast(days, config)
