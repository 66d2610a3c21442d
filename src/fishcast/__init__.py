"""
fishcast: fish species suitability scoring and forecast engine.

Scores how favorable current or forecast environmental conditions are for
each species in a static catalog, and ranks the results with explanations.
"""

from .context import RawConditions, EnvironmentalSnapshot, build_snapshot, build_hourly_snapshots
from .species import load_catalog, load_scoring_config, score_species, score_catalog
from .ranking import rank_recommendations, build_forecast
from .forecast import forecast_from_frame
from .settings import configure_logging

__version__ = "0.1.0"

__all__ = [
    # Context
    'RawConditions',
    'EnvironmentalSnapshot',
    'build_snapshot',
    'build_hourly_snapshots',
    # Scoring
    'load_catalog',
    'load_scoring_config',
    'score_species',
    'score_catalog',
    # Ranking
    'rank_recommendations',
    'build_forecast',
    'forecast_from_frame',
    # Settings
    'configure_logging',
]
