"""Species catalog, trigger registry and suitability scoring for fishcast."""

from .catalog import (
    Advice,
    SpeciesPenalty,
    SpeciesProfile,
    TemperatureTolerance,
    WavePreference,
    load_catalog,
    load_species_profile,
)

from .triggers import (
    TRIGGERS,
    UNIVERSAL_TRIGGERS,
    PENALTY_CONDITIONS,
    Trigger,
    evaluate_triggers,
)

from .scoring import (
    ScoredRecommendation,
    ScoringConfig,
    apply_penalties,
    classify_reason,
    load_scoring_config,
    score_catalog,
    score_species,
)

__all__ = [
    # Catalog
    'Advice',
    'SpeciesPenalty',
    'SpeciesProfile',
    'TemperatureTolerance',
    'WavePreference',
    'load_catalog',
    'load_species_profile',
    # Triggers
    'TRIGGERS',
    'UNIVERSAL_TRIGGERS',
    'PENALTY_CONDITIONS',
    'Trigger',
    'evaluate_triggers',
    # Scoring
    'ScoredRecommendation',
    'ScoringConfig',
    'apply_penalties',
    'classify_reason',
    'load_scoring_config',
    'score_catalog',
    'score_species',
]
