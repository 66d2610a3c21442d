"""Confidence and uncertainty quantification module for fishcast."""

from .classifier import (
    ConfidenceLevel,
    ConfidenceScore,
    compute_chaos_index,
    compute_confidence,
    noise_sigma,
    classify_confidence,
    classify_confidence_with_reasoning,
    interpret_confidence_for_user,
)

__all__ = [
    # Chaos and noise
    'compute_chaos_index',
    'noise_sigma',
    # Confidence classification
    'ConfidenceLevel',
    'ConfidenceScore',
    'compute_confidence',
    'classify_confidence',
    'classify_confidence_with_reasoning',
    'interpret_confidence_for_user',
]
