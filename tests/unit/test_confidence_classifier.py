"""
Unit tests for forecast confidence classification.
"""

import pytest

from fishcast.confidence import (
    classify_confidence,
    classify_confidence_with_reasoning,
    compute_chaos_index,
    compute_confidence,
    interpret_confidence_for_user,
    noise_sigma,
)


class TestChaosIndex:
    """Test chaos index computation."""

    def test_calm(self):
        assert compute_chaos_index(0.0, 0.0, 0.0) == 0.0

    def test_formula(self):
        """(wind/50 + wave/4 + shock/5) / 3."""
        assert compute_chaos_index(25.0, 1.0, 1.0) == pytest.approx((0.5 + 0.25 + 0.2) / 3)

    def test_clamped(self):
        assert compute_chaos_index(200.0, 10.0, 10.0) == 1.0

    def test_shock_sign_ignored(self):
        assert compute_chaos_index(0.0, 0.0, -2.5) == compute_chaos_index(0.0, 0.0, 2.5)


class TestComputeConfidence:
    """Test confidence percentage."""

    def test_capped_at_95(self):
        assert compute_confidence(0.0, 0.0, 0.0) == 95.0

    def test_chaos_penalty(self):
        assert compute_confidence(25.0, 2.0, 0.0) == pytest.approx(100 - 40 * (1.0 / 3))

    def test_shock_penalty(self):
        """A shock above 4 °C costs a further 20 points."""
        without = compute_confidence(10.0, 0.5, 4.0)
        with_shock = compute_confidence(10.0, 0.5, 4.5)
        assert without - with_shock > 20.0

    def test_worst_case(self):
        """Full chaos plus a shock leaves 40%."""
        assert compute_confidence(200.0, 10.0, 10.0) == 40.0
        assert compute_confidence(50.0, 4.0, 10.0) == 40.0

    def test_noise_sigma(self):
        assert noise_sigma(0.0) == 2.0
        assert noise_sigma(0.5) == 5.0
        assert noise_sigma(1.0) == 8.0


class TestClassifyConfidence:
    """Test classification and reasoning."""

    def test_levels(self):
        assert classify_confidence(95.0) == "high"
        assert classify_confidence(80.0) == "high"
        assert classify_confidence(79.9) == "medium"
        assert classify_confidence(60.0) == "medium"
        assert classify_confidence(59.9) == "low"

    def test_settled_reasoning(self):
        score = classify_confidence_with_reasoning(5.0, 0.3, 0.2)

        assert score.confidence == "high"
        assert score.reasoning.startswith("High confidence:")
        assert "settled" in score.reasoning.lower()
        assert score.signals['wind_speed_kmh'] == 5.0

    def test_disturbed_reasoning(self):
        score = classify_confidence_with_reasoning(40.0, 2.5, 5.0)

        assert score.confidence == "low"
        assert "Strong wind" in score.reasoning
        assert "Rough sea" in score.reasoning
        assert "shock" in score.reasoning

    def test_user_interpretation(self):
        assert interpret_confidence_for_user("high").startswith("Trust")
        assert interpret_confidence_for_user("medium").startswith("Reasonable")
        assert interpret_confidence_for_user("low").startswith("Use caution")
