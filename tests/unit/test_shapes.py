"""
Unit tests for membership curves (fuzzy trapezoid, Gaussian, wind, lunar).
"""

import pytest

from fishcast.metrics.shapes import (
    FUZZY_FLOOR,
    GAUSSIAN_FLOOR,
    fuzzy_trapezoid,
    gaussian_score,
    in_arc,
    lunar_phase_multiplier,
    wind_score,
)


class TestFuzzyTrapezoid:
    """Test trapezoidal membership."""

    def test_plateau_scores_one(self):
        """Values on the plateau (edges included) score 1.0."""
        assert fuzzy_trapezoid(11, 7, 11, 19, 23) == 1.0
        assert fuzzy_trapezoid(15, 7, 11, 19, 23) == 1.0
        assert fuzzy_trapezoid(19, 7, 11, 19, 23) == 1.0

    def test_outside_scores_floor(self):
        """Values at or beyond the outer edges score the floor, never 0."""
        assert fuzzy_trapezoid(7, 7, 11, 19, 23) == FUZZY_FLOOR
        assert fuzzy_trapezoid(-50, 7, 11, 19, 23) == FUZZY_FLOOR
        assert fuzzy_trapezoid(23, 7, 11, 19, 23) == FUZZY_FLOOR
        assert fuzzy_trapezoid(100, 7, 11, 19, 23) == FUZZY_FLOOR

    def test_linear_ramps(self):
        """Ramps interpolate linearly between floor and plateau."""
        midpoint = FUZZY_FLOOR + (1.0 - FUZZY_FLOOR) / 2
        assert fuzzy_trapezoid(9, 7, 11, 19, 23) == pytest.approx(midpoint)
        assert fuzzy_trapezoid(21, 7, 11, 19, 23) == pytest.approx(midpoint)

    def test_degenerate_edges(self):
        """Zero-width ramps step from floor to plateau without dividing by zero."""
        assert fuzzy_trapezoid(10, 10, 10, 20, 20) == 1.0
        assert fuzzy_trapezoid(9.9, 10, 10, 20, 20) == FUZZY_FLOOR
        assert fuzzy_trapezoid(20.1, 10, 10, 20, 20) == FUZZY_FLOOR


class TestGaussianScore:
    """Test bell-curve membership."""

    def test_plateau_around_optimum(self):
        """Within +/-2 units of the optimum the score is 1.0."""
        assert gaussian_score(15.0, 7, 15, 23) == 1.0
        assert gaussian_score(13.0, 7, 15, 23) == 1.0
        assert gaussian_score(17.0, 7, 15, 23) == 1.0

    def test_decay_outside_plateau(self):
        """At the tolerance edge the score is exp(-1)."""
        assert gaussian_score(23.0, 7, 15, 23) == pytest.approx(0.3679, abs=1e-3)
        assert gaussian_score(7.0, 7, 15, 23) == pytest.approx(0.3679, abs=1e-3)

    def test_floor(self):
        """Far from the optimum the score is floored, never 0."""
        assert gaussian_score(60.0, 7, 15, 23) == GAUSSIAN_FLOOR
        assert gaussian_score(-40.0, 7, 15, 23) == GAUSSIAN_FLOOR

    def test_monotonic_away_from_optimum(self):
        """Score never increases as the value moves away from the optimum."""
        above = [gaussian_score(15 + step * 0.5, 7, 15, 23) for step in range(40)]
        below = [gaussian_score(15 - step * 0.5, 7, 15, 23) for step in range(40)]

        assert all(a >= b for a, b in zip(above, above[1:]))
        assert all(a >= b for a, b in zip(below, below[1:]))


class TestWindScore:
    """Test region-aware wind scoring."""

    def test_storm_wind(self):
        """At or above 50 km/h the score is 0.1 regardless of direction."""
        assert wind_score(30, 50, (0, 90), (270, 360)) == 0.1
        assert wind_score(200, 80) == 0.1

    def test_arcs(self):
        """Preferred arc 1.0, secondary 0.7, elsewhere 0.45."""
        assert wind_score(45, 10, (0, 90), (270, 360)) == 1.0
        assert wind_score(300, 10, (0, 90), (270, 360)) == 0.7
        assert wind_score(180, 10, (0, 90), (270, 360)) == 0.45

    def test_open_water_neutral(self):
        """No arcs (open water) scores 0.7."""
        assert wind_score(180, 10) == 0.7

    def test_speed_scaling(self):
        """Speed multipliers: >20 x0.85, >28 x0.7, >40 x0.5."""
        assert wind_score(45, 25, (0, 90)) == pytest.approx(0.85)
        assert wind_score(45, 30, (0, 90)) == pytest.approx(0.7)
        assert wind_score(45, 45, (0, 90)) == pytest.approx(0.5)

    def test_wrapping_arc(self):
        """Arcs whose start exceeds their end wrap through north."""
        assert in_arc(350, (315, 45))
        assert in_arc(370, (315, 45))
        assert not in_arc(90, (315, 45))
        assert not in_arc(90, None)


class TestLunarPhaseMultiplier:
    """Test lunar phase bonus."""

    def test_new_moon(self):
        assert lunar_phase_multiplier(0.0) == 1.15
        assert lunar_phase_multiplier(0.97) == 1.15

    def test_full_moon(self):
        assert lunar_phase_multiplier(0.5) == 1.10
        assert lunar_phase_multiplier(0.54) == 1.10

    def test_quarters(self):
        assert lunar_phase_multiplier(0.25) == 1.05
        assert lunar_phase_multiplier(0.77) == 1.05

    def test_other_phases(self):
        assert lunar_phase_multiplier(0.15) == 1.0
        assert lunar_phase_multiplier(0.4) == 1.0
