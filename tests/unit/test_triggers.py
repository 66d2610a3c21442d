"""
Unit tests for the trigger registry and species penalty conditions.
"""

from datetime import datetime

import pytest

from fishcast.context.schemas import EnvironmentalSnapshot
from fishcast.species.catalog import load_species_profile
from fishcast.species.triggers import PENALTY_CONDITIONS, TRIGGERS, UNIVERSAL_TRIGGERS, evaluate_triggers


def make_snapshot(**overrides):
    """Quiet baseline: no trigger of sea bass fires."""
    fields = dict(
        when=datetime(2025, 1, 10, 12),
        region='MARMARA',
        season='winter',
        water_temp_c=15.0,
        wave_height_m=0.5,
        cloud_cover_pct=50.0,
        clarity=60.0,
        current_ms=0.4,
        tide_flow=0.2,
        moon_phase=0.4,
        time_of_day='day',
    )
    fields.update(overrides)
    return EnvironmentalSnapshot(**fields)


class TestEvaluateTriggers:
    """Test generic trigger evaluation."""

    def setup_method(self):
        self.sea_bass = load_species_profile('sea_bass')

    def test_quiet_conditions_fire_nothing(self):
        assert evaluate_triggers(make_snapshot(), self.sea_bass) == []

    def test_pressure_drop_scaled_by_sensitivity(self):
        """Bonus 5 x pressure sensitivity (0.9), x1.5 when falling fast."""
        falling = evaluate_triggers(make_snapshot(pressure_trend='falling'), self.sea_bass)
        fast = evaluate_triggers(make_snapshot(pressure_trend='falling_fast'), self.sea_bass)

        assert falling == [("Pressure drop", pytest.approx(4.5))]
        assert fast == [("Pressure drop", pytest.approx(6.75))]

    def test_species_order_then_universal(self):
        """Species triggers fire in listed order, universal ones last."""
        fired = evaluate_triggers(
            make_snapshot(wave_height_m=1.2, pressure_trend='falling', solunar='major'),
            self.sea_bass
        )
        labels = [label for label, _ in fired]

        assert labels == ["Pressure drop", "Foamy water", "Solunar major"]

    def test_unlisted_trigger_ignored(self):
        """Calm water is not a sea bass trigger."""
        fired = evaluate_triggers(make_snapshot(wave_height_m=0.1), self.sea_bass)
        assert "Calm water" not in [label for label, _ in fired]

    def test_rapid_pressure_rise_is_negative(self):
        fired = evaluate_triggers(make_snapshot(pressure_trend='rising_fast'), self.sea_bass)
        assert fired == [("Rapid pressure rise", pytest.approx(-5.4))]

    def test_temperature_shock(self):
        fired = evaluate_triggers(make_snapshot(water_temp_change_c=3.5), self.sea_bass)
        assert fired == [("Temperature shock", -4.0)]

    def test_strong_current_scaled_by_preference(self):
        """Sea bass prefers 0.5 m/s: scale min(1.5, 0.5 / 0.5) = 1."""
        fired = evaluate_triggers(make_snapshot(current_ms=0.9), self.sea_bass)
        assert ("Strong current", pytest.approx(5.0)) in fired

    def test_zero_scaled_trigger_not_listed(self):
        """A species insensitive to pressure gets no 'Pressure drop' label."""
        insensitive = self.sea_bass.model_copy(update={'pressure_sensitivity': 0.0})

        assert evaluate_triggers(make_snapshot(pressure_trend='falling'), insensitive) == []
        assert evaluate_triggers(make_snapshot(pressure_trend='rising_fast'), insensitive) == []

    def test_registry_consistency(self):
        """Every universal trigger is registered."""
        assert all(name in TRIGGERS for name in UNIVERSAL_TRIGGERS)


class TestPenaltyConditions:
    """Test declarative penalty predicates."""

    def test_clarity_below(self):
        assert PENALTY_CONDITIONS['clarity_below'](make_snapshot(clarity=30.0), 40.0)
        assert not PENALTY_CONDITIONS['clarity_below'](make_snapshot(clarity=50.0), 40.0)

    def test_rain_above(self):
        assert PENALTY_CONDITIONS['rain_above'](make_snapshot(precipitation_mm=1.0), 0.5)
        assert not PENALTY_CONDITIONS['rain_above'](make_snapshot(precipitation_mm=0.0), 0.5)
