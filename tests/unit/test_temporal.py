"""
Unit tests for daily and instant temporal aggregation.
"""

from datetime import datetime, timedelta

import pytest

from fishcast.context.schemas import EnvironmentalSnapshot
from fishcast.species.catalog import Advice, load_species_profile
from fishcast.species.scoring import ScoredRecommendation, load_scoring_config, score_species
from fishcast.temporal import aggregate_daily, aggregate_instant, daily_score, hourly_weight, instant_score

DAY = datetime(2025, 6, 1)


def make_snapshot(hour, time_of_day):
    return EnvironmentalSnapshot(
        when=DAY + timedelta(hours=hour), season='summer', water_temp_c=20.0, time_of_day=time_of_day
    )


def make_result(species_id, hour, score, lead=None, danger=False):
    return ScoredRecommendation(
        species_id=species_id,
        name=species_id.replace('_', ' ').title(),
        category='reef',
        score=score,
        reason="moderate activity",
        triggers=[lead] if lead else [],
        lead_trigger=lead,
        advice=Advice(bait="Shrimp"),
        components={},
        danger=danger,
        when=DAY + timedelta(hours=hour),
    )


class TestHourlyWeight:
    """Test activity-pattern hour weights."""

    def setup_method(self):
        self.config = load_scoring_config()

    def test_night_feeder(self):
        assert hourly_weight(make_snapshot(2, 'night'), 'night', self.config) == 3.0
        assert hourly_weight(make_snapshot(6, 'dawn'), 'night', self.config) == 2.0
        assert hourly_weight(make_snapshot(12, 'day'), 'night', self.config) == 0.5

    def test_dawn_dusk_feeder(self):
        assert hourly_weight(make_snapshot(19, 'dusk'), 'dawn_dusk', self.config) == 3.0
        assert hourly_weight(make_snapshot(12, 'day'), 'dawn_dusk', self.config) == 1.2
        assert hourly_weight(make_snapshot(2, 'night'), 'dawn_dusk', self.config) == 1.2

    def test_day_feeder_peaks(self):
        """Mid-morning and mid-afternoon hours weigh 1.8, other day hours 1.0."""
        assert hourly_weight(make_snapshot(10, 'day'), 'day', self.config) == 1.8
        assert hourly_weight(make_snapshot(15, 'day'), 'day', self.config) == 1.8
        assert hourly_weight(make_snapshot(12, 'day'), 'day', self.config) == 1.0
        assert hourly_weight(make_snapshot(2, 'night'), 'day', self.config) == 0.6

    def test_all_day(self):
        for hour, tod in ((2, 'night'), (6, 'dawn'), (12, 'day'), (19, 'dusk')):
            assert hourly_weight(make_snapshot(hour, tod), 'all_day', self.config) == 1.0


class TestDailyScore:
    """Test activity-weighted daily score."""

    def setup_method(self):
        self.config = load_scoring_config()

    def test_weighted_mean(self):
        """Night feeder: night hour (w=3) at 80, day hour (w=0.5) at 10."""
        hours = [make_result('squid', 2, 80.0, lead="Dark night"), make_result('squid', 12, 10.0)]
        snaps = [make_snapshot(2, 'night'), make_snapshot(12, 'day')]

        result = daily_score(hours, snaps, 'night', self.config)

        assert result.score == pytest.approx((80.0 * 3.0 + 10.0 * 0.5) / 3.5)
        assert result.triggers == ["Dark night"]
        assert result.reason == "Dark night"

    def test_clamped_to_daily_band(self):
        hours = [make_result('squid', 2, 98.0), make_result('squid', 3, 98.0)]
        snaps = [make_snapshot(2, 'night'), make_snapshot(3, 'night')]
        assert daily_score(hours, snaps, 'night', self.config).score == 95.0

        hours = [make_result('squid', 2, 5.0), make_result('squid', 3, 5.0)]
        assert daily_score(hours, snaps, 'night', self.config).score == 15.0

    def test_reason_from_daily_score(self):
        hours = [make_result('squid', 2, 30.0, lead="Dark night")]
        result = daily_score(hours, [make_snapshot(2, 'night')], 'night', self.config)
        assert result.reason == "low activity"

    def test_empty_day_raises(self):
        with pytest.raises(ValueError):
            daily_score([], [], 'night', self.config)

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            daily_score([make_result('squid', 2, 50.0)], [], 'night', self.config)


class TestInstantScore:
    """Test neighbour smoothing."""

    def setup_method(self):
        self.hours = [
            make_result('sea_bass', 6, 40.0),
            make_result('sea_bass', 7, 60.0, lead="Pressure drop"),
            make_result('sea_bass', 8, 80.0),
        ]

    def test_middle_hour(self):
        result = instant_score(self.hours, 1)

        assert result.score == pytest.approx(60.0)
        assert result.triggers == ["Pressure drop"]

    def test_edges(self):
        assert instant_score(self.hours, 0).score == pytest.approx(50.0)
        assert instant_score(self.hours, 2).score == pytest.approx(70.0)

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            instant_score(self.hours, 3)

    def test_danger_hour_not_smoothed_up(self):
        """Calm neighbours must not lift a heavy-seas hour above the danger cap."""
        hours = [
            make_result('sea_bass', 6, 85.0),
            make_result('sea_bass', 7, 12.0, lead="Danger: heavy seas", danger=True),
            make_result('sea_bass', 8, 85.0),
        ]

        result = instant_score(hours, 1)

        assert result.score == 12.0
        assert result.danger
        assert result.triggers == ["Danger: heavy seas"]

    def test_danger_neighbour_still_averaged(self):
        hours = [
            make_result('sea_bass', 6, 12.0, danger=True),
            make_result('sea_bass', 7, 60.0),
        ]
        assert instant_score(hours, 1).score == pytest.approx(36.0)


class TestAggregateDay:
    """Test multi-species aggregation."""

    def test_catalog_order(self):
        catalog = [load_species_profile('sea_bass'), load_species_profile('european_squid')]
        snaps = [make_snapshot(2, 'night'), make_snapshot(6, 'dawn')]
        hourly = [
            [make_result('european_squid', 2, 70.0), make_result('sea_bass', 2, 30.0)],
            [make_result('european_squid', 6, 40.0), make_result('sea_bass', 6, 90.0)],
        ]

        daily = aggregate_daily(hourly, snaps, catalog)

        assert [result.species_id for result in daily] == ['sea_bass', 'european_squid']
        # sea bass is dawn_dusk: night 1.2, dawn 3.0
        assert daily[0].score == pytest.approx((30.0 * 1.2 + 90.0 * 3.0) / 4.2)

    def test_instant_for_all_species(self):
        hourly = [
            [make_result('sea_bass', 6, 40.0), make_result('squid', 6, 20.0)],
            [make_result('sea_bass', 7, 60.0), make_result('squid', 7, 40.0)],
        ]

        instant = aggregate_instant(hourly, 1)

        assert [result.score for result in instant] == [pytest.approx(50.0), pytest.approx(30.0)]

    def test_instant_keeps_danger_hour_capped(self):
        """A heavy-seas hour between two calm hours stays at the danger cap."""
        profile = load_species_profile('sea_bass')
        snaps = [
            EnvironmentalSnapshot(
                when=DAY + timedelta(hours=hour), region='MARMARA', season='winter',
                water_temp_c=13.0, wave_height_m=wave, time_of_day='dawn'
            )
            for hour, wave in ((6, 0.9), (7, 3.0), (8, 0.9))
        ]
        hourly = [[score_species(snap, profile)] for snap in snaps]

        instant = aggregate_instant(hourly, 1)[0]

        assert instant.danger
        assert instant.score <= load_scoring_config().penalties.danger_cap
        assert instant.reason == "Danger: heavy seas"
