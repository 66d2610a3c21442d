"""
Unit tests for species catalog loading and validation.
"""

import shutil

import pytest
import yaml

from fishcast.regions import Region
from fishcast.settings import DEFAULT_CONFIG_DIR
from fishcast.species.catalog import load_catalog, load_species_profile


def write_species(config_dir, species_id, **overrides):
    """Copy sea_bass.yaml under a new id with selected fields replaced."""
    with open(DEFAULT_CONFIG_DIR / "species" / "sea_bass.yaml", encoding='utf-8') as f:
        config = yaml.safe_load(f)
    config.update(overrides)

    species_dir = config_dir / "species"
    species_dir.mkdir(exist_ok=True)
    with open(species_dir / f"{species_id}.yaml", 'w', encoding='utf-8') as f:
        yaml.safe_dump(config, f, allow_unicode=True)


class TestLoadSpeciesProfile:
    """Test loading a single species."""

    def test_load_sea_bass(self):
        profile = load_species_profile('sea_bass')

        assert profile.id == 'sea_bass'
        assert profile.name == "European Sea Bass"
        assert profile.activity_pattern == "dawn_dusk"
        assert profile.temperature.min < profile.temperature.optimum < profile.temperature.max
        assert Region.MARMARA in profile.regions

    def test_nonexistent_species_raises_error(self):
        with pytest.raises(FileNotFoundError):
            load_species_profile('unicorn_fish')

    def test_efficiency_out_of_range(self, tmp_path):
        write_species(tmp_path, 'bad', seasonal_efficiency={
            'winter': 1.2, 'spring': 0.5, 'summer': 0.5, 'autumn': 0.5
        })
        with pytest.raises(ValueError):
            load_species_profile('bad', tmp_path)

    def test_missing_season(self, tmp_path):
        write_species(tmp_path, 'bad', seasonal_efficiency={'winter': 0.5})
        with pytest.raises(ValueError):
            load_species_profile('bad', tmp_path)

    def test_unknown_trigger(self, tmp_path):
        write_species(tmp_path, 'bad', triggers=['pressure_drop', 'full_bucket'])
        with pytest.raises(ValueError):
            load_species_profile('bad', tmp_path)

    def test_universal_trigger_not_listable(self, tmp_path):
        """Universal triggers apply to everyone and must not be listed per species."""
        write_species(tmp_path, 'bad', triggers=['solunar_major'])
        with pytest.raises(ValueError):
            load_species_profile('bad', tmp_path)

    def test_unordered_temperature(self, tmp_path):
        write_species(tmp_path, 'bad', temperature={'min': 20.0, 'optimum': 15.0, 'max': 25.0})
        with pytest.raises(ValueError):
            load_species_profile('bad', tmp_path)

    def test_missing_required_field(self, tmp_path):
        write_species(tmp_path, 'bad')
        config_path = tmp_path / "species" / "bad.yaml"
        config = yaml.safe_load(config_path.read_text(encoding='utf-8'))
        del config['advice']
        config_path.write_text(yaml.safe_dump(config), encoding='utf-8')

        with pytest.raises(ValueError):
            load_species_profile('bad', tmp_path)


class TestAdvice:
    """Test region-resolved advice."""

    def setup_method(self):
        self.profile = load_species_profile('sea_bass')

    def test_default_advice(self):
        advice = self.profile.advice_for(Region.AEGEAN)
        assert advice.bait == "Soft plastics, minnow plugs"

    def test_region_override(self):
        """Region entries override only the fields they name."""
        advice = self.profile.advice_for(Region.MARMARA)
        assert advice.bait == "Live shrimp, soft plastics"
        assert advice.rig == "Spinning, 20-28 g lures"

    def test_allowed_in(self):
        assert self.profile.allowed_in(Region.MARMARA)
        assert self.profile.allowed_in(Region.OCEAN)


class TestLoadCatalog:
    """Test full catalog loading."""

    def test_catalog_size_and_order(self):
        catalog = load_catalog()

        assert len(catalog) == 21
        assert catalog[0].id == 'sea_bass'
        assert catalog[-1].id == 'whiting'

    def test_ids_unique(self):
        ids = [profile.id for profile in load_catalog()]
        assert len(ids) == len(set(ids))

    def test_boat_only_species(self):
        boat_only = {profile.id for profile in load_catalog() if profile.requires_boat}
        assert boat_only == {'common_dentex', 'pandora', 'bluefin_tuna', 'whiting'}

    def test_duplicate_entry_raises(self, tmp_path):
        shutil.copytree(DEFAULT_CONFIG_DIR / "species", tmp_path / "species")
        (tmp_path / "catalog.yaml").write_text("species: [sea_bass, sea_bass]\n")

        with pytest.raises(ValueError):
            load_catalog(tmp_path)

    def test_missing_catalog_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path)
