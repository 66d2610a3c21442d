"""
Species Catalog for fishcast

Loads the static species profiles from config/species/*.yaml, in the order
declared by config/catalog.yaml.

Design Principles:
- Config-driven (no species data in code)
- Validated once at load time, read-only afterwards
- Unknown trigger or penalty names fail loudly at load, not at scoring time
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..metrics.atmosphere import Season
from ..regions import Region
from ..settings import get_config_dir
from .triggers import PENALTY_CONDITIONS, TRIGGERS, UNIVERSAL_TRIGGERS

logger = logging.getLogger(__name__)

# Type aliases
Category = Literal["shore_predator", "pelagic", "deep_water", "cephalopod", "bottom_feeder", "reef"]
ActivityPattern = Literal["dawn_dusk", "night", "day", "all_day"]
ClarityPreference = Literal["clear", "turbid", "moderate", "any"]

SEASONS = ("winter", "spring", "summer", "autumn")
REQUIRED_FIELDS = [
    'name', 'category', 'temperature', 'wave', 'clarity_preference',
    'seasonal_efficiency', 'activity_pattern', 'triggers', 'regions', 'advice',
]


class TemperatureTolerance(BaseModel):
    """Water temperature tolerance (°C)."""

    model_config = ConfigDict(frozen=True)

    min: float
    optimum: float
    max: float


class WavePreference(BaseModel):
    """Preferred wave height (m) and spread around it."""

    model_config = ConfigDict(frozen=True)

    ideal: float = Field(..., ge=0)
    tolerance: float = Field(..., gt=0)


class Advice(BaseModel):
    """Region-resolved tackle advice."""

    model_config = ConfigDict(frozen=True)

    bait: str = ""
    rig: str = ""
    hook: str = ""
    depth: str = ""


class SpeciesPenalty(BaseModel):
    """Species-specific multiplicative penalty, e.g. squid in murky water."""

    model_config = ConfigDict(frozen=True)

    condition: str = Field(..., description="Key of PENALTY_CONDITIONS")
    threshold: float
    factor: float = Field(..., gt=0, le=1)
    label: str


class SpeciesProfile(BaseModel):
    """Static description of one species."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    local_name: str = ""
    icon: str = ""
    category: Category
    temperature: TemperatureTolerance
    wave: WavePreference
    current_preference: float = Field(0.3, ge=0, description="Preferred current (m/s)")
    clarity_preference: ClarityPreference
    seasonal_efficiency: Dict[Season, float]
    activity_pattern: ActivityPattern
    pressure_sensitivity: float = Field(0.5, ge=0, le=1)
    triggers: List[str]
    regions: List[Region]
    requires_boat: bool = False
    penalties: List[SpeciesPenalty] = Field(default_factory=list)
    advice: Dict[str, Dict[str, str]]
    note: str = ""

    def advice_for(self, region: Region) -> Advice:
        """Default advice with the region's overrides applied."""
        merged = dict(self.advice.get('default', {}))
        merged.update(self.advice.get(Region(region).value, {}))
        return Advice(**merged)

    def allowed_in(self, region: Region) -> bool:
        """Species is listed for the region, or the region is open water."""
        return region == Region.OCEAN or region in self.regions


def _validate_profile(species_id: str, config: Dict) -> None:
    missing = [field for field in REQUIRED_FIELDS if field not in config]
    if missing:
        raise ValueError(f"Invalid config for {species_id}: missing fields {missing}")

    efficiency = config['seasonal_efficiency']
    missing_seasons = [season for season in SEASONS if season not in efficiency]
    if missing_seasons:
        raise ValueError(f"Invalid config for {species_id}: missing seasons {missing_seasons}")
    for season, value in efficiency.items():
        if not 0.0 <= value <= 1.0:
            raise ValueError(
                f"Seasonal efficiency for {species_id}/{season} must be in [0, 1], got {value}"
            )

    unknown = [name for name in config['triggers'] if name not in TRIGGERS or name in UNIVERSAL_TRIGGERS]
    if unknown:
        raise ValueError(f"Invalid config for {species_id}: unknown triggers {unknown}")

    for penalty in config.get('penalties', []):
        if penalty.get('condition') not in PENALTY_CONDITIONS:
            raise ValueError(
                f"Invalid config for {species_id}: unknown penalty condition {penalty.get('condition')}"
            )

    if 'default' not in config['advice']:
        raise ValueError(f"Invalid config for {species_id}: advice needs a 'default' entry")


def load_species_profile(species_id: str, config_dir: Optional[Path] = None) -> SpeciesProfile:
    """
    Load one species profile from YAML.

    Args:
        species_id: Species identifier (e.g., 'sea_bass')
        config_dir: Config directory (defaults to settings)

    Returns:
        Validated SpeciesProfile

    Raises:
        FileNotFoundError: If the species file doesn't exist
        ValueError: If the profile is invalid

    Examples:
        >>> profile = load_species_profile('sea_bass')
        >>> profile.name
        'European Sea Bass'
    """
    config_dir = Path(config_dir or get_config_dir())
    config_path = config_dir / "species" / f"{species_id}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Species config not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    _validate_profile(species_id, config)

    try:
        profile = SpeciesProfile(id=species_id, **config)
    except ValidationError as e:
        raise ValueError(f"Invalid config for {species_id}: {e}") from e

    temp = profile.temperature
    if not temp.min < temp.optimum < temp.max:
        raise ValueError(f"Temperature range for {species_id} must satisfy min < optimum < max")

    return profile


@lru_cache(maxsize=None)
def _load_catalog(config_dir: Path) -> tuple:
    catalog_path = config_dir / "catalog.yaml"
    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog not found: {catalog_path}")

    with open(catalog_path, 'r', encoding='utf-8') as f:
        species_ids = yaml.safe_load(f)['species']

    if len(set(species_ids)) != len(species_ids):
        raise ValueError("Catalog lists a species more than once")

    profiles = tuple(load_species_profile(species_id, config_dir) for species_id in species_ids)
    logger.info(f"Loaded {len(profiles)} species profiles from {config_dir}")
    return profiles


def load_catalog(config_dir: Optional[Path] = None) -> List[SpeciesProfile]:
    """
    Load every species profile in catalog order.

    The catalog is read once per config directory and cached.

    Returns:
        List of SpeciesProfile in display order
    """
    return list(_load_catalog(Path(config_dir or get_config_dir())))
