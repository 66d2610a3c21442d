"""
Region Registry for fishcast

Regions are an enumerated tag with an associated lookup table (salinity,
preferred wind arcs, current amplification, water-temperature climatology,
regional advice) loaded from config/regions.yaml.

Classification uses coarse bounding boxes over the Turkish seas; anything
outside them is open/unassigned water (OCEAN), where no species is excluded
on region grounds.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, Field

from ..settings import get_config_dir


class Region(str, Enum):
    """Geographic region tags."""
    BLACK_SEA = "BLACK_SEA"
    MARMARA = "MARMARA"
    AEGEAN = "AEGEAN"
    MEDITERRANEAN = "MEDITERRANEAN"
    OCEAN = "OCEAN"


class RegionProfile(BaseModel):
    """Static per-region data."""

    region: Region = Field(..., description="Region tag")
    name: str = Field(..., description="Display name")
    salinity_psu: float = Field(..., description="Typical surface salinity (PSU)")
    current_multiplier: float = Field(..., gt=0, description="Current amplification factor")
    preferred_wind_arc: Optional[Tuple[float, float]] = Field(None, description="Preferred wind arc (deg)")
    secondary_wind_arc: Optional[Tuple[float, float]] = Field(None, description="Acceptable wind arc (deg)")
    water_temp_climatology: List[float] = Field(..., min_length=12, max_length=12,
                                                description="Monthly mean SST (degC), Jan-Dec")
    tip: str = Field(..., description="General regional advice")

    def climatological_water_temp(self, month: int) -> float:
        """Mean sea surface temperature for a calendar month (1-12)."""
        return self.water_temp_climatology[month - 1]


def classify_region(latitude: float, longitude: float) -> Region:
    """
    Assign a coordinate to a region.

    Examples:
        >>> classify_region(41.5, 31.0).value
        'BLACK_SEA'
        >>> classify_region(40.5, 28.0).value
        'MARMARA'
        >>> classify_region(38.4, 26.5).value
        'AEGEAN'
        >>> classify_region(36.5, 31.0).value
        'MEDITERRANEAN'
        >>> classify_region(50.0, -5.0).value
        'OCEAN'
    """
    if latitude < 35.0 or latitude > 43.0 or longitude < 25.0 or longitude > 46.0:
        return Region.OCEAN
    if latitude > 41.0:
        return Region.BLACK_SEA
    if latitude > 40.0 and longitude < 30.0:
        return Region.MARMARA
    if 36.0 < latitude <= 40.0 and longitude < 30.0:
        return Region.AEGEAN
    return Region.MEDITERRANEAN


@lru_cache(maxsize=None)
def _load_region_table(config_path: Path) -> Dict[Region, RegionProfile]:
    if not config_path.exists():
        raise FileNotFoundError(f"Region config not found: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    missing = [region.value for region in Region if region.value not in config]
    if missing:
        raise ValueError(f"Invalid region config: missing regions {missing}")

    return {
        region: RegionProfile(region=region, **config[region.value])
        for region in Region
    }


def load_regions(config_dir: Optional[Path] = None) -> Dict[Region, RegionProfile]:
    """
    Load the region lookup table.

    Args:
        config_dir: Directory containing regions.yaml (defaults to settings)

    Returns:
        Mapping of Region to RegionProfile

    Raises:
        FileNotFoundError: If regions.yaml doesn't exist
        ValueError: If a region is missing from the file
    """
    config_dir = config_dir or get_config_dir()
    return _load_region_table(Path(config_dir) / "regions.yaml")


def get_region_profile(region: Region, config_dir: Optional[Path] = None) -> RegionProfile:
    """Lookup table entry for one region."""
    return load_regions(config_dir)[Region(region)]
