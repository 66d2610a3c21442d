"""Region classification and lookup tables for fishcast."""

from .registry import (
    Region,
    RegionProfile,
    classify_region,
    load_regions,
    get_region_profile,
)

__all__ = [
    'Region',
    'RegionProfile',
    'classify_region',
    'load_regions',
    'get_region_profile',
]
