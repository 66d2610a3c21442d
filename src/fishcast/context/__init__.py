"""Environmental context: raw observations to canonical snapshots."""

from .schemas import (
    FishingMode,
    RawConditions,
    EnvironmentalSnapshot,
)

from .builder import (
    build_snapshot,
    detect_land,
    resolve_water_temp,
)

from .hourly import (
    HOURLY_COLUMNS,
    build_hourly_snapshots,
)

__all__ = [
    # Schemas
    'FishingMode',
    'RawConditions',
    'EnvironmentalSnapshot',
    # Builders
    'build_snapshot',
    'detect_land',
    'resolve_water_temp',
    'HOURLY_COLUMNS',
    'build_hourly_snapshots',
]
