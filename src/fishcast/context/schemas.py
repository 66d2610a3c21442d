"""
Environmental Data Schemas for fishcast

Defines the raw input accepted by the context builder and the canonical,
immutable snapshot every scoring function consumes.

Design Principles:
- Raw inputs may be missing or NaN; snapshots never are
- Snapshots are frozen (rebuilt per hour/day, never mutated)
- Derived quantities (clarity, current, trend, solunar...) live on the snapshot
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..metrics.astronomy import SolunarWindow, SunTimes, TimeOfDay, local_hour
from ..metrics.atmosphere import PressureTrend, Season
from ..regions import Region

FishingMode = Literal["shore", "boat"]


class RawConditions(BaseModel):
    """Raw numeric observations for one point in time, as received upstream."""

    latitude: float = Field(..., description="Latitude (degrees)")
    longitude: float = Field(..., description="Longitude (degrees)")
    when: datetime = Field(..., description="Local time of the evaluation (tz-aware preferred)")
    water_temp_c: Optional[float] = Field(None, description="Sea surface temperature (°C)")
    water_temp_previous_c: Optional[float] = Field(None, description="Sea surface temperature 24h earlier (°C)")
    air_temp_c: Optional[float] = Field(None, description="Air temperature (°C)")
    wave_height_m: Optional[float] = Field(None, description="Wave height (m)")
    wind_speed_kmh: Optional[float] = Field(None, description="Wind speed (km/h)")
    wind_direction_deg: Optional[float] = Field(None, description="Wind direction (degrees, from)")
    precipitation_mm: Optional[float] = Field(None, description="Precipitation (mm)")
    cloud_cover_pct: Optional[float] = Field(None, description="Cloud cover (%)")
    pressure_history_hpa: List[Optional[float]] = Field(
        default_factory=list,
        description="Recent surface pressure readings (hPa), oldest first, newest = now"
    )
    wave_samples_m: Optional[List[Optional[float]]] = Field(
        None,
        description="All wave samples the marine feed returned for this point; "
                    "no valid sample means the point is on land"
    )
    fishing_mode: FishingMode = Field("shore", description="Shore or boat fishing context")
    sun_times: Optional[SunTimes] = Field(None, description="Precomputed sun times (skips ephem)")


class EnvironmentalSnapshot(BaseModel):
    """Canonical environmental state for one evaluation."""

    model_config = ConfigDict(frozen=True)

    when: datetime = Field(..., description="Local time of the evaluation")
    latitude: float = Field(0.0, description="Latitude (degrees)")
    longitude: float = Field(0.0, description="Longitude (degrees)")
    region: Region = Field(Region.OCEAN, description="Region tag")
    season: Season = Field(..., description="Fishing season")

    water_temp_c: float = Field(..., description="Water temperature (°C)")
    water_temp_change_c: float = Field(0.0, ge=0, description="Absolute 24h water temperature change (°C)")
    air_temp_c: Optional[float] = Field(None, description="Air temperature (°C)")
    wave_height_m: float = Field(0.0, ge=0, description="Wave height (m)")
    wind_speed_kmh: float = Field(0.0, ge=0, description="Wind speed (km/h)")
    wind_direction_deg: float = Field(0.0, description="Wind direction (degrees, from)")
    precipitation_mm: float = Field(0.0, ge=0, description="Precipitation (mm)")
    cloud_cover_pct: float = Field(50.0, ge=0, le=100, description="Cloud cover (%)")
    pressure_hpa: float = Field(1013.25, description="Surface pressure (hPa)")
    pressure_trend: PressureTrend = Field("stable", description="Short-term pressure trend")

    clarity: float = Field(100.0, ge=0, le=100, description="Derived water clarity (0-100)")
    current_ms: float = Field(0.05, ge=0, description="Derived current speed (m/s)")
    tide_flow: float = Field(0.0, ge=0, description="Heuristic tidal flow (0-1.5)")

    moon_illumination: float = Field(0.5, ge=0, le=1, description="Illuminated fraction of the moon")
    moon_phase: float = Field(0.25, ge=0, le=1, description="Synodic phase (0 new, 0.5 full)")
    solunar: SolunarWindow = Field("none", description="Solunar window")
    time_of_day: TimeOfDay = Field("day", description="Time-of-day bucket")

    is_land: bool = Field(False, description="Point has no marine data (on land)")
    fishing_mode: FishingMode = Field("shore", description="Shore or boat fishing context")

    @property
    def hour(self) -> float:
        """Local fractional hour of the evaluation."""
        return local_hour(self.when)
