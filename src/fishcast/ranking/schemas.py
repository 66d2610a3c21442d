"""
Recommendation and Forecast Schemas for fishcast

Pydantic models for everything the engine hands back to callers. These define
the contract between the engine and any presentation layer.

Design Principles:
- Never expose internal score components without labelling them
- Scores are rounded for display; ordering is decided before rounding
- Include confidence metadata with every forecast day
- Provide explanations (reason, triggers, tactic) for every recommendation
"""

from datetime import date, datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..confidence import ConfidenceLevel
from ..metrics.atmosphere import PressureTrend

DayRating = Literal["excellent", "good", "weak"]


# ============================================================================
# Recommendations
# ============================================================================

class RecommendationItem(BaseModel):
    """One ranked species recommendation."""

    species_id: str = Field(..., description="Species identifier (e.g., 'sea_bass')")
    name: str = Field(..., description="Display name")
    icon: str = Field("", description="Display icon")
    category: str = Field(..., description="Species category tag (e.g., 'pelagic')")
    score: float = Field(..., ge=0, le=100, description="Suitability score (0-100)")
    reason: str = Field(..., description="Short explanation of the score")
    triggers: str = Field("", description="Active trigger labels, comma-joined")
    trigger_labels: List[str] = Field(default_factory=list, description="Active trigger labels")
    bait: str = Field("", description="Recommended bait")
    rig: str = Field("", description="Recommended rig / method")
    hook: str = Field("", description="Recommended hook size")
    depth: str = Field("", description="Recommended depth")
    note: str = Field("", description="Species note")
    danger: bool = Field(False, description="Conditions flagged dangerous")
    components: Dict[str, float] = Field(default_factory=dict, description="Score breakdown")


# ============================================================================
# Forecast
# ============================================================================

class DayConditions(BaseModel):
    """Representative conditions of one forecast day."""

    water_temp_c: float = Field(..., description="Water temperature (°C)")
    water_temp_change_c: float = Field(..., description="24h water temperature change (°C)")
    wave_height_m: float = Field(..., description="Wave height (m)")
    wind_speed_kmh: float = Field(..., description="Wind speed (km/h)")
    wind_direction: str = Field(..., description="Named wind direction")
    pressure_hpa: float = Field(..., description="Surface pressure (hPa)")
    pressure_trend: PressureTrend = Field(..., description="Short-term pressure trend")
    cloud_cover_pct: float = Field(..., description="Cloud cover (%)")
    precipitation_mm: float = Field(..., description="Precipitation (mm)")
    current_ms: float = Field(..., description="Estimated current (m/s)")
    clarity: float = Field(..., description="Estimated clarity (0-100)")
    tide_flow: float = Field(..., description="Heuristic tidal flow (0-1.5)")
    moon_phase: float = Field(..., description="Synodic phase (0 new, 0.5 full)")
    salinity_psu: float = Field(..., description="Regional salinity (PSU)")


class DayForecast(BaseModel):
    """Forecast for one day."""

    day: date = Field(..., description="Local date")
    score: float = Field(..., description="Day score (best species daily score)")
    rating: DayRating = Field(..., description="Qualitative day rating")
    confidence: ConfidenceLevel = Field(..., description="Confidence level (high/medium/low)")
    confidence_percent: float = Field(..., ge=0, le=100, description="Confidence percentage")
    confidence_reasoning: Optional[str] = Field(None, description="Why this confidence level")
    confidence_advice: str = Field("", description="How far to trust this day's forecast")
    tactic: str = Field(..., description="Tactical hint for the day")
    conditions: DayConditions = Field(..., description="Representative conditions")
    species: List[RecommendationItem] = Field(..., description="Ranked recommendations")


class ForecastResponse(BaseModel):
    """Multi-day forecast for a location."""

    latitude: float = Field(..., description="Latitude (degrees)")
    longitude: float = Field(..., description="Longitude (degrees)")
    region: str = Field(..., description="Region tag")
    region_name: str = Field(..., description="Region display name")
    region_tip: str = Field("", description="General regional advice")
    is_land: bool = Field(False, description="Location has no marine data")
    days: List[DayForecast] = Field(..., description="Forecast days, in date order")
    best_days: List[date] = Field(default_factory=list, description="Days rated above the best-day threshold")
    generated_at: datetime = Field(default_factory=datetime.utcnow, description="When forecast was generated")
