"""
Forecast Confidence Classification for fishcast

Translates how disturbed the conditions are into a single, interpretable
confidence level for a day's recommendations.

Confidence signals include:
1. Wind speed (km/h)
2. Wave height (m)
3. Water temperature shock (24h change, °C)

The three signals are folded into a chaos index (0-1), which drives both the
confidence percentage and the sigma of the optional scoring noise.

Design Principles:
- Deterministic (same inputs → same output)
- Transparent (clear rules, no black box)
- Conservative (a temperature shock always costs confidence)
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

# Type aliases
ConfidenceLevel = Literal["high", "medium", "low"]

# Chaos index normalizers
CHAOS_WIND_KMH = 50.0
CHAOS_WAVE_M = 4.0
CHAOS_SHOCK_C = 5.0

# Confidence percentage
BASE_CONFIDENCE = 100.0
CHAOS_PENALTY = 40.0
SHOCK_THRESHOLD_C = 4.0
SHOCK_PENALTY = 20.0
MIN_CONFIDENCE = 30.0
MAX_CONFIDENCE = 95.0

# Classification thresholds
HIGH_CONFIDENCE_MIN = 80.0
MEDIUM_CONFIDENCE_MIN = 60.0

# Noise sigma
BASE_SIGMA = 2.0
CHAOS_SIGMA_SCALE = 6.0


class ConfidenceScore(BaseModel):
    """Confidence assessment for a forecast day."""

    confidence: ConfidenceLevel = Field(..., description="Overall confidence level")
    percent: float = Field(..., ge=0, le=100, description="Confidence percentage")
    chaos_index: float = Field(..., ge=0, le=1, description="Chaos index (0 calm, 1 chaotic)")
    reasoning: str = Field(..., description="Explanation of confidence level")
    signals: Dict[str, Any] = Field(..., description="Input signals used")


def compute_chaos_index(wind_speed_kmh: float, wave_height_m: float, temp_change_c: float) -> float:
    """
    Compute the chaos index from wind, waves and temperature shock.

    chaos = clamp((wind/50 + wave/4 + shock/5) / 3, 0, 1)

    Examples:
        >>> compute_chaos_index(0.0, 0.0, 0.0)
        0.0
        >>> compute_chaos_index(50.0, 4.0, 5.0)
        1.0
        >>> compute_chaos_index(100.0, 8.0, 10.0)
        1.0
    """
    chaos = (
        wind_speed_kmh / CHAOS_WIND_KMH
        + wave_height_m / CHAOS_WAVE_M
        + abs(temp_change_c) / CHAOS_SHOCK_C
    ) / 3.0
    return max(0.0, min(1.0, chaos))


def compute_confidence(wind_speed_kmh: float, wave_height_m: float, temp_change_c: float) -> float:
    """
    Confidence percentage (30-95).

    Starts at 100, loses 40 points at full chaos and a further 20 on a
    temperature shock above 4 °C.

    Examples:
        >>> compute_confidence(0.0, 0.0, 0.0)
        95.0
        >>> compute_confidence(50.0, 4.0, 5.0)
        40.0
    """
    chaos = compute_chaos_index(wind_speed_kmh, wave_height_m, temp_change_c)
    confidence = BASE_CONFIDENCE - CHAOS_PENALTY * chaos

    if abs(temp_change_c) > SHOCK_THRESHOLD_C:
        confidence -= SHOCK_PENALTY

    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, confidence))


def noise_sigma(
    chaos: float,
    base_sigma: float = BASE_SIGMA,
    chaos_scale: float = CHAOS_SIGMA_SCALE
) -> float:
    """
    Standard deviation of the scoring noise for a chaos index.

    The scorer passes its configured base and scale (config/scoring.yaml
    noise section); the defaults match the shipped config.

    Examples:
        >>> noise_sigma(0.0)
        2.0
        >>> noise_sigma(1.0)
        8.0
        >>> noise_sigma(0.5, base_sigma=1.0, chaos_scale=2.0)
        2.0
    """
    return base_sigma + chaos_scale * chaos


def classify_confidence(percent: float) -> ConfidenceLevel:
    """
    Classify a confidence percentage.

    Examples:
        >>> classify_confidence(90.0)
        'high'
        >>> classify_confidence(65.0)
        'medium'
        >>> classify_confidence(40.0)
        'low'
    """
    if percent >= HIGH_CONFIDENCE_MIN:
        return "high"
    elif percent >= MEDIUM_CONFIDENCE_MIN:
        return "medium"
    else:
        return "low"


def classify_confidence_with_reasoning(
    wind_speed_kmh: float,
    wave_height_m: float,
    temp_change_c: float
) -> ConfidenceScore:
    """
    Classify confidence and provide reasoning.

    Args:
        wind_speed_kmh: Wind speed (km/h)
        wave_height_m: Wave height (m)
        temp_change_c: 24h water temperature change (°C)

    Returns:
        ConfidenceScore with level, percentage and explanation

    Examples:
        >>> score = classify_confidence_with_reasoning(5.0, 0.3, 0.2)
        >>> score.confidence
        'high'
        >>> "settled" in score.reasoning.lower()
        True
    """
    chaos = compute_chaos_index(wind_speed_kmh, wave_height_m, temp_change_c)
    percent = compute_confidence(wind_speed_kmh, wave_height_m, temp_change_c)
    confidence = classify_confidence(percent)

    reasoning = generate_confidence_reasoning(
        confidence=confidence,
        wind_speed_kmh=wind_speed_kmh,
        wave_height_m=wave_height_m,
        temp_change_c=temp_change_c
    )

    return ConfidenceScore(
        confidence=confidence,
        percent=percent,
        chaos_index=chaos,
        reasoning=reasoning,
        signals={
            'wind_speed_kmh': wind_speed_kmh,
            'wave_height_m': wave_height_m,
            'temp_change_c': temp_change_c
        }
    )


def generate_confidence_reasoning(
    confidence: ConfidenceLevel,
    wind_speed_kmh: float,
    wave_height_m: float,
    temp_change_c: float
) -> str:
    """
    Generate human-readable explanation of confidence level.

    Returns:
        Explanation string
    """
    parts = []

    if confidence == "high":
        parts.append("High confidence:")
    elif confidence == "medium":
        parts.append("Medium confidence:")
    else:
        parts.append("Low confidence:")

    disturbed = False

    if wind_speed_kmh >= 35:
        parts.append(f" Strong wind ({wind_speed_kmh:.0f} km/h) makes fish behaviour erratic.")
        disturbed = True
    elif wind_speed_kmh >= 20:
        parts.append(f" Fresh wind ({wind_speed_kmh:.0f} km/h).")
        disturbed = True

    if wave_height_m >= 1.8:
        parts.append(f" Rough sea ({wave_height_m:.1f} m waves).")
        disturbed = True
    elif wave_height_m >= 1.0:
        parts.append(f" Moderate sea ({wave_height_m:.1f} m waves).")
        disturbed = True

    if abs(temp_change_c) > SHOCK_THRESHOLD_C:
        parts.append(f" Water temperature shock ({temp_change_c:.1f} °C in 24h).")
        disturbed = True
    elif abs(temp_change_c) > 2:
        parts.append(f" Water temperature shifting ({temp_change_c:.1f} °C in 24h).")
        disturbed = True

    if not disturbed:
        parts.append(" Settled sea and weather.")

    return "".join(parts)


def interpret_confidence_for_user(confidence: ConfidenceLevel) -> str:
    """
    Generate user-friendly interpretation of confidence level.

    Examples:
        >>> interpret_confidence_for_user("high")
        'Trust this forecast - conditions are settled.'
        >>> interpret_confidence_for_user("low")
        'Use caution - conditions are disturbed and fish behaviour is hard to call.'
    """
    if confidence == "high":
        return "Trust this forecast - conditions are settled."
    elif confidence == "medium":
        return "Reasonable forecast - some uncertainty exists."
    else:
        return "Use caution - conditions are disturbed and fish behaviour is hard to call."
