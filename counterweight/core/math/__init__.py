"""
Core math modules

Математические примитивы расчёта противовеса с гарантией стабильности.
"""

# Numerical Safeguards
from counterweight.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    SINGLE_MATCH_TOLERANCE_KG,
    VOLUME_TOLERANCE_M3,
    # Checks
    all_valid_floats,
    is_valid_float,
    sanitize_float,
    # Safe division
    safe_divide,
    # Comparisons
    clamp,
    is_close_abs,
    within_range,
    # Validation
    validate_non_negative,
    validate_positive,
)

# Volumetrics
from counterweight.core.math.volumetrics import (
    FULL_SHARE_PCT,
    MM_PER_M,
    box_volume_m3,
    footprint_m2,
    mm_to_m,
    piece_weight_kg,
    segment_height_mm,
    volume_share_pct,
    weight_kg,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "SINGLE_MATCH_TOLERANCE_KG",
    "VOLUME_TOLERANCE_M3",
    # Numerical Safeguards: Checks
    "all_valid_floats",
    "is_valid_float",
    "sanitize_float",
    "safe_divide",
    "clamp",
    "is_close_abs",
    "within_range",
    "validate_non_negative",
    "validate_positive",
    # Volumetrics
    "FULL_SHARE_PCT",
    "MM_PER_M",
    "box_volume_m3",
    "footprint_m2",
    "mm_to_m",
    "piece_weight_kg",
    "segment_height_mm",
    "volume_share_pct",
    "weight_kg",
]
