"""
Fatigue damage assessment of steel details per EN 1993-1-9.

Rainflow counting (ASTM E1049) of a stress-time history combined with the
Palmgren-Miner rule on design S-N curves.
"""
from fatdamage.core import (
    Cycle,
    CurveParams,
    DamageConfig,
    DomainError,
    FatigueError,
    InvalidInputError,
    StressType,
    UnsupportedStressTypeError,
    accumulate_damage,
    analyze_history,
    count_cycles,
    evaluate_endurance,
    extract_extrema,
    find_extrema,
    rainflow_counting,
)

__version__ = "1.0.0"

__all__ = [
    "Cycle",
    "CurveParams",
    "DamageConfig",
    "DomainError",
    "FatigueError",
    "InvalidInputError",
    "StressType",
    "UnsupportedStressTypeError",
    "accumulate_damage",
    "analyze_history",
    "count_cycles",
    "evaluate_endurance",
    "extract_extrema",
    "find_extrema",
    "rainflow_counting",
]
