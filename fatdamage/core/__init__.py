"""
Core algorithms package for EN 1993-1-9 fatigue damage analysis.

This package provides:
- Turning-point (extrema) extraction
- Rainflow cycle counting (ASTM E1049)
- Design endurance (S-N) curves
- Linear damage accumulation (Palmgren-Miner)
"""

from . import exceptions
from . import extrema
from . import rainflow
from . import curves
from . import damage_accumulation

from .exceptions import (
    FatigueError,
    InvalidInputError,
    UnsupportedStressTypeError,
    DomainError,
)
from .extrema import extract_extrema, find_extrema
from .rainflow import count_cycles, rainflow_counting, Cycle
from .curves import CurveParams, StressType, evaluate_endurance
from .damage_accumulation import DamageConfig, accumulate_damage, analyze_history

__all__ = [
    'exceptions',
    'extrema',
    'rainflow',
    'curves',
    'damage_accumulation',
    'FatigueError',
    'InvalidInputError',
    'UnsupportedStressTypeError',
    'DomainError',
    'extract_extrema',
    'find_extrema',
    'count_cycles',
    'rainflow_counting',
    'Cycle',
    'CurveParams',
    'StressType',
    'evaluate_endurance',
    'DamageConfig',
    'accumulate_damage',
    'analyze_history',
]
