"""
EN 1993-1-9 design endurance (S-N) curves.

Available curves:
- Direct stress: two slopes (m1, m2) with a cut-off at 1e8 cycles
- Shear stress: one slope (m) with a cut-off at 1e8 cycles

Usage:
    from fatdamage.core.curves import CurveParams, evaluate_endurance

    n = evaluate_endurance(100.0, 160.0, CurveParams(stress_type="direct"))
"""

from fatdamage.core.curves.curve_base import (
    CUT_OFF_CYCLES,
    FATIGUE_LIMIT_CYCLES,
    REFERENCE_CYCLES,
    CurveParams,
    EnduranceCurveBase,
    StressType,
)
from fatdamage.core.curves.direct_stress import DirectStressCurve
from fatdamage.core.curves.shear_stress import ShearStressCurve
from fatdamage.core.curves.curve_factory import (
    CurveFactory,
    create_curve,
    evaluate_endurance,
    list_stress_types,
)

# Register all curves on import
CurveFactory.register_all()

__all__ = [
    "REFERENCE_CYCLES",
    "FATIGUE_LIMIT_CYCLES",
    "CUT_OFF_CYCLES",
    "StressType",
    "CurveParams",
    "EnduranceCurveBase",
    "CurveFactory",
    "DirectStressCurve",
    "ShearStressCurve",
    "create_curve",
    "evaluate_endurance",
    "list_stress_types",
]
