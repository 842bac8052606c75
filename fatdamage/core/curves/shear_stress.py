"""
EN 1993-1-9 design S-N curve for shear stress ranges.

Equation:
    N = Δτc^m · 2e6 / Δτ^m    for N ≤ 1e8
    N = ∞                     below the cut-off

Where:
    Δτc: Detail category (fatigue strength at 2e6 cycles)
    m: Slope (5 by default)
"""

from typing import Any, Dict
import logging

import numpy as np

from fatdamage.core.curves.curve_base import (
    CUT_OFF_CYCLES,
    REFERENCE_CYCLES,
    CurveParams,
    EnduranceCurveBase,
    StressType,
)


logger = logging.getLogger(__name__)


class ShearStressCurve(EnduranceCurveBase):
    """Shear stress endurance curve with a single slope and a cut-off."""

    stress_type = StressType.SHEAR

    DEFAULT_SLOPE: float = 5.0

    def __init__(self, detail_category: float, slope: float = DEFAULT_SLOPE):
        super().__init__(detail_category)
        self._validate_positive(slope, "slope")
        self.slope = float(slope)

    @classmethod
    def from_params(cls, detail_category: float, params: CurveParams) -> "ShearStressCurve":
        return cls(detail_category, params.shear_slope)

    @property
    def cut_off_limit(self) -> float:
        """Cut-off limit ΔτL (stress range at 1e8 cycles)."""
        return (2 / 100) ** (1 / self.slope) * self.detail_category

    def get_model_name(self) -> str:
        return "EN 1993-1-9 Shear Stress"

    def _endurance(self, stress_range: np.ndarray) -> np.ndarray:
        c = np.float64(self.detail_category)
        m = self.slope

        n1 = c ** m * REFERENCE_CYCLES / stress_range ** m
        result = np.where(n1 <= CUT_OFF_CYCLES, n1, np.inf)

        logger.debug(
            f"{self.get_model_name()}: evaluated {result.size} stress range(s) "
            f"(Δτc={self.detail_category:g}, m={m:g})"
        )

        return result

    def get_equation(self) -> str:
        return "N = Δτc^m·2e6/Δτ^m (N ≤ 1e8); N = ∞ otherwise"

    def get_parameters_info(self) -> Dict[str, Any]:
        info = super().get_parameters_info()
        info.update({
            "slope": {
                "description": "Slope m of the shear curve",
                "current_value": self.slope,
            },
            "cut_off_limit": {
                "description": "Cut-off limit ΔτL",
                "unit": "MPa",
                "current_value": self.cut_off_limit,
            },
        })
        return info
