"""
EN 1993-1-9 design S-N curve for direct stress ranges.

Equation (three branches, selected by the resulting endurance):
    N = Δσc^m1 · 2e6 / Δσ^m1    for N ≤ 5e6
    N = ΔσD^m2 · 5e6 / Δσ^m2    for 5e6 < N ≤ 1e8
    N = ∞                       below the cut-off

Where:
    Δσc: Detail category (fatigue strength at 2e6 cycles)
    ΔσD = (2/5)^(1/m1) · Δσc: Constant amplitude fatigue limit
    m1, m2: First and second slopes (3 and 5 by default)
"""

from typing import Any, Dict
import logging

import numpy as np

from fatdamage.core.curves.curve_base import (
    CUT_OFF_CYCLES,
    FATIGUE_LIMIT_CYCLES,
    REFERENCE_CYCLES,
    CurveParams,
    EnduranceCurveBase,
    StressType,
)


logger = logging.getLogger(__name__)


class DirectStressCurve(EnduranceCurveBase):
    """
    Direct stress endurance curve with two slopes and a cut-off.

    The first branch is tried first; if its endurance exceeds 5e6 cycles
    the second branch applies, and if that exceeds 1e8 cycles the stress
    range is below the cut-off limit and the life is infinite.
    """

    stress_type = StressType.DIRECT

    DEFAULT_FIRST_SLOPE: float = 3.0
    DEFAULT_SECOND_SLOPE: float = 5.0

    def __init__(
        self,
        detail_category: float,
        first_slope: float = DEFAULT_FIRST_SLOPE,
        second_slope: float = DEFAULT_SECOND_SLOPE,
    ):
        super().__init__(detail_category)
        self._validate_positive(first_slope, "first_slope")
        self._validate_positive(second_slope, "second_slope")
        self.first_slope = float(first_slope)
        self.second_slope = float(second_slope)

    @classmethod
    def from_params(cls, detail_category: float, params: CurveParams) -> "DirectStressCurve":
        return cls(detail_category, params.first_slope, params.second_slope)

    @property
    def fatigue_limit(self) -> float:
        """Constant amplitude fatigue limit ΔσD (stress range at 5e6 cycles)."""
        return (2 / 5) ** (1 / self.first_slope) * self.detail_category

    @property
    def cut_off_limit(self) -> float:
        """Cut-off limit ΔσL (stress range at 1e8 cycles)."""
        return (5 / 100) ** (1 / self.second_slope) * self.fatigue_limit

    def get_model_name(self) -> str:
        return "EN 1993-1-9 Direct Stress"

    def _endurance(self, stress_range: np.ndarray) -> np.ndarray:
        c = np.float64(self.detail_category)
        d = np.float64(self.fatigue_limit)
        m1 = self.first_slope
        m2 = self.second_slope

        n1 = c ** m1 * REFERENCE_CYCLES / stress_range ** m1
        n2 = d ** m2 * FATIGUE_LIMIT_CYCLES / stress_range ** m2

        result = np.where(
            n1 <= FATIGUE_LIMIT_CYCLES,
            n1,
            np.where(n2 <= CUT_OFF_CYCLES, n2, np.inf),
        )

        logger.debug(
            f"{self.get_model_name()}: evaluated {result.size} stress range(s) "
            f"(Δσc={self.detail_category:g}, m1={m1:g}, m2={m2:g})"
        )

        return result

    def get_equation(self) -> str:
        return ("N = Δσc^m1·2e6/Δσ^m1 (N ≤ 5e6); "
                "N = ΔσD^m2·5e6/Δσ^m2 (N ≤ 1e8); N = ∞ otherwise")

    def get_parameters_info(self) -> Dict[str, Any]:
        info = super().get_parameters_info()
        info.update({
            "first_slope": {
                "description": "Slope m1 up to 5e6 cycles",
                "current_value": self.first_slope,
            },
            "second_slope": {
                "description": "Slope m2 between 5e6 and 1e8 cycles",
                "current_value": self.second_slope,
            },
            "fatigue_limit": {
                "description": "Constant amplitude fatigue limit ΔσD",
                "unit": "MPa",
                "current_value": self.fatigue_limit,
            },
            "cut_off_limit": {
                "description": "Cut-off limit ΔσL",
                "unit": "MPa",
                "current_value": self.cut_off_limit,
            },
        })
        return info
