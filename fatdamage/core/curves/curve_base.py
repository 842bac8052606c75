"""
Abstract base class for design S-N (endurance) curves.

All curve shapes must inherit from this class and implement the
abstract methods defined below. Curves are immutable once built and
evaluate elementwise on scalars or sequences of stress ranges.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Union
import logging

import numpy as np

from fatdamage.core.exceptions import DomainError, UnsupportedStressTypeError


logger = logging.getLogger(__name__)


# Cycle counts at which EN 1993-1-9 curves change shape
REFERENCE_CYCLES = 2e6
FATIGUE_LIMIT_CYCLES = 5e6
CUT_OFF_CYCLES = 1e8


StressRange = Union[float, Sequence[float], np.ndarray]


class StressType(str, Enum):
    DIRECT = "direct"
    SHEAR = "shear"

    @classmethod
    def parse(cls, value: Union[str, "StressType"]) -> "StressType":
        """
        Convert a user-supplied selector to a StressType.

        Matching is case-insensitive.

        Raises:
            UnsupportedStressTypeError: If the value is not a known type
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(t.value for t in cls)
            raise UnsupportedStressTypeError(
                f"Unexpected stress type: '{value}'. Expected one of: {allowed}"
            ) from None


@dataclass(frozen=True)
class CurveParams:
    """S-N curve shape parameters.

    Attributes:
        stress_type: Direct or shear stress curve
        first_slope: Slope m1 of the direct curve up to 5e6 cycles
        second_slope: Slope m2 of the direct curve between 5e6 and 1e8 cycles
        shear_slope: Slope m of the shear curve
    """
    stress_type: StressType = StressType.DIRECT
    first_slope: float = 3.0
    second_slope: float = 5.0
    shear_slope: float = 5.0

    def __post_init__(self):
        object.__setattr__(self, "stress_type", StressType.parse(self.stress_type))
        for name in ("first_slope", "second_slope", "shear_slope"):
            value = getattr(self, name)
            if value <= 0:
                raise DomainError(f"Parameter '{name}' must be positive, got {value}")


class EnduranceCurveBase(ABC):
    """
    Abstract base class for endurance curves.

    Subclasses implement ``_endurance`` on a float64 array of strictly
    validated, non-negative stress ranges. The public
    ``calculate_cycles_to_failure`` handles conversion, validation and
    floating-point error suppression so that overflow propagates as inf.
    """

    stress_type: StressType

    def __init__(self, detail_category: float):
        detail_category = float(detail_category)
        self._validate_positive(detail_category, "detail_category")
        self.detail_category = detail_category

    @classmethod
    @abstractmethod
    def from_params(cls, detail_category: float, params: CurveParams) -> "EnduranceCurveBase":
        """Build the curve from a detail category and shape parameters."""
        pass

    @abstractmethod
    def _endurance(self, stress_range: np.ndarray) -> np.ndarray:
        """Cycles to failure for each element of *stress_range*."""
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """Return the name of the curve."""
        pass

    def get_equation(self) -> str:
        """Return the curve equation in human-readable form."""
        return ""

    def get_parameters_info(self) -> Dict[str, Any]:
        """Return the curve parameters and their current values."""
        return {
            "detail_category": {
                "description": "Reference fatigue strength at 2e6 cycles",
                "unit": "MPa",
                "current_value": self.detail_category,
            }
        }

    def calculate_cycles_to_failure(self, stress_range: StressRange) -> Union[float, np.ndarray]:
        """
        Calculate the fatigue endurance for one or many stress ranges.

        A zero stress range has infinite endurance.

        Args:
            stress_range: Stress range or sequence of stress ranges

        Returns:
            float for scalar input, otherwise an array of the same shape.
            Values above the cut-off are +inf.

        Raises:
            DomainError: If any stress range is negative
        """
        ranges = np.asarray(stress_range, dtype=float)

        if np.any(ranges < 0):
            raise DomainError(
                f"Stress range must be non-negative, got {ranges[ranges < 0].min()}"
            )

        with np.errstate(divide="ignore", over="ignore", invalid="ignore", under="ignore"):
            result = self._endurance(ranges)

        if result.ndim == 0:
            return float(result)
        return result

    def __call__(self, stress_range: StressRange) -> Union[float, np.ndarray]:
        return self.calculate_cycles_to_failure(stress_range)

    def _validate_positive(self, value: float, param_name: str) -> None:
        """
        Validate that a value is positive.

        Raises:
            DomainError: If value is not positive
        """
        if not value > 0:
            raise DomainError(
                f"Parameter '{param_name}' must be positive, got {value}"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(detail_category={self.detail_category:g})"
