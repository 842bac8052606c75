"""
Factory for endurance curve selection and instantiation.

The CurveFactory maps a stress type to the curve class implementing it.
Curves are built per call from a detail category and shape parameters;
no instances are cached because the effective detail category changes
with the strength safety factor.
"""

from typing import Dict, List, Optional, Type, Union
import logging

import numpy as np

from fatdamage.core.curves.curve_base import (
    CurveParams,
    EnduranceCurveBase,
    StressRange,
    StressType,
)
from fatdamage.core.exceptions import UnsupportedStressTypeError


logger = logging.getLogger(__name__)


class CurveFactory:
    """
    Factory for creating endurance curve instances.

    Usage:
        CurveFactory.register_curve(StressType.DIRECT, DirectStressCurve)

        curve = CurveFactory.create_curve(160, CurveParams())
        n = curve.calculate_cycles_to_failure(100)
    """

    _curves: Dict[StressType, Type[EnduranceCurveBase]] = {}

    @classmethod
    def register_curve(
        cls,
        stress_type: Union[str, StressType],
        curve_class: Type[EnduranceCurveBase]
    ) -> None:
        """
        Register a curve class for a stress type.

        Raises:
            TypeError: If curve_class doesn't inherit from EnduranceCurveBase
        """
        if not issubclass(curve_class, EnduranceCurveBase):
            raise TypeError(
                f"Curve class must inherit from EnduranceCurveBase, "
                f"got {curve_class.__name__}"
            )

        stress_type = StressType.parse(stress_type)
        if stress_type in cls._curves:
            logger.warning(
                f"Stress type '{stress_type.value}' is already registered. "
                f"Overwriting with {curve_class.__name__}"
            )

        cls._curves[stress_type] = curve_class
        logger.debug(f"Registered curve '{stress_type.value}' -> {curve_class.__name__}")

    @classmethod
    def get_curve_class(cls, stress_type: Union[str, StressType]) -> Type[EnduranceCurveBase]:
        """
        Get the curve class registered for a stress type.

        Raises:
            UnsupportedStressTypeError: If no curve handles the stress type
        """
        stress_type = StressType.parse(stress_type)
        if stress_type not in cls._curves:
            available = ", ".join(cls.list_stress_types())
            raise UnsupportedStressTypeError(
                f"No curve registered for stress type '{stress_type.value}'. "
                f"Available: {available}"
            )
        return cls._curves[stress_type]

    @classmethod
    def create_curve(
        cls,
        detail_category: float,
        params: Optional[CurveParams] = None
    ) -> EnduranceCurveBase:
        """
        Build the curve selected by ``params.stress_type``.

        Args:
            detail_category: Detail category (must be positive)
            params: Curve shape parameters (defaults to the direct curve
                with m1=3, m2=5)

        Raises:
            UnsupportedStressTypeError: If the stress type is not registered
            DomainError: If the detail category or a slope is not positive
        """
        params = params or CurveParams()
        curve_class = cls.get_curve_class(params.stress_type)
        return curve_class.from_params(detail_category, params)

    @classmethod
    def list_stress_types(cls) -> List[str]:
        """List all registered stress type names."""
        return [t.value for t in cls._curves]

    @classmethod
    def register_all(cls) -> None:
        """Register the EN 1993-1-9 direct and shear curves."""
        # Import curves here to avoid circular imports
        from fatdamage.core.curves.direct_stress import DirectStressCurve
        from fatdamage.core.curves.shear_stress import ShearStressCurve

        cls.register_curve(StressType.DIRECT, DirectStressCurve)
        cls.register_curve(StressType.SHEAR, ShearStressCurve)

        logger.info(f"Registered {len(cls._curves)} endurance curves")


def create_curve(detail_category: float, params: Optional[CurveParams] = None) -> EnduranceCurveBase:
    """Convenience function to build a curve."""
    return CurveFactory.create_curve(detail_category, params)


def list_stress_types() -> List[str]:
    """Convenience function to list the registered stress types."""
    return CurveFactory.list_stress_types()


def evaluate_endurance(
    stress_range: StressRange,
    detail_category: float,
    params: Optional[CurveParams] = None
) -> Union[float, np.ndarray]:
    """
    Fatigue endurance (cycles to failure) of one or many stress ranges.

    Args:
        stress_range: Stress range or sequence of stress ranges (>= 0)
        detail_category: Detail category (> 0)
        params: Curve shape parameters

    Returns:
        float for scalar input, array otherwise; +inf below the cut-off
        and for zero ranges

    Raises:
        UnsupportedStressTypeError: For an unknown stress type
        DomainError: For a negative range or non-positive detail category

    Examples:
        >>> evaluate_endurance(100, 160) > 5e6
        True
    """
    return create_curve(detail_category, params).calculate_cycles_to_failure(stress_range)
