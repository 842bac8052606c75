"""
Unit tests for curve selection.

Tests include:
- Stress type parsing
- Factory registration and lookup
- Convenience functions
"""

import pytest

from fatdamage.core.curves import (
    CurveFactory,
    CurveParams,
    DirectStressCurve,
    ShearStressCurve,
    StressType,
    create_curve,
    evaluate_endurance,
    list_stress_types,
)
from fatdamage.core.exceptions import DomainError, FatigueError, UnsupportedStressTypeError


class TestStressType:
    """Test stress type parsing."""

    @pytest.mark.parametrize("value,expected", [
        ("direct", StressType.DIRECT),
        ("DIRECT", StressType.DIRECT),
        (" Shear ", StressType.SHEAR),
        (StressType.SHEAR, StressType.SHEAR),
    ])
    def test_parse(self, value, expected):
        assert StressType.parse(value) is expected

    def test_unknown_raises(self):
        with pytest.raises(UnsupportedStressTypeError, match="torsion"):
            StressType.parse("torsion")

    def test_error_is_value_error(self):
        """Callers may catch the builtin ValueError."""
        with pytest.raises(ValueError):
            StressType.parse("axial")


class TestCurveParams:
    """Test curve parameter validation."""

    def test_defaults(self):
        params = CurveParams()

        assert params.stress_type is StressType.DIRECT
        assert (params.first_slope, params.second_slope, params.shear_slope) == (3.0, 5.0, 5.0)

    def test_string_stress_type(self):
        assert CurveParams(stress_type="shear").stress_type is StressType.SHEAR

    def test_unknown_stress_type(self):
        with pytest.raises(UnsupportedStressTypeError):
            CurveParams(stress_type="bending")

    def test_non_positive_slope(self):
        with pytest.raises(DomainError, match="second_slope"):
            CurveParams(second_slope=0)


class TestCurveFactory:
    """Test factory registration and lookup."""

    def test_registered_stress_types(self):
        assert list_stress_types() == ["direct", "shear"]

    def test_create_direct(self):
        curve = create_curve(160, CurveParams(first_slope=4, second_slope=8))

        assert isinstance(curve, DirectStressCurve)
        assert curve.first_slope == 4.0
        assert curve.second_slope == 8.0

    def test_create_shear(self):
        curve = create_curve(100, CurveParams(stress_type="shear", shear_slope=6))

        assert isinstance(curve, ShearStressCurve)
        assert curve.slope == 6.0

    def test_default_params(self):
        assert isinstance(create_curve(160), DirectStressCurve)

    def test_get_curve_class(self):
        assert CurveFactory.get_curve_class("shear") is ShearStressCurve

    def test_register_requires_curve_subclass(self):
        with pytest.raises(TypeError, match="EnduranceCurveBase"):
            CurveFactory.register_curve(StressType.DIRECT, object)

    def test_invalid_detail_category(self):
        with pytest.raises(FatigueError):
            evaluate_endurance(100, 0)

    def test_fresh_instances(self):
        """Curves are rebuilt for every detail category."""
        assert create_curve(160) is not create_curve(160)
        assert evaluate_endurance(160, 160) != evaluate_endurance(160, 160 / 1.35)
