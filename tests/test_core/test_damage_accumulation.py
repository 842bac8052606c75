"""
Unit tests for damage accumulation module.

Tests cover Miner's rule with the EN 1993-1-9 curves, partial safety
factors, repetitions, configuration validation and repetitions to failure.
"""
import math
import warnings

import pytest
import numpy as np
from numpy.testing import assert_allclose

from fatdamage.core.damage_accumulation import (
    DamageConfig,
    DamageResult,
    accumulate_damage,
    analyze_history,
    calculate_miner_damage,
    repetitions_to_failure,
)
from fatdamage.core.curves import StressType
from fatdamage.core.exceptions import (
    DomainError,
    InvalidInputError,
    UnsupportedStressTypeError,
)
from fatdamage.core.extrema import extract_extrema
from fatdamage.core.rainflow import Cycle, count_cycles


class TestDamageConfig:
    """Tests for configuration defaults and validation."""

    def test_defaults(self):
        config = DamageConfig()

        assert config.stress_type is StressType.DIRECT
        assert config.first_slope == 3.0
        assert config.second_slope == 5.0
        assert config.shear_slope == 5.0
        assert config.amplitude_safety_factor == 1.0
        assert config.strength_safety_factor == 1.0
        assert config.repetitions == 1.0

    def test_stress_type_is_parsed(self):
        assert DamageConfig(stress_type="SHEAR").stress_type is StressType.SHEAR

    @pytest.mark.parametrize("kwargs,match", [
        ({"amplitude_safety_factor": -0.1}, "amplitude_safety_factor"),
        ({"strength_safety_factor": 0}, "strength_safety_factor"),
        ({"strength_safety_factor": -1.35}, "strength_safety_factor"),
        ({"repetitions": -1}, "repetitions"),
        ({"first_slope": 0}, "first_slope"),
        ({"shear_slope": -5}, "shear_slope"),
    ])
    def test_invalid_values(self, kwargs, match):
        with pytest.raises(DomainError, match=match):
            DamageConfig(**kwargs)

    def test_unknown_stress_type(self):
        with pytest.raises(UnsupportedStressTypeError):
            DamageConfig(stress_type="torsion")

    def test_curve_params(self):
        params = DamageConfig(stress_type="shear", shear_slope=6).curve_params()

        assert params.stress_type is StressType.SHEAR
        assert params.shear_slope == 6.0


class TestCalculateMinerDamage:
    """Tests for Miner's damage calculation on a cycle table."""

    def test_empty_cycles(self):
        """Test with empty cycle list."""
        result = calculate_miner_damage([], 160)

        assert result.total_damage == 0.0
        assert result.remaining_life_fraction == 1.0
        assert not result.is_critical
        assert result.details == []

    def test_empty_cycles_still_validate_detail_category(self):
        with pytest.raises(DomainError):
            calculate_miner_damage([], 0)

    def test_single_full_cycle(self):
        """One full cycle of 200 MPa on detail 160: D = 1 / 1.024e6."""
        result = calculate_miner_damage([Cycle(range=200, mean=100, count=1.0)], 160)

        assert result.total_damage == pytest.approx(1 / 1.024e6)
        assert len(result.details) == 1
        assert result.details[0]['cycles_to_failure'] == pytest.approx(1.024e6)
        assert result.details[0]['damage_fraction'] == pytest.approx(1.0)

    def test_amplitude_safety_factor(self):
        """γFf scales the stress range: 200 · 1.25 = 250 MPa."""
        config = DamageConfig(amplitude_safety_factor=1.25)

        result = calculate_miner_damage([Cycle(200, 100, 1.0)], 160, config)

        assert result.total_damage == pytest.approx(1 / 524288)
        assert result.details[0]['applied_range'] == pytest.approx(250)

    def test_strength_safety_factor(self):
        """γMf reduces the detail category."""
        config = DamageConfig(strength_safety_factor=1.35)
        expected = 1 / (2e6 * (160 / 1.35 / 200) ** 3)

        result = calculate_miner_damage([Cycle(200, 100, 1.0)], 160, config)

        assert result.total_damage == pytest.approx(expected)

    def test_zero_amplitude_factor_gives_no_damage(self):
        config = DamageConfig(amplitude_safety_factor=0)

        result = calculate_miner_damage([Cycle(200, 100, 1.0)], 160, config)

        assert result.total_damage == 0.0
        assert math.isinf(result.details[0]['cycles_to_failure'])

    def test_below_cut_off_gives_no_damage(self):
        result = calculate_miner_damage([Cycle(40, 20, 1.0)], 160)

        assert result.total_damage == 0.0
        assert result.details[0]['damage_fraction'] == 0.0

    def test_shear_curve(self):
        """Shear curve at its detail category: N = 2e6."""
        config = DamageConfig(stress_type="shear")

        result = calculate_miner_damage([Cycle(100, 50, 1.0)], 100, config)

        assert result.total_damage == pytest.approx(5e-7)

    def test_critical_damage(self):
        """Damage >= 1 is flagged as critical."""
        config = DamageConfig(repetitions=2e6)

        result = calculate_miner_damage([Cycle(200, 100, 1.0)], 160, config)

        assert result.total_damage == pytest.approx(2e6 / 1.024e6)
        assert result.is_critical
        assert result.remaining_life_fraction == 0.0

    def test_details_keys(self):
        result = calculate_miner_damage([Cycle(200, 100, 0.5), Cycle(150, 75, 1.0)], 160)

        for i, detail in enumerate(result.details):
            assert detail['cycle_index'] == i
            assert set(detail) >= {
                'range', 'mean', 'count', 'applied_range', 'applied_count',
                'cycles_to_failure', 'damage_contribution', 'damage_fraction',
            }

    def test_repr(self):
        result = calculate_miner_damage([Cycle(200, 100, 1.0)], 160)

        assert "status=OK" in repr(result)
        assert isinstance(result, DamageResult)


class TestAccumulateDamage:
    """Tests for the full history pipeline."""

    def test_single_load_block(self):
        """[0, 200, 0] closes one cycle of 200 MPa as two half cycles."""
        assert accumulate_damage([0, 200, 0], 160) == pytest.approx(1 / 1.024e6)

    def test_zero_repetitions(self, random_history):
        """Zero repetitions never damage."""
        config = DamageConfig(repetitions=0)

        assert accumulate_damage(random_history, 160, config) == 0.0
        assert accumulate_damage([0, 200, 0, 200, 0], 160, config) == 0.0

    def test_zero_repetitions_with_overflowing_range(self):
        """Zero repetitions give zero damage even where the endurance underflows to 0."""
        config = DamageConfig(repetitions=0)

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            damage = accumulate_damage([0, 1e200, 0], 160, config)

        assert damage == 0.0

    def test_overflowing_range_is_infinitely_damaging(self):
        """An endurance of 0 cycles makes the damage infinite."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = analyze_history([0, 1e200, 0], 160)

        assert result.details[0]['cycles_to_failure'] == 0.0
        assert math.isinf(result.total_damage)
        assert result.is_critical
        assert [d['damage_fraction'] for d in result.details] == [0.5, 0.5]

    def test_linear_in_repetitions(self, random_history, detail_category):
        """Doubling the repetitions doubles the damage."""
        single = accumulate_damage(random_history, detail_category, DamageConfig(repetitions=1))
        double = accumulate_damage(random_history, detail_category, DamageConfig(repetitions=2))

        assert single > 0
        assert double == pytest.approx(2 * single, rel=1e-12)

    def test_flat_history(self):
        """A constant signal has no cycles."""
        assert accumulate_damage([0, 0, 0], 160) == 0.0

    def test_too_short_history(self):
        with pytest.raises(InvalidInputError):
            accumulate_damage([1.0], 160)

    def test_non_positive_detail_category(self):
        with pytest.raises(DomainError):
            accumulate_damage([0, 200, 0], 0)

    def test_deterministic(self, random_history, detail_category):
        first = accumulate_damage(random_history, detail_category)
        second = accumulate_damage(random_history, detail_category)

        assert first == second
        assert math.isfinite(first)


class TestAnalyzeHistory:
    """Tests for the detailed pipeline result."""

    def test_extrema_and_cycles(self, sample_history):
        result = analyze_history(sample_history, 160)

        assert result.extrema == extract_extrema(sample_history)
        assert result.cycles == count_cycles(result.extrema)

    def test_damage_fractions_sum_to_one(self, random_history, detail_category):
        result = analyze_history(random_history, detail_category)

        fractions = np.array([d['damage_fraction'] for d in result.details])
        assert_allclose(fractions.sum(), 1.0, rtol=1e-10)

    def test_matches_scalar(self, random_history, detail_category):
        config = DamageConfig(amplitude_safety_factor=1.1, strength_safety_factor=1.35)

        result = analyze_history(random_history, detail_category, config)

        assert result.total_damage == accumulate_damage(random_history, detail_category, config)


class TestRepetitionsToFailure:
    """Tests for repetitions to failure."""

    def test_basic(self):
        assert repetitions_to_failure(0.5) == pytest.approx(2.0)
        assert repetitions_to_failure(0.5, repetitions=10) == pytest.approx(20.0)

    def test_no_damage(self):
        assert repetitions_to_failure(0.0) == math.inf

    def test_consistent_with_accumulation(self):
        damage = accumulate_damage([0, 200, 0], 160)

        assert repetitions_to_failure(damage) == pytest.approx(1.024e6)

    def test_negative_damage(self):
        with pytest.raises(DomainError, match="Damage"):
            repetitions_to_failure(-0.1)

    def test_non_positive_repetitions(self):
        with pytest.raises(DomainError, match="Repetitions"):
            repetitions_to_failure(0.1, repetitions=0)
