"""
Linear damage accumulation using Miner's rule.

Total damage = Σ (n_i / N_i) where failure occurs when damage >= 1

This module implements the Palmgren-Miner linear damage hypothesis
with design S-N curves per EN 1993-1-9. Every rainflow cycle is
evaluated on the endurance curve after applying the partial safety
factors:

    N_i = N(γFf · Δσ_i ; Δσc / γMf)
    n_i = count_i · repetitions

References:
    - Miner, M.A. (1945). "Cumulative damage in fatigue"
      Journal of Applied Mechanics, 12(3), A159-A164.
    - EN 1993-1-9:2005, "Eurocode 3: Design of steel structures -
      Part 1-9: Fatigue"
"""
from typing import List, Optional, Union
from dataclasses import dataclass, field
import logging
import math

import numpy as np

from fatdamage.core.curves import CurveParams, StressType, create_curve
from fatdamage.core.exceptions import DomainError
from fatdamage.core.extrema import Samples
from fatdamage.core.rainflow import Cycle, rainflow_counting

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DamageConfig:
    """Options of a fatigue damage analysis.

    Attributes:
        stress_type: 'direct' (default) or 'shear'
        first_slope: First slope m1 of the direct curve
        second_slope: Second slope m2 of the direct curve
        shear_slope: Slope m of the shear curve
        amplitude_safety_factor: Partial factor γFf applied to stress ranges
        strength_safety_factor: Partial factor γMf dividing the detail category
        repetitions: Number of times the history is repeated
    """
    stress_type: StressType = StressType.DIRECT
    first_slope: float = 3.0
    second_slope: float = 5.0
    shear_slope: float = 5.0
    amplitude_safety_factor: float = 1.0
    strength_safety_factor: float = 1.0
    repetitions: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "stress_type", StressType.parse(self.stress_type))
        if not self.amplitude_safety_factor >= 0:
            raise DomainError(
                f"amplitude_safety_factor must be non-negative, got {self.amplitude_safety_factor}"
            )
        if not self.strength_safety_factor > 0:
            raise DomainError(
                f"strength_safety_factor must be positive, got {self.strength_safety_factor}"
            )
        if not self.repetitions >= 0:
            raise DomainError(f"repetitions must be non-negative, got {self.repetitions}")
        # Slopes are validated by CurveParams
        self.curve_params()

    def curve_params(self) -> CurveParams:
        """Shape parameters of the S-N curve selected by this config."""
        return CurveParams(
            stress_type=self.stress_type,
            first_slope=self.first_slope,
            second_slope=self.second_slope,
            shear_slope=self.shear_slope,
        )


@dataclass
class DamageResult:
    """Result of damage accumulation analysis.

    Attributes:
        total_damage: Total accumulated damage (0 to ∞, failure at 1.0)
        remaining_life_fraction: Fraction of life remaining (0 to 1)
        is_critical: True if damage >= 1.0 (predicted failure)
        details: Per-cycle damage contributions
        cycles: Cycle table the damage was computed from
        extrema: Turning points of the history, when computed from one
    """
    total_damage: float
    remaining_life_fraction: float
    is_critical: bool
    details: List[dict] = field(default_factory=list)
    cycles: List[Cycle] = field(default_factory=list)
    extrema: Optional[List[float]] = None

    def __repr__(self) -> str:
        status = "CRITICAL" if self.is_critical else "OK"
        return (f"DamageResult(total={self.total_damage:.4e}, "
                f"remaining={self.remaining_life_fraction:.2%}, "
                f"status={status})")


def calculate_miner_damage(
    cycles: List[Cycle],
    detail_category: float,
    config: Optional[DamageConfig] = None,
) -> DamageResult:
    """
    Calculate cumulative damage of a cycle table using Miner's linear rule.

    For each cycle:
    1. Scale the range by γFf and evaluate the endurance N_i on the curve
       of detail category Δσc / γMf
    2. Scale the count by the number of repetitions
    3. Add n_i / N_i (zero when N_i is infinite)

    Args:
        cycles: Cycle table from ``count_cycles``
        detail_category: Detail category Δσc (> 0)
        config: Analysis options (defaults apply when omitted)

    Returns:
        DamageResult with total damage and per-cycle details

    Raises:
        DomainError: If the detail category is not positive
        UnsupportedStressTypeError: If the configured stress type is unknown

    Examples:
        >>> from fatdamage.core.rainflow import count_cycles
        >>> cycles = count_cycles([0, 200, 0])
        >>> calculate_miner_damage(cycles, 160).total_damage > 0
        True
    """
    config = config or DamageConfig()

    curve = create_curve(
        float(detail_category) / config.strength_safety_factor,
        config.curve_params(),
    )

    if not cycles:
        return DamageResult(
            total_damage=0.0,
            remaining_life_fraction=1.0,
            is_critical=False,
        )

    applied_ranges = np.array([c.range for c in cycles], dtype=float) * config.amplitude_safety_factor
    applied_counts = np.array([c.count for c in cycles], dtype=float) * config.repetitions
    endurances = np.atleast_1d(curve.calculate_cycles_to_failure(applied_ranges))

    # Unapplied cycles and infinite endurance contribute nothing; an endurance
    # of 0 (overflowed range) makes any applied cycle infinitely damaging
    contributions = np.zeros(len(cycles))
    damaging = np.isfinite(endurances) & (applied_counts > 0)
    with np.errstate(divide="ignore"):
        contributions[damaging] = applied_counts[damaging] / endurances[damaging]

    total_damage = float(np.sum(contributions))
    infinite = np.isinf(contributions)
    if infinite.any():
        # Share the infinite total among the infinite contributions
        fractions = infinite / np.count_nonzero(infinite)
    elif total_damage > 0:
        fractions = contributions / total_damage
    else:
        fractions = np.zeros(len(cycles))

    details = []
    for i, cycle in enumerate(cycles):
        details.append({
            'cycle_index': i,
            'range': cycle.range,
            'mean': cycle.mean,
            'count': cycle.count,
            'applied_range': float(applied_ranges[i]),
            'applied_count': float(applied_counts[i]),
            'cycles_to_failure': float(endurances[i]),
            'damage_contribution': float(contributions[i]),
            'damage_fraction': float(fractions[i])
        })

    logger.debug(
        f"Miner damage {total_damage:.4e} from {len(cycles)} cycle records "
        f"({curve.get_model_name()}, Δσc={detail_category:g}, "
        f"γFf={config.amplitude_safety_factor:g}, γMf={config.strength_safety_factor:g}, "
        f"repetitions={config.repetitions:g})"
    )

    return DamageResult(
        total_damage=total_damage,
        remaining_life_fraction=max(0.0, 1.0 - total_damage),
        is_critical=total_damage >= 1.0,
        details=details,
        cycles=list(cycles),
    )


def analyze_history(
    history: Samples,
    detail_category: float,
    config: Optional[DamageConfig] = None,
) -> DamageResult:
    """
    Run the complete fatigue analysis of a stress-time history.

    Extracts the turning points, counts the rainflow cycles and
    accumulates their damage.

    Args:
        history: Stress-time history (at least 2 samples)
        detail_category: Detail category Δσc (> 0)
        config: Analysis options

    Returns:
        DamageResult including the extrema and the cycle table

    Raises:
        InvalidInputError: If the history has fewer than 2 samples
        DomainError: If the detail category is not positive
    """
    rainflow = rainflow_counting(history)
    result = calculate_miner_damage(rainflow.cycles, detail_category, config)
    result.extrema = rainflow.extrema
    return result


def accumulate_damage(
    history: Samples,
    detail_category: float,
    config: Optional[DamageConfig] = None,
) -> float:
    """
    Linearly accumulated fatigue damage of a stress-time history.

    The returned value is not interpreted: damage >= 1 predicts failure.

    Examples:
        >>> accumulate_damage([0, 200, 0, 200, 0], 160, DamageConfig(repetitions=0))
        0.0
    """
    return analyze_history(history, detail_category, config).total_damage


def repetitions_to_failure(damage: float, repetitions: Union[int, float] = 1) -> float:
    """
    Number of history repetitions until the damage sum reaches 1.

    Args:
        damage: Damage accumulated over ``repetitions`` repetitions
        repetitions: Repetitions the damage was computed for

    Returns:
        Repetitions to failure, or inf when no damage accumulates

    Raises:
        DomainError: If damage is negative or repetitions is not positive
    """
    if damage < 0:
        raise DomainError(f"Damage must be non-negative, got {damage}")
    if repetitions <= 0:
        raise DomainError(f"Repetitions must be positive, got {repetitions}")

    if damage == 0:
        return math.inf

    return repetitions / damage
