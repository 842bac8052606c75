"""
Endurance curve and damage accumulation endpoints.

Provides endpoints for:
- S-N curve evaluation (EN 1993-1-9 direct and shear curves)
- Palmgren-Miner damage of a stress-time history
- Registered curve listing
"""
from fastapi import APIRouter, HTTPException, status
from typing import List, Optional
import math
import numpy as np
import logging

from fatdamage.api.rainflow import check_history_length
from fatdamage.core.curves import CurveFactory, CurveParams, create_curve
from fatdamage.core.damage_accumulation import (
    DamageConfig,
    analyze_history,
    repetitions_to_failure,
)
from fatdamage.core.exceptions import FatigueError
from fatdamage.schemas.damage import (
    CurveInfo,
    DamageDetail,
    DamageRequest,
    DamageResponse,
    EndurancePoint,
    EnduranceRequest,
    EnduranceResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/damage", tags=["damage"])


def finite_or_none(value: float) -> Optional[float]:
    """JSON has no infinity; infinite values are reported as null."""
    return float(value) if math.isfinite(value) else None


@router.post("/endurance", response_model=EnduranceResponse)
async def evaluate_endurance_curve(request: EnduranceRequest):
    """
    Evaluate the design S-N curve at the given stress ranges.

    Stress ranges below the cut-off limit have infinite life.
    """
    try:
        params = CurveParams(
            stress_type=request.stress_type,
            first_slope=request.first_slope,
            second_slope=request.second_slope,
            shear_slope=request.shear_slope,
        )
        curve = create_curve(request.detail_category, params)
        endurances = np.atleast_1d(curve.calculate_cycles_to_failure(request.stress_ranges))

        points = [
            EndurancePoint(
                stress_range=float(s),
                cycles_to_failure=finite_or_none(n),
                infinite_life=bool(np.isinf(n)),
            )
            for s, n in zip(request.stress_ranges, endurances)
        ]

        return EnduranceResponse(
            curve=curve.get_model_name(),
            equation=curve.get_equation(),
            points=points
        )

    except FatigueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Error evaluating endurance curve: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Endurance evaluation failed: {str(e)}"
        )


@router.post("/accumulate", response_model=DamageResponse)
async def accumulate_history_damage(request: DamageRequest):
    """
    Calculate cumulative damage of a history using Miner's linear rule.

    Total damage = Σ (n_i / N_i) where failure occurs when damage >= 1.
    """
    try:
        check_history_length(request.history)

        config = DamageConfig(
            stress_type=request.stress_type,
            first_slope=request.first_slope,
            second_slope=request.second_slope,
            shear_slope=request.shear_slope,
            amplitude_safety_factor=request.amplitude_safety_factor,
            strength_safety_factor=request.strength_safety_factor,
            repetitions=request.repetitions,
        )
        result = analyze_history(request.history, request.detail_category, config)

        reps_to_failure = None
        if request.repetitions > 0:
            reps_to_failure = finite_or_none(
                repetitions_to_failure(result.total_damage, request.repetitions)
            )

        details = None
        if request.include_details:
            details = [
                DamageDetail(
                    stress_range=d['range'],
                    mean_value=d['mean'],
                    cycles=d['count'],
                    applied_range=d['applied_range'],
                    applied_cycles=d['applied_count'],
                    cycles_to_failure=finite_or_none(d['cycles_to_failure']),
                    damage_ratio=finite_or_none(d['damage_contribution']),
                )
                for d in result.details
            ]

        return DamageResponse(
            total_damage=finite_or_none(result.total_damage),
            infinite_damage=math.isinf(result.total_damage),
            remaining_life_fraction=result.remaining_life_fraction,
            is_critical=result.is_critical,
            repetitions_to_failure=reps_to_failure,
            cycle_records=len(result.cycles),
            details=details
        )

    except HTTPException:
        raise
    except FatigueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Error in damage accumulation: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Damage accumulation failed: {str(e)}"
        )


@router.get("/curves", response_model=List[CurveInfo])
async def list_curves(detail_category: float = 160.0):
    """List the registered endurance curves for a detail category."""
    try:
        curves = []
        for stress_type in CurveFactory.list_stress_types():
            curve = create_curve(detail_category, CurveParams(stress_type=stress_type))
            curves.append(CurveInfo(
                stress_type=stress_type,
                model_name=curve.get_model_name(),
                equation=curve.get_equation(),
                parameters=curve.get_parameters_info(),
            ))
        return curves

    except FatigueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
