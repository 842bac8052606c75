"""
Rainflow cycle counting endpoints.

Provides endpoints for:
- Turning-point extraction from stress-time histories
- Rainflow cycle counting (ASTM E1049)
- Range/mean cycle matrix computation
"""
from fastapi import APIRouter, HTTPException, status
from typing import List
import numpy as np
import logging

from fatdamage.config import get_settings
from fatdamage.core.exceptions import FatigueError
from fatdamage.core.extrema import find_extrema
from fatdamage.core.rainflow import (
    Cycle,
    rainflow_counting,
    get_cycle_matrix,
)
from fatdamage.schemas.rainflow import (
    ExtremaRequest,
    ExtremaResponse,
    CycleCount,
    RainflowRequest,
    RainflowResponse,
    CycleMatrixRequest,
    CycleMatrixResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rainflow", tags=["rainflow"])


def check_history_length(history: List[float]) -> None:
    """Reject histories longer than the configured limit."""
    limit = get_settings().max_history_samples
    if len(history) > limit:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"History has {len(history)} samples, the limit is {limit}"
        )


@router.post("/extrema", response_model=ExtremaResponse)
async def extract_extrema_points(request: ExtremaRequest):
    """
    Extract peak and valley points from a stress-time history.

    The first and last samples are always kept.
    """
    try:
        check_history_length(request.history)
        extrema = find_extrema(request.history)

        return ExtremaResponse(
            indices=extrema.indices,
            values=extrema.values,
            count=len(extrema),
            reduction=len(request.history) - len(extrema)
        )

    except HTTPException:
        raise
    except FatigueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Error extracting extrema: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Extrema extraction failed: {str(e)}"
        )


@router.post("/count", response_model=RainflowResponse)
async def count_cycles(request: RainflowRequest):
    """
    Perform rainflow cycle counting on a stress-time history.

    Implements the ASTM E1049 four-point rainflow counting method.
    Returns the cycle table, the turning points and summary statistics.
    """
    try:
        check_history_length(request.history)
        result = rainflow_counting(request.history)

        cycles = [
            CycleCount(
                stress_range=cycle.range,
                mean_value=cycle.mean,
                cycles=cycle.count
            )
            for cycle in result.cycles
        ]

        ranges = np.array([cycle.range for cycle in result.cycles])
        max_range = float(ranges.max()) if len(ranges) > 0 else 0.0

        summary = {
            "cycle_records": len(result.cycles),
            "full_cycles": sum(1 for c in result.cycles if c.count == 1.0),
            "half_cycles": sum(1 for c in result.cycles if c.count == 0.5),
            "mean_range": float(np.mean(ranges)) if len(ranges) > 0 else 0.0,
            "std_range": float(np.std(ranges)) if len(ranges) > 1 else 0.0,
            "reversals": len(result.extrema),
            "residual_points": len(result.residual),
        }

        return RainflowResponse(
            cycles=cycles,
            extrema=result.extrema,
            residual=result.residual,
            total_cycles=result.total_cycles,
            max_range=max_range,
            summary=summary
        )

    except HTTPException:
        raise
    except FatigueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Error in rainflow counting: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Rainflow counting failed: {str(e)}"
        )


@router.post("/matrix", response_model=CycleMatrixResponse)
async def get_cycle_matrix_data(request: CycleMatrixRequest):
    """
    Generate the range/mean cycle matrix of a cycle table.

    Returns 2D histogram data for heatmap rendering.
    """
    try:
        default_bins = get_settings().default_matrix_bins
        range_bins = request.range_bins if request.range_bins is not None else default_bins
        mean_bins = request.mean_bins if request.mean_bins is not None else default_bins

        core_cycles = [
            Cycle(range=cycle.stress_range, mean=cycle.mean_value, count=cycle.cycles)
            for cycle in request.cycles
        ]

        result = get_cycle_matrix(core_cycles, bins=(range_bins, mean_bins))

        return CycleMatrixResponse(
            matrix=result.matrix.tolist(),
            range_edges=result.range_edges.tolist(),
            mean_edges=result.mean_edges.tolist(),
            total_cycles=float(result.matrix.sum())
        )

    except Exception as e:
        logger.error(f"Error generating cycle matrix: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Cycle matrix generation failed: {str(e)}"
        )
