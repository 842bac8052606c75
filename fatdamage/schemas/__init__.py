"""
Pydantic schemas package.
"""
from fatdamage.schemas.rainflow import (
    ExtremaRequest,
    ExtremaResponse,
    CycleCount,
    RainflowRequest,
    RainflowResponse,
    CycleMatrixRequest,
    CycleMatrixResponse
)
from fatdamage.schemas.damage import (
    CurveOptions,
    EnduranceRequest,
    EndurancePoint,
    EnduranceResponse,
    CurveInfo,
    DamageRequest,
    DamageDetail,
    DamageResponse
)

__all__ = [
    "ExtremaRequest",
    "ExtremaResponse",
    "CycleCount",
    "RainflowRequest",
    "RainflowResponse",
    "CycleMatrixRequest",
    "CycleMatrixResponse",
    "CurveOptions",
    "EnduranceRequest",
    "EndurancePoint",
    "EnduranceResponse",
    "CurveInfo",
    "DamageRequest",
    "DamageDetail",
    "DamageResponse"
]
