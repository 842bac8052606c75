"""
Pydantic schemas for extrema extraction and rainflow cycle counting.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class ExtremaRequest(BaseModel):
    """Request schema for turning-point extraction."""
    history: List[float] = Field(..., description="Stress-time history (at least 2 samples)")


class ExtremaResponse(BaseModel):
    """Turning points of a history."""
    indices: List[int] = Field(..., description="Sample indices of the turning points")
    values: List[float] = Field(..., description="Stress values of the turning points")
    count: int = Field(..., description="Number of turning points")
    reduction: int = Field(..., description="Number of samples removed")


class CycleCount(BaseModel):
    """Individual cycle count from rainflow analysis."""
    stress_range: float = Field(..., ge=0, description="Stress range")
    mean_value: float = Field(..., description="Mean stress")
    cycles: float = Field(..., description="Cycle count (0.5 for half cycles, 1.0 for full)")


class RainflowRequest(BaseModel):
    """Request schema for rainflow cycle counting."""
    history: List[float] = Field(..., description="Stress-time history (at least 2 samples)")


class RainflowResponse(BaseModel):
    """Response schema for rainflow analysis."""
    cycles: List[CycleCount] = Field(..., description="Cycle table in extraction order")
    extrema: List[float] = Field(..., description="Turning points of the history")
    residual: List[float] = Field(..., description="Reversals left unclosed on the stack")
    total_cycles: float = Field(..., description="Sum of cycle counts")
    max_range: float = Field(..., description="Maximum stress range")
    summary: dict = Field(default_factory=dict, description="Summary statistics")


class CycleMatrixRequest(BaseModel):
    """Request for the range/mean rainflow histogram."""
    cycles: List[CycleCount]
    range_bins: Optional[int] = Field(default=None, ge=0, le=256, description="Bins along the range axis (0 = automatic)")
    mean_bins: Optional[int] = Field(default=None, ge=0, le=256, description="Bins along the mean axis (0 = automatic)")


class CycleMatrixResponse(BaseModel):
    """Range/mean rainflow histogram."""
    matrix: List[List[float]] = Field(..., description="matrix[i][j]: cycles in range bin i and mean bin j")
    range_edges: List[float]
    mean_edges: List[float]
    total_cycles: float
