"""
Pydantic schemas for endurance curve evaluation and damage accumulation.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class CurveOptions(BaseModel):
    """S-N curve selection shared by endurance and damage requests."""
    stress_type: str = Field(default="direct", description="Stress type: 'direct' or 'shear'")
    first_slope: float = Field(default=3.0, gt=0, description="First slope m1 of the direct curve")
    second_slope: float = Field(default=5.0, gt=0, description="Second slope m2 of the direct curve")
    shear_slope: float = Field(default=5.0, gt=0, description="Slope m of the shear curve")


class EnduranceRequest(CurveOptions):
    """Request schema for endurance curve evaluation."""
    stress_ranges: List[float] = Field(..., min_length=1, description="Stress ranges to evaluate")
    detail_category: float = Field(..., description="Detail category (EN 1993-1-9)")


class EndurancePoint(BaseModel):
    """Endurance of a single stress range."""
    stress_range: float
    cycles_to_failure: Optional[float] = Field(None, description="Cycles to failure, null when infinite")
    infinite_life: bool = Field(..., description="True below the cut-off limit")


class EnduranceResponse(BaseModel):
    """Response schema for endurance curve evaluation."""
    curve: str = Field(..., description="Curve name")
    equation: str = Field(..., description="Curve equation")
    points: List[EndurancePoint]


class CurveInfo(BaseModel):
    """Description of a registered endurance curve."""
    stress_type: str
    model_name: str
    equation: str
    parameters: Dict[str, Any] = Field(default_factory=dict)


class DamageRequest(CurveOptions):
    """Request schema for fatigue damage of a stress-time history."""
    history: List[float] = Field(..., description="Stress-time history (at least 2 samples)")
    detail_category: float = Field(..., description="Detail category (EN 1993-1-9)")
    amplitude_safety_factor: float = Field(default=1.0, ge=0, description="Partial factor γFf for stress ranges")
    strength_safety_factor: float = Field(default=1.0, gt=0, description="Partial factor γMf for fatigue strength")
    repetitions: float = Field(default=1.0, ge=0, description="Number of times the history is repeated")
    include_details: bool = Field(default=False, description="Return per-cycle contributions")


class DamageDetail(BaseModel):
    """Damage contribution of a single cycle record."""
    stress_range: float
    mean_value: float
    cycles: float
    applied_range: float
    applied_cycles: float
    cycles_to_failure: Optional[float] = Field(None, description="Null when infinite")
    damage_ratio: Optional[float] = Field(None, description="Null when infinite")


class DamageResponse(BaseModel):
    """Response schema for damage accumulation."""
    total_damage: Optional[float] = Field(None, description="Palmgren-Miner damage sum, null when infinite")
    infinite_damage: bool = Field(False, description="True when a cycle has zero endurance and the damage sum is infinite")
    remaining_life_fraction: float
    is_critical: bool = Field(..., description="True when damage >= 1")
    repetitions_to_failure: Optional[float] = Field(None, description="Null when no damage accumulates")
    cycle_records: int
    details: Optional[List[DamageDetail]] = None
