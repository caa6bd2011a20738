"""
Schemas for the program catalog and estimation endpoints.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from domain.models import RepMaxes


class ProgramSummary(BaseModel):
    """Catalog metadata for one program."""
    key: str
    name: str
    level: str
    days_per_week: int
    cycle_length: str
    description: str
    has_weeks: bool
    total_weeks: int
    uses_training_max: bool


class GenerateWorkoutsRequest(BaseModel):
    """Request body for POST /programs/{key}/workouts."""
    rep_maxes: RepMaxes
    week: Optional[int] = Field(
        default=None,
        description="1-based week; omitted means week 1, out-of-range weeks are clamped",
    )


class GenerateWorkoutsResponse(BaseModel):
    """Generated training days in the {weight, reps} wire format."""
    program_key: str
    week: int
    days: List[Dict[str, Any]]


class NextDayResponse(BaseModel):
    program_key: str
    day: str


class OneRepMaxRequest(BaseModel):
    """Request body for POST /estimates/one-rep-max."""
    weight: float = Field(..., ge=0)
    reps: int = Field(..., ge=0)


class OneRepMaxResponse(BaseModel):
    one_rep_max: float
    training_max: float
