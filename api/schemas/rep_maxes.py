"""
Schemas for saved rep max endpoints.
"""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field

from domain.models import Lift, StoredRepMax


class RepMaxEntry(BaseModel):
    """One lift in POST /user/rep-maxes; ``oneRM`` is estimated when omitted."""
    exercise: Lift
    weight: float = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    one_rm: Optional[float] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("one_rm", "oneRM"),
    )


class SaveRepMaxesRequest(BaseModel):
    rep_maxes: List[RepMaxEntry] = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("rep_maxes", "repMaxes"),
    )


class RepMaxResponse(BaseModel):
    exercise: str
    weight: float
    reps: int
    one_rm: float

    @classmethod
    def from_domain(cls, rep_max: StoredRepMax) -> "RepMaxResponse":
        return cls(
            exercise=rep_max.exercise,
            weight=rep_max.weight,
            reps=rep_max.reps,
            one_rm=rep_max.one_rm,
        )


class UserWorkoutsResponse(BaseModel):
    """The selected program's week, generated from the user's saved maxes."""
    program_key: str
    week: int
    days: List[Dict[str, Any]]
