"""
RepMaxes value object and the per-lift rep maxes users save.
"""

from typing import Iterable, Literal, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RepMaxes(BaseModel):
    """
    Estimated one-rep maxes for the four primary barbell lifts.

    Immutable input to every program in the catalog.

    Examples:
        >>> maxes = RepMaxes(squat=300, bench=200, deadlift=350, ohp=120)
        >>> maxes.squat
        300.0
    """

    squat: float = Field(default=0, ge=0)
    bench: float = Field(default=0, ge=0)
    deadlift: float = Field(default=0, ge=0)
    ohp: float = Field(default=0, ge=0)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"squat": 300, "bench": 200, "deadlift": 350, "ohp": 120},
            ]
        },
    }


Lift = Literal["squat", "bench", "deadlift", "ohp"]
LIFTS: Tuple[str, ...] = ("squat", "bench", "deadlift", "ohp")


class StoredRepMax(BaseModel):
    """
    A lifter's saved rep max for one primary lift.

    ``weight`` x ``reps`` is what was actually lifted; ``one_rm`` is the
    estimated one-rep max programs are generated from.
    """

    exercise: Lift
    weight: float = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    one_rm: float = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("one_rm", "oneRM"),
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)


def rep_maxes_from_stored(stored: Iterable[StoredRepMax]) -> Optional[RepMaxes]:
    """
    Combine saved rep maxes into program input.

    Returns None until all four lifts have been saved.
    """
    by_lift = {rm.exercise: rm.one_rm for rm in stored}
    if any(lift not in by_lift for lift in LIFTS):
        return None
    return RepMaxes(**by_lift)
