"""
Prescribed set value objects.

A prescribed set is a closed tagged variant discriminated on ``kind``:

- NumericSet: fixed weight for a fixed rep count (optionally annotated, e.g. "1 PR")
- BodyweightSet: no external load ("BW"), fixed reps or AMRAP
- AmrapSet: fixed weight, as many reps as possible past a minimum ("5+")
- RepMaxSet: work up to a rep max at a target weight ("10RM")
- FreeTextSet: unstructured accessory prescription ("3x10"), exercise level

Every variant renders to the ``{weight, reps}`` wire pair via ``as_wire()``.
"""

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field


BODYWEIGHT = "BW"


def _wire_weight(weight: float) -> Union[int, float]:
    """Whole-number loads go out as ints (255, not 255.0)."""
    return int(weight) if float(weight).is_integer() else weight


class NumericSet(BaseModel):
    """A set with a numeric weight and a fixed rep count."""

    kind: Literal["numeric"] = "numeric"
    weight: float = Field(..., ge=0, description="Load in the user's unit")
    reps: int = Field(..., ge=1)
    note: Optional[str] = Field(
        default=None,
        description="Annotation rendered after the rep count (e.g. 'PR', '(opener)')",
    )

    model_config = {"frozen": True}

    @property
    def reps_display(self) -> Union[int, str]:
        if self.note:
            return f"{self.reps} {self.note}"
        return self.reps

    def as_wire(self) -> Dict[str, Any]:
        return {"weight": _wire_weight(self.weight), "reps": self.reps_display}


class BodyweightSet(BaseModel):
    """A set performed with body weight only."""

    kind: Literal["bodyweight"] = "bodyweight"
    reps: int = Field(..., ge=1)
    amrap: bool = False

    model_config = {"frozen": True}

    @property
    def weight(self) -> str:
        return BODYWEIGHT

    @property
    def reps_display(self) -> Union[int, str]:
        return f"{self.reps}+" if self.amrap else self.reps

    def as_wire(self) -> Dict[str, Any]:
        return {"weight": BODYWEIGHT, "reps": self.reps_display}


class AmrapSet(BaseModel):
    """A terminal set taken for as many reps as possible."""

    kind: Literal["amrap"] = "amrap"
    weight: float = Field(..., ge=0)
    min_reps: int = Field(..., ge=1, description="Rep floor before the '+' marker")

    model_config = {"frozen": True}

    @property
    def reps_display(self) -> str:
        return f"{self.min_reps}+"

    def as_wire(self) -> Dict[str, Any]:
        return {"weight": _wire_weight(self.weight), "reps": self.reps_display}


class RepMaxSet(BaseModel):
    """Work up to a rep max for ``rep_target`` reps."""

    kind: Literal["rep_max"] = "rep_max"
    weight: float = Field(..., ge=0)
    rep_target: int = Field(..., ge=1)

    model_config = {"frozen": True}

    @property
    def reps_display(self) -> str:
        return f"{self.rep_target}RM"

    def as_wire(self) -> Dict[str, Any]:
        return {"weight": _wire_weight(self.weight), "reps": self.reps_display}


class FreeTextSet(BaseModel):
    """
    Unstructured accessory prescription.

    Used in place of a set list on an exercise (e.g. "3x10", "8 sets @ 50-70%").
    These are not tracked set by set.
    """

    kind: Literal["free_text"] = "free_text"
    text: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    def as_wire(self) -> str:
        return self.text


PrescribedSet = Annotated[
    Union[NumericSet, BodyweightSet, AmrapSet, RepMaxSet],
    Field(discriminator="kind"),
]
