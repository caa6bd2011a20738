"""
Exercise and training-day models produced by the program catalog.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from domain.models.prescription import FreeTextSet, PrescribedSet


class Tier(str, Enum):
    """Role of a lift within a session."""

    T1 = "T1"  # Primary, heavy
    T2 = "T2"  # Secondary volume / back-off work
    T2A = "T2a"
    T2B = "T2b"
    T3 = "T3"  # Accessory


class Exercise(BaseModel):
    """A single exercise prescription within a training day."""

    name: str = Field(..., min_length=1)
    tier: Optional[Tier] = None
    sets: Union[List[PrescribedSet], FreeTextSet]

    model_config = {"frozen": True}

    @property
    def is_free_text(self) -> bool:
        """True when the exercise carries an unstructured accessory prescription."""
        return isinstance(self.sets, FreeTextSet)

    @property
    def set_count(self) -> int:
        return 0 if self.is_free_text else len(self.sets)

    def as_wire(self) -> Dict[str, Any]:
        if self.is_free_text:
            sets: Union[str, List[Dict[str, Any]]] = self.sets.as_wire()
        else:
            sets = [s.as_wire() for s in self.sets]
        return {
            "name": self.name,
            "tier": self.tier.value if self.tier else None,
            "sets": sets,
        }


class WorkoutDay(BaseModel):
    """One training session definition."""

    day: str
    focus: str
    exercises: List[Exercise] = Field(default_factory=list)

    model_config = {"frozen": True}

    def get_exercise(self, name: str) -> Optional[Exercise]:
        """Return the first exercise with an exactly matching name."""
        return next((e for e in self.exercises if e.name == name), None)

    def as_wire(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "focus": self.focus,
            "exercises": [e.as_wire() for e in self.exercises],
        }
