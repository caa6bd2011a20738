"""
Building blocks shared by catalog programs.

A program is a pure function ``(rep_maxes, week, increment) -> List[WorkoutDay]``
wrapped in a ProgramDefinition carrying its catalog metadata. Programs read
from their own declarative tables; rep targets in those tables use the
notation of the printed programs:

    5       fixed reps            -> NumericSet
    "5+"    AMRAP past 5 reps     -> AmrapSet
    "10RM"  work up to a 10RM     -> RepMaxSet
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, Union

from backend.core.rounding import DEFAULT_INCREMENT, Number, round_to_increment
from domain.models import (
    AmrapSet,
    Exercise,
    FreeTextSet,
    NumericSet,
    PrescribedSet,
    RepMaxes,
    RepMaxSet,
    Tier,
    WorkoutDay,
)

RepTarget = Union[int, str]
Scheme = Sequence[Tuple[float, RepTarget]]
ProgramBuilder = Callable[[RepMaxes, int, float], List[WorkoutDay]]

_AMRAP = re.compile(r"^(\d+)\+$")
_REP_MAX = re.compile(r"^(\d+)RM$")


class ProgramLevel(str, Enum):
    """Experience level a program is written for."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def resolve_week(week: Optional[int], total_weeks: int) -> int:
    """
    Map a requested week onto a week the program defines.

    None means week 1. Weeks below 1 run week 1; weeks past the end repeat
    the last defined week.
    """
    if week is None:
        return 1
    return min(max(int(week), 1), max(total_weeks, 1))


@dataclass(frozen=True)
class ProgramDefinition:
    """Catalog entry for one periodized program."""

    key: str
    name: str
    level: ProgramLevel
    days_per_week: int
    cycle_length: str
    description: str
    build: ProgramBuilder
    has_weeks: bool = False
    total_weeks: int = 1
    uses_training_max: bool = False

    def resolve_week(self, week: Optional[int]) -> int:
        """Week actually generated for a requested week (1 for week-invariant programs)."""
        if not self.has_weeks:
            return 1
        return resolve_week(week, self.total_weeks)

    def generate(
        self,
        rep_maxes: RepMaxes,
        week: Optional[int] = None,
        increment: float = DEFAULT_INCREMENT,
    ) -> List[WorkoutDay]:
        """Generate every training day for the given maxes and week."""
        return self.build(rep_maxes, self.resolve_week(week), increment)


# =============================================================================
# Set helpers
# =============================================================================


def weight_at(base: float, pct: float, increment: float = DEFAULT_INCREMENT) -> Number:
    """Percentage of a reference weight, rounded to the plate increment."""
    return round_to_increment(base * pct, increment)


def prescribe(weight: float, reps: RepTarget) -> PrescribedSet:
    """Build the set variant matching a rep target."""
    if isinstance(reps, int):
        return NumericSet(weight=weight, reps=reps)

    amrap = _AMRAP.match(reps)
    if amrap:
        return AmrapSet(weight=weight, min_reps=int(amrap.group(1)))

    rep_max = _REP_MAX.match(reps)
    if rep_max:
        return RepMaxSet(weight=weight, rep_target=int(rep_max.group(1)))

    raise ValueError(f"Unrecognised rep target: {reps!r}")


def scheme_sets(
    base: float,
    scheme: Scheme,
    increment: float = DEFAULT_INCREMENT,
) -> List[PrescribedSet]:
    """One set per (percentage, rep target) row, each a percentage of ``base``."""
    return [prescribe(weight_at(base, pct, increment), reps) for pct, reps in scheme]


def repeat_sets(weight: float, reps: RepTarget, count: int) -> List[PrescribedSet]:
    """``count`` identical sets."""
    return [prescribe(weight, reps) for _ in range(count)]


def lift(name: str, sets: List[PrescribedSet], tier: Tier = Tier.T1) -> Exercise:
    return Exercise(name=name, tier=tier, sets=sets)


def accessory(name: str, text: str, tier: Tier = Tier.T3) -> Exercise:
    return Exercise(name=name, tier=tier, sets=FreeTextSet(text=text))


def day(label: str, focus: str, exercises: List[Exercise]) -> WorkoutDay:
    return WorkoutDay(day=label, focus=focus, exercises=exercises)
