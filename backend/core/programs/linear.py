"""
Novice linear progressions: StrongLifts 5x5 and Greyskull LP.

Both start well below the lifter's max and rely on adding weight each
session, which the lifter does by hand; the engine only supplies the
starting prescription, so neither program depends on the week.
"""

from typing import Dict, List

from backend.core.programs.base import (
    ProgramDefinition,
    ProgramLevel,
    day,
    lift,
    repeat_sets,
    weight_at,
)
from domain.models import BodyweightSet, PrescribedSet, RepMaxes, WorkoutDay

# StrongLifts starts at half the estimated max, but never below the
# empty-bar (or small-plate) weight the program itself prescribes.
SL_START_FRACTION = 0.5
SL_FLOORS: Dict[str, float] = {
    "squat": 45,
    "bench": 45,
    "ohp": 45,
    "row": 65,
    "deadlift": 95,
}

GREYSKULL_START_FRACTION = 0.65


def stronglifts_weights(maxes: RepMaxes, increment: float) -> Dict[str, float]:
    """Starting weight per lift. Rows are keyed off the bench max."""
    sources = {
        "squat": maxes.squat,
        "bench": maxes.bench,
        "row": maxes.bench,
        "ohp": maxes.ohp,
        "deadlift": maxes.deadlift,
    }
    return {
        name: max(SL_FLOORS[name], weight_at(one_rm, SL_START_FRACTION, increment))
        for name, one_rm in sources.items()
    }


def build_stronglifts(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    w = stronglifts_weights(maxes, increment)
    return [
        day(
            "Workout A",
            "Squat/Bench/Row",
            [
                lift("Squat", repeat_sets(w["squat"], 5, 5)),
                lift("Bench Press", repeat_sets(w["bench"], 5, 5)),
                lift("Barbell Row", repeat_sets(w["row"], 5, 5)),
            ],
        ),
        day(
            "Workout B",
            "Squat/OHP/DL",
            [
                lift("Squat", repeat_sets(w["squat"], 5, 5)),
                lift("Overhead Press", repeat_sets(w["ohp"], 5, 5)),
                lift("Deadlift", repeat_sets(w["deadlift"], 5, 1)),
            ],
        ),
    ]


def _two_plus_amrap(weight: float) -> List[PrescribedSet]:
    return repeat_sets(weight, 5, 2) + repeat_sets(weight, "5+", 1)


def build_greyskull(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    squat = weight_at(maxes.squat, GREYSKULL_START_FRACTION, increment)
    bench = weight_at(maxes.bench, GREYSKULL_START_FRACTION, increment)
    row = weight_at(maxes.bench, GREYSKULL_START_FRACTION, increment)
    ohp = weight_at(maxes.ohp, GREYSKULL_START_FRACTION, increment)
    deadlift = weight_at(maxes.deadlift, GREYSKULL_START_FRACTION, increment)

    chin_ups = [
        BodyweightSet(reps=5),
        BodyweightSet(reps=5),
        BodyweightSet(reps=5, amrap=True),
    ]

    return [
        day(
            "Workout A",
            "Bench/Row/Squat",
            [
                lift("Bench Press", _two_plus_amrap(bench)),
                lift("Barbell Row", _two_plus_amrap(row)),
                lift("Squat", _two_plus_amrap(squat)),
            ],
        ),
        day(
            "Workout B",
            "OHP/Chin-ups/Deadlift",
            [
                lift("Overhead Press", _two_plus_amrap(ohp)),
                lift("Chin-ups", chin_ups),
                lift("Deadlift", repeat_sets(deadlift, "5+", 1)),
            ],
        ),
    ]


STRONGLIFTS_5X5 = ProgramDefinition(
    key="sl5x5",
    name="StrongLifts 5x5",
    level=ProgramLevel.BEGINNER,
    days_per_week=3,
    cycle_length="1 week",
    description=(
        "The quintessential beginner program. Simple, effective, builds "
        "foundation. Add 5 lbs every successful workout."
    ),
    build=build_stronglifts,
)

GREYSKULL_LP = ProgramDefinition(
    key="greyskull",
    name="Greyskull LP",
    level=ProgramLevel.BEGINNER,
    days_per_week=3,
    cycle_length="1 week",
    description=(
        "Linear progression with AMRAP final sets. Reset at 90% after stalls. "
        "Great for flexible beginners."
    ),
    build=build_greyskull,
)
