"""
Sheiko #29 (simplified).

Three days per week of submaximal ladders off the raw one-rep max. Each
week has its own squat, bench and deadlift ladder; days take either the
whole ladder or its first few rungs.
"""

from typing import Dict, List, NamedTuple

from backend.core.programs.base import (
    ProgramDefinition,
    ProgramLevel,
    Scheme,
    accessory,
    day,
    lift,
    scheme_sets,
)
from domain.models import RepMaxes, WorkoutDay


class WeekLadders(NamedTuple):
    squat: Scheme
    bench: Scheme
    deadlift: Scheme


WEEK_LADDERS: Dict[int, WeekLadders] = {
    1: WeekLadders(
        squat=((0.50, 5), (0.60, 4), (0.70, 3), (0.75, 3), (0.80, 2), (0.80, 2), (0.75, 4)),
        bench=((0.50, 5), (0.60, 4), (0.70, 3), (0.75, 3), (0.80, 3), (0.80, 3), (0.75, 4)),
        deadlift=((0.50, 3), (0.60, 3), (0.70, 3), (0.75, 2), (0.80, 2)),
    ),
    2: WeekLadders(
        squat=((0.50, 5), (0.60, 4), (0.70, 3), (0.75, 3), (0.80, 3), (0.85, 2), (0.80, 3)),
        bench=((0.50, 5), (0.60, 4), (0.70, 3), (0.75, 3), (0.80, 3), (0.85, 2), (0.80, 3)),
        deadlift=((0.50, 3), (0.60, 3), (0.70, 3), (0.80, 2), (0.85, 2)),
    ),
    3: WeekLadders(
        squat=((0.50, 5), (0.60, 4), (0.70, 3), (0.80, 3), (0.85, 2), (0.90, 1), (0.85, 2)),
        bench=((0.50, 5), (0.60, 4), (0.70, 3), (0.80, 3), (0.85, 2), (0.90, 1), (0.85, 2)),
        deadlift=((0.50, 3), (0.60, 3), (0.70, 2), (0.80, 2), (0.85, 1), (0.90, 1)),
    ),
    4: WeekLadders(
        squat=((0.50, 5), (0.60, 4), (0.70, 3), (0.75, 3), (0.70, 4)),
        bench=((0.50, 5), (0.60, 4), (0.70, 3), (0.75, 3), (0.70, 4)),
        deadlift=((0.50, 3), (0.60, 3), (0.70, 2), (0.75, 2)),
    ),
}

# Rungs of the ladder used on the secondary lift of a day
DAY1_BENCH_RUNGS = 5
DAY2_BENCH_RUNGS = 4
DAY3_SQUAT_RUNGS = 5


def build_sheiko(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    ladders = WEEK_LADDERS[week]

    return [
        day("Day 1", "Squat/Bench", [
            lift("Squat", scheme_sets(maxes.squat, ladders.squat, increment)),
            lift("Bench Press", scheme_sets(maxes.bench, ladders.bench[:DAY1_BENCH_RUNGS], increment)),
            accessory("Dumbbell Flyes", "4x8"),
            accessory("Good Mornings", "3x6"),
        ]),
        day("Day 2", "Deadlift/Bench", [
            lift("Deadlift", scheme_sets(maxes.deadlift, ladders.deadlift, increment)),
            lift("Bench Press", scheme_sets(maxes.bench, ladders.bench[:DAY2_BENCH_RUNGS], increment)),
            accessory("Dumbbell Row", "4x8"),
            accessory("Tricep Extensions", "3x10"),
        ]),
        day("Day 3", "Squat/Bench", [
            lift("Squat", scheme_sets(maxes.squat, ladders.squat[:DAY3_SQUAT_RUNGS], increment)),
            lift("Bench Press", scheme_sets(maxes.bench, ladders.bench, increment)),
            accessory("Close Grip Bench", "3x6"),
            accessory("Ab Work", "3x15"),
        ]),
    ]


SHEIKO_29 = ProgramDefinition(
    key="sheiko29",
    name="Sheiko #29",
    level=ProgramLevel.ADVANCED,
    days_per_week=3,
    cycle_length="4 weeks",
    has_weeks=True,
    total_weeks=4,
    description=(
        "Russian powerlifting prep program by Boris Sheiko. High frequency, "
        "submaximal weights. For experienced lifters only."
    ),
    build=build_sheiko,
)
