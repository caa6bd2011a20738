"""
nSuns 5/3/1 LP.

Five days, each a fixed 8-9 set T1 ladder off a 90% training max with an
AMRAP at the top single and on the last set. Progression is driven by the
AMRAP results outside the engine, so the program ignores the week.
"""

from typing import List, Tuple

from backend.core.programs.base import (
    ProgramDefinition,
    ProgramLevel,
    Scheme,
    accessory,
    day,
    lift,
    scheme_sets,
)
from backend.core.rounding import compute_training_max
from domain.models import RepMaxes, Tier, WorkoutDay

BENCH_LADDER: Scheme = (
    (0.75, 5), (0.85, 3), (0.95, "1+"), (0.90, 3), (0.85, 3),
    (0.80, 3), (0.75, 5), (0.70, 5), (0.65, "5+"),
)
SQUAT_LADDER: Scheme = BENCH_LADDER
OHP_LADDER: Scheme = (
    (0.75, 5), (0.85, 3), (0.95, "1+"), (0.90, 3), (0.85, 5),
    (0.80, 3), (0.75, 5), (0.70, 3), (0.65, "5+"),
)
DEADLIFT_LADDER: Scheme = (
    (0.75, 5), (0.85, 3), (0.95, "1+"), (0.90, 3), (0.85, 3),
    (0.80, 3), (0.75, 3), (0.70, "3+"),
)
LIGHT_BENCH_LADDER: Scheme = (
    (0.75, 5), (0.825, 3), (0.90, "1+"), (0.90, 3), (0.90, 3),
    (0.85, 3), (0.80, 5), (0.75, 5), (0.70, "5+"),
)

# (day, focus, T1 lift attribute, T1 name, T1 ladder, T2 name, T2 prescription)
SCHEDULE: Tuple[Tuple[str, str, str, str, Scheme, str, str], ...] = (
    ("Monday", "Bench/OHP", "bench", "Bench (T1)", BENCH_LADDER,
     "OHP (T2)", "8 sets @ 50-70%"),
    ("Tuesday", "Squat/Sumo", "squat", "Squat (T1)", SQUAT_LADDER,
     "Sumo DL (T2)", "8 sets @ 50-70%"),
    ("Wednesday", "OHP/Incline", "ohp", "OHP (T1)", OHP_LADDER,
     "Incline Bench (T2)", "8 sets @ 50-70%"),
    ("Thursday", "Deadlift/FS", "deadlift", "Deadlift (T1)", DEADLIFT_LADDER,
     "Front Squat (T2)", "5 sets @ 55-70%"),
    ("Friday", "Bench/CG", "bench", "Bench (T1)", LIGHT_BENCH_LADDER,
     "Close Grip Bench (T2)", "8 sets @ 50-65%"),
)


def build_nsuns(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    days = []
    for label, focus, attr, t1_name, ladder, t2_name, t2_text in SCHEDULE:
        tm = compute_training_max(getattr(maxes, attr), increment)
        days.append(
            day(
                label,
                focus,
                [
                    lift(t1_name, scheme_sets(tm, ladder, increment)),
                    accessory(t2_name, t2_text, Tier.T2),
                ],
            )
        )
    return days


NSUNS = ProgramDefinition(
    key="nsuns",
    name="nSuns 5/3/1 LP",
    level=ProgramLevel.INTERMEDIATE,
    days_per_week=5,
    cycle_length="1 week",
    uses_training_max=True,
    description=(
        "High volume linear progression based on 5/3/1. Weekly weight increases "
        "based on AMRAP performance."
    ),
    build=build_nsuns,
)
