"""
Smolov Jr.

Four fixed days per week climbing from 6x6 @ 70% to 10x3 @ 85% of the
bench max, re-run for three weeks with a flat weekly add-on layered on
top of the rounded percentage weight.
"""

from typing import List, Tuple

from backend.core.programs.base import (
    ProgramDefinition,
    ProgramLevel,
    accessory,
    day,
    lift,
    repeat_sets,
    weight_at,
)
from domain.models import RepMaxes, WorkoutDay

# Added to every working set once per elapsed week, after rounding.
# Weights stay off the plate increment whenever the step is.
WEEKLY_STEP = 10

# (day, sets, reps, pct, accessories)
DAYS: Tuple[Tuple[str, int, int, float, Tuple[Tuple[str, str], ...]], ...] = (
    ("Day 1", 6, 6, 0.70, (("Dumbbell Row", "4x8"), ("Face Pulls", "3x15"))),
    ("Day 2", 7, 5, 0.75, (("Lat Pulldown", "4x10"), ("Tricep Pushdowns", "3x12"))),
    ("Day 3", 8, 4, 0.80, (("Seated Row", "4x8"), ("Rear Delt Flyes", "3x15"))),
    ("Day 4", 10, 3, 0.85, (("Pull-ups", "4x max"), ("Bicep Curls", "3x12"))),
)


def weekly_add(week: int, step: float = WEEKLY_STEP) -> float:
    return (week - 1) * step


def build_smolov_jr(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    base_max = maxes.bench
    add_on = weekly_add(week)

    days = []
    for label, sets, reps, pct, accessories in DAYS:
        weight = weight_at(base_max, pct, increment) + add_on
        exercises = [lift("Bench Press", repeat_sets(weight, reps, sets))]
        exercises.extend(accessory(name, text) for name, text in accessories)
        days.append(day(label, f"{sets}x{reps} @ {round(pct * 100)}%", exercises))
    return days


SMOLOV_JR = ProgramDefinition(
    key="smolovJr",
    name="Smolov Jr",
    level=ProgramLevel.ADVANCED,
    days_per_week=4,
    cycle_length="3 weeks",
    has_weeks=True,
    total_weeks=3,
    description=(
        "Intense 3-week peaking program. High frequency, high volume. Best used "
        "for bench or squat specialization."
    ),
    build=build_smolov_jr,
)
