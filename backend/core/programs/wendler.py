"""
Wendler 5/3/1 and its Boring But Big / First Set Last variants.

All three share the same four-week main-work table applied to a 90%
training max across four single-lift days. BBB appends 5x10 at a flat
percentage (reduced on the deload week); FSL appends 5x5 at the week's
first working percentage.
"""

from typing import Dict, List, NamedTuple, Tuple

from backend.core.programs.base import (
    ProgramDefinition,
    ProgramLevel,
    Scheme,
    accessory,
    day,
    lift,
    repeat_sets,
    scheme_sets,
    weight_at,
)
from backend.core.rounding import compute_training_max
from domain.models import Exercise, RepMaxes, Tier, WorkoutDay

DELOAD_WEEK = 4


class WeekScheme(NamedTuple):
    name: str
    main: Scheme


WEEK_SCHEMES: Dict[int, WeekScheme] = {
    1: WeekScheme("5/5/5+", ((0.65, 5), (0.75, 5), (0.85, "5+"))),
    2: WeekScheme("3/3/3+", ((0.70, 3), (0.80, 3), (0.90, "3+"))),
    3: WeekScheme("5/3/1+", ((0.75, 5), (0.85, 3), (0.95, "1+"))),
    4: WeekScheme("Deload", ((0.40, 5), (0.50, 5), (0.60, 5))),
}

BBB_PCT = 0.5
BBB_DELOAD_PCT = 0.4
BBB_SETS, BBB_REPS = 5, 10
FSL_SETS, FSL_REPS = 5, 5

# (day label, focus, lift attribute, exercise name)
MAIN_LIFTS: Tuple[Tuple[str, str, str, str], ...] = (
    ("Day 1", "Squat", "squat", "Squat"),
    ("Day 2", "Bench", "bench", "Bench Press"),
    ("Day 3", "Deadlift", "deadlift", "Deadlift"),
    ("Day 4", "OHP", "ohp", "Overhead Press"),
)

ACCESSORIES: Dict[str, Dict[str, Tuple[Tuple[str, str], ...]]] = {
    "531": {
        "squat": (("Leg Press", "3x10"), ("Leg Curls", "3x10")),
        "bench": (("Dumbbell Row", "5x10"), ("Tricep Pushdowns", "3x15")),
        "deadlift": (("Good Mornings", "3x10"), ("Hanging Leg Raises", "3x15")),
        "ohp": (("Chin-ups", "5x5"), ("Face Pulls", "3x20")),
    },
    "531bbb": {
        "squat": (("Leg Curls", "5x10"),),
        "bench": (("Dumbbell Row", "5x10"),),
        "deadlift": (("Hanging Leg Raises", "5x15"),),
        "ohp": (("Chin-ups", "5x10"),),
    },
    "531fsl": {
        "squat": (("Leg Press", "3x10"), ("Leg Curls", "3x10")),
        "bench": (("Dumbbell Row", "5x10"), ("Tricep Pushdowns", "3x15")),
        "deadlift": (("Good Mornings", "3x10"), ("Ab Wheel", "3x15")),
        "ohp": (("Chin-ups", "5x5"), ("Face Pulls", "3x20")),
    },
}


def training_maxes(maxes: RepMaxes, increment: float) -> Dict[str, float]:
    """90% training max for each main lift."""
    return {
        attr: compute_training_max(getattr(maxes, attr), increment)
        for _, _, attr, _ in MAIN_LIFTS
    }


def _backoff(variant: str, name: str, tm: float, week: int, increment: float) -> List[Exercise]:
    if variant == "531bbb":
        pct = BBB_DELOAD_PCT if week == DELOAD_WEEK else BBB_PCT
        sets = repeat_sets(weight_at(tm, pct, increment), BBB_REPS, BBB_SETS)
        return [lift(f"{name} (BBB)", sets, Tier.T2)]
    if variant == "531fsl":
        first_pct = WEEK_SCHEMES[week].main[0][0]
        sets = repeat_sets(weight_at(tm, first_pct, increment), FSL_REPS, FSL_SETS)
        return [lift(f"{name} (FSL)", sets, Tier.T2)]
    return []


def _build(variant: str, maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    scheme = WEEK_SCHEMES[week]
    tms = training_maxes(maxes, increment)

    days = []
    for label, focus, attr, name in MAIN_LIFTS:
        exercises = [lift(name, scheme_sets(tms[attr], scheme.main, increment))]
        exercises.extend(_backoff(variant, name, tms[attr], week, increment))
        exercises.extend(
            accessory(acc_name, text) for acc_name, text in ACCESSORIES[variant][attr]
        )
        days.append(day(label, focus, exercises))
    return days


def build_531(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    return _build("531", maxes, week, increment)


def build_531_bbb(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    return _build("531bbb", maxes, week, increment)


def build_531_fsl(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    return _build("531fsl", maxes, week, increment)


WENDLER_531 = ProgramDefinition(
    key="531",
    name="Wendler's 5/3/1",
    level=ProgramLevel.INTERMEDIATE,
    days_per_week=4,
    cycle_length="4 weeks",
    has_weeks=True,
    total_weeks=4,
    uses_training_max=True,
    description=(
        "The classic periodized strength program. Slow, steady progress with "
        "built-in deload weeks. Uses training maxes at 90% for sustainable gains."
    ),
    build=build_531,
)

WENDLER_531_BBB = ProgramDefinition(
    key="531bbb",
    name="5/3/1 Boring But Big",
    level=ProgramLevel.INTERMEDIATE,
    days_per_week=4,
    cycle_length="4 weeks",
    has_weeks=True,
    total_weeks=4,
    uses_training_max=True,
    description=(
        "Wendler's high-volume variant. Main 5/3/1 work followed by 5x10 at "
        "50-60% for serious mass and strength gains."
    ),
    build=build_531_bbb,
)

WENDLER_531_FSL = ProgramDefinition(
    key="531fsl",
    name="5/3/1 First Set Last",
    level=ProgramLevel.INTERMEDIATE,
    days_per_week=4,
    cycle_length="4 weeks",
    has_weeks=True,
    total_weeks=4,
    uses_training_max=True,
    description=(
        "After main 5/3/1 sets, repeat the first working set for additional "
        "volume. Great for building work capacity."
    ),
    build=build_531_fsl,
)
