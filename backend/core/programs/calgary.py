"""
Calgary Barbell 16-Week.

Four training blocks with a linear percentage climb inside each, deloads at
the end of the first three blocks and an opener test in the final week:

    weeks 1-4    Volume     6s from 70%, +2.5% per week
    weeks 5-8    Strength   4s from 78%, +2.5% per week
    weeks 9-12   Intensity  3s from 85%, +2.5% per week
    weeks 13-15  Peak       2s from 90%, +2% per week
    week 16      Test       work up to competition openers
"""

from typing import List, NamedTuple, Tuple

from backend.core.programs.base import (
    ProgramDefinition,
    ProgramLevel,
    accessory,
    day,
    lift,
    repeat_sets,
    scheme_sets,
    weight_at,
)
from domain.models import NumericSet, PrescribedSet, RepMaxes, Tier, WorkoutDay

TEST_WEEK = 16
DELOAD_WEEKS = frozenset({4, 8, 12})
DELOAD_DROP = 0.15
DELOAD_REPS = 5
WORKING_SETS = 5
DELOAD_SETS = 3


class Phase(NamedTuple):
    name: str
    first_week: int
    last_week: int
    reps: int
    base_pct: float
    weekly_step: float


PHASES: Tuple[Phase, ...] = (
    Phase("Volume", 1, 4, 6, 0.70, 0.025),
    Phase("Strength", 5, 8, 4, 0.78, 0.025),
    Phase("Intensity", 9, 12, 3, 0.85, 0.025),
    Phase("Peak", 13, 15, 2, 0.90, 0.02),
)

OPENER_WARMUPS = (0.50, 0.70, 0.85)
OPENER_PCT = 0.92
OPENER_WARMUP_REPS = {"squat": (5, 3, 1), "bench": (5, 3, 1), "deadlift": (3, 2, 1)}

# Variation work sits below the day's main percentage: (name, drop, extra reps)
SQUAT_VARIATION = ("Pause Squat", 0.15, 1)
BENCH_VARIATION = ("Close Grip Bench", 0.15, 2)
DEADLIFT_VARIATION = ("Deficit Deadlift", 0.20, 1)

FRONT_SQUAT_PCT = 0.55
INCLINE_BENCH_PCT = 0.60


def phase_for_week(week: int) -> Phase:
    for phase in PHASES:
        if phase.first_week <= week <= phase.last_week:
            return phase
    raise ValueError(f"No training phase for week {week}")


def _opener_sets(one_rm: float, reps: Tuple[int, int, int], increment: float) -> List[PrescribedSet]:
    sets: List[PrescribedSet] = scheme_sets(one_rm, tuple(zip(OPENER_WARMUPS, reps)), increment)
    sets.append(NumericSet(weight=weight_at(one_rm, OPENER_PCT, increment), reps=1, note="(opener)"))
    return sets


def _test_week(maxes: RepMaxes, increment: float) -> List[WorkoutDay]:
    return [
        day("Day 1", "Squat Opener", [
            lift("Squat", _opener_sets(maxes.squat, OPENER_WARMUP_REPS["squat"], increment)),
        ]),
        day("Day 2", "Bench Opener", [
            lift("Bench Press", _opener_sets(maxes.bench, OPENER_WARMUP_REPS["bench"], increment)),
        ]),
        day("Day 3", "Deadlift Opener", [
            lift("Deadlift", _opener_sets(maxes.deadlift, OPENER_WARMUP_REPS["deadlift"], increment)),
        ]),
        day("Day 4", "Rest / Meet Day", [
            accessory("Competition Day", "Full meet simulation or rest"),
        ]),
    ]


def _variation(one_rm: float, main_pct: float, variation, reps: int, increment: float):
    name, drop, extra_reps = variation
    weight = weight_at(one_rm, main_pct - drop, increment)
    return lift(name, repeat_sets(weight, reps + extra_reps, 3), Tier.T2)


def build_calgary(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    if week == TEST_WEEK:
        return _test_week(maxes, increment)

    phase = phase_for_week(week)
    pct = phase.base_pct + (week - phase.first_week) * phase.weekly_step
    is_deload = week in DELOAD_WEEKS
    if is_deload:
        pct -= DELOAD_DROP

    sets = DELOAD_SETS if is_deload else WORKING_SETS
    main_reps = DELOAD_REPS if is_deload else phase.reps

    def main(one_rm: float, count: int) -> List[PrescribedSet]:
        return repeat_sets(weight_at(one_rm, pct, increment), main_reps, count)

    return [
        day("Day 1", f"Squat {phase.name}", [
            lift("Squat", main(maxes.squat, sets)),
            _variation(maxes.squat, pct, SQUAT_VARIATION, phase.reps, increment),
            accessory("Leg Press", "2x12" if is_deload else "3x10"),
        ]),
        day("Day 2", f"Bench {phase.name}", [
            lift("Bench Press", main(maxes.bench, sets)),
            _variation(maxes.bench, pct, BENCH_VARIATION, phase.reps, increment),
            accessory("Dumbbell Row", "2x12" if is_deload else "4x10"),
        ]),
        day("Day 3", f"Deadlift {phase.name}", [
            lift("Deadlift", main(maxes.deadlift, sets - 1)),
            _variation(maxes.deadlift, pct, DEADLIFT_VARIATION, phase.reps, increment),
            accessory("Good Mornings", "2x10" if is_deload else "3x8"),
        ]),
        day("Day 4", "Accessory", [
            lift("Front Squat", repeat_sets(weight_at(maxes.squat, FRONT_SQUAT_PCT, increment), 6, 4), Tier.T2),
            lift("Incline Bench", repeat_sets(weight_at(maxes.bench, INCLINE_BENCH_PCT, increment), 8, 4), Tier.T2),
            accessory("Pull-ups", "2x max" if is_deload else "4x max"),
            accessory("Face Pulls", "3x20"),
        ]),
    ]


CALGARY_BARBELL = ProgramDefinition(
    key="calgaryBarbell",
    name="Calgary Barbell 16-Week",
    level=ProgramLevel.ADVANCED,
    days_per_week=4,
    cycle_length="16 weeks",
    has_weeks=True,
    total_weeks=16,
    description=(
        "Bryce Krawczyk's competition prep program. Progressive overload with "
        "strategic deloads. Designed for peaking."
    ),
    build=build_calgary,
)
