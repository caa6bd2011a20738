"""
Candito 6-Week Strength Program.

Hand-written per phase rather than derived from a formula:

    weeks 1-2  muscular conditioning (hypertrophy)
    weeks 3-4  strength
    week 5     intensity (heavy triples, doubles, singles)
    week 6     peaking / max test

Percentages are taken off the raw one-rep max.
"""

from typing import List

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
from domain.models import NumericSet, PrescribedSet, RepMaxes, WorkoutDay

HYPERTROPHY_PCT = {1: 0.70, 2: 0.75}
STRENGTH_PCT = {3: 0.80, 4: 0.85}
# Power / upper-volume days sit 10 points above / below the phase percentage
POWER_OFFSET = 0.10

INTENSITY_LADDER: Scheme = ((0.85, 3), (0.90, 2), (0.95, 1))
TEST_WARMUPS: Scheme = ((0.70, 3), (0.80, 2), (0.90, 1))
TEST_MAX_PCT = 1.0
TEST_PR_PCT = 1.025


def _hypertrophy_week(maxes: RepMaxes, pct: float, increment: float) -> List[WorkoutDay]:
    power_pct = pct + POWER_OFFSET
    return [
        day("Day 1", "Lower Hypertrophy", [
            lift("Squat", repeat_sets(weight_at(maxes.squat, pct, increment), 8, 6)),
            accessory("Romanian Deadlift", "3x10"),
            accessory("Leg Press", "3x12"),
            accessory("Leg Curls", "3x12"),
        ]),
        day("Day 2", "Upper Hypertrophy", [
            lift("Bench Press", repeat_sets(weight_at(maxes.bench, pct, increment), 8, 6)),
            accessory("Barbell Row", "4x8"),
            accessory("Overhead Press", "3x10"),
            accessory("Pull-ups", "3x max"),
        ]),
        day("Day 3", "Lower Power", [
            lift("Squat", repeat_sets(weight_at(maxes.squat, power_pct, increment), 6, 4)),
            lift("Deadlift", repeat_sets(weight_at(maxes.deadlift, pct, increment), 6, 3)),
            accessory("Front Squat", "3x8"),
        ]),
        day("Day 4", "Upper Power", [
            lift("Bench Press", repeat_sets(weight_at(maxes.bench, power_pct, increment), 6, 4)),
            accessory("Weighted Pull-ups", "4x6"),
            accessory("Close Grip Bench", "3x8"),
            accessory("Dumbbell Row", "3x10"),
        ]),
    ]


def _strength_week(maxes: RepMaxes, pct: float, increment: float) -> List[WorkoutDay]:
    volume_pct = pct - POWER_OFFSET
    return [
        day("Day 1", "Lower Strength", [
            lift("Squat", repeat_sets(weight_at(maxes.squat, pct, increment), 5, 5)),
            accessory("Pause Squat", "3x4"),
            accessory("Leg Curls", "3x10"),
        ]),
        day("Day 2", "Upper Strength", [
            lift("Bench Press", repeat_sets(weight_at(maxes.bench, pct, increment), 5, 5)),
            accessory("Barbell Row", "5x5"),
            accessory("Close Grip Bench", "3x6"),
        ]),
        day("Day 3", "Deadlift Focus", [
            lift("Deadlift", repeat_sets(weight_at(maxes.deadlift, pct, increment), 4, 5)),
            accessory("Front Squat", "3x5"),
            accessory("Good Mornings", "3x8"),
        ]),
        day("Day 4", "Upper Volume", [
            lift("Bench Press", repeat_sets(weight_at(maxes.bench, volume_pct, increment), 6, 4)),
            accessory("Weighted Pull-ups", "5x5"),
            accessory("Overhead Press", "3x8"),
        ]),
    ]


def _intensity_week(maxes: RepMaxes, increment: float) -> List[WorkoutDay]:
    return [
        day("Day 1", "Heavy Squat", [
            lift("Squat", scheme_sets(maxes.squat, INTENSITY_LADDER, increment)),
            accessory("Pause Squat", "2x3 @ 75%"),
        ]),
        day("Day 2", "Heavy Bench", [
            lift("Bench Press", scheme_sets(maxes.bench, INTENSITY_LADDER, increment)),
            accessory("Close Grip Bench", "2x4 @ 75%"),
        ]),
        day("Day 3", "Heavy Deadlift", [
            lift("Deadlift", scheme_sets(maxes.deadlift, INTENSITY_LADDER, increment)),
            accessory("Front Squat", "2x4 @ 70%"),
        ]),
        day("Day 4", "Light Recovery", [
            accessory("Bench Press", "3x5 @ 70%"),
            accessory("Barbell Row", "3x8"),
            accessory("Face Pulls", "3x15"),
        ]),
    ]


def _test_sets(one_rm: float, increment: float) -> List[PrescribedSet]:
    return scheme_sets(one_rm, TEST_WARMUPS, increment) + [
        NumericSet(weight=weight_at(one_rm, TEST_MAX_PCT, increment), reps=1),
        NumericSet(weight=weight_at(one_rm, TEST_PR_PCT, increment), reps=1, note="PR"),
    ]


def _test_week(maxes: RepMaxes, increment: float) -> List[WorkoutDay]:
    return [
        day("Day 1", "Squat Test", [lift("Squat", _test_sets(maxes.squat, increment))]),
        day("Day 2", "Bench Test", [lift("Bench Press", _test_sets(maxes.bench, increment))]),
        day("Day 3", "Deadlift Test", [lift("Deadlift", _test_sets(maxes.deadlift, increment))]),
        day("Day 4", "Deload", [
            accessory("Light Squat", "3x5 @ 50%"),
            accessory("Light Bench", "3x5 @ 50%"),
            accessory("Mobility Work", "15 min"),
        ]),
    ]


def build_candito(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    if week in HYPERTROPHY_PCT:
        return _hypertrophy_week(maxes, HYPERTROPHY_PCT[week], increment)
    if week in STRENGTH_PCT:
        return _strength_week(maxes, STRENGTH_PCT[week], increment)
    if week == 5:
        return _intensity_week(maxes, increment)
    return _test_week(maxes, increment)


CANDITO_6_WEEK = ProgramDefinition(
    key="candito6week",
    name="Candito 6-Week",
    level=ProgramLevel.ADVANCED,
    days_per_week=4,
    cycle_length="6 weeks",
    has_weeks=True,
    total_weeks=6,
    description=(
        "Jonnie Candito's periodized program. Phases through hypertrophy, "
        "strength, and peaking for competition prep."
    ),
    build=build_candito,
)
