"""
Texas Method.

Three day roles per week all hang off an estimated five-rep max:
Intensity Day works up to the 5RM, Volume Day takes 5x5 at 90% of it and
the Light (recovery) Day chains a further 80% off the Volume Day weight.
"""

from typing import Dict, List

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

FIVE_REP_MAX_FACTOR = 0.85
VOLUME_PCT = 0.9
LIGHT_PCT_OF_VOLUME = 0.8
# Recovery-day pressing is keyed off the bench 5RM
LIGHT_PRESS_PCT_OF_BENCH = 0.6


def five_rep_maxes(maxes: RepMaxes, increment: float) -> Dict[str, float]:
    return {
        attr: weight_at(getattr(maxes, attr), FIVE_REP_MAX_FACTOR, increment)
        for attr in ("squat", "bench", "deadlift")
    }


def build_texas(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    five_rm = five_rep_maxes(maxes, increment)
    volume = {
        attr: weight_at(value, VOLUME_PCT, increment) for attr, value in five_rm.items()
    }
    light_squat = weight_at(volume["squat"], LIGHT_PCT_OF_VOLUME, increment)
    light_press = weight_at(five_rm["bench"], LIGHT_PRESS_PCT_OF_BENCH, increment)

    return [
        day(
            "Monday",
            "Volume Day",
            [
                lift("Squat", repeat_sets(volume["squat"], 5, 5)),
                lift("Bench Press", repeat_sets(volume["bench"], 5, 5)),
                accessory("Barbell Row", "3x5"),
            ],
        ),
        day(
            "Wednesday",
            "Recovery Day",
            [
                lift("Squat", repeat_sets(light_squat, 5, 2)),
                lift("Overhead Press", repeat_sets(light_press, 5, 3)),
                accessory("Chin-ups", "3x max"),
                accessory("Back Extensions", "5x10"),
            ],
        ),
        day(
            "Friday",
            "Intensity Day",
            [
                lift("Squat", repeat_sets(five_rm["squat"], 5, 1)),
                lift("Bench Press", repeat_sets(five_rm["bench"], 5, 1)),
                lift("Deadlift", repeat_sets(five_rm["deadlift"], 5, 1)),
            ],
        ),
    ]


TEXAS_METHOD = ProgramDefinition(
    key="texas",
    name="Texas Method",
    level=ProgramLevel.INTERMEDIATE,
    days_per_week=3,
    cycle_length="1 week",
    uses_training_max=True,
    description=(
        "Volume day, recovery day, intensity day. Perfect for those who stalled "
        "on LP but want weekly PRs."
    ),
    build=build_texas,
)
