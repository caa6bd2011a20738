"""
Juggernaut Method.

Sixteen weeks split into four waves (10s, 8s, 5s, 3s) of four phases:
accumulation, intensification, realization (AMRAP) and deload. The week
index decomposes into (wave, phase); the first three phases read from a
wave x phase table, the deload phase runs the same light ladder in every wave.
"""

from typing import List, NamedTuple, Tuple

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
from domain.models import PrescribedSet, RepMaxes, WorkoutDay

PHASES_PER_WAVE = 4
DELOAD_PHASE = 4
REALIZATION_PHASE = 3
WORKING_SETS = 3

WAVE_REPS = (10, 8, 5, 3)

# WAVE_PCTS[wave][phase - 1] for the three loading phases
WAVE_PCTS: Tuple[Tuple[float, float, float], ...] = (
    (0.60, 0.65, 0.70),
    (0.65, 0.70, 0.75),
    (0.70, 0.75, 0.80),
    (0.75, 0.80, 0.85),
)

DELOAD_LADDER: Scheme = ((0.40, 5), (0.50, 5), (0.60, 5))


class WavePosition(NamedTuple):
    wave: int  # 0-based
    phase: int  # 1-based

    @property
    def reps(self) -> int:
        return WAVE_REPS[self.wave]

    @property
    def is_deload(self) -> bool:
        return self.phase == DELOAD_PHASE


def wave_position(week: int) -> WavePosition:
    wave, phase_index = divmod(week - 1, PHASES_PER_WAVE)
    return WavePosition(wave=wave, phase=phase_index + 1)


def main_sets(one_rm: float, position: WavePosition, increment: float) -> List[PrescribedSet]:
    """Main-lift prescription for one (wave, phase) cell."""
    if position.is_deload:
        return scheme_sets(one_rm, DELOAD_LADDER, increment)

    weight = weight_at(one_rm, WAVE_PCTS[position.wave][position.phase - 1], increment)
    if position.phase == REALIZATION_PHASE:
        return repeat_sets(weight, position.reps, WORKING_SETS - 1) + repeat_sets(
            weight, f"{position.reps}+", 1
        )
    return repeat_sets(weight, position.reps, WORKING_SETS)


# (day, focus, attr, name, accessories as (name, normal, deload))
SCHEDULE: Tuple[Tuple[str, str, str, str, Tuple[Tuple[str, str, str], ...]], ...] = (
    ("Day 1", "Squat", "squat", "Squat",
     (("Leg Press", "4x10", "2x10"), ("Leg Curls", "3x12", "2x10"))),
    ("Day 2", "Bench", "bench", "Bench Press",
     (("Dumbbell Row", "4x10", "2x10"), ("Dips", "3x12", "2x10"))),
    ("Day 3", "Deadlift", "deadlift", "Deadlift",
     (("Front Squat", "3x8", "2x6"), ("Ab Wheel", "3x15", "2x10"))),
    ("Day 4", "OHP", "ohp", "Overhead Press",
     (("Pull-ups", "4x max", "2x max"), ("Lateral Raises", "3x15", "2x12"))),
)


def build_juggernaut(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    position = wave_position(week)

    days = []
    for label, focus, attr, name, accessories in SCHEDULE:
        exercises = [lift(name, main_sets(getattr(maxes, attr), position, increment))]
        exercises.extend(
            accessory(acc_name, deload if position.is_deload else normal)
            for acc_name, normal, deload in accessories
        )
        days.append(day(label, focus, exercises))
    return days


JUGGERNAUT = ProgramDefinition(
    key="juggernaut",
    name="Juggernaut Method",
    level=ProgramLevel.ADVANCED,
    days_per_week=4,
    cycle_length="16 weeks",
    has_weeks=True,
    total_weeks=16,
    description=(
        "Chad Wesley Smith's periodized system. Waves of 10s, 8s, 5s, and 3s with "
        "progressive overload. Built for athletes."
    ),
    build=build_juggernaut,
)
