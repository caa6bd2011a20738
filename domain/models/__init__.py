"""
Domain models for the strength program engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- RepMaxes: The lifter's one-rep maxes, input to every program
- StoredRepMax: A saved per-lift rep max and its estimated one-rep max
- Prescribed sets: Tagged variants for numeric, bodyweight, AMRAP, rep-max
  and free-text prescriptions
- Exercise / WorkoutDay: What a catalog program emits for one session
- CustomProgram, TemplateExercise, ProgressionRule: User-authored programs

Usage:
    >>> from domain.models import RepMaxes, NumericSet, AmrapSet

    >>> maxes = RepMaxes(squat=300, bench=200, deadlift=350, ohp=120)
    >>> AmrapSet(weight=255, min_reps=1).as_wire()
    {'weight': 255, 'reps': '1+'}
"""

from domain.models.custom_program import (
    CUSTOM_PROGRAM_WEEK_OPTIONS,
    CustomProgram,
    ProgressionRule,
    TemplateExercise,
    TemplateSet,
    UserProgramState,
)
from domain.models.prescription import (
    BODYWEIGHT,
    AmrapSet,
    BodyweightSet,
    FreeTextSet,
    NumericSet,
    PrescribedSet,
    RepMaxSet,
)
from domain.models.rep_maxes import LIFTS, Lift, RepMaxes, StoredRepMax, rep_maxes_from_stored
from domain.models.workout_day import Exercise, Tier, WorkoutDay

__all__ = [
    # Inputs
    "LIFTS",
    "Lift",
    "RepMaxes",
    "StoredRepMax",
    "rep_maxes_from_stored",
    # Prescriptions
    "BODYWEIGHT",
    "AmrapSet",
    "BodyweightSet",
    "FreeTextSet",
    "NumericSet",
    "PrescribedSet",
    "RepMaxSet",
    "Exercise",
    "Tier",
    "WorkoutDay",
    # Custom programs
    "CUSTOM_PROGRAM_WEEK_OPTIONS",
    "CustomProgram",
    "ProgressionRule",
    "TemplateExercise",
    "TemplateSet",
    "UserProgramState",
]
