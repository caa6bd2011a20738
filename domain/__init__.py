"""
Domain layer for the strength program engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    CustomProgram,
    Exercise,
    ProgressionRule,
    RepMaxes,
    TemplateExercise,
    Tier,
    WorkoutDay,
)

__all__ = [
    "CustomProgram",
    "Exercise",
    "ProgressionRule",
    "RepMaxes",
    "TemplateExercise",
    "Tier",
    "WorkoutDay",
]
