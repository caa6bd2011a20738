"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection for storage writes
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeCustomProgramRepository, create_custom_program_repos

    # Direct instantiation
    repo = FakeCustomProgramRepository()
    repo.seed([{"id": "p1", "user_id": "user1", "name": "Block", ...}])

    # Factory function with a template and a program already in place
    program_repo, template_repo = create_custom_program_repos(user_id="user1")
"""
from typing import Any, Dict, List, Optional, Tuple

from tests.fakes.custom_program_repository import FakeCustomProgramRepository
from tests.fakes.rep_max_repository import FakeRepMaxRepository
from tests.fakes.template_repository import FakeTemplateRepository
from tests.fakes.user_program_repository import FakeUserProgramRepository


# =============================================================================
# Factory Functions
# =============================================================================

SAMPLE_TEMPLATE_ID = "template-1"
SAMPLE_PROGRAM_ID = "program-1"

SAMPLE_EXERCISES: List[Dict[str, Any]] = [
    {"name": "Squat", "sets": [{"weight": 200, "reps": 5}, {"weight": 200, "reps": 5}]},
    {"name": "Bench Press", "sets": [{"weight": 150, "reps": 5}]},
    {"name": "Rowing", "sets": [{"weight": 0, "reps": 0, "durationSeconds": 600}]},
    {"name": "Plank", "sets": [{"weight": 0, "reps": 1}]},
]


def create_custom_program_repos(
    *,
    user_id: str = "test_user",
    weeks: int = 4,
    current_week: int = 1,
    rules: Optional[List[Dict[str, Any]]] = None,
    exercises: Optional[List[Dict[str, Any]]] = None,
) -> Tuple[FakeCustomProgramRepository, FakeTemplateRepository]:
    """
    Create linked program and template fakes holding one program and its template.

    Args:
        user_id: Owner of the seeded rows
        weeks: Program length
        current_week: Week the program is on
        rules: Progression rules (defaults to +5 per week on Squat)
        exercises: Template exercises (defaults to SAMPLE_EXERCISES)

    Returns:
        (program_repo, template_repo)
    """
    template_repo = FakeTemplateRepository()
    template_repo.seed([{
        "id": SAMPLE_TEMPLATE_ID,
        "user_id": user_id,
        "name": "Strength Day",
        "exercises": exercises if exercises is not None else SAMPLE_EXERCISES,
    }])

    program_repo = FakeCustomProgramRepository(template_repo=template_repo)
    program_repo.seed([{
        "id": SAMPLE_PROGRAM_ID,
        "user_id": user_id,
        "name": "Strength Block",
        "template_id": SAMPLE_TEMPLATE_ID,
        "weeks": weeks,
        "current_week": current_week,
        "rules": rules if rules is not None else [{"exerciseName": "Squat", "increment": 5}],
    }])

    return program_repo, template_repo


__all__ = [
    # Fakes
    "FakeCustomProgramRepository",
    "FakeRepMaxRepository",
    "FakeTemplateRepository",
    "FakeUserProgramRepository",
    # Factories
    "create_custom_program_repos",
    "SAMPLE_EXERCISES",
    "SAMPLE_PROGRAM_ID",
    "SAMPLE_TEMPLATE_ID",
]
