"""
StartNextWeek Use Case.

Starts the next week of a custom program: progresses the program's
template for that week, stores it as a new template, creates a workout
from it and moves the week counter forward, all in one transaction.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from application.exceptions import CustomProgramNotFoundError, TemplateNotFoundError
from application.ports import CustomProgramRepository, TemplateRepository
from backend.core.program_state import advance_week
from backend.core.progression_service import (
    build_progressed_exercises,
    custom_program_from_row,
    exercises_to_storage,
    normalize_template_exercises,
)
from domain.models import CustomProgram

logger = logging.getLogger(__name__)


def week_template_name(program_name: str, week: int) -> str:
    return f"{program_name} - Week {week}"


def week_workout_name(program_name: str, week: int) -> str:
    return f"{program_name} • Week {week}"


@dataclass
class StartNextWeekResult:
    """Result of the StartNextWeek use case execution."""

    program: CustomProgram
    week: int
    workout: Dict[str, Any]
    template: Dict[str, Any]
    exercises: List[Dict[str, Any]] = field(default_factory=list)


class StartNextWeekUseCase:
    """
    Use case for starting the next week of a custom program.

    Orchestrates the following workflow:
    1. Load the program (scoped to the user) and refuse if it is complete
    2. Load and normalize the program's template
    3. Apply the progression rules for the current week
    4. Persist template, workout and week counter atomically

    Usage:
        >>> use_case = StartNextWeekUseCase(
        ...     program_repo=program_repo,
        ...     template_repo=template_repo,
        ... )
        >>> result = use_case.execute(program_id="p-1", user_id="user-123")
        >>> result.workout["program_day"]
        'Strength Block • Week 1'
    """

    def __init__(
        self,
        program_repo: CustomProgramRepository,
        template_repo: TemplateRepository,
    ) -> None:
        self._program_repo = program_repo
        self._template_repo = template_repo

    def execute(self, program_id: str, user_id: str) -> StartNextWeekResult:
        """
        Start the program's current week.

        Args:
            program_id: Custom program ID
            user_id: Owner (Clerk user ID)

        Returns:
            StartNextWeekResult with the advanced program and created rows

        Raises:
            CustomProgramNotFoundError: If the program is missing or not the user's
            ProgramCompleteError: If every week has already been started
            TemplateNotFoundError: If the program's template no longer exists
            WeekAdvanceConflictError: If a concurrent request started the week first
            ProgramPersistenceError: If the transaction fails
        """
        row = self._program_repo.get_by_id(program_id, user_id)
        if not row:
            raise CustomProgramNotFoundError(program_id)

        program = custom_program_from_row(row)
        advanced = advance_week(program)
        week = program.current_week

        template = self._template_repo.get_by_id(program.template_id, user_id)
        if not template:
            raise TemplateNotFoundError(program.template_id)

        exercises = normalize_template_exercises(template.get("exercises"))
        progressed = exercises_to_storage(
            build_progressed_exercises(exercises, program.rules, week)
        )

        logger.info(
            "Starting week %d/%d of custom program %s for user %s",
            week,
            program.weeks,
            program_id,
            user_id,
        )
        created = self._program_repo.start_week_atomic(
            program_id=program_id,
            user_id=user_id,
            expected_week=week,
            template_data={
                "user_id": user_id,
                "name": week_template_name(program.name, week),
                "exercises": progressed,
            },
            workout_data={
                "user_id": user_id,
                "program_key": None,
                "program_day": week_workout_name(program.name, week),
            },
        )

        return StartNextWeekResult(
            program=advanced,
            week=week,
            workout=created["workout"],
            template=created["template"],
            exercises=progressed,
        )
