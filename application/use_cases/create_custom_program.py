"""
CreateCustomProgram Use Case.

Creates a custom program from one of the user's workout templates.
"""

import logging
from typing import List, Optional

from application.exceptions import TemplateNotFoundError
from application.ports import CustomProgramRepository, TemplateRepository
from backend.core.progression_service import custom_program_from_row
from domain.models import CUSTOM_PROGRAM_WEEK_OPTIONS, CustomProgram, ProgressionRule

logger = logging.getLogger(__name__)


class CustomProgramValidationError(ValueError):
    """Raised when a new custom program's fields are invalid."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CreateCustomProgramUseCase:
    """
    Use case for creating custom programs.

    Usage:
        >>> use_case = CreateCustomProgramUseCase(
        ...     program_repo=program_repo,
        ...     template_repo=template_repo,
        ... )
        >>> program = use_case.execute(
        ...     user_id="user-123",
        ...     name="Strength Block",
        ...     template_id="t-1",
        ...     weeks=8,
        ...     rules=[ProgressionRule(exercise_name="Squat", increment=5)],
        ... )
        >>> program.current_week
        1
    """

    def __init__(
        self,
        program_repo: CustomProgramRepository,
        template_repo: TemplateRepository,
    ) -> None:
        self._program_repo = program_repo
        self._template_repo = template_repo

    def execute(
        self,
        user_id: str,
        name: str,
        template_id: str,
        weeks: int,
        rules: Optional[List[ProgressionRule]] = None,
    ) -> CustomProgram:
        """
        Create the program, starting at week 1.

        Raises:
            CustomProgramValidationError: If the name is blank or weeks is not 4, 8 or 12
            TemplateNotFoundError: If the template is missing or not the user's
        """
        name = (name or "").strip()
        if not name:
            raise CustomProgramValidationError("Name is required")
        if weeks not in CUSTOM_PROGRAM_WEEK_OPTIONS:
            raise CustomProgramValidationError("Weeks must be 4, 8, or 12")

        if not self._template_repo.get_by_id(template_id, user_id):
            raise TemplateNotFoundError(template_id)

        created = self._program_repo.create(
            {
                "user_id": user_id,
                "name": name,
                "template_id": template_id,
                "weeks": weeks,
                "current_week": 1,
                "rules": [rule.model_dump(exclude_none=True) for rule in rules or []],
            }
        )
        logger.info(f"Created custom program {created.get('id')} ({weeks} weeks) for user {user_id}")
        return custom_program_from_row(created)
