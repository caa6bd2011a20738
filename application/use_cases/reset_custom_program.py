"""
ResetCustomProgram Use Case.

Puts a custom program back on week 1 so it can be run again. Templates
and workouts created by earlier weeks are left alone.
"""

import logging

from application.exceptions import CustomProgramNotFoundError
from application.ports import CustomProgramRepository
from backend.core.program_state import reset_program
from backend.core.progression_service import custom_program_from_row
from domain.models import CustomProgram

logger = logging.getLogger(__name__)


class ResetCustomProgramUseCase:
    """Use case for resetting a custom program's week counter."""

    def __init__(self, program_repo: CustomProgramRepository) -> None:
        self._program_repo = program_repo

    def execute(self, program_id: str, user_id: str) -> CustomProgram:
        """
        Reset the program to week 1.

        Raises:
            CustomProgramNotFoundError: If the program is missing or not the user's
            ProgramPersistenceError: If the stored program is invalid or the write fails
        """
        row = self._program_repo.get_by_id(program_id, user_id)
        if not row:
            raise CustomProgramNotFoundError(program_id)

        program = reset_program(custom_program_from_row(row))
        updated = self._program_repo.update_current_week(
            program_id, user_id, program.current_week
        )
        if not updated:
            raise CustomProgramNotFoundError(program_id)

        logger.info(f"Reset custom program {program_id} to week 1")
        return custom_program_from_row(updated)
