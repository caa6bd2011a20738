"""
SelectProgram Use Case.

Manages which catalog program a user follows and which week they are on.
"""

import logging

from application.ports import UserProgramRepository
from backend.core.program_state import (
    advance_program_week,
    select_program,
    set_program_week,
)
from domain.models import UserProgramState

logger = logging.getLogger(__name__)


class SelectProgramUseCase:
    """
    Use case for the user's selected catalog program.

    ``execute`` switches programs (and resets to week 1); ``set_week`` and
    ``advance`` move within the selected program.

    Usage:
        >>> use_case = SelectProgramUseCase(user_program_repo=repo)
        >>> state = use_case.execute(user_id="user-123", program_key="531")
        >>> state = use_case.advance(user_id="user-123")
        >>> state.current_week
        2
    """

    def __init__(self, user_program_repo: UserProgramRepository) -> None:
        self._repo = user_program_repo

    def get_state(self, user_id: str) -> UserProgramState:
        """Current state; users who never selected a program get an empty state."""
        row = self._repo.get_state(user_id)
        if not row:
            return UserProgramState(user_id=user_id)
        return UserProgramState.model_validate({**row, "user_id": user_id})

    def _save(self, state: UserProgramState) -> UserProgramState:
        saved = self._repo.save_state(
            state.user_id,
            {"program_key": state.program_key, "current_week": state.current_week},
        )
        return UserProgramState.model_validate({**saved, "user_id": state.user_id})

    def execute(self, user_id: str, program_key: str) -> UserProgramState:
        """
        Select a catalog program, starting at week 1.

        Raises:
            UnknownProgramError: If the key is not in the catalog
        """
        state = select_program(self.get_state(user_id), program_key)
        logger.info(f"User {user_id} selected program {program_key}")
        return self._save(state)

    def set_week(self, user_id: str, week: int) -> UserProgramState:
        """
        Raises:
            InvalidWeekError: If the week is outside the selected program's range
        """
        return self._save(set_program_week(self.get_state(user_id), week))

    def advance(self, user_id: str) -> UserProgramState:
        """
        Raises:
            ProgramCompleteError: If the user is on the program's last week
        """
        state = advance_program_week(self.get_state(user_id))
        logger.info(f"User {user_id} advanced {state.program_key} to week {state.current_week}")
        return self._save(state)
