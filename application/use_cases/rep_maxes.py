"""
RepMaxes Use Cases.

Saving the lifter's rep maxes, and generating the selected catalog
program's current week from them.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError

from application.exceptions import ProgramNotConfiguredError, ProgramPersistenceError
from application.ports import RepMaxRepository, UserProgramRepository
from backend.core.programs import generate_program_workouts, get_program
from backend.core.rounding import DEFAULT_INCREMENT, estimate_one_rep_max
from domain.models import StoredRepMax, WorkoutDay, rep_maxes_from_stored

logger = logging.getLogger(__name__)


def _stored(rows) -> List[StoredRepMax]:
    try:
        return [StoredRepMax.model_validate(row) for row in rows]
    except ValidationError as e:
        logger.error(f"Stored rep maxes failed validation: {e}")
        raise ProgramPersistenceError("Stored rep maxes are invalid") from e


class RepMaxesUseCase:
    """
    Use case for the user's saved rep maxes.

    One rep max is kept per primary lift; saving a lift again replaces it.

    Usage:
        >>> use_case = RepMaxesUseCase(rep_max_repo=repo)
        >>> saved = use_case.save(user_id="user-123", entries=[("squat", 250, 5, None)])
        >>> saved[0].one_rm
        292
    """

    def __init__(self, rep_max_repo: RepMaxRepository) -> None:
        self._repo = rep_max_repo

    def list(self, user_id: str) -> List[StoredRepMax]:
        return _stored(self._repo.list_by_user(user_id))

    def save(self, user_id: str, entries) -> List[StoredRepMax]:
        """
        Save ``(exercise, weight, reps, one_rm)`` entries.

        A missing ``one_rm`` is estimated from weight and reps (Epley).

        Raises:
            ProgramPersistenceError: If the write fails
        """
        rows = []
        for exercise, weight, reps, one_rm in entries:
            if one_rm is None:
                one_rm = estimate_one_rep_max(weight, reps)
            rows.append(
                StoredRepMax(exercise=exercise, weight=weight, reps=reps, one_rm=one_rm)
                .model_dump()
            )

        saved = self._repo.upsert_many(user_id, rows)
        logger.info(f"Saved {len(rows)} rep maxes for user {user_id}")
        return _stored(saved)


class GetUserWorkoutsUseCase:
    """
    Generate the current week of the user's selected catalog program.

    Usage:
        >>> use_case = GetUserWorkoutsUseCase(
        ...     user_program_repo=user_program_repo,
        ...     rep_max_repo=rep_max_repo,
        ... )
        >>> program_key, week, days = use_case.execute(user_id="user-123")
    """

    def __init__(
        self,
        user_program_repo: UserProgramRepository,
        rep_max_repo: RepMaxRepository,
        increment: float = DEFAULT_INCREMENT,
    ) -> None:
        self._user_program_repo = user_program_repo
        self._rep_max_repo = rep_max_repo
        self._increment = increment

    def execute(self, user_id: str, week: Optional[int] = None):
        """
        Generate every training day of the program week.

        Args:
            user_id: Clerk user ID
            week: Week to generate; defaults to the user's current week

        Returns:
            (program_key, resolved week, training days)

        Raises:
            ProgramNotConfiguredError: If no program is selected or a lift has no saved max
            UnknownProgramError: If the stored program key left the catalog
        """
        state = self._user_program_repo.get_state(user_id) or {}
        program_key = state.get("program_key")
        if not program_key:
            raise ProgramNotConfiguredError("No program selected")

        rep_maxes = rep_maxes_from_stored(_stored(self._rep_max_repo.list_by_user(user_id)))
        if rep_maxes is None:
            raise ProgramNotConfiguredError(
                "Rep maxes for squat, bench, deadlift and ohp are required"
            )

        program = get_program(program_key)
        if week is None:
            week = state.get("current_week") or 1
        days: List[WorkoutDay] = generate_program_workouts(
            program_key, rep_maxes, week, increment=self._increment
        )
        return program_key, program.resolve_week(week), days
