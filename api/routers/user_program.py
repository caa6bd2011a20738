"""
User program router.

Tracks which catalog program the user follows and the week they are on,
and generates that week from the user's saved rep maxes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import (
    get_current_user,
    get_select_program_use_case,
    get_user_workouts_use_case,
)
from api.errors import (
    InvalidRequestError,
    PersistenceFailure,
    ProgramCompleteConflict,
    ProgramNotConfigured,
    ResourceNotFoundError,
)
from api.schemas import (
    SelectProgramRequest,
    SetWeekRequest,
    UserProgramResponse,
    UserWorkoutsResponse,
)
from application.exceptions import (
    InvalidWeekError,
    ProgramCompleteError,
    ProgramNotConfiguredError,
    ProgramPersistenceError,
    UnknownProgramError,
)
from application.use_cases import GetUserWorkoutsUseCase, SelectProgramUseCase
from backend.core.programs import PROGRAMS
from domain.models import UserProgramState

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/user/program",
    tags=["User Program"],
)


def _response(state: UserProgramState) -> UserProgramResponse:
    program = PROGRAMS.get(state.program_key) if state.program_key else None
    total_weeks = None
    if program is not None:
        total_weeks = program.total_weeks if program.has_weeks else 1
    return UserProgramResponse.from_domain(state, total_weeks)


@router.get("", response_model=UserProgramResponse)
def get_user_program(
    user_id: str = Depends(get_current_user),
    use_case: SelectProgramUseCase = Depends(get_select_program_use_case),
):
    """The user's selected program and current week."""
    return _response(use_case.get_state(user_id))


@router.put("", response_model=UserProgramResponse)
def select_user_program(
    request: SelectProgramRequest,
    user_id: str = Depends(get_current_user),
    use_case: SelectProgramUseCase = Depends(get_select_program_use_case),
):
    """Switch to a catalog program. Always restarts at week 1."""
    try:
        state = use_case.execute(user_id=user_id, program_key=request.program_key)
    except UnknownProgramError as e:
        raise ResourceNotFoundError(str(e))
    except ProgramPersistenceError:
        logger.exception(f"Error saving program state for user {user_id}")
        raise PersistenceFailure()
    return _response(state)


@router.patch("/week", response_model=UserProgramResponse)
def set_user_program_week(
    request: SetWeekRequest,
    user_id: str = Depends(get_current_user),
    use_case: SelectProgramUseCase = Depends(get_select_program_use_case),
):
    """Jump to a week of the selected program."""
    try:
        state = use_case.set_week(user_id=user_id, week=request.week)
    except InvalidWeekError as e:
        raise InvalidRequestError(str(e))
    except UnknownProgramError as e:
        raise ResourceNotFoundError(str(e))
    except ProgramPersistenceError:
        logger.exception(f"Error saving program state for user {user_id}")
        raise PersistenceFailure()
    return _response(state)


@router.post("/advance", response_model=UserProgramResponse)
def advance_user_program(
    user_id: str = Depends(get_current_user),
    use_case: SelectProgramUseCase = Depends(get_select_program_use_case),
):
    """Move to the next week of the selected program."""
    try:
        state = use_case.advance(user_id=user_id)
    except ProgramCompleteError as e:
        raise ProgramCompleteConflict(str(e))
    except UnknownProgramError as e:
        raise ResourceNotFoundError(str(e))
    except ProgramPersistenceError:
        logger.exception(f"Error saving program state for user {user_id}")
        raise PersistenceFailure()
    return _response(state)


@router.get("/workouts", response_model=UserWorkoutsResponse)
def get_user_workouts(
    week: Optional[int] = Query(default=None, description="Defaults to the current week"),
    user_id: str = Depends(get_current_user),
    use_case: GetUserWorkoutsUseCase = Depends(get_user_workouts_use_case),
):
    """
    Generate the selected program's week from the user's saved rep maxes.

    Returns 409 with ``program_not_configured`` until a program is selected
    and a rep max is saved for each of squat, bench, deadlift and ohp.
    """
    try:
        program_key, resolved_week, days = use_case.execute(user_id=user_id, week=week)
    except ProgramNotConfiguredError as e:
        raise ProgramNotConfigured(e.reason)
    except UnknownProgramError as e:
        raise ResourceNotFoundError(str(e))
    except ProgramPersistenceError:
        logger.exception(f"Error loading rep maxes for user {user_id}")
        raise PersistenceFailure()
    return UserWorkoutsResponse(
        program_key=program_key,
        week=resolved_week,
        days=[d.as_wire() for d in days],
    )
