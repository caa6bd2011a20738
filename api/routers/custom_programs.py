"""
Custom programs router.

This router manages user-authored programs built from workout templates:
- List the user's custom programs
- Create a custom program with progression rules
- Start the next week (progressed template + workout, atomically)
- Reset a program to week 1
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from api.deps import (
    get_create_custom_program_use_case,
    get_current_user,
    get_custom_program_repo,
    get_reset_custom_program_use_case,
    get_start_next_week_use_case,
)
from api.errors import (
    InvalidRequestError,
    PersistenceFailure,
    ProgramCompleteConflict,
    ResourceNotFoundError,
    WeekConflict,
)
from api.schemas import (
    CreateCustomProgramRequest,
    CustomProgramResponse,
    StartWeekResponse,
)
from application.exceptions import (
    NotFoundError,
    ProgramCompleteError,
    ProgramPersistenceError,
    WeekAdvanceConflictError,
)
from application.ports import CustomProgramRepository
from application.use_cases import (
    CreateCustomProgramUseCase,
    CustomProgramValidationError,
    ResetCustomProgramUseCase,
    StartNextWeekUseCase,
)
from backend.core.progression_service import custom_program_from_row

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/custom-programs",
    tags=["Custom Programs"],
)


@router.get("", response_model=List[CustomProgramResponse])
def list_custom_programs(
    user_id: str = Depends(get_current_user),
    program_repo: CustomProgramRepository = Depends(get_custom_program_repo),
):
    """
    List the user's custom programs, most recently updated first.

    Stored rows that no longer validate are skipped.
    """
    programs = []
    for row in program_repo.list_by_user(user_id):
        try:
            programs.append(CustomProgramResponse.from_domain(custom_program_from_row(row)))
        except ProgramPersistenceError:
            logger.warning(f"Skipping invalid custom program {row.get('id')} for user {user_id}")
    return programs


@router.post("", response_model=CustomProgramResponse)
def create_custom_program(
    request: CreateCustomProgramRequest,
    user_id: str = Depends(get_current_user),
    use_case: CreateCustomProgramUseCase = Depends(get_create_custom_program_use_case),
):
    """Create a custom program from one of the user's templates."""
    try:
        program = use_case.execute(
            user_id=user_id,
            name=request.name,
            template_id=request.template_id,
            weeks=request.weeks,
            rules=request.rules,
        )
    except CustomProgramValidationError as e:
        raise InvalidRequestError(e.message)
    except NotFoundError as e:
        raise ResourceNotFoundError(str(e))
    except ProgramPersistenceError:
        logger.exception("Error creating custom program")
        raise PersistenceFailure()
    return CustomProgramResponse.from_domain(program)


@router.post("/{program_id}/next-week", response_model=StartWeekResponse)
def start_next_week(
    program_id: str,
    user_id: str = Depends(get_current_user),
    use_case: StartNextWeekUseCase = Depends(get_start_next_week_use_case),
):
    """
    Start the program's current week.

    Returns 409 with ``program_complete`` once every week has been started,
    and 409 with ``week_conflict`` if a concurrent request won the race.
    """
    try:
        result = use_case.execute(program_id=program_id, user_id=user_id)
    except NotFoundError as e:
        raise ResourceNotFoundError(str(e))
    except ProgramCompleteError as e:
        raise ProgramCompleteConflict(str(e))
    except WeekAdvanceConflictError as e:
        raise WeekConflict(str(e))
    except ProgramPersistenceError:
        logger.exception(f"Error starting custom program week for {program_id}")
        raise PersistenceFailure()

    return StartWeekResponse(
        program=CustomProgramResponse.from_domain(result.program),
        week=result.week,
        workout=result.workout,
        template=result.template,
    )


@router.post("/{program_id}/reset", response_model=CustomProgramResponse)
def reset_custom_program(
    program_id: str,
    user_id: str = Depends(get_current_user),
    use_case: ResetCustomProgramUseCase = Depends(get_reset_custom_program_use_case),
):
    """Put the program back on week 1."""
    try:
        program = use_case.execute(program_id=program_id, user_id=user_id)
    except NotFoundError as e:
        raise ResourceNotFoundError(str(e))
    except ProgramPersistenceError:
        logger.exception(f"Error resetting custom program {program_id}")
        raise PersistenceFailure()
    return CustomProgramResponse.from_domain(program)
