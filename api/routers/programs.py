"""
Program catalog router.

This router exposes the periodized program catalog:
- List programs and their metadata
- Get one program's metadata
- Generate a week of training days from a lifter's one-rep maxes
- Find the next training day given the days already completed

Generation is a pure computation; no authentication or storage is involved.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from api.deps import get_weight_increment
from api.errors import ResourceNotFoundError
from api.schemas import (
    GenerateWorkoutsRequest,
    GenerateWorkoutsResponse,
    NextDayResponse,
    ProgramSummary,
)
from application.exceptions import UnknownProgramError
from backend.core.programs import (
    ProgramDefinition,
    generate_program_workouts,
    get_next_workout_day,
    get_program,
    list_programs,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/programs",
    tags=["Programs"],
)


def _summary(program: ProgramDefinition) -> ProgramSummary:
    return ProgramSummary(
        key=program.key,
        name=program.name,
        level=program.level.value,
        days_per_week=program.days_per_week,
        cycle_length=program.cycle_length,
        description=program.description,
        has_weeks=program.has_weeks,
        total_weeks=program.total_weeks,
        uses_training_max=program.uses_training_max,
    )


def _get_program_or_404(program_key: str) -> ProgramDefinition:
    try:
        return get_program(program_key)
    except UnknownProgramError as e:
        raise ResourceNotFoundError(str(e))


@router.get("", response_model=List[ProgramSummary])
def list_catalog():
    """List every catalog program in catalog order."""
    return [_summary(program) for program in list_programs()]


@router.get("/{program_key}", response_model=ProgramSummary)
def get_catalog_program(program_key: str):
    """Get one catalog program's metadata."""
    return _summary(_get_program_or_404(program_key))


@router.post("/{program_key}/workouts", response_model=GenerateWorkoutsResponse)
def generate_workouts(
    program_key: str,
    request: GenerateWorkoutsRequest,
    increment: float = Depends(get_weight_increment),
):
    """
    Generate every training day of a program week.

    Weights are rounded to the configured plate increment. Week-invariant
    programs ignore ``week``; week-dependent programs clamp it into range.
    """
    program = _get_program_or_404(program_key)
    days = generate_program_workouts(
        program_key, request.rep_maxes, request.week, increment=increment
    )
    return GenerateWorkoutsResponse(
        program_key=program_key,
        week=program.resolve_week(request.week),
        days=[d.as_wire() for d in days],
    )


@router.get("/{program_key}/next-day", response_model=NextDayResponse)
def next_day(
    program_key: str,
    completed: List[str] = Query(default=[], description="Day labels already completed"),
):
    """First day of the program not yet completed, wrapping to the first day."""
    _get_program_or_404(program_key)
    return NextDayResponse(
        program_key=program_key,
        day=get_next_workout_day(program_key, completed),
    )
