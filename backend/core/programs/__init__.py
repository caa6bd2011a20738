"""
Program catalog.

Registry of every periodized program the engine can generate, keyed by the
program keys clients store (``"531"``, ``"nsuns"``, ...), in catalog order.

Usage:
    >>> from backend.core.programs import generate_program_workouts
    >>> from domain.models import RepMaxes

    >>> maxes = RepMaxes(squat=300, bench=200, deadlift=350, ohp=120)
    >>> days = generate_program_workouts("531", maxes, week=3)
    >>> [s.as_wire() for s in days[0].exercises[0].sets]
    [{'weight': 205, 'reps': 5}, {'weight': 230, 'reps': 3}, {'weight': 255, 'reps': '1+'}]
"""

import logging
from typing import Dict, List, Optional, Sequence

from application.exceptions import UnknownProgramError
from backend.core.programs.base import ProgramDefinition, ProgramLevel, resolve_week
from backend.core.programs.calgary import CALGARY_BARBELL
from backend.core.programs.candito import CANDITO_6_WEEK
from backend.core.programs.gzcl import GZCLP, JACKED_AND_TAN_2
from backend.core.programs.juggernaut import JUGGERNAUT
from backend.core.programs.linear import GREYSKULL_LP, STRONGLIFTS_5X5
from backend.core.programs.nsuns import NSUNS
from backend.core.programs.sheiko import SHEIKO_29
from backend.core.programs.smolov import SMOLOV_JR
from backend.core.programs.texas import TEXAS_METHOD
from backend.core.programs.wendler import WENDLER_531, WENDLER_531_BBB, WENDLER_531_FSL
from backend.core.rounding import DEFAULT_INCREMENT
from domain.models import RepMaxes, WorkoutDay

logger = logging.getLogger(__name__)

PROGRAMS: Dict[str, ProgramDefinition] = {
    program.key: program
    for program in (
        WENDLER_531,
        NSUNS,
        STRONGLIFTS_5X5,
        GZCLP,
        TEXAS_METHOD,
        GREYSKULL_LP,
        WENDLER_531_BBB,
        WENDLER_531_FSL,
        SMOLOV_JR,
        CANDITO_6_WEEK,
        JUGGERNAUT,
        JACKED_AND_TAN_2,
        CALGARY_BARBELL,
        SHEIKO_29,
    )
}

# Day labels are independent of the maxes, so zeros are enough to list them
_EMPTY_MAXES = RepMaxes()


def get_program(program_key: str) -> ProgramDefinition:
    """
    Look up a catalog program.

    Raises:
        UnknownProgramError: If no program is registered under the key
    """
    program = PROGRAMS.get(program_key)
    if program is None:
        raise UnknownProgramError(program_key)
    return program


def list_programs() -> List[ProgramDefinition]:
    """All catalog programs in catalog order."""
    return list(PROGRAMS.values())


def generate_program_workouts(
    program_key: str,
    rep_maxes: RepMaxes,
    week: Optional[int] = None,
    increment: float = DEFAULT_INCREMENT,
) -> List[WorkoutDay]:
    """
    Generate the full week of training days for a program.

    The output is a pure function of its arguments.

    Args:
        program_key: Catalog key
        rep_maxes: The lifter's one-rep maxes
        week: 1-based week; None means week 1, out-of-range weeks are clamped
        increment: Plate increment every weight is rounded to

    Returns:
        Training days in schedule order

    Raises:
        UnknownProgramError: If the key is not in the catalog
    """
    program = get_program(program_key)
    resolved = program.resolve_week(week)
    if week is not None and program.has_weeks and resolved != week:
        logger.debug(
            "Week %s out of range for %s, generating week %s", week, program_key, resolved
        )
    return program.generate(rep_maxes, week, increment)


def get_next_workout_day(program_key: str, completed_days: Sequence[str] = ()) -> str:
    """
    First day label of week 1 not yet in ``completed_days``.

    Wraps to the first day once every day is complete; returns "" for an
    unknown program key.
    """
    program = PROGRAMS.get(program_key)
    if program is None:
        return ""

    days = program.generate(_EMPTY_MAXES)
    completed = set(completed_days)
    for workout_day in days:
        if workout_day.day not in completed:
            return workout_day.day
    return days[0].day if days else ""


__all__ = [
    "PROGRAMS",
    "ProgramDefinition",
    "ProgramLevel",
    "generate_program_workouts",
    "get_next_workout_day",
    "get_program",
    "list_programs",
    "resolve_week",
]
