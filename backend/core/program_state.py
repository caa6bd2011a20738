"""
Week counters for custom programs and selected catalog programs.

Every transition here is pure: it takes a frozen model and returns a new
one. Persisting the result (and guarding against concurrent writers) is the
caller's job.
"""
import logging

from application.exceptions import InvalidWeekError, ProgramCompleteError
from backend.core.programs import get_program
from domain.models import CustomProgram, UserProgramState

logger = logging.getLogger(__name__)


# =============================================================================
# Custom programs
# =============================================================================


def advance_week(program: CustomProgram) -> CustomProgram:
    """
    Move a custom program to its next week.

    Raises:
        ProgramCompleteError: If the program has already run its last week
    """
    if program.is_complete:
        raise ProgramCompleteError(program.current_week, program.weeks)
    return program.model_copy(update={"current_week": program.current_week + 1})


def reset_program(program: CustomProgram) -> CustomProgram:
    """Return a custom program to week 1. Template and rules are untouched."""
    return program.model_copy(update={"current_week": 1})


# =============================================================================
# Catalog programs
# =============================================================================


def select_program(state: UserProgramState, program_key: str) -> UserProgramState:
    """
    Switch the user to a catalog program, starting at week 1.

    Raises:
        UnknownProgramError: If the key is not in the catalog
    """
    get_program(program_key)
    return state.model_copy(update={"program_key": program_key, "current_week": 1})


def _selected_total_weeks(state: UserProgramState) -> int:
    if state.program_key is None:
        return 1
    program = get_program(state.program_key)
    return program.total_weeks if program.has_weeks else 1


def set_program_week(state: UserProgramState, week: int) -> UserProgramState:
    """
    Jump to a specific week of the selected program.

    Raises:
        InvalidWeekError: If the week is outside 1..total_weeks
        UnknownProgramError: If the stored program key is no longer in the catalog
    """
    total_weeks = _selected_total_weeks(state)
    if week < 1 or week > total_weeks:
        raise InvalidWeekError(week, total_weeks)
    return state.model_copy(update={"current_week": week})


def advance_program_week(state: UserProgramState) -> UserProgramState:
    """
    Move the selected catalog program forward one week.

    Raises:
        ProgramCompleteError: If the user is already on the last week
        UnknownProgramError: If the stored program key is no longer in the catalog
    """
    total_weeks = _selected_total_weeks(state)
    if state.current_week >= total_weeks:
        raise ProgramCompleteError(state.current_week, total_weeks)
    return state.model_copy(update={"current_week": state.current_week + 1})
