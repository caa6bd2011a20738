"""
Application-layer exceptions.

These exceptions are used across the engine, application and
infrastructure layers. Expected branches (deload weeks, exercises
without a progression rule) are normal control flow and never raise.
"""


class NotFoundError(Exception):
    """Base class for lookups that found nothing for the caller."""

    pass


class UnknownProgramError(NotFoundError):
    """Raised when a program key is not in the catalog."""

    def __init__(self, program_key: str):
        super().__init__(f"Program '{program_key}' not found")
        self.program_key = program_key


class CustomProgramNotFoundError(NotFoundError):
    """Raised when a custom program does not exist or belongs to another user."""

    def __init__(self, program_id: str):
        super().__init__(f"Custom program {program_id} not found")
        self.program_id = program_id


class TemplateNotFoundError(NotFoundError):
    """Raised when a workout template does not exist or belongs to another user."""

    def __init__(self, template_id: str):
        super().__init__(f"Template {template_id} not found")
        self.template_id = template_id


class ProgramCompleteError(Exception):
    """
    Raised when advancing a program that has already run its last week.

    Kept apart from NotFoundError so callers can offer a reset instead of a retry.
    """

    def __init__(self, current_week: int, total_weeks: int):
        super().__init__(
            f"Program complete: week {current_week} is past the last week ({total_weeks})"
        )
        self.current_week = current_week
        self.total_weeks = total_weeks


class InvalidWeekError(ValueError):
    """Raised when a week number is outside a program's defined range."""

    def __init__(self, week: int, total_weeks: int):
        super().__init__(f"Week {week} is outside the range 1-{total_weeks}")
        self.week = week
        self.total_weeks = total_weeks


class WeekAdvanceConflictError(Exception):
    """
    Raised when a concurrent request already advanced the week counter.

    The storage transaction compares the counter against the week the
    caller computed from; a mismatch aborts every effect of the advance.
    """

    def __init__(self, program_id: str, expected_week: int):
        super().__init__(
            f"Custom program {program_id} is no longer at week {expected_week}"
        )
        self.program_id = program_id
        self.expected_week = expected_week


class ProgramPersistenceError(Exception):
    """Error during an atomic program write.

    Raised when the storage layer fails to create the derived template,
    the workout, or to update the week counter. The transaction is rolled
    back, so no partial effects remain.
    """

    pass


class ProgramNotConfiguredError(Exception):
    """
    Raised when generating the user's workouts before they are set up.

    The user must have selected a catalog program and saved a rep max for
    each of the four primary lifts.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
