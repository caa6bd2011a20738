"""
HTTP errors for engine and use case failures.

Domain exceptions are translated at the router boundary. Conflicts carry
a machine-readable ``error`` code in ``detail`` so clients can tell a
finished program (offer a reset) from a lost race (refresh and retry).
"""

from fastapi import HTTPException


class ResourceNotFoundError(HTTPException):
    """
    Raised when a program, custom program or template cannot be found.

    Also used when the resource belongs to another user, so callers cannot
    distinguish "not found" from "not yours".
    """

    def __init__(self, message: str):
        super().__init__(status_code=404, detail=message)


class ProgramCompleteConflict(HTTPException):
    """Raised when advancing a program that has run its last week."""

    def __init__(self, message: str):
        super().__init__(
            status_code=409,
            detail={"error": "program_complete", "message": message},
        )


class WeekConflict(HTTPException):
    """Raised when a concurrent request already advanced the week."""

    def __init__(self, message: str):
        super().__init__(
            status_code=409,
            detail={"error": "week_conflict", "message": message},
        )


class InvalidRequestError(HTTPException):
    """Raised for well-formed requests the engine rejects (bad week, bad weeks option)."""

    def __init__(self, message: str):
        super().__init__(status_code=422, detail=message)


class PersistenceFailure(HTTPException):
    """Raised when storage fails; the underlying error is logged, not returned."""

    def __init__(self):
        super().__init__(status_code=500, detail="Failed to save program changes")


class ProgramNotConfigured(HTTPException):
    """Raised when generating the user's workouts before a program and maxes are saved."""

    def __init__(self, message: str):
        super().__init__(
            status_code=409,
            detail={"error": "program_not_configured", "message": message},
        )
