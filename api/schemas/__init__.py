"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- programs: Program catalog and one-rep-max estimation
- custom_programs: Custom programs and the user's selected catalog program
- templates: Workout templates
- rep_maxes: Saved rep maxes and workouts generated from them
"""

from api.schemas.custom_programs import (
    CreateCustomProgramRequest,
    CustomProgramResponse,
    SelectProgramRequest,
    SetWeekRequest,
    StartWeekResponse,
    UserProgramResponse,
)
from api.schemas.rep_maxes import (
    RepMaxEntry,
    RepMaxResponse,
    SaveRepMaxesRequest,
    UserWorkoutsResponse,
)
from api.schemas.templates import (
    CreateTemplateRequest,
    DeleteTemplateResponse,
    TemplateResponse,
    UpdateTemplateRequest,
)
from api.schemas.programs import (
    GenerateWorkoutsRequest,
    GenerateWorkoutsResponse,
    NextDayResponse,
    OneRepMaxRequest,
    OneRepMaxResponse,
    ProgramSummary,
)

__all__ = [
    "CreateCustomProgramRequest",
    "CustomProgramResponse",
    "SelectProgramRequest",
    "SetWeekRequest",
    "StartWeekResponse",
    "UserProgramResponse",
    "GenerateWorkoutsRequest",
    "GenerateWorkoutsResponse",
    "NextDayResponse",
    "OneRepMaxRequest",
    "OneRepMaxResponse",
    "ProgramSummary",
    "RepMaxEntry",
    "RepMaxResponse",
    "SaveRepMaxesRequest",
    "UserWorkoutsResponse",
    "CreateTemplateRequest",
    "DeleteTemplateResponse",
    "TemplateResponse",
    "UpdateTemplateRequest",
]
