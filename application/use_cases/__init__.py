"""
Application Use Cases for the Strength Program Engine API.

This package contains application-level use cases that orchestrate the
program engine and coordinate between ports/adapters. Use cases are the
entry points for business operations and contain the application's
workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import (
        CreateCustomProgramUseCase,
        ManageTemplatesUseCase,
        RepMaxesUseCase,
        ResetCustomProgramUseCase,
        SelectProgramUseCase,
        StartNextWeekUseCase,
    )

    # Start the next week of a custom program
    use_case = StartNextWeekUseCase(
        program_repo=program_repo,
        template_repo=template_repo,
    )
    result = use_case.execute(program_id="p-123", user_id="user-123")

    # Follow a catalog program
    select = SelectProgramUseCase(user_program_repo=user_program_repo)
    state = select.execute(user_id="user-123", program_key="531")
"""

from application.use_cases.create_custom_program import (
    CreateCustomProgramUseCase,
    CustomProgramValidationError,
)
from application.use_cases.manage_templates import (
    ManageTemplatesUseCase,
    TemplateValidationError,
)
from application.use_cases.rep_maxes import GetUserWorkoutsUseCase, RepMaxesUseCase
from application.use_cases.reset_custom_program import ResetCustomProgramUseCase
from application.use_cases.select_program import SelectProgramUseCase
from application.use_cases.start_next_week import (
    StartNextWeekResult,
    StartNextWeekUseCase,
    week_template_name,
    week_workout_name,
)

__all__ = [
    # CreateCustomProgram
    "CreateCustomProgramUseCase",
    "CustomProgramValidationError",
    # ManageTemplates
    "ManageTemplatesUseCase",
    "TemplateValidationError",
    # RepMaxes
    "GetUserWorkoutsUseCase",
    "RepMaxesUseCase",
    # ResetCustomProgram
    "ResetCustomProgramUseCase",
    # SelectProgram
    "SelectProgramUseCase",
    # StartNextWeek
    "StartNextWeekUseCase",
    "StartNextWeekResult",
    "week_template_name",
    "week_workout_name",
]
