"""
Schemas for custom program and user program endpoints.
"""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field

from domain.models import CustomProgram, ProgressionRule, UserProgramState


class CreateCustomProgramRequest(BaseModel):
    """Request body for POST /custom-programs."""
    name: str = Field(..., min_length=1, max_length=200)
    template_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("template_id", "templateId"),
    )
    weeks: int = Field(..., description="Program length: 4, 8 or 12 weeks")
    rules: List[ProgressionRule] = Field(default_factory=list)


class CustomProgramResponse(BaseModel):
    id: str
    name: str
    template_id: str
    weeks: int
    current_week: int
    is_complete: bool
    weeks_remaining: int
    rules: List[ProgressionRule]

    @classmethod
    def from_domain(cls, program: CustomProgram) -> "CustomProgramResponse":
        return cls(
            id=program.id,
            name=program.name,
            template_id=program.template_id,
            weeks=program.weeks,
            current_week=program.current_week,
            is_complete=program.is_complete,
            weeks_remaining=program.weeks_remaining,
            rules=program.rules,
        )


class StartWeekResponse(BaseModel):
    """Result of POST /custom-programs/{id}/next-week."""
    program: CustomProgramResponse
    week: int
    workout: Dict[str, Any]
    template: Dict[str, Any]


class SelectProgramRequest(BaseModel):
    """Request body for PUT /user/program."""
    program_key: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("program_key", "programKey"),
    )


class SetWeekRequest(BaseModel):
    """Request body for PATCH /user/program/week."""
    week: int


class UserProgramResponse(BaseModel):
    program_key: Optional[str]
    current_week: int
    total_weeks: Optional[int] = None

    @classmethod
    def from_domain(
        cls,
        state: UserProgramState,
        total_weeks: Optional[int] = None,
    ) -> "UserProgramResponse":
        return cls(
            program_key=state.program_key,
            current_week=state.current_week,
            total_weeks=total_weeks,
        )
