"""
Custom program models: user-authored templates and linear progression rules.

Storage hands these around as camelCase JSON (``durationSeconds``,
``baseWeight``, ``currentWeek``); the models accept both spellings and
serialize with snake_case names unless ``by_alias=True`` is requested.
"""

from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


CUSTOM_PROGRAM_WEEK_OPTIONS = (4, 8, 12)


class TemplateSet(BaseModel):
    """A set inside a stored workout template."""

    weight: float = 0
    reps: float = 0
    duration_seconds: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("duration_seconds", "durationSeconds"),
        serialization_alias="durationSeconds",
    )

    # Unknown keys (rpe, notes, ...) are carried through untouched
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("weight", "reps", mode="before")
    @classmethod
    def blank_as_zero(cls, v):
        """Stored sets may carry null weight or reps; treat them as 0."""
        return 0 if v is None else v

    @property
    def is_timed(self) -> bool:
        """Duration-bearing (cardio) sets are exempt from load progression."""
        return bool(self.duration_seconds)


class TemplateExercise(BaseModel):
    """An exercise inside a stored workout template."""

    name: str = Field(..., min_length=1)
    sets: List[TemplateSet] = Field(default_factory=list)


class ProgressionRule(BaseModel):
    """
    Linear progression rule for one exercise.

    Matched to template exercises by case-insensitive name. ``base_weight``
    overrides the template weight; ``increment`` is added once per elapsed week.
    """

    exercise_name: str = Field(
        ...,
        validation_alias=AliasChoices("exercise_name", "exerciseName", "name"),
    )
    base_weight: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("base_weight", "baseWeight"),
    )
    increment: Optional[float] = None

    model_config = ConfigDict(populate_by_name=True)

    @property
    def match_key(self) -> str:
        return self.exercise_name.strip().lower()


class CustomProgram(BaseModel):
    """
    A user's instance of a custom program built from one of their templates.

    ``current_week`` is 1-based and points at the next week to start; the
    program is complete once it exceeds ``weeks``.
    """

    id: str
    user_id: str
    name: str = Field(..., min_length=1, max_length=200)
    template_id: str = Field(
        ..., validation_alias=AliasChoices("template_id", "templateId")
    )
    weeks: Literal[4, 8, 12]
    current_week: int = Field(
        default=1,
        ge=1,
        validation_alias=AliasChoices("current_week", "currentWeek"),
    )
    rules: List[ProgressionRule] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_complete(self) -> bool:
        return self.current_week > self.weeks

    @property
    def weeks_remaining(self) -> int:
        return max(self.weeks - self.current_week + 1, 0)


class UserProgramState(BaseModel):
    """The catalog program a user follows and the week they are on."""

    user_id: str
    program_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("program_key", "programKey", "selected_program"),
    )
    current_week: int = Field(
        default=1,
        ge=1,
        validation_alias=AliasChoices("current_week", "currentWeek"),
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)
