"""
Schemas for workout template endpoints.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class CreateTemplateRequest(BaseModel):
    """Request body for POST /templates."""
    name: str = Field(..., max_length=200)
    exercises: List[Any] = Field(
        default_factory=list,
        description="Exercise objects ({name, sets}) or bare exercise names",
    )


class UpdateTemplateRequest(BaseModel):
    """Request body for PATCH /templates/{id}; omitted fields are left unchanged."""
    name: Optional[str] = Field(default=None, max_length=200)
    exercises: Optional[List[Any]] = None


class TemplateResponse(BaseModel):
    id: str
    name: str
    exercises: List[Dict[str, Any]] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "TemplateResponse":
        exercises = row.get("exercises")
        return cls(
            id=row["id"],
            name=row.get("name") or "",
            exercises=[e for e in exercises if isinstance(e, dict)] if isinstance(exercises, list) else [],
            created_at=str(row["created_at"]) if row.get("created_at") else None,
            updated_at=str(row["updated_at"]) if row.get("updated_at") else None,
        )


class DeleteTemplateResponse(BaseModel):
    success: bool
