"""
ManageTemplates Use Case.

CRUD over a user's workout templates, the starting point of every custom
program. Exercises are normalized to the stored camelCase shape on write,
so loosely-typed client input never reaches storage as-is.
"""

import logging
from typing import Any, Dict, List, Optional

from application.exceptions import TemplateNotFoundError
from application.ports import TemplateRepository
from backend.core.progression_service import exercises_to_storage, normalize_template_exercises

logger = logging.getLogger(__name__)


class TemplateValidationError(ValueError):
    """Raised when a template's fields are invalid."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise TemplateValidationError("Name is required")
    return name


class ManageTemplatesUseCase:
    """
    Use case for the user's workout templates.

    Every operation is scoped to ``user_id``; another user's template
    behaves exactly like a missing one.

    Usage:
        >>> use_case = ManageTemplatesUseCase(template_repo=repo)
        >>> template = use_case.create(
        ...     user_id="user-123",
        ...     name="Lower A",
        ...     exercises=[{"name": "Squat", "sets": [{"weight": 200, "reps": 5}]}],
        ... )
        >>> use_case.delete(template_id=template["id"], user_id="user-123")
    """

    def __init__(self, template_repo: TemplateRepository) -> None:
        self._repo = template_repo

    def list(self, user_id: str) -> List[Dict[str, Any]]:
        """The user's templates, most recently updated first."""
        return self._repo.list_by_user(user_id)

    def get(self, template_id: str, user_id: str) -> Dict[str, Any]:
        """
        Raises:
            TemplateNotFoundError: If the template is missing or not the user's
        """
        template = self._repo.get_by_id(template_id, user_id)
        if not template:
            raise TemplateNotFoundError(template_id)
        return template

    def create(self, user_id: str, name: str, exercises: Any = None) -> Dict[str, Any]:
        """
        Create a template.

        Raises:
            TemplateValidationError: If the name is blank
        """
        created = self._repo.create(
            {
                "user_id": user_id,
                "name": _clean_name(name),
                "exercises": exercises_to_storage(normalize_template_exercises(exercises)),
            }
        )
        logger.info(f"Created template {created.get('id')} for user {user_id}")
        return created

    def update(
        self,
        template_id: str,
        user_id: str,
        name: Optional[str] = None,
        exercises: Any = None,
    ) -> Dict[str, Any]:
        """
        Rename a template and/or replace its exercises.

        Raises:
            TemplateValidationError: If nothing is given to update, or the new name is blank
            TemplateNotFoundError: If the template is missing or not the user's
        """
        changes: Dict[str, Any] = {}
        if name is not None:
            changes["name"] = _clean_name(name)
        if exercises is not None:
            changes["exercises"] = exercises_to_storage(normalize_template_exercises(exercises))
        if not changes:
            raise TemplateValidationError("No valid fields to update")

        updated = self._repo.update(template_id, user_id, changes)
        if not updated:
            raise TemplateNotFoundError(template_id)
        return updated

    def delete(self, template_id: str, user_id: str) -> None:
        """
        Raises:
            TemplateNotFoundError: If the template is missing or not the user's
        """
        if not self._repo.delete(template_id, user_id):
            raise TemplateNotFoundError(template_id)
        logger.info(f"Deleted template {template_id} for user {user_id}")
