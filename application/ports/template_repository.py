"""
Workout template repository port (interface).
"""

from typing import Any, Dict, List, Optional, Protocol


class TemplateRepository(Protocol):
    """
    Repository interface for workout templates.

    A template is a named list of exercises stored as JSON in the
    ``exercises`` column of ``workout_templates``.
    """

    def get_by_id(self, template_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a template owned by the user.

        Args:
            template_id: The template's UUID as string
            user_id: Owner (Clerk user ID)

        Returns:
            Template dictionary, or None if missing or owned by someone else
        """
        ...

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Get all templates for a user, most recently updated first."""
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new template.

        Args:
            data: Template data dictionary (user_id, name, exercises)

        Returns:
            Created template dictionary with generated ID
        """
        ...

    def update(
        self,
        template_id: str,
        user_id: str,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Update a template owned by the user.

        Args:
            template_id: The template's UUID as string
            user_id: Owner (Clerk user ID)
            data: Fields to change (name, exercises)

        Returns:
            Updated template dictionary, or None if missing or owned by someone else
        """
        ...

    def delete(self, template_id: str, user_id: str) -> bool:
        """Delete a template owned by the user. Returns False if nothing was deleted."""
        ...
