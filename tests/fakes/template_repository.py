"""
Fake Template Repository for testing.

This module provides an in-memory implementation of TemplateRepository
for fast, isolated testing without database dependencies.
"""
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
import uuid
import copy


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class FakeTemplateRepository:
    """
    In-memory fake implementation of TemplateRepository for testing.

    Usage:
        repo = FakeTemplateRepository()
        repo.seed([{"id": "t1", "user_id": "user1", "name": "Push", "exercises": [...]}])
        template = repo.get_by_id("t1", "user1")
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._templates: Dict[str, Dict[str, Any]] = {}

    def reset(self) -> None:
        """Clear all stored templates."""
        self._templates.clear()

    def seed(self, templates: List[Dict[str, Any]]) -> None:
        """
        Seed the repository with test data.

        Args:
            templates: List of template dicts. Must include 'user_id'.
        """
        for template in templates:
            template_id = template.get("id") or str(uuid.uuid4())
            self._templates[template_id] = {**copy.deepcopy(template), "id": template_id}

    def count(self) -> int:
        """Number of stored templates (test helper)."""
        return len(self._templates)

    # =========================================================================
    # TemplateRepository Protocol Methods
    # =========================================================================

    def get_by_id(self, template_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        template = self._templates.get(template_id)
        if template is None or template.get("user_id") != user_id:
            return None
        return copy.deepcopy(template)

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        # Newest writes sit last in the dict; reversing keeps them first on timestamp ties
        owned = [t for t in reversed(list(self._templates.values())) if t.get("user_id") == user_id]
        owned.sort(key=lambda t: t.get("updated_at") or "", reverse=True)
        return copy.deepcopy(owned)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        template_id = str(uuid.uuid4())
        now = _now()
        self._templates[template_id] = {
            "created_at": now,
            "updated_at": now,
            **copy.deepcopy(data),
            "id": template_id,
        }
        return copy.deepcopy(self._templates[template_id])

    def update(
        self,
        template_id: str,
        user_id: str,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        if self.get_by_id(template_id, user_id) is None:
            return None
        template = self._templates.pop(template_id)
        template.update(copy.deepcopy(data))
        template["updated_at"] = _now()
        self._templates[template_id] = template
        return copy.deepcopy(template)

    def delete(self, template_id: str, user_id: str) -> bool:
        if self.get_by_id(template_id, user_id) is None:
            return False
        del self._templates[template_id]
        return True
