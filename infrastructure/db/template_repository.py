"""
Supabase implementation of TemplateRepository.

Queries against the ``workout_templates`` table.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import ProgramPersistenceError

logger = logging.getLogger(__name__)


class SupabaseTemplateRepository:
    """Supabase-backed workout template repository."""

    def __init__(self, client: Client):
        self._client = client

    def get_by_id(self, template_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table("workout_templates")
            .select("*")
            .eq("id", template_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        response = (
            self._client.table("workout_templates")
            .select("*")
            .eq("user_id", user_id)
            .order("updated_at", desc=True)
            .execute()
        )
        return response.data or []

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        response = self._client.table("workout_templates").insert(data).execute()
        if not response.data:
            raise ProgramPersistenceError("Insert into workout_templates returned no row")
        logger.info(f"Created template {response.data[0].get('id')} for user {data.get('user_id')}")
        return response.data[0]

    def update(
        self,
        template_id: str,
        user_id: str,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        try:
            response = (
                self._client.table("workout_templates")
                .update({**data, "updated_at": datetime.now(timezone.utc).isoformat()})
                .eq("id", template_id)
                .eq("user_id", user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update template {template_id}: {e}")
            raise ProgramPersistenceError(f"Template update failed: {e}") from e
        return response.data[0] if response.data else None

    def delete(self, template_id: str, user_id: str) -> bool:
        try:
            response = (
                self._client.table("workout_templates")
                .delete()
                .eq("id", template_id)
                .eq("user_id", user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to delete template {template_id}: {e}")
            raise ProgramPersistenceError(f"Template delete failed: {e}") from e
        return bool(response.data)
