"""
Supabase implementation of RepMaxRepository.

Queries against the ``rep_maxes`` table (one row per user and lift).
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from supabase import Client

from application.exceptions import ProgramPersistenceError

logger = logging.getLogger(__name__)


class SupabaseRepMaxRepository:
    """Supabase-backed store for users' saved rep maxes."""

    def __init__(self, client: Client):
        self._client = client

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        response = (
            self._client.table("rep_maxes")
            .select("*")
            .eq("user_id", user_id)
            .execute()
        )
        return response.data or []

    def upsert_many(self, user_id: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not rows:
            return []

        now = datetime.now(timezone.utc).isoformat()
        payload = [{**row, "user_id": user_id, "updated_at": now} for row in rows]
        try:
            response = (
                self._client.table("rep_maxes")
                .upsert(payload, on_conflict="user_id,exercise")
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to save rep maxes for user {user_id}: {e}")
            raise ProgramPersistenceError(f"Rep max upsert failed: {e}") from e

        if not response.data:
            raise ProgramPersistenceError(f"Upsert into rep_maxes returned no rows for {user_id}")
        return response.data
