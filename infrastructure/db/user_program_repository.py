"""
Supabase implementation of UserProgramRepository.

Queries against the ``user_programs`` table (one row per user).
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from supabase import Client

from application.exceptions import ProgramPersistenceError

logger = logging.getLogger(__name__)


class SupabaseUserProgramRepository:
    """Supabase-backed store for each user's selected catalog program."""

    def __init__(self, client: Client):
        self._client = client

    def get_state(self, user_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table("user_programs")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def save_state(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        row = {
            **data,
            "user_id": user_id,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        response = (
            self._client.table("user_programs")
            .upsert(row, on_conflict="user_id")
            .execute()
        )
        if not response.data:
            raise ProgramPersistenceError(f"Upsert into user_programs returned no row for {user_id}")
        return response.data[0]
