"""
Supabase implementation of CustomProgramRepository.

Queries against the ``custom_programs`` table. Starting a week goes
through the ``start_custom_program_week`` Postgres function so that the
derived template, the workout and the counter update commit together.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import ProgramPersistenceError, WeekAdvanceConflictError

logger = logging.getLogger(__name__)

# Raised by start_custom_program_week when current_week != p_expected_week
WEEK_CONFLICT_MARKER = "week_conflict"


class SupabaseCustomProgramRepository:
    """
    Supabase-backed custom program repository.

    Every query filters on ``user_id`` so one user can never see or
    modify another user's programs.
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def get_by_id(self, program_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table("custom_programs")
            .select("*")
            .eq("id", program_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        response = (
            self._client.table("custom_programs")
            .select("*")
            .eq("user_id", user_id)
            .order("updated_at", desc=True)
            .execute()
        )
        return response.data or []

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        response = self._client.table("custom_programs").insert(data).execute()
        if not response.data:
            raise ProgramPersistenceError("Insert into custom_programs returned no row")
        return response.data[0]

    def update_current_week(
        self,
        program_id: str,
        user_id: str,
        current_week: int,
    ) -> Optional[Dict[str, Any]]:
        try:
            response = (
                self._client.table("custom_programs")
                .update({
                    "current_week": current_week,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                })
                .eq("id", program_id)
                .eq("user_id", user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to set week of custom program {program_id}: {e}")
            raise ProgramPersistenceError(f"Week update failed: {e}") from e
        return response.data[0] if response.data else None

    def start_week_atomic(
        self,
        program_id: str,
        user_id: str,
        expected_week: int,
        template_data: Dict[str, Any],
        workout_data: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Start a program week atomically.

        Uses a PostgreSQL stored procedure so the template insert, the
        workout insert and the counter update happen in one transaction.
        The procedure locks the program row and raises ``week_conflict``
        when its counter no longer equals ``expected_week``.

        Returns:
            Dictionary with "template", "workout" and "current_week"

        Raises:
            WeekAdvanceConflictError: If another request already started the week
            ProgramPersistenceError: If the RPC call fails for any other reason
        """
        try:
            response = self._client.rpc(
                "start_custom_program_week",
                {
                    "p_program_id": program_id,
                    "p_user_id": user_id,
                    "p_expected_week": expected_week,
                    "p_template": json.dumps(template_data),
                    "p_workout": json.dumps(workout_data),
                },
            ).execute()

            if response.data is None:
                raise ProgramPersistenceError("RPC returned no data")

            return response.data
        except ProgramPersistenceError:
            raise
        except Exception as e:
            if WEEK_CONFLICT_MARKER in str(e):
                logger.warning(
                    f"Week conflict starting custom program {program_id} at week {expected_week}"
                )
                raise WeekAdvanceConflictError(program_id, expected_week) from e
            logger.error(f"Failed to start week {expected_week} of custom program {program_id}: {e}")
            raise ProgramPersistenceError(f"Atomic week start failed: {e}") from e
