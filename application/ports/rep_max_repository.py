"""
Rep max repository port (interface).
"""

from typing import Any, Dict, List, Protocol


class RepMaxRepository(Protocol):
    """
    Repository interface for a user's saved rep maxes.

    One row per (user_id, exercise) in ``rep_maxes``, holding the weight
    and reps lifted and the estimated one-rep max (``one_rm``).
    """

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Get every saved rep max for a user."""
        ...

    def upsert_many(self, user_id: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Insert or replace rep maxes, keyed on (user_id, exercise).

        Args:
            user_id: Clerk user ID
            rows: exercise, weight, reps and one_rm per lift

        Returns:
            Saved rows

        Raises:
            ProgramPersistenceError: If the write fails
        """
        ...
