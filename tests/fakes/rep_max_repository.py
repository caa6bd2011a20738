"""
Fake Rep Max Repository for testing.

This module provides an in-memory implementation of RepMaxRepository
for fast, isolated testing without database dependencies.
"""
from typing import Dict, Any, List, Tuple
import copy

from application.exceptions import ProgramPersistenceError


class FakeRepMaxRepository:
    """
    In-memory fake implementation of RepMaxRepository for testing.

    Rows are keyed on (user_id, exercise), matching the table's upsert key.

    Usage:
        repo = FakeRepMaxRepository()
        repo.seed("user1", {"squat": 300, "bench": 200, "deadlift": 350, "ohp": 120})
        rows = repo.list_by_user("user1")
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._rows: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self._fail_on_next_upsert = False

    def reset(self) -> None:
        """Clear all stored rep maxes and pending failures."""
        self._rows.clear()
        self._fail_on_next_upsert = False

    def seed(self, user_id: str, one_rms: Dict[str, float]) -> None:
        """Seed one-rep maxes per lift, as if each had been lifted for a single."""
        for exercise, one_rm in one_rms.items():
            self._rows[(user_id, exercise)] = {
                "user_id": user_id,
                "exercise": exercise,
                "weight": one_rm,
                "reps": 1,
                "one_rm": one_rm,
            }

    def count(self) -> int:
        """Number of stored rows (test helper)."""
        return len(self._rows)

    def fail_next_upsert(self) -> None:
        """Make the next upsert_many raise ProgramPersistenceError."""
        self._fail_on_next_upsert = True

    # =========================================================================
    # RepMaxRepository Protocol Methods
    # =========================================================================

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        return copy.deepcopy([row for (owner, _), row in self._rows.items() if owner == user_id])

    def upsert_many(self, user_id: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if self._fail_on_next_upsert:
            self._fail_on_next_upsert = False
            raise ProgramPersistenceError("Simulated upsert failure")

        saved = []
        for row in rows:
            stored = {**copy.deepcopy(row), "user_id": user_id}
            self._rows[(user_id, row["exercise"])] = stored
            saved.append(copy.deepcopy(stored))
        return saved
