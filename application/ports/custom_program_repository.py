"""
Custom program repository port (interface).

This Protocol defines the contract for custom program persistence.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from typing import Any, Dict, List, Optional, Protocol


class CustomProgramRepository(Protocol):
    """
    Repository interface for user-authored custom programs.

    Rows are plain dictionaries with the ``custom_programs`` column names
    (id, user_id, name, template_id, weeks, current_week, rules).
    Every read and write is scoped to the owning user.
    """

    def get_by_id(self, program_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a custom program owned by the user.

        Args:
            program_id: The program's UUID as string
            user_id: Owner (Clerk user ID)

        Returns:
            Program dictionary, or None if missing or owned by someone else
        """
        ...

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get all custom programs for a user, most recently updated first.

        Args:
            user_id: Owner (Clerk user ID)

        Returns:
            List of program dictionaries
        """
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new custom program.

        Args:
            data: Program data dictionary (user_id, name, template_id, weeks, rules)

        Returns:
            Created program dictionary with generated ID and current_week 1
        """
        ...

    def update_current_week(
        self,
        program_id: str,
        user_id: str,
        current_week: int,
    ) -> Optional[Dict[str, Any]]:
        """
        Overwrite the week counter.

        Args:
            program_id: The program's UUID as string
            user_id: Owner (Clerk user ID)
            current_week: New 1-based week

        Returns:
            Updated program dictionary, or None if not found

        Raises:
            ProgramPersistenceError: If the write fails
        """
        ...

    def start_week_atomic(
        self,
        program_id: str,
        user_id: str,
        expected_week: int,
        template_data: Dict[str, Any],
        workout_data: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Start a program week in a single transaction.

        Creates the derived workout template, creates the workout that
        references it, and increments the program's week counter. The
        counter is compared against ``expected_week`` inside the same
        transaction; if another request advanced it first, nothing is
        written.

        Args:
            program_id: The program's UUID as string
            user_id: Owner (Clerk user ID)
            expected_week: Week the caller computed the template for
            template_data: Derived template (name, exercises)
            workout_data: Workout row (program_day)

        Returns:
            Dictionary with the created rows:
            {
                "template": {"id": ..., "name": ..., "exercises": [...]},
                "workout": {"id": ..., "template_id": ..., "program_day": ...},
                "current_week": <new week>
            }

        Raises:
            WeekAdvanceConflictError: If the counter no longer equals expected_week
            ProgramPersistenceError: If any write fails
        """
        ...
