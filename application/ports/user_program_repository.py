"""
User program repository port (interface).
"""

from typing import Any, Dict, Optional, Protocol


class UserProgramRepository(Protocol):
    """
    Repository interface for the catalog program a user follows.

    One row per user in ``user_programs`` (user_id, program_key, current_week).
    """

    def get_state(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get the user's selected program and week.

        Returns:
            State dictionary, or None if the user never selected a program
        """
        ...

    def save_state(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert or update the user's program state.

        Args:
            user_id: Clerk user ID
            data: program_key and current_week

        Returns:
            Saved state dictionary
        """
        ...
