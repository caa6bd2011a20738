"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. These implementations can be
injected into use cases and routers for clean separation of concerns and
testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseCustomProgramRepository,
        SupabaseRepMaxRepository,
        SupabaseTemplateRepository,
        SupabaseUserProgramRepository,
    )

    client = create_client(url, key)
    program_repo = SupabaseCustomProgramRepository(client)
"""

from infrastructure.db.custom_program_repository import SupabaseCustomProgramRepository
from infrastructure.db.rep_max_repository import SupabaseRepMaxRepository
from infrastructure.db.template_repository import SupabaseTemplateRepository
from infrastructure.db.user_program_repository import SupabaseUserProgramRepository

__all__ = [
    "SupabaseCustomProgramRepository",
    "SupabaseRepMaxRepository",
    "SupabaseTemplateRepository",
    "SupabaseUserProgramRepository",
]
