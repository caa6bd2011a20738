"""
Infrastructure Layer for the Strength Program Engine API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseCustomProgramRepository,
    SupabaseRepMaxRepository,
    SupabaseTemplateRepository,
    SupabaseUserProgramRepository,
)

__all__ = [
    "SupabaseCustomProgramRepository",
    "SupabaseRepMaxRepository",
    "SupabaseTemplateRepository",
    "SupabaseUserProgramRepository",
]
