"""
API package for the Strength Program Engine API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: HTTP errors raised for engine and use case failures
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_weight_increment,
    get_supabase_client,
    get_supabase_client_required,
    get_custom_program_repo,
    get_template_repo,
    get_user_program_repo,
    get_rep_max_repo,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    "get_weight_increment",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_custom_program_repo",
    "get_template_repo",
    "get_user_program_repo",
    "get_rep_max_repo",
    # Authentication
    "get_current_user",
]
