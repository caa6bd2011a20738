"""
FastAPI Dependency Providers for the Strength Program Engine API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Use case providers are assembled from the repository providers
- Auth providers wrap the Clerk/API-key logic in backend.auth

Usage in routers:
    from api.deps import get_custom_program_repo, get_current_user
    from application.ports import CustomProgramRepository

    @router.get("/custom-programs")
    def list_custom_programs(
        user_id: str = Depends(get_current_user),
        program_repo: CustomProgramRepository = Depends(get_custom_program_repo),
    ):
        return program_repo.list_by_user(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_custom_program_repo] = lambda: FakeCustomProgramRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    CustomProgramRepository,
    RepMaxRepository,
    TemplateRepository,
    UserProgramRepository,
)
from application.use_cases import (
    CreateCustomProgramUseCase,
    GetUserWorkoutsUseCase,
    ManageTemplatesUseCase,
    RepMaxesUseCase,
    ResetCustomProgramUseCase,
    SelectProgramUseCase,
    StartNextWeekUseCase,
)

# Concrete implementations
from infrastructure import (
    SupabaseCustomProgramRepository,
    SupabaseRepMaxRepository,
    SupabaseTemplateRepository,
    SupabaseUserProgramRepository,
)

from backend.settings import Settings, get_settings as _get_settings
from backend.auth import get_current_user as _get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


def get_weight_increment(settings: Settings = Depends(get_settings)) -> float:
    """Plate increment used when generating catalog programs."""
    return settings.weight_increment


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_service_role_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_custom_program_repo(
    client: Client = Depends(get_supabase_client_required),
) -> CustomProgramRepository:
    """
    Get CustomProgramRepository implementation.

    Returns a SupabaseCustomProgramRepository instance with injected client.
    The return type is the Protocol to enable easy faking.
    """
    return SupabaseCustomProgramRepository(client)


def get_template_repo(
    client: Client = Depends(get_supabase_client_required),
) -> TemplateRepository:
    """Get TemplateRepository implementation."""
    return SupabaseTemplateRepository(client)


def get_user_program_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserProgramRepository:
    """Get UserProgramRepository implementation."""
    return SupabaseUserProgramRepository(client)


def get_rep_max_repo(
    client: Client = Depends(get_supabase_client_required),
) -> RepMaxRepository:
    """Get RepMaxRepository implementation."""
    return SupabaseRepMaxRepository(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_start_next_week_use_case(
    program_repo: CustomProgramRepository = Depends(get_custom_program_repo),
    template_repo: TemplateRepository = Depends(get_template_repo),
) -> StartNextWeekUseCase:
    return StartNextWeekUseCase(program_repo=program_repo, template_repo=template_repo)


def get_reset_custom_program_use_case(
    program_repo: CustomProgramRepository = Depends(get_custom_program_repo),
) -> ResetCustomProgramUseCase:
    return ResetCustomProgramUseCase(program_repo=program_repo)


def get_create_custom_program_use_case(
    program_repo: CustomProgramRepository = Depends(get_custom_program_repo),
    template_repo: TemplateRepository = Depends(get_template_repo),
) -> CreateCustomProgramUseCase:
    return CreateCustomProgramUseCase(program_repo=program_repo, template_repo=template_repo)


def get_select_program_use_case(
    user_program_repo: UserProgramRepository = Depends(get_user_program_repo),
) -> SelectProgramUseCase:
    return SelectProgramUseCase(user_program_repo=user_program_repo)


def get_manage_templates_use_case(
    template_repo: TemplateRepository = Depends(get_template_repo),
) -> ManageTemplatesUseCase:
    return ManageTemplatesUseCase(template_repo=template_repo)


def get_rep_maxes_use_case(
    rep_max_repo: RepMaxRepository = Depends(get_rep_max_repo),
) -> RepMaxesUseCase:
    return RepMaxesUseCase(rep_max_repo=rep_max_repo)


def get_user_workouts_use_case(
    user_program_repo: UserProgramRepository = Depends(get_user_program_repo),
    rep_max_repo: RepMaxRepository = Depends(get_rep_max_repo),
    increment: float = Depends(get_weight_increment),
) -> GetUserWorkoutsUseCase:
    return GetUserWorkoutsUseCase(
        user_program_repo=user_program_repo,
        rep_max_repo=rep_max_repo,
        increment=increment,
    )


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports:
    - Clerk JWT (RS256 via JWKS)
    - API key authentication

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(authorization=authorization, x_api_key=x_api_key)


__all__ = [
    # Settings
    "get_settings",
    "get_weight_increment",
    # Supabase
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_custom_program_repo",
    "get_template_repo",
    "get_user_program_repo",
    "get_rep_max_repo",
    # Use cases
    "get_start_next_week_use_case",
    "get_reset_custom_program_use_case",
    "get_create_custom_program_use_case",
    "get_select_program_use_case",
    "get_manage_templates_use_case",
    "get_rep_maxes_use_case",
    "get_user_workouts_use_case",
    # Auth
    "get_current_user",
]
