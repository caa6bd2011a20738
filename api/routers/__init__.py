"""
Router package for the Strength Program Engine API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- programs: Program catalog and workout generation
- estimates: One-rep-max and training-max estimates
- custom_programs: User-authored programs with linear progression
- templates: Workout templates custom programs are built from
- user_program: The catalog program a user follows and its generated week
- rep_maxes: The user's saved per-lift rep maxes
"""

from api.routers.health import router as health_router
from api.routers.programs import router as programs_router
from api.routers.estimates import router as estimates_router
from api.routers.custom_programs import router as custom_programs_router
from api.routers.templates import router as templates_router
from api.routers.user_program import router as user_program_router
from api.routers.rep_maxes import router as rep_maxes_router

__all__ = [
    "health_router",
    "programs_router",
    "estimates_router",
    "custom_programs_router",
    "templates_router",
    "user_program_router",
    "rep_maxes_router",
]
