"""
Repository Interfaces (Ports) for the Strength Program Engine API.

This package defines abstract interfaces that decouple program logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the engine needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import CustomProgramRepository, TemplateRepository

    class StartNextWeekUseCase:
        def __init__(self, program_repo: CustomProgramRepository, ...):
            self._program_repo = program_repo
"""

from application.ports.custom_program_repository import CustomProgramRepository
from application.ports.rep_max_repository import RepMaxRepository
from application.ports.template_repository import TemplateRepository
from application.ports.user_program_repository import UserProgramRepository

__all__ = [
    "CustomProgramRepository",
    "RepMaxRepository",
    "TemplateRepository",
    "UserProgramRepository",
]
