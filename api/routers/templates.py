"""
Workout templates router.

Templates are the building blocks custom programs progress from:
- List the user's templates
- Create, rename or replace a template's exercises
- Get or delete one template
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_manage_templates_use_case
from api.errors import InvalidRequestError, PersistenceFailure, ResourceNotFoundError
from api.schemas import (
    CreateTemplateRequest,
    DeleteTemplateResponse,
    TemplateResponse,
    UpdateTemplateRequest,
)
from application.exceptions import ProgramPersistenceError, TemplateNotFoundError
from application.use_cases import ManageTemplatesUseCase, TemplateValidationError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/templates",
    tags=["Templates"],
)


@router.get("", response_model=List[TemplateResponse])
def list_templates(
    user_id: str = Depends(get_current_user),
    use_case: ManageTemplatesUseCase = Depends(get_manage_templates_use_case),
):
    """List the user's templates, most recently updated first."""
    return [TemplateResponse.from_row(row) for row in use_case.list(user_id)]


@router.post("", response_model=TemplateResponse)
def create_template(
    request: CreateTemplateRequest,
    user_id: str = Depends(get_current_user),
    use_case: ManageTemplatesUseCase = Depends(get_manage_templates_use_case),
):
    try:
        row = use_case.create(user_id=user_id, name=request.name, exercises=request.exercises)
    except TemplateValidationError as e:
        raise InvalidRequestError(e.message)
    except ProgramPersistenceError:
        logger.exception(f"Error creating template for user {user_id}")
        raise PersistenceFailure()
    return TemplateResponse.from_row(row)


@router.get("/{template_id}", response_model=TemplateResponse)
def get_template(
    template_id: str,
    user_id: str = Depends(get_current_user),
    use_case: ManageTemplatesUseCase = Depends(get_manage_templates_use_case),
):
    try:
        return TemplateResponse.from_row(use_case.get(template_id=template_id, user_id=user_id))
    except TemplateNotFoundError:
        raise ResourceNotFoundError("Template not found")


@router.patch("/{template_id}", response_model=TemplateResponse)
def update_template(
    template_id: str,
    request: UpdateTemplateRequest,
    user_id: str = Depends(get_current_user),
    use_case: ManageTemplatesUseCase = Depends(get_manage_templates_use_case),
):
    """Rename a template and/or replace its exercises."""
    try:
        row = use_case.update(
            template_id=template_id,
            user_id=user_id,
            name=request.name,
            exercises=request.exercises,
        )
    except TemplateValidationError as e:
        raise InvalidRequestError(e.message)
    except TemplateNotFoundError:
        raise ResourceNotFoundError("Template not found")
    except ProgramPersistenceError:
        logger.exception(f"Error updating template {template_id}")
        raise PersistenceFailure()
    return TemplateResponse.from_row(row)


@router.delete("/{template_id}", response_model=DeleteTemplateResponse)
def delete_template(
    template_id: str,
    user_id: str = Depends(get_current_user),
    use_case: ManageTemplatesUseCase = Depends(get_manage_templates_use_case),
):
    try:
        use_case.delete(template_id=template_id, user_id=user_id)
    except TemplateNotFoundError:
        raise ResourceNotFoundError("Template not found")
    except ProgramPersistenceError:
        logger.exception(f"Error deleting template {template_id}")
        raise PersistenceFailure()
    return DeleteTemplateResponse(success=True)
