"""
Rep maxes router.

The lifter's saved rep max per primary lift, from which the selected
catalog program's workouts are generated.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_rep_maxes_use_case
from api.errors import PersistenceFailure
from api.schemas import RepMaxResponse, SaveRepMaxesRequest
from application.exceptions import ProgramPersistenceError
from application.use_cases import RepMaxesUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/user/rep-maxes",
    tags=["Rep Maxes"],
)


@router.get("", response_model=List[RepMaxResponse])
def list_rep_maxes(
    user_id: str = Depends(get_current_user),
    use_case: RepMaxesUseCase = Depends(get_rep_maxes_use_case),
):
    try:
        return [RepMaxResponse.from_domain(rm) for rm in use_case.list(user_id)]
    except ProgramPersistenceError:
        logger.exception(f"Error loading rep maxes for user {user_id}")
        raise PersistenceFailure()


@router.post("", response_model=List[RepMaxResponse])
def save_rep_maxes(
    request: SaveRepMaxesRequest,
    user_id: str = Depends(get_current_user),
    use_case: RepMaxesUseCase = Depends(get_rep_maxes_use_case),
):
    """
    Save one or more lifts, replacing any earlier max for the same lift.

    ``oneRM`` is estimated from weight and reps when omitted.
    """
    try:
        saved = use_case.save(
            user_id=user_id,
            entries=[(e.exercise, e.weight, e.reps, e.one_rm) for e in request.rep_maxes],
        )
    except ProgramPersistenceError:
        logger.exception(f"Error saving rep maxes for user {user_id}")
        raise PersistenceFailure()
    return [RepMaxResponse.from_domain(rm) for rm in saved]
