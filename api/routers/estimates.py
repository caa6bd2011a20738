"""
Estimation router.

One-rep-max and training-max estimates from a submaximal set.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_weight_increment
from api.schemas import OneRepMaxRequest, OneRepMaxResponse
from backend.core.rounding import compute_training_max, estimate_one_rep_max

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/estimates",
    tags=["Estimates"],
)


@router.post("/one-rep-max", response_model=OneRepMaxResponse)
def one_rep_max(
    request: OneRepMaxRequest,
    increment: float = Depends(get_weight_increment),
):
    """
    Estimate a one-rep max (Epley) and the matching 90% training max.

    Zero weight or zero reps yields zeros rather than an error.
    """
    estimate = estimate_one_rep_max(request.weight, request.reps)
    return OneRepMaxResponse(
        one_rep_max=estimate,
        training_max=compute_training_max(estimate, increment),
    )
