import logging

from fastapi import APIRouter, HTTPException

from prize_selection.config import API_PREFIX, MAX_SELECTION_COUNT
from prize_selection.models.prize_models import SuccessInfo
from prize_selection.rng import get_rng
from prize_selection.schemas import SuccessCalculationRequest, SubsetSuccessCalculationRequest
from prize_selection.services.success_service import (
    chance_of_success,
    chance_of_success_subset,
    repetitions_until_success,
    repetitions_until_success_subset,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{API_PREFIX}/success", tags=["Success Calculation"])


def _check_selection_limit(selection_count: int):
    if selection_count > MAX_SELECTION_COUNT:
        logger.warning("Rejected selection_count %d", selection_count)
        raise HTTPException(400, "Selection limit exceeded")


@router.post(
    "/chance",
    summary="Chance to meet success criteria",
    description="Monte Carlo estimate over 10,000 trials of meeting every criterion within selection_count selections.",
    response_model=float,
)
def success_chance(req: SuccessCalculationRequest):
    _check_selection_limit(req.selection_count)
    rng = get_rng(req.seed)
    try:
        return chance_of_success(req.success_criteria, req.selection_domains, req.selection_count, rng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/chance/subset",
    summary="Chance to meet a subset of the success criteria",
    description="Success when at least subset_size of the non-zero criteria are met.",
    response_model=float,
)
def success_chance_subset(req: SubsetSuccessCalculationRequest):
    _check_selection_limit(req.selection_count)
    rng = get_rng(req.seed)
    try:
        return chance_of_success_subset(
            req.success_criteria, req.selection_domains, req.selection_count, req.subset_size, rng
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/selections-until-success",
    summary="Selections needed to meet success criteria",
    description="Min / max / mean / median / mode of selections until every criterion is met, over 10,000 trials.",
    response_model=SuccessInfo,
)
def selections_until_success(req: SuccessCalculationRequest):
    rng = get_rng(req.seed)
    try:
        return repetitions_until_success(req.success_criteria, req.selection_domains, rng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/selections-until-success/subset",
    summary="Selections needed to meet a subset of the success criteria",
    response_model=SuccessInfo,
)
def selections_until_success_subset(req: SubsetSuccessCalculationRequest):
    rng = get_rng(req.seed)
    try:
        return repetitions_until_success_subset(
            req.success_criteria, req.selection_domains, req.subset_size, rng
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
