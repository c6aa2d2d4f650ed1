import logging

from fastapi import APIRouter, HTTPException
from typing import List

from prize_selection.config import API_PREFIX, MAX_SELECTION_COUNT
from prize_selection.models.prize_models import PrizeResultRow
from prize_selection.rng import get_rng
from prize_selection.schemas import SelectionRequest
from prize_selection.selection_engine import select_prizes, select_prizes_repeated

logger = logging.getLogger(__name__)

router = APIRouter(prefix=API_PREFIX, tags=["Prize Selection"])


@router.post(
    "/prize-results",
    summary="Run one selection operation",
    description="Draws draw_count prizes from every domain and merges the counts by prize name.",
    response_model=List[PrizeResultRow],
)
def prize_results(req: SelectionRequest):
    rng = get_rng(req.seed)
    try:
        return select_prizes(req.selection_domains, rng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/prize-results/{selection_count}",
    summary="Run repeated selection operations",
    description=f"Sums selection_count selection operations. Max: {MAX_SELECTION_COUNT}",
    response_model=List[PrizeResultRow],
)
def prize_results_multi(selection_count: int, req: SelectionRequest):
    if selection_count > MAX_SELECTION_COUNT:
        logger.warning("Rejected selection_count %d", selection_count)
        raise HTTPException(400, "Selection limit exceeded")

    rng = get_rng(req.seed)
    try:
        return select_prizes_repeated(req.selection_domains, selection_count, rng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
