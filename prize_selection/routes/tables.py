from fastapi import APIRouter, HTTPException, Query
from typing import List

from prize_selection.config import API_PREFIX
from prize_selection.models.prize_models import PrizeCategorySpec, PrizeSelectionRow
from prize_selection.schemas import CategorySpecRequest, SelectionTableRequest
from prize_selection.table_builder import build_selection_table, create_category_spec
from prize_selection.table_validator import validate_selection_table

router = APIRouter(prefix=API_PREFIX, tags=["Selection Tables"])


@router.post(
    "/category-specs",
    summary="Build a prize category spec",
    description="Give either prize_names or prize_count. Missing names are generated as 'Unnamed <category> - <k>'.",
    response_model=PrizeCategorySpec,
)
def category_spec(req: CategorySpecRequest):
    try:
        return create_category_spec(
            req.category_name,
            req.probability_share,
            prize_count=req.prize_count,
            prize_names=req.prize_names,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/category-specs/{category_name}",
    summary="Build a prize category spec with generated names",
    response_model=PrizeCategorySpec,
)
def category_spec_no_names(
    category_name: str,
    probability_share: float = Query(ge=0.0, le=1.0),
    prize_count: int = Query(gt=0),
):
    try:
        return create_category_spec(category_name, probability_share, prize_count=prize_count)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/selection-table",
    summary="Build a cumulative probability table",
    description="Categories are laid out top-down in the order given. "
                "Shares summing below 1.0 leave a remainder that selects nothing.",
    response_model=List[PrizeSelectionRow],
)
def selection_table(specs: List[CategorySpecRequest]):
    if not specs:
        raise HTTPException(400, "At least one category spec is required")

    try:
        category_specs = [
            create_category_spec(
                spec.category_name,
                spec.probability_share,
                prize_count=spec.prize_count,
                prize_names=spec.prize_names,
            )
            for spec in specs
        ]
        return build_selection_table(category_specs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/selection-table/validate",
    summary="Check a probability table",
    description="Reports every index gap, out-of-range bound and non-decreasing bound, plus uncovered probability.",
    response_model=dict,
)
def selection_table_validate(req: SelectionTableRequest):
    return validate_selection_table(req.table)
