import logging
from typing import List, Optional

from prize_selection.config import UNNAMED_PRIZE_PREFIX, ZERO_SNAP_TOLERANCE
from prize_selection.models.prize_models import PrizeCategorySpec, PrizeSelectionRow

logger = logging.getLogger(__name__)


def generate_prize_names(count: int, category_name: str) -> List[str]:
    if category_name and category_name.strip():
        return [f"{UNNAMED_PRIZE_PREFIX} {category_name} - {k}" for k in range(1, count + 1)]
    return [f"{UNNAMED_PRIZE_PREFIX} - {k}" for k in range(1, count + 1)]


def create_category_spec(
    category_name: str,
    probability_share: float,
    prize_count: Optional[int] = None,
    prize_names: Optional[List[str]] = None,
) -> PrizeCategorySpec:
    """
    Build one category spec from either a prize count or a list of names.
    When only a count is given, names are generated.
    """
    if not category_name or not category_name.strip():
        raise ValueError("category_name must not be blank")

    if prize_names is not None:
        if len(prize_names) == 0:
            raise ValueError("prize_names must have at least one entry")
        if prize_count is not None and prize_count != len(prize_names):
            raise ValueError(
                f"prize_count ({prize_count}) does not match number of prize_names ({len(prize_names)})"
            )
        return PrizeCategorySpec(
            category_name=category_name,
            probability_share=probability_share,
            prize_count=len(prize_names),
            prize_names=list(prize_names),
        )

    if prize_count is None:
        raise ValueError("Either prize_count or prize_names must be provided")
    if prize_count <= 0:
        raise ValueError("prize_count must be greater than 0")

    return PrizeCategorySpec(
        category_name=category_name,
        probability_share=probability_share,
        prize_count=prize_count,
        prize_names=generate_prize_names(prize_count, category_name),
    )


def build_selection_table(specs: List[PrizeCategorySpec]) -> List[PrizeSelectionRow]:
    """
    Flatten category specs into a cumulative probability table.

    Rows are laid out top-down from 1.0: each category takes a contiguous
    slice of width probability_share, split evenly between its prizes, and
    the first prize of a category gets the highest slice. Shares summing to
    less than 1.0 leave uncovered mass at the bottom, which selects nothing.
    """
    if not specs:
        raise ValueError("specs must contain at least one category")

    for spec in specs:
        if spec.probability_share < 0.0 or spec.probability_share > 1.0:
            raise ValueError(
                f"probability_share for category '{spec.category_name}' must be between 0 and 1"
            )
        if spec.prize_count <= 0:
            raise ValueError(f"prize_count for category '{spec.category_name}' must be greater than 0")
        if len(spec.prize_names) != spec.prize_count:
            raise ValueError(
                f"category '{spec.category_name}' has {len(spec.prize_names)} names for {spec.prize_count} prizes"
            )

    table: List[PrizeSelectionRow] = []
    current_lower_bound = 1.0
    max_index = 0

    for spec in specs:
        increment = spec.probability_share / spec.prize_count

        for k in range(1, spec.prize_count + 1):
            table.append(PrizeSelectionRow(
                prize_index=max_index + k,
                lower_bound=current_lower_bound - increment * k,
                category_name=spec.category_name,
                prize_name=spec.prize_names[k - 1],
            ))

        current_lower_bound = table[-1].lower_bound
        max_index = table[-1].prize_index

    # float drift: a table meant to end at 0 can land a hair either side
    if abs(table[-1].lower_bound) < ZERO_SNAP_TOLERANCE:
        table[-1].lower_bound = 0.0

    logger.debug("Built selection table with %d rows from %d categories", len(table), len(specs))
    return table
