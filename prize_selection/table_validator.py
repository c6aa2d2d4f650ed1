import math
from typing import Any, Dict, List

from prize_selection.models.prize_models import PrizeSelectionRow


def validate_selection_table(table: List[PrizeSelectionRow]) -> Dict[str, Any]:
    """
    Walk a probability table top to bottom and collect every problem.

    A valid table has prize indexes 1, 2, 3, ... with no gaps, every lower
    bound inside [0, 1), and lower bounds strictly decreasing down the
    table (the row above the first one is treated as 1.0). The scan never
    stops early, so the report lists all violations.
    """
    errors: List[Dict[str, str]] = []

    previous_index = 0
    previous_bound = 1.0

    for i, row in enumerate(table):
        path = f"$[{i}]"

        if row.prize_index != previous_index + 1:
            errors.append({
                "path": f"{path}.prize_index",
                "message": f"prize_index {row.prize_index} should be {previous_index + 1}."
            })

        if not math.isfinite(row.lower_bound) or not 0.0 <= row.lower_bound < 1.0:
            errors.append({
                "path": f"{path}.lower_bound",
                "message": f"lower_bound {row.lower_bound} must be in [0, 1)."
            })

        # NaN fails this comparison
        if not row.lower_bound < previous_bound:
            errors.append({
                "path": f"{path}.lower_bound",
                "message": f"lower_bound {row.lower_bound} must be below previous bound {previous_bound}."
            })

        previous_index += 1
        previous_bound = row.lower_bound

    covered = 1.0 - table[-1].lower_bound if table else 0.0
    if not math.isfinite(covered):
        covered = None

    summary = {
        "row_count": len(table),
        "categories": len({row.category_name for row in table}),
        "covered_probability": round(covered, 12) if covered is not None else None,
        "uncovered_probability": round(1.0 - covered, 12) if covered is not None else None,
    }

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "summary": summary,
    }


def is_selection_table_valid(table: List[PrizeSelectionRow]) -> bool:
    return validate_selection_table(table)["valid"]
