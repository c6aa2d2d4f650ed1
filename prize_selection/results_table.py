from typing import Dict, List

from prize_selection.models.prize_models import PrizeResultRow


def empty_results_summary(row_count: int) -> Dict[int, int]:
    return {index: 0 for index in range(1, row_count + 1)}


def combine_result_tables(
    table1: List[PrizeResultRow],
    table2: List[PrizeResultRow],
) -> List[PrizeResultRow]:
    """
    Sum selected counts position by position.

    Both tables must share a schema: same length, and the same
    (prize_index, category_name, prize_name) at every position.
    """
    if table1 is None or table2 is None:
        raise ValueError("prize result tables must not be None")

    if len(table1) != len(table2):
        raise ValueError(
            f"prize result tables must be the same size ({len(table1)} != {len(table2)})"
        )

    combined = []
    for row1, row2 in zip(table1, table2):
        if (
            row1.prize_index != row2.prize_index
            or row1.category_name != row2.category_name
            or row1.prize_name != row2.prize_name
        ):
            raise ValueError(
                f"prize result tables have different schemas at prize_index {row1.prize_index}"
            )

        combined.append(PrizeResultRow(
            prize_index=row1.prize_index,
            category_name=row1.category_name,
            prize_name=row1.prize_name,
            selected_count=row1.selected_count + row2.selected_count,
        ))

    return combined


def validate_success_criteria(criteria: Dict[int, int], row_count: int) -> None:
    if criteria is None:
        raise ValueError("success criteria must not be None")

    if len(criteria) != row_count:
        raise ValueError(
            f"success criteria has {len(criteria)} entries but the result table has {row_count} prizes"
        )

    expected = set(range(1, row_count + 1))
    if set(criteria) != expected:
        raise ValueError(f"success criteria keys must be the prize indexes 1..{row_count}")

    negative = [index for index, required in criteria.items() if required < 0]
    if negative:
        raise ValueError(f"success criteria must not be negative (prize indexes {sorted(negative)})")


def required_prize_count(criteria: Dict[int, int]) -> int:
    return sum(1 for required in criteria.values() if required > 0)


def validate_subset_size(criteria: Dict[int, int], subset_size: int) -> None:
    specified = required_prize_count(criteria)
    if subset_size >= specified:
        raise ValueError(
            f"subset_size ({subset_size}) must be smaller than the number of prizes "
            f"with a non-zero success criterion ({specified})"
        )


def _selected_counts(result_table) -> List[int]:
    return [
        row if isinstance(row, int) else row.selected_count
        for row in result_table
    ]


def count_criteria_met(counts: List[int], criteria: Dict[int, int]) -> int:
    """Prizes with a positive requirement whose count reached it. Criteria must already be validated."""
    return sum(
        1 for index, required in criteria.items()
        if required > 0 and counts[index - 1] >= required
    )


def meets_criteria(result_table, criteria: Dict[int, int]) -> bool:
    """
    True when every prize with a positive requirement was selected at least
    that many times. Accepts result rows or a plain list of counts.
    """
    if result_table is None or criteria is None:
        raise ValueError("result table and success criteria must both be provided")
    validate_success_criteria(criteria, len(result_table))

    counts = _selected_counts(result_table)
    return count_criteria_met(counts, criteria) == required_prize_count(criteria)


def meets_criteria_subset(result_table, criteria: Dict[int, int], subset_size: int) -> bool:
    """At least subset_size of the required prizes individually met their count."""
    if result_table is None or criteria is None:
        raise ValueError("result table and success criteria must both be provided")
    validate_success_criteria(criteria, len(result_table))
    validate_subset_size(criteria, subset_size)

    counts = _selected_counts(result_table)
    return count_criteria_met(counts, criteria) >= subset_size
