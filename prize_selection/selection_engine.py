import logging
import random
import time
from bisect import bisect_left
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from prize_selection.config import MULTI_CATEGORY
from prize_selection.models.prize_models import PrizeResultRow, PrizeSelectionRow, SelectionDomain
from prize_selection.results_table import combine_result_tables
from prize_selection.table_validator import is_selection_table_valid

logger = logging.getLogger(__name__)


@dataclass
class DomainPlan:
    name: str
    draw_count: int
    # negated lower bounds, ascending, for bisect
    keys: List[float]
    # local row position -> merged result position
    targets: List[int]


@dataclass
class SelectionPlan:
    """Validated domains plus the merged (prize_name, category_name) layout."""

    identities: List[Tuple[str, str]]
    domains: List[DomainPlan]


def select_prize_from_table(
    table: List[PrizeSelectionRow],
    roll: float,
) -> Optional[PrizeSelectionRow]:
    """
    Scan top-down for the first row whose lower bound is at or below the roll.
    None means the roll landed in mass the table doesn't cover.
    """
    for row in table:
        if row.lower_bound <= roll:
            return row
    return None


def unique_prize_identities(domains: List[SelectionDomain]) -> List[Tuple[str, str]]:
    """
    Distinct (prize_name, category_name) pairs across every domain, in
    first-seen order. A prize name found under more than one category is
    reported once, under "Multi-Category".
    """
    categories_by_prize: Dict[str, Set[str]] = {}
    for domain in domains:
        for row in domain.table:
            categories_by_prize.setdefault(row.prize_name, set()).add(row.category_name)

    identities: List[Tuple[str, str]] = []
    seen = set()
    for domain in domains:
        for row in domain.table:
            category = row.category_name
            if len(categories_by_prize[row.prize_name]) > 1:
                category = MULTI_CATEGORY

            identity = (row.prize_name, category)
            if identity not in seen:
                seen.add(identity)
                identities.append(identity)

    return identities


def validate_domains(domains: List[SelectionDomain]) -> None:
    if not domains:
        raise ValueError("at least one selection domain is required")

    for domain in domains:
        if domain.draw_count <= 0:
            raise ValueError(f"draw_count for selection domain '{domain.name}' must be greater than 0")
        if not is_selection_table_valid(domain.table):
            raise ValueError(f"selection table for selection domain '{domain.name}' is invalid")


def prepare_selection(domains: List[SelectionDomain]) -> SelectionPlan:
    """
    Validate the domains once and work out where each domain's rows land in
    the merged result table. Domains index their own tables independently,
    so a local prize_index is resolved to a prize name first and the name
    to the merged row.
    """
    validate_domains(domains)

    identities = unique_prize_identities(domains)
    position_by_name = {name: position for position, (name, _) in enumerate(identities)}

    domain_plans = []
    for domain in domains:
        domain_plans.append(DomainPlan(
            name=domain.name,
            draw_count=domain.draw_count,
            keys=[-row.lower_bound for row in domain.table],
            targets=[position_by_name[row.prize_name] for row in domain.table],
        ))

    return SelectionPlan(identities=identities, domains=domain_plans)


def draw_counts(plan: SelectionPlan, rng: random.Random) -> List[int]:
    """One selection operation over every domain, tallied into the merged layout."""
    counts = [0] * len(plan.identities)

    for domain in plan.domains:
        keys = domain.keys
        targets = domain.targets
        row_count = len(keys)

        for _ in range(domain.draw_count):
            # first row (top-down) with lower_bound <= roll
            position = bisect_left(keys, -rng.random())
            if position < row_count:
                counts[targets[position]] += 1

    return counts


def to_result_table(plan: SelectionPlan, counts: List[int]) -> List[PrizeResultRow]:
    return [
        PrizeResultRow(
            prize_index=position + 1,
            category_name=category,
            prize_name=name,
            selected_count=counts[position],
        )
        for position, (name, category) in enumerate(plan.identities)
    ]


def select_prizes(domains: List[SelectionDomain], rng: random.Random) -> List[PrizeResultRow]:
    started = time.perf_counter()

    plan = prepare_selection(domains)
    results = to_result_table(plan, draw_counts(plan, rng))

    logger.debug(
        "Finished a selection operation in %.2f ms",
        (time.perf_counter() - started) * 1000,
    )
    return results


def select_prizes_repeated(
    domains: List[SelectionDomain],
    repetitions: int,
    rng: random.Random,
) -> List[PrizeResultRow]:
    """
    Run `repetitions` selection operations on the same generator and sum the
    result tables. The domains are validated once, up front.
    """
    if repetitions <= 0:
        raise ValueError("repetitions must be greater than 0")

    logger.debug("Performing %d selections over %d domains", repetitions, len(domains))

    plan = prepare_selection(domains)
    combined = to_result_table(plan, draw_counts(plan, rng))
    for _ in range(repetitions - 1):
        combined = combine_result_tables(combined, to_result_table(plan, draw_counts(plan, rng)))

    return combined
