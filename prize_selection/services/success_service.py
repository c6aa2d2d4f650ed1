import logging
import random
import statistics
import time
from typing import Callable, Dict, List

from prize_selection.config import TRIALS
from prize_selection.models.prize_models import SelectionDomain, SuccessInfo
from prize_selection.results_table import (
    count_criteria_met,
    required_prize_count,
    validate_subset_size,
    validate_success_criteria,
)
from prize_selection.selection_engine import SelectionPlan, draw_counts, prepare_selection

logger = logging.getLogger(__name__)

SuccessCheck = Callable[[List[int]], bool]


def _prepare(criteria: Dict[int, int], domains: List[SelectionDomain], trials: int) -> SelectionPlan:
    if trials <= 0:
        raise ValueError("trials must be greater than 0")
    plan = prepare_selection(domains)
    validate_success_criteria(criteria, len(plan.identities))
    return plan


def _add_counts(combined: List[int], counts: List[int]) -> None:
    for position, count in enumerate(counts):
        combined[position] += count


def _chance(plan: SelectionPlan, is_success: SuccessCheck, repetitions: int,
            rng: random.Random, trials: int) -> float:
    if repetitions <= 0:
        raise ValueError("repetitions must be greater than 0")

    started = time.perf_counter()
    successes = 0

    for _ in range(trials):
        combined = [0] * len(plan.identities)
        for _ in range(repetitions):
            _add_counts(combined, draw_counts(plan, rng))
            if is_success(combined):
                successes += 1
                break

    chance = successes / trials
    logger.info(
        "Success chance %.4f over %d trials of %d selections (%.0f ms)",
        chance, trials, repetitions, (time.perf_counter() - started) * 1000,
    )
    return chance


def _attempts_until_success(plan: SelectionPlan, is_success: SuccessCheck,
                            rng: random.Random, trials: int) -> SuccessInfo:
    started = time.perf_counter()
    attempts: List[int] = []

    for _ in range(trials):
        combined = [0] * len(plan.identities)
        attempt = 0
        # every table row has non-zero width, so any criteria is reachable
        while True:
            attempt += 1
            _add_counts(combined, draw_counts(plan, rng))
            if is_success(combined):
                attempts.append(attempt)
                break

    info = summarize_attempts(attempts, trials)
    logger.info(
        "Selections until success over %d trials: mean %.2f, median %.1f (%.0f ms)",
        trials, info.mean_pulls_required, info.median_pulls_required,
        (time.perf_counter() - started) * 1000,
    )
    return info


def summarize_attempts(attempts: List[int], trials: int) -> SuccessInfo:
    """
    Min/max/mean/median/mode of attempt counts. Ties for the mode go to the
    value seen first.
    """
    if not attempts:
        raise ValueError("attempts must not be empty")

    return SuccessInfo(
        trials_conducted=trials,
        min_pulls_required=min(attempts),
        max_pulls_required=max(attempts),
        mean_pulls_required=statistics.fmean(attempts),
        median_pulls_required=float(statistics.median(attempts)),
        mode_pulls_required=statistics.mode(attempts),
    )


def chance_of_success(
    criteria: Dict[int, int],
    domains: List[SelectionDomain],
    repetitions: int,
    rng: random.Random,
    trials: int = TRIALS,
) -> float:
    """
    Estimate the chance that up to `repetitions` selections meet every
    criterion. Each trial stops at its first success.
    """
    plan = _prepare(criteria, domains, trials)
    required = required_prize_count(criteria)
    return _chance(plan, lambda counts: count_criteria_met(counts, criteria) == required, repetitions, rng, trials)


def chance_of_success_subset(
    criteria: Dict[int, int],
    domains: List[SelectionDomain],
    repetitions: int,
    subset_size: int,
    rng: random.Random,
    trials: int = TRIALS,
) -> float:
    """Same as chance_of_success, but only subset_size of the required prizes need to be met."""
    plan = _prepare(criteria, domains, trials)
    validate_subset_size(criteria, subset_size)
    return _chance(
        plan,
        lambda counts: count_criteria_met(counts, criteria) >= subset_size,
        repetitions, rng, trials,
    )


def repetitions_until_success(
    criteria: Dict[int, int],
    domains: List[SelectionDomain],
    rng: random.Random,
    trials: int = TRIALS,
) -> SuccessInfo:
    plan = _prepare(criteria, domains, trials)
    required = required_prize_count(criteria)
    return _attempts_until_success(plan, lambda counts: count_criteria_met(counts, criteria) == required, rng, trials)


def repetitions_until_success_subset(
    criteria: Dict[int, int],
    domains: List[SelectionDomain],
    subset_size: int,
    rng: random.Random,
    trials: int = TRIALS,
) -> SuccessInfo:
    plan = _prepare(criteria, domains, trials)
    validate_subset_size(criteria, subset_size)
    return _attempts_until_success(
        plan,
        lambda counts: count_criteria_met(counts, criteria) >= subset_size,
        rng, trials,
    )
