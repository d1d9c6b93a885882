"""
Score Aggregator

Groups survey records by college and turns each group into CollegeStats:
fit rate, switch rate and the weighted ranking score.
"""

import math
from typing import Dict, List, Iterable, Optional

from .contracts import SurveyRecord, CollegeStats, ScoringConfig
from .constants import RATE_DECIMALS, RATE_CEILING


# college -> {"fit": [...], "would_switch": [...]}
CollegeGroups = Dict[str, Dict[str, List[bool]]]


def round_half_up(value: float, decimals: int = RATE_DECIMALS) -> float:
    """
    Round halves away from zero for non-negative values (12.25 -> 12.3).

    The built-in round() uses banker's rounding, which would turn 12.5 into 12.
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def _percentage_true(values: List[bool]) -> float:
    if not values:
        return 0.0
    return sum(1 for v in values if v) / len(values) * RATE_CEILING


def group_by_college(records: Iterable[SurveyRecord]) -> CollegeGroups:
    """
    Partition records by exact college name, keeping first-seen order.

    Null answers are skipped per field, so one record can count towards
    the fit list without counting towards the switch list.

    Args:
        records: Survey records for one personality type

    Returns:
        Ordered dict of college name to its boolean observations
    """
    groups: CollegeGroups = {}

    for record in records:
        if not record.is_eligible:
            continue

        group = groups.setdefault(record.college, {"fit": [], "would_switch": []})

        if record.major_fits is not None:
            group["fit"].append(record.major_fits)
        if record.would_switch is not None:
            group["would_switch"].append(record.would_switch)

    return groups


def compute_college_stats(
    college: str,
    fit: List[bool],
    would_switch: List[bool],
    config: ScoringConfig
) -> Optional[CollegeStats]:
    """
    Compute rates and score for one college.

    Args:
        college: College name
        fit: Non-null "major fits" answers
        would_switch: Non-null "would switch" answers
        config: Weights and minimum sample size

    Returns:
        CollegeStats, or None when the college has too few answers
    """
    total_responses = max(len(fit), len(would_switch))
    if total_responses < config.min_responses:
        return None

    fit_rate = _percentage_true(fit)
    switch_rate = _percentage_true(would_switch)

    # Score uses the unrounded rates
    score = fit_rate * config.fit_weight + (RATE_CEILING - switch_rate) * config.switch_weight

    return CollegeStats(
        college=college,
        total_responses=total_responses,
        fit_rate=round_half_up(fit_rate),
        switch_rate=round_half_up(switch_rate),
        score=score,
    )


def aggregate_colleges(
    records: Iterable[SurveyRecord],
    config: ScoringConfig
) -> List[CollegeStats]:
    """
    Build CollegeStats for every college that reaches the minimum sample.

    Args:
        records: Survey records for one personality type
        config: Scoring configuration

    Returns:
        Unranked list of CollegeStats in grouping order
    """
    stats: List[CollegeStats] = []

    for college, group in group_by_college(records).items():
        college_stats = compute_college_stats(college, group["fit"], group["would_switch"], config)
        if college_stats is not None:
            stats.append(college_stats)

    return stats
