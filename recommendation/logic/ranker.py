"""
Ranker

Ranks colleges by score and picks the recommendation plus alternatives.
"""

from typing import List
from .contracts import CollegeStats, RecommendationResult
from .constants import DEFAULT_MAX_ALTERNATIVES


def rank_colleges(colleges: List[CollegeStats]) -> List[CollegeStats]:
    """
    Rank colleges by score (descending).

    sorted() is stable, so ties keep their grouping order.

    Args:
        colleges: Unranked college stats

    Returns:
        Sorted list by score
    """
    return sorted(colleges, key=lambda c: c.score, reverse=True)


def select_recommendation(
    ranked: List[CollegeStats],
    total_data_points: int,
    max_alternatives: int = DEFAULT_MAX_ALTERNATIVES
) -> RecommendationResult:
    """
    Split a ranked list into the recommended college and its alternatives.

    Args:
        ranked: Colleges sorted by score
        total_data_points: Eligible raw records fetched
        max_alternatives: How many runners-up to return

    Returns:
        RecommendationResult
    """
    if not ranked:
        return RecommendationResult.empty(total_data_points=total_data_points)

    return RecommendationResult(
        recommended=ranked[0],
        alternatives=ranked[1:1 + max_alternatives],
        total_data_points=total_data_points,
        has_enough_data=True,
        all_colleges=ranked,
    )
