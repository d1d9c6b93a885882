from typing import List, Tuple

from ..logic.contracts import CollegeStats
from ..logic.aggregator import round_half_up
from ..logic.constants import (
    FIT_RATE_BANDS,
    FIT_RATE_FALLBACK_BAND,
    SWITCH_RATE_BANDS,
    SWITCH_RATE_FALLBACK_BAND,
)


def describe_fit_rate(fit_rate: float, bands: List[Tuple[float, str]] = FIT_RATE_BANDS) -> str:
    for threshold, label in bands:
        if fit_rate >= threshold:
            return label
    return FIT_RATE_FALLBACK_BAND


def describe_switch_rate(switch_rate: float, bands: List[Tuple[float, str]] = SWITCH_RATE_BANDS) -> str:
    for threshold, label in bands:
        if switch_rate <= threshold:
            return label
    return SWITCH_RATE_FALLBACK_BAND


def _as_percent(value: float) -> str:
    return f"{int(round_half_up(value, 0))}%"


def explain(stats: CollegeStats, personality_type: str) -> str:
    """
    One sentence on why a college is recommended for a personality type.
    Pure function, no I/O.
    """
    fit_description = describe_fit_rate(stats.fit_rate)
    switch_description = describe_switch_rate(stats.switch_rate)

    return (
        f"Based on {stats.total_responses} {personality_type} students in this college, "
        f"{_as_percent(stats.fit_rate)} report that their major fits their personality "
        f"({fit_description} fit rate), "
        f"and {_as_percent(stats.switch_rate)} say they would switch if they could go back "
        f"(students {switch_description} regret this choice)."
    )
