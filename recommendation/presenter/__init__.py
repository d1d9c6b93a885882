"""
Recommendation Presenter

Derived data for the results page: explanation text, scatter coordinates
and static lookups. Nothing here touches the database.
"""

from .explainer import explain, describe_fit_rate, describe_switch_rate
from .scatter import layout, compute_axis_bounds, label_offsets, DEFAULT_AXIS_BOUNDS
from .catalog import top_majors, most_popular_colleges, PERSONALITY_TYPES, DEFAULT_TOP_MAJORS

__all__ = [
    "explain",
    "describe_fit_rate",
    "describe_switch_rate",
    "layout",
    "compute_axis_bounds",
    "label_offsets",
    "DEFAULT_AXIS_BOUNDS",
    "top_majors",
    "most_popular_colleges",
    "PERSONALITY_TYPES",
    "DEFAULT_TOP_MAJORS",
]
