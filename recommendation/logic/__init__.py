"""
Recommendation Logic Module

Provides the deterministic aggregation engine for personality-based college recommendations.
"""

from .contracts import (
    SurveyRecord,
    CollegeStats,
    RecommendationResult,
    ScoringConfig,
    PositionedCollege,
    AxisBounds,
    AxisTick,
    ScatterLayout,
    load_scoring_config,
)
from .engine import RecommendationEngine, compute_recommendation

__all__ = [
    # Main engine
    "RecommendationEngine",
    "compute_recommendation",

    # Contracts
    "SurveyRecord",
    "CollegeStats",
    "RecommendationResult",
    "ScoringConfig",
    "PositionedCollege",
    "AxisBounds",
    "AxisTick",
    "ScatterLayout",
    "load_scoring_config",
]
