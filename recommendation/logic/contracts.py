"""
Data Contracts for the Recommendation Engine

Defines Pydantic models for the survey read model (input), the per-college
statistics and the RecommendationResult (output), plus the scoring configuration.
These contracts are the API boundary for the engine and the presenter.
"""

import os
import logging
from typing import List, Optional
from pydantic import BaseModel, Field, ValidationError
from dotenv import load_dotenv

from .constants import (
    DEFAULT_FIT_WEIGHT,
    DEFAULT_SWITCH_WEIGHT,
    DEFAULT_MIN_RESPONSES,
    DEFAULT_MAX_ALTERNATIVES,
    ENV_FIT_WEIGHT,
    ENV_SWITCH_WEIGHT,
    ENV_MIN_RESPONSES,
)

load_dotenv()

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

class ScoringConfig(BaseModel):
    """Tunable parameters of the ranking score."""
    fit_weight: float = Field(default=DEFAULT_FIT_WEIGHT, ge=0.0)
    switch_weight: float = Field(default=DEFAULT_SWITCH_WEIGHT, ge=0.0)
    min_responses: int = Field(default=DEFAULT_MIN_RESPONSES, ge=1)
    max_alternatives: int = Field(default=DEFAULT_MAX_ALTERNATIVES, ge=0)


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"⚠️ Ignoring {name}={raw!r}, using default {default}")
        return default


def load_scoring_config() -> ScoringConfig:
    """
    Build a ScoringConfig from the environment.

    Unset or unparsable variables fall back to the defaults in constants;
    values outside the allowed ranges reset the whole config to its defaults.
    """
    values = {
        "fit_weight": _env_number(ENV_FIT_WEIGHT, DEFAULT_FIT_WEIGHT, float),
        "switch_weight": _env_number(ENV_SWITCH_WEIGHT, DEFAULT_SWITCH_WEIGHT, float),
        "min_responses": _env_number(ENV_MIN_RESPONSES, DEFAULT_MIN_RESPONSES, int),
    }
    try:
        return ScoringConfig(**values)
    except ValidationError as e:
        logger.warning(f"⚠️ Invalid scoring configuration {values}, using defaults: {e}")
        return ScoringConfig()


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class SurveyRecord(BaseModel):
    """
    One survey row as seen by the engine.
    Only enrolled rows with a college are eligible for aggregation.
    """
    personality_type: str
    college: Optional[str] = None
    major_fits: Optional[bool] = None
    would_switch: Optional[bool] = None
    enrolled: bool = True

    @property
    def is_eligible(self) -> bool:
        return self.enrolled and bool(self.college)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class CollegeStats(BaseModel):
    """Aggregated answers for one college. Rebuilt on every request."""
    college: str
    total_responses: int = Field(ge=0)
    fit_rate: float = Field(ge=0.0, le=100.0)
    switch_rate: float = Field(ge=0.0, le=100.0)
    score: float


class RecommendationResult(BaseModel):
    """
    Output contract for the engine.

    recommended is None exactly when all_colleges is empty,
    which is exactly when has_enough_data is False.
    """
    recommended: Optional[CollegeStats] = None
    alternatives: List[CollegeStats] = Field(default_factory=list)
    total_data_points: int = 0
    has_enough_data: bool = False
    all_colleges: List[CollegeStats] = Field(default_factory=list)

    @classmethod
    def empty(cls, total_data_points: int = 0) -> "RecommendationResult":
        return cls(total_data_points=total_data_points)


# =============================================================================
# CHART CONTRACTS
# =============================================================================

class PositionedCollege(CollegeStats):
    """CollegeStats placed on the scatter canvas."""
    x: float
    y: float
    label_offset: float = 0.0


class AxisBounds(BaseModel):
    min_switch: float
    max_switch: float
    min_fit: float
    max_fit: float


class AxisTick(BaseModel):
    position: float
    value: float


class ScatterLayout(BaseModel):
    points: List[PositionedCollege] = Field(default_factory=list)
    axis_bounds: AxisBounds
    x_ticks: List[AxisTick] = Field(default_factory=list)
    y_ticks: List[AxisTick] = Field(default_factory=list)
    width: int
    height: int
    padding: int
