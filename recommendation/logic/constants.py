"""
Recommendation Engine Constants

Defines scoring weights, sample thresholds, explanation bands and chart geometry.
All values are deterministic; weights and the sample threshold can be overridden
through environment variables (see load_scoring_config in contracts).
"""

from typing import List, Tuple

# =============================================================================
# SCORING
# =============================================================================

# Composite score = fit_rate * FIT_WEIGHT + (100 - switch_rate) * SWITCH_WEIGHT
DEFAULT_FIT_WEIGHT: float = 0.7
DEFAULT_SWITCH_WEIGHT: float = 0.3

# A college is ranked only once it has at least this many answers
DEFAULT_MIN_RESPONSES: int = 2

# Colleges returned after the recommended one
DEFAULT_MAX_ALTERNATIVES: int = 2

# Stored rates keep one decimal
RATE_DECIMALS: int = 1

# Environment overrides
ENV_FIT_WEIGHT = "SCORING_FIT_WEIGHT"
ENV_SWITCH_WEIGHT = "SCORING_SWITCH_WEIGHT"
ENV_MIN_RESPONSES = "SCORING_MIN_RESPONSES"


# =============================================================================
# EXPLANATION BANDS
# =============================================================================

# Checked top-down, first match wins (fit_rate >= threshold)
FIT_RATE_BANDS: List[Tuple[float, str]] = [
    (75, "excellent"),
    (60, "strong"),
    (50, "good"),
]
FIT_RATE_FALLBACK_BAND = "moderate"

# Checked top-down, first match wins (switch_rate <= threshold)
SWITCH_RATE_BANDS: List[Tuple[float, str]] = [
    (20, "rarely"),
    (35, "infrequently"),
    (50, "sometimes"),
]
SWITCH_RATE_FALLBACK_BAND = "often"


# =============================================================================
# SCATTER CHART GEOMETRY
# =============================================================================

CHART_WIDTH: int = 680
CHART_HEIGHT: int = 360
CHART_PADDING: int = 48  # margin reserved for ticks and axis labels

GRID_LINES: int = 4  # intervals per axis, so GRID_LINES + 1 ticks

LABEL_SPACING: float = 14  # px between stacked labels sharing a point

RATE_FLOOR: float = 0.0
RATE_CEILING: float = 100.0

MIN_AXIS_PADDING: float = 5.0
AXIS_PADDING_RATIO: float = 0.15

# The switch axis always reaches at least 30%
SWITCH_AXIS_BASELINE_MAX: float = 30.0
SWITCH_AXIS_BASELINE_MIN: float = 0.0

# The fit axis window always contains 50%
FIT_AXIS_BASELINE: float = 50.0
