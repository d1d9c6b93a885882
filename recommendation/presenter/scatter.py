"""
Scatter Layout

Places colleges on a fit-rate vs switch-rate scatter chart.
X axis: % who would switch. Y axis: % who feel their major fits (inverted,
so a better fit is drawn higher).

The renderer draws markers at (x, y) and labels at (x, y + label_offset).
"""

from typing import Dict, List, Sequence, Tuple

from ..logic.contracts import (
    CollegeStats,
    PositionedCollege,
    AxisBounds,
    AxisTick,
    ScatterLayout,
)
from ..logic.constants import (
    CHART_WIDTH,
    CHART_HEIGHT,
    CHART_PADDING,
    GRID_LINES,
    LABEL_SPACING,
    RATE_FLOOR,
    RATE_CEILING,
    MIN_AXIS_PADDING,
    AXIS_PADDING_RATIO,
    SWITCH_AXIS_BASELINE_MAX,
    SWITCH_AXIS_BASELINE_MIN,
    FIT_AXIS_BASELINE,
)


DEFAULT_AXIS_BOUNDS = AxisBounds(
    min_switch=RATE_FLOOR,
    max_switch=RATE_CEILING,
    min_fit=RATE_FLOOR,
    max_fit=RATE_CEILING,
)


def _padded_range(low: float, high: float) -> Tuple[float, float]:
    """Expand [low, high] by max(5, 15% of its width), clamped to [0, 100]."""
    padding = max(MIN_AXIS_PADDING, (high - low) * AXIS_PADDING_RATIO)
    return max(RATE_FLOOR, low - padding), min(RATE_CEILING, high + padding)


def compute_axis_bounds(colleges: Sequence[CollegeStats]) -> AxisBounds:
    """
    Axis ranges for the chart.

    Args:
        colleges: Colleges to plot

    Returns:
        AxisBounds; DEFAULT_AXIS_BOUNDS when there is nothing to plot
    """
    if not colleges:
        return DEFAULT_AXIS_BOUNDS.model_copy()

    switch_values = [c.switch_rate for c in colleges]
    fit_values = [c.fit_rate for c in colleges]

    min_switch, max_switch = _padded_range(
        min(min(switch_values), SWITCH_AXIS_BASELINE_MIN),
        max(max(switch_values), SWITCH_AXIS_BASELINE_MAX),
    )
    min_fit, max_fit = _padded_range(
        min(min(fit_values), FIT_AXIS_BASELINE),
        max(max(fit_values), FIT_AXIS_BASELINE),
    )

    return AxisBounds(
        min_switch=min_switch,
        max_switch=max_switch,
        min_fit=min_fit,
        max_fit=max_fit,
    )


def _ratio(value: float, low: float, high: float) -> float:
    # A zero-width axis divides by 1
    return (value - low) / ((high - low) or 1)


def scale_x(value: float, bounds: AxisBounds,
            width: int = CHART_WIDTH, padding: int = CHART_PADDING) -> float:
    ratio = _ratio(value, bounds.min_switch, bounds.max_switch)
    return padding + ratio * (width - padding * 2)


def scale_y(value: float, bounds: AxisBounds,
            height: int = CHART_HEIGHT, padding: int = CHART_PADDING) -> float:
    ratio = _ratio(value, bounds.min_fit, bounds.max_fit)
    return height - padding - ratio * (height - padding * 2)


def label_offsets(colleges: Sequence[CollegeStats], spacing: float = LABEL_SPACING) -> List[float]:
    """
    Vertical label nudges for colleges that share exact (switch_rate, fit_rate).

    Members of a group of n are fanned out symmetrically:
    (index - (n - 1) / 2) * spacing. Unshared points get 0.

    Args:
        colleges: Colleges in plotting order
        spacing: Pixels between neighbouring labels

    Returns:
        One offset per college, same order as the input
    """
    groups: Dict[Tuple[float, float], List[int]] = {}
    for index, college in enumerate(colleges):
        groups.setdefault((college.switch_rate, college.fit_rate), []).append(index)

    offsets = [0.0] * len(colleges)
    for members in groups.values():
        if len(members) == 1:
            continue
        center = (len(members) - 1) / 2
        for position, index in enumerate(members):
            offsets[index] = (position - center) * spacing

    return offsets


def axis_ticks(bounds: AxisBounds, grid_lines: int = GRID_LINES,
               width: int = CHART_WIDTH, height: int = CHART_HEIGHT,
               padding: int = CHART_PADDING) -> Tuple[List[AxisTick], List[AxisTick]]:
    """Evenly spaced ticks; y ticks run top (max fit) to bottom (min fit)."""
    x_ticks: List[AxisTick] = []
    y_ticks: List[AxisTick] = []

    for index in range(grid_lines + 1):
        ratio = index / grid_lines
        x_ticks.append(AxisTick(
            position=padding + ratio * (width - padding * 2),
            value=bounds.min_switch + ratio * (bounds.max_switch - bounds.min_switch),
        ))
        y_ticks.append(AxisTick(
            position=padding + ratio * (height - padding * 2),
            value=bounds.max_fit - ratio * (bounds.max_fit - bounds.min_fit),
        ))

    return x_ticks, y_ticks


def layout(colleges: Sequence[CollegeStats]) -> ScatterLayout:
    """
    Map colleges to pixel coordinates on the scatter chart.

    Args:
        colleges: Ranked colleges (order decides label stacking)

    Returns:
        ScatterLayout with points, axis bounds and ticks
    """
    bounds = compute_axis_bounds(colleges)
    offsets = label_offsets(colleges)

    points = [
        PositionedCollege(
            **college.model_dump(include=set(CollegeStats.model_fields)),
            x=scale_x(college.switch_rate, bounds),
            y=scale_y(college.fit_rate, bounds),
            label_offset=offset,
        )
        for college, offset in zip(colleges, offsets)
    ]

    x_ticks, y_ticks = axis_ticks(bounds)

    return ScatterLayout(
        points=points,
        axis_bounds=bounds,
        x_ticks=x_ticks,
        y_ticks=y_ticks,
        width=CHART_WIDTH,
        height=CHART_HEIGHT,
        padding=CHART_PADDING,
    )
