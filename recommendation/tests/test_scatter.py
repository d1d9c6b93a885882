"""
Tests for scatter chart layout: axis bounds, pixel mapping, label offsets and ticks.
"""

import pytest

from recommendation.logic.contracts import CollegeStats, AxisBounds
from recommendation.presenter.scatter import (
    DEFAULT_AXIS_BOUNDS,
    compute_axis_bounds,
    label_offsets,
    layout,
    scale_x,
    scale_y,
)


def _stats(college, fit_rate, switch_rate):
    return CollegeStats(
        college=college,
        total_responses=4,
        fit_rate=fit_rate,
        switch_rate=switch_rate,
        score=fit_rate * 0.7 + (100 - switch_rate) * 0.3,
    )


def test_empty_input_uses_default_bounds():
    chart = layout([])

    assert chart.points == []
    assert chart.axis_bounds == DEFAULT_AXIS_BOUNDS
    assert chart.axis_bounds.min_switch == 0
    assert chart.axis_bounds.max_switch == 100
    assert chart.axis_bounds.min_fit == 0
    assert chart.axis_bounds.max_fit == 100
    assert [t.value for t in chart.x_ticks] == [0, 25, 50, 75, 100]
    assert [t.position for t in chart.x_ticks] == [48, 194, 340, 486, 632]
    assert [t.value for t in chart.y_ticks] == [100, 75, 50, 25, 0]
    assert [t.position for t in chart.y_ticks] == [48, 114, 180, 246, 312]


def test_single_point_gets_breathing_room():
    bounds = compute_axis_bounds([_stats("Engineering", 100.0, 50.0)])

    assert bounds.min_switch == 0
    assert bounds.max_switch == pytest.approx(57.5)
    assert bounds.min_fit == pytest.approx(42.5)
    assert bounds.max_fit == 100


def test_switch_axis_reaches_at_least_30_and_fit_axis_contains_50():
    bounds = compute_axis_bounds([_stats("Law", 80.0, 10.0)])

    # switch: [0, 30] padded by max(5, 4.5)
    assert bounds.min_switch == 0
    assert bounds.max_switch == pytest.approx(35.0)
    # fit: [50, 80] padded by max(5, 4.5)
    assert bounds.min_fit == pytest.approx(45.0)
    assert bounds.max_fit == pytest.approx(85.0)


def test_bounds_are_clamped_to_percent_range():
    bounds = compute_axis_bounds([_stats("A", 0.0, 100.0), _stats("B", 100.0, 0.0)])

    assert bounds == AxisBounds(min_switch=0, max_switch=100, min_fit=0, max_fit=100)


def test_points_map_to_canvas_with_inverted_y():
    chart = layout([_stats("Engineering", 100.0, 50.0), _stats("Nursing", 50.0, 0.0)])
    engineering, nursing = chart.points

    assert engineering.y == pytest.approx(48)  # top edge, best fit
    assert nursing.x == pytest.approx(48)  # left edge, nobody would switch
    assert engineering.x > nursing.x
    assert engineering.y < nursing.y
    for point in chart.points:
        assert 48 <= point.x <= 680 - 48
        assert 48 <= point.y <= 360 - 48


def test_zero_width_axis_does_not_divide_by_zero():
    bounds = AxisBounds(min_switch=10, max_switch=10, min_fit=60, max_fit=60)

    assert scale_x(10, bounds) == 48
    assert scale_y(60, bounds) == 360 - 48


def test_identical_rates_fan_out_labels():
    colleges = [
        _stats("Law", 50.0, 50.0),
        _stats("Nursing", 50.0, 50.0),
        _stats("Business", 50.0, 50.0),
    ]

    assert label_offsets(colleges) == [-14, 0, 14]


def test_label_offsets_only_move_colliding_points():
    colleges = [
        _stats("Law", 75.0, 25.0),
        _stats("Engineering", 90.0, 10.0),
        _stats("Nursing", 75.0, 25.0),
    ]

    chart = layout(colleges)

    assert [p.label_offset for p in chart.points] == [-7, 0, 7]
    # markers of colliding colleges stay on the same spot
    assert chart.points[0].x == chart.points[2].x
    assert chart.points[0].y == chart.points[2].y


def test_positioned_points_keep_college_stats():
    college = _stats("Engineering", 100.0, 50.0)

    point = layout([college]).points[0]

    assert point.college == "Engineering"
    assert point.fit_rate == 100.0
    assert point.switch_rate == 50.0
    assert point.total_responses == 4
    assert point.label_offset == 0
