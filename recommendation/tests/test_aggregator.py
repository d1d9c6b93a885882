"""
Tests for grouping, rate computation and scoring.
"""

import pytest

from recommendation.logic.aggregator import (
    round_half_up,
    group_by_college,
    compute_college_stats,
    aggregate_colleges,
)
from recommendation.logic.contracts import ScoringConfig


def test_two_engineering_answers_score_85(record, config):
    records = [
        record("Engineering", fit=True, would_switch=False),
        record("Engineering", fit=True, would_switch=True),
    ]

    stats = aggregate_colleges(records, config)

    assert len(stats) == 1
    engineering = stats[0]
    assert engineering.college == "Engineering"
    assert engineering.total_responses == 2
    assert engineering.fit_rate == 100.0
    assert engineering.switch_rate == 50.0
    assert engineering.score == pytest.approx(85.0)


def test_single_answer_college_is_dropped(record, config):
    records = [
        record("Nursing", fit=True, would_switch=False),
        record("Law", fit=True, would_switch=False),
        record("Law", fit=False, would_switch=False),
    ]

    stats = aggregate_colleges(records, config)

    assert [s.college for s in stats] == ["Law"]


def test_null_answers_are_skipped_per_field(record, config):
    records = [
        record("Humanities", fit=True, would_switch=None),
        record("Humanities", fit=None, would_switch=True),
        record("Humanities", fit=False, would_switch=None),
    ]

    groups = group_by_college(records)
    assert groups["Humanities"] == {"fit": [True, False], "would_switch": [True]}

    stats = aggregate_colleges(records, config)[0]
    assert stats.total_responses == 2
    assert stats.fit_rate == 50.0
    assert stats.switch_rate == 100.0
    assert stats.score == pytest.approx(35.0)


def test_total_responses_is_max_of_field_counts(config):
    stats = compute_college_stats("Business", [True, True, False], [], config)

    assert stats.total_responses == 3
    assert stats.switch_rate == 0.0
    assert stats.score == pytest.approx(200 / 3 * 0.7 + 30)


def test_no_answers_at_all_is_dropped(record, config):
    records = [record("Education"), record("Education")]

    assert aggregate_colleges(records, config) == []


def test_score_uses_unrounded_rates(config):
    stats = compute_college_stats("Life Sciences", [True, True, False], [False, False, False], config)

    assert stats.fit_rate == 66.7
    assert stats.score == pytest.approx((200 / 3) * 0.7 + 30, rel=1e-12)
    assert stats.score != pytest.approx(66.7 * 0.7 + 30, rel=1e-12)


def test_grouping_is_case_sensitive(record, config):
    records = [
        record("Engineering", fit=True, would_switch=False),
        record("engineering", fit=True, would_switch=False),
    ]

    assert list(group_by_college(records)) == ["Engineering", "engineering"]
    assert aggregate_colleges(records, config) == []


def test_grouping_keeps_first_seen_order(record):
    records = [
        record("Law", fit=True),
        record("Art", fit=True),
        record("Law", fit=False),
    ]

    assert list(group_by_college(records)) == ["Law", "Art"]


def test_ineligible_records_are_ignored(record, config):
    records = [
        record("Engineering", fit=True, would_switch=False),
        record("Engineering", fit=False, would_switch=True, enrolled=False),
        record(None, fit=False, would_switch=True),
        record("", fit=False, would_switch=True),
    ]

    groups = group_by_college(records)

    assert list(groups) == ["Engineering"]
    assert groups["Engineering"] == {"fit": [True], "would_switch": [False]}


def test_custom_weights_and_threshold(record):
    config = ScoringConfig(fit_weight=0.5, switch_weight=0.5, min_responses=3)
    records = [
        record("Engineering", fit=True, would_switch=False),
        record("Engineering", fit=True, would_switch=True),
        record("Nursing", fit=True, would_switch=False),
        record("Nursing", fit=False, would_switch=False),
        record("Nursing", fit=True, would_switch=False),
    ]

    stats = aggregate_colleges(records, config)

    assert [s.college for s in stats] == ["Nursing"]
    assert stats[0].score == pytest.approx(200 / 3 * 0.5 + 50)


def test_rates_stay_within_bounds(record, config):
    records = []
    for index in range(30):
        records.append(record(f"College {index % 4}", fit=index % 3 == 0, would_switch=index % 5 == 0))

    for stats in aggregate_colleges(records, config):
        assert 0 <= stats.fit_rate <= 100
        assert 0 <= stats.switch_rate <= 100
        assert stats.total_responses >= 2


@pytest.mark.parametrize("value,decimals,expected", [
    (12.25, 1, 12.3),
    (66.66666666666667, 1, 66.7),
    (33.33333333333333, 1, 33.3),
    (2.5, 0, 3.0),
    (12.5, 0, 13.0),
    (0.0, 1, 0.0),
    (100.0, 1, 100.0),
])
def test_round_half_up(value, decimals, expected):
    assert round_half_up(value, decimals) == expected


def test_one_decimal_rounding_is_idempotent():
    for total in range(1, 13):
        for hits in range(total + 1):
            once = round_half_up(hits / total * 100)
            assert round_half_up(once) == once
