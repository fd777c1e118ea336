import pytest
from types import SimpleNamespace

from app.core.survey_fields import ENPS_FIELD, LIKERT_FIELDS, LIKERT_FIELDS_BY_KEY
from app.services.statistics import (
    NOT_INFORMED,
    calculate_averages,
    calculate_enps,
    calculate_favorability,
    correlation_matrix,
    descriptive_stats,
    enps_percentages,
    group_by,
    group_count,
    paired_values,
    pearson_correlation,
    value_counts,
)

LIKERT_KEYS = [f.key for f in LIKERT_FIELDS]


def make_response(likert=None, enps=None, **overrides):
    values = {key: likert for key in LIKERT_KEYS}
    values.update(overrides)
    return SimpleNamespace(enps=enps, **values)


def test_enps_one_of_each_band():
    enps = calculate_enps([make_response(enps=10), make_response(enps=8), make_response(enps=5)])
    assert (enps.promoters, enps.passives, enps.detractors) == (1, 1, 1)
    assert enps.total == 3
    assert enps.score == 0


def test_enps_band_edges():
    enps = calculate_enps([make_response(enps=v) for v in (9, 7, 6)])
    assert (enps.promoters, enps.passives, enps.detractors) == (1, 1, 1)


def test_enps_skips_unanswered():
    enps = calculate_enps([make_response(enps=10), make_response(enps=None), make_response(enps=9)])
    assert enps.total == 2
    assert enps.score == 100.0


def test_enps_empty_is_all_zero():
    enps = calculate_enps([])
    assert (enps.score, enps.promoters, enps.passives, enps.detractors, enps.total) == (0, 0, 0, 0, 0)
    assert enps_percentages(enps) == {
        "promoters_percent": 0.0, "passives_percent": 0.0, "detractors_percent": 0.0,
    }


def test_enps_rounding_and_percentages():
    enps = calculate_enps([make_response(enps=10), make_response(enps=10), make_response(enps=0)])
    assert enps.score == 33.33
    assert enps_percentages(enps)["promoters_percent"] == 66.7


def test_favorability_counts_items_not_respondents():
    surveys = [make_response(likert=5), make_response(likert=1)]
    assert calculate_favorability(surveys) == 50.0


def test_favorability_ignores_unanswered_items():
    surveys = [make_response(likert=None, role_interest=4, feedback=2)]
    assert calculate_favorability(surveys) == 50.0
    assert calculate_favorability([make_response()]) == 0.0
    assert calculate_favorability([]) == 0.0


def test_averages_per_field():
    surveys = [make_response(likert=4), make_response(likert=None, feedback=1)]
    averages = calculate_averages(surveys)
    assert set(averages) == set(LIKERT_KEYS)
    assert averages["feedback"] == 2.5
    assert averages["learning"] == 4.0
    assert calculate_averages([])["learning"] == 0.0


def test_descriptive_stats_odd_and_even():
    odd = descriptive_stats([3, 1, 2])
    assert (odd.mean, odd.median, odd.min, odd.max, odd.count) == (2.0, 2.0, 1.0, 3.0, 3)
    assert odd.std_dev == 0.82  # population

    even = descriptive_stats([1, 2, 3, 4])
    assert even.median == 2.5


def test_descriptive_stats_empty():
    stats = descriptive_stats([])
    assert (stats.mean, stats.median, stats.min, stats.max, stats.std_dev, stats.count) == (0, 0, 0, 0, 0, 0)


def test_correlation_properties():
    x = [1, 2, 3, 4, 5]
    y = [2, 1, 4, 3, 5]
    assert pearson_correlation(x, x) == pytest.approx(1.0)
    assert pearson_correlation(x, list(reversed(x))) == pytest.approx(-1.0)
    assert pearson_correlation(x, y) == pearson_correlation(y, x)
    assert -1.0 <= pearson_correlation(x, y) <= 1.0


def test_correlation_degenerate_inputs_are_zero():
    assert pearson_correlation([], []) == 0
    assert pearson_correlation([3, 3, 3], [1, 2, 3]) == 0
    assert pearson_correlation([1, 2, 3], [4, 4, 4]) == 0
    assert pearson_correlation([1, 2], [1, 2, 3]) == 0


def test_paired_values_drop_incomplete_pairs():
    surveys = [
        make_response(likert=3, enps=7),
        make_response(likert=None, enps=9),
        make_response(likert=4, enps=None),
    ]
    xs, ys = paired_values(surveys, LIKERT_FIELDS_BY_KEY["feedback"], ENPS_FIELD)
    assert (xs, ys) == ([3], [7])


def test_correlation_matrix_shape_and_diagonal():
    surveys = [make_response(likert=v, enps=v * 2) for v in (1, 2, 3, 4, 5)]
    fields = (*LIKERT_FIELDS, ENPS_FIELD)
    matrix = correlation_matrix(surveys, fields)
    assert set(matrix) == {f.key for f in fields}
    assert matrix["feedback"]["feedback"] == 1.0
    assert matrix["enps"]["learning"] == matrix["learning"]["enps"] == 1.0


def test_group_by_uses_not_informed_bucket():
    people = [
        SimpleNamespace(gender="Feminino"),
        SimpleNamespace(gender=None),
        SimpleNamespace(gender=""),
        SimpleNamespace(gender="Feminino"),
    ]
    groups = group_by(people, lambda p: p.gender)
    assert set(groups) == {"Feminino", NOT_INFORMED}
    assert len(groups[NOT_INFORMED]) == 2
    assert group_count(people, lambda p: p.gender) == {"Feminino": 2, NOT_INFORMED: 2}


def test_value_counts_fills_domain():
    counts = value_counts([1, 1, 5, 9], range(1, 6))
    assert counts == {1: 2, 2: 0, 3: 0, 4: 0, 5: 1}
