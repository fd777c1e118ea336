import math
import pytest
from types import SimpleNamespace

from app.schemas.attrition_risk import RiskLevel
from app.services.attrition_risk import (
    PRIORITY_RECOMMENDATION,
    RECOMMENDATIONS,
    RISK_WEIGHTS,
    URGENT_RECOMMENDATION,
    calculate_risk_factors,
    enps_risk,
    generate_recommendations,
    get_risk_level,
    likert_risk,
    risk_score,
    sentiment_risk,
)


def make_survey(likert=None, enps=None, **overrides):
    values = dict(
        role_interest=likert,
        contribution=likert,
        learning=likert,
        feedback=likert,
        manager_interaction=likert,
        career_clarity=likert,
        permanence_expectation=likert,
        enps=enps,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_weights_sum_to_one():
    assert len(RISK_WEIGHTS) == 8
    assert math.fsum(RISK_WEIGHTS.values()) == 1.0


@pytest.mark.parametrize("score, level", [
    (100.0, RiskLevel.CRITICAL),
    (70.0, RiskLevel.CRITICAL),
    (69.9, RiskLevel.HIGH),
    (50.0, RiskLevel.HIGH),
    (49.9, RiskLevel.MODERATE),
    (30.0, RiskLevel.MODERATE),
    (29.9, RiskLevel.LOW),
    (0.0, RiskLevel.LOW),
])
def test_level_boundaries(score, level):
    assert get_risk_level(score) == level


def test_factor_value_mappings():
    assert likert_risk(5) == pytest.approx(0.2)
    assert likert_risk(1) == pytest.approx(1.0)
    assert likert_risk(None) == 0.5
    assert enps_risk(10) == 0.0
    assert enps_risk(0) == 1.0
    assert enps_risk(None) == 0.5
    assert sentiment_risk(1.0) == 0.0
    assert sentiment_risk(-1.0) == 1.0
    assert sentiment_risk(0.0) == 0.5


def test_best_answers_give_low_risk():
    factors = calculate_risk_factors(make_survey(likert=5, enps=10), sentiment_score=1.0)
    assert len(factors) == 8
    score = risk_score(factors)
    assert score == 14.0
    level = get_risk_level(score)
    assert level == RiskLevel.LOW
    assert generate_recommendations(factors, level) == []


def test_worst_answers_give_critical_risk():
    factors = calculate_risk_factors(make_survey(likert=1, enps=0), sentiment_score=-1.0)
    score = risk_score(factors)
    assert score == 100.0
    level = get_risk_level(score)
    assert level == RiskLevel.CRITICAL

    recommendations = generate_recommendations(factors, level)
    assert recommendations[0] == URGENT_RECOMMENDATION
    assert recommendations[0].startswith("URGENTE")
    assert recommendations[1:] == [
        RECOMMENDATIONS["permanence_expectation"],
        RECOMMENDATIONS["enps_score"],
        RECOMMENDATIONS["career_clarity"],
    ]


def test_unanswered_survey_is_neutral():
    factors = calculate_risk_factors(make_survey(), sentiment_score=0.0)
    assert all(f.value == 0.5 for f in factors)
    assert risk_score(factors) == 50.0
    assert all(f.description == "Não respondido" for f in factors if f.factor != "sentiment_score")


def test_factors_sorted_by_contribution():
    factors = calculate_risk_factors(make_survey(likert=3, enps=5, feedback=1), sentiment_score=0.2)
    contributions = [f.contribution for f in factors]
    assert contributions == sorted(contributions, reverse=True)
    for f in factors:
        assert f.contribution == pytest.approx(f.value * f.weight)


def test_out_of_range_answers_saturate():
    factors = calculate_risk_factors(make_survey(likert=7, enps=12), sentiment_score=0.0)
    assert all(0.0 <= f.value <= 1.0 for f in factors)
    assert 0.0 <= risk_score(factors) <= 100.0


def test_high_level_gets_priority_line():
    factors = calculate_risk_factors(make_survey(likert=3, enps=4), sentiment_score=-0.2)
    score = risk_score(factors)
    level = get_risk_level(score)
    assert level == RiskLevel.HIGH
    recommendations = generate_recommendations(factors, level)
    assert recommendations[0] == PRIORITY_RECOMMENDATION
    assert recommendations[1:] == [RECOMMENDATIONS["permanence_expectation"], RECOMMENDATIONS["enps_score"]]


def test_descriptions_follow_answer_bands():
    factors = {f.factor: f for f in calculate_risk_factors(
        make_survey(likert=4, enps=9, career_clarity=3, feedback=2), sentiment_score=-0.5,
    )}
    assert factors["permanence_expectation"].description == "Alta intenção de permanência"
    assert factors["career_clarity"].description == "Clareza moderada sobre carreira"
    assert factors["feedback"].description.endswith("Atenção necessária")
    assert factors["enps_score"].description.startswith("Promotor")
    assert factors["sentiment_score"].description.startswith("Comentários predominantemente negativos")
