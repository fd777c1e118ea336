import math
from datetime import date

import pytest

from app.schemas.attrition_risk import RiskLevel
from app.services.attrition_risk_service import (
    CAREER_CONFIRMED,
    NO_PATTERN,
    AttritionRiskService,
    select_survey,
)
from app.services.statistics import NOT_INFORMED


@pytest.fixture
def service(db_session):
    return AttritionRiskService(db_session)


@pytest.fixture
def fleet(make_area, make_employee, make_survey, all_answers):
    """Four employees: critical, high, low and one who never answered."""
    sales = make_area(directorate="Comercial", unit="Vendas")
    tech = make_area(directorate="Tecnologia")

    critical = make_employee(area=sales, name="Bruno", tenure="menos de 1 ano", generation="geração Z")
    make_survey(critical, **all_answers(1, 0))

    high = make_employee(area=sales, name="Álvaro", tenure="entre 1 e 2 anos", generation="millennials")
    make_survey(high, **all_answers(3, 7))

    low = make_employee(area=tech, name="ana", tenure="mais de 5 anos")
    make_survey(low, **all_answers(5, 10))

    silent = make_employee(area=tech, name="Carla")
    return {"critical": critical, "high": high, "low": low, "silent": silent}


def test_missing_employee_returns_none(service):
    assert service.calculate_employee_risk(99999) is None


def test_employee_without_surveys_returns_none(service, fleet):
    assert service.calculate_employee_risk(fleet["silent"].id) is None


def test_single_assessment(service, fleet):
    assessment = service.calculate_employee_risk(fleet["critical"].id)
    # no comments, so sentiment stays neutral
    assert assessment.risk_score == 95.0
    assert assessment.risk_level == RiskLevel.CRITICAL
    assert assessment.area == "Vendas"
    assert len(assessment.factors) == 8
    assert math.fsum(f.weight for f in assessment.factors) == 1.0
    assert assessment.recommendations[0].startswith("URGENTE")


def test_comment_sentiment_feeds_the_score(service, make_employee, make_survey, all_answers):
    employee = make_employee()
    make_survey(employee, feedback_comment="Excelente, muito satisfeito!", **all_answers(5, 10))
    assessment = service.calculate_employee_risk(employee.id)
    sentiment = next(f for f in assessment.factors if f.factor == "sentiment_score")
    assert sentiment.value == 0.0
    assert assessment.risk_score == 14.0


def test_latest_survey_selected_by_default(db_session, make_employee, make_survey, all_answers):
    employee = make_employee()
    old = make_survey(employee, response_date=date(2024, 1, 1), **all_answers(1, 0))
    new = make_survey(employee, response_date=date(2024, 6, 1), **all_answers(5, 10))

    assert AttritionRiskService(db_session).calculate_employee_risk(employee.id).survey_id == new.id
    earliest = AttritionRiskService(db_session, selection_policy="earliest")
    assert earliest.calculate_employee_risk(employee.id).survey_id == old.id


def test_explicit_survey_overrides_policy(service, make_employee, make_survey, all_answers):
    employee = make_employee()
    old = make_survey(employee, response_date=date(2024, 1, 1), **all_answers(1, 0))
    make_survey(employee, response_date=date(2024, 6, 1), **all_answers(5, 10))

    assert service.calculate_employee_risk(employee.id, survey_id=old.id).survey_id == old.id
    assert service.calculate_employee_risk(employee.id, survey_id=123456) is None


def test_select_survey_orders_undated_first():
    from types import SimpleNamespace
    undated = SimpleNamespace(id=5, response_date=None)
    dated = SimpleNamespace(id=1, response_date=date(2023, 3, 1))
    assert select_survey([undated, dated]) is dated
    assert select_survey([undated, dated], "earliest") is undated
    assert select_survey([]) is None


def test_listing_sorted_by_risk(service, fleet):
    page = service.get_all_employees_risk()
    scores = [a.risk_score for a in page.data]
    assert scores == sorted(scores, reverse=True)
    assert page.pagination.total == 3


def test_listing_sorted_by_name_ignores_accents_and_case(service, fleet):
    names = [a.employee_name for a in service.get_all_employees_risk(sort_by="name").data]
    assert names == ["Álvaro", "ana", "Bruno"]


def test_listing_filter_and_pagination(service, fleet):
    critical = service.get_all_employees_risk(risk_level=RiskLevel.CRITICAL)
    assert [a.employee_id for a in critical.data] == [fleet["critical"].id]

    second = service.get_all_employees_risk(page=2, limit=2)
    assert len(second.data) == 1
    assert second.pagination.total_pages == 2


def test_high_risk_employees(service, fleet):
    result = service.get_high_risk_employees()
    assert [a.risk_level for a in result] == [RiskLevel.CRITICAL, RiskLevel.HIGH]


def test_summary(service, fleet):
    summary = service.get_summary()
    assert summary.total_employees == 4
    assert summary.assessed_employees == 3
    assert summary.risk_distribution.critical == 1
    assert summary.risk_distribution.high == 1
    assert summary.risk_distribution.low == 1
    assert summary.risk_distribution.moderate == 0
    assert summary.average_risk_score == round((95.0 + 53.0 + 19.0) / 3, 1)

    impacts = [f.avg_contribution for f in summary.top_risk_factors]
    assert impacts == sorted(impacts, reverse=True)
    assert summary.risk_by_demographic.by_area["Vendas"].count == 2
    assert summary.risk_by_demographic.by_generation[NOT_INFORMED].count == 1


def test_summary_of_empty_database(service):
    summary = service.get_summary()
    assert summary.total_employees == 0
    assert summary.average_risk_score == 0
    assert summary.top_risk_factors == []


def test_career_clarity_analysis(service, fleet):
    analysis = service.analyze_career_clarity()
    assert [d.clarity_score for d in analysis.details] == [1, 3, 5]
    assert analysis.findings.low_clarity_avg_risk == 95.0
    assert analysis.findings.high_clarity_avg_risk == 19.0
    assert analysis.findings.correlation < -0.3
    assert analysis.findings.conclusion == CAREER_CONFIRMED


def test_tenure_pattern(service, fleet):
    analysis = service.analyze_tenure_pattern()
    assert analysis.findings.highest_risk_tenure == "menos de 1 ano"
    assert analysis.findings.lowest_risk_tenure == "mais de 5 anos"
    assert '"menos de 1 ano"' in analysis.findings.pattern
    assert analysis.details[0].distribution.critical == 1


def test_tenure_pattern_without_data(service):
    analysis = service.analyze_tenure_pattern()
    assert analysis.findings.highest_risk_tenure == "N/A"
    assert analysis.findings.pattern == NO_PATTERN
    assert analysis.details == []
