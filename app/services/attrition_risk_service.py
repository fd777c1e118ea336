from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.employee import Employee
from app.models.survey import Survey
from app.schemas.attrition_risk import (
    AttritionRiskSummary,
    CareerClarityAnalysis,
    CareerClarityFindings,
    ClarityBucket,
    EmployeeRiskAssessment,
    FactorImpact,
    GroupRisk,
    RiskByDemographic,
    RiskDistribution,
    RiskLevel,
    TenureBucket,
    TenureFindings,
    TenurePatternAnalysis,
)
from app.schemas.common import Page
from app.services.attrition_risk import (
    FACTOR_LABELS,
    RECOMMENDATION_THRESHOLD,
    calculate_risk_factors,
    generate_recommendations,
    get_risk_level,
    risk_score,
)
from app.services.base import BaseService
from app.services.repository import SurveyRepository
from app.services.sentiment_analyzer import normalize_token
from app.services.sentiment_service import SentimentService
from app.services.statistics import category_of, pearson_correlation

SORT_KEYS = ("risk_score", "name")

CAREER_HYPOTHESIS = "Funcionários com baixa clareza sobre possibilidades de carreira têm maior risco de atrito."
CAREER_CONFIRMED = (
    "Hipótese confirmada: Funcionários com baixa clareza de carreira apresentam risco de atrito "
    "significativamente maior."
)
CAREER_PARTIAL = (
    "Hipótese parcialmente confirmada: Existe uma correlação negativa fraca entre clareza de carreira "
    "e risco de atrito."
)
CAREER_REJECTED = (
    "Hipótese não confirmada: Não foi encontrada correlação significativa entre clareza de carreira "
    "e risco de atrito."
)
TENURE_HYPOTHESIS = "O tempo de empresa afeta o padrão de risco de atrito."
NO_PATTERN = "Nenhum padrão claro identificado."
TENURE_GAP_THRESHOLD = 15

Assessed = Tuple[Employee, Survey, EmployeeRiskAssessment]


def select_survey(surveys: Sequence[Survey], policy: str = "latest") -> Optional[Survey]:
    """
    Pick the response that represents an employee. Ordered by response date,
    then id; undated responses sort as the oldest.
    """
    if not surveys:
        return None
    key = lambda s: (s.response_date or date.min, s.id)
    if policy == "earliest":
        return min(surveys, key=key)
    return max(surveys, key=key)


def _distribution(assessments: Sequence[EmployeeRiskAssessment]) -> RiskDistribution:
    distribution = RiskDistribution()
    for a in assessments:
        level = a.risk_level.value
        setattr(distribution, level, getattr(distribution, level) + 1)
    return distribution


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _group_risk(pairs: Sequence[Tuple[str, float]]) -> Dict[str, GroupRisk]:
    groups: Dict[str, List[float]] = defaultdict(list)
    for group, score in pairs:
        groups[group].append(score)
    return {
        group: GroupRisk(count=len(scores), avg_risk=round(_mean(scores), 1))
        for group, scores in groups.items()
    }


def _name_key(assessment: EmployeeRiskAssessment):
    # Accent- and case-insensitive ordering, accented spelling breaks ties
    name = assessment.employee_name or ""
    return normalize_token(name), name


class AttritionRiskService(BaseService):
    """Per-employee and fleet-level attrition risk."""

    def __init__(
        self,
        db: Session,
        repository: SurveyRepository = None,
        sentiment_service: SentimentService = None,
        selection_policy: str = None,
    ):
        super().__init__(db, repository)
        self.sentiment = sentiment_service or SentimentService(db, self.repository)
        self.selection_policy = selection_policy or settings.risk_survey_selection

    # ------------------------------------------------------------------
    # Single employee
    # ------------------------------------------------------------------
    def assess(
        self,
        employee: Employee,
        surveys: Sequence[Survey],
        survey_id: Optional[int] = None,
    ) -> Optional[EmployeeRiskAssessment]:
        """Score one employee from already-loaded surveys. None when there is nothing to score."""
        if survey_id is not None:
            survey = next((s for s in surveys if s.id == survey_id), None)
        else:
            survey = select_survey(surveys, self.selection_policy)
        if survey is None:
            return None

        comments = self.sentiment.analyze_surveys(surveys)
        sentiment_score = (
            round(sum(c.sentiment.score for c in comments) / len(comments), 3) if comments else 0.0
        )

        factors = calculate_risk_factors(survey, sentiment_score)
        score = risk_score(factors)
        level = get_risk_level(score)

        return EmployeeRiskAssessment(
            employee_id=employee.id,
            employee_name=employee.name,
            email=employee.email,
            area=employee.area_name or "N/A",
            job_title=employee.job_title,
            survey_id=survey.id,
            risk_score=score,
            risk_level=level,
            factors=factors,
            recommendations=generate_recommendations(factors, level),
        )

    def calculate_employee_risk(
        self,
        employee_id: int,
        survey_id: Optional[int] = None,
    ) -> Optional[EmployeeRiskAssessment]:
        employee = self.repository.get_employee(employee_id)
        if employee is None:
            return None
        surveys = self.repository.list_surveys(employee_id=employee_id)
        return self.assess(employee, surveys, survey_id)

    # ------------------------------------------------------------------
    # Fleet
    # ------------------------------------------------------------------
    def _assess_all(self) -> Tuple[List[Employee], List[Assessed]]:
        employees = self.repository.list_employees()
        surveys_by_employee = self.repository.surveys_by_employee()

        assessed: List[Assessed] = []
        for employee in employees:
            surveys = surveys_by_employee.get(employee.id, [])
            assessment = self.assess(employee, surveys)
            if assessment is not None:
                survey = next(s for s in surveys if s.id == assessment.survey_id)
                assessed.append((employee, survey, assessment))

        self.log_info(f"Assessed attrition risk for {len(assessed)} of {len(employees)} employees")
        return employees, assessed

    def get_all_employees_risk(
        self,
        page: int = 1,
        limit: int = 20,
        sort_by: str = "risk_score",
        risk_level: Optional[RiskLevel] = None,
    ) -> Page[EmployeeRiskAssessment]:
        _, assessed = self._assess_all()
        assessments = [a for _, _, a in assessed if risk_level is None or a.risk_level == risk_level]

        if sort_by == "name":
            assessments.sort(key=_name_key)
        else:
            assessments.sort(key=lambda a: a.risk_score, reverse=True)

        return Page[EmployeeRiskAssessment].slice(assessments, page, limit)

    def get_high_risk_employees(self, limit: int = 10) -> List[EmployeeRiskAssessment]:
        top = self.get_all_employees_risk(page=1, limit=limit, sort_by="risk_score").data
        return [a for a in top if a.risk_level in (RiskLevel.CRITICAL, RiskLevel.HIGH)]

    def get_summary(self) -> AttritionRiskSummary:
        employees, assessed = self._assess_all()
        assessments = [a for _, _, a in assessed]

        contributions: Dict[str, List[float]] = defaultdict(list)
        for assessment in assessments:
            for factor in assessment.factors:
                contributions[factor.factor].append(factor.contribution)

        top_factors = sorted(
            (
                FactorImpact(
                    factor=factor,
                    label=FACTOR_LABELS.get(factor, factor),
                    avg_contribution=round(_mean(values), 4),
                    affected_count=sum(1 for v in values if v > RECOMMENDATION_THRESHOLD),
                )
                for factor, values in contributions.items()
            ),
            key=lambda f: f.avg_contribution,
            reverse=True,
        )

        return AttritionRiskSummary(
            total_employees=len(employees),
            assessed_employees=len(assessments),
            average_risk_score=round(_mean([a.risk_score for a in assessments]), 1),
            risk_distribution=_distribution(assessments),
            top_risk_factors=top_factors,
            risk_by_demographic=RiskByDemographic(
                by_generation=_group_risk([(category_of(e.generation), a.risk_score) for e, _, a in assessed]),
                by_tenure=_group_risk([(category_of(e.tenure), a.risk_score) for e, _, a in assessed]),
                by_area=_group_risk([(category_of(e.area_name), a.risk_score) for e, _, a in assessed]),
            ),
        )

    # ------------------------------------------------------------------
    # Hypothesis analyses
    # ------------------------------------------------------------------
    def analyze_career_clarity(self) -> CareerClarityAnalysis:
        _, assessed = self._assess_all()

        buckets: Dict[int, List[float]] = defaultdict(list)
        for _, survey, assessment in assessed:
            if survey.career_clarity is not None:
                buckets[survey.career_clarity].append(assessment.risk_score)

        details = [
            ClarityBucket(clarity_score=clarity, count=len(scores), avg_risk_score=round(_mean(scores), 1))
            for clarity, scores in sorted(buckets.items())
        ]

        def weighted_risk(selected: List[ClarityBucket]) -> float:
            count = sum(d.count for d in selected)
            return sum(d.avg_risk_score * d.count for d in selected) / count if count else 0.0

        low = weighted_risk([d for d in details if d.clarity_score <= 2])
        high = weighted_risk([d for d in details if d.clarity_score >= 4])
        correlation = pearson_correlation(
            [d.clarity_score for d in details],
            [d.avg_risk_score for d in details],
        )

        if correlation < -0.3:
            conclusion = CAREER_CONFIRMED
        elif correlation < 0:
            conclusion = CAREER_PARTIAL
        else:
            conclusion = CAREER_REJECTED

        return CareerClarityAnalysis(
            hypothesis=CAREER_HYPOTHESIS,
            findings=CareerClarityFindings(
                low_clarity_avg_risk=round(low, 1),
                high_clarity_avg_risk=round(high, 1),
                correlation=round(correlation, 3),
                conclusion=conclusion,
            ),
            details=details,
        )

    def analyze_tenure_pattern(self) -> TenurePatternAnalysis:
        _, assessed = self._assess_all()

        groups: Dict[str, List[EmployeeRiskAssessment]] = defaultdict(list)
        for employee, _, assessment in assessed:
            groups[category_of(employee.tenure)].append(assessment)

        details = sorted(
            (
                TenureBucket(
                    tenure=tenure,
                    count=len(members),
                    avg_risk_score=round(_mean([m.risk_score for m in members]), 1),
                    distribution=_distribution(members),
                )
                for tenure, members in groups.items()
            ),
            key=lambda d: d.avg_risk_score,
            reverse=True,
        )

        if not details:
            return TenurePatternAnalysis(
                hypothesis=TENURE_HYPOTHESIS,
                findings=TenureFindings(highest_risk_tenure="N/A", lowest_risk_tenure="N/A", pattern=NO_PATTERN),
                details=[],
            )

        highest, lowest = details[0], details[-1]
        gap = highest.avg_risk_score - lowest.avg_risk_score
        pattern = NO_PATTERN
        if gap > TENURE_GAP_THRESHOLD:
            pattern = (
                f'Funcionários com tempo de empresa "{highest.tenure}" apresentam risco '
                f'{gap:.0f}% maior que aqueles com "{lowest.tenure}".'
            )

        return TenurePatternAnalysis(
            hypothesis=TENURE_HYPOTHESIS,
            findings=TenureFindings(
                highest_risk_tenure=highest.tenure,
                lowest_risk_tenure=lowest.tenure,
                pattern=pattern,
            ),
            details=details,
        )
