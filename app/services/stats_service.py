from collections import defaultdict
from typing import List, Optional, Sequence

from app.core.survey_fields import ENPS_FIELD, LIKERT_FIELDS
from app.models.survey import Survey
from app.schemas.stats import (
    AreaInfo,
    AreaStats,
    CorrelationMatrix,
    DemographicDistribution,
    DemographicGroup,
    Demographics,
    EdaSummary,
    FieldRef,
    FieldStats,
    LikertDistribution,
    Overview,
    ResponseDistribution,
    SurveyStats,
)
from app.services.base import BaseService
from app.services.statistics import (
    calculate_averages,
    calculate_enps,
    calculate_favorability,
    correlation_matrix,
    descriptive_stats,
    field_values,
    group_by,
    group_count,
    value_counts,
)

LIKERT_SCALE = range(1, 6)
ENPS_SCALE = range(0, 11)

# dimension name -> employee accessor
DEMOGRAPHIC_DIMENSIONS = {
    "gender": lambda e: e.gender,
    "generation": lambda e: e.generation,
    "tenure": lambda e: e.tenure,
}


def survey_stats(surveys: Sequence[Survey]) -> SurveyStats:
    return SurveyStats(
        total_surveys=len(surveys),
        enps=calculate_enps(surveys),
        favorability=calculate_favorability(surveys),
        averages=calculate_averages(surveys),
    )


class StatsService(BaseService):
    """Aggregate survey statistics for the company, areas and employees."""

    def company_stats(self) -> SurveyStats:
        return survey_stats(self.repository.list_surveys())

    def enps_stats(self):
        return calculate_enps(self.repository.list_surveys())

    def area_stats_by_id(self, area_id: int) -> SurveyStats:
        return survey_stats(self.repository.list_surveys(area_id=area_id))

    def area_stats(self) -> List[AreaStats]:
        by_area = defaultdict(list)
        for survey in self.repository.list_surveys():
            by_area[survey.employee.area_id].append(survey)

        result = []
        for area in self.repository.list_areas():
            area_surveys = by_area.get(area.id)
            if area_surveys:
                result.append(AreaStats(
                    area=AreaInfo.model_validate(area),
                    stats=survey_stats(area_surveys),
                ))
        return result

    def employee_stats(self, employee_id: int) -> Optional[SurveyStats]:
        if self.repository.get_employee(employee_id) is None:
            return None
        return survey_stats(self.repository.list_surveys(employee_id=employee_id))

    # ------------------------------------------------------------------
    # Exploratory analysis
    # ------------------------------------------------------------------
    def eda_summary(self) -> EdaSummary:
        surveys = self.repository.list_surveys()
        employees = self.repository.list_employees()
        total_employees = len(employees)

        return EdaSummary(
            overview=Overview(
                total_employees=total_employees,
                total_surveys=len(surveys),
                total_areas=self.repository.count_areas(),
                response_rate=round(len(surveys) / total_employees * 100, 2) if total_employees else 0.0,
            ),
            enps_stats=descriptive_stats(field_values(surveys, ENPS_FIELD)),
            likert_stats={
                field.key: FieldStats(
                    label=field.label,
                    **descriptive_stats(field_values(surveys, field)).model_dump(),
                )
                for field in LIKERT_FIELDS
            },
            demographics=Demographics(
                by_gender=group_count(employees, DEMOGRAPHIC_DIMENSIONS["gender"]),
                by_generation=group_count(employees, DEMOGRAPHIC_DIMENSIONS["generation"]),
                by_tenure=group_count(employees, DEMOGRAPHIC_DIMENSIONS["tenure"]),
            ),
        )

    def response_distribution(self) -> ResponseDistribution:
        surveys = self.repository.list_surveys()
        return ResponseDistribution(
            total=len(surveys),
            likert=[
                LikertDistribution(
                    field=field.key,
                    label=field.label,
                    distribution=value_counts(field_values(surveys, field), LIKERT_SCALE),
                )
                for field in LIKERT_FIELDS
            ],
            enps=value_counts(field_values(surveys, ENPS_FIELD), ENPS_SCALE),
        )

    def correlation_matrix(self) -> CorrelationMatrix:
        fields = (*LIKERT_FIELDS, ENPS_FIELD)
        surveys = self.repository.list_surveys()
        return CorrelationMatrix(
            fields=[FieldRef(key=f.key, label=f.label) for f in fields],
            matrix=correlation_matrix(surveys, fields),
        )

    def demographic_distribution(self, dimension: str) -> Optional[DemographicDistribution]:
        accessor = DEMOGRAPHIC_DIMENSIONS.get(dimension)
        if accessor is None:
            return None

        surveys = self.repository.list_surveys()
        groups = group_by(surveys, lambda s: accessor(s.employee))

        distribution = sorted(
            (
                DemographicGroup(
                    group=group,
                    count=len(members),
                    enps=calculate_enps(members),
                    favorability=calculate_favorability(members),
                    averages=calculate_averages(members),
                )
                for group, members in groups.items()
            ),
            key=lambda g: g.count,
            reverse=True,
        )
        return DemographicDistribution(dimension=dimension, total=len(surveys), distribution=distribution)
