"""
Report data for company, area and employee views.

Produces the structured figures a report renderer needs; layout and
formatting belong to the caller.
"""
from collections import defaultdict
from datetime import date, datetime, timezone
from typing import List, Optional, Sequence

from app.core.survey_fields import LIKERT_FIELDS
from app.models.area import Area
from app.models.survey import Survey
from app.schemas.reports import (
    AreaComparison,
    AreaHeader,
    AreaRanking,
    AreaReport,
    AreaReportStats,
    Benchmark,
    CompanyReport,
    EmployeeComparison,
    EmployeeProfile,
    EmployeeRanking,
    EmployeeReport,
    EnpsBreakdown,
    SurveyScores,
)
from app.schemas.stats import Demographics, Overview
from app.services.base import BaseService
from app.services.statistics import (
    calculate_averages,
    calculate_enps,
    calculate_favorability,
    enps_percentages,
    group_count,
)

RANKED_AREAS = 5


def _enps_breakdown(surveys: Sequence[Survey]) -> EnpsBreakdown:
    enps = calculate_enps(surveys)
    return EnpsBreakdown(**enps.model_dump(), **enps_percentages(enps))


def _report_stats(surveys: Sequence[Survey]) -> AreaReportStats:
    return AreaReportStats(
        total_surveys=len(surveys),
        enps=_enps_breakdown(surveys),
        favorability=calculate_favorability(surveys),
        averages=calculate_averages(surveys),
    )


def _benchmark(surveys: Sequence[Survey]) -> Benchmark:
    return Benchmark(
        enps=calculate_enps(surveys).score,
        favorability=calculate_favorability(surveys),
        averages=calculate_averages(surveys),
    )


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ReportService(BaseService):

    def _area_rankings(self, areas: Sequence[Area], surveys: Sequence[Survey]) -> List[AreaRanking]:
        by_area = defaultdict(list)
        for survey in surveys:
            by_area[survey.employee.area_id].append(survey)

        rankings = []
        for area in areas:
            area_surveys = by_area.get(area.id)
            if not area_surveys:
                continue
            rankings.append(AreaRanking(
                area_id=area.id,
                area_name=area.display_name,
                enps_score=calculate_enps(area_surveys).score,
                favorability=calculate_favorability(area_surveys),
                total_surveys=len(area_surveys),
            ))
        return rankings

    def company_report(self) -> CompanyReport:
        surveys = self.repository.list_surveys()
        employees = self.repository.list_employees()
        areas = self.repository.list_areas()

        ranked = sorted(self._area_rankings(areas, surveys), key=lambda r: r.enps_score, reverse=True)
        self.log_info(f"Company report over {len(surveys)} surveys and {len(areas)} areas")

        return CompanyReport(
            generated_at=_now(),
            overview=Overview(
                total_employees=len(employees),
                total_surveys=len(surveys),
                total_areas=len(areas),
                response_rate=round(len(surveys) / len(employees) * 100, 2) if employees else 0.0,
            ),
            enps=_enps_breakdown(surveys),
            favorability=calculate_favorability(surveys),
            averages=calculate_averages(surveys),
            demographics=Demographics(
                by_gender=group_count(employees, lambda e: e.gender),
                by_generation=group_count(employees, lambda e: e.generation),
                by_tenure=group_count(employees, lambda e: e.tenure),
            ),
            top_areas=ranked[:RANKED_AREAS],
            bottom_areas=list(reversed(ranked[-RANKED_AREAS:])),
        )

    def area_report(self, area_id: int) -> Optional[AreaReport]:
        area = self.repository.get_area(area_id)
        if area is None:
            return None

        area_surveys = self.repository.list_surveys(area_id=area_id)
        all_surveys = self.repository.list_surveys()

        area_stats = _report_stats(area_surveys)
        company_enps = calculate_enps(all_surveys).score
        company_favorability = calculate_favorability(all_surveys)

        surveys_by_employee = defaultdict(list)
        for survey in area_surveys:
            surveys_by_employee[survey.employee_id].append(survey)

        employees = [
            EmployeeRanking(
                id=employee.id,
                name=employee.name,
                job_title=employee.job_title,
                enps_score=calculate_enps(surveys_by_employee[employee.id]).score,
                favorability=calculate_favorability(surveys_by_employee[employee.id]),
            )
            for employee in self.repository.list_employees(area_id=area_id)
        ]
        employees.sort(key=lambda e: e.enps_score, reverse=True)

        return AreaReport(
            generated_at=_now(),
            area=AreaHeader(id=area.id, name=area.display_name, hierarchy=area.hierarchy),
            stats=area_stats,
            comparison=AreaComparison(
                company_enps=company_enps,
                company_favorability=company_favorability,
                enps_difference=round(area_stats.enps.score - company_enps, 2),
                favorability_difference=round(area_stats.favorability - company_favorability, 2),
            ),
            employees=employees,
        )

    def employee_report(self, employee_id: int) -> Optional[EmployeeReport]:
        employee = self.repository.get_employee(employee_id)
        if employee is None:
            return None

        surveys = sorted(
            self.repository.list_surveys(employee_id=employee_id),
            key=lambda s: (s.response_date or date.min, s.id),
            reverse=True,
        )
        area_surveys = (
            self.repository.list_surveys(area_id=employee.area_id) if employee.area_id is not None else []
        )

        return EmployeeReport(
            generated_at=_now(),
            employee=EmployeeProfile(
                id=employee.id,
                name=employee.name,
                email=employee.email,
                job_title=employee.job_title,
                job_function=employee.job_function,
                location=employee.location,
                tenure=employee.tenure,
                gender=employee.gender,
                generation=employee.generation,
                area_id=employee.area_id,
                area_name=employee.area_name,
            ),
            stats=_report_stats(surveys),
            comparison=EmployeeComparison(
                company=_benchmark(self.repository.list_surveys()),
                area=_benchmark(area_surveys) if area_surveys else None,
            ),
            surveys=[
                SurveyScores(
                    id=s.id,
                    response_date=s.response_date,
                    enps=s.enps,
                    scores={f.key: f.value_of(s) for f in LIKERT_FIELDS},
                )
                for s in surveys
            ],
        )
