from pydantic import BaseModel
from typing import Dict, List, Optional
from datetime import date, datetime

from app.schemas.stats import Demographics, EnpsResult, Overview


class EnpsBreakdown(EnpsResult):
    promoters_percent: float = 0.0
    passives_percent: float = 0.0
    detractors_percent: float = 0.0


class AreaRanking(BaseModel):
    area_id: int
    area_name: Optional[str] = None
    enps_score: float
    favorability: float
    total_surveys: int


class CompanyReport(BaseModel):
    generated_at: datetime
    overview: Overview
    enps: EnpsBreakdown
    favorability: float
    averages: Dict[str, float]
    demographics: Demographics
    top_areas: List[AreaRanking]
    bottom_areas: List[AreaRanking]


class AreaHeader(BaseModel):
    id: int
    name: Optional[str] = None
    hierarchy: Dict[str, Optional[str]]


class AreaReportStats(BaseModel):
    total_surveys: int
    enps: EnpsBreakdown
    favorability: float
    averages: Dict[str, float]


class AreaComparison(BaseModel):
    company_enps: float
    company_favorability: float
    enps_difference: float
    favorability_difference: float


class EmployeeRanking(BaseModel):
    id: int
    name: Optional[str] = None
    job_title: Optional[str] = None
    enps_score: float
    favorability: float


class AreaReport(BaseModel):
    generated_at: datetime
    area: AreaHeader
    stats: AreaReportStats
    comparison: AreaComparison
    employees: List[EmployeeRanking]


class EmployeeProfile(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    job_title: Optional[str] = None
    job_function: Optional[str] = None
    location: Optional[str] = None
    tenure: Optional[str] = None
    gender: Optional[str] = None
    generation: Optional[str] = None
    area_id: Optional[int] = None
    area_name: Optional[str] = None


class Benchmark(BaseModel):
    enps: float
    favorability: float
    averages: Dict[str, float]


class EmployeeComparison(BaseModel):
    company: Benchmark
    area: Optional[Benchmark] = None


class SurveyScores(BaseModel):
    id: int
    response_date: Optional[date] = None
    enps: Optional[int] = None
    scores: Dict[str, Optional[int]]


class EmployeeReport(BaseModel):
    generated_at: datetime
    employee: EmployeeProfile
    stats: AreaReportStats
    comparison: EmployeeComparison
    surveys: List[SurveyScores]
