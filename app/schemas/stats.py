from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class EnpsResult(BaseModel):
    score: float = Field(default=0.0, ge=-100.0, le=100.0)
    promoters: int = 0
    passives: int = 0
    detractors: int = 0
    total: int = 0


class DescriptiveStats(BaseModel):
    mean: float = 0.0
    median: float = 0.0
    min: float = 0.0
    max: float = 0.0
    std_dev: float = 0.0
    count: int = 0


class SurveyStats(BaseModel):
    """Headline figures for any set of survey responses."""
    total_surveys: int
    enps: EnpsResult
    favorability: float = Field(ge=0.0, le=100.0)
    averages: Dict[str, float]


class AreaInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company: Optional[str] = None
    directorate: Optional[str] = None
    management: Optional[str] = None
    coordination: Optional[str] = None
    unit: Optional[str] = None
    display_name: Optional[str] = None


class AreaStats(BaseModel):
    area: AreaInfo
    stats: SurveyStats


class Overview(BaseModel):
    total_employees: int
    total_surveys: int
    total_areas: int
    response_rate: float


class Demographics(BaseModel):
    by_gender: Dict[str, int]
    by_generation: Dict[str, int]
    by_tenure: Dict[str, int]


class FieldStats(DescriptiveStats):
    label: str


class EdaSummary(BaseModel):
    overview: Overview
    enps_stats: DescriptiveStats
    likert_stats: Dict[str, FieldStats]
    demographics: Demographics


class LikertDistribution(BaseModel):
    field: str
    label: str
    distribution: Dict[int, int]


class ResponseDistribution(BaseModel):
    total: int
    likert: List[LikertDistribution]
    enps: Dict[int, int]


class FieldRef(BaseModel):
    key: str
    label: str


class CorrelationMatrix(BaseModel):
    fields: List[FieldRef]
    matrix: Dict[str, Dict[str, float]]


class DemographicGroup(BaseModel):
    group: str
    count: int
    enps: EnpsResult
    favorability: float
    averages: Dict[str, float]


class DemographicDistribution(BaseModel):
    dimension: str
    total: int
    distribution: List[DemographicGroup]
