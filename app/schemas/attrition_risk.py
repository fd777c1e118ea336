from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from enum import Enum


class RiskLevel(str, Enum):
    CRITICAL = "critical"   # >= 70
    HIGH = "high"           # 50 - 70
    MODERATE = "moderate"   # 30 - 50
    LOW = "low"             # < 30


class RiskFactor(BaseModel):
    factor: str
    label: str
    value: float = Field(ge=0.0, le=1.0)
    weight: float
    contribution: float
    description: str


class EmployeeRiskAssessment(BaseModel):
    employee_id: int
    employee_name: Optional[str] = None
    email: Optional[str] = None
    area: str = "N/A"
    job_title: Optional[str] = None
    survey_id: int
    risk_score: float = Field(ge=0.0, le=100.0)
    risk_level: RiskLevel
    factors: List[RiskFactor]
    recommendations: List[str]


class RiskDistribution(BaseModel):
    critical: int = 0
    high: int = 0
    moderate: int = 0
    low: int = 0


class FactorImpact(BaseModel):
    factor: str
    label: str
    avg_contribution: float
    affected_count: int


class GroupRisk(BaseModel):
    count: int
    avg_risk: float


class RiskByDemographic(BaseModel):
    by_generation: Dict[str, GroupRisk]
    by_tenure: Dict[str, GroupRisk]
    by_area: Dict[str, GroupRisk]


class AttritionRiskSummary(BaseModel):
    total_employees: int
    assessed_employees: int
    average_risk_score: float
    risk_distribution: RiskDistribution
    top_risk_factors: List[FactorImpact]
    risk_by_demographic: RiskByDemographic


class ClarityBucket(BaseModel):
    clarity_score: int
    count: int
    avg_risk_score: float


class CareerClarityFindings(BaseModel):
    low_clarity_avg_risk: float
    high_clarity_avg_risk: float
    correlation: float
    conclusion: str


class CareerClarityAnalysis(BaseModel):
    hypothesis: str
    findings: CareerClarityFindings
    details: List[ClarityBucket]


class TenureBucket(BaseModel):
    tenure: str
    count: int
    avg_risk_score: float
    distribution: RiskDistribution


class TenureFindings(BaseModel):
    highest_risk_tenure: str
    lowest_risk_tenure: str
    pattern: str


class TenurePatternAnalysis(BaseModel):
    hypothesis: str
    findings: TenureFindings
    details: List[TenureBucket]
