from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.database import get_db
from app.schemas.attrition_risk import (
    AttritionRiskSummary,
    CareerClarityAnalysis,
    EmployeeRiskAssessment,
    RiskLevel,
    TenurePatternAnalysis,
)
from app.schemas.common import Page
from app.services.attrition_risk_service import SORT_KEYS, AttritionRiskService

router = APIRouter(prefix="/attrition-risk", tags=["Attrition Risk"])


@router.get("/summary", response_model=AttritionRiskSummary)
def get_summary(db: Session = Depends(get_db)):
    return AttritionRiskService(db).get_summary()


@router.get("/employees", response_model=Page[EmployeeRiskAssessment])
def list_employee_risk(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    sort_by: str = "risk_score",
    risk_level: Optional[str] = None,
    db: Session = Depends(get_db),
):
    if sort_by not in SORT_KEYS:
        raise ValidationError(
            f"Unknown sort key '{sort_by}'",
            details={"sort_by": sort_by, "allowed": list(SORT_KEYS)},
        )

    level = None
    if risk_level is not None:
        try:
            level = RiskLevel(risk_level)
        except ValueError:
            raise ValidationError(
                f"Unknown risk level '{risk_level}'",
                details={"risk_level": risk_level, "allowed": [r.value for r in RiskLevel]},
            )

    return AttritionRiskService(db).get_all_employees_risk(
        page=page, limit=limit, sort_by=sort_by, risk_level=level
    )


@router.get("/high-risk", response_model=List[EmployeeRiskAssessment])
def get_high_risk_employees(
    limit: int = Query(10, ge=1, le=settings.max_page_size),
    db: Session = Depends(get_db),
):
    """Highest scores first, critical and high levels only."""
    return AttritionRiskService(db).get_high_risk_employees(limit=limit)


@router.get("/employees/{employee_id}", response_model=EmployeeRiskAssessment)
def get_employee_risk(
    employee_id: int,
    survey_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    service = AttritionRiskService(db)
    if service.repository.get_employee(employee_id) is None:
        raise NotFoundError("Employee", employee_id)

    assessment = service.calculate_employee_risk(employee_id, survey_id=survey_id)
    if assessment is None:
        if survey_id is not None:
            raise NotFoundError("Survey", survey_id)
        raise NotFoundError("Survey for employee", employee_id)
    return assessment


@router.get("/analysis/career-clarity", response_model=CareerClarityAnalysis)
def analyze_career_clarity(db: Session = Depends(get_db)):
    return AttritionRiskService(db).analyze_career_clarity()


@router.get("/analysis/tenure-pattern", response_model=TenurePatternAnalysis)
def analyze_tenure_pattern(db: Session = Depends(get_db)):
    return AttritionRiskService(db).analyze_tenure_pattern()
