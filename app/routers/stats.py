from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.core.exceptions import NotFoundError, ValidationError
from app.database import get_db
from app.schemas.stats import (
    AreaStats,
    AreaInfo,
    CorrelationMatrix,
    DemographicDistribution,
    EdaSummary,
    EnpsResult,
    ResponseDistribution,
    SurveyStats,
)
from app.services.stats_service import DEMOGRAPHIC_DIMENSIONS, StatsService

router = APIRouter(prefix="/stats", tags=["Statistics"])


@router.get("/company", response_model=SurveyStats)
def company_stats(db: Session = Depends(get_db)):
    return StatsService(db).company_stats()


@router.get("/enps", response_model=EnpsResult)
def enps_stats(db: Session = Depends(get_db)):
    return StatsService(db).enps_stats()


@router.get("/areas", response_model=List[AreaStats])
def area_stats(db: Session = Depends(get_db)):
    """Stats for every area that has at least one response."""
    return StatsService(db).area_stats()


@router.get("/areas/{area_id}", response_model=AreaStats)
def area_stats_by_id(area_id: int, db: Session = Depends(get_db)):
    service = StatsService(db)
    area = service.repository.get_area(area_id)
    if area is None:
        raise NotFoundError("Area", area_id)
    return AreaStats(area=AreaInfo.model_validate(area), stats=service.area_stats_by_id(area_id))


@router.get("/employees/{employee_id}", response_model=SurveyStats)
def employee_stats(employee_id: int, db: Session = Depends(get_db)):
    result = StatsService(db).employee_stats(employee_id)
    if result is None:
        raise NotFoundError("Employee", employee_id)
    return result


@router.get("/eda/summary", response_model=EdaSummary)
def eda_summary(db: Session = Depends(get_db)):
    return StatsService(db).eda_summary()


@router.get("/eda/responses", response_model=ResponseDistribution)
def response_distribution(db: Session = Depends(get_db)):
    return StatsService(db).response_distribution()


@router.get("/eda/correlations", response_model=CorrelationMatrix)
def correlation_matrix(db: Session = Depends(get_db)):
    return StatsService(db).correlation_matrix()


@router.get("/eda/demographics", response_model=DemographicDistribution)
def demographic_distribution(dimension: str = "gender", db: Session = Depends(get_db)):
    result = StatsService(db).demographic_distribution(dimension)
    if result is None:
        raise ValidationError(
            f"Unknown demographic dimension '{dimension}'",
            details={"dimension": dimension, "allowed": list(DEMOGRAPHIC_DIMENSIONS)},
        )
    return result
