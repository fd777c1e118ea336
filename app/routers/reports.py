from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.database import get_db
from app.schemas.reports import AreaReport, CompanyReport, EmployeeReport
from app.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/company", response_model=CompanyReport)
def company_report(db: Session = Depends(get_db)):
    return ReportService(db).company_report()


@router.get("/areas/{area_id}", response_model=AreaReport)
def area_report(area_id: int, db: Session = Depends(get_db)):
    report = ReportService(db).area_report(area_id)
    if report is None:
        raise NotFoundError("Area", area_id)
    return report


@router.get("/employees/{employee_id}", response_model=EmployeeReport)
def employee_report(employee_id: int, db: Session = Depends(get_db)):
    report = ReportService(db).employee_report(employee_id)
    if report is None:
        raise NotFoundError("Employee", employee_id)
    return report
