from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.database import get_db
from app.schemas.browse import EmployeeOut
from app.schemas.common import Page
from app.services.repository import SurveyRepository

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get("", response_model=Page[EmployeeOut])
def list_employees(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_browse_page_size),
    db: Session = Depends(get_db),
):
    """Employees with their area, ordered by id."""
    employees, total = SurveyRepository(db).page_employees(page, limit)
    return Page[EmployeeOut].of([EmployeeOut.model_validate(e) for e in employees], page, limit, total)


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    employee = SurveyRepository(db).get_employee(employee_id)
    if employee is None:
        raise NotFoundError("Employee", employee_id)
    return EmployeeOut.model_validate(employee)
