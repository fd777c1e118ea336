"""
Data access for the analytics services.

Read-only queries over areas, employees and survey responses. Everything the
scoring engine consumes passes through here; the engine itself never touches
the session.
"""
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload

from app.models.area import Area
from app.models.employee import Employee
from app.models.survey import Survey


class SurveyRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return (
            self.db.query(Employee)
            .options(joinedload(Employee.area))
            .filter(Employee.id == employee_id)
            .first()
        )

    def list_employees(self, area_id: Optional[int] = None) -> List[Employee]:
        query = self.db.query(Employee).options(joinedload(Employee.area))
        if area_id is not None:
            query = query.filter(Employee.area_id == area_id)
        return query.order_by(Employee.id).all()

    def get_area(self, area_id: int) -> Optional[Area]:
        return self.db.query(Area).filter(Area.id == area_id).first()

    def page_employees(self, page: int, limit: int) -> Tuple[List[Employee], int]:
        query = self.db.query(Employee).options(joinedload(Employee.area))
        items = query.order_by(Employee.id).offset((page - 1) * limit).limit(limit).all()
        return items, self.db.query(Employee).count()

    def list_areas(self) -> List[Area]:
        return self.db.query(Area).order_by(Area.id).all()

    def list_surveys(
        self,
        employee_id: Optional[int] = None,
        area_id: Optional[int] = None,
    ) -> List[Survey]:
        query = self.db.query(Survey).options(joinedload(Survey.employee))
        if employee_id is not None:
            query = query.filter(Survey.employee_id == employee_id)
        if area_id is not None:
            query = query.join(Survey.employee).filter(Employee.area_id == area_id)
        return query.order_by(Survey.id).all()

    def page_surveys(self, page: int, limit: int) -> Tuple[List[Survey], int]:
        query = self.db.query(Survey).options(joinedload(Survey.employee))
        items = query.order_by(Survey.id).offset((page - 1) * limit).limit(limit).all()
        return items, self.db.query(Survey).count()

    def surveys_by_employee(self) -> Dict[int, List[Survey]]:
        """All surveys in one query, grouped by employee id (ordered by survey id)."""
        grouped: Dict[int, List[Survey]] = defaultdict(list)
        for survey in self.db.query(Survey).order_by(Survey.id).all():
            grouped[survey.employee_id].append(survey)
        return dict(grouped)

    def count_areas(self) -> int:
        return self.db.query(Area).count()
