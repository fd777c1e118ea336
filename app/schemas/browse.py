from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import date


class AreaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company: Optional[str] = None
    directorate: Optional[str] = None
    management: Optional[str] = None
    coordination: Optional[str] = None
    unit: Optional[str] = None
    display_name: Optional[str] = None


class EmployeeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    corporate_email: Optional[str] = None
    phone: Optional[str] = None
    job_title: Optional[str] = None
    job_function: Optional[str] = None
    location: Optional[str] = None
    tenure: Optional[str] = None
    gender: Optional[str] = None
    generation: Optional[str] = None
    area_id: Optional[int] = None
    area_name: Optional[str] = None
    area: Optional[AreaOut] = None


class EmployeeRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None


class SurveyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_id: int
    employee: Optional[EmployeeRef] = None
    response_date: Optional[date] = None

    role_interest: Optional[int] = None
    role_interest_comment: Optional[str] = None
    contribution: Optional[int] = None
    contribution_comment: Optional[str] = None
    learning: Optional[int] = None
    learning_comment: Optional[str] = None
    feedback: Optional[int] = None
    feedback_comment: Optional[str] = None
    manager_interaction: Optional[int] = None
    manager_interaction_comment: Optional[str] = None
    career_clarity: Optional[int] = None
    career_clarity_comment: Optional[str] = None
    permanence_expectation: Optional[int] = None
    permanence_expectation_comment: Optional[str] = None
    enps: Optional[int] = None
    enps_comment: Optional[str] = None
