import pytest
import os
from datetime import date
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RISK_SURVEY_SELECTION"] = "latest"

from app.database import Base, get_db
from app.main import app
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    if transaction.is_active:
        transaction.rollback()
    connection.close()

@pytest.fixture(scope="function")
def make_area(db_session):
    """Factory for areas; unspecified hierarchy levels stay empty."""
    from app.models.area import Area

    def _make_area(**levels):
        levels.setdefault("company", "Empresa X")
        area = Area(**levels)
        db_session.add(area)
        db_session.flush()
        return area
    return _make_area

@pytest.fixture(scope="function")
def make_employee(db_session):
    from app.models.employee import Employee
    counter = {"n": 0}

    def _make_employee(area=None, **fields):
        counter["n"] += 1
        fields.setdefault("name", f"Colaborador {counter['n']}")
        fields.setdefault("email", f"colaborador{counter['n']}@example.com")
        employee = Employee(area=area, **fields)
        db_session.add(employee)
        db_session.flush()
        return employee
    return _make_employee

@pytest.fixture(scope="function")
def make_survey(db_session):
    """Factory for survey responses; every answer defaults to unanswered."""
    from app.models.survey import Survey

    def _make_survey(employee, **answers):
        answers.setdefault("response_date", date(2024, 1, 15))
        survey = Survey(employee=employee, **answers)
        db_session.add(survey)
        db_session.flush()
        return survey
    return _make_survey

@pytest.fixture(scope="function")
def all_answers():
    """Every Likert answer set to the same value plus an eNPS answer."""
    def _all_answers(likert, enps):
        return {
            "role_interest": likert,
            "contribution": likert,
            "learning": likert,
            "feedback": likert,
            "manager_interaction": likert,
            "career_clarity": likert,
            "permanence_expectation": likert,
            "enps": enps,
        }
    return _all_answers

@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
