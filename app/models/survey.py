"""
Survey response model.
Seven 1-5 competency ratings, a 0-10 eNPS answer and one free-text comment per question.
Rows are written by the importer and only read afterwards.
"""
from sqlalchemy import Column, Integer, Date, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.database import Base


class Survey(Base):
    __tablename__ = "surveys"
    __table_args__ = (
        CheckConstraint("enps IS NULL OR (enps BETWEEN 0 AND 10)", name="ck_survey_enps_range"),
        CheckConstraint("role_interest IS NULL OR (role_interest BETWEEN 1 AND 5)", name="ck_survey_role_interest_range"),
        CheckConstraint("contribution IS NULL OR (contribution BETWEEN 1 AND 5)", name="ck_survey_contribution_range"),
        CheckConstraint("learning IS NULL OR (learning BETWEEN 1 AND 5)", name="ck_survey_learning_range"),
        CheckConstraint("feedback IS NULL OR (feedback BETWEEN 1 AND 5)", name="ck_survey_feedback_range"),
        CheckConstraint("manager_interaction IS NULL OR (manager_interaction BETWEEN 1 AND 5)", name="ck_survey_manager_interaction_range"),
        CheckConstraint("career_clarity IS NULL OR (career_clarity BETWEEN 1 AND 5)", name="ck_survey_career_clarity_range"),
        CheckConstraint("permanence_expectation IS NULL OR (permanence_expectation BETWEEN 1 AND 5)", name="ck_survey_permanence_expectation_range"),
    )

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    response_date = Column(Date, nullable=True)

    role_interest = Column(Integer, nullable=True)
    role_interest_comment = Column(Text, nullable=True)

    contribution = Column(Integer, nullable=True)
    contribution_comment = Column(Text, nullable=True)

    learning = Column(Integer, nullable=True)
    learning_comment = Column(Text, nullable=True)

    feedback = Column(Integer, nullable=True)
    feedback_comment = Column(Text, nullable=True)

    manager_interaction = Column(Integer, nullable=True)
    manager_interaction_comment = Column(Text, nullable=True)

    career_clarity = Column(Integer, nullable=True)
    career_clarity_comment = Column(Text, nullable=True)

    permanence_expectation = Column(Integer, nullable=True)
    permanence_expectation_comment = Column(Text, nullable=True)

    enps = Column(Integer, nullable=True)
    enps_comment = Column(Text, nullable=True)

    employee = relationship("Employee", back_populates="surveys")

    def __repr__(self):
        return f"<Survey {self.id} employee={self.employee_id}>"
