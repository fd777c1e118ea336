from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base

class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    area_id = Column(Integer, ForeignKey("areas.id"), nullable=True, index=True)

    name = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=True, index=True)
    corporate_email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    job_title = Column(String, nullable=True)  # cargo
    job_function = Column(String, nullable=True)  # funcao
    location = Column(String, nullable=True)

    # Demographics (categorical, free text as exported)
    tenure = Column(String, nullable=True)
    gender = Column(String, nullable=True)
    generation = Column(String, nullable=True)

    area = relationship("Area", back_populates="employees")
    surveys = relationship("Survey", back_populates="employee")

    @property
    def area_name(self):
        return self.area.display_name if self.area else None
