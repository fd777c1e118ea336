"""
Area Model.
Five-level organizational hierarchy (company down to unit); any level may be empty.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base


class Area(Base):
    __tablename__ = "areas"

    id = Column(Integer, primary_key=True, index=True)
    company = Column("n0_empresa", String, nullable=True)
    directorate = Column("n1_diretoria", String, nullable=True)
    management = Column("n2_gerencia", String, nullable=True)
    coordination = Column("n3_coordenacao", String, nullable=True)
    unit = Column("n4_area", String, nullable=True)

    employees = relationship("Employee", back_populates="area")

    def __repr__(self):
        return f"<Area {self.id}: {self.display_name}>"

    @property
    def levels(self):
        return (self.company, self.directorate, self.management, self.coordination, self.unit)

    @property
    def display_name(self):
        """Most specific non-empty level of the hierarchy."""
        for level in reversed(self.levels):
            if level:
                return level
        return None

    @property
    def hierarchy(self) -> dict:
        return {
            "company": self.company,
            "directorate": self.directorate,
            "management": self.management,
            "coordination": self.coordination,
            "unit": self.unit,
        }
