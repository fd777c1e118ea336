
# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import area, employee, survey

# Explicit class exports for cleaner imports
from .area import Area
from .employee import Employee
from .survey import Survey

__all__ = [
    "Area",
    "Employee",
    "Survey",
]
