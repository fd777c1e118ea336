"""
CSV import of the survey export.

The export is semicolon separated, one row per response, with the employee
profile and area hierarchy repeated on every row. Areas are matched on the
full five-level tuple and employees on e-mail, so re-running an import with
new responses attaches them to existing rows.
"""
import csv
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from sqlalchemy.orm import Session

from app.core.exceptions import DataImportError
from app.models.area import Area
from app.models.employee import Employee
from app.models.survey import Survey
from app.services.base import BaseService

DELIMITER = ";"
DATE_FORMAT = "%d/%m/%Y"
EMPTY_MARKERS = ("", "-")

AREA_COLUMNS = ("n0_empresa", "n1_diretoria", "n2_gerencia", "n3_coordenacao", "n4_area")

# Employee attribute -> export column
EMPLOYEE_COLUMNS = {
    "name": "nome",
    "email": "email",
    "corporate_email": "email_corporativo",
    "phone": "celular",
    "job_title": "cargo",
    "job_function": "funcao",
    "location": "localidade",
    "tenure": "tempo_de_empresa",
    "gender": "genero",
    "generation": "geracao",
}

# Survey attribute -> (score column, comment column)
SURVEY_COLUMNS = {
    "role_interest": ("Interesse no Cargo", "Comentários - Interesse no Cargo"),
    "contribution": ("Contribuição", "Comentários - Contribuição"),
    "learning": ("Aprendizado e Desenvolvimento", "Comentários - Aprendizado e Desenvolvimento"),
    "feedback": ("Feedback", "Comentários - Feedback"),
    "manager_interaction": ("Interação com Gestor", "Comentários - Interação com Gestor"),
    "career_clarity": (
        "Clareza sobre Possibilidades de Carreira",
        "Comentários - Clareza sobre Possibilidades de Carreira",
    ),
    "permanence_expectation": ("Expectativa de Permanência", "Comentários - Expectativa de Permanência"),
    "enps": ("eNPS", "[Aberta] eNPS"),
}

RESPONSE_DATE_COLUMN = "Data da Resposta"
REQUIRED_COLUMNS = ("email", RESPONSE_DATE_COLUMN)
LIKERT_RANGE = range(1, 6)
ENPS_RANGE = range(0, 11)


def clean(value: Optional[str]) -> Optional[str]:
    """Strip a cell; blank and '-' cells mean no answer."""
    if value is None:
        return None
    value = value.strip()
    return None if value in EMPTY_MARKERS else value


def parse_int(value: Optional[str], column: str, line: int) -> Optional[int]:
    value = clean(value)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise DataImportError(
            f"Invalid number '{value}' in column '{column}' at line {line}",
            details={"line": line, "column": column, "value": value},
        )


def parse_date(value: Optional[str]) -> Optional[date]:
    # Unparseable dates are stored as unknown rather than failing the file
    value = clean(value)
    if value is None:
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


class SurveyImporter(BaseService):
    """Loads the survey export into areas, employees and surveys."""

    def __init__(self, db: Session):
        super().__init__(db)
        self._areas: Dict[Tuple[Optional[str], ...], Area] = {}
        self._employees: Dict[str, Employee] = {}

    def _load_existing(self):
        for area in self.db.query(Area).all():
            self._areas[area.levels] = area
        for employee in self.db.query(Employee).filter(Employee.email.isnot(None)).all():
            self._employees[employee.email] = employee

    def _area_for(self, row: Dict[str, str]) -> Area:
        levels = tuple(clean(row.get(column)) for column in AREA_COLUMNS)
        area = self._areas.get(levels)
        if area is None:
            company, directorate, management, coordination, unit = levels
            area = Area(
                company=company,
                directorate=directorate,
                management=management,
                coordination=coordination,
                unit=unit,
            )
            self.db.add(area)
            self._areas[levels] = area
        return area

    def _employee_for(self, row: Dict[str, str], area: Area) -> Employee:
        email = clean(row.get("email"))
        employee = self._employees.get(email) if email else None
        if employee is None:
            employee = Employee(
                area=area,
                **{attr: clean(row.get(column)) for attr, column in EMPLOYEE_COLUMNS.items()},
            )
            self.db.add(employee)
            if email:
                self._employees[email] = employee
        return employee

    def _survey_for(self, row: Dict[str, str], employee: Employee, line: int) -> Survey:
        values = {"response_date": parse_date(row.get(RESPONSE_DATE_COLUMN))}
        for attr, (score_column, comment_column) in SURVEY_COLUMNS.items():
            values[attr] = parse_int(row.get(score_column), score_column, line)
            values[f"{attr}_comment"] = clean(row.get(comment_column))

        for attr, (score_column, _) in SURVEY_COLUMNS.items():
            value = values[attr]
            valid = ENPS_RANGE if attr == "enps" else LIKERT_RANGE
            if value is not None and value not in valid:
                raise DataImportError(
                    f"{score_column} answer {value} out of range {valid.start}-{valid.stop - 1} at line {line}",
                    details={"line": line, "column": score_column, "value": value},
                )
        return Survey(employee=employee, **values)

    def import_csv(self, path: Union[str, Path]) -> int:
        """Import every row of the file in one transaction. Returns the number of surveys created."""
        path = Path(path)
        if not path.is_file():
            raise DataImportError(f"File not found: {path}", details={"path": str(path)})

        self.log_info(f"Starting survey import from {path}")
        self._load_existing()

        count = 0
        try:
            # utf-8-sig drops the BOM spreadsheet exports prepend
            with path.open(newline="", encoding="utf-8-sig") as handle:
                reader = csv.DictReader(handle, delimiter=DELIMITER)
                missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
                if missing:
                    raise DataImportError(
                        f"Missing required columns: {', '.join(missing)}",
                        details={"missing": missing},
                    )

                # Header is line 1
                for line, row in enumerate(reader, start=2):
                    area = self._area_for(row)
                    employee = self._employee_for(row, area)
                    self.db.add(self._survey_for(row, employee, line))
                    count += 1

            self.db.commit()
        except Exception:
            self.db.rollback()
            self.log_error(f"Survey import from {path} failed after {count} rows")
            raise

        self.log_info(f"Imported {count} surveys from {path}")
        return count
