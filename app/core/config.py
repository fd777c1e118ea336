import os
import logging
from pydantic import BaseModel, Field
from typing import List
from dotenv import load_dotenv

load_dotenv()

class Config(BaseModel):
    app_name: str = "Employee Survey Analytics"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"
    version: str = "1.0.0"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    request_id_header: str = "X-Request-ID"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./survey.db")

    # CORS: comma-separated origins loaded from env.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://localhost:5173,"
                "http://127.0.0.1:3000,http://127.0.0.1:5173",
            ).split(",")
            if o.strip()
        ]
    )

    # Attrition risk: which survey represents an employee with several responses.
    # "latest" (by response date, then id) or "earliest".
    risk_survey_selection: str = os.getenv("RISK_SURVEY_SELECTION", "latest").lower()

    # Pagination
    default_page_size: int = 20
    max_page_size: int = 100
    # Browse listings feed pick lists (e.g. every employee for a report selector)
    max_browse_page_size: int = 1000

settings = Config()

_logger = logging.getLogger(__name__)
if settings.risk_survey_selection not in ("latest", "earliest"):
    _logger.warning(
        f"Unknown RISK_SURVEY_SELECTION '{settings.risk_survey_selection}', falling back to 'latest'."
    )
    settings.risk_survey_selection = "latest"
