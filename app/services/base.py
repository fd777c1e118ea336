import logging
from sqlalchemy.orm import Session

from app.services.repository import SurveyRepository


class BaseService:
    """
    Common plumbing for domain services: the request-scoped session, a data
    access collaborator and a logger named after the concrete service.
    """

    def __init__(self, db: Session, repository: SurveyRepository = None):
        self.db = db
        self.repository = repository or SurveyRepository(db)
        self._logger = logging.getLogger(f"{type(self).__module__}.{type(self).__name__}")

    def log_info(self, message: str, **extra):
        self._logger.info(message, extra=extra or None)

    def log_warning(self, message: str, **extra):
        self._logger.warning(message, extra=extra or None)

    def log_error(self, message: str, **extra):
        self._logger.error(message, extra=extra or None)
