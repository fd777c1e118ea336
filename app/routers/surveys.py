from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.database import get_db
from app.schemas.browse import SurveyOut
from app.schemas.common import Page
from app.services.repository import SurveyRepository

router = APIRouter(prefix="/surveys", tags=["Surveys"])


@router.get("", response_model=Page[SurveyOut])
def list_surveys(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_browse_page_size),
    db: Session = Depends(get_db),
):
    """Raw survey responses with the responding employee, ordered by id."""
    surveys, total = SurveyRepository(db).page_surveys(page, limit)
    return Page[SurveyOut].of([SurveyOut.model_validate(s) for s in surveys], page, limit, total)
