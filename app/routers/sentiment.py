from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.core.survey_fields import COMMENT_FIELDS_BY_KEY
from app.database import get_db
from app.schemas.common import Page
from app.schemas.sentiment import (
    AnalyzeTextRequest,
    AnalyzeTextResponse,
    CommentAnalysis,
    CommentFieldInfo,
    EmployeeSentiment,
    FieldSentimentSummary,
    ScoreCorrelation,
    SentimentSummary,
)
from app.services.sentiment_service import SentimentService

SENTIMENT_LABELS = ("positive", "negative", "neutral")

router = APIRouter(prefix="/sentiment", tags=["Sentiment"])


def _check_field(field: Optional[str]):
    if field is not None and field not in COMMENT_FIELDS_BY_KEY:
        raise ValidationError(
            f"Unknown comment field '{field}'",
            details={"field": field, "allowed": list(COMMENT_FIELDS_BY_KEY)},
        )


@router.get("/summary", response_model=SentimentSummary)
def get_summary(db: Session = Depends(get_db)):
    """Company-wide sentiment over every survey comment."""
    return SentimentService(db).get_summary()


@router.get("/fields", response_model=List[CommentFieldInfo])
def list_fields():
    return SentimentService.comment_fields()


@router.get("/fields/{field_key}", response_model=FieldSentimentSummary)
def get_field_sentiment(field_key: str, db: Session = Depends(get_db)):
    result = SentimentService(db).get_field_sentiment(field_key)
    if result is None:
        raise NotFoundError("Comment field", field_key)
    return result


@router.get("/employees/{employee_id}", response_model=EmployeeSentiment)
def get_employee_sentiment(employee_id: int, db: Session = Depends(get_db)):
    service = SentimentService(db)
    if service.repository.get_employee(employee_id) is None:
        raise NotFoundError("Employee", employee_id)
    return service.get_employee_sentiment(employee_id)


@router.get("/correlation", response_model=List[ScoreCorrelation])
def get_score_correlation(db: Session = Depends(get_db)):
    """Correlation between comment sentiment and the score given to the same question."""
    return SentimentService(db).get_score_correlation()


@router.get("/comments", response_model=Page[CommentAnalysis])
def list_comments(
    field: Optional[str] = None,
    label: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    db: Session = Depends(get_db),
):
    _check_field(field)
    if label is not None and label not in SENTIMENT_LABELS:
        raise ValidationError(
            f"Unknown sentiment label '{label}'",
            details={"label": label, "allowed": list(SENTIMENT_LABELS)},
        )
    return SentimentService(db).list_comments(field=field, label=label, page=page, limit=limit)


@router.post("/analyze", response_model=AnalyzeTextResponse)
def analyze_text(payload: AnalyzeTextRequest, db: Session = Depends(get_db)):
    """Score an arbitrary Portuguese text with the survey lexicon."""
    return AnalyzeTextResponse(text=payload.text, sentiment=SentimentService(db).analyze_text(payload.text))
