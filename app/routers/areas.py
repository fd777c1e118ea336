from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.schemas.browse import AreaOut
from app.services.repository import SurveyRepository

router = APIRouter(prefix="/areas", tags=["Areas"])


@router.get("", response_model=List[AreaOut])
def list_areas(db: Session = Depends(get_db)):
    return [AreaOut.model_validate(a) for a in SurveyRepository(db).list_areas()]
