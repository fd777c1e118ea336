from fastapi import APIRouter
from app.routers import areas, attrition_risk, employees, reports, sentiment, stats, surveys

# Centralized API router hub
# Routers are aggregated here and main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(sentiment.router)
api_router.include_router(stats.router)
api_router.include_router(attrition_risk.router)
api_router.include_router(reports.router)
api_router.include_router(employees.router)
api_router.include_router(areas.router)
api_router.include_router(surveys.router)
