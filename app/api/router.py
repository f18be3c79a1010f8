from fastapi import APIRouter

from app.api.routes import grades

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(grades.router, tags=["grades"])
