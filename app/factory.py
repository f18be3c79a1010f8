from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.router import api_router
from app.core.config import Settings, load_settings
from app.core.logging import configure_logging
from app.db.dynamodb import create_dynamodb_resource, get_grades_table
from app.repositories.base import GradeRepository


def create_app(
    settings: Settings | None = None, repository: GradeRepository | None = None
) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.settings = settings
        if repository is None:
            app.state.dynamodb = create_dynamodb_resource(settings)
            app.state.grades_table = get_grades_table(app.state.dynamodb, settings)
        yield
        if repository is None:
            app.state.dynamodb.meta.client.close()

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="Grade Service API",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.grade_repository = repository

    @app.get("/", tags=["meta"])
    def root():
        return {"name": "grade-service", "status": "ok", "table": settings.table_name}

    app.include_router(api_router)
    return app
