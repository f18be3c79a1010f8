from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.core.config import Settings
from app.handler import GradeHandler
from app.repositories.base import GradeRepository
from app.repositories.dynamodb import DynamoGradeRepository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_grade_repository(request: Request) -> GradeRepository:
    repo = getattr(request.app.state, "grade_repository", None)
    if repo is not None:
        return repo
    return DynamoGradeRepository(table=request.app.state.grades_table)


def get_grade_handler(
    repo: Annotated[GradeRepository, Depends(get_grade_repository)],
) -> GradeHandler:
    return GradeHandler.from_repository(repo)
