from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.factory import create_app
from app.handler import GradeHandler
from app.services.grades import GradeService
from tests.fakes import FIXED_NOW_MS, FakeGradeRepository


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        log_level="DEBUG",
        table_name="StudentGrades",
        aws_region="us-east-1",
    )


@pytest.fixture()
def repo() -> FakeGradeRepository:
    return FakeGradeRepository()


@pytest.fixture()
def handler(repo: FakeGradeRepository) -> GradeHandler:
    return GradeHandler(GradeService(repo, clock=lambda: FIXED_NOW_MS))


@pytest.fixture()
def client(settings: Settings, repo: FakeGradeRepository) -> TestClient:
    app = create_app(settings, repository=repo)
    with TestClient(app) as client:
        yield client
