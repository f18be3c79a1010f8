from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ValidationError

from app.core.config import load_settings
from app.core.logging import configure_logging
from app.db.dynamodb import create_dynamodb_resource, get_grades_table
from app.repositories.base import GradeRepository
from app.repositories.dynamodb import DynamoGradeRepository
from app.schemas.grades import (
    INVALID_GRADE_MESSAGE,
    METHOD_NOT_ALLOWED_MESSAGE,
    CorsAck,
    ErrorResponse,
    FailureResponse,
    GradeCreate,
    GradeListResponse,
    GradeRead,
    GradeWriteResponse,
)
from app.services.grades import GradeService

logger = logging.getLogger(__name__)

CORS_PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}


def _response(
    status_code: int,
    body: BaseModel,
    headers: Mapping[str, str],
    *,
    exclude_none: bool = False,
) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(headers),
        "body": body.model_dump_json(exclude_none=exclude_none),
    }


class GradeHandler:
    """Turns an API-Gateway style event into a response dict.

    Every outcome, including storage failures and malformed bodies, comes
    back as a response; nothing raises past :meth:`handle`.
    """

    def __init__(self, service: GradeService) -> None:
        self._service = service

    @classmethod
    def from_repository(cls, repo: GradeRepository) -> GradeHandler:
        return cls(GradeService(repo))

    def handle(self, event: Mapping[str, Any] | None) -> dict[str, Any]:
        try:
            return self._dispatch(event)
        except Exception as e:  # noqa: BLE001 - every failure becomes a 500
            logger.exception("Request failed")
            return _response(
                500,
                FailureResponse(error=str(e), errorType=type(e).__name__),
                JSON_HEADERS,
            )

    def _dispatch(self, event: Mapping[str, Any] | None) -> dict[str, Any]:
        method = event.get("httpMethod") if isinstance(event, Mapping) else None
        logger.info("Received %s request", method)

        if method == "OPTIONS":
            return _response(200, CorsAck(), CORS_PREFLIGHT_HEADERS)
        if method == "GET":
            return self._get()
        if method == "POST":
            return self._post(event.get("body"))
        return _response(405, ErrorResponse(error=METHOD_NOT_ALLOWED_MESSAGE), JSON_HEADERS)

    def _get(self) -> dict[str, Any]:
        summary = self._service.list_grades()
        body = GradeListResponse(
            grades=[GradeRead(student_id=g.student_id, grade=g.grade) for g in summary.grades],
            average=summary.average,
        )
        # Records stored without a student_id are listed without the key.
        return _response(200, body, JSON_HEADERS, exclude_none=True)

    def _post(self, raw_body: str | bytes | None) -> dict[str, Any]:
        logger.debug("Request body: %s", raw_body)
        data = json.loads(raw_body)
        if data is None:
            raise TypeError("Request body must not be JSON null")
        try:
            payload = GradeCreate.model_validate(data)
        except ValidationError:
            logger.info("Rejected grade submission: %s", data)
            return _response(400, ErrorResponse(error=INVALID_GRADE_MESSAGE), JSON_HEADERS)

        summary = self._service.record_grade(payload)
        return _response(
            200,
            GradeWriteResponse(average=summary.average, itemsSaved=summary.count),
            JSON_HEADERS,
        )


@lru_cache(maxsize=1)
def get_default_handler() -> GradeHandler:
    settings = load_settings()
    configure_logging(settings)
    resource = create_dynamodb_resource(settings)
    repo = DynamoGradeRepository(table=get_grades_table(resource, settings))
    return GradeHandler.from_repository(repo)


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    return get_default_handler().handle(event)
