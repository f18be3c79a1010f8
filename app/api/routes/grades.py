from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from starlette.concurrency import run_in_threadpool

from app.api.deps import get_grade_handler, get_grade_repository
from app.handler import GradeHandler
from app.repositories.base import GradeRepository

router = APIRouter(prefix="/grades")

# The handler decides which of these are allowed; everything else gets its 405.
FORWARDED_METHODS = ["GET", "POST", "OPTIONS", "PUT", "PATCH", "DELETE"]


async def _to_event(request: Request) -> dict[str, Any]:
    raw = await request.body()
    return {
        "httpMethod": request.method,
        "path": request.url.path,
        "headers": dict(request.headers),
        "queryStringParameters": dict(request.query_params) or None,
        "body": raw or None,
    }


@router.get("/health", tags=["meta"])
def health(
    repo: Annotated[GradeRepository, Depends(get_grade_repository)],
) -> dict[str, str]:
    try:
        repo.ping()
    except Exception as e:  # noqa: BLE001 - expose as 503 without leaking internals
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="DynamoDB unavailable",
        ) from e
    return {"status": "ok"}


@router.api_route("", methods=FORWARDED_METHODS, include_in_schema=False)
async def grades(
    request: Request,
    handler: Annotated[GradeHandler, Depends(get_grade_handler)],
) -> Response:
    event = await _to_event(request)
    result = await run_in_threadpool(handler.handle, event)
    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result["headers"],
    )
