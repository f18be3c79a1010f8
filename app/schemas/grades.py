from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

from app.services.coercion import coerce_grade

INVALID_GRADE_MESSAGE = "Invalid student_id or grade"
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"


class GradeCreate(BaseModel):
    student_id: str
    grade: float

    @field_validator("student_id", mode="before")
    @classmethod
    def _require_student_id(cls, v: Any) -> str:
        if not isinstance(v, str) or not v:
            raise ValueError("student_id must be a non-empty string.")
        return v

    @field_validator("grade", mode="before")
    @classmethod
    def _coerce_grade(cls, v: Any) -> float:
        value = coerce_grade(v)
        if value is None:
            raise ValueError("grade must be a finite number.")
        return value


class GradeRead(BaseModel):
    student_id: str | None = None
    grade: float


class GradeListResponse(BaseModel):
    grades: list[GradeRead]
    average: float


class GradeWriteResponse(BaseModel):
    average: float
    itemsSaved: int


class CorsAck(BaseModel):
    message: str = "CORS OK"


class ErrorResponse(BaseModel):
    error: str


class FailureResponse(BaseModel):
    error: str
    errorType: str
