from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from app.models.grade import GradeEntry, GradeRecord, GradeSummary
from app.repositories.base import GradeRepository
from app.schemas.grades import GradeCreate
from app.services.coercion import average, coerce_grade, student_id_or_none

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def summarize(items: list[dict[str, Any]]) -> GradeSummary:
    entries: list[GradeEntry] = []
    for item in items:
        grade = coerce_grade(item.get("grade"))
        if grade is None:
            continue
        entries.append(
            GradeEntry(student_id=student_id_or_none(item.get("student_id")), grade=grade)
        )
    return GradeSummary(grades=entries, average=average([e.grade for e in entries]))


class GradeService:
    def __init__(
        self, repo: GradeRepository, *, clock: Callable[[], int] = _now_ms
    ) -> None:
        self._repo = repo
        self._clock = clock

    def list_grades(self) -> GradeSummary:
        items = self._repo.scan()
        logger.debug("Scan returned %d item(s)", len(items))
        return summarize(items)

    def record_grade(self, payload: GradeCreate) -> GradeSummary:
        record = GradeRecord(
            student_id=payload.student_id,
            grade=payload.grade,
            timestamp=self._clock(),
        )
        self._repo.put(record)
        logger.info(
            "Saved grade for student_id=%s timestamp=%d", record.student_id, record.timestamp
        )
        return self.list_grades()
