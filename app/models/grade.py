from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GradeRecord:
    student_id: str
    grade: float
    timestamp: int


@dataclass(frozen=True)
class GradeEntry:
    student_id: str | None
    grade: float


@dataclass(frozen=True)
class GradeSummary:
    grades: list[GradeEntry] = field(default_factory=list)
    average: float = 0.0

    @property
    def count(self) -> int:
        return len(self.grades)
