from __future__ import annotations

from typing import Any, Protocol

from app.models.grade import GradeRecord


class GradeRepository(Protocol):
    def ping(self) -> None: ...

    def scan(self) -> list[dict[str, Any]]: ...

    def put(self, record: GradeRecord) -> None: ...
