from __future__ import annotations

from decimal import Decimal
from typing import Any

from app.models.grade import GradeRecord


class DynamoGradeRepository:
    """Grade storage on a single DynamoDB table.

    ``table`` is a boto3 ``Table`` resource. Only the first scan page is
    read; ``LastEvaluatedKey`` is ignored.
    """

    def __init__(self, *, table: Any) -> None:
        self._table = table

    def ping(self) -> None:
        self._table.load()

    def scan(self) -> list[dict[str, Any]]:
        response = self._table.scan()
        items = response.get("Items") or []
        return list(items)

    def put(self, record: GradeRecord) -> None:
        # DynamoDB rejects Python floats; str() keeps the shortest repr.
        self._table.put_item(
            Item={
                "student_id": record.student_id,
                "timestamp": record.timestamp,
                "grade": Decimal(str(record.grade)),
            }
        )
