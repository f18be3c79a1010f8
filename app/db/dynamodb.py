from __future__ import annotations

from typing import Any

import boto3

from app.core.config import Settings


def create_dynamodb_resource(settings: Settings) -> Any:
    kwargs: dict[str, Any] = {"region_name": settings.aws_region}
    if settings.dynamodb_endpoint_url:
        kwargs["endpoint_url"] = settings.dynamodb_endpoint_url
    return boto3.resource("dynamodb", **kwargs)


def get_grades_table(resource: Any, settings: Settings) -> Any:
    return resource.Table(settings.table_name)
