from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable

from pydantic import ValidationError

from domain.models import ApplicationRecord
from services.api.grantor_client import FAILURE_MESSAGE, MalformedPayload


def normalize_record(raw: dict[str, Any]) -> ApplicationRecord:
    """Map one API row onto ApplicationRecord; optional fields may be missing."""
    return ApplicationRecord.model_validate(raw)


def normalize_records(rows: Iterable[dict[str, Any]]) -> list[ApplicationRecord]:
    try:
        return [normalize_record(r) for r in rows]
    except ValidationError as e:
        raise MalformedPayload(FAILURE_MESSAGE) from e


def parse_timestamp(value: str | None) -> datetime | None:
    """
    ISO-8601 string -> aware datetime, or None when absent or unparseable.
    Naive values are read as UTC so every key compares against every other.
    """
    if not value or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
