from __future__ import annotations

from domain.models import ApplicationRecord
from services.review.normalizer import parse_timestamp

PLACEHOLDER = "—"
NOT_SUBMITTED = "Not submitted"


def format_timestamp(value: str | None) -> str:
    if not value:
        return PLACEHOLDER
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    return parsed.strftime("%b %d, %Y, %I:%M %p")


def format_submitted(record: ApplicationRecord) -> str:
    if not record.submitted_at:
        return NOT_SUBMITTED
    return format_timestamp(record.submitted_at)


def display_name(record: ApplicationRecord) -> str:
    return record.full_name or PLACEHOLDER


def step_label(record: ApplicationRecord) -> str:
    return f"Step {record.current_step}"


def table_row(record: ApplicationRecord) -> dict[str, str]:
    return {
        "Applicant Name": display_name(record),
        "Application ID": record.application_id,
        "Current Step": step_label(record),
        "Application Status": record.status,
        "Submitted At": format_submitted(record),
    }
