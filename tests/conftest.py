"""Pytest configuration and fixtures."""

import pytest

from domain.models import ApplicationRecord


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_record():
    """Build an ApplicationRecord from wire-style keyword overrides."""
    counter = {"next": 1}

    def _make(**overrides) -> ApplicationRecord:
        n = counter["next"]
        counter["next"] += 1
        raw = {
            "id": n,
            "application_id": f"APP-{n:03d}",
            "full_name": f"Applicant {n}",
            "application_status": "pending",
            "current_step": 1,
            "submitted_at": None,
            "updated_at": "2024-01-01T00:00:00Z",
        }
        raw.update(overrides)
        return ApplicationRecord.model_validate(raw)

    return _make
