from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

ALL_STATUSES = "all"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortOrder":
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC

    @property
    def arrow(self) -> str:
        return "↑" if self is SortOrder.ASC else "↓"


class VisualCategory(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    UNKNOWN = "unknown"


# value -> label, in the order the status selector lists them
STATUS_FILTER_OPTIONS: dict[str, str] = {
    ALL_STATUSES: "All",
    "draft": "Draft",
    "pending": "Pending",
    "under_review": "Under Review",
    "approved": "Approved",
    "rejected": "Rejected",
}


class ApplicationRecord(BaseModel):
    """One row of the grantor review queue, as served by the backend."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    application_id: str
    full_name: Optional[str] = None
    status: str = Field(default="", alias="application_status")
    current_step: int = Field(default=0, ge=0)
    submitted_at: Optional[str] = None  # raw; parsed lazily for sorting
    updated_at: Optional[str] = None


class ApiEnvelope(BaseModel):
    success: bool = False
    message: Optional[str] = None
    data: Optional[list[dict[str, Any]]] = None
