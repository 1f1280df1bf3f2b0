from __future__ import annotations

from domain.models import VisualCategory

_CATEGORIES: dict[str, VisualCategory] = {
    "draft": VisualCategory.DRAFT,
    "pending": VisualCategory.PENDING,
    "under_review": VisualCategory.UNDER_REVIEW,
    "under review": VisualCategory.UNDER_REVIEW,
    "approved": VisualCategory.APPROVED,
    "rejected": VisualCategory.REJECTED,
}

# (background, text, border) per badge
BADGE_COLORS: dict[VisualCategory, tuple[str, str, str]] = {
    VisualCategory.DRAFT: ("#f59e0b26", "#fcd34d", "#fbbf2466"),
    VisualCategory.PENDING: ("#f59e0b26", "#fcd34d", "#fbbf2466"),
    VisualCategory.UNDER_REVIEW: ("#0ea5e926", "#7dd3fc", "#38bdf866"),
    VisualCategory.APPROVED: ("#10b98126", "#6ee7b7", "#34d39966"),
    VisualCategory.REJECTED: ("#f43f5e26", "#fda4af", "#fb718566"),
    VisualCategory.UNKNOWN: ("#64748b26", "#e2e8f0", "#94a3b866"),
}


def classify_status(status: str | None) -> VisualCategory:
    """Badge category for a raw status string. Styling only; filters match raw text."""
    return _CATEGORIES.get((status or "").lower(), VisualCategory.UNKNOWN)


def badge_style(status: str | None) -> str:
    bg, fg, border = BADGE_COLORS[classify_status(status)]
    return (
        f"background:{bg};color:{fg};border:1px solid {border};"
        "border-radius:9999px;padding:2px 10px;font-size:11px;font-weight:500"
    )
