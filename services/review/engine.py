from __future__ import annotations

from typing import Iterable

from domain.models import ALL_STATUSES, ApplicationRecord, SortOrder
from services.review.normalizer import parse_timestamp


def matches_status(record: ApplicationRecord, status_filter: str) -> bool:
    wanted = status_filter.lower()
    return wanted == ALL_STATUSES or record.status.lower() == wanted


def matches_query(record: ApplicationRecord, query: str) -> bool:
    q = query.strip().lower()
    if not q:
        return True
    name = (record.full_name or "").lower()
    return q in name or q in record.application_id.lower()


def sort_by_submitted(
    records: Iterable[ApplicationRecord], sort_order: SortOrder | str = SortOrder.DESC
) -> list[ApplicationRecord]:
    """
    Stable sort on submitted_at. Records without a parseable timestamp keep
    their input order and always come after the dated ones.
    """
    dated = []
    undated = []
    for r in records:
        ts = parse_timestamp(r.submitted_at)
        if ts is None:
            undated.append(r)
        else:
            dated.append((ts, r))
    # sorted() stays stable with reverse=True
    dated.sort(key=lambda pair: pair[0], reverse=SortOrder(sort_order) is SortOrder.DESC)
    return [r for _, r in dated] + undated


def view(
    records: Iterable[ApplicationRecord],
    status_filter: str = ALL_STATUSES,
    query: str = "",
    sort_order: SortOrder | str = SortOrder.DESC,
) -> list[ApplicationRecord]:
    """filter -> search -> sort. Pure; never mutates `records`."""
    kept = [r for r in records if matches_status(r, status_filter) and matches_query(r, query)]
    return sort_by_submitted(kept, sort_order)
