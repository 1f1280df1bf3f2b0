from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from domain.models import ApplicationRecord

LOADING_CAPTION = "Loading applications..."
EMPTY_MESSAGE = (
    "No applications found yet. Once students start submitting, "
    "they will appear here for validation."
)
NO_RESULTS_MESSAGE = "No applications match the current filters."


class ViewState(str, Enum):
    ERROR = "error"
    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class Presentation:
    state: ViewState
    caption: str
    message: str | None = None
    rows: tuple[ApplicationRecord, ...] = ()

    @property
    def no_results(self) -> bool:
        """Populated fetch, but nothing survived the filters."""
        return self.state is ViewState.POPULATED and not self.rows


def queue_caption(is_loading: bool, shown: int) -> str:
    return LOADING_CAPTION if is_loading else f"{shown} applications in queue"


def present(
    is_loading: bool,
    error: str | None,
    fetched_count: int,
    display_records: Sequence[ApplicationRecord],
) -> Presentation:
    """Pick the single state to render: error > loading > empty > populated."""
    caption = queue_caption(is_loading, len(display_records))
    if error:
        return Presentation(ViewState.ERROR, caption, message=error)
    if is_loading:
        return Presentation(ViewState.LOADING, caption)
    if fetched_count == 0:
        return Presentation(ViewState.EMPTY, caption, message=EMPTY_MESSAGE)
    rows = tuple(display_records)
    return Presentation(
        ViewState.POPULATED,
        caption,
        message=None if rows else NO_RESULTS_MESSAGE,
        rows=rows,
    )
