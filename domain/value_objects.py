from dataclasses import dataclass

from domain.models import ApplicationRecord


@dataclass(frozen=True)
class LoadResult:
    records: tuple[ApplicationRecord, ...] = ()
    error: str | None = None  # user-visible message, set only on failure

    @property
    def ok(self) -> bool:
        return self.error is None
