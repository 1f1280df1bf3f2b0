from __future__ import annotations

import logging

import httpx

from core.config import Settings, settings as default_settings
from domain.models import ApplicationRecord
from domain.value_objects import LoadResult
from services.api.grantor_client import FetchError, MalformedPayload, fetch_applications
from services.review.normalizer import normalize_records
from services.review.session import TokenReader, no_token

logger = logging.getLogger(__name__)

UNEXPECTED_MESSAGE = "Something went wrong."


class FetchController:
    """
    Owns the load lifecycle of one review-queue view.

    State seen by the renderer:
      is_loading  True strictly between the start of an attempt and its completion
      error       cleared when an attempt starts, set only when it fails
      records     emptied when an attempt starts, replaced only on success

    Each attempt carries a sequence number. A completion that belongs to a
    superseded attempt, or arrives after close(), leaves the state untouched.
    """

    def __init__(
        self,
        token_reader: TokenReader = no_token,
        config: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._token_reader = token_reader
        self._config = config or default_settings
        self._transport = transport
        self._seq = 0
        self._closed = False
        self.is_loading = False
        self.error: str | None = None
        self.records: tuple[ApplicationRecord, ...] = ()

    @property
    def closed(self) -> bool:
        return self._closed

    async def load(self) -> LoadResult:
        if self._closed:
            raise RuntimeError("controller is closed")

        self._seq += 1
        seq = self._seq
        self.is_loading = True
        self.error = None
        self.records = ()
        url = self._config.applications_url
        logger.debug("attempt %d: GET %s", seq, url)

        try:
            rows = await fetch_applications(
                url,
                token=self._token_reader(),
                timeout_s=self._config.HTTP_TIMEOUT_S,
                transport=self._transport,
            )
            result = LoadResult(records=tuple(normalize_records(rows)))
        except MalformedPayload as e:
            logger.warning("attempt %d: malformed payload suppressed", seq, exc_info=True)
            result = LoadResult(error=e.message)
        except FetchError as e:
            logger.debug("attempt %d failed", seq, exc_info=True)
            result = LoadResult(error=e.message)
        except Exception:  # noqa: BLE001
            logger.exception("attempt %d: unexpected error while loading applications", seq)
            result = LoadResult(error=UNEXPECTED_MESSAGE)

        if self._closed or seq != self._seq:
            logger.debug("attempt %d superseded; response discarded", seq)
            return result

        self.is_loading = False
        if result.ok:
            self.records = result.records
            logger.info("loaded %d applications", len(result.records))
        else:
            self.error = result.error
            logger.warning("could not load applications: %s", result.error)
        return result

    async def refresh(self) -> LoadResult:
        """Manual reload; any earlier in-flight attempt becomes stale."""
        logger.info("refresh requested")
        return await self.load()

    def close(self) -> None:
        """Tear down: late completions become no-ops and the record set is dropped."""
        self._closed = True
        self.is_loading = False
        self.records = ()
