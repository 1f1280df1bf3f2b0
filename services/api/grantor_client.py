from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from domain.models import ApiEnvelope

logger = logging.getLogger(__name__)

HTTP_ERROR_MESSAGE = "Unable to load applications. Please try again."
FAILURE_MESSAGE = "Unable to load applications."


class FetchError(Exception):
    """Base for failures the queue shows in place of the table."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(FetchError): ...


class LogicalFailure(FetchError): ...


class MalformedPayload(FetchError): ...


def build_headers(token: str | None) -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _error_message(response: httpx.Response) -> str:
    """Best-effort `message` from an error envelope."""
    try:
        body = response.json()
    except ValueError:
        logger.warning("unparseable error body (HTTP %s)", response.status_code)
        return HTTP_ERROR_MESSAGE
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return HTTP_ERROR_MESSAGE


async def fetch_applications(
    url: str,
    token: str | None = None,
    timeout_s: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[dict[str, Any]]:
    """GET the grantor applications envelope and return its raw `data` rows."""
    try:
        async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
            r = await client.get(url, headers=build_headers(token))
    except httpx.HTTPError as e:
        raise TransportError(HTTP_ERROR_MESSAGE) from e

    if not r.is_success:
        raise TransportError(_error_message(r))

    try:
        envelope = ApiEnvelope.model_validate(r.json())
    except (ValueError, ValidationError) as e:
        raise MalformedPayload(FAILURE_MESSAGE) from e

    if not envelope.success:
        raise LogicalFailure(envelope.message or FAILURE_MESSAGE)
    return envelope.data or []
