from __future__ import annotations

import os

from pydantic import BaseModel


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


class Settings(BaseModel):
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
    APPLICATIONS_PATH: str = "/api/grantor/applications"
    TOKEN_KEY: str = os.getenv("TOKEN_KEY", "grantiq_token")
    # session-state slot holding the review page's FetchController
    CONTROLLER_KEY: str = "review_controller"
    # None disables httpx timeouts; the transport decides when to give up.
    HTTP_TIMEOUT_S: float | None = _optional_float("HTTP_TIMEOUT_S")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def applications_url(self) -> str:
        return f"{self.API_BASE_URL.rstrip('/')}{self.APPLICATIONS_PATH}"


settings = Settings()
