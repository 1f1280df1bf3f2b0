from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from core.config import settings

TokenReader = Callable[[], Optional[str]]


def no_token() -> str | None:
    return None


def session_token_reader(store: Mapping[str, Any], key: str | None = None) -> TokenReader:
    """Read-only accessor over a session store (e.g. `st.session_state`)."""
    key = key or settings.TOKEN_KEY

    def read() -> str | None:
        token = store.get(key)
        return token if isinstance(token, str) and token else None

    return read
