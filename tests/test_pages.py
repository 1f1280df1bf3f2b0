from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import services.review.controller as controller_mod
from core.config import settings
from services.api.grantor_client import LogicalFailure
from services.review.controller import FetchController
from services.review.presentation import EMPTY_MESSAGE, NO_RESULTS_MESSAGE

UI_DIR = Path(__file__).resolve().parents[1] / "apps" / "ui"
HOME = UI_DIR / "Home.py"
QUEUE_PAGE = UI_DIR / "pages" / "01_Application_Validation.py"

ROWS = [
    {
        "id": 1,
        "application_id": "GIQ-001",
        "full_name": "Asha",
        "application_status": "Pending",
        "current_step": 1,
        "submitted_at": None,
        "updated_at": "2024-01-01T00:00:00Z",
    },
    {
        "id": 2,
        "application_id": "GIQ-002",
        "full_name": None,
        "application_status": "under review",
        "current_step": 2,
        "submitted_at": "2024-02-01",
        "updated_at": "2024-02-01T00:00:00Z",
    },
    {
        "id": 3,
        "application_id": "GIQ-003",
        "full_name": "Bilal",
        "application_status": "approved",
        "current_step": 3,
        "submitted_at": "2024-01-01",
        "updated_at": "2024-01-02T00:00:00Z",
    },
]


class FakeBackend:
    """Stands in for fetch_applications; records the token of every call."""

    def __init__(self, rows=(), error=None):
        self.rows = list(rows)
        self.error = error
        self.tokens = []

    async def __call__(self, url, token=None, timeout_s=None, transport=None):
        self.tokens.append(token)
        if self.error is not None:
            raise self.error
        return list(self.rows)


@pytest.fixture
def backend(monkeypatch):
    fake = FakeBackend(rows=ROWS)
    monkeypatch.setattr(controller_mod, "fetch_applications", fake)
    return fake


def _queue(token=None) -> AppTest:
    at = AppTest.from_file(str(QUEUE_PAGE), default_timeout=30)
    if token is not None:
        at.session_state[settings.TOKEN_KEY] = token
    return at.run()


def _captions(at):
    return [c.value for c in at.caption]


def _table(at) -> str:
    tables = [m.value for m in at.markdown if "<table>" in m.value]
    assert len(tables) == 1
    return tables[0]


def test_populated_queue_renders_table(backend):
    at = _queue(token="tok")

    assert not at.exception
    assert backend.tokens == ["tok"]
    assert "3 applications in queue" in _captions(at)
    table = _table(at)
    assert "GIQ-001" in table and "Asha" in table
    assert "Not submitted" in table
    assert not at.error and not at.warning


def test_sort_toggle_reorders_rows(backend):
    at = _queue()
    table = _table(at)
    assert table.index("GIQ-002") < table.index("GIQ-003") < table.index("GIQ-001")
    assert at.button(key="sort_toggle").label.endswith("↓")

    at.button(key="sort_toggle").click().run()

    table = _table(at)
    assert table.index("GIQ-003") < table.index("GIQ-002") < table.index("GIQ-001")
    assert at.button(key="sort_toggle").label.endswith("↑")


def test_filtered_to_nothing_shows_no_results_warning(backend):
    at = _queue()
    at.selectbox(key="status_filter").set_value("rejected").run()

    assert [w.value for w in at.warning] == [NO_RESULTS_MESSAGE]
    assert EMPTY_MESSAGE not in [i.value for i in at.info]
    assert "0 applications in queue" in _captions(at)


def test_empty_fetch_shows_empty_message(backend):
    backend.rows = []
    at = _queue()

    assert [i.value for i in at.info] == [EMPTY_MESSAGE]
    assert not at.warning


def test_search_narrows_caption(backend):
    at = _queue()
    at.text_input(key="search_query").set_value("giq-002").run()

    assert "1 applications in queue" in _captions(at)
    assert "GIQ-001" not in _table(at)


def test_controls_stay_usable_while_error_is_shown(backend):
    backend.error = LogicalFailure("Session expired")
    at = _queue()
    assert [e.value for e in at.error] == ["Session expired"]

    at.selectbox(key="status_filter").set_value("approved").run()
    at.text_input(key="search_query").set_value("asha").run()
    at.button(key="sort_toggle").click().run()

    assert not at.exception
    assert [e.value for e in at.error] == ["Session expired"]
    assert len(backend.tokens) == 1


def test_refresh_starts_a_new_attempt(backend):
    backend.error = LogicalFailure("Maintenance")
    at = _queue()
    assert [e.value for e in at.error] == ["Maintenance"]

    backend.error = None
    at.button(key="refresh").click().run()

    assert len(backend.tokens) == 2
    assert not at.error
    assert "GIQ-003" in _table(at)


def test_sign_in_stores_token_and_drops_cached_controller():
    stale = FetchController()
    at = AppTest.from_file(str(HOME), default_timeout=30)
    at.session_state[settings.CONTROLLER_KEY] = stale
    at.run()

    at.text_input[0].set_value("  tok  ")
    at.button[0].click().run()

    assert not at.exception
    assert at.session_state[settings.TOKEN_KEY] == "tok"
    assert settings.CONTROLLER_KEY not in at.session_state
    assert stale.closed


def test_logout_clears_token_and_closes_controller():
    ctrl = FetchController()
    at = AppTest.from_file(str(HOME), default_timeout=30)
    at.session_state[settings.TOKEN_KEY] = "tok"
    at.session_state[settings.CONTROLLER_KEY] = ctrl
    at.run()
    assert [s.value for s in at.success] == ["Signed in as Grantor"]

    at.button[0].click().run()

    assert not at.exception
    assert settings.TOKEN_KEY not in at.session_state
    assert settings.CONTROLLER_KEY not in at.session_state
    assert ctrl.closed
