from services.review.engine import view
from services.review.presentation import (
    EMPTY_MESSAGE,
    LOADING_CAPTION,
    NO_RESULTS_MESSAGE,
    ViewState,
    present,
)


def test_error_wins_over_everything(make_record):
    screen = present(True, "Session expired", 3, [make_record()])
    assert screen.state is ViewState.ERROR
    assert screen.message == "Session expired"


def test_loading_before_empty():
    screen = present(True, None, 0, [])
    assert screen.state is ViewState.LOADING
    assert screen.caption == LOADING_CAPTION


def test_empty_fetch():
    screen = present(False, None, 0, [])
    assert screen.state is ViewState.EMPTY
    assert screen.message == EMPTY_MESSAGE
    assert not screen.no_results


def test_filtered_to_nothing_is_distinct_from_empty(make_record):
    records = [make_record(application_status="pending") for _ in range(2)]
    screen = present(False, None, len(records), view(records, "approved", "", "desc"))
    assert screen.state is ViewState.POPULATED
    assert screen.no_results
    assert screen.message == NO_RESULTS_MESSAGE
    assert screen.message != EMPTY_MESSAGE


def test_populated(make_record):
    records = [make_record(), make_record()]
    screen = present(False, None, 2, records)
    assert screen.state is ViewState.POPULATED
    assert screen.rows == tuple(records)
    assert screen.message is None
    assert screen.caption == "2 applications in queue"
