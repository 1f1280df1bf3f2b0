import asyncio
from html import escape

import streamlit as st

from core.config import settings
from core.logging import configure_logging
from domain.models import ALL_STATUSES, STATUS_FILTER_OPTIONS, SortOrder
from services.review.controller import FetchController
from services.review.engine import view
from services.review.formatting import table_row
from services.review.presentation import LOADING_CAPTION, ViewState, present
from services.review.session import session_token_reader
from services.review.status import badge_style

st.set_page_config(page_title="Application Validation", layout="wide")
configure_logging()

st.title("Application Validation")
st.caption(
    "Review and validate incoming scholarship applications before moving them "
    "to scrutiny and recommendation stages."
)
st.caption("Step 1 of 3 · Validation → Scrutiny → Recommendation")

st.session_state.setdefault("sort_order", SortOrder.DESC)


def _toggle_sort() -> None:
    st.session_state.sort_order = st.session_state.sort_order.toggled()


ctrl = st.session_state.get(settings.CONTROLLER_KEY)
if ctrl is None:
    ctrl = FetchController(token_reader=session_token_reader(st.session_state))
    st.session_state[settings.CONTROLLER_KEY] = ctrl
    with st.spinner(LOADING_CAPTION):
        asyncio.run(ctrl.load())

search_col, status_col, sort_col, refresh_col = st.columns([4, 2, 2, 1])
query = search_col.text_input(
    "Search",
    key="search_query",
    placeholder="Search by applicant name or application ID",
)
status_filter = status_col.selectbox(
    "Status",
    options=list(STATUS_FILTER_OPTIONS),
    format_func=STATUS_FILTER_OPTIONS.get,
    key="status_filter",
    index=0,
)
sort_order: SortOrder = st.session_state.sort_order
sort_col.button(f"Submitted At {sort_order.arrow}", key="sort_toggle", on_click=_toggle_sort)
if refresh_col.button("Refresh", key="refresh"):
    with st.spinner(LOADING_CAPTION):
        asyncio.run(ctrl.refresh())

displayed = view(ctrl.records, status_filter or ALL_STATUSES, query, sort_order)
screen = present(ctrl.is_loading, ctrl.error, len(ctrl.records), displayed)

st.subheader("Validation Queue")
st.caption(screen.caption)

if screen.state is ViewState.ERROR:
    st.error(screen.message)
elif screen.state is ViewState.LOADING:
    st.info(LOADING_CAPTION)
elif screen.state is ViewState.EMPTY:
    st.info(screen.message)
elif screen.no_results:
    st.warning(screen.message)
else:
    header = "".join(f"<th>{escape(h)}</th>" for h in table_row(screen.rows[0]))
    body = []
    for record in screen.rows:
        cells = table_row(record)
        status = cells["Application Status"]
        cells["Application Status"] = (
            f'<span style="{badge_style(status)}">{escape(status)}</span>'
        )
        body.append(
            "<tr>"
            + "".join(
                f"<td>{v if k == 'Application Status' else escape(v)}</td>"
                for k, v in cells.items()
            )
            + "</tr>"
        )
    st.markdown(
        f"<table><thead><tr>{header}</tr></thead><tbody>{''.join(body)}</tbody></table>",
        unsafe_allow_html=True,
    )
