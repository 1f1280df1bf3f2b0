import streamlit as st

from core.config import settings
from core.logging import configure_logging

st.set_page_config(page_title="GrantIQ", layout="wide")
configure_logging()

st.title("GrantIQ – Grantor Console")

st.markdown(
    """
Smart Scholarship Management Platform.

Application workflow:

1. **Application Validation** – review the incoming queue (sidebar)
2. Scrutiny – coming soon
3. Recommendation – coming soon
"""
)

token = st.session_state.get(settings.TOKEN_KEY)

if token:
    st.success("Signed in as Grantor")
    if st.button("Logout"):
        ctrl = st.session_state.pop(settings.CONTROLLER_KEY, None)
        if ctrl is not None:
            ctrl.close()
        st.session_state.pop(settings.TOKEN_KEY, None)
        st.rerun()
else:
    with st.form("sign_in"):
        entered = st.text_input("Access token", type="password")
        if st.form_submit_button("Sign in") and entered.strip():
            st.session_state[settings.TOKEN_KEY] = entered.strip()
            # next visit to the queue fetches with the new token
            stale = st.session_state.pop(settings.CONTROLLER_KEY, None)
            if stale is not None:
                stale.close()
            st.rerun()
