# utils/nav.py
# =================================================================================
# 🧭 Route table for the multipage app.
# - Maps the public routes (/event, /success, /expired, /404) to page scripts.
# - go_to() is the Navigator the controller receives; it only runs from the
#   script thread (st.switch_page raises to stop the current run).
# - Hides the native sidebar nav: this app has no menu, only links.
# =================================================================================

from typing import Dict, Optional

import streamlit as st

from app.controller import Route
from utils.fields import widget_key

ENTRY_SCRIPT = "streamlit_app.py"

PAGES: Dict[Route, str] = {
    Route.HOME: ENTRY_SCRIPT,
    Route.EVENT: "pages/1_Event.py",
    Route.SUCCESS: "pages/2_Success.py",
    Route.EXPIRED: "pages/3_Expired.py",
    Route.NOT_FOUND: "pages/4_Not_Found.py",
}

EVENT_ID_KEY = "event_id"                                   # session key shared by router + event page


def go_to(route: Route) -> None:
    st.switch_page(PAGES[route])


def open_event(event_id: str) -> None:
    """Stores the id for the event page (switch_page drops the query string) and goes there."""
    st.session_state[EVENT_ID_KEY] = event_id
    go_to(Route.EVENT)


def read_event_id() -> Optional[str]:
    """?id=... wins over the id remembered in session."""
    try:
        raw = st.query_params.get("id")
    except Exception:
        raw = None
    event_id = (raw or st.session_state.get(EVENT_ID_KEY) or "").strip()
    return event_id or None


def hide_native_sidebar_nav() -> None:
    """
    Hides Streamlit's multipage navigation without assuming exact markup
    (data-testid values change between Streamlit versions).
    """
    st.markdown(
        """
        <style>
        section[data-testid="stSidebarNav"],
        div[data-testid="stSidebarNav"],
        nav[aria-label="Main menu"],
        nav[aria-label="Sidebar navigation"],
        [data-testid="stSidebarCollapsedControl"] {
            display: none !important;
        }
        </style>
        """,
        unsafe_allow_html=True
    )


# --- Page visit lifecycle ---------------------------------------------------------
FORM_KEY_PREFIX = "form::"


def form_key(event_id: str) -> str:
    return f"{FORM_KEY_PREFIX}{event_id}"


def end_visits(keep: Optional[str] = None) -> None:
    """
    Disposes every form controller in session except `keep` and forgets its
    widget values, so the next visit to that event starts from a fresh form.
    """
    for key in [k for k in st.session_state.keys() if str(k).startswith(FORM_KEY_PREFIX)]:
        if key == keep:
            continue
        ctrl = st.session_state.pop(key)
        ctrl.dispose()
        widget_prefix = widget_key(ctrl.event.id, "")
        for wkey in [k for k in st.session_state.keys() if str(k).startswith(widget_prefix)]:
            del st.session_state[wkey]
