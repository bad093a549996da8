# streamlit_app.py                                                           # Entrypoint of the registration app (Streamlit multipage).
# =================================================================================
# 🚀 Entry point · Qvent public registration
# Role: route the visitor. ?id=<event> → Event page; anything else → 404.
# Extras: maintenance mode card, rescue links if navigation fails.
# =================================================================================

import streamlit as st
from streamlit.errors import StreamlitAPIException

from app import config
from app.controller import Route
from utils.lang_selector import current_lang
from utils.nav import PAGES, go_to, hide_native_sidebar_nav, open_event
from utils.translations import t
from utils.ui import apply_global_styles, render_header, render_message_card

st.set_page_config(
    page_title="Qvent · Event registration",
    page_icon="🎟️",
    layout="centered",
    initial_sidebar_state="collapsed",
)

apply_global_styles()
hide_native_sidebar_nav()
lang = current_lang()

# ================================================================
# 🌙 MAINTENANCE MODE (MAINTENANCE_MODE=1)
# ================================================================
if config.MAINTENANCE:
    render_header(lang)
    render_message_card(t("app.maintenance_title", lang), t("app.maintenance_body", lang), icon="🌙")
    st.stop()

# --- Destination ---------------------------------------------------------------
try:
    event_id = (st.query_params.get("id") or "").strip()
except Exception:
    event_id = ""

try:
    if event_id:
        open_event(event_id)                                                  # /event/:id
    else:
        go_to(Route.NOT_FOUND)                                                # catch-all → /404
except StreamlitAPIException:
    st.error("Unable to redirect.")
    st.info("Make sure the page files exist in the `pages/` folder.")
    st.page_link(PAGES[Route.NOT_FOUND], label="404")
