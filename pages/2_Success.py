# pages/2_Success.py                                                        # Final screen after a registration went through

# =========================
# ✅ Success (final UI)
# =========================

import streamlit as st

from app.controller import Route
from utils.lang_selector import current_lang
from utils.nav import PAGES, end_visits, hide_native_sidebar_nav
from utils.translations import t
from utils.ui import apply_global_styles, render_header, render_message_card

st.set_page_config(
    page_title="Registered • Qvent",
    page_icon="🎉",
    layout="centered",
    initial_sidebar_state="collapsed",
)

apply_global_styles()
hide_native_sidebar_nav()
lang = current_lang()

end_visits()                                                                # the submitted form is done; drop it

render_header(lang)
render_message_card(t("success.title", lang), t("success.body", lang), icon="🎉")

if not st.session_state.get("celebrated"):                                  # balloons once per session
    st.session_state["celebrated"] = True
    st.balloons()

st.page_link(PAGES[Route.HOME], label=t("app.go_back", lang), icon="↩️")
