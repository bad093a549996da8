# pages/4_Not_Found.py

# =========================
# 🔎 404 · Not found
# =========================

import streamlit as st

from utils.lang_selector import current_lang
from utils.nav import end_visits, hide_native_sidebar_nav
from utils.translations import t
from utils.ui import apply_global_styles, render_header, render_message_card

st.set_page_config(
    page_title="Not found • Qvent",
    page_icon="🔎",
    layout="centered",
    initial_sidebar_state="collapsed",
)

apply_global_styles()
hide_native_sidebar_nav()
lang = current_lang()
end_visits()

render_header(lang)
render_message_card(t("notfound.title", lang), t("notfound.body", lang), icon="🔎")
