# utils/lang_selector.py
# =================================================================================
# 🌍 Language selector (compact, top-right).
# ---------------------------------------------------------------------------------
# - Active language: session first, then ?lang=..., then the default.
# - Picking a language stores it in session + URL and reruns the page.
# =================================================================================

from typing import Dict, Optional

import streamlit as st

from utils.translations import DEFAULT_LANG, VALID_LANGS, normalize_lang

SHORT: Dict[str, str] = {"en": "EN", "es": "ES"}


def _read_query_lang() -> Optional[str]:
    """Reads ?lang=... from the URL safely."""
    try:
        return st.query_params.get("lang")
    except Exception:
        return None


def current_lang(session_key: str = "lang") -> str:
    lang = normalize_lang(st.session_state.get(session_key) or _read_query_lang() or DEFAULT_LANG)
    st.session_state[session_key] = lang
    return lang


def render_lang_selector(session_key: str = "lang") -> str:
    """Draws the language buttons and returns the active language code."""
    current = current_lang(session_key)

    _, *cols = st.columns([8] + [1] * len(VALID_LANGS))
    selected = None
    for col, code in zip(cols, VALID_LANGS):
        with col:
            if st.button(SHORT.get(code, code.upper()), key=f"lang_{code}", disabled=(code == current)):
                selected = code

    if selected and selected != current:
        st.session_state[session_key] = selected
        st.query_params["lang"] = selected
        st.rerun()

    return st.session_state[session_key]
