# utils/fields.py
# =================================================================================
# 🧩 Dynamic form fields
# ---------------------------------------------------------------------------------
# One renderer per FieldType, looked up in FIELD_RENDERERS. Every widget:
# - is keyed per event + field so values survive Streamlit reruns,
# - reports edits through on_change -> FormController.on_field_change (the
#   callback runs before the rerun, so a stale error disappears with the edit),
# - shows its own validation message underneath.
# =================================================================================

from typing import Callable, Dict

import streamlit as st

from app.controller import FormController
from app.schemas import FieldDefinition, FieldType
from utils.translations import t


def widget_key(event_id: str, field_id: str) -> str:
    return f"field::{event_id}::{field_id}"


def _label(field: FieldDefinition) -> str:
    return f"{field.label} *" if field.required else field.label


def _on_change(ctrl: FormController, field: FieldDefinition, key: str) -> Callable[[], None]:
    def _cb() -> None:
        ctrl.on_field_change(field.id, st.session_state.get(key) or "")
    return _cb


def _text_like(autocomplete: str) -> Callable[[FormController, FieldDefinition, str, bool], None]:
    def _render(ctrl: FormController, field: FieldDefinition, lang: str, disabled: bool) -> None:
        key = widget_key(ctrl.event.id, field.id)
        if key not in st.session_state:
            st.session_state[key] = ctrl.state.values.get(field.id, "")
        st.text_input(
            _label(field),
            key=key,
            placeholder=f"{field.label}...",
            autocomplete=autocomplete,
            on_change=_on_change(ctrl, field, key),
            disabled=disabled,
        )
    return _render


def _dropdown(ctrl: FormController, field: FieldDefinition, lang: str, disabled: bool) -> None:
    key = widget_key(ctrl.event.id, field.id)
    options = [""] + list(field.options)       # "" is the "Select <label>" placeholder
    if key not in st.session_state:
        current = ctrl.state.values.get(field.id, "")
        st.session_state[key] = current if current in options else ""
    placeholder = t("form.select_placeholder", lang).format(label=field.label)
    st.selectbox(
        _label(field),
        options,
        key=key,
        format_func=lambda opt: opt or placeholder,
        on_change=_on_change(ctrl, field, key),
        disabled=disabled,
    )


FIELD_RENDERERS: Dict[FieldType, Callable[[FormController, FieldDefinition, str, bool], None]] = {
    FieldType.text: _text_like("off"),
    FieldType.email: _text_like("email"),
    FieldType.tel: _text_like("tel"),
    FieldType.dropdown: _dropdown,
}


def render_field(ctrl: FormController, field: FieldDefinition, lang: str, disabled: bool = False) -> None:
    FIELD_RENDERERS[field.type](ctrl, field, lang, disabled)
    error = ctrl.state.errors.get(field.id)
    if error:
        st.markdown(f'<p class="field-error">⚠️ {error}</p>', unsafe_allow_html=True)
