# pages/1_Event.py
# =================================================================================
# 🎟️ Event page: details + dynamic registration form (+ payment step if paid)
# ---------------------------------------------------------------------------------
# All state lives in a FormController kept in st.session_state for this visit.
# The page only draws what the controller says and forwards clicks/edits to it.
# =================================================================================

import html

import streamlit as st

from app import config
from app.api_client import EventApiClient
from app.controller import FormController, Route, SubmissionPhase, load_event
from app.schemas import EventDefinition, LocationType
from utils.countdown import render_countdown
from utils.fields import render_field, widget_key
from utils.lang_selector import render_lang_selector
from utils.markdown import render_markdown
from utils.nav import end_visits, form_key, go_to, hide_native_sidebar_nav, read_event_id
from utils.translations import t
from utils.ui import apply_global_styles, format_amount, render_header, render_message_card

# --- Page setup ---
st.set_page_config(
    page_title="Register • Qvent",
    page_icon="🎟️",
    layout="wide",
    initial_sidebar_state="collapsed",
)

apply_global_styles()
hide_native_sidebar_nav()
lang = render_lang_selector()
render_header(lang)


# =================================================================================
# 🛠️ Helpers
# =================================================================================
@st.cache_resource(show_spinner=False)
def get_client() -> EventApiClient:
    # One requests.Session per server process (connection pooling).
    return EventApiClient(config.API_BASE_URL)


def _sync_widgets(ctrl: FormController) -> None:
    # Values typed right before a click may not have fired on_change yet.
    for f in ctrl.event.fields:
        value = st.session_state.get(widget_key(ctrl.event.id, f.id))
        if value is not None and value != ctrl.state.values.get(f.id):
            ctrl.on_field_change(f.id, value)


def _render_summary(event: EventDefinition) -> None:
    st.markdown(f"## {html.escape(event.name)}")
    if event.is_paid:
        badge = f'<span class="q-badge paid">💰 {format_amount(event.amount)}</span>'
    else:
        badge = f'<span class="q-badge free">{t("event.free_badge", lang)}</span>'
    day = event.expiry_date
    st.markdown(f'{badge}<span class="q-date">📅 {day.day} {day:%b}</span>', unsafe_allow_html=True)


def _render_details(event: EventDefinition) -> None:
    render_countdown(event.expiry_date, lang)

    if event.description:
        with st.expander(f"📝 {t('event.about', lang)}"):
            st.markdown(render_markdown(event.description), unsafe_allow_html=True)

    with st.expander(f"☎️ {t('event.contact', lang)}"):
        name = html.escape(event.contact_name or "")
        phone = html.escape(event.contact_phone or "")
        st.markdown(f'{name} · <a href="tel:{phone}">{phone}</a>', unsafe_allow_html=True)

    if event.location:
        with st.expander(f"📍 {t('event.location', lang)}"):
            if event.location_type == LocationType.url:
                st.link_button(t("event.view_maps", lang), event.location)
            else:
                st.write(event.location)


def _render_payment(ctrl: FormController) -> None:
    with st.container(border=True):
        st.markdown(f"### {t('payment.title', lang)}")
        st.caption(t("payment.subtitle", lang))
        st.metric(t("payment.amount_due", lang), format_amount(ctrl.event.amount))
        busy = ctrl.state.payment_processing
        st.radio(
            t("payment.method", lang),
            [t("payment.card", lang), t("payment.upi", lang), t("payment.netbanking", lang)],
            key=f"paymethod::{ctrl.event.id}",
            disabled=busy,
        )
        if ctrl.state.message:
            st.error(ctrl.state.message)

        c1, c2 = st.columns(2)
        with c1:
            if st.button(t("payment.cancel", lang), disabled=busy, use_container_width=True):
                ctrl.cancel_payment()
                st.rerun()
        with c2:
            if st.button(t("payment.pay_now", lang), type="primary", disabled=busy, use_container_width=True):
                if ctrl.request_payment():
                    st.rerun()                                  # next run draws both buttons disabled
        if busy:                                                # charge after the disabled buttons are on screen
            with st.spinner(t("payment.processing", lang)):
                ctrl.confirm_payment()
            st.rerun()
        st.markdown(f'<p class="q-note">{t("payment.secure_note", lang)}</p>', unsafe_allow_html=True)


def _render_form(ctrl: FormController) -> None:
    st.markdown(f"### {t('form.title', lang)}")
    editable = ctrl.can_submit
    for f in ctrl.event.fields:
        render_field(ctrl, f, lang, disabled=not editable)

    if ctrl.state.message and ctrl.phase == SubmissionPhase.EDITING:
        st.error(ctrl.state.message)

    label = t("form.submit", lang) if editable else t("form.submitting", lang)
    if st.button(label, type="primary", disabled=not editable, use_container_width=True):
        _sync_widgets(ctrl)
        with st.spinner(t("form.submitting", lang)):
            ctrl.submit()
        st.rerun()
    st.markdown(f'<p class="q-note">{t("form.secure_note", lang)}</p>', unsafe_allow_html=True)


# =================================================================================
# 🔄 Load the event (once per visit)
# =================================================================================
event_id = read_event_id()
if not event_id:
    go_to(Route.NOT_FOUND)

key = form_key(event_id)
end_visits(keep=key)                                            # leaving another event disposes its form

ctrl: FormController | None = st.session_state.get(key)
if ctrl is None:
    with st.spinner(t("app.loading", lang)):
        loaded = load_event(get_client(), go_to, event_id, lang)
    if loaded.error:
        render_message_card(t("event.closed_title", lang), loaded.error)
        if st.button(t("app.go_back", lang), type="primary", use_container_width=True):
            go_to(Route.HOME)
        st.stop()
    ctrl = FormController(loaded.event, get_client(), go_to, lang=lang)
    st.session_state[key] = ctrl

ctrl.lang = lang

# =================================================================================
# 🖼️ Render
# =================================================================================
if ctrl.phase == SubmissionPhase.SUBMITTED:
    render_message_card(t("form.success_title", lang), t("form.success_body", lang), icon="✅")
    ctrl.scheduler.run_pending()                                # waits the redirect delay, then /success
    st.stop()

_render_summary(ctrl.event)
left, right = st.columns([1, 2], gap="medium")
with left:
    _render_details(ctrl.event)
with right:
    if ctrl.phase == SubmissionPhase.AWAITING_PAYMENT:
        _render_payment(ctrl)
    else:
        _render_form(ctrl)
