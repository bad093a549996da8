# utils/countdown.py
# =================================================================================
# ⏳ Countdown to the event expiry.
# - compute_countdown(): pure arithmetic between two timestamps (tested directly).
# - render_countdown(): Streamlit fragment that redraws itself every second and
#   stops polling once the event has expired. Streamlit drops the timer together
#   with the view.
# =================================================================================

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import streamlit as st

from utils.translations import t


@dataclass(frozen=True)
class Countdown:
    expired: bool
    days: int = 0
    hours: int = 0
    mins: int = 0
    secs: int = 0


def compute_countdown(expiry: datetime, now: Optional[datetime] = None) -> Countdown:
    now = now or datetime.now(timezone.utc)
    if expiry.tzinfo is None:
        expiry = expiry.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff = expiry - now
    if diff <= timedelta(0):
        return Countdown(expired=True)

    total = int(diff.total_seconds())            # floor to whole seconds
    return Countdown(
        expired=False,
        days=total // 86400,
        hours=(total // 3600) % 24,
        mins=(total // 60) % 60,
        secs=total % 60,
    )


def _countdown_html(cd: Countdown, lang: str) -> str:
    cells = [
        (cd.days, t("countdown.days", lang)),
        (cd.hours, t("countdown.hours", lang)),
        (cd.mins, t("countdown.mins", lang)),
        (cd.secs, t("countdown.secs", lang)),
    ]
    body = "".join(
        f'<div class="cd-cell"><div class="cd-value">{value:02d}</div>'
        f'<div class="cd-label">{label}</div></div>'
        for value, label in cells
    )
    return (
        f'<div class="cd-card"><div class="cd-title">{t("event.starts_in", lang)}</div>'
        f'<div class="cd-grid">{body}</div></div>'
    )


def render_countdown(expiry: datetime, lang: str) -> None:
    """Draws the countdown; refreshes every second until expiry."""
    if compute_countdown(expiry).expired:
        st.markdown(f'<div class="cd-expired">{t("event.expired_badge", lang)}</div>', unsafe_allow_html=True)
        return

    @st.fragment(run_every=1)
    def _tick() -> None:
        cd = compute_countdown(expiry)
        if cd.expired:
            st.markdown(f'<div class="cd-expired">{t("event.expired_badge", lang)}</div>', unsafe_allow_html=True)
            st.rerun()                           # full rerun drops the 1s timer
        st.markdown(_countdown_html(cd, lang), unsafe_allow_html=True)

    _tick()
