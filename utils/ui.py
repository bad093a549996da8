# utils/ui.py
# =============================================================================
# Shared UI utilities (visual presentation only, no business logic)
# - Global styles (background, typography, buttons, countdown, markdown, errors)
# - Brand header
# - Centered message card used by the result pages and the "Event Closed" view
# =============================================================================

import html

import streamlit as st

from app import config
from utils.translations import t


# ─────────────────────────────────────────────────────────────
# 1) Global styles
# ─────────────────────────────────────────────────────────────
def apply_global_styles() -> None:
    """
    Injects the global CSS:
    - Neutral background, Inter typography and colour tokens.
    - Primary (gradient) and outline buttons.
    - Hides Streamlit's native header/sidebar for a clean canvas.
    - Countdown card, markdown blocks and field error messages.
    """
    st.markdown(
        """
        <style>
          @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;600;700&display=swap');
          :root{
            --primary:#4F46E5; --primary-2:#9333EA; --text:#111827; --muted:#4B5563;
            --danger:#DC2626; --shadow:0 10px 35px rgba(0,0,0,.08); --radius:12px;
          }

          /* ===== Canvas ===== */
          .stApp{ background:linear-gradient(135deg,#F9FAFB 0%,#F3F4F6 100%); }
          [data-testid="stHeader"]{ display:none; }
          [data-testid="stSidebar"]{ display:none !important; }
          html, body, [class*="block-container"]{ font-family:'Inter', sans-serif; color:var(--text); }

          /* ===== Buttons ===== */
          .stButton > button:not([kind="primary"]){
            background:#FFFFFF !important; color:#374151 !important;
            border:2px solid #D1D5DB !important; border-radius:8px !important; font-weight:600 !important;
          }
          .stButton > button[kind="primary"],
          button[data-testid="baseButton-primary"]{
            background:linear-gradient(90deg,var(--primary),var(--primary-2)) !important;
            color:#FFFFFF !important; border:none !important; border-radius:8px !important;
            font-weight:700 !important; box-shadow:0 4px 12px rgba(79,70,229,.25) !important;
          }
          .stButton > button:disabled{ opacity:.5 !important; }

          /* ===== Header ===== */
          .q-header{ display:flex; align-items:center; gap:.5rem; margin-bottom:1rem; }
          .q-logo{
            width:2rem; height:2rem; border-radius:.5rem; color:#FFF; font-weight:700;
            display:flex; align-items:center; justify-content:center;
            background:linear-gradient(135deg,var(--primary),var(--primary-2));
          }
          .q-brand{ font-size:1.25rem; font-weight:700; }

          /* ===== Event badges ===== */
          .q-badge{ display:inline-block; padding:.1rem .6rem; border-radius:999px; font-size:.75rem; font-weight:700; }
          .q-badge.free{ background:#DCFCE7; color:#15803D; }
          .q-badge.paid{ background:#E0E7FF; color:#4338CA; }
          .q-date{ color:var(--muted); font-size:.8rem; margin-left:.4rem; }

          /* ===== Countdown ===== */
          .cd-card{
            background:linear-gradient(135deg,var(--primary),var(--primary-2)); color:#FFF;
            border-radius:var(--radius); padding:1rem; box-shadow:var(--shadow);
          }
          .cd-title{ font-size:.7rem; font-weight:600; opacity:.8; margin-bottom:.5rem; }
          .cd-grid{ display:grid; grid-template-columns:repeat(4,1fr); gap:.4rem; }
          .cd-cell{ background:rgba(255,255,255,.2); border-radius:.4rem; padding:.4rem; text-align:center; }
          .cd-value{ font-weight:700; }
          .cd-label{ font-size:.7rem; opacity:.85; }
          .cd-expired{
            text-align:center; padding:.5rem; border-radius:.4rem; font-weight:700; font-size:.8rem;
            background:#FEE2E2; border:1px solid #FCA5A5; color:#B91C1C;
          }

          /* ===== Markdown + form ===== */
          .md-h2{ font-size:1.2rem; font-weight:700; margin:.8rem 0 .4rem; }
          .md-h3{ font-size:1.05rem; font-weight:700; margin:.6rem 0 .4rem; }
          .md-h4{ font-size:1rem; font-weight:700; margin:.4rem 0 .2rem; }
          .md-p{ margin-bottom:.5rem; }
          .field-error{ color:var(--danger); font-size:.8rem; font-weight:500; margin:-.5rem 0 .5rem; }
          .q-note{ color:#6B7280; font-size:.75rem; text-align:center; }

          /* ===== Message card ===== */
          .q-card{
            background:#FFF; border-radius:1rem; box-shadow:var(--shadow);
            padding:2rem; max-width:28rem; margin:8vh auto 1rem; text-align:center;
          }
          .q-card h2{ margin:.2rem 0 .6rem; }
          .q-card p{ color:var(--muted); }
        </style>
        """,
        unsafe_allow_html=True,
    )


# ─────────────────────────────────────────────────────────────
# 2) Brand header
# ─────────────────────────────────────────────────────────────
def render_header(lang: str) -> None:
    st.markdown(
        f'<div class="q-header"><div class="q-logo">Q</div>'
        f'<div class="q-brand">{t("app.brand", lang)}</div></div>',
        unsafe_allow_html=True,
    )


# ─────────────────────────────────────────────────────────────
# 3) Centered message card
# ─────────────────────────────────────────────────────────────
def render_message_card(title: str, body: str, icon: str = "") -> None:
    icon_html = f'<div style="font-size:2.5rem">{icon}</div>' if icon else ""
    st.markdown(
        f'<div class="q-card">{icon_html}<h2>{html.escape(title)}</h2><p>{html.escape(body)}</p></div>',
        unsafe_allow_html=True,
    )


def format_amount(amount: float | None) -> str:
    """₹499 / ₹499.50: no trailing .0 for whole amounts."""
    value = amount or 0
    text = f"{value:,.0f}" if float(value).is_integer() else f"{value:,.2f}"
    return f"{config.CURRENCY_SYMBOL}{text}"
