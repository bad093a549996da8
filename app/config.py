# app/config.py
# =================================================================================
# ⚙️ RUNTIME CONFIGURATION
# ---------------------------------------------------------------------------------
# Centralises everything the frontend reads from the environment (.env in local
# development, real variables in production). Modules import the constants below
# instead of calling os.getenv on their own.
# =================================================================================

import os                                                       # Environment variables.
from pathlib import Path                                        # Locates the .env file.

from dotenv import load_dotenv                                  # Loads .env into os.environ.
from loguru import logger                                       # Project-wide logger.

env_path = Path(".") / ".env"                                   # .env next to the working directory.
load_dotenv(dotenv_path=env_path)                               # Real variables win over .env (override=False).


def _env_float(name: str, default: float) -> float:
    """Reads a numeric variable; invalid values fall back to the default."""
    raw = os.getenv(name)                                       # None when unset.
    if raw is None or not raw.strip():                          # Unset or blank...
        return default                                          # ...silently uses the default.
    try:
        return float(raw)
    except ValueError:
        logger.warning("{}={!r} is not a number; using default {}", name, raw, default)
        return default


# --- Backend API ---
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000").strip().rstrip("/")  # No trailing slash.
API_TIMEOUT = _env_float("API_TIMEOUT", 12.0)                   # Seconds, GET event.
SUBMIT_TIMEOUT = _env_float("SUBMIT_TIMEOUT", 20.0)             # Seconds, POST submit.

# --- Submission flow timings ---
REDIRECT_DELAY_MS = _env_float("REDIRECT_DELAY_MS", 2000)       # Success view -> /success.
PAYMENT_DELAY_MS = _env_float("PAYMENT_DELAY_MS", 2000)         # Simulated gateway.

# --- Presentation ---
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")             # Prefix for every amount.
MAINTENANCE = os.getenv("MAINTENANCE_MODE", "0") == "1"         # "1" = show the maintenance card.
