# conftest.py
# -------------------------------------------------------------------------------------
# File: conftest.py (project root)
# Purpose: shared pytest setup.
#   - Unit tests (tests/unit) run offline; nothing here touches the network for them.
#   - UI tests (tests/ui, marker "ui") need the Streamlit app and the mock API up.
#     A preflight waits for the UI once per session and skips the UI tests if it
#     never answers, instead of failing the whole run.
# Environment variables (all optional):
#   ENTRY_URL="http://localhost:8501"          --> Streamlit base URL.
#   API_BASE_URL="http://127.0.0.1:9000"       --> mock API the app talks to.
#   PYTEST_PREFLIGHT_TIMEOUT="30"              --> seconds to wait for the UI.
#   PYTEST_PREFLIGHT_POLL="1.0"                --> retry interval (seconds).
#   REQUIRE_UI="0|1"                           --> if 1 and the UI is down, fail instead of skip.
# -------------------------------------------------------------------------------------

from __future__ import annotations

import os
import time
from urllib.parse import urljoin

import pytest
import requests

ENTRY_URL = os.getenv("ENTRY_URL", "http://localhost:8501")
SMOKE_PATHS = ["/", "/Not_Found"]
PREFLIGHT_TIMEOUT = int(os.getenv("PYTEST_PREFLIGHT_TIMEOUT", "30"))
PREFLIGHT_POLL = float(os.getenv("PYTEST_PREFLIGHT_POLL", "1.0"))
REQUIRE_UI = os.getenv("REQUIRE_UI", "0") == "1"


def _server_is_up(base_url: str) -> bool:
    """True if any smoke path answers below 500."""
    for path in SMOKE_PATHS:
        url = urljoin(base_url.rstrip("/") + "/", path.lstrip("/"))
        try:
            if requests.get(url, timeout=2).status_code < 500:
                return True
        except requests.exceptions.RequestException:
            continue
    return False


def _wait_for_ui(base_url: str, timeout_s: int, poll_s: float) -> bool:
    deadline = time.monotonic() + timeout_s
    ok = _server_is_up(base_url)
    while not ok and time.monotonic() < deadline:
        time.sleep(poll_s)
        ok = _server_is_up(base_url)
    return ok


def pytest_configure(config):
    config.addinivalue_line("markers", "ui: browser tests against a running Streamlit app")


@pytest.fixture(scope="session")
def entry_url() -> str:
    """Base URL of a live Streamlit app; skips (or fails with REQUIRE_UI=1) when it is down."""
    if _wait_for_ui(ENTRY_URL, PREFLIGHT_TIMEOUT, PREFLIGHT_POLL):
        return ENTRY_URL.rstrip("/")
    message = f"Streamlit UI not reachable at {ENTRY_URL}"
    if REQUIRE_UI:
        pytest.fail(message)
    pytest.skip(message)
