# app/api_client.py
# =================================================================================
# 🌐 PUBLIC EVENT API CLIENT
# ---------------------------------------------------------------------------------
# Thin requests wrapper over the two public endpoints the registration page uses:
#   GET  {base}/public/event/{id}          -> EventDefinition
#   POST {base}/public/event/{id}/submit   -> (no body required)
# Every failure is raised as an EventApiError subclass so callers only branch on
# types, never on raw status codes.
# =================================================================================

from typing import Dict, Optional

import requests
from loguru import logger
from pydantic import ValidationError

from app import config
from app.schemas import EventDefinition


# =================================================================================
# ⚠️ Error taxonomy
# =================================================================================
class EventApiError(Exception):
    """
    Base error for the public API. Carries the HTTP status and the server message.
    `message` only ever holds text the backend sent, so it is safe to show; it is
    empty for network failures and unreadable payloads.
    """

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message or (f"HTTP {status_code}" if status_code else "request failed"))
        self.message = message
        self.status_code = status_code


class EventNotFound(EventApiError):
    """404: the event id does not exist."""


class EventClosed(EventApiError):
    """403/410: the event is closed or expired."""


class AlreadySubmitted(EventApiError):
    """409: this visitor already registered."""


class EventRequestFailed(EventApiError):
    """Anything else: other non-2xx, network failure or an unreadable payload."""


_CLOSED_STATUSES = (403, 410)


def _server_message(resp: requests.Response) -> str:
    # The backend answers {"message": ...}; FastAPI-style {"detail": ...} is accepted too.
    try:
        body = resp.json() or {}
    except ValueError:
        return ""
    if not isinstance(body, dict):
        return ""
    msg = body.get("message") or body.get("detail")
    return msg if isinstance(msg, str) else ""


def _raise_for(resp: requests.Response) -> None:
    status = resp.status_code                                         # HTTP status of the answer.
    if 200 <= status < 300:
        return
    message = _server_message(resp)                                 # "" when the body has none.
    if status == 404:
        raise EventNotFound(message, status)
    if status in _CLOSED_STATUSES:
        raise EventClosed(message, status)
    if status == 409:
        raise AlreadySubmitted(message, status)
    raise EventRequestFailed(message, status)


# =================================================================================
# 🔌 Client
# =================================================================================
class EventApiClient:
    def __init__(
        self,
        base_url: str = config.API_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = config.API_TIMEOUT,
        submit_timeout: float = config.SUBMIT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")                      # "/public/..." is appended below.
        self.session = session or requests.Session()               # Pooled connections; tests pass a double.
        self.timeout = timeout
        self.submit_timeout = submit_timeout

    def _event_url(self, event_id: str) -> str:
        return f"{self.base_url}/public/event/{event_id}"

    def fetch_event(self, event_id: str) -> EventDefinition:
        """Loads one event definition. Raises an EventApiError subclass on any failure."""
        url = self._event_url(event_id)
        try:
            resp = self.session.get(url, timeout=self.timeout)        # GET /public/event/{id}.
        except requests.exceptions.RequestException as e:
            logger.warning("GET {} failed: {}", url, e)
            raise EventRequestFailed() from e                                    # Transport detail stays in the log.

        logger.info("GET {} -> {}", url, resp.status_code)
        _raise_for(resp)                                             # Non-2xx -> typed error.

        try:
            return EventDefinition.model_validate(resp.json())       # camelCase JSON -> model.
        except (ValueError, ValidationError) as e:
            logger.error("Malformed event payload for '{}': {}", event_id, e)
            raise EventRequestFailed("", resp.status_code) from e

    def submit(self, event_id: str, values: Dict[str, str]) -> None:
        """Posts the full values map as a JSON object. Success needs no response body."""
        url = f"{self._event_url(event_id)}/submit"
        try:
            resp = self.session.post(url, json=dict(values), timeout=self.submit_timeout)  # Full values map.
        except requests.exceptions.RequestException as e:
            logger.warning("POST {} failed: {}", url, e)
            raise EventRequestFailed() from e                                    # No response body: the caller shows its fallback.

        logger.info("POST {} -> {}", url, resp.status_code)
        _raise_for(resp)                                             # Non-2xx -> typed error.
