# tests/unit/fakes.py
# Offline doubles for the controller tests: no HTTP, no sleeping.

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from app.api_client import EventApiError
from app.payments import PaymentResult
from app.schemas import EventDefinition


def make_event(category: str = "free", amount: Optional[float] = None, **overrides) -> EventDefinition:
    payload = {
        "id": "evt-1",
        "name": "Python Meetup",
        "description": "# Hello",
        "category": category,
        "expiryDate": (datetime.now(timezone.utc) + timedelta(days=2)).isoformat(),
        "contactName": "Asha",
        "contactPhone": "+91 98765 43210",
        "fields": [
            {"id": "name", "label": "Full Name", "type": "text", "required": True},
            {"id": "email", "label": "Email", "type": "email", "required": True},
            {"id": "phone", "label": "Mobile", "type": "mobile", "required": False},
            {"id": "size", "label": "Size", "type": "dropdown", "required": True, "options": ["S", "M"]},
        ],
    }
    if amount is not None:
        payload["amount"] = amount
    payload.update(overrides)
    return EventDefinition.model_validate(payload)


class FakeClient:
    """Records calls; raises `error` on submit when set. `on_submit` runs mid-request."""

    def __init__(self, event: Optional[EventDefinition] = None, fetch_error: Optional[Exception] = None):
        self.event = event
        self.fetch_error = fetch_error
        self.submit_error: Optional[EventApiError] = None
        self.on_submit = None
        self.fetched: List[str] = []
        self.submitted: List[Dict[str, str]] = []

    def fetch_event(self, event_id: str) -> EventDefinition:
        self.fetched.append(event_id)
        if self.fetch_error:
            raise self.fetch_error
        return self.event

    def submit(self, event_id: str, values: Dict[str, str]) -> None:
        self.submitted.append(dict(values))
        if self.on_submit:
            self.on_submit()
        if self.submit_error:
            raise self.submit_error


class FakeGateway:
    def __init__(self, approved: bool = True, message: Optional[str] = None):
        self.approved = approved
        self.message = message
        self.charges: List[float] = []
        self.on_charge = None                                    # runs while the charge is in flight

    def charge(self, amount: float, reference: str) -> PaymentResult:
        self.charges.append(amount)
        if self.on_charge:
            self.on_charge()
        return PaymentResult(approved=self.approved, reference="test-ref", message=self.message)


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.slept: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.slept.append(seconds)
        self.now += seconds




# --- HTTP doubles for the real EventApiClient ---
class FakeResponse:
    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("no json body")
        return self._body


class ScriptedSession:
    """Answers every request with the next scripted response (or raises it)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def _next(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def get(self, url, **kwargs):
        return self._next("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._next("POST", url, **kwargs)
