# scripts/mock_event_api.py  # Local stand-in for the public event API (dev + UI tests).

# =================================================================================
# 🧪 Mock public event API
# ---------------------------------------------------------------------------------
#   GET  /public/event/{id}         → event JSON | 404 | 410 (closed/expired)
#   POST /public/event/{id}/submit  → 201 | 400 (missing field) | 404 | 409 (dup) | 410
# Sample ids: free-meetup, paid-workshop, closed-event, expired-event.
# Run: python scripts/mock_event_api.py  (then API_BASE_URL=http://127.0.0.1:9000)
# =================================================================================

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Set

import uvicorn
from fastapi import FastAPI, status
from fastapi.responses import JSONResponse
from loguru import logger

app = FastAPI(title="Mock Public Event API", version="1.0.0")


def _sample_events() -> Dict[str, Dict[str, Any]]:
    now = datetime.now(timezone.utc)
    return {
        "free-meetup": {
            "id": "free-meetup",
            "name": "Community Python Meetup",
            "description": "# Welcome\nJoin us for **talks** and *snacks*.\n- Lightning talks\n- Networking",
            "category": "free",
            "expiryDate": (now + timedelta(days=3, hours=4)).isoformat(),
            "contactName": "Asha Rao",
            "contactPhone": "+91 98765 43210",
            "location": "Hall B, Tech Park, Bengaluru",
            "locationType": "address",
            "fields": [
                {"id": "name", "label": "Full Name", "type": "text", "required": True},
                {"id": "email", "label": "Email", "type": "email", "required": True},
                {"id": "phone", "label": "Mobile", "type": "mobile", "required": False},
                {"id": "tshirt", "label": "T-shirt size", "type": "dropdown", "required": False,
                 "options": ["S", "M", "L", "XL"]},
            ],
        },
        "paid-workshop": {
            "id": "paid-workshop",
            "name": "Data Engineering Workshop",
            "description": "## Hands-on\nBring a laptop.",
            "category": "paid",
            "amount": 499,
            "expiryDate": (now + timedelta(days=10)).isoformat(),
            "contactName": "Vikram Shah",
            "contactPhone": "+91 91234 56789",
            "location": "https://maps.example.com/?q=workshop",
            "locationType": "url",
            "fields": [
                {"id": "name", "label": "Full Name", "type": "text", "required": True},
                {"id": "email", "label": "Email", "type": "email", "required": True},
                {"id": "level", "label": "Experience", "type": "dropdown", "required": True,
                 "options": ["Beginner", "Intermediate", "Advanced"]},
            ],
        },
        "closed-event": {
            "id": "closed-event",
            "name": "Closed Gala",
            "category": "free",
            "expiryDate": (now + timedelta(days=1)).isoformat(),
            "closed": True,
            "fields": [],
        },
        "expired-event": {
            "id": "expired-event",
            "name": "Last Year's Summit",
            "category": "free",
            "expiryDate": (now - timedelta(days=1)).isoformat(),
            "fields": [],
        },
    }


EVENTS: Dict[str, Dict[str, Any]] = _sample_events()
SUBMISSIONS: Dict[str, List[Dict[str, str]]] = {}
_FINGERPRINTS: Dict[str, Set[str]] = {}


def reset() -> None:
    """Restores the sample data and forgets every submission."""
    EVENTS.clear()
    EVENTS.update(_sample_events())
    SUBMISSIONS.clear()
    _FINGERPRINTS.clear()


def _error(code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=code, content={"message": message})


def _is_closed(event: Dict[str, Any]) -> bool:
    if event.get("closed"):
        return True
    return datetime.fromisoformat(event["expiryDate"]) <= datetime.now(timezone.utc)


def _fingerprint(event: Dict[str, Any], values: Dict[str, str]) -> str:
    # One registration per email when the form asks for one; otherwise per exact answers.
    for f in event["fields"]:
        if f["type"] == "email" and values.get(f["id"]):
            return values[f["id"]].strip().lower()
    return repr(sorted(values.items()))


@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/public/event/{event_id}")
async def get_event(event_id: str):
    event = EVENTS.get(event_id)
    if event is None:
        logger.info("[MOCK] GET {} → 404", event_id)
        return _error(status.HTTP_404_NOT_FOUND, "Event not found")
    if _is_closed(event):
        logger.info("[MOCK] GET {} → 410", event_id)
        return _error(status.HTTP_410_GONE, "This event is closed")
    return {k: v for k, v in event.items() if k != "closed"}


@app.post("/public/event/{event_id}/submit")
async def submit(event_id: str, values: Dict[str, str]):
    event = EVENTS.get(event_id)
    if event is None:
        return _error(status.HTTP_404_NOT_FOUND, "Event not found")
    if _is_closed(event):
        return _error(status.HTTP_410_GONE, "This event is closed")

    missing = [f["label"] for f in event["fields"] if f.get("required") and not (values.get(f["id"]) or "").strip()]
    if missing:
        return _error(status.HTTP_400_BAD_REQUEST, f"Missing required fields: {', '.join(missing)}")

    fp = _fingerprint(event, values)
    seen = _FINGERPRINTS.setdefault(event_id, set())
    if fp in seen:
        logger.warning("[MOCK] duplicate submission for {}", event_id)
        return _error(status.HTTP_409_CONFLICT, "Already submitted")

    seen.add(fp)
    SUBMISSIONS.setdefault(event_id, []).append(dict(values))
    logger.info("[MOCK] POST {} → 201 ({} total)", event_id, len(SUBMISSIONS[event_id]))
    return JSONResponse(status_code=status.HTTP_201_CREATED, content={"ok": True})


if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=9000, reload=False, log_level="info")
