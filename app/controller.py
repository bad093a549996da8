# app/controller.py
# =================================================================================
# 🧠 REGISTRATION FORM CONTROLLER
# ---------------------------------------------------------------------------------
# Owns the state of one page visit (values, errors, submission phase) and the
# submission lifecycle:
#   editing --submit(free)--> submitting --ok--> submitted (terminal)
#   editing --submit(paid)--> awaitingPayment --confirm--> submitting
#   awaitingPayment --cancel--> editing
#   submitting --failure--> editing (values kept for retry)
# No Streamlit imports here: pages drive it, tests drive it directly.
# =================================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

from loguru import logger

from app import config
from app.api_client import (
    AlreadySubmitted,
    EventApiClient,
    EventApiError,
    EventClosed,
    EventNotFound,
)
from app.payments import PaymentGateway, SimulatedPaymentGateway
from app.scheduling import DeferredScheduler, ScheduledCall
from app.schemas import EventDefinition
from utils.translations import t


class Route(str, Enum):
    HOME = "/"
    EVENT = "/event"
    EXPIRED = "/expired"
    SUCCESS = "/success"
    NOT_FOUND = "/404"


Navigator = Callable[[Route], None]


class SubmissionPhase(str, Enum):
    EDITING = "editing"
    AWAITING_PAYMENT = "awaitingPayment"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class OutcomeKind(str, Enum):
    IGNORED = "ignored"                      # guard rejected the call (wrong phase)
    INVALID = "invalid"                      # local validation failed, no network
    PAYMENT_REQUIRED = "payment_required"
    PAYMENT_CANCELLED = "payment_cancelled"
    PAYMENT_DECLINED = "payment_declined"
    SUBMITTED = "submitted"
    ALREADY_SUBMITTED = "already_submitted"
    CLOSED = "closed"
    FAILED = "failed"


@dataclass(frozen=True)
class SubmitOutcome:
    kind: OutcomeKind
    message: Optional[str] = None
    errors: Dict[str, str] = field(default_factory=dict)
    amount: Optional[float] = None


@dataclass
class FormState:
    values: Dict[str, str] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)
    phase: SubmissionPhase = SubmissionPhase.EDITING
    payment_processing: bool = False
    message: Optional[str] = None


# =================================================================================
# ✅ Validation
# =================================================================================
def validate(event: EventDefinition, values: Dict[str, str], lang: Optional[str] = None) -> Dict[str, str]:
    """
    Returns field id -> "<label> is required" for every required field whose value
    is missing, empty or whitespace only. An empty dict means the form is valid.
    The result replaces the previous error mapping as a whole.
    """
    errors: Dict[str, str] = {}
    for f in event.fields:
        if not f.required:
            continue
        if not (values.get(f.id) or "").strip():
            errors[f.id] = t("form.required", lang).format(label=f.label)
    return errors


# =================================================================================
# 📥 Event loading (GET /public/event/{id})
# =================================================================================
@dataclass(frozen=True)
class EventLoad:
    event: Optional[EventDefinition] = None
    error: Optional[str] = None              # inline message for the "Event Closed" card
    redirected: bool = False                 # navigation already happened


def load_event(
    client: EventApiClient,
    navigate: Navigator,
    event_id: Optional[str],
    lang: Optional[str] = None,
) -> EventLoad:
    if not (event_id or "").strip():
        navigate(Route.NOT_FOUND)
        return EventLoad(redirected=True)
    try:
        return EventLoad(event=client.fetch_event(event_id.strip()))
    except EventNotFound:
        logger.info("Event '{}' not found; leaving for the 404 view", event_id)
        navigate(Route.NOT_FOUND)
        return EventLoad(redirected=True)
    except EventClosed:
        return EventLoad(error=t("event.closed_or_expired", lang))
    except EventApiError as e:
        logger.warning("Event '{}' could not be loaded: {}", event_id, e)
        return EventLoad(error=t("event.load_failed", lang))


# =================================================================================
# 🎛️ Controller
# =================================================================================
class FormController:
    def __init__(
        self,
        event: EventDefinition,
        client: EventApiClient,
        navigate: Navigator,
        scheduler: Optional[DeferredScheduler] = None,
        gateway: Optional[PaymentGateway] = None,
        redirect_delay_ms: float = config.REDIRECT_DELAY_MS,
        lang: Optional[str] = None,
        state: Optional[FormState] = None,
    ):
        self.event = event
        self.client = client
        self.navigate = navigate
        self.scheduler = scheduler or DeferredScheduler()
        self.gateway = gateway or SimulatedPaymentGateway()
        self.redirect_delay_ms = redirect_delay_ms
        self.lang = lang
        self.state = state or FormState()
        self._redirect: Optional[ScheduledCall] = None
        self._charging = False                                   # True only inside gateway.charge()

    @property
    def phase(self) -> SubmissionPhase:
        return self.state.phase

    @property
    def can_submit(self) -> bool:
        return self.state.phase == SubmissionPhase.EDITING

    def _set_phase(self, phase: SubmissionPhase) -> None:
        logger.debug("event '{}': {} -> {}", self.event.id, self.state.phase.value, phase.value)
        self.state.phase = phase

    # --- Field edits ---
    def on_field_change(self, field_id: str, value: str) -> None:
        if self.state.phase == SubmissionPhase.SUBMITTED:
            return
        self.state.values[field_id] = value                      # Stores the latest value.
        if self.state.errors.get(field_id):
            del self.state.errors[field_id]                      # Only this field's error goes away.

    # --- Submission ---
    def submit(self) -> SubmitOutcome:
        if not self.can_submit:
            return SubmitOutcome(OutcomeKind.IGNORED)

        self.state.message = None                                  # A new attempt clears the last banner.
        errors = validate(self.event, self.state.values, self.lang)  # Local check, no network.
        self.state.errors = errors                                 # Replaces the whole mapping.
        if errors:
            return SubmitOutcome(OutcomeKind.INVALID, errors=dict(errors))

        if self.event.is_paid:
            self._set_phase(SubmissionPhase.AWAITING_PAYMENT)   # Paid: payment step first.
            return SubmitOutcome(OutcomeKind.PAYMENT_REQUIRED, amount=self.event.amount)

        return self.finalize_submission()

    def cancel_payment(self) -> SubmitOutcome:
        if self.state.phase != SubmissionPhase.AWAITING_PAYMENT or self.state.payment_processing:
            return SubmitOutcome(OutcomeKind.IGNORED)
        self._set_phase(SubmissionPhase.EDITING)
        return SubmitOutcome(OutcomeKind.PAYMENT_CANCELLED)

    def request_payment(self) -> bool:
        """
        Marks the payment as in flight without charging yet. The page draws its
        busy state (buttons disabled) on the next run, then calls confirm_payment().
        """
        if self.state.phase != SubmissionPhase.AWAITING_PAYMENT or self.state.payment_processing:
            return False
        self.state.payment_processing = True
        return True

    def confirm_payment(self) -> SubmitOutcome:
        if self.state.phase != SubmissionPhase.AWAITING_PAYMENT or self._charging:
            return SubmitOutcome(OutcomeKind.IGNORED)

        self.state.payment_processing = True                     # already set when request_payment() ran
        self._charging = True
        try:
            result = self.gateway.charge(self.event.amount or 0, self.event.id)
        finally:
            self._charging = False
            self.state.payment_processing = False

        if not result.approved:
            message = result.message or t("payment.declined", self.lang)
            self.state.message = message
            logger.warning("Payment declined for event '{}': {}", self.event.id, message)
            return SubmitOutcome(OutcomeKind.PAYMENT_DECLINED, message=message, amount=self.event.amount)

        logger.info("Payment {} approved for event '{}'", result.reference, self.event.id)
        return self.finalize_submission()

    def finalize_submission(self) -> SubmitOutcome:
        if self.state.phase not in (SubmissionPhase.EDITING, SubmissionPhase.AWAITING_PAYMENT):
            return SubmitOutcome(OutcomeKind.IGNORED)

        self._set_phase(SubmissionPhase.SUBMITTING)              # Blocks further submits.
        try:
            self.client.submit(self.event.id, dict(self.state.values))  # POST .../submit.
        except AlreadySubmitted:
            return self._fail(OutcomeKind.ALREADY_SUBMITTED, t("submit.already_submitted", self.lang))
        except EventClosed:
            return self._fail(OutcomeKind.CLOSED, t("submit.closed", self.lang))
        except EventApiError as e:
            return self._fail(OutcomeKind.FAILED, e.message or t("submit.failed", self.lang))

        self._set_phase(SubmissionPhase.SUBMITTED)
        self.state.message = None
        self._redirect = self.scheduler.call_later(
            self.redirect_delay_ms / 1000.0, lambda: self.navigate(Route.SUCCESS)
        )
        return SubmitOutcome(OutcomeKind.SUBMITTED)

    def _fail(self, kind: OutcomeKind, message: str) -> SubmitOutcome:
        logger.warning("Submission for event '{}' failed ({}): {}", self.event.id, kind.value, message)
        self._set_phase(SubmissionPhase.EDITING)
        self.state.message = message
        return SubmitOutcome(kind, message=message)

    # --- Teardown ---
    def dispose(self) -> None:
        """The view is going away: a pending redirect must not fire."""
        if self._redirect is not None:
            self._redirect.cancel()
            self._redirect = None
