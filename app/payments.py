# app/payments.py
# =================================================================================
# 💳 Payment gateway seam
# ---------------------------------------------------------------------------------
# Paid events insert a payment step before the registration is submitted. There is
# no real processor behind this page yet: SimulatedPaymentGateway waits a fixed
# delay and approves. A real integration only has to implement charge().
# =================================================================================

import time
import uuid
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from app import config


@dataclass(frozen=True)
class PaymentResult:
    approved: bool                                                  # False = declined, nothing was charged.
    reference: Optional[str] = None                               # Processor transaction id.
    message: Optional[str] = None                                 # Decline reason shown to the user.


class PaymentGateway:
    def charge(self, amount: float, reference: str) -> PaymentResult:
        raise NotImplementedError


class SimulatedPaymentGateway(PaymentGateway):
    def __init__(
        self,
        delay_ms: float = config.PAYMENT_DELAY_MS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.delay_ms = delay_ms                                    # Fixed wait before approving.
        self._sleep = sleep                                         # Injectable so tests never sleep.

    def charge(self, amount: float, reference: str) -> PaymentResult:
        logger.info("[SIMULATED] charging {} for '{}'", amount, reference)
        self._sleep(self.delay_ms / 1000.0)                     # Stands in for the processor round-trip.
        return PaymentResult(approved=True, reference=f"sim-{uuid.uuid4().hex[:12]}")  # Always approves.
