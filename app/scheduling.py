# app/scheduling.py
# =================================================================================
# ⏲️ One-shot deferred callbacks
# ---------------------------------------------------------------------------------
# Streamlit only allows navigation from the script thread, so the post-submission
# redirect cannot live on a background timer. The controller registers it here and
# the page runs it after drawing the success view. Cancelling (view torn down)
# drops it without running.
# =================================================================================

import time
from typing import Callable, List, Optional


class ScheduledCall:
    def __init__(self, deadline: float, callback: Callable[[], None]):
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False
        self.done = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.done)


class DeferredScheduler:
    """Holds callbacks until run_pending() is called from the owning thread."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._clock = clock
        self._sleep = sleep
        self._calls: List[ScheduledCall] = []

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(self._clock() + max(0.0, delay_s), callback)
        self._calls.append(call)
        return call

    def next_call(self) -> Optional[ScheduledCall]:
        pending = [c for c in self._calls if c.pending]
        return min(pending, key=lambda c: c.deadline) if pending else None

    def run_pending(self, wait: bool = True) -> int:
        """
        Runs due callbacks in deadline order. With wait=True it sleeps until each
        deadline instead of skipping calls that are not due yet. Returns how many ran.
        """
        ran = 0
        while True:
            call = self.next_call()
            if call is None:
                break
            remaining = call.deadline - self._clock()
            if remaining > 0:
                if not wait:
                    break
                self._sleep(remaining)
                if not call.pending:                             # cancelled while waiting
                    continue
            call.done = True
            call.callback()
            ran += 1
        self._calls = [c for c in self._calls if c.pending]
        return ran

    def cancel_all(self) -> None:
        for call in self._calls:
            call.cancel()
        self._calls.clear()
