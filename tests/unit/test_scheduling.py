# tests/unit/test_scheduling.py

from app.scheduling import DeferredScheduler


def test_runs_in_deadline_order_after_waiting(clock, scheduler):
    fired = []
    scheduler.call_later(2.0, lambda: fired.append("late"))
    scheduler.call_later(0.5, lambda: fired.append("early"))

    assert scheduler.run_pending() == 2
    assert fired == ["early", "late"]
    assert clock.slept == [0.5, 1.5]


def test_without_wait_only_due_calls_run(clock, scheduler):
    fired = []
    scheduler.call_later(0, lambda: fired.append("now"))
    scheduler.call_later(1, lambda: fired.append("later"))

    assert scheduler.run_pending(wait=False) == 1
    assert fired == ["now"]
    assert scheduler.next_call() is not None


def test_cancelled_call_never_runs(scheduler):
    fired = []
    call = scheduler.call_later(1, lambda: fired.append("x"))
    call.cancel()
    assert scheduler.run_pending() == 0
    assert fired == []
    assert not call.pending


def test_cancel_all(scheduler):
    scheduler.call_later(1, lambda: None)
    scheduler.call_later(2, lambda: None)
    scheduler.cancel_all()
    assert scheduler.next_call() is None


def test_negative_delay_is_due_immediately():
    s = DeferredScheduler(clock=lambda: 10.0, sleep=lambda _: None)
    call = s.call_later(-5, lambda: None)
    assert call.deadline == 10.0
    assert s.run_pending(wait=False) == 1
