# tests/unit/conftest.py

import pytest

from app.scheduling import DeferredScheduler
from fakes import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock) -> DeferredScheduler:
    return DeferredScheduler(clock=clock, sleep=clock.sleep)


@pytest.fixture
def routes() -> list:
    return []


@pytest.fixture
def navigate(routes):
    return routes.append
