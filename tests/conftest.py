from __future__ import annotations

from datetime import date

import pytest

from api.services.calendar_session import CalendarSession
from api.services.calendar_store import CalendarStore
from core.settings import Settings
from directory.roster import roster
from notifications.outbox import Outbox

TODAY = date(2025, 1, 6)


@pytest.fixture
def settings() -> Settings:
    return Settings(window_days=7, seed=None, remint_on_move=False)


@pytest.fixture
def store(settings: Settings) -> CalendarStore:
    return CalendarStore(settings=settings, today=lambda: TODAY)


@pytest.fixture
def session(store: CalendarStore) -> CalendarSession:
    return CalendarSession(store, roster, Outbox())
