from __future__ import annotations

import pytest

from core.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CALENDAR_WINDOW_DAYS",
        "CALENDAR_SEED",
        "CALENDAR_REMINT_ON_MOVE",
        "CALENDAR_ACTING_USER",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.window_days == 7
    assert settings.seed is None
    assert settings.default_time == "09:00 AM"
    assert settings.remint_on_move is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CALENDAR_WINDOW_DAYS", "14")
    monkeypatch.setenv("CALENDAR_SEED", "3")
    monkeypatch.setenv("CALENDAR_REMINT_ON_MOVE", "yes")
    monkeypatch.setenv("CALENDAR_ACTING_USER", "Planner")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.window_days == 14
    assert settings.seed == 3
    assert settings.remint_on_move is True
    assert settings.acting_user == "Planner"
    assert settings.log_level == "DEBUG"
