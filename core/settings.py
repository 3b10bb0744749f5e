"""Application settings and environment configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
import os
from functools import lru_cache
from typing import Optional


def _env_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Runtime configuration resolved from environment variables."""

    window_days: int = 7
    seed: Optional[int] = None
    default_time: str = "09:00 AM"
    acting_user: str = "Current User"
    remint_on_move: bool = False
    autoseed: bool = True
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        env_window = os.getenv("CALENDAR_WINDOW_DAYS")
        env_seed = os.getenv("CALENDAR_SEED")
        env_default_time = os.getenv("CALENDAR_DEFAULT_TIME")
        env_user = os.getenv("CALENDAR_ACTING_USER")
        env_remint = os.getenv("CALENDAR_REMINT_ON_MOVE")
        env_autoseed = os.getenv("CALENDAR_AUTOSEED")
        env_log_level = os.getenv("LOG_LEVEL")
        if env_window:
            self.window_days = max(1, int(env_window))
        if env_seed:
            self.seed = int(env_seed)
        if env_default_time:
            self.default_time = env_default_time.strip()
        if env_user:
            self.acting_user = env_user
        if env_remint:
            self.remint_on_move = _env_bool(env_remint)
        if env_autoseed:
            self.autoseed = _env_bool(env_autoseed)
        if env_log_level:
            self.log_level = env_log_level.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
