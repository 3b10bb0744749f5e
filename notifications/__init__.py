"""Notification intents emitted by calendar interactions."""

from .outbox import Outbox, outbox

__all__ = ["Outbox", "outbox"]
