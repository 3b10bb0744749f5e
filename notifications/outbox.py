"""Notification-intent outbox.

Intents are recorded and logged only; delivery (push, email, badges) is left
to whatever consumes the outbox.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List

from api.models.schemas import Employee, NotificationIntent

logger = logging.getLogger(__name__)


class Outbox:
    """In-memory list of notification intents in emission order."""

    def __init__(self) -> None:
        self._intents: List[NotificationIntent] = []

    def task_assigned(self, assignee: Employee, item_title: str) -> List[NotificationIntent]:
        """Record the assignee and admin intents for a newly assigned task."""

        now = datetime.now(timezone.utc)
        intents = [
            NotificationIntent(
                assignee_id=assignee.id,
                assignee_name=assignee.name,
                item_title=item_title,
                audience="assignee",
                message=f'New task "{item_title}" assigned',
                created_at=now,
            ),
            NotificationIntent(
                assignee_id=assignee.id,
                assignee_name=assignee.name,
                item_title=item_title,
                audience="admin",
                message=f'Task "{item_title}" created and assigned to {assignee.name}',
                created_at=now,
            ),
        ]
        for intent in intents:
            self._intents.append(intent)
            logger.info("Notification queued for %s (%s): %s", intent.assignee_name, intent.audience, intent.message)
        return intents

    def all(self) -> List[NotificationIntent]:
        return list(self._intents)

    def clear(self) -> None:
        self._intents.clear()


outbox = Outbox()
"""Module level instance shared by the API routes."""
