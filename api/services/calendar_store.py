"""In-memory calendar store.

Holds the day-key to items mapping behind a small set of mutators so the
active/completed/cancelled partitions stay consistent. Nothing is persisted;
a version counter lets callers make a mutation conditional on the state they
last read.
"""

from __future__ import annotations

import itertools
import logging
import random
import threading
from datetime import date, datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence, Tuple
from uuid import uuid4

from api.models.schemas import (
    AddItemRequest,
    CalendarSnapshot,
    ItemStatus,
    ScheduledItem,
    WeekViewResponse,
)
from core.settings import Settings, get_settings
from scheduler import projector
from scheduler.errors import ItemNotFoundError, PersistenceError, ValidationError
from scheduler.generator import generate_buckets
from scheduler.timekeys import day_key, normalise_day_key, parse_day, sort_by_time

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: Dict[ItemStatus, frozenset] = {
    ItemStatus.PENDING: frozenset({ItemStatus.CONFIRMED, ItemStatus.COMPLETED, ItemStatus.CANCELLED}),
    ItemStatus.CONFIRMED: frozenset({ItemStatus.COMPLETED, ItemStatus.CANCELLED}),
    ItemStatus.OVERDUE: frozenset({ItemStatus.COMPLETED, ItemStatus.CANCELLED}),
    ItemStatus.COMPLETED: frozenset(),
    ItemStatus.CANCELLED: frozenset(),
}


def can_transition(current: ItemStatus, target: ItemStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


class CalendarStore:
    """Mutable calendar repository keyed by ISO day."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._today = today or date.today
        self._buckets: Dict[str, List[ScheduledItem]] = {}
        self._version = 0
        self._lock = threading.RLock()
        self._move_seq = itertools.count(1)

    @property
    def version(self) -> int:
        return self._version

    def today(self) -> date:
        return self._today()

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(
        self,
        window_days: Optional[int] = None,
        seed: Optional[int] = None,
        departments: Optional[Sequence[str]] = None,
    ) -> CalendarSnapshot:
        """Replace all contents with demo items for the coming days."""

        window = window_days if window_days is not None else self.settings.window_days
        rng = random.Random(seed if seed is not None else self.settings.seed)
        buckets = generate_buckets(rng, self.today(), window, departments=departments)
        with self._lock:
            self._buckets = buckets
            self._bump()
            logger.info(
                "Generated %d demo items over %d days (version %d)",
                sum(len(items) for items in buckets.values()),
                window,
                self._version,
            )
            return projector.snapshot(self._buckets, self._version)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def add_item(self, payload: AddItemRequest) -> ScheduledItem:
        title = (payload.title or "").strip()
        if not title:
            raise ValidationError("title is required")
        key = day_key(parse_day(payload.date))
        item = ScheduledItem(
            id=f"custom-{uuid4().hex}",
            title=title,
            category=payload.category,
            scheduled_time=(payload.time or "").strip() or self.settings.default_time,
            status=ItemStatus.PENDING,
            priority=payload.priority,
            details=payload.details,
            department=payload.department or None,
            assigned_to=payload.assigned_to or None,
            assigned_by=self.settings.acting_user,
            deadline=payload.deadline or None,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._check_version(payload.expected_version)
            self._buckets.setdefault(key, []).append(item)
            self._bump()
        logger.info("Added item %s on %s", item.id, key)
        return item

    def transition_status(
        self,
        item_id: str,
        target: ItemStatus,
        expected_version: Optional[int] = None,
    ) -> Tuple[ScheduledItem, bool]:
        """Apply a status change if the lifecycle allows it.

        Returns the item as stored afterwards and whether anything changed.
        Disallowed transitions leave the item untouched.
        """

        with self._lock:
            self._check_version(expected_version)
            key, index, item = self._locate(item_id)
            if not can_transition(item.status, target):
                logger.debug("Ignoring %s -> %s for %s", item.status.value, target.value, item_id)
                return item, False
            updated = item.model_copy(update={"status": target})
            self._buckets[key][index] = updated
            self._bump()
        logger.info("Item %s is now %s", item_id, target.value)
        return updated, True

    def move(
        self,
        item_id: str,
        source_date: str,
        target_date: str,
        expected_version: Optional[int] = None,
    ) -> Tuple[ScheduledItem, bool]:
        """Move an item from one day bucket to the end of another."""

        source = normalise_day_key(source_date)
        target = normalise_day_key(target_date)
        with self._lock:
            self._check_version(expected_version)
            bucket = self._buckets.get(source, [])
            index = next((i for i, item in enumerate(bucket) if item.id == item_id), None)
            if index is None:
                raise ItemNotFoundError(f"item {item_id} not found on {source}")
            if source == target:
                return bucket[index], False
            item = bucket.pop(index)
            if self.settings.remint_on_move:
                item = item.model_copy(update={"id": f"{item.id}-moved-{next(self._move_seq)}"})
            self._buckets.setdefault(target, []).append(item)
            self._bump()
        logger.info("Moved item %s from %s to %s as %s", item_id, source, target, item.id)
        return item, True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get(self, item_id: str) -> ScheduledItem:
        with self._lock:
            return self._locate(item_id)[2]

    def date_of(self, item_id: str) -> str:
        with self._lock:
            return self._locate(item_id)[0]

    def bucket(self, date_key: str) -> List[ScheduledItem]:
        """Items on one day, all statuses, in clock-time order."""

        with self._lock:
            return sort_by_time(self._buckets.get(normalise_day_key(date_key), []))

    def snapshot(self) -> CalendarSnapshot:
        with self._lock:
            return projector.snapshot(self._buckets, self._version)

    def week(self, window_days: Optional[int] = None) -> WeekViewResponse:
        with self._lock:
            return projector.week_view(
                self._buckets,
                self.today(),
                window_days if window_days is not None else self.settings.window_days,
            )

    def reset(self) -> None:
        with self._lock:
            self._buckets = {}
            self._bump()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _locate(self, item_id: str) -> Tuple[str, int, ScheduledItem]:
        for key, items in self._buckets.items():
            for index, item in enumerate(items):
                if item.id == item_id:
                    return key, index, item
        raise ItemNotFoundError(f"item {item_id} not found")

    def _check_version(self, expected: Optional[int]) -> None:
        if expected is not None and expected != self._version:
            logger.warning("Rejected stale mutation (expected %d, at %d)", expected, self._version)
            raise PersistenceError(expected, self._version)

    def _bump(self) -> None:
        self._version += 1


calendar_store = CalendarStore()
"""Module-level singleton used by the API routes."""
