"""Read-side projections over the calendar buckets.

Every function here is recomputed from the full bucket map on each call;
nothing is cached between store mutations.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Mapping, Sequence

from api.models.schemas import (
    CalendarSnapshot,
    DayColumn,
    ItemCategory,
    ItemPriority,
    ItemStatus,
    ScheduledItem,
    SummaryCounts,
    WeekViewResponse,
)
from scheduler.timekeys import day_key, sort_by_time

Buckets = Mapping[str, Sequence[ScheduledItem]]


@dataclass
class Partitions:
    active: List[ScheduledItem]
    completed: List[ScheduledItem]
    cancelled: List[ScheduledItem]


def is_active(item: ScheduledItem) -> bool:
    return item.status not in (ItemStatus.COMPLETED, ItemStatus.CANCELLED)


def flatten(buckets: Buckets) -> List[ScheduledItem]:
    return [item for items in buckets.values() for item in items]


def partition(buckets: Buckets) -> Partitions:
    """Split every item into exactly one of active, completed or cancelled."""

    result = Partitions(active=[], completed=[], cancelled=[])
    for item in flatten(buckets):
        if item.status == ItemStatus.COMPLETED:
            result.completed.append(item)
        elif item.status == ItemStatus.CANCELLED:
            result.cancelled.append(item)
        else:
            result.active.append(item)
    return result


def active_by_date(buckets: Buckets) -> Dict[str, List[ScheduledItem]]:
    """Active items per day, time-sorted; days with no active items are omitted."""

    result: Dict[str, List[ScheduledItem]] = {}
    for key, items in buckets.items():
        active = [item for item in items if is_active(item)]
        if active:
            result[key] = sort_by_time(active)
    return result


def summary_counts(parts: Partitions) -> SummaryCounts:
    return SummaryCounts(
        total_active=len(parts.active),
        high_priority=sum(1 for item in parts.active if item.priority == ItemPriority.HIGH),
        deliveries=sum(1 for item in parts.active if item.category == ItemCategory.DELIVERY),
        completed=len(parts.completed),
        cancelled=len(parts.cancelled),
    )


def snapshot(buckets: Buckets, version: int) -> CalendarSnapshot:
    parts = partition(buckets)
    return CalendarSnapshot(
        version=version,
        active=parts.active,
        completed=parts.completed,
        cancelled=parts.cancelled,
        active_by_date=active_by_date(buckets),
        summary=summary_counts(parts),
    )


def week_view(buckets: Buckets, today: date, window_days: int = 7) -> WeekViewResponse:
    """Day columns starting at ``today`` with their sorted active items."""

    by_date = active_by_date(buckets)
    today_key = day_key(today)
    days: List[DayColumn] = []
    for offset in range(window_days):
        current = today + timedelta(days=offset)
        key = day_key(current)
        items = by_date.get(key, [])
        days.append(
            DayColumn(
                date_key=key,
                weekday=current.strftime("%a"),
                label=f"{current.strftime('%b')} {current.day}",
                is_today=key == today_key,
                count=len(items),
                items=items,
            )
        )
    return WeekViewResponse(today=today_key, days=days)


__all__ = [
    "Partitions",
    "is_active",
    "flatten",
    "partition",
    "active_by_date",
    "summary_counts",
    "snapshot",
    "week_view",
]
