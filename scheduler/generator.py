"""Demo data generator for the production calendar.

Generation is a pure function of the random source and the start day, so
tests can pass a seeded ``random.Random`` and assert the exact output.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from api.models.schemas import ItemCategory, ItemPriority, ItemStatus, ScheduledItem
from scheduler.timekeys import day_key, format_time


@dataclass(frozen=True)
class CatalogEntry:
    category: ItemCategory
    titles: Sequence[str]
    details: Sequence[str]


CATALOG: List[CatalogEntry] = [
    CatalogEntry(
        category=ItemCategory.TASK,
        titles=(
            "Quality Check",
            "Sewing Line 1",
            "Cutting Department",
            "Maintenance Check",
            "Pattern Making Workshop",
            "Packaging & Labeling",
        ),
        details=(
            "Final quality inspection for summer collection",
            "Complete 150 t-shirts for Order #MT-2024-003",
            "Cut 200 pieces for denim jacket production",
            "Inspect incoming silk fabric shipment",
            "Review and approve fall collection designs",
        ),
    ),
    CatalogEntry(
        category=ItemCategory.DELIVERY,
        titles=(
            "Dye Chemicals Delivery",
            "Finished Goods Shipment",
            "Trim & Hardware Delivery",
            "Export Shipment",
        ),
        details=(
            "Reactive dyes for next batch coloring",
            "Ship 500 units to Retailer Network East",
            "Buttons, zippers, and other hardware items",
            "Container shipment to European markets",
        ),
    ),
    CatalogEntry(
        category=ItemCategory.EVENT,
        titles=(
            "Design Review Meeting",
            "Supplier Audit",
            "Production Planning Meeting",
            "Client Visit",
            "Weekly Performance Review",
            "Inventory Audit",
        ),
        details=(
            "Review and approve fall collection designs",
            "Annual supplier compliance audit",
            "Monthly production capacity analysis",
            "Product showcase and contract discussion",
            "Weekly production capacity review",
        ),
    ),
]

MIN_ITEMS_PER_DAY = 2
MAX_ITEMS_PER_DAY = 5


def _draw_status(rng: random.Random) -> ItemStatus:
    if rng.random() > 0.8:
        return ItemStatus.COMPLETED
    if rng.random() > 0.6:
        return ItemStatus.CONFIRMED
    return ItemStatus.PENDING


def _draw_priority(rng: random.Random) -> ItemPriority:
    if rng.random() > 0.7:
        return ItemPriority.HIGH
    if rng.random() > 0.5:
        return ItemPriority.MEDIUM
    return ItemPriority.LOW


def _draw_time(rng: random.Random) -> str:
    hour = rng.randint(1, 12)
    minute = 0 if rng.random() > 0.5 else 30
    meridiem = "AM" if rng.random() > 0.5 else "PM"
    return format_time(hour, minute, meridiem)


def generate_buckets(
    rng: random.Random,
    start: date,
    window_days: int = 7,
    departments: Optional[Sequence[str]] = None,
    catalog: Sequence[CatalogEntry] = CATALOG,
) -> Dict[str, List[ScheduledItem]]:
    """Build a fresh day-key to items mapping covering ``window_days`` days."""

    departments = list(departments or ["Production"])
    buckets: Dict[str, List[ScheduledItem]] = {}
    for offset in range(window_days):
        key = day_key(start + timedelta(days=offset))
        bucket: List[ScheduledItem] = []
        for index in range(rng.randint(MIN_ITEMS_PER_DAY, MAX_ITEMS_PER_DAY)):
            entry = rng.choice(catalog)
            bucket.append(
                ScheduledItem(
                    id=f"{entry.category.value}-{offset}-{index}",
                    title=rng.choice(entry.titles),
                    category=entry.category,
                    scheduled_time=_draw_time(rng),
                    status=_draw_status(rng),
                    details=rng.choice(entry.details),
                    priority=_draw_priority(rng),
                    department=rng.choice(departments),
                )
            )
        buckets[key] = bucket
    return buckets


__all__ = ["CATALOG", "CatalogEntry", "generate_buckets", "MIN_ITEMS_PER_DAY", "MAX_ITEMS_PER_DAY"]
