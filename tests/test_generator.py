from __future__ import annotations

import random
from datetime import date

from api.models.schemas import ItemStatus
from directory.roster import DEPARTMENTS
from scheduler.generator import CATALOG, MAX_ITEMS_PER_DAY, MIN_ITEMS_PER_DAY, generate_buckets
from scheduler.timekeys import minute_of_day

START = date(2025, 1, 6)


def test_generation_is_deterministic_for_a_seed() -> None:
    first = generate_buckets(random.Random(42), START, 7, DEPARTMENTS)
    second = generate_buckets(random.Random(42), START, 7, DEPARTMENTS)
    assert {k: [i.model_dump() for i in v] for k, v in first.items()} == {
        k: [i.model_dump() for i in v] for k, v in second.items()
    }


def test_generation_covers_window_from_start() -> None:
    buckets = generate_buckets(random.Random(1), START, 7, DEPARTMENTS)
    assert list(buckets) == [
        "2025-01-06",
        "2025-01-07",
        "2025-01-08",
        "2025-01-09",
        "2025-01-10",
        "2025-01-11",
        "2025-01-12",
    ]
    for items in buckets.values():
        assert MIN_ITEMS_PER_DAY <= len(items) <= MAX_ITEMS_PER_DAY


def test_generated_items_draw_from_catalog() -> None:
    buckets = generate_buckets(random.Random(7), START, 14, DEPARTMENTS)
    titles = {entry.category: set(entry.titles) for entry in CATALOG}
    ids = []
    for items in buckets.values():
        for item in items:
            ids.append(item.id)
            assert item.title in titles[item.category]
            assert item.department in DEPARTMENTS
            assert item.status in (ItemStatus.PENDING, ItemStatus.CONFIRMED, ItemStatus.COMPLETED)
            assert minute_of_day(item.scheduled_time) is not None
            assert item.scheduled_time[3:5] in ("00", "30")
    assert len(ids) == len(set(ids))


def test_status_skew_is_mostly_open() -> None:
    buckets = generate_buckets(random.Random(3), START, 200, DEPARTMENTS)
    statuses = [item.status for items in buckets.values() for item in items]
    completed = statuses.count(ItemStatus.COMPLETED) / len(statuses)
    assert 0.1 < completed < 0.3
    assert statuses.count(ItemStatus.PENDING) > statuses.count(ItemStatus.CONFIRMED)
