"""Calendar domain helpers: day keys, demo generation and projections."""

from .errors import CalendarError, ItemNotFoundError, PersistenceError, ValidationError
from .generator import CATALOG, CatalogEntry, generate_buckets
from .projector import Partitions, active_by_date, partition, snapshot, summary_counts, week_view
from .timekeys import day_key, minute_of_day, parse_day, sort_by_time

__all__ = [
    "CATALOG",
    "CalendarError",
    "CatalogEntry",
    "ItemNotFoundError",
    "Partitions",
    "PersistenceError",
    "ValidationError",
    "active_by_date",
    "day_key",
    "generate_buckets",
    "minute_of_day",
    "parse_day",
    "partition",
    "snapshot",
    "sort_by_time",
    "summary_counts",
    "week_view",
]
