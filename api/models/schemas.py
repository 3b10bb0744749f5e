"""Pydantic data models used by the FastAPI layer.

``ScheduledItem`` is also the record kept inside the in-memory
``CalendarStore``; request and response wrappers give the HTTP routes a
typed surface.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemCategory(str, Enum):
    """Closed set of calendar item kinds, used for grouping only."""

    DELIVERY = "delivery"
    PRODUCTION = "production"
    PAYMENT = "payment"
    MEETING = "meeting"
    CUTTING = "cutting"
    QUALITY = "quality"
    TASK = "task"
    EVENT = "event"


class ItemStatus(str, Enum):
    """Lifecycle states for a scheduled item."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class ItemPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ScheduledItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    category: ItemCategory
    scheduled_time: str = Field(..., description="Clock time in 'HH:MM AM/PM' form")
    status: ItemStatus = ItemStatus.PENDING
    priority: ItemPriority = ItemPriority.MEDIUM
    details: str = ""
    department: Optional[str] = None
    assigned_to: Optional[str] = None
    assigned_by: Optional[str] = None
    deadline: Optional[str] = None
    created_at: Optional[datetime] = None


class Employee(BaseModel):
    id: str
    name: str
    department: str


class NotificationIntent(BaseModel):
    assignee_id: str
    assignee_name: str
    item_title: str
    audience: str = Field("assignee", pattern="^(assignee|admin)$")
    message: str
    created_at: datetime


class GenerateRequest(BaseModel):
    window_days: Optional[int] = Field(None, ge=1, le=31)
    seed: Optional[int] = None


class AddItemRequest(BaseModel):
    """Add-item form body; title and date are checked by the store."""

    title: str = ""
    date: str = ""
    category: ItemCategory = ItemCategory.TASK
    time: Optional[str] = None
    details: str = ""
    priority: ItemPriority = ItemPriority.MEDIUM
    department: Optional[str] = None
    assigned_to: Optional[str] = None
    deadline: Optional[str] = None
    expected_version: Optional[int] = None


class StatusChangeRequest(BaseModel):
    status: ItemStatus
    expected_version: Optional[int] = None


class MoveRequest(BaseModel):
    source_date: str
    target_date: str
    expected_version: Optional[int] = None


class SummaryCounts(BaseModel):
    total_active: int
    high_priority: int
    deliveries: int
    completed: int
    cancelled: int


class CalendarSnapshot(BaseModel):
    version: int
    active: List[ScheduledItem]
    completed: List[ScheduledItem]
    cancelled: List[ScheduledItem]
    active_by_date: Dict[str, List[ScheduledItem]]
    summary: SummaryCounts


class DayColumn(BaseModel):
    date_key: str
    weekday: str
    label: str
    is_today: bool
    count: int
    items: List[ScheduledItem] = Field(default_factory=list)


class WeekViewResponse(BaseModel):
    today: str
    days: List[DayColumn]


class ActionResponse(BaseModel):
    """Outcome of an interaction, with the confirmation text shown to the user."""

    message: str
    changed: bool = True
    version: int
    item: Optional[ScheduledItem] = None
    notifications: List[NotificationIntent] = Field(default_factory=list)


class SessionState(BaseModel):
    selected_item: Optional[ScheduledItem] = None
    expanded_date: Optional[str] = None
    add_dialog_open: bool = False


__all__ = [
    "ItemCategory",
    "ItemStatus",
    "ItemPriority",
    "ScheduledItem",
    "Employee",
    "NotificationIntent",
    "GenerateRequest",
    "AddItemRequest",
    "StatusChangeRequest",
    "MoveRequest",
    "SummaryCounts",
    "CalendarSnapshot",
    "DayColumn",
    "WeekViewResponse",
    "ActionResponse",
    "SessionState",
]
