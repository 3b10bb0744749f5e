"""HTTP routes for the production calendar.

Every handler goes through ``calendar_session`` so the transient view state
and the confirmation messages stay in one place. Store errors are mapped to
HTTP status codes here.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException

from api.models.schemas import (
    ActionResponse,
    AddItemRequest,
    CalendarSnapshot,
    Employee,
    GenerateRequest,
    MoveRequest,
    NotificationIntent,
    ScheduledItem,
    SessionState,
    StatusChangeRequest,
    WeekViewResponse,
)
from api.services.calendar_session import calendar_session
from scheduler.errors import ItemNotFoundError, PersistenceError, ValidationError

router = APIRouter(prefix="/api/calendar", tags=["calendar"])


@router.post("/generate", response_model=CalendarSnapshot)
def generate(request: GenerateRequest) -> CalendarSnapshot:
    """Replace the calendar with freshly generated demo items."""

    snapshot = calendar_session.store.generate(
        window_days=request.window_days,
        seed=request.seed,
        departments=calendar_session.roster.departments(),
    )
    calendar_session.reset()
    calendar_session.outbox.clear()
    return snapshot


@router.get("", response_model=CalendarSnapshot)
def get_snapshot() -> CalendarSnapshot:
    """Return the status partitions, active-by-date index and counts."""

    return calendar_session.store.snapshot()


@router.get("/week", response_model=WeekViewResponse)
def get_week() -> WeekViewResponse:
    return calendar_session.store.week()


@router.get("/days/{date_key}", response_model=List[ScheduledItem])
def get_day(date_key: str) -> List[ScheduledItem]:
    """Return every item on one day regardless of status."""

    try:
        return calendar_session.store.bucket(date_key)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/days/{date_key}/toggle", response_model=SessionState)
def toggle_day(date_key: str) -> SessionState:
    try:
        calendar_session.toggle_day(date_key)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return calendar_session.state()


@router.post("/items", response_model=ActionResponse)
def add_item(request: AddItemRequest) -> ActionResponse:
    """Create a pending item from the add-item form."""

    try:
        return calendar_session.add_item(request)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except PersistenceError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.get("/items/{item_id}", response_model=ScheduledItem)
def open_item(item_id: str) -> ScheduledItem:
    """Return an item and select it for the detail view."""

    try:
        return calendar_session.open_item(item_id)
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("/items/{item_id}/status", response_model=ActionResponse)
def change_status(item_id: str, request: StatusChangeRequest) -> ActionResponse:
    try:
        return calendar_session.change_status(item_id, request.status, request.expected_version)
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except PersistenceError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.post("/items/{item_id}/move", response_model=ActionResponse)
def move_item(item_id: str, request: MoveRequest) -> ActionResponse:
    """Drag-and-drop an item onto another day."""

    try:
        return calendar_session.move(
            item_id, request.source_date, request.target_date, request.expected_version
        )
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except PersistenceError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.get("/session", response_model=SessionState)
def get_session() -> SessionState:
    return calendar_session.state()


@router.delete("/selection", response_model=SessionState)
def close_item() -> SessionState:
    calendar_session.close_item()
    return calendar_session.state()


@router.post("/dialog", response_model=SessionState)
def open_dialog() -> SessionState:
    calendar_session.open_add_dialog()
    return calendar_session.state()


@router.delete("/dialog", response_model=SessionState)
def close_dialog() -> SessionState:
    calendar_session.close_add_dialog()
    return calendar_session.state()


@router.get("/notifications", response_model=List[NotificationIntent])
def list_notifications() -> List[NotificationIntent]:
    """Return the notification intents queued so far."""

    return calendar_session.outbox.all()


@router.get("/departments", response_model=List[str])
def list_departments() -> List[str]:
    return calendar_session.roster.departments()


@router.get("/employees", response_model=List[Employee])
def list_employees(department: Optional[str] = None) -> List[Employee]:
    """Return employees, filtered to one department when given."""

    return calendar_session.roster.employees(department)
