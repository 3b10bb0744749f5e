"""Interaction handling for the calendar screen.

``CalendarSession`` is the only caller of the store mutators. It owns the
transient view state (selected item, expanded day, add dialog) and turns
each outcome into the confirmation text shown to the user.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from api.models.schemas import (
    ActionResponse,
    AddItemRequest,
    Employee,
    ItemStatus,
    ScheduledItem,
    SessionState,
)
from api.services.calendar_store import CalendarStore, calendar_store
from directory.roster import Roster, roster
from notifications.outbox import Outbox, outbox
from scheduler.errors import ItemNotFoundError, ValidationError
from scheduler.timekeys import normalise_day_key, parse_day

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in required fields"


class CalendarSession:
    """Transient UI state plus the mutating interactions."""

    def __init__(self, store: CalendarStore, people: Roster, notifications: Outbox) -> None:
        self.store = store
        self.roster = people
        self.outbox = notifications
        self.selected_id: Optional[str] = None
        self.expanded_date: Optional[str] = None
        self.add_dialog_open = False

    # ------------------------------------------------------------------
    # View state
    # ------------------------------------------------------------------
    def state(self) -> SessionState:
        selected: Optional[ScheduledItem] = None
        if self.selected_id is not None:
            try:
                selected = self.store.get(self.selected_id)
            except ItemNotFoundError:
                # the store was regenerated under us
                self.selected_id = None
        return SessionState(
            selected_item=selected,
            expanded_date=self.expanded_date,
            add_dialog_open=self.add_dialog_open,
        )

    def open_item(self, item_id: str) -> ScheduledItem:
        item = self.store.get(item_id)
        self.selected_id = item.id
        return item

    def close_item(self) -> None:
        self.selected_id = None

    def toggle_day(self, date_key: str) -> Optional[str]:
        key = normalise_day_key(date_key)
        self.expanded_date = None if self.expanded_date == key else key
        return self.expanded_date

    def open_add_dialog(self) -> None:
        self.add_dialog_open = True

    def close_add_dialog(self) -> None:
        self.add_dialog_open = False

    def reset(self) -> None:
        self.selected_id = None
        self.expanded_date = None
        self.add_dialog_open = False

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------
    def add_item(self, request: AddItemRequest) -> ActionResponse:
        """Submit the add-item form.

        Raises ``ValidationError`` carrying the user-facing message when the
        title or date is missing; the store is left untouched.
        """

        request = self._scope_assignee(request)
        try:
            item = self.store.add_item(request)
        except ValidationError as exc:
            logger.warning("Add item rejected: %s", exc)
            raise ValidationError(f"{REQUIRED_FIELDS_MESSAGE}: {exc}") from exc

        self.add_dialog_open = False
        notifications = []
        if item.assigned_to:
            assignee = self._resolve_employee(item.assigned_to)
            notifications = self.outbox.task_assigned(assignee, item.title)
            message = f"Task assigned to {assignee.name} successfully"
        else:
            message = "Event added successfully"
        return ActionResponse(
            message=message,
            version=self.store.version,
            item=item,
            notifications=notifications,
        )

    def change_status(
        self, item_id: str, target: ItemStatus, expected_version: Optional[int] = None
    ) -> ActionResponse:
        item, changed = self.store.transition_status(item_id, target, expected_version)
        self.selected_id = None
        if changed:
            message = f"Task {target.value} successfully"
        else:
            message = f"Task already {item.status.value}"
        return ActionResponse(message=message, changed=changed, version=self.store.version, item=item)

    def move(
        self,
        item_id: str,
        source_date: str,
        target_date: str,
        expected_version: Optional[int] = None,
    ) -> ActionResponse:
        item, changed = self.store.move(item_id, source_date, target_date, expected_version)
        if changed and self.selected_id == item_id:
            self.selected_id = item.id
        target = parse_day(target_date)
        return ActionResponse(
            message=f"Event moved to {_display_date(target)}" if changed else "Event already on this day",
            changed=changed,
            version=self.store.version,
            item=item,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _scope_assignee(self, request: AddItemRequest) -> AddItemRequest:
        """Drop an assignee who does not belong to the chosen department."""

        if request.department and request.assigned_to:
            if not self.roster.in_department(request.assigned_to, request.department):
                logger.info(
                    "Clearing assignee %s: not in department %s",
                    request.assigned_to,
                    request.department,
                )
                return request.model_copy(update={"assigned_to": None})
        return request

    def _resolve_employee(self, employee_id: str) -> Employee:
        employee = self.roster.get(employee_id)
        if employee is None:
            return Employee(id=employee_id, name=employee_id, department="")
        return employee


def _display_date(value: date) -> str:
    return f"{value.strftime('%b')} {value.day}, {value.year}"


calendar_session = CalendarSession(calendar_store, roster, outbox)
"""Module-level session used by the API routes."""
