from __future__ import annotations

import pytest

from api.models.schemas import AddItemRequest, ItemStatus
from api.services.calendar_session import CalendarSession
from scheduler.errors import ValidationError


def test_add_with_assignee_emits_notifications(session: CalendarSession) -> None:
    session.open_add_dialog()
    result = session.add_item(
        AddItemRequest(
            title="Inspect silk shipment",
            date="2025-01-07",
            department="Production",
            assigned_to="1",
        )
    )
    assert result.message == "Task assigned to John Smith successfully"
    assert result.item.assigned_to == "1"
    assert [intent.audience for intent in result.notifications] == ["assignee", "admin"]
    assert result.notifications[0].message == 'New task "Inspect silk shipment" assigned'
    assert result.notifications[1].message.endswith("assigned to John Smith")
    assert session.outbox.all() == result.notifications
    assert session.state().add_dialog_open is False


def test_add_drops_assignee_outside_department(session: CalendarSession) -> None:
    result = session.add_item(
        AddItemRequest(title="Dye batch", date="2025-01-07", department="Design", assigned_to="1")
    )
    assert result.message == "Event added successfully"
    assert result.item.assigned_to is None
    assert result.notifications == []


def test_add_with_unlisted_assignee_still_notifies(session: CalendarSession) -> None:
    result = session.add_item(AddItemRequest(title="Count rolls", date="2025-01-07", assigned_to="ext-9"))
    assert len(result.notifications) == 2
    assert result.notifications[0].assignee_id == "ext-9"


def test_add_validation_message(session: CalendarSession) -> None:
    session.open_add_dialog()
    version = session.store.version
    with pytest.raises(ValidationError) as excinfo:
        session.add_item(AddItemRequest(title="", date="2025-01-07", assigned_to="1"))
    assert str(excinfo.value).startswith("Please fill in required fields")
    assert session.store.version == version
    assert session.outbox.all() == []
    assert session.state().add_dialog_open is True


def test_status_change_clears_selection(session: CalendarSession) -> None:
    item = session.add_item(AddItemRequest(title="QC", date="2025-01-06")).item
    session.open_item(item.id)
    assert session.state().selected_item.id == item.id

    result = session.change_status(item.id, ItemStatus.COMPLETED)
    assert result.message == "Task completed successfully"
    assert result.changed
    assert session.state().selected_item is None

    again = session.change_status(item.id, ItemStatus.CANCELLED)
    assert not again.changed
    assert again.message == "Task already completed"
    assert again.item.status == ItemStatus.COMPLETED


def test_confirm_then_cancel(session: CalendarSession) -> None:
    item = session.add_item(AddItemRequest(title="Client visit", date="2025-01-06")).item
    assert session.change_status(item.id, ItemStatus.CONFIRMED).message == "Task confirmed successfully"
    assert session.change_status(item.id, ItemStatus.CANCELLED).item.status == ItemStatus.CANCELLED


def test_selection_follows_moved_item(session: CalendarSession) -> None:
    item = session.add_item(AddItemRequest(title="Export shipment", date="2025-01-06")).item
    session.open_item(item.id)
    result = session.move(item.id, "2025-01-06", "2025-01-09")
    assert result.message == "Event moved to Jan 9, 2025"
    assert session.state().selected_item.id == result.item.id

    same = session.move(item.id, "2025-01-09", "2025-01-09")
    assert not same.changed


def test_selection_follows_reminted_item(session: CalendarSession) -> None:
    session.store.settings.remint_on_move = True
    item = session.add_item(AddItemRequest(title="Export shipment", date="2025-01-06")).item
    session.open_item(item.id)
    result = session.move(item.id, "2025-01-06", "2025-01-09")
    assert result.item.id != item.id
    assert session.state().selected_item.id == result.item.id


def test_toggle_day(session: CalendarSession) -> None:
    assert session.toggle_day("2025-01-08") == "2025-01-08"
    assert session.toggle_day("2025-01-09") == "2025-01-09"
    assert session.toggle_day("2025-01-09") is None
    assert session.state().expanded_date is None


def test_regenerate_drops_stale_selection(session: CalendarSession) -> None:
    item = session.add_item(AddItemRequest(title="Temp", date="2025-01-06")).item
    session.open_item(item.id)
    session.store.generate(seed=1)
    assert session.state().selected_item is None
