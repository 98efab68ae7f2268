from datetime import datetime, timedelta

import pytest

from app.models.client import Client
from app.models.enums import ClientType, ReminderStatus, UrgencyTier
from app.models.reminder import Reminder
from app.services.reminder_service import (
    classify_urgency,
    effective_status,
    filter_reminders,
    is_overdue,
    summarize_reminders,
)

NOW = datetime(2024, 3, 15, 10, 0)


def reminder(id, due, status=ReminderStatus.PENDING, client_id=1, service="GSTR-3B"):
    return Reminder(id=id, client_id=client_id, service_name=service, due_date=due, status=status)


@pytest.fixture
def clients():
    return {
        1: Client(id=1, name="Raj Enterprises", client_type=ClientType.BUSINESS, contact_number="1"),
        2: Client(id=2, name="Priya Textiles", client_type=ClientType.PARTNERSHIP, contact_number="2"),
    }


@pytest.mark.parametrize(
    "offset, tier, label",
    [
        (timedelta(days=-2), UrgencyTier.URGENT, "Urgent"),
        (timedelta(0), UrgencyTier.URGENT, "Urgent"),
        (timedelta(seconds=1), UrgencyTier.SOON, "Soon"),
        (timedelta(days=1), UrgencyTier.SOON, "Soon"),
        (timedelta(days=2), UrgencyTier.LOW, "2 days"),
        (timedelta(days=3), UrgencyTier.LOW, "3 days"),
        (timedelta(days=3, hours=1), UrgencyTier.INFO, "4 days"),
        (timedelta(days=7), UrgencyTier.INFO, "7 days"),
        (timedelta(days=8), UrgencyTier.NEUTRAL, "8 days"),
        (timedelta(days=30), UrgencyTier.NEUTRAL, "30 days"),
    ],
)
def test_urgency_tiers(offset, tier, label):
    urgency = classify_urgency(NOW + offset, NOW)
    assert urgency.tier == tier
    assert urgency.label == label


def test_urgency_rounds_partial_days_up():
    assert classify_urgency(NOW + timedelta(hours=25), NOW).days == 2


def test_overdue_is_calendar_day_based():
    assert is_overdue(reminder(1, NOW - timedelta(days=1)), NOW)
    # Earlier today is still "due today", not overdue
    assert not is_overdue(reminder(2, NOW - timedelta(hours=2)), NOW)
    assert not is_overdue(reminder(3, NOW - timedelta(days=5), status=ReminderStatus.COMPLETED), NOW)


def test_effective_status():
    assert effective_status(reminder(1, NOW - timedelta(days=3)), NOW) == ReminderStatus.OVERDUE
    assert effective_status(reminder(2, NOW + timedelta(days=3)), NOW) == ReminderStatus.PENDING
    assert effective_status(
        reminder(3, NOW - timedelta(days=3), status=ReminderStatus.COMPLETED), NOW
    ) == ReminderStatus.COMPLETED


def test_summary_counts():
    reminders = [
        reminder(1, NOW + timedelta(days=2)),
        reminder(2, NOW + timedelta(days=7)),
        reminder(3, NOW + timedelta(days=20)),
        reminder(4, NOW - timedelta(days=2)),
        reminder(5, NOW - timedelta(days=2), status=ReminderStatus.COMPLETED),
    ]
    summary = summarize_reminders(reminders, NOW, window_days=7)

    assert summary.total == 5
    assert summary.upcoming == 2
    assert summary.overdue == 1
    assert summary.completed == 1


def test_filter_by_effective_status(clients):
    reminders = [
        reminder(1, NOW - timedelta(days=2)),
        reminder(2, NOW + timedelta(days=2)),
        reminder(3, NOW + timedelta(days=2), status=ReminderStatus.COMPLETED),
    ]

    assert [v.id for v in filter_reminders(reminders, clients, NOW, status="overdue")] == [1]
    assert [v.id for v in filter_reminders(reminders, clients, NOW, status="pending")] == [2]
    assert [v.id for v in filter_reminders(reminders, clients, NOW, status="completed")] == [3]
    assert len(filter_reminders(reminders, clients, NOW)) == 3


def test_filter_search_matches_client_and_service(clients):
    reminders = [
        reminder(1, NOW, client_id=1, service="GSTR-3B"),
        reminder(2, NOW, client_id=2, service="TDS Return"),
        reminder(3, NOW, client_id=99, service="Audit Submission"),
    ]

    assert [v.id for v in filter_reminders(reminders, clients, NOW, search="priya")] == [2]
    assert [v.id for v in filter_reminders(reminders, clients, NOW, search="gstr")] == [1]


def test_view_carries_client_name_and_urgency(clients):
    views = filter_reminders([reminder(1, NOW + timedelta(days=1), client_id=99)], clients, NOW)

    assert views[0].client_name == "Unknown"
    assert views[0].urgency.tier == UrgencyTier.SOON
    assert views[0].urgency.color == "orange"
