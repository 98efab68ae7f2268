"""
app/services/reminder_service.py

Purpose: Reminder urgency and derived state

- Urgency tier from days remaining (single implementation for every view)
- Overdue derivation (never stored)
- Reminder listing filters and summary counts
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from app.models.client import Client
from app.models.enums import ReminderStatus, UrgencyTier
from app.models.reminder import Reminder
from app.schemas.reminder import ReminderSummary, ReminderView, Urgency
from utils.constants import UNKNOWN_CLIENT
from utils.time_utils import days_until, is_within_window, to_naive_utc

STATUS_FILTER_ALL = "all"

TIER_COLORS = {
    UrgencyTier.URGENT: "red",
    UrgencyTier.SOON: "orange",
    UrgencyTier.LOW: "yellow",
    UrgencyTier.INFO: "blue",
    UrgencyTier.NEUTRAL: "gray",
}


def classify_urgency(due_date: datetime, now: datetime) -> Urgency:
    """
    Buckets a due date by whole days remaining (rounded up).

    Tiers:
        days <= 0   -> urgent  "Urgent"
        days == 1   -> soon    "Soon"
        days 2..3   -> low     "{days} days"
        days 4..7   -> info    "{days} days"
        days > 7    -> neutral "{days} days"

    Args:
        due_date: When the work is due
        now: Reference time

    Returns:
        Urgency with days, tier, label and display color
    """
    days = days_until(due_date, now)

    if days <= 0:
        tier, label = UrgencyTier.URGENT, "Urgent"
    elif days == 1:
        tier, label = UrgencyTier.SOON, "Soon"
    elif days <= 3:
        tier, label = UrgencyTier.LOW, f"{days} days"
    elif days <= 7:
        tier, label = UrgencyTier.INFO, f"{days} days"
    else:
        tier, label = UrgencyTier.NEUTRAL, f"{days} days"

    return Urgency(days=days, tier=tier, label=label, color=TIER_COLORS[tier])


def is_overdue(reminder: Reminder, now: datetime) -> bool:
    """
    A pending reminder whose due day is already behind us.
    """
    if reminder.status != ReminderStatus.PENDING:
        return False
    return to_naive_utc(reminder.due_date).date() < to_naive_utc(now).date()


def is_upcoming(reminder: Reminder, now: datetime, window_days: int) -> bool:
    """
    A pending reminder due between today and today + window_days.
    """
    return (
        reminder.status == ReminderStatus.PENDING
        and is_within_window(reminder.due_date, now, window_days)
    )


def effective_status(reminder: Reminder, now: datetime) -> ReminderStatus:
    """
    Status as shown to users: completed stays completed, pending past its
    due day reads as overdue.
    """
    if reminder.status == ReminderStatus.COMPLETED:
        return ReminderStatus.COMPLETED
    if reminder.status == ReminderStatus.OVERDUE or is_overdue(reminder, now):
        return ReminderStatus.OVERDUE
    return ReminderStatus.PENDING


def build_reminder_view(reminder: Reminder, clients: Dict[int, Client], now: datetime) -> ReminderView:
    client = clients.get(reminder.client_id)
    return ReminderView(
        **reminder.model_dump(),
        effective_status=effective_status(reminder, now),
        client_name=client.name if client else UNKNOWN_CLIENT,
        urgency=classify_urgency(reminder.due_date, now),
    )


def filter_reminders(
    reminders: Iterable[Reminder],
    clients: Dict[int, Client],
    now: datetime,
    status: str = STATUS_FILTER_ALL,
    search: Optional[str] = None,
) -> List[ReminderView]:
    """
    Builds the reminders listing.

    Args:
        reminders: Reminders in display order
        clients: Clients keyed by id, for names
        now: Reference time
        status: "all" or a ReminderStatus value, matched on effective status
        search: Case-insensitive text matched against client name and service

    Returns:
        Matching reminders with derived state attached
    """
    query = (search or "").lower()
    views = []

    for reminder in reminders:
        view = build_reminder_view(reminder, clients, now)

        if status != STATUS_FILTER_ALL and view.effective_status.value != status:
            continue
        if query and query not in view.client_name.lower() and query not in reminder.service_name.lower():
            continue

        views.append(view)

    return views


def summarize_reminders(reminders: Iterable[Reminder], now: datetime, window_days: int) -> ReminderSummary:
    """
    Counts for the reminders page header cards.
    """
    total = upcoming = overdue = completed = 0

    for reminder in reminders:
        total += 1
        if reminder.status == ReminderStatus.COMPLETED:
            completed += 1
        elif is_overdue(reminder, now):
            overdue += 1
        elif is_upcoming(reminder, now, window_days):
            upcoming += 1

    return ReminderSummary(total=total, upcoming=upcoming, overdue=overdue, completed=completed)
