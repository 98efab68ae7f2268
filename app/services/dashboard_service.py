"""
app/services/dashboard_service.py

Purpose: Dashboard aggregation

- Headline metrics (clients, upcoming dues, outstanding, monthly revenue)
- Upcoming deadlines widget
- Recent activity feed derived from store contents
- Everything recomputed per call; nothing cached
"""

from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List

from app.models.client import Client
from app.models.enums import PaymentStatus
from app.models.payment import Payment
from app.models.reminder import Reminder
from app.schemas.dashboard import Activity, DashboardMetrics
from app.schemas.reminder import ReminderView
from app.services.reminder_service import build_reminder_view, is_upcoming
from app.core.logging import get_logger
from utils.constants import CLIENT_SERVICES, UNKNOWN_CLIENT
from utils.format_utils import format_inr
from utils.time_utils import epoch_if_missing, is_same_month

logger = get_logger(__name__)


def compute_dashboard_metrics(
    clients: List[Client],
    reminders: Iterable[Reminder],
    payments: Iterable[Payment],
    now: datetime,
    window_days: int = 7,
) -> DashboardMetrics:
    """
    Computes the four dashboard numbers.

    - total_clients: every client record
    - upcoming_dues: pending reminders due within the window (calendar days)
    - outstanding_amount: fees of unpaid and partially paid payments
    - monthly_revenue: fees of paid payments dated in the current month

    A paid payment without a payment date never counts as revenue.
    """
    payments = list(payments)

    upcoming_dues = sum(1 for r in reminders if is_upcoming(r, now, window_days))

    outstanding_amount = sum(
        (p.fee_amount for p in payments if p.is_outstanding),
        Decimal("0"),
    )

    monthly_revenue = sum(
        (
            p.fee_amount for p in payments
            if p.status == PaymentStatus.PAID and is_same_month(p.payment_date, now)
        ),
        Decimal("0"),
    )

    metrics = DashboardMetrics(
        total_clients=len(clients),
        upcoming_dues=upcoming_dues,
        outstanding_amount=outstanding_amount,
        monthly_revenue=monthly_revenue,
    )
    logger.debug(f"Dashboard metrics computed: {metrics.model_dump()}")
    return metrics


def upcoming_deadlines(
    reminders: Iterable[Reminder],
    clients: Dict[int, Client],
    now: datetime,
    window_days: int = 7,
    limit: int = 4,
) -> List[ReminderView]:
    """
    Pending reminders due within the window, soonest first, with urgency.
    """
    upcoming = sorted(
        (r for r in reminders if is_upcoming(r, now, window_days)),
        key=lambda r: r.due_date,
    )
    return [build_reminder_view(r, clients, now) for r in upcoming[:limit]]


def _service_labels(client: Client) -> str:
    if not client.services:
        return "No services"
    return ", ".join(CLIENT_SERVICES.get(s, s) for s in client.services)


def recent_activities(
    clients: Iterable[Client],
    payments: Iterable[Payment],
    limit: int = 5,
) -> List[Activity]:
    """
    Newest-first feed of practice events: clients added, payments received
    and payments still outstanding.
    """
    clients_by_id = {c.id: c for c in clients}
    events: List[Activity] = []

    for client in clients_by_id.values():
        events.append(Activity(
            type="client",
            title=f"New client added: {client.name}",
            subtitle=f"Services: {_service_labels(client)}",
            timestamp=client.created_at,
            client_id=client.id,
        ))

    for payment in payments:
        client = clients_by_id.get(payment.client_id)
        client_name = client.name if client else UNKNOWN_CLIENT
        subtitle = f"{payment.service_name} fee - {format_inr(payment.fee_amount)}"

        if payment.status == PaymentStatus.PAID:
            events.append(Activity(
                type="payment",
                title=f"Payment received from {client_name}",
                subtitle=subtitle,
                timestamp=payment.payment_date or payment.created_at,
                client_id=payment.client_id,
            ))
        else:
            events.append(Activity(
                type="outstanding",
                title=f"Payment pending: {client_name}",
                subtitle=subtitle,
                timestamp=payment.created_at,
                client_id=payment.client_id,
            ))

    events.sort(key=lambda e: epoch_if_missing(e.timestamp), reverse=True)
    return events[:limit]
