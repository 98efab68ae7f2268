"""
app/db/seed.py

Purpose: Demo data for local runs

- Populates an empty store with a handful of clients, KYC, payments and
  reminders relative to "now"
- Enabled with SEED_DEMO_DATA=true
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from app.core.logging import get_logger
from app.models.enums import ClientType, PaymentMode, PaymentStatus
from app.schemas.client import ClientCreate
from app.schemas.kyc import BankDetailsIn, KycCreate
from app.schemas.payment import PaymentCreate
from app.schemas.reminder import ReminderCreate
from utils.constants import COMPLIANCE_SERVICES
from utils.time_utils import utcnow

logger = get_logger(__name__)

DEMO_CLIENTS = [
    ("Raj Enterprises", ClientType.BUSINESS, "+91 98200 11223", "info@raj.com", ["gst", "it_filing"]),
    ("Priya Textiles", ClientType.PARTNERSHIP, "+91 98330 44556", "accounts@priyatextiles.in", ["it_filing", "gst"]),
    ("Mumbai Motors Pvt Ltd", ClientType.PVTLTD, "+91 99870 77889", None, ["tds", "audit", "roc"]),
    ("Anita Deshpande", ClientType.INDIVIDUAL, "+91 90040 12345", "anita.d@example.com", ["it_filing"]),
]


def seed_demo_data(storage, now: Optional[datetime] = None):
    """
    Fills the store with sample records. Skips if clients already exist.

    Args:
        storage: MemStorage instance
        now: Reference time for due and payment dates
    """
    if storage.clients:
        logger.warning("Store already has clients; demo seed skipped")
        return

    now = now or utcnow()

    clients = [
        storage.create_client(ClientCreate(
            name=name,
            client_type=client_type,
            contact_number=phone,
            email=email,
            state="maharashtra",
            services=services,
        ))
        for name, client_type, phone, email, services in DEMO_CLIENTS
    ]

    storage.create_kyc_document(KycCreate(
        client_id=clients[0].id,
        pan="AABCR1234K",
        gstin="27AABCR1234K1Z5",
        bank_details=BankDetailsIn(account_number="50100012345678", ifsc="HDFC0001234", bank_name="HDFC Bank"),
        gst_portal_username="rajent_gst",
    ))

    fees = [
        (clients[0], COMPLIANCE_SERVICES[1], "5000.00", PaymentStatus.PAID, now - timedelta(days=1)),
        (clients[1], COMPLIANCE_SERVICES[0], "3500.00", PaymentStatus.UNPAID, None),
        (clients[2], COMPLIANCE_SERVICES[4], "3500.00", PaymentStatus.PARTIALLY_PAID, None),
        (clients[2], COMPLIANCE_SERVICES[5], "15000.00", PaymentStatus.UNPAID, None),
        (clients[3], COMPLIANCE_SERVICES[0], "2500.00", PaymentStatus.PAID, now - timedelta(days=40)),
    ]
    for client, service, amount, status, paid_on in fees:
        storage.create_payment(PaymentCreate(
            client_id=client.id,
            service_name=service,
            fee_amount=Decimal(amount),
            status=status,
            payment_mode=PaymentMode.UPI if paid_on else None,
            payment_date=paid_on,
        ))

    dues = [
        (clients[0], COMPLIANCE_SERVICES[3], 2),
        (clients[1], COMPLIANCE_SERVICES[0], 6),
        (clients[2], COMPLIANCE_SERVICES[4], -3),
        (clients[3], COMPLIANCE_SERVICES[0], 30),
    ]
    for client, service, days_ahead in dues:
        due = now + timedelta(days=days_ahead)
        storage.create_reminder(ReminderCreate(
            client_id=client.id,
            service_name=service,
            due_date=due,
            reminder_date=due - timedelta(days=3),
        ))

    logger.info("Demo data seeded", extra={"counts": storage.stats()})
