"""
app/db/memory.py

Purpose: In-memory entity store

- One dict per entity type, keyed by integer id
- Per-entity counters starting at 1; ids are never reused
- Misses return None / False instead of raising
- Process-wide instance with startup/shutdown lifecycle
- Nothing survives a restart
"""

from datetime import datetime
from typing import Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel

from app.core.config import settings
from app.core.logging import get_logger, LogContext
from app.models.client import Client
from app.models.firm import FirmSettings
from app.models.kyc import KycDocument
from app.models.payment import Payment
from app.models.reminder import Reminder
from app.models.user import User
from app.schemas.client import ClientCreate, ClientUpdate
from app.schemas.dashboard import DashboardMetrics
from app.schemas.firm import FirmSettingsUpdate
from app.schemas.kyc import KycCreate, KycFields
from app.schemas.payment import PaymentCreate, PaymentUpdate
from app.schemas.reminder import ReminderCreate, ReminderUpdate
from app.schemas.user import UserCreate
from app.services.dashboard_service import compute_dashboard_metrics
from utils.constants import DEFAULT_FIRM_SETTINGS, FIRM_SETTINGS_ID
from utils.time_utils import epoch_if_missing, utcnow

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _merge(model: Type[RecordT], record: RecordT, changes: dict) -> RecordT:
    """Applies a partial update and re-validates the merged record."""
    return model.model_validate({**record.model_dump(), **changes})


class MemStorage:
    """
    Map-backed store for every practice entity.

    All methods are synchronous; callers on the event loop therefore see
    each operation complete without interleaving.
    """

    def __init__(
        self,
        invoice_prefix: str = "INV-",
        invoice_number_width: int = 6,
        upcoming_window_days: int = 7,
    ):
        self.invoice_prefix = invoice_prefix
        self.invoice_number_width = invoice_number_width
        self.upcoming_window_days = upcoming_window_days

        self.users: Dict[int, User] = {}
        self.clients: Dict[int, Client] = {}
        self.kyc_documents: Dict[int, KycDocument] = {}
        self.payments: Dict[int, Payment] = {}
        self.reminders: Dict[int, Reminder] = {}
        self.firm_settings: FirmSettings = FirmSettings(id=FIRM_SETTINGS_ID, **DEFAULT_FIRM_SETTINGS)

        self._next_ids: Dict[str, int] = {
            "user": 1,
            "client": 1,
            "kyc": 1,
            "payment": 1,
            "reminder": 1,
        }

    def _next_id(self, entity: str) -> int:
        next_id = self._next_ids[entity]
        self._next_ids[entity] = next_id + 1
        return next_id

    # ==============================================
    # USERS
    # ==============================================

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    def create_user(self, payload: UserCreate) -> User:
        user = User(id=self._next_id("user"), **payload.model_dump())
        self.users[user.id] = user
        logger.info("User created", extra={"entity": "user", "entity_id": user.id})
        return user

    # ==============================================
    # CLIENTS
    # ==============================================

    def get_all_clients(self) -> List[Client]:
        """All clients, newest first."""
        return sorted(
            self.clients.values(),
            key=lambda c: epoch_if_missing(c.created_at),
            reverse=True,
        )

    def get_client(self, client_id: int) -> Optional[Client]:
        return self.clients.get(client_id)

    def create_client(self, payload: ClientCreate) -> Client:
        client = Client(
            id=self._next_id("client"),
            created_at=utcnow(),
            **payload.model_dump(),
        )
        self.clients[client.id] = client
        with LogContext(entity="client", entity_id=client.id):
            logger.info(f"Client created: {client.name}")
        return client

    def update_client(self, client_id: int, payload: ClientUpdate) -> Optional[Client]:
        existing = self.clients.get(client_id)
        if existing is None:
            return None

        updated = _merge(Client, existing, payload.model_dump(exclude_unset=True))
        self.clients[client_id] = updated
        with LogContext(entity="client", entity_id=client_id):
            logger.info("Client updated")
        return updated

    def delete_client(self, client_id: int) -> bool:
        """
        Removes the client only. KYC, payments and reminders referencing
        it stay in place and remain retrievable by client id.
        """
        removed = self.clients.pop(client_id, None) is not None
        if removed:
            with LogContext(entity="client", entity_id=client_id):
                logger.info("Client deleted")
        return removed

    def search_clients(self, query: str) -> List[Client]:
        """
        Substring search: name, client type and email ignore case;
        contact number is matched exactly as typed.
        """
        lower_query = query.lower()
        return [
            client for client in self.clients.values()
            if lower_query in client.name.lower()
            or query in client.contact_number
            or (client.email is not None and lower_query in client.email.lower())
            or lower_query in client.client_type.value.lower()
        ]

    # ==============================================
    # KYC DOCUMENTS
    # ==============================================

    def get_kyc_by_client_id(self, client_id: int) -> Optional[KycDocument]:
        """First KYC record for the client, if any."""
        return next((k for k in self.kyc_documents.values() if k.client_id == client_id), None)

    def create_kyc_document(self, payload: KycCreate) -> KycDocument:
        kyc = KycDocument.model_validate({"id": self._next_id("kyc"), **payload.model_dump()})
        self.kyc_documents[kyc.id] = kyc
        with LogContext(entity="kyc", entity_id=kyc.id, client_id=kyc.client_id):
            logger.info("KYC document created")
        return kyc

    def update_kyc_document(self, client_id: int, payload: KycFields) -> Optional[KycDocument]:
        existing = self.get_kyc_by_client_id(client_id)
        if existing is None:
            return None

        updated = _merge(KycDocument, existing, payload.model_dump(exclude_unset=True))
        self.kyc_documents[existing.id] = updated
        with LogContext(entity="kyc", entity_id=existing.id, client_id=client_id):
            logger.info("KYC document updated")
        return updated

    # ==============================================
    # PAYMENTS
    # ==============================================

    def get_all_payments(self) -> List[Payment]:
        """All payments, newest first."""
        return sorted(
            self.payments.values(),
            key=lambda p: epoch_if_missing(p.created_at),
            reverse=True,
        )

    def get_payment(self, payment_id: int) -> Optional[Payment]:
        return self.payments.get(payment_id)

    def get_payments_by_client_id(self, client_id: int) -> List[Payment]:
        return [p for p in self.payments.values() if p.client_id == client_id]

    def format_invoice_number(self, payment_id: int) -> str:
        """INV-000042 style invoice number for a payment id."""
        return f"{self.invoice_prefix}{str(payment_id).zfill(self.invoice_number_width)}"

    def create_payment(self, payload: PaymentCreate) -> Payment:
        payment_id = self._next_id("payment")
        data = payload.model_dump()
        data["invoice_number"] = data.get("invoice_number") or self.format_invoice_number(payment_id)

        payment = Payment(id=payment_id, created_at=utcnow(), **data)
        self.payments[payment.id] = payment
        with LogContext(entity="payment", entity_id=payment.id, client_id=payment.client_id):
            logger.info(f"Payment created: {payment.invoice_number}")
        return payment

    def update_payment(self, payment_id: int, payload: PaymentUpdate) -> Optional[Payment]:
        existing = self.payments.get(payment_id)
        if existing is None:
            return None

        updated = _merge(Payment, existing, payload.model_dump(exclude_unset=True))
        self.payments[payment_id] = updated
        with LogContext(entity="payment", entity_id=payment_id, client_id=updated.client_id):
            logger.info(f"Payment updated: status={updated.status.value}")
        return updated

    def delete_payment(self, payment_id: int) -> bool:
        removed = self.payments.pop(payment_id, None) is not None
        if removed:
            with LogContext(entity="payment", entity_id=payment_id):
                logger.info("Payment deleted")
        return removed

    # ==============================================
    # REMINDERS
    # ==============================================

    def get_all_reminders(self) -> List[Reminder]:
        """All reminders, earliest due date first."""
        return sorted(self.reminders.values(), key=lambda r: r.due_date)

    def get_reminder(self, reminder_id: int) -> Optional[Reminder]:
        return self.reminders.get(reminder_id)

    def get_reminders_by_client_id(self, client_id: int) -> List[Reminder]:
        return [r for r in self.reminders.values() if r.client_id == client_id]

    def create_reminder(self, payload: ReminderCreate) -> Reminder:
        reminder = Reminder(id=self._next_id("reminder"), **payload.model_dump())
        self.reminders[reminder.id] = reminder
        with LogContext(entity="reminder", entity_id=reminder.id, client_id=reminder.client_id):
            logger.info(f"Reminder created: {reminder.service_name} due {reminder.due_date:%Y-%m-%d}")
        return reminder

    def update_reminder(self, reminder_id: int, payload: ReminderUpdate) -> Optional[Reminder]:
        existing = self.reminders.get(reminder_id)
        if existing is None:
            return None

        updated = _merge(Reminder, existing, payload.model_dump(exclude_unset=True))
        self.reminders[reminder_id] = updated
        with LogContext(entity="reminder", entity_id=reminder_id, client_id=updated.client_id):
            logger.info(f"Reminder updated: status={updated.status.value}")
        return updated

    def delete_reminder(self, reminder_id: int) -> bool:
        removed = self.reminders.pop(reminder_id, None) is not None
        if removed:
            with LogContext(entity="reminder", entity_id=reminder_id):
                logger.info("Reminder deleted")
        return removed

    # ==============================================
    # FIRM SETTINGS
    # ==============================================

    def get_firm_settings(self) -> FirmSettings:
        return self.firm_settings

    def update_firm_settings(self, payload: FirmSettingsUpdate) -> FirmSettings:
        self.firm_settings = _merge(
            FirmSettings,
            self.firm_settings,
            {**payload.model_dump(), "id": FIRM_SETTINGS_ID},
        )
        logger.info("Firm settings updated", extra={"entity": "firm_settings"})
        return self.firm_settings

    # ==============================================
    # AGGREGATES
    # ==============================================

    def get_dashboard_metrics(self, now: Optional[datetime] = None) -> DashboardMetrics:
        """Recomputed from current contents on every call."""
        return compute_dashboard_metrics(
            clients=list(self.clients.values()),
            reminders=list(self.reminders.values()),
            payments=list(self.payments.values()),
            now=now or utcnow(),
            window_days=self.upcoming_window_days,
        )

    def stats(self) -> Dict[str, int]:
        """Record counts per entity, for health reporting."""
        return {
            "users": len(self.users),
            "clients": len(self.clients),
            "kyc_documents": len(self.kyc_documents),
            "payments": len(self.payments),
            "reminders": len(self.reminders),
        }


# Global store instance
_storage: Optional[MemStorage] = None


def _build_storage() -> MemStorage:
    return MemStorage(
        invoice_prefix=settings.INVOICE_PREFIX,
        invoice_number_width=settings.INVOICE_NUMBER_WIDTH,
        upcoming_window_days=settings.UPCOMING_WINDOW_DAYS,
    )


def init_storage():
    """
    Creates the process-wide store.
    Called during application startup.
    """
    global _storage

    if _storage is not None:
        logger.warning("Store already initialized")
        return

    _storage = _build_storage()
    logger.info("In-memory store initialized")

    if settings.SEED_DEMO_DATA:
        from app.db.seed import seed_demo_data
        seed_demo_data(_storage)


def close_storage():
    """
    Drops the process-wide store.
    Called during application shutdown.
    """
    global _storage

    if _storage is not None:
        logger.info("Discarding in-memory store", extra={"counts": _storage.stats()})
        _storage = None


def get_storage() -> MemStorage:
    """
    Returns the process-wide store, creating it on first use.
    Also serves as the FastAPI dependency for routes.
    """
    global _storage

    if _storage is None:
        _storage = _build_storage()
    return _storage


def reset_storage() -> MemStorage:
    """Replaces the process-wide store with an empty one."""
    global _storage

    _storage = _build_storage()
    return _storage


def check_storage_health() -> bool:
    """
    Checks that the store is initialized and readable.
    """
    try:
        if _storage is None:
            logger.error("Store not initialized")
            return False
        _storage.stats()
        return True
    except Exception as e:
        logger.error(f"Store health check failed: {str(e)}")
        return False
