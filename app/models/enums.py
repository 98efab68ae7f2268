"""
app/models/enums.py

Purpose: Status and category enums

- Single source of truth for allowed values
- str-based so records compare and serialize as plain strings
"""

from enum import Enum


class ClientType(str, Enum):
    INDIVIDUAL = "individual"
    BUSINESS = "business"
    PARTNERSHIP = "partnership"
    PVTLTD = "pvtltd"
    OTHERS = "others"


class ClientStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING_DOCS = "pending_docs"
    PAYMENT_DUE = "payment_due"


class PaymentStatus(str, Enum):
    PAID = "paid"
    UNPAID = "unpaid"
    PARTIALLY_PAID = "partially_paid"


# Statuses that still have money to collect
OUTSTANDING_STATUSES = (PaymentStatus.UNPAID, PaymentStatus.PARTIALLY_PAID)


class PaymentMode(str, Enum):
    CASH = "cash"
    UPI = "upi"
    BANK = "bank"
    CHEQUE = "cheque"


class ReminderStatus(str, Enum):
    """
    Reminder lifecycle. OVERDUE is accepted on input but the server
    never writes it; overdue-ness is derived from the due date.
    """
    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class UrgencyTier(str, Enum):
    """Display buckets for days-until-due."""
    URGENT = "urgent"
    SOON = "soon"
    LOW = "low"
    INFO = "info"
    NEUTRAL = "neutral"
