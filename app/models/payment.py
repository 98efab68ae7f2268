"""
app/models/payment.py

Purpose: Fee payment / invoice record

- One billed service for a client
- Amount held as a fixed-point Decimal, serialized as a decimal string
- Invoice number generated from the id when not supplied
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.models.base import CamelModel
from app.models.enums import OUTSTANDING_STATUSES, PaymentMode, PaymentStatus


class Payment(CamelModel):
    id: int
    client_id: int
    service_name: str
    fee_amount: Decimal
    invoice_number: str
    status: PaymentStatus = PaymentStatus.UNPAID
    payment_mode: Optional[PaymentMode] = None
    payment_date: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def is_outstanding(self) -> bool:
        return self.status in OUTSTANDING_STATUSES
