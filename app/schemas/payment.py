"""
app/schemas/payment.py

Purpose: Payment request payloads

- Blank invoice number means "generate one"
- Status defaults to unpaid
"""

from typing import Optional

from pydantic import Field, field_validator

from app.models.base import CamelModel
from app.models.enums import PaymentMode, PaymentStatus
from app.schemas.base import Money, OptionalStr, OptionalUtcDatetime, blank_to_none, reject_null


class PaymentCreate(CamelModel):
    """Payload for POST /payments."""

    client_id: int
    service_name: str = Field(..., min_length=1)
    fee_amount: Money
    invoice_number: OptionalStr = None
    status: PaymentStatus = PaymentStatus.UNPAID
    payment_mode: Optional[PaymentMode] = None
    payment_date: OptionalUtcDatetime = None
    notes: OptionalStr = None

    @field_validator("payment_mode", mode="before")
    @classmethod
    def blank_payment_mode(cls, v):
        return blank_to_none(v)


class PaymentUpdate(CamelModel):
    """Payload for PUT /payments/{id}; only supplied fields change."""

    client_id: Optional[int] = None
    service_name: Optional[str] = Field(None, min_length=1)
    fee_amount: Optional[Money] = None
    invoice_number: Optional[str] = Field(None, min_length=1)
    status: Optional[PaymentStatus] = None
    payment_mode: Optional[PaymentMode] = None
    payment_date: OptionalUtcDatetime = None
    notes: OptionalStr = None

    @field_validator("payment_mode", mode="before")
    @classmethod
    def blank_payment_mode(cls, v):
        return blank_to_none(v)

    @field_validator("client_id", "service_name", "fee_amount", "invoice_number", "status")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)
