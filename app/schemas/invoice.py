"""
app/schemas/invoice.py

Purpose: Fields printed on an invoice document
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.models.base import CamelModel


class InvoiceData(CamelModel):
    invoice_number: str
    client_name: str
    client_address: Optional[str] = None
    service_name: str
    amount: Decimal
    payment_date: Optional[datetime] = None
    firm_name: str
    firm_address: Optional[str] = None
    firm_gstin: Optional[str] = None
