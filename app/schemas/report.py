"""
app/schemas/report.py

Purpose: Practice report shapes

- One row type per report
- Totals are exact Decimals, rendered as numbers
"""

from datetime import datetime
from typing import List, Optional, Union

from app.models.base import CamelModel
from app.schemas.base import Amount


class PaymentReportRow(CamelModel):
    """Row of the revenue and outstanding reports."""

    payment_id: int
    client_id: int
    client_name: str
    service_name: str
    amount: Amount
    invoice_number: str
    payment_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class ClientReportRow(CamelModel):
    client_id: int
    client_name: str
    total_payments: int
    paid_amount: Amount
    unpaid_amount: Amount
    services_count: int


class ServiceReportRow(CamelModel):
    service_name: str
    count: int
    revenue: Amount
    paid: Amount
    unpaid: Amount


class ReportTotals(CamelModel):
    count: int
    total: Amount
    average: Amount


class Report(CamelModel):
    report_type: str
    date_range: str
    rows: List[Union[PaymentReportRow, ClientReportRow, ServiceReportRow]]
    totals: ReportTotals
