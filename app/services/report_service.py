"""
app/services/report_service.py

Purpose: Practice reports and CSV export

- Revenue (paid, within a date range)
- Outstanding (unpaid and partially paid)
- Per-client and per-service breakdowns
- CSV rendering for download
"""

import csv
import io
from collections import OrderedDict
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List

from app.core.exceptions import ValidationError
from app.core.logging import get_logger
from app.models.client import Client
from app.models.enums import PaymentStatus
from app.models.payment import Payment
from app.schemas.report import (
    ClientReportRow,
    PaymentReportRow,
    Report,
    ReportTotals,
    ServiceReportRow,
)
from utils.constants import DATE_NOT_SET, REPORT_CSV_HEADERS, REPORT_TYPES, UNKNOWN_CLIENT
from utils.time_utils import DATE_RANGES, date_range_filter, format_timestamp

logger = get_logger(__name__)

ZERO = Decimal("0")


def _totals(count: int, total: Decimal) -> ReportTotals:
    average = (total / count).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP) if count else ZERO
    return ReportTotals(count=count, total=total, average=average)


def _payment_row(payment: Payment, clients: Dict[int, Client]) -> PaymentReportRow:
    client = clients.get(payment.client_id)
    return PaymentReportRow(
        payment_id=payment.id,
        client_id=payment.client_id,
        client_name=client.name if client else UNKNOWN_CLIENT,
        service_name=payment.service_name,
        amount=payment.fee_amount,
        invoice_number=payment.invoice_number,
        payment_date=payment.payment_date,
        created_at=payment.created_at,
    )


def _revenue_rows(payments, clients, in_range) -> List[PaymentReportRow]:
    rows = []
    for payment in payments:
        if payment.status != PaymentStatus.PAID:
            continue
        # Undated payments fall back to when they were recorded
        when = payment.payment_date or payment.created_at
        if when is None or not in_range(when):
            continue
        rows.append(_payment_row(payment, clients))
    return sorted(rows, key=lambda r: r.amount, reverse=True)


def _outstanding_rows(payments, clients) -> List[PaymentReportRow]:
    rows = [_payment_row(p, clients) for p in payments if p.is_outstanding]
    return sorted(rows, key=lambda r: r.amount, reverse=True)


def _client_rows(payments, clients) -> List[ClientReportRow]:
    rows = []
    for client in clients.values():
        client_payments = [p for p in payments if p.client_id == client.id]
        rows.append(ClientReportRow(
            client_id=client.id,
            client_name=client.name,
            total_payments=len(client_payments),
            paid_amount=sum((p.fee_amount for p in client_payments if p.status == PaymentStatus.PAID), ZERO),
            unpaid_amount=sum((p.fee_amount for p in client_payments if p.is_outstanding), ZERO),
            services_count=len(client.services or []),
        ))
    return sorted(rows, key=lambda r: r.paid_amount, reverse=True)


def _service_rows(payments) -> List[ServiceReportRow]:
    buckets: "OrderedDict[str, dict]" = OrderedDict()
    for payment in payments:
        bucket = buckets.setdefault(
            payment.service_name,
            {"count": 0, "revenue": ZERO, "paid": ZERO, "unpaid": ZERO},
        )
        bucket["count"] += 1
        bucket["revenue"] += payment.fee_amount
        if payment.status == PaymentStatus.PAID:
            bucket["paid"] += payment.fee_amount
        else:
            bucket["unpaid"] += payment.fee_amount

    rows = [ServiceReportRow(service_name=name, **values) for name, values in buckets.items()]
    return sorted(rows, key=lambda r: r.revenue, reverse=True)


def build_report(
    report_type: str,
    date_range: str,
    clients: Iterable[Client],
    payments: Iterable[Payment],
    now: datetime,
) -> Report:
    """
    Builds one of the practice reports.

    The date range filters the revenue report by payment date; the other
    reports cover every record.

    Args:
        report_type: revenue | outstanding | clients | services
        date_range: current_month | last_month | current_year | last_year | all
        clients: All clients
        payments: All payments
        now: Reference time for the date range

    Returns:
        Report with rows and totals

    Raises:
        ValidationError: If the report type or range is unknown
    """
    if report_type not in REPORT_TYPES:
        raise ValidationError(
            f"Unknown report type: {report_type}",
            details={"allowed": list(REPORT_TYPES)},
        )
    if date_range not in DATE_RANGES:
        raise ValidationError(
            f"Unknown date range: {date_range}",
            details={"allowed": list(DATE_RANGES)},
        )

    clients_by_id = {c.id: c for c in clients}
    payments = list(payments)

    if report_type == "revenue":
        rows = _revenue_rows(payments, clients_by_id, date_range_filter(date_range, now))
        totals = _totals(len(rows), sum((r.amount for r in rows), ZERO))
    elif report_type == "outstanding":
        rows = _outstanding_rows(payments, clients_by_id)
        totals = _totals(len(rows), sum((r.amount for r in rows), ZERO))
    elif report_type == "clients":
        rows = _client_rows(payments, clients_by_id)
        totals = _totals(len(rows), sum((r.paid_amount for r in rows), ZERO))
    else:
        rows = _service_rows(payments)
        totals = _totals(len(rows), sum((r.revenue for r in rows), ZERO))

    logger.info(f"Report built: {report_type}/{date_range} ({len(rows)} rows)")
    return Report(report_type=report_type, date_range=date_range, rows=rows, totals=totals)


def _csv_values(report: Report, row) -> List[str]:
    if report.report_type == "revenue":
        return [row.client_name, row.service_name, str(row.amount),
                format_timestamp(row.payment_date, default=DATE_NOT_SET), row.invoice_number]
    if report.report_type == "outstanding":
        return [row.client_name, row.service_name, str(row.amount),
                format_timestamp(row.created_at, default=DATE_NOT_SET), row.invoice_number]
    if report.report_type == "clients":
        return [row.client_name, str(row.services_count), str(row.paid_amount),
                str(row.unpaid_amount), str(row.total_payments)]
    return [row.service_name, str(row.count), str(row.revenue), str(row.paid), str(row.unpaid)]


def export_report_csv(report: Report) -> str:
    """
    Renders a report as CSV text with every value quoted.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(REPORT_CSV_HEADERS[report.report_type])
    for row in report.rows:
        writer.writerow(_csv_values(report, row))
    return buffer.getvalue()


def report_filename(report: Report) -> str:
    return f"{report.report_type}-report-{report.date_range}.csv"
