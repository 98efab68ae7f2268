from datetime import datetime
from decimal import Decimal

import pytest

from app.core.exceptions import ValidationError
from app.models.client import Client
from app.models.enums import ClientType, PaymentStatus
from app.models.payment import Payment
from app.services.report_service import build_report, export_report_csv, report_filename

NOW = datetime(2024, 3, 15, 10, 0)

CLIENTS = [
    Client(id=1, name="Raj Enterprises", client_type=ClientType.BUSINESS, contact_number="1", services=["gst", "tds"]),
    Client(id=2, name="Priya Textiles", client_type=ClientType.PARTNERSHIP, contact_number="2"),
]


def payment(id, client_id, service, amount, status, payment_date=None, created_at=datetime(2024, 3, 1)):
    return Payment(
        id=id,
        client_id=client_id,
        service_name=service,
        fee_amount=Decimal(amount),
        invoice_number=f"INV-{id:06d}",
        status=status,
        payment_date=payment_date,
        created_at=created_at,
    )


PAYMENTS = [
    payment(1, 1, "GST Filing", "5000", PaymentStatus.PAID, datetime(2024, 3, 2)),
    payment(2, 2, "IT Return Filing", "2000", PaymentStatus.PAID, datetime(2024, 2, 10)),
    payment(3, 1, "GST Filing", "1000", PaymentStatus.PAID, datetime(2023, 12, 1)),
    payment(4, 2, "GST Filing", "3500", PaymentStatus.UNPAID),
    payment(5, 99, "Audit Submission", "1500", PaymentStatus.PARTIALLY_PAID),
]


def report(report_type, date_range="all"):
    return build_report(report_type, date_range, CLIENTS, PAYMENTS, NOW)


@pytest.mark.parametrize(
    "date_range, expected_ids",
    [
        ("current_month", [1]),
        ("last_month", [2]),
        ("current_year", [1, 2]),
        ("last_year", [3]),
        ("all", [1, 2, 3]),
    ],
)
def test_revenue_date_ranges(date_range, expected_ids):
    assert [r.payment_id for r in report("revenue", date_range).rows] == expected_ids


def test_revenue_totals():
    totals = report("revenue", "current_year").totals
    assert totals.count == 2
    assert totals.total == Decimal("7000")
    assert totals.average == Decimal("3500.00")


def test_revenue_falls_back_to_created_at():
    undated = payment(6, 1, "TDS Return", "800", PaymentStatus.PAID, created_at=datetime(2024, 3, 10))
    result = build_report("revenue", "current_month", CLIENTS, [undated], NOW)
    assert [r.payment_id for r in result.rows] == [6]


def test_outstanding_report():
    result = report("outstanding")

    assert [r.payment_id for r in result.rows] == [4, 5]
    assert result.rows[1].client_name == "Unknown"
    assert result.totals.total == Decimal("5000")


def test_clients_report():
    rows = report("clients").rows

    assert [r.client_name for r in rows] == ["Raj Enterprises", "Priya Textiles"]
    assert rows[0].paid_amount == Decimal("6000")
    assert rows[0].total_payments == 2
    assert rows[0].services_count == 2
    assert rows[1].unpaid_amount == Decimal("3500")


def test_services_report():
    rows = report("services").rows

    assert rows[0].service_name == "GST Filing"
    assert rows[0].count == 3
    assert rows[0].revenue == Decimal("9500")
    assert rows[0].paid == Decimal("6000")
    assert rows[0].unpaid == Decimal("3500")


def test_empty_report_has_zero_average():
    result = build_report("outstanding", "all", [], [], NOW)
    assert result.rows == []
    assert result.totals.average == Decimal("0")


def test_unknown_report_type_and_range():
    with pytest.raises(ValidationError):
        report("profit")
    with pytest.raises(ValidationError):
        report("revenue", "next_decade")


def test_csv_export():
    result = report("revenue", "current_year")
    lines = export_report_csv(result).splitlines()

    assert lines[0] == '"Client","Service","Amount","Payment Date","Invoice Number"'
    assert lines[1] == '"Raj Enterprises","GST Filing","5000","02/03/2024","INV-000001"'
    assert len(lines) == 3
    assert report_filename(result) == "revenue-report-current_year.csv"


def test_csv_outstanding_undated_rows():
    result = build_report("outstanding", "all", CLIENTS, [payment(4, 2, "GST", "10", PaymentStatus.UNPAID, created_at=None)], NOW)
    assert export_report_csv(result).splitlines()[1] == '"Priya Textiles","GST","10","Not set","INV-000004"'


def test_reports_api(client, make_client):
    raj = make_client()
    client.post("/api/payments", json={"clientId": raj["id"], "serviceName": "GST Filing", "feeAmount": 3500})

    response = client.get("/api/reports/outstanding", params={"range": "all"})
    assert response.status_code == 200
    data = response.json()
    assert data["reportType"] == "outstanding"
    assert data["totals"] == {"count": 1, "total": 3500, "average": 3500}
    assert data["rows"][0]["clientName"] == "Raj Enterprises"


def test_reports_api_rejects_unknown_type(client):
    response = client.get("/api/reports/profit")
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_report_export_api(client, make_client):
    raj = make_client()
    client.post("/api/payments", json={"clientId": raj["id"], "serviceName": "GST Filing", "feeAmount": 3500})

    response = client.get("/api/reports/services/export", params={"range": "all"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"] == 'attachment; filename="services-report-all.csv"'
    assert response.text.splitlines()[1] == '"GST Filing","1","3500.00","0","3500.00"'
