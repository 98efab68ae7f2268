from datetime import datetime
from decimal import Decimal

import pytest

from app.core.exceptions import ResourceNotFoundError
from app.models.client import Client
from app.models.enums import ClientType, PaymentStatus
from app.models.firm import FirmSettings
from app.models.payment import Payment
from app.services.invoice_service import build_invoice_data, invoice_filename, render_invoice_html
from utils.constants import DEFAULT_FIRM_SETTINGS

FIRM = FirmSettings(**DEFAULT_FIRM_SETTINGS)

PAYMENT = Payment(
    id=1,
    client_id=1,
    service_name="GST Filing",
    fee_amount=Decimal("125000.00"),
    invoice_number="INV-000001",
    status=PaymentStatus.PAID,
    payment_date=datetime(2024, 3, 2),
)


def test_invoice_data():
    client = Client(id=1, name="Raj Enterprises", client_type=ClientType.BUSINESS,
                    contact_number="1", address="Andheri East, Mumbai")
    data = build_invoice_data(PAYMENT, client, FIRM)

    assert data.invoice_number == "INV-000001"
    assert data.client_name == "Raj Enterprises"
    assert data.client_address == "Andheri East, Mumbai"
    assert data.firm_name == "Sharma & Associates"
    assert data.amount == Decimal("125000.00")
    assert invoice_filename(data) == "INV-000001.html"


def test_invoice_requires_client():
    with pytest.raises(ResourceNotFoundError):
        build_invoice_data(PAYMENT, None, FIRM)


def test_rendered_invoice_is_escaped():
    client = Client(id=1, name="<b>Raj</b> & Sons", client_type=ClientType.BUSINESS, contact_number="1")
    page = render_invoice_html(build_invoice_data(PAYMENT, client, FIRM))

    assert page.startswith("<!DOCTYPE html>")
    assert "&lt;b&gt;Raj&lt;/b&gt; &amp; Sons" in page
    assert "<b>Raj</b>" not in page
    assert "Sharma &amp; Associates" in page
    assert "₹1,25,000" in page
    assert "02/03/2024" in page
    assert "Invoice #INV-000001" in page


def test_undated_invoice():
    client = Client(id=1, name="Raj", client_type=ClientType.BUSINESS, contact_number="1")
    page = render_invoice_html(build_invoice_data(PAYMENT.model_copy(update={"payment_date": None}), client, FIRM))
    assert "<strong>Date:</strong> N/A" in page


def test_invoice_download(client, make_client):
    raj = make_client()
    payment = client.post("/api/payments", json={"clientId": raj["id"], "serviceName": "GST Filing", "feeAmount": 5000}).json()

    response = client.get(f"/api/payments/{payment['id']}/invoice")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.headers["content-disposition"] == 'attachment; filename="INV-000001.html"'
    assert "Raj Enterprises" in response.text
    assert "₹5,000" in response.text


def test_invoice_for_deleted_client_is_404(client, make_client):
    raj = make_client()
    payment = client.post("/api/payments", json={"clientId": raj["id"], "serviceName": "GST Filing", "feeAmount": 5000}).json()
    client.delete(f"/api/clients/{raj['id']}")

    response = client.get(f"/api/payments/{payment['id']}/invoice")
    assert response.status_code == 404
    assert response.json()["error"] == "Client not found for this payment"
