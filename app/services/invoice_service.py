"""
app/services/invoice_service.py

Purpose: Invoice documents

- Collects invoice fields from payment, client and firm profile
- Renders a standalone HTML invoice (no PDF engine involved)
"""

import html
from typing import Optional

from app.core.exceptions import ResourceNotFoundError
from app.core.logging import get_logger
from app.models.client import Client
from app.models.firm import FirmSettings
from app.models.payment import Payment
from app.schemas.invoice import InvoiceData
from utils.constants import INVOICE_HTML_TEMPLATE
from utils.format_utils import format_gstin, format_inr
from utils.time_utils import format_timestamp

logger = get_logger(__name__)


def build_invoice_data(payment: Payment, client: Optional[Client], firm: FirmSettings) -> InvoiceData:
    """
    Assembles the fields printed on an invoice.

    Raises:
        ResourceNotFoundError: If the payment's client no longer exists
    """
    if client is None:
        logger.warning(
            f"Invoice requested for payment {payment.id} with missing client",
            extra={"entity": "payment", "entity_id": payment.id, "client_id": payment.client_id},
        )
        raise ResourceNotFoundError(
            "Client not found for this payment",
            details={"paymentId": payment.id, "clientId": payment.client_id},
        )

    return InvoiceData(
        invoice_number=payment.invoice_number,
        client_name=client.name,
        client_address=client.address,
        service_name=payment.service_name,
        amount=payment.fee_amount,
        payment_date=payment.payment_date,
        firm_name=firm.firm_name,
        firm_address=firm.address,
        firm_gstin=firm.gstin,
    )


def render_invoice_html(data: InvoiceData) -> str:
    """
    Renders the invoice as an HTML document. All values are escaped.
    """
    fields = {
        "invoice_number": data.invoice_number,
        "firm_name": data.firm_name,
        "firm_address": data.firm_address or "",
        "firm_gstin": format_gstin(data.firm_gstin) if data.firm_gstin else "N/A",
        "client_name": data.client_name,
        "client_address": data.client_address or "",
        "service_name": data.service_name,
        "payment_date": format_timestamp(data.payment_date),
        "amount": format_inr(data.amount),
    }
    return INVOICE_HTML_TEMPLATE.format(**{k: html.escape(v) for k, v in fields.items()})


def invoice_filename(data: InvoiceData) -> str:
    return f"{data.invoice_number}.html"
