"""
app/api/payments.py

Purpose: Payment endpoints

- List, create, update, delete fee payments
- Per-client payment listing
- Invoice download (HTML)
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from fastapi.responses import HTMLResponse

from app.core.exceptions import ResourceNotFoundError
from app.core.logging import get_logger, LogContext
from app.db.memory import MemStorage, get_storage
from app.models.payment import Payment
from app.schemas.payment import PaymentCreate, PaymentUpdate
from app.services.invoice_service import build_invoice_data, invoice_filename, render_invoice_html

logger = get_logger(__name__)
router = APIRouter()


@router.get("/payments", response_model=List[Payment])
async def list_payments(storage: MemStorage = Depends(get_storage)):
    return storage.get_all_payments()


@router.get("/clients/{client_id}/payments", response_model=List[Payment])
async def list_client_payments(client_id: int, storage: MemStorage = Depends(get_storage)):
    """Payments recorded against a client, including clients since deleted."""
    return storage.get_payments_by_client_id(client_id)


@router.post("/payments", response_model=Payment, status_code=201)
async def create_payment(payload: PaymentCreate, storage: MemStorage = Depends(get_storage)):
    """
    Records a fee. A blank invoiceNumber is replaced by INV-<zero-padded id>.
    """
    return storage.create_payment(payload)


@router.put("/payments/{payment_id}", response_model=Payment)
async def update_payment(
    payment_id: int,
    payload: PaymentUpdate,
    storage: MemStorage = Depends(get_storage),
):
    payment = storage.update_payment(payment_id, payload)
    if payment is None:
        raise ResourceNotFoundError.for_entity("Payment", paymentId=payment_id)
    return payment


@router.delete("/payments/{payment_id}", status_code=204)
async def delete_payment(payment_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.delete_payment(payment_id):
        raise ResourceNotFoundError.for_entity("Payment", paymentId=payment_id)
    return Response(status_code=204)


@router.get("/payments/{payment_id}/invoice", response_class=HTMLResponse)
async def download_invoice(payment_id: int, storage: MemStorage = Depends(get_storage)):
    """
    Invoice for a payment as a standalone HTML attachment.
    """
    payment = storage.get_payment(payment_id)
    if payment is None:
        raise ResourceNotFoundError.for_entity("Payment", paymentId=payment_id)

    data = build_invoice_data(payment, storage.get_client(payment.client_id), storage.get_firm_settings())

    with LogContext(entity="payment", entity_id=payment_id, client_id=payment.client_id):
        logger.info(f"Invoice generated: {data.invoice_number}")

    return HTMLResponse(
        content=render_invoice_html(data),
        headers={"Content-Disposition": f'attachment; filename="{invoice_filename(data)}"'},
    )
