"""
app/api/kyc.py

Purpose: KYC endpoints (nested under a client)

- One KYC record per client; create, fetch, partial update
- Completion status for the KYC progress bar
"""

from fastapi import APIRouter, Depends

from app.core.exceptions import ResourceNotFoundError
from app.db.memory import MemStorage, get_storage
from app.models.kyc import KycDocument
from app.schemas.kyc import KycCompletion, KycCreate, KycFields
from app.services.kyc_service import kyc_completion

router = APIRouter(prefix="/clients/{client_id}/kyc")


@router.get("", response_model=KycDocument)
async def get_kyc(client_id: int, storage: MemStorage = Depends(get_storage)):
    kyc = storage.get_kyc_by_client_id(client_id)
    if kyc is None:
        raise ResourceNotFoundError.for_entity("KYC", clientId=client_id)
    return kyc


@router.post("", response_model=KycDocument, status_code=201)
async def create_kyc(
    client_id: int,
    payload: KycFields,
    storage: MemStorage = Depends(get_storage),
):
    """
    Stores KYC for the client in the URL. A clientId in the body is ignored.
    """
    return storage.create_kyc_document(KycCreate(client_id=client_id, **payload.model_dump()))


@router.put("", response_model=KycDocument)
async def update_kyc(
    client_id: int,
    payload: KycFields,
    storage: MemStorage = Depends(get_storage),
):
    kyc = storage.update_kyc_document(client_id, payload)
    if kyc is None:
        raise ResourceNotFoundError.for_entity("KYC", clientId=client_id)
    return kyc


@router.get("/status", response_model=KycCompletion)
async def get_kyc_status(client_id: int, storage: MemStorage = Depends(get_storage)):
    """Tracked KYC fields filled in; all zero when no KYC exists yet."""
    return kyc_completion(storage.get_kyc_by_client_id(client_id))
