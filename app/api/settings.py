"""
app/api/settings.py

Purpose: Firm profile endpoints (single record)
"""

from fastapi import APIRouter, Depends

from app.db.memory import MemStorage, get_storage
from app.models.firm import FirmSettings
from app.schemas.firm import FirmSettingsUpdate

router = APIRouter(prefix="/settings")


@router.get("", response_model=FirmSettings)
async def get_settings(storage: MemStorage = Depends(get_storage)):
    return storage.get_firm_settings()


@router.put("", response_model=FirmSettings)
async def update_settings(payload: FirmSettingsUpdate, storage: MemStorage = Depends(get_storage)):
    """Replaces the firm profile; omitted optional fields are cleared."""
    return storage.update_firm_settings(payload)
