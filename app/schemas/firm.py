"""
app/schemas/firm.py

Purpose: Firm profile payload (PUT /settings replaces the whole profile)
"""

from pydantic import Field

from app.models.base import CamelModel
from app.schemas.base import OptionalStr


class FirmSettingsUpdate(CamelModel):
    firm_name: str = Field(..., min_length=1)
    contact_person: str = Field(..., min_length=1)
    contact_number: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    address: OptionalStr = None
    gstin: OptionalStr = None
    logo: OptionalStr = None
