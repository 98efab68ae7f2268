"""
app/models/firm.py

Purpose: Firm profile singleton (always id 1)
"""

from typing import Optional

from app.models.base import CamelModel


class FirmSettings(CamelModel):
    id: int = 1
    firm_name: str
    contact_person: str
    contact_number: str
    email: str
    address: Optional[str] = None
    gstin: Optional[str] = None
    logo: Optional[str] = None
