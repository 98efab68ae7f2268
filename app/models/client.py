"""
app/models/client.py

Purpose: Client record

- A practice client (person or entity)
- Services engaged, contact details and account status
- Deleting a client leaves its KYC, payments and reminders in place
"""

from datetime import datetime
from typing import List, Optional

from app.models.base import CamelModel
from app.models.enums import ClientStatus, ClientType


class Client(CamelModel):
    id: int
    name: str
    client_type: ClientType
    contact_number: str
    email: Optional[str] = None
    whatsapp: Optional[str] = None
    address: Optional[str] = None
    state: Optional[str] = None
    services: Optional[List[str]] = None
    notes: Optional[str] = None
    status: ClientStatus = ClientStatus.ACTIVE
    created_at: Optional[datetime] = None
