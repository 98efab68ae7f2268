"""
app/schemas/client.py

Purpose: Client request payloads

- ClientCreate applies defaults for every optional field
- ClientUpdate accepts any subset of fields
"""

from typing import List, Optional

from pydantic import Field, field_validator

from app.models.base import CamelModel
from app.models.enums import ClientStatus, ClientType
from app.schemas.base import OptionalStr, reject_null


class ClientCreate(CamelModel):
    """Payload for POST /clients."""

    name: str = Field(..., min_length=1, description="Client or business name")
    client_type: ClientType = Field(..., description="individual | business | partnership | pvtltd | others")
    contact_number: str = Field(..., min_length=1)
    email: OptionalStr = None
    whatsapp: OptionalStr = None
    address: OptionalStr = None
    state: OptionalStr = None
    services: Optional[List[str]] = None
    notes: OptionalStr = None
    status: ClientStatus = ClientStatus.ACTIVE

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Raj Enterprises",
                "clientType": "business",
                "contactNumber": "+91 98200 11223",
                "email": "info@raj.com",
                "services": ["gst", "it_filing"],
            }
        }
    }


class ClientUpdate(CamelModel):
    """Payload for PUT /clients/{id}; only supplied fields change."""

    name: Optional[str] = Field(None, min_length=1)
    client_type: Optional[ClientType] = None
    contact_number: Optional[str] = Field(None, min_length=1)
    email: OptionalStr = None
    whatsapp: OptionalStr = None
    address: OptionalStr = None
    state: OptionalStr = None
    services: Optional[List[str]] = None
    notes: OptionalStr = None
    status: Optional[ClientStatus] = None

    @field_validator("name", "client_type", "contact_number", "status")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)
