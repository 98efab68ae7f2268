"""
app/schemas/kyc.py

Purpose: KYC request payloads

- Identifiers upper-cased and format-checked when supplied
- Every KYC field is optional; the client comes from the URL
"""

from typing import List, Optional

from pydantic import field_validator

from app.models.base import CamelModel
from app.schemas.base import OptionalStr, OptionalUtcDatetime
from utils.validation_utils import validate_aadhaar, validate_gstin, validate_ifsc, validate_pan


class BankDetailsIn(CamelModel):
    account_number: OptionalStr = None
    ifsc: OptionalStr = None
    bank_name: OptionalStr = None

    @field_validator("ifsc")
    @classmethod
    def validate_ifsc_format(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().upper()
        if not validate_ifsc(v):
            raise ValueError("Invalid IFSC format")
        return v


class KycFields(CamelModel):
    """
    KYC attributes as sent by the client. Used directly for partial
    updates (only supplied fields change).
    """

    pan: OptionalStr = None
    aadhaar: OptionalStr = None
    gstin: OptionalStr = None
    date_of_registration: OptionalUtcDatetime = None
    bank_details: Optional[BankDetailsIn] = None
    gst_portal_username: OptionalStr = None
    gst_portal_password: OptionalStr = None
    it_portal_username: OptionalStr = None
    it_portal_password: OptionalStr = None
    tds_login: OptionalStr = None
    documents: Optional[List[str]] = None

    @field_validator("pan")
    @classmethod
    def validate_pan_format(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().upper()
        if not validate_pan(v):
            raise ValueError("Invalid PAN format")
        return v

    @field_validator("gstin")
    @classmethod
    def validate_gstin_format(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().upper()
        if not validate_gstin(v):
            raise ValueError("Invalid GSTIN format")
        return v

    @field_validator("aadhaar")
    @classmethod
    def validate_aadhaar_format(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not validate_aadhaar(v):
            raise ValueError("Invalid Aadhaar number")
        return "".join(v.split())


class KycCreate(KycFields):
    """KYC attributes bound to a client, ready for the store."""

    client_id: int


class KycCompletion(CamelModel):
    """How many of the tracked KYC fields are filled in."""

    count: int
    total: int
    percentage: int
