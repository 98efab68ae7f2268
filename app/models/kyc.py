"""
app/models/kyc.py

Purpose: KYC record

- Identity numbers (PAN, Aadhaar, GSTIN) and bank details
- Government portal credentials, stored as entered
- Linked to a client by client_id (one per client by convention only)
"""

from datetime import datetime
from typing import List, Optional

from app.models.base import CamelModel


class BankDetails(CamelModel):
    account_number: Optional[str] = None
    ifsc: Optional[str] = None
    bank_name: Optional[str] = None


class KycDocument(CamelModel):
    id: int
    client_id: int
    pan: Optional[str] = None
    aadhaar: Optional[str] = None
    gstin: Optional[str] = None
    date_of_registration: Optional[datetime] = None
    bank_details: Optional[BankDetails] = None
    gst_portal_username: Optional[str] = None
    gst_portal_password: Optional[str] = None
    it_portal_username: Optional[str] = None
    it_portal_password: Optional[str] = None
    tds_login: Optional[str] = None
    documents: Optional[List[str]] = None
