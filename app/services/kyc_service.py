"""
app/services/kyc_service.py

Purpose: KYC completeness

- Counts which of the tracked identity/credential fields are filled in
"""

import math
from typing import Optional

from app.models.kyc import KycDocument
from app.schemas.kyc import KycCompletion
from utils.validation_utils import is_blank

# Fields that make up a complete KYC profile
TRACKED_FIELDS = (
    "pan",
    "aadhaar",
    "gstin",
    "gst_portal_username",
    "gst_portal_password",
    "it_portal_username",
    "it_portal_password",
    "bank_details",
)


def _is_filled(kyc: KycDocument, field: str) -> bool:
    value = getattr(kyc, field)
    if field == "bank_details":
        return value is not None and not all(is_blank(v) for v in value.model_dump().values())
    return not is_blank(value)


def kyc_completion(kyc: Optional[KycDocument]) -> KycCompletion:
    """
    Completion of a KYC record; a missing record is 0 of 8.
    Percentage rounds half up (3 of 8 -> 38).
    """
    total = len(TRACKED_FIELDS)
    if kyc is None:
        return KycCompletion(count=0, total=total, percentage=0)

    count = sum(1 for field in TRACKED_FIELDS if _is_filled(kyc, field))
    percentage = math.floor(count * 100 / total + 0.5)
    return KycCompletion(count=count, total=total, percentage=percentage)
