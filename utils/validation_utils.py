"""
utils/validation_utils.py

Purpose: Input validation

- GSTIN, PAN, Aadhaar and IFSC format checks for KYC records
- Blank-value detection
"""

import re
from typing import Any


def validate_gstin(gstin: str) -> bool:
    """
    Validates GSTIN format using regex and state code range.

    Format: 2 digits (state) + 10 chars (PAN) + 1 digit + 1 letter + 1 letter/digit
    Example: 27AABCU9603R1ZM

    Args:
        gstin: GSTIN string to validate

    Returns:
        True if valid, False otherwise
    """
    if not gstin:
        return False

    gstin = gstin.strip().upper()

    pattern = r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}[Z]{1}[0-9A-Z]{1}$"
    if not re.match(pattern, gstin):
        return False

    # Validate state code (01-37)
    state_code = int(gstin[:2])
    if state_code < 1 or state_code > 37:
        return False

    return True


def validate_pan(pan: str) -> bool:
    """
    Validates PAN format: 5 letters, 4 digits, 1 letter (e.g. AABCU9603R).
    """
    if not pan:
        return False
    return bool(re.match(r"^[A-Z]{5}[0-9]{4}[A-Z]$", pan.strip().upper()))


def validate_aadhaar(aadhaar: str) -> bool:
    """
    Validates Aadhaar format: 12 digits, spaces allowed between groups.
    The first digit is never 0 or 1.
    """
    if not aadhaar:
        return False
    digits = re.sub(r"\s", "", aadhaar)
    return bool(re.match(r"^[2-9][0-9]{11}$", digits))


def validate_ifsc(ifsc: str) -> bool:
    """
    Validates IFSC format: 4 letters, a literal 0, 6 letters/digits.
    Example: HDFC0001234
    """
    if not ifsc:
        return False
    return bool(re.match(r"^[A-Z]{4}0[A-Z0-9]{6}$", ifsc.strip().upper()))


def is_blank(value: Any) -> bool:
    """
    True for None, empty/whitespace strings and empty containers.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict, tuple, set)):
        return len(value) == 0
    return False
