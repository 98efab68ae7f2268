"""
utils/format_utils.py

Purpose: Display formatting

- Indian rupee amounts with lakh/crore digit grouping
- GSTIN formatting for documents
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union


def format_inr(amount: Union[Decimal, int, str], symbol: str = "₹") -> str:
    """
    Formats an amount with Indian digit grouping.

    Examples:
        5000        -> ₹5,000
        1234567.5   -> ₹12,34,567.50
        100000      -> ₹1,00,000

    Paise are shown only when non-zero.
    """
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, _, fraction = f"{abs(value):.2f}".partition(".")

    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])

    text = whole if fraction == "00" else f"{whole}.{fraction}"
    return f"{sign}{symbol}{text}"


def format_gstin(gstin: str) -> str:
    """
    Formats GSTIN for display (adds spaces for readability).

    Format: 27 AABCU 9603 R 1Z M

    Args:
        gstin: GSTIN string

    Returns:
        Formatted GSTIN with spaces
    """
    gstin = gstin.strip().upper()

    if len(gstin) != 15:
        return gstin

    # Format: XX XXXXX XXXX X XX X
    return f"{gstin[:2]} {gstin[2:7]} {gstin[7:11]} {gstin[11]} {gstin[12:14]} {gstin[14]}"
