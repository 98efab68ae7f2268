"""
app/schemas/base.py

Purpose: Reusable field types for request payloads

- Blank form values ("") treated as absent
- Aware datetimes normalized to naive UTC
- Money as Decimal(10, 2)
- Aggregate amounts rendered as JSON numbers
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BeforeValidator, Field, PlainSerializer

from utils.time_utils import to_naive_utc


def blank_to_none(value: Any) -> Any:
    """Empty or whitespace-only strings become None."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


OptionalStr = Annotated[Optional[str], BeforeValidator(blank_to_none)]

UtcDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]

OptionalUtcDatetime = Annotated[
    Optional[datetime],
    BeforeValidator(blank_to_none),
    AfterValidator(to_naive_utc),
]

Money = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2),
    AfterValidator(quantize_money),
]

# Sums are exact Decimals internally; clients receive plain numbers
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def reject_null(value: Any) -> Any:
    """
    Used on partial-update schemas: a required field may be omitted
    but not explicitly cleared.
    """
    if value is None:
        raise ValueError("Field may not be null")
    return value
