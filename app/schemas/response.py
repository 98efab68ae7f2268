from pydantic import BaseModel
from typing import Optional, Any, List

class FieldError(BaseModel):
    """
    A single field-level violation.
    """
    field: str
    message: str
    type: str

class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    error: str
    code: str
    details: Optional[Any] = None


def to_field_errors(errors: List[dict]) -> List[FieldError]:
    """
    Flattens pydantic error dicts into FieldError entries.

    The leading "body"/"path"/"query" location segment is dropped so the
    field reads the way the client sent it (e.g. "feeAmount").
    """
    out = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query"):
            loc = loc[1:]
        out.append(FieldError(
            field=".".join(loc) or "__root__",
            message=err.get("msg", "Invalid value"),
            type=err.get("type", "value_error"),
        ))
    return out
