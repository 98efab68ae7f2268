"""
app/core/exceptions.py

Purpose: Application exception hierarchy

- Every error carries a machine-readable code and HTTP status
- Rendered by the handlers in app/core/errors.py
"""

from typing import Optional, Any

class TaxFlowError(Exception):
    """
    Base exception for TaxFlow application.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class ResourceNotFoundError(TaxFlowError):
    """
    Raised when a requested record does not exist in the store.
    """
    def __init__(self, message: str = "Resource not found", details: Optional[Any] = None):
        super().__init__(message, code="NOT_FOUND", status_code=404, details=details)

    @classmethod
    def for_entity(cls, entity: str, **ids: Any) -> "ResourceNotFoundError":
        """
        ResourceNotFoundError.for_entity("Payment", paymentId=7)
        -> "Payment not found", details {"paymentId": 7}
        """
        return cls(f"{entity} not found", details=ids or None)

class ValidationError(TaxFlowError):
    """
    Raised when input is rejected outside of request parsing
    (unknown report type or date range).
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400, details=details)
