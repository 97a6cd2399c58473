"""
Domain errors raised by the employee service.

They carry no HTTP knowledge; ``app.main`` maps each one to a status code.
"""

from typing import Optional
from uuid import UUID


class EmployeeServiceError(Exception):
    """Base exception for all employee service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MissingBodyError(EmployeeServiceError):
    """Raised when a create or update call receives no request payload."""

    def __init__(self):
        super().__init__("request body is required")


class ValidationError(EmployeeServiceError):
    """Raised when a supplied field violates its rule."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message=message, details={"field": field})


class NotFoundError(EmployeeServiceError):
    """Raised when no employee exists for the given identifier."""

    def __init__(self, employee_id: UUID):
        self.employee_id = employee_id
        super().__init__(
            message=f"Employee not found: {employee_id}",
            details={"uuid": str(employee_id)},
        )
