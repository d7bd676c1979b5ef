"""Errors raised by the COGS engine and its services."""

from typing import Any, Dict


class CogsError(Exception):
    """Base class for engine errors."""

    code = "COGS_ERROR"

    def __init__(self, message: str, details: Dict[str, Any] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(CogsError):
    """Outlet, policy or other resource missing for a requested id."""

    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            message=f"{resource} not found: {identifier}",
            details={"resource": resource, "identifier": str(identifier)},
        )
        self.resource = resource
        self.identifier = identifier


class ValidationError(CogsError):
    """Input rejected before any calculation ran."""

    code = "VALIDATION_ERROR"


class ConflictError(CogsError):
    """Resource already exists."""

    code = "CONFLICT"
