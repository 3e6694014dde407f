"""
Domain Exceptions.

Custom exceptions for domain-level errors.
These exceptions represent business rule violations.
"""

from typing import Optional, Any, Dict


class DomainException(Exception):
    """Base exception for all domain errors."""
    
    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "DOMAIN_ERROR"
        self.details = details or {}


class EntityNotFoundException(DomainException):
    """Raised when an entity is not found."""
    
    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(
            message=f"{entity_type} with id '{entity_id}' not found",
            code="ENTITY_NOT_FOUND",
            details={"entity_type": entity_type, "entity_id": str(entity_id)}
        )


class ValidationException(DomainException):
    """Raised when validation fails."""
    
    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field": field, "value": str(value) if value is not None else None}
        )


class InvalidOperationException(DomainException):
    """Raised when an operation is not valid in the current state."""
    
    def __init__(self, message: str, current_state: Optional[str] = None):
        super().__init__(
            message=message,
            code="INVALID_OPERATION",
            details={"current_state": current_state} if current_state else {}
        )


class StatusTransitionException(DomainException):
    """Raised when an invalid status transition is attempted."""
    
    def __init__(
        self,
        entity_type: str,
        current_status: str,
        target_status: str,
        allowed_transitions: Optional[list] = None
    ):
        super().__init__(
            message=f"Cannot transition {entity_type} from '{current_status}' to '{target_status}'",
            code="INVALID_STATUS_TRANSITION",
            details={
                "entity_type": entity_type,
                "current_status": current_status,
                "target_status": target_status,
                "allowed_transitions": allowed_transitions or []
            }
        )


class FacilityContextMissingException(DomainException):
    """Raised when the facility context is read outside a FacilityProvider."""
    
    def __init__(self):
        super().__init__(
            message="use_facility_context must be used within a FacilityProvider",
            code="FACILITY_CONTEXT_MISSING",
        )
