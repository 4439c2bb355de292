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


class AuthenticationException(DomainException):
    """Raised when a presented credential or token cannot be verified."""
    
    def __init__(self, message: str = "Token could not be verified"):
        super().__init__(message=message, code="AUTHENTICATION_ERROR")


class CatalogIntegrityException(DomainException):
    """Raised when a calculator references a component this build cannot render."""
    
    def __init__(self, component: str, known: Optional[list] = None):
        super().__init__(
            message=f"Unknown calculator component '{component}'",
            code="UNKNOWN_COMPONENT",
            details={"component": component, "known_components": known or []}
        )
