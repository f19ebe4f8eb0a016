# src/vpc_resolver/domain/base/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None, details: Any = None):
        super().__init__(message, details)
        self.missing_fields = missing_fields or []


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""
    def __init__(self, entity_type: str, entity_id: str, message: Optional[str] = None):
        super().__init__(message or f"{entity_type} with ID {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id
