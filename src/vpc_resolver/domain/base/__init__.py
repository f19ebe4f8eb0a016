"""Domain base package - shared exception hierarchy."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
)

__all__ = [
    "ConfigurationError",
    "DomainException",
    "EntityNotFoundError",
]
