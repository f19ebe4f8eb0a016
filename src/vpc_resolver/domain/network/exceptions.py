"""Network resolution domain exceptions."""
from typing import List, Optional

from vpc_resolver.domain.base.exceptions import (
    ConfigurationError as BaseConfigurationError,
    DomainException,
    EntityNotFoundError,
)
from vpc_resolver.domain.network.value_objects import ResourceKind

SETUP_ERROR_MESSAGE = "Deployment file is not configured correctly. Please see README for proper setup."
WRAPPED_ERROR_PREFIX = "Could not set vpc config. Message: "


class NetworkConfigError(DomainException):
    """Base exception for network config resolution errors."""


class ConfigurationError(NetworkConfigError, BaseConfigurationError):
    """Raised when the declared network names are structurally invalid."""

    def __init__(self, missing_fields: Optional[List[str]] = None):
        BaseConfigurationError.__init__(
            self,
            SETUP_ERROR_MESSAGE,
            missing_fields=missing_fields,
            details={"missing_fields": list(missing_fields or [])},
        )


class NameNotFoundError(NetworkConfigError, EntityNotFoundError):
    """Raised when a declared name has no matching inventory object."""

    def __init__(self, kind: ResourceKind, name: str):
        EntityNotFoundError.__init__(
            self, kind.value, name, message=f"Invalid {kind.value} name, it does not exist"
        )
        self.kind = kind
        self.name = name


class NetworkResolutionError(NetworkConfigError):
    """Single failure channel for a network config update.

    Wraps both lookup failures and transport failures of the inventory service.
    """

    def __init__(self, message: str, region: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(
            f"{WRAPPED_ERROR_PREFIX}{message}",
            details={"region": region, "cause_type": type(cause).__name__ if cause else None},
        )
        self.region = region
        self.cause = cause
