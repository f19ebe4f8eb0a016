"""Network domain - declared names, inventory objects and name resolution."""

from .exceptions import (
    ConfigurationError,
    NameNotFoundError,
    NetworkConfigError,
    NetworkResolutionError,
)
from .name_resolver import NameResolver
from .ports import NetworkInventoryPort
from .value_objects import (
    DeclaredNetworkConfig,
    InventoryObject,
    InventoryScope,
    ResolvedNetworkConfig,
    ResourceKind,
)

__all__ = [
    "ConfigurationError",
    "DeclaredNetworkConfig",
    "InventoryObject",
    "InventoryScope",
    "NameNotFoundError",
    "NameResolver",
    "NetworkConfigError",
    "NetworkInventoryPort",
    "NetworkResolutionError",
    "ResolvedNetworkConfig",
    "ResourceKind",
]
