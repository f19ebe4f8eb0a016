"""
Network config application service.

Resolves the declared VPC, subnet and security group names of a deployment
into resource identifiers. The VPC is resolved first; subnets and security
groups are then resolved concurrently inside that VPC.
"""
import asyncio
import time
from typing import Any, Awaitable, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from vpc_resolver.domain.network.exceptions import (
    ConfigurationError,
    NameNotFoundError,
    NetworkResolutionError,
)
from vpc_resolver.domain.network.name_resolver import NameResolver
from vpc_resolver.domain.network.ports import NetworkInventoryPort
from vpc_resolver.domain.network.value_objects import (
    DeclaredNetworkConfig,
    InventoryScope,
    ResolvedNetworkConfig,
    ResourceKind,
)
from vpc_resolver.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

DeclaredInput = Union[DeclaredNetworkConfig, Dict[str, Any], None]

DECLARED_FIELDS = ["vpcName", "subnetNames", "securityGroupNames"]


class NetworkConfigService:
    """Resolves declared network names into a deployment's network config."""

    def __init__(self, inventory: NetworkInventoryPort):
        """
        Initialize the service.

        Args:
            inventory: Inventory lookup used for every describe query
        """
        self._inventory = inventory

    def update_vpc_config(self, region: str, declared: DeclaredInput) -> Awaitable[ResolvedNetworkConfig]:
        """
        Resolve the declared network names of a deployment.

        Validation happens when this method is called, before any awaitable is
        returned, so a malformed declaration fails without touching the
        network. A declaration without any names resolves to an empty result
        and makes no calls.

        Args:
            region: AWS region to resolve in
            declared: Declared names, as a model or as the host's camelCase dict

        Returns:
            Awaitable resolving to the ResolvedNetworkConfig

        Raises:
            ConfigurationError: Synchronously, when the declaration is incomplete or
                malformed, or names are declared without a region
            NetworkResolutionError: From the awaitable, for any lookup or transport failure
        """
        if not isinstance(declared, DeclaredNetworkConfig):
            declared = self._parse_declared(declared)

        if declared.is_empty():
            logger.debug("No VPC name declared, skipping network config")
            return self._no_network_config()

        missing_fields = declared.missing_fields()
        if missing_fields:
            logger.error("Network config is incomplete", missing_fields=missing_fields)
            raise ConfigurationError(missing_fields)

        if not region:
            logger.error("No region set for network config", vpc_name=declared.vpc_name)
            raise ConfigurationError(["region"])

        return self._resolve(region, declared)

    def _parse_declared(self, data: Any) -> DeclaredNetworkConfig:
        try:
            return DeclaredNetworkConfig.from_dict(data)
        except ValidationError as e:
            invalid_fields = sorted({str(error["loc"][0]) for error in e.errors() if error["loc"]})
            invalid_fields = invalid_fields or list(DECLARED_FIELDS)
            logger.error("Network config is malformed", invalid_fields=invalid_fields)
            raise ConfigurationError(invalid_fields) from e

    async def get_vpc_id(self, region: str, vpc_name: str) -> str:
        """
        Resolve a VPC name to its id.

        Raises:
            NameNotFoundError: If no VPC carries the name
        """
        inventory = await self._inventory.fetch(ResourceKind.VPC, region)
        return NameResolver(ResourceKind.VPC).resolve_one(vpc_name, inventory)

    async def get_subnet_ids(self, region: str, vpc_id: str, subnet_names: Sequence[str]) -> List[str]:
        """Resolve subnet names inside a VPC, keeping their order."""
        return await self._resolve_in_vpc(ResourceKind.SUBNET, region, vpc_id, subnet_names)

    async def get_security_group_ids(
        self, region: str, vpc_id: str, security_group_names: Sequence[str]
    ) -> List[str]:
        """Resolve security group names inside a VPC, keeping their order."""
        return await self._resolve_in_vpc(ResourceKind.SECURITY_GROUP, region, vpc_id, security_group_names)

    async def _resolve_in_vpc(
        self, kind: ResourceKind, region: str, vpc_id: str, names: Sequence[str]
    ) -> List[str]:
        inventory = await self._inventory.fetch(kind, region, InventoryScope(vpc_id=vpc_id))
        return NameResolver(kind).resolve_many(names, inventory)

    async def _no_network_config(self) -> ResolvedNetworkConfig:
        return ResolvedNetworkConfig.empty()

    async def _resolve(self, region: str, declared: DeclaredNetworkConfig) -> ResolvedNetworkConfig:
        logger.info("Updating VPC config...", region=region, vpc_name=declared.vpc_name)
        start_time = time.time()

        try:
            vpc_id = await self.get_vpc_id(region, declared.vpc_name)
            # First failure wins; a sibling that succeeds later is discarded
            subnet_ids, security_group_ids = await asyncio.gather(
                self.get_subnet_ids(region, vpc_id, declared.subnet_names),
                self.get_security_group_ids(region, vpc_id, declared.security_group_names),
            )
        except NameNotFoundError as e:
            logger.error(f"Could not set vpc config: {str(e)}", region=region)
            raise NetworkResolutionError(str(e), region=region, cause=e) from e
        except self._inventory.transport_errors as e:
            message = self._inventory.describe_error(e, region)
            logger.error(f"Could not set vpc config: {message}", region=region)
            raise NetworkResolutionError(message, region=region, cause=e) from e

        resolved = ResolvedNetworkConfig(
            vpc_id=vpc_id,
            subnet_ids=subnet_ids,
            security_group_ids=security_group_ids,
        )
        logger.info(
            f"VPC config resolved in {time.time() - start_time:.3f}s",
            vpc_id=vpc_id,
            subnet_ids=subnet_ids,
            security_group_ids=security_group_ids,
        )
        return resolved
