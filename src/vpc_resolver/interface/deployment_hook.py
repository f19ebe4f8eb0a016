"""
Deployment lifecycle hook.

Wires the network config service into a host deployment tool that calls
registered hooks at lifecycle points. The host's service definition carries
the region under ``provider.region`` and the declared names under
``custom.vpc``; the resolved ids are written back to ``provider.vpc``.
"""
from typing import Any, Awaitable, Callable, Dict, Optional

from vpc_resolver.application.network.service import NetworkConfigService
from vpc_resolver.domain.network.value_objects import ResolvedNetworkConfig
from vpc_resolver.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

BEFORE_DEPLOY_INITIALIZE = "before:deploy:initialize"


class VpcConfigHook:
    """Resolves a deployment's VPC config before the deployment initializes."""

    def __init__(
        self,
        service_definition: Dict[str, Any],
        network_service: Optional[NetworkConfigService] = None,
    ):
        """
        Args:
            service_definition: Host manifest, mutated in place when the hook runs
            network_service: Service used for resolution; the EC2-backed one by default
        """
        if network_service is None:
            from vpc_resolver.bootstrap import create_network_config_service

            network_service = create_network_config_service()

        self.service_definition = service_definition
        self.network_service = network_service
        self.hooks: Dict[str, Callable[[], Awaitable[ResolvedNetworkConfig]]] = {
            BEFORE_DEPLOY_INITIALIZE: self.before_deploy_initialize,
        }

    @property
    def provider(self) -> Dict[str, Any]:
        return self.service_definition.setdefault("provider", {})

    @property
    def region(self) -> Optional[str]:
        return self.provider.get("region")

    @property
    def declared_config(self) -> Any:
        """The manifest's ``custom.vpc`` section as written, validated by the service."""
        custom = self.service_definition.get("custom") or {}
        return custom.get("vpc")

    def update_vpc_config(self) -> Awaitable[ResolvedNetworkConfig]:
        """
        Resolve the manifest's declared names.

        Raises:
            ConfigurationError: Synchronously, when the manifest's vpc section is
                incomplete or malformed, or no region is set
        """
        return self.network_service.update_vpc_config(self.region, self.declared_config)

    async def before_deploy_initialize(self) -> ResolvedNetworkConfig:
        """Resolve and merge the network config into ``provider.vpc``."""
        resolved = await self.update_vpc_config()
        if resolved.is_empty():
            return resolved

        vpc_section = self.provider.get("vpc") or {}
        vpc_section.update(resolved.to_dict())
        self.provider["vpc"] = vpc_section
        logger.info("Merged VPC config into provider", vpc=vpc_section)
        return resolved
