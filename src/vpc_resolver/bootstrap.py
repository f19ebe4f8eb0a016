"""Application wiring."""
from typing import Optional

from vpc_resolver.application.network.service import NetworkConfigService
from vpc_resolver.config.schemas import AppConfig
from vpc_resolver.providers.aws.infrastructure.inventory import AWSNetworkInventory


def create_network_config_service(app_config: Optional[AppConfig] = None) -> NetworkConfigService:
    """Build a NetworkConfigService backed by the EC2 inventory."""
    app_config = app_config or AppConfig()
    return NetworkConfigService(AWSNetworkInventory(app_config.aws))
