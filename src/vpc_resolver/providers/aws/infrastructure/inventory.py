"""EC2-backed inventory of VPCs, subnets and security groups."""
import asyncio
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from vpc_resolver.config.schemas.aws_schema import AWSConfig
from vpc_resolver.domain.network.ports import NetworkInventoryPort
from vpc_resolver.domain.network.value_objects import InventoryObject, InventoryScope, ResourceKind
from vpc_resolver.infrastructure.logging.logger import get_logger
from vpc_resolver.providers.aws.exceptions import AWS_TRANSPORT_ERRORS, describe_aws_error
from vpc_resolver.providers.aws.infrastructure.aws_client import AWSClient

logger = get_logger(__name__)


class DescribeOperation(NamedTuple):
    """How one resource kind is described through the EC2 API."""
    operation: str
    result_key: str
    id_field: str
    name_field: Optional[str]  # None means the Name tag


DESCRIBE_OPERATIONS: Dict[ResourceKind, DescribeOperation] = {
    ResourceKind.VPC: DescribeOperation("describe_vpcs", "Vpcs", "VpcId", None),
    ResourceKind.SUBNET: DescribeOperation("describe_subnets", "Subnets", "SubnetId", None),
    ResourceKind.SECURITY_GROUP: DescribeOperation(
        "describe_security_groups", "SecurityGroups", "GroupId", "GroupName"
    ),
}


def _name_tag(resource: Dict[str, Any]) -> str:
    for tag in resource.get("Tags", []):
        if tag.get("Key") == "Name":
            return tag.get("Value", "")
    return ""


class AWSNetworkInventory(NetworkInventoryPort):
    """
    Network inventory backed by EC2 describe calls.

    Each fetch issues one paginated describe operation. The blocking boto3
    call runs in a worker thread so concurrent fetches overlap on the event
    loop. Nothing is cached between fetches.
    """

    transport_errors = AWS_TRANSPORT_ERRORS

    def __init__(
        self,
        config: Optional[AWSConfig] = None,
        client_factory: Optional[Callable[[str], AWSClient]] = None,
    ):
        """
        Args:
            config: AWS client configuration
            client_factory: Builds an AWSClient for a region; defaults to AWSClient(region, config)
        """
        self._config = config or AWSConfig()
        self._client_factory = client_factory or (lambda region: AWSClient(region, self._config))

    async def fetch(
        self, kind: ResourceKind, region: str, scope: Optional[InventoryScope] = None
    ) -> List[InventoryObject]:
        aws_client = self._client_factory(region)
        return await asyncio.to_thread(self._describe, aws_client, kind, scope)

    def describe_error(self, error: BaseException, region: str) -> str:
        return describe_aws_error(error, region)

    def _describe(
        self, aws_client: AWSClient, kind: ResourceKind, scope: Optional[InventoryScope]
    ) -> List[InventoryObject]:
        describe = DESCRIBE_OPERATIONS[kind]
        params: Dict[str, Any] = {}
        if scope is not None and scope.vpc_id:
            params["Filters"] = [{"Name": "vpc-id", "Values": [scope.vpc_id]}]

        paginator = aws_client.ec2_client.get_paginator(describe.operation)
        inventory = []
        for page in paginator.paginate(**params):
            for resource in page.get(describe.result_key, []):
                if describe.name_field:
                    name = resource.get(describe.name_field, "")
                else:
                    name = _name_tag(resource)
                inventory.append(InventoryObject(id=resource[describe.id_field], name=name))

        logger.debug(
            f"Described {len(inventory)} {kind.value} resources",
            region=aws_client.region_name,
            vpc_id=scope.vpc_id if scope else None,
        )
        return inventory
