"""Port for querying the inventory of network resources."""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, Type

from vpc_resolver.domain.network.value_objects import InventoryObject, InventoryScope, ResourceKind


class NetworkInventoryPort(ABC):
    """
    Describes the network resources of one kind in a region.

    Implementations issue one descriptive query per call and return the
    complete result. Errors raised by the underlying service propagate
    unmodified; callers decide how to present them.
    """

    # Exception types the underlying service raises for transport or API failures
    transport_errors: Tuple[Type[BaseException], ...] = ()

    @abstractmethod
    async def fetch(
        self, kind: ResourceKind, region: str, scope: Optional[InventoryScope] = None
    ) -> List[InventoryObject]:
        """
        Fetch every resource of the given kind.

        Args:
            kind: Resource kind to describe
            region: Region to query
            scope: Optional parent filter (e.g. objects belonging to one VPC)

        Returns:
            All matching inventory objects as of call time
        """

    def describe_error(self, error: BaseException, region: str) -> str:
        """Render a transport error as a human readable message."""
        return str(error)
