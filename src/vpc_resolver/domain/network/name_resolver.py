"""Matching of declared names against a resource inventory."""
from typing import List, Sequence

from vpc_resolver.domain.network.exceptions import NameNotFoundError
from vpc_resolver.domain.network.value_objects import InventoryObject, ResourceKind
from vpc_resolver.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class NameResolver:
    """
    Resolves names of one resource kind to resource identifiers.

    Matching is exact and case-sensitive. When several inventory objects share
    a name the first one in inventory order wins and a warning is logged.
    """

    def __init__(self, kind: ResourceKind):
        self.kind = kind

    def resolve_one(self, name: str, inventory: Sequence[InventoryObject]) -> str:
        """
        Resolve a single name.

        Args:
            name: Declared resource name
            inventory: Snapshot of every resource of this kind

        Returns:
            Identifier of the matching resource

        Raises:
            NameNotFoundError: If no resource carries the name
        """
        matches = [item for item in inventory if item.name == name]
        if not matches:
            raise NameNotFoundError(self.kind, name)

        if len(matches) > 1:
            logger.warning(
                f"Multiple {self.kind.value}s named '{name}', using the first match",
                kind=self.kind.value,
                name=name,
                ids=[item.id for item in matches],
            )
        return matches[0].id

    def resolve_many(self, names: Sequence[str], inventory: Sequence[InventoryObject]) -> List[str]:
        """
        Resolve an ordered list of names.

        The result keeps the order of ``names``. Resolution stops at the first
        name that does not exist; no partial list is returned.

        Raises:
            NameNotFoundError: For the first name that does not resolve
        """
        return [self.resolve_one(name, inventory) for name in names]
