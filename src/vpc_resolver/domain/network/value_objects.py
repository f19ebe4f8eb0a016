"""Network value objects used during name resolution."""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResourceKind(str, Enum):
    """Kinds of AWS network resources that can be resolved by name.

    The value doubles as the human readable label used in diagnostics.
    """
    VPC = "vpc"
    SUBNET = "subnet"
    SECURITY_GROUP = "security group"


class InventoryObject(BaseModel):
    """The part of a described cloud resource that matters for matching."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""


class InventoryScope(BaseModel):
    """Restricts an inventory query to the children of a resolved parent."""
    model_config = ConfigDict(frozen=True)

    vpc_id: Optional[str] = None


class DeclaredNetworkConfig(BaseModel):
    """
    Network names declared by the user for a deployment.

    Accepts both the host manifest's camelCase keys (``vpcName``,
    ``subnetNames``, ``securityGroupNames``) and the snake_case field names.
    A missing or empty ``vpc_name`` means no network attachment was requested.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    vpc_name: Optional[str] = Field(None, alias="vpcName")
    subnet_names: Optional[List[str]] = Field(None, alias="subnetNames")
    security_group_names: Optional[List[str]] = Field(None, alias="securityGroupNames")

    @field_validator("vpc_name")
    @classmethod
    def normalize_vpc_name(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty VPC name as absent."""
        return v or None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DeclaredNetworkConfig":
        """Build a declared config from a host manifest section, which may be missing."""
        return cls.model_validate(data or {})

    def is_empty(self) -> bool:
        """Check whether no network names were declared at all."""
        return not self.vpc_name and not self.subnet_names and not self.security_group_names

    def missing_fields(self) -> List[str]:
        """
        List the fields required by the declared names that are not present.

        Returns:
            Host manifest keys (camelCase) that still need to be set. Empty
            when the config is either fully declared or fully absent.
        """
        if self.is_empty():
            return []

        missing = []
        if not self.vpc_name:
            missing.append("vpcName")
        if not self.subnet_names:
            missing.append("subnetNames")
        if not self.security_group_names:
            missing.append("securityGroupNames")
        return missing


class ResolvedNetworkConfig(BaseModel):
    """Resource identifiers resolved from a DeclaredNetworkConfig.

    ``subnet_ids`` and ``security_group_ids`` keep the order of the declared
    name lists.
    """
    model_config = ConfigDict(frozen=True)

    subnet_ids: List[str] = Field(default_factory=list)
    security_group_ids: List[str] = Field(default_factory=list)
    vpc_id: Optional[str] = None

    @classmethod
    def empty(cls) -> "ResolvedNetworkConfig":
        """Result of a deployment that requested no network attachment."""
        return cls()

    def is_empty(self) -> bool:
        return self.vpc_id is None and not self.subnet_ids and not self.security_group_ids

    def to_dict(self) -> Dict[str, List[str]]:
        """Render the network section expected by the deployment manifest."""
        return {
            "subnetIds": list(self.subnet_ids),
            "securityGroupIds": list(self.security_group_ids),
        }
