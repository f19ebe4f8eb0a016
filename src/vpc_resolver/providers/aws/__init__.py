"""AWS provider - EC2 network inventory."""

from .exceptions import AWS_TRANSPORT_ERRORS, describe_aws_error
from .infrastructure.aws_client import AWSClient
from .infrastructure.inventory import AWSNetworkInventory

__all__ = ["AWSClient", "AWSNetworkInventory", "AWS_TRANSPORT_ERRORS", "describe_aws_error"]
