"""VPC Config Resolver - Root Package.

This package resolves human-assigned AWS network names (a VPC name, subnet
names and security group names) into the resource identifiers a deployment
needs to attach to that network.

Key Components:
    - domain: Network value objects, name resolution and exceptions
    - application: The network config orchestration service
    - providers: AWS inventory lookups backed by boto3
    - interface: Host lifecycle hook integration
    - config: Configuration schemas and loading
    - cli: Command line interface

Usage:
    >>> service = create_network_config_service()
    >>> resolved = asyncio.run(service.update_vpc_config("us-east-1", declared))
    >>> resolved.to_dict()
    {'subnetIds': [...], 'securityGroupIds': [...]}
"""

__version__ = "1.0.0"
__author__ = "AWS Professional Services"
__package_name__ = "vpc-config-resolver"
