import os
from typing import Dict, List, Optional

import boto3
import pytest
from moto import mock_aws

from vpc_resolver.domain.network.ports import NetworkInventoryPort
from vpc_resolver.domain.network.value_objects import InventoryObject, InventoryScope, ResourceKind

# Names and ids used across the resolution tests
VPC_NAME = 'ci'
VPC_ID = 'vpc-test'
SUBNET_NAMES = ['test_subnet_1', 'test_subnet_2', 'test_subnet_3']
SUBNET_IDS = ['subnet-test-1', 'subnet-test-2', 'subnet-test-3']
SECURITY_GROUP_NAMES = ['test_group_1']
SECURITY_GROUP_IDS = ['sg-test']


class FakeTransportError(Exception):
    """Stands in for an SDK transport failure."""


class FakeInventory(NetworkInventoryPort):
    """In-memory inventory that records every fetch."""

    transport_errors = (FakeTransportError,)

    def __init__(self, data: Dict[ResourceKind, List[InventoryObject]],
                 errors: Optional[Dict[ResourceKind, BaseException]] = None):
        self.data = data
        self.errors = errors or {}
        self.calls = []

    async def fetch(self, kind, region, scope: Optional[InventoryScope] = None):
        self.calls.append((kind, region, scope.vpc_id if scope else None))
        if kind in self.errors:
            raise self.errors[kind]
        return list(self.data.get(kind, []))

    def describe_error(self, error, region):
        return f"FakeTransportError: {error} ({region})"


def build_test_inventory_data() -> Dict[ResourceKind, List[InventoryObject]]:
    """Inventory equivalent to a describe response holding the test network."""
    return {
        ResourceKind.VPC: [InventoryObject(id=VPC_ID, name=VPC_NAME)],
        ResourceKind.SUBNET: [
            InventoryObject(id=subnet_id, name=name)
            for name, subnet_id in zip(SUBNET_NAMES, SUBNET_IDS)
        ],
        ResourceKind.SECURITY_GROUP: [
            InventoryObject(id=group_id, name=name)
            for name, group_id in zip(SECURITY_GROUP_NAMES, SECURITY_GROUP_IDS)
        ],
    }


@pytest.fixture
def inventory_data():
    return build_test_inventory_data()


@pytest.fixture
def fake_inventory(inventory_data):
    """Inventory populated with the test network."""
    return FakeInventory(inventory_data)


@pytest.fixture
def empty_inventory():
    """Inventory without any resources."""
    return FakeInventory({})


@pytest.fixture
def transport_error():
    """Exception type the fake inventory reports as a transport failure."""
    return FakeTransportError


@pytest.fixture
def inventory_factory():
    """Builds an inventory holding the given objects."""
    def _build(data: Dict[ResourceKind, List[InventoryObject]]) -> FakeInventory:
        return FakeInventory(data)
    return _build


@pytest.fixture
def failing_inventory():
    """Builds an inventory whose fetches fail for the given kinds."""
    def _build(errors: Dict[ResourceKind, BaseException]) -> FakeInventory:
        return FakeInventory(build_test_inventory_data(), errors)
    return _build


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')
    monkeypatch.delenv('AWS_PROFILE', raising=False)
    monkeypatch.delenv('AWS_ENDPOINT_URL', raising=False)


@pytest.fixture
def mock_network():
    """Create a named VPC with subnets and security groups in moto."""
    with mock_aws():
        ec2 = boto3.client('ec2', region_name='us-east-1')

        vpc_id = ec2.create_vpc(
            CidrBlock='10.0.0.0/16',
            TagSpecifications=[{
                'ResourceType': 'vpc',
                'Tags': [{'Key': 'Name', 'Value': VPC_NAME}]
            }]
        )['Vpc']['VpcId']

        subnet_ids = {}
        for index, name in enumerate(SUBNET_NAMES):
            subnet = ec2.create_subnet(
                VpcId=vpc_id,
                CidrBlock=f'10.0.{index}.0/24',
                TagSpecifications=[{
                    'ResourceType': 'subnet',
                    'Tags': [{'Key': 'Name', 'Value': name}]
                }]
            )
            subnet_ids[name] = subnet['Subnet']['SubnetId']

        security_group_ids = {}
        for name in SECURITY_GROUP_NAMES:
            group = ec2.create_security_group(
                GroupName=name,
                Description='Test security group',
                VpcId=vpc_id
            )
            security_group_ids[name] = group['GroupId']

        yield {
            'ec2': ec2,
            'vpc_id': vpc_id,
            'subnet_ids': subnet_ids,
            'security_group_ids': security_group_ids,
        }
