"""Tests for the network config application service."""
import asyncio

import pytest

from vpc_resolver.application.network.service import NetworkConfigService
from vpc_resolver.domain.network.exceptions import (
    ConfigurationError,
    NameNotFoundError,
    NetworkConfigError,
    NetworkResolutionError,
)
from vpc_resolver.domain.network.value_objects import (
    DeclaredNetworkConfig,
    InventoryObject,
    ResolvedNetworkConfig,
    ResourceKind,
)

REGION = 'us-moon-1'
SETUP_ERROR = 'Deployment file is not configured correctly. Please see README for proper setup.'


def declared(**overrides):
    config = {
        'vpcName': 'ci',
        'subnetNames': ['test_subnet_1', 'test_subnet_2', 'test_subnet_3'],
        'securityGroupNames': ['test_group_1'],
    }
    config.update(overrides)
    return config


class TestUpdateVpcConfig:
    """Test the full resolution flow."""

    def test_resolves_declared_names(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        resolved = asyncio.run(service.update_vpc_config(REGION, declared()))

        assert resolved.to_dict() == {
            'securityGroupIds': ['sg-test'],
            'subnetIds': ['subnet-test-1', 'subnet-test-2', 'subnet-test-3'],
        }
        assert resolved.vpc_id == 'vpc-test'

    def test_accepts_declared_model(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)
        model = DeclaredNetworkConfig.from_dict(declared())

        resolved = asyncio.run(service.update_vpc_config(REGION, model))

        assert resolved.subnet_ids == ['subnet-test-1', 'subnet-test-2', 'subnet-test-3']

    def test_preserves_declared_order(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        resolved = asyncio.run(service.update_vpc_config(
            REGION, declared(subnetNames=['test_subnet_3', 'test_subnet_1'])
        ))

        assert resolved.subnet_ids == ['subnet-test-3', 'subnet-test-1']

    def test_subnet_and_group_lookups_are_scoped_to_vpc(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        asyncio.run(service.update_vpc_config(REGION, declared()))

        assert fake_inventory.calls[0] == (ResourceKind.VPC, REGION, None)
        assert sorted(fake_inventory.calls[1:]) == sorted([
            (ResourceKind.SUBNET, REGION, 'vpc-test'),
            (ResourceKind.SECURITY_GROUP, REGION, 'vpc-test'),
        ])

    @pytest.mark.parametrize('config', [None, {}, {'vpcName': ''}, {'vpcName': None}])
    def test_no_vpc_name_makes_no_calls(self, fake_inventory, config):
        service = NetworkConfigService(fake_inventory)

        resolved = asyncio.run(service.update_vpc_config(REGION, config))

        assert resolved == ResolvedNetworkConfig.empty()
        assert fake_inventory.calls == []

    def test_incomplete_config_fails_before_any_call(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        # Raised by the call itself, nothing needs to be awaited
        with pytest.raises(ConfigurationError) as exc:
            service.update_vpc_config(REGION, {'securityGroupNames': ['test_group_1']})

        assert str(exc.value) == SETUP_ERROR
        assert exc.value.missing_fields == ['vpcName', 'subnetNames']
        assert fake_inventory.calls == []

    def test_vpc_name_without_subnets_is_configuration_error(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        with pytest.raises(ConfigurationError) as exc:
            service.update_vpc_config(REGION, {'vpcName': 'ci', 'securityGroupNames': ['test_group_1']})

        assert str(exc.value) == SETUP_ERROR
        assert fake_inventory.calls == []

    def test_names_given_as_string_are_configuration_error(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        with pytest.raises(ConfigurationError) as exc:
            service.update_vpc_config(REGION, declared(subnetNames='test_subnet_1'))

        assert str(exc.value) == SETUP_ERROR
        assert exc.value.missing_fields == ['subnetNames']
        assert fake_inventory.calls == []

    @pytest.mark.parametrize('config', ['ci', ['ci'], 42])
    def test_non_mapping_declaration_is_configuration_error(self, fake_inventory, config):
        service = NetworkConfigService(fake_inventory)

        with pytest.raises(ConfigurationError) as exc:
            service.update_vpc_config(REGION, config)

        assert str(exc.value) == SETUP_ERROR
        assert exc.value.missing_fields == ['vpcName', 'subnetNames', 'securityGroupNames']

    @pytest.mark.parametrize('region', [None, ''])
    def test_missing_region_is_configuration_error(self, fake_inventory, region):
        service = NetworkConfigService(fake_inventory)

        with pytest.raises(ConfigurationError) as exc:
            service.update_vpc_config(region, declared())

        assert str(exc.value) == SETUP_ERROR
        assert exc.value.missing_fields == ['region']
        assert fake_inventory.calls == []

    def test_missing_region_without_names_is_no_op(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        resolved = asyncio.run(service.update_vpc_config(None, {}))

        assert resolved.is_empty()

    def test_configuration_error_is_distinct_from_resolution_error(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        with pytest.raises(ConfigurationError) as exc:
            service.update_vpc_config(REGION, {'vpcName': 'ci'})

        assert not isinstance(exc.value, NetworkResolutionError)
        assert isinstance(exc.value, NetworkConfigError)

    def test_missing_vpc_is_wrapped(self, empty_inventory):
        service = NetworkConfigService(empty_inventory)

        with pytest.raises(NetworkResolutionError) as exc:
            asyncio.run(service.update_vpc_config(REGION, declared()))

        assert str(exc.value) == 'Could not set vpc config. Message: Invalid vpc name, it does not exist'
        assert isinstance(exc.value.cause, NameNotFoundError)
        assert exc.value.__cause__ is exc.value.cause
        assert len(empty_inventory.calls) == 1

    def test_missing_subnet_is_wrapped(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        with pytest.raises(NetworkResolutionError) as exc:
            asyncio.run(service.update_vpc_config(
                REGION, declared(subnetNames=['test_subnet_1', 'not_a_subnet'])
            ))

        assert str(exc.value) == 'Could not set vpc config. Message: Invalid subnet name, it does not exist'
        assert exc.value.cause.kind == ResourceKind.SUBNET

    def test_missing_security_group_is_wrapped(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        with pytest.raises(NetworkResolutionError) as exc:
            asyncio.run(service.update_vpc_config(REGION, declared(securityGroupNames=['not_a_security'])))

        assert str(exc.value) == (
            'Could not set vpc config. Message: Invalid security group name, it does not exist'
        )

    def test_transport_error_names_region(self, failing_inventory, transport_error):
        inventory = failing_inventory({ResourceKind.VPC: transport_error('endpoint unreachable')})
        service = NetworkConfigService(inventory)

        with pytest.raises(NetworkResolutionError) as exc:
            asyncio.run(service.update_vpc_config(REGION, declared()))

        assert str(exc.value) == (
            'Could not set vpc config. Message: FakeTransportError: endpoint unreachable (us-moon-1)'
        )
        assert exc.value.region == REGION
        assert isinstance(exc.value.cause, transport_error)

    def test_concurrent_lookup_failure_wins(self, failing_inventory, transport_error):
        inventory = failing_inventory({ResourceKind.SECURITY_GROUP: transport_error('boom')})
        service = NetworkConfigService(inventory)

        with pytest.raises(NetworkResolutionError) as exc:
            asyncio.run(service.update_vpc_config(REGION, declared()))

        assert 'boom' in str(exc.value)

    def test_unexpected_errors_are_not_wrapped(self, failing_inventory):
        inventory = failing_inventory({ResourceKind.VPC: KeyError('VpcId')})
        service = NetworkConfigService(inventory)

        with pytest.raises(KeyError):
            asyncio.run(service.update_vpc_config(REGION, declared()))


class TestPerKindLookups:
    """Test the per-kind lookups exposed by the service."""

    def test_get_vpc_id(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)
        assert asyncio.run(service.get_vpc_id(REGION, 'ci')) == 'vpc-test'

    def test_get_vpc_id_not_found(self, empty_inventory):
        service = NetworkConfigService(empty_inventory)

        with pytest.raises(NameNotFoundError) as exc:
            asyncio.run(service.get_vpc_id(REGION, 'not_a_vpc_name'))

        assert str(exc.value) == 'Invalid vpc name, it does not exist'

    def test_get_subnet_ids(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        subnet_ids = asyncio.run(service.get_subnet_ids(REGION, 'vpc-test', ['test_subnet_1']))

        assert subnet_ids[0] == 'subnet-test-1'
        assert fake_inventory.calls == [(ResourceKind.SUBNET, REGION, 'vpc-test')]

    def test_get_security_group_ids(self, fake_inventory):
        service = NetworkConfigService(fake_inventory)

        group_ids = asyncio.run(service.get_security_group_ids(REGION, 'vpc-test', ['test_group_1']))

        assert group_ids[0] == 'sg-test'

    def test_invalid_subnet(self, empty_inventory):
        service = NetworkConfigService(empty_inventory)

        with pytest.raises(NameNotFoundError) as exc:
            asyncio.run(service.get_subnet_ids(REGION, 'vpc-test', ['not_a_subnet']))

        assert str(exc.value) == 'Invalid subnet name, it does not exist'

    def test_invalid_security_group(self, empty_inventory):
        service = NetworkConfigService(empty_inventory)

        with pytest.raises(NameNotFoundError) as exc:
            asyncio.run(service.get_security_group_ids(REGION, 'vpc-test', ['not_a_security']))

        assert str(exc.value) == 'Invalid security group name, it does not exist'

    def test_duplicate_vpc_names_use_first_match(self, inventory_factory):
        inventory = inventory_factory({ResourceKind.VPC: [
            InventoryObject(id='vpc-first', name='ci'),
            InventoryObject(id='vpc-second', name='ci'),
        ]})
        service = NetworkConfigService(inventory)

        assert asyncio.run(service.get_vpc_id(REGION, 'ci')) == 'vpc-first'
