"""
Main CLI module with argument parsing and command execution.

This module provides the command line interface including:
- Command line argument parsing
- Loading of configuration and declared network names
- Running the resolution and printing the result
"""
import argparse
import asyncio
import os
import sys
from typing import Any, Dict, List, Optional

from vpc_resolver import __version__
from vpc_resolver.bootstrap import create_network_config_service
from vpc_resolver.cli.formatters import format_output
from vpc_resolver.config.manager import ConfigurationManager
from vpc_resolver.domain.base.exceptions import DomainException
from vpc_resolver.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "vpc-resolver",
        description="VPC Config Resolver - resolve AWS network names into deployment network config",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s resolve --vpc-name ci --subnet-names app_a app_b --security-group-names app_sg
  %(prog)s resolve --declared serverless-vpc.yml --format yaml
  %(prog)s --config resolver.yml resolve --region eu-west-1
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=['json', 'yaml'], default='json', help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.required = True

    resolve = subparsers.add_parser('resolve', help='Resolve declared network names into ids')
    resolve.add_argument('--region', help='AWS region (defaults to the configured region)')
    resolve.add_argument('--declared', help='JSON or YAML file with vpcName, subnetNames, securityGroupNames')
    resolve.add_argument('--vpc-name', help='Name tag of the VPC')
    resolve.add_argument('--subnet-names', nargs='+', help='Name tags of the subnets, in order')
    resolve.add_argument('--security-group-names', nargs='+', help='Security group names, in order')

    return parser.parse_args(argv)


def build_declared_config(
    args: argparse.Namespace, config_manager: ConfigurationManager
) -> Dict[str, Any]:
    """
    Merge the declared network names from all sources.

    Command line names override the ``--declared`` file, which overrides the
    ``network`` section of the application configuration.
    """
    declared: Dict[str, Any] = dict(config_manager.app_config.network or {})

    if args.declared:
        declared.update(config_manager.load_from_file(args.declared))

    overrides = {
        'vpcName': args.vpc_name,
        'subnetNames': args.subnet_names,
        'securityGroupNames': args.security_group_names,
    }
    declared.update({key: value for key, value in overrides.items() if value is not None})
    return declared


async def execute_resolve(args: argparse.Namespace, config_manager: ConfigurationManager) -> Dict[str, Any]:
    """Run the resolution for the resolve command."""
    app_config = config_manager.app_config
    region = args.region or app_config.aws.region
    declared = build_declared_config(args, config_manager)

    service = create_network_config_service(app_config)
    resolved = await service.update_vpc_config(region, declared)
    return resolved.to_dict()


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)

    try:
        config_manager = ConfigurationManager(args.config)
        logging_config = config_manager.app_config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={'level': args.log_level})
        setup_logging(logging_config)

        result = asyncio.run(execute_resolve(args, config_manager))
    except DomainException as e:
        logger.debug("Command failed", error_type=type(e).__name__)
        print(str(e), file=sys.stderr)
        return 1

    print(format_output(result, args.format))
    return 0


if __name__ == '__main__':
    sys.exit(main())
