"""
Command-line interface for the JumpServer Python SDK
Provides get/list access to sessions, accounts, assets, users and audit logs
"""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from . import __version__
from .client import JmsClient, create_client
from .config import (
    AuthEnvironment,
    AuthMode,
    ClientConfig,
    load_client_config_from_file,
)
from .exceptions import JmsSDKError, ValidationError
from .resources import (
    AccountFilter,
    AssetFilter,
    OperateLogFilter,
    SessionFilter,
    UserFilter,
)

logger = logging.getLogger(__name__)

# Resource name -> (client attribute, filter class)
RESOURCES = {
    'sessions': ('sessions', SessionFilter),
    'accounts': ('accounts', AccountFilter),
    'assets': ('assets', AssetFilter),
    'users': ('users', UserFilter),
    'operate-logs': ('operate_logs', OperateLogFilter),
}


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='jms-cli',
        description='JumpServer API command-line interface'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'JumpServer Python SDK {__version__}'
    )
    parser.add_argument('--config', help='JSON configuration file')
    parser.add_argument('--endpoint', help='JumpServer base URL (overrides configuration)')
    parser.add_argument('--token', help='Static API token (overrides configuration)')
    parser.add_argument(
        '--auth-mode',
        choices=[mode.value for mode in AuthMode],
        help='Authentication mode (default: chosen from configuration)'
    )
    parser.add_argument('--debug', action='store_true', help='Log requests and raw response bodies')

    subparsers = parser.add_subparsers(dest='resource', help='Resources')
    for name in RESOURCES:
        setup_resource_parser(subparsers, name)

    return parser


def setup_resource_parser(subparsers, name: str):
    """Setup get/list subcommands for one resource."""
    resource_parser = subparsers.add_parser(name, help=f'{name} operations')
    actions = resource_parser.add_subparsers(dest='action', help='Operations')

    get_parser = actions.add_parser('get', help=f'Get one item from {name}')
    get_parser.add_argument('id', help='Item identifier')

    list_parser = actions.add_parser('list', help=f'List {name}')
    list_parser.add_argument('--search', help='Free-text search')
    list_parser.add_argument('--order', help='Ordering field')
    list_parser.add_argument('--limit', type=int, help='Maximum number of items')
    list_parser.add_argument('--offset', type=int, help='Offset of the first item')
    list_parser.add_argument(
        '--param',
        action='append',
        default=[],
        metavar='KEY=VALUE',
        help='Additional filter field (repeatable)'
    )


def parse_params(params: List[str]) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` pairs."""
    parsed = {}
    for item in params:
        key, sep, value = item.partition('=')
        if not sep or not key:
            raise ValidationError(f"Invalid parameter, expected KEY=VALUE: {item}")
        parsed[key] = value
    return parsed


def load_config(args) -> ClientConfig:
    """Merge the configuration file or environment with command-line overrides."""
    if args.config:
        config = load_client_config_from_file(args.config)
    elif args.endpoint:
        config = ClientConfig(endpoints=args.endpoint)
    else:
        config = ClientConfig.from_environment()

    if args.endpoint:
        config.endpoints = args.endpoint
    if args.token:
        config.token = args.token
    if args.auth_mode:
        config.auth_mode = AuthMode(args.auth_mode)
    if args.debug:
        config.debug = True
    return config


def build_filter(args):
    """Build the filter for a list command."""
    _, filter_cls = RESOURCES[args.resource]
    values = parse_params(args.param)
    for name in ('search', 'order', 'limit', 'offset'):
        value = getattr(args, name)
        if value is not None:
            values[name] = value
    try:
        return filter_cls(**values)
    except TypeError:
        allowed = ', '.join(sorted(filter_cls.__dataclass_fields__))
        raise ValidationError(f"Unknown filter field for {args.resource}; allowed: {allowed}")


def handle_resource_command(client: JmsClient, args) -> int:
    """Handle get/list for a resource."""
    attribute, _ = RESOURCES[args.resource]
    resource = getattr(client, attribute)

    if args.action == 'get':
        item = resource.get(args.id)
        output = item.to_dict()
    elif args.action == 'list':
        items = resource.list(build_filter(args))
        output = items.to_list()
    else:
        print(f"Error: No operation specified for {args.resource}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI

    Args:
        argv: Command line arguments (None to use sys.argv)

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if not args.resource:
        parser.print_help()
        return 1

    try:
        config = load_config(args)
        client = create_client(config, AuthEnvironment.from_os())
        return handle_resource_command(client, args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except JmsSDKError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
