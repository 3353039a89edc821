"""
cli.py

Prints the state address of a Sabre or Pike entity, so addresses can be
checked against state or used as transaction inputs/outputs.
"""
import argparse
import logging
import sys

from sawtooth_sdk.processor.log import init_console_logging

from addressing import addresser
from addressing.errors import AddressingError
from addressing.hashing import PROVIDERS, get_provider

LOGGER = logging.getLogger(__name__)


def create_parser(prog_name):
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description='Compute state addresses for Sabre and Pike entities.'
    )
    parser.add_argument('-v', '--verbose', action='count', default=0, help='enable more verbose output')
    parser.add_argument(
        '--hash',
        choices=sorted(PROVIDERS),
        default='sha512',
        help='hash provider used to derive the address'
    )

    subparsers = parser.add_subparsers(title='entities', dest='entity')
    subparsers.required = True

    namespace_registry = subparsers.add_parser('namespace-registry', help='namespace registry address')
    namespace_registry.add_argument('namespace', help='namespace, at least 6 characters')

    contract_registry = subparsers.add_parser('contract-registry', help='contract registry address')
    contract_registry.add_argument('name', help='contract name')

    contract = subparsers.add_parser('contract', help='contract address')
    contract.add_argument('name', help='contract name')
    contract.add_argument('version', help='contract version')

    smart_permission = subparsers.add_parser('smart-permission', help='smart permission address')
    smart_permission.add_argument('org_id', help='organization id')
    smart_permission.add_argument('name', help='smart permission name')

    agent = subparsers.add_parser('agent', help='pike agent address')
    agent.add_argument('name', help="agent's name, usually its public key")

    org = subparsers.add_parser('org', help='pike organization address')
    org.add_argument('org_id', help='organization id')

    setting = subparsers.add_parser('setting', help='on-chain setting address')
    setting.add_argument('key', help="setting key, e.g. '{}'".format(addresser.ADMINISTRATORS_SETTING_KEY))

    address_type = subparsers.add_parser('type', help='identify the entity type of an address')
    address_type.add_argument('address', help='70 character hex address')

    return parser


def derive(args):
    deriver = addresser.AddressDeriver(hash_provider=get_provider(args.hash))
    LOGGER.info('deriving %s address with %s', args.entity, args.hash)

    if args.entity == 'namespace-registry':
        address = deriver.compute_namespace_registry_address(args.namespace)
    elif args.entity == 'contract-registry':
        address = deriver.compute_contract_registry_address(args.name)
    elif args.entity == 'contract':
        address = deriver.compute_contract_address(args.name, args.version)
    elif args.entity == 'smart-permission':
        address = deriver.compute_smart_permission_address(args.org_id, args.name)
    elif args.entity == 'agent':
        address = deriver.compute_agent_address(args.name)
    elif args.entity == 'org':
        address = deriver.compute_org_address(args.org_id)
    elif args.entity == 'setting':
        address = addresser.compute_setting_address(args.key)
    elif args.entity == 'type':
        address_type = addresser.get_address_type(args.address)
        return address_type.name.lower() if address_type else 'unknown'
    else:
        raise AssertionError('unrecognized entity: {}'.format(args.entity))

    return addresser.address_to_hex(address)


def main(args=None, prog_name='sabre-address'):
    parser = create_parser(prog_name)
    args = parser.parse_args(args)
    init_console_logging(verbose_level=args.verbose)

    try:
        print(derive(args))
    except AddressingError as err:
        print('error: {}'.format(err), file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
