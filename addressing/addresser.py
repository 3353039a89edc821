"""
addresser.py

This file contains functions and properties related to the addressing scheme and
namespace management for Sabre smart contracts and Pike agents/organizations.

Every state address is 35 bytes (70 hex characters): a fixed namespace prefix
followed by the leading bytes of a hash of the identifier. The prefixes and the
number of digest bytes taken for each entity type must never change, since
existing state is stored under the addresses they produce.
"""
import enum
import hashlib
import logging
import string

from addressing.errors import HashError, InvalidInput
from addressing.hashing import Sha512HashProvider

LOGGER = logging.getLogger(__name__)

ADDRESS_LENGTH = 35

ADMINISTRATORS_SETTING_ADDRESS = \
    '000000a87cb5eafdcca6a814e4add97c4b517d3c530c2f44b31d18e3b0c44298fc1c14'
ADMINISTRATORS_SETTING_KEY = 'sawtooth.swa.administrators'

NAMESPACE_REGISTRY_ADDRESS_PREFIX = '00ec00'
CONTRACT_REGISTRY_ADDRESS_PREFIX = '00ec01'
CONTRACT_ADDRESS_PREFIX = '00ec02'
SMART_PERMISSION_ADDRESS_PREFIX = '00ec03'
AGENT_ADDRESS_PREFIX = 'cad11d00'
ORG_ADDRESS_PREFIX = 'cad11d01'
SETTING_ADDRESS_PREFIX = '000000'

NAMESPACES = [
    NAMESPACE_REGISTRY_ADDRESS_PREFIX,
    CONTRACT_REGISTRY_ADDRESS_PREFIX,
    CONTRACT_ADDRESS_PREFIX,
    SMART_PERMISSION_ADDRESS_PREFIX,
]
PIKE_NAMESPACE = 'cad11d'

# Digest bytes following each prefix. 3-byte prefixes take 32, 4-byte take 31.
NAMESPACE_REGISTRY_HASH_LENGTH = 32
CONTRACT_REGISTRY_HASH_LENGTH = 32
CONTRACT_HASH_LENGTH = 32
SMART_PERMISSION_ORG_HASH_LENGTH = 3
SMART_PERMISSION_NAME_HASH_LENGTH = 29
AGENT_HASH_LENGTH = 31
ORG_HASH_LENGTH = 31

# Only the leading characters of a namespace identify its registry.
NAMESPACE_LENGTH = 6
CONTRACT_SEPARATOR = ','

# Settings keys map to four sha256 slices of 8 bytes each.
SETTING_KEY_PARTS = 4
SETTING_PART_HASH_LENGTH = 8


class AddressType(enum.Enum):
    NAMESPACE_REGISTRY = NAMESPACE_REGISTRY_ADDRESS_PREFIX
    CONTRACT_REGISTRY = CONTRACT_REGISTRY_ADDRESS_PREFIX
    CONTRACT = CONTRACT_ADDRESS_PREFIX
    SMART_PERMISSION = SMART_PERMISSION_ADDRESS_PREFIX
    AGENT = AGENT_ADDRESS_PREFIX
    ORGANIZATION = ORG_ADDRESS_PREFIX
    SETTING = SETTING_ADDRESS_PREFIX


def parse_hex(hex_str):
    """Convert a hex string to bytes."""
    if not isinstance(hex_str, str):
        raise InvalidInput('expected a hex string, got {}'.format(type(hex_str).__name__))

    if len(hex_str) % 2 != 0:
        raise InvalidInput('hex string has odd number of digits: {}'.format(hex_str))

    # bytes.fromhex() tolerates whitespace, so check every digit first.
    if any(c not in string.hexdigits for c in hex_str):
        raise InvalidInput('string contains invalid hex: {}'.format(hex_str))

    return bytes.fromhex(hex_str)


class AddressDeriver():
    """
    Derives state addresses using an injected hash provider.

    The deriver holds no mutable state; one instance may be shared freely
    between threads as long as its provider is thread safe.
    """

    def __init__(self, hash_provider=None):
        if hash_provider is None:
            hash_provider = Sha512HashProvider()

        longest_slice = max(
            NAMESPACE_REGISTRY_HASH_LENGTH,
            CONTRACT_REGISTRY_HASH_LENGTH,
            CONTRACT_HASH_LENGTH,
            SMART_PERMISSION_ORG_HASH_LENGTH,
            SMART_PERMISSION_NAME_HASH_LENGTH,
            AGENT_HASH_LENGTH,
            ORG_HASH_LENGTH,
        )
        # Providers that only implement hash() are checked when slicing.
        digest_size = getattr(hash_provider, 'digest_size', None)
        if digest_size is not None and digest_size < longest_slice:
            raise ValueError(
                'hash provider {} has a {} byte digest, at least {} are needed'.format(
                    getattr(hash_provider, 'name', type(hash_provider).__name__),
                    digest_size,
                    longest_slice
                )
            )

        self._hash_provider = hash_provider

    @property
    def hash_provider(self):
        return self._hash_provider

    def hash_and_slice(self, data, length, description='data'):
        """
        Hash `data` and return the first `length` bytes of the digest.

        Raises:
            HashError: the hash provider failed.
            ValueError: the digest is shorter than `length`; this is a
                programming error and is never turned into a short address.
        """
        try:
            digest = self._hash_provider.hash(data)
        except Exception as err:
            raise HashError('failed to hash {}: {}'.format(description, err)) from err

        if len(digest) < length:
            raise ValueError(
                'digest of {} bytes cannot supply {} bytes'.format(len(digest), length)
            )

        return digest[:length]

    def compute_namespace_registry_address(self, namespace):
        """
        Compute a state address for a given namespace registry.

        Args:
            namespace: the address prefix for this namespace; only its first
                six UTF-8 bytes are used.
        """
        encoded = _encode(namespace, 'namespace')
        if len(encoded) < NAMESPACE_LENGTH:
            raise InvalidInput(
                "namespace '{}' is less than {} characters long".format(
                    namespace, NAMESPACE_LENGTH
                )
            )

        prefix = encoded[:NAMESPACE_LENGTH]
        if isinstance(namespace, str):
            try:
                prefix.decode('utf-8')
            except UnicodeDecodeError as err:
                raise InvalidInput(
                    "namespace '{}' does not end a character at byte {}".format(
                        namespace, NAMESPACE_LENGTH
                    )
                ) from err

        hashed = self.hash_and_slice(
            prefix, NAMESPACE_REGISTRY_HASH_LENGTH, 'namespace registry address'
        )
        return _compose('namespace registry', NAMESPACE_REGISTRY_ADDRESS_PREFIX, hashed)

    def compute_contract_registry_address(self, name):
        """
        Compute a state address for a given contract registry.

        Args:
            name: the name of the contract registry
        """
        hashed = self.hash_and_slice(
            _encode(name, 'contract registry name'),
            CONTRACT_REGISTRY_HASH_LENGTH,
            'contract registry address'
        )
        return _compose('contract registry', CONTRACT_REGISTRY_ADDRESS_PREFIX, hashed)

    def compute_contract_address(self, name, version):
        """
        Compute a state address for a given contract.

        The hashed identifier is `name,version` with no escaping, so a comma
        inside either field yields the same address as the equivalent split
        elsewhere ('a,b' + 'c' and 'a' + 'b,c').

        Args:
            name: the name of the contract
            version: the version of the contract
        """
        identifier = _encode(name, 'contract name') + \
            CONTRACT_SEPARATOR.encode('utf-8') + \
            _encode(version, 'contract version')
        hashed = self.hash_and_slice(identifier, CONTRACT_HASH_LENGTH, 'contract address')
        return _compose('contract', CONTRACT_ADDRESS_PREFIX, hashed)

    def compute_smart_permission_address(self, org_id, name):
        """
        Compute a state address for a given smart permission.

        The organization and the permission name are hashed separately, so
        the bytes identifying each can be checked on their own.

        Args:
            org_id: the organization's id
            name: smart permission name
        """
        org_id_hash = self.hash_and_slice(
            _encode(org_id, 'organization id'),
            SMART_PERMISSION_ORG_HASH_LENGTH,
            'pike org id'
        )
        name_hash = self.hash_and_slice(
            _encode(name, 'smart permission name'),
            SMART_PERMISSION_NAME_HASH_LENGTH,
            'smart permission name'
        )
        return _compose(
            'smart permission', SMART_PERMISSION_ADDRESS_PREFIX, org_id_hash, name_hash
        )

    def compute_agent_address(self, name):
        """
        Compute a state address for a given agent name.

        Args:
            name: the agent's name, usually its public key, as bytes
        """
        hashed = self.hash_and_slice(
            _encode(name, 'agent name'), AGENT_HASH_LENGTH, 'pike agent address'
        )
        return _compose('agent', AGENT_ADDRESS_PREFIX, hashed)

    def compute_org_address(self, org_id):
        """
        Compute a state address for a given organization id.

        Args:
            org_id: the organization's id
        """
        hashed = self.hash_and_slice(
            _encode(org_id, 'organization id'), ORG_HASH_LENGTH, 'pike org address'
        )
        return _compose('organization', ORG_ADDRESS_PREFIX, hashed)


def compute_setting_address(key):
    """
    Compute the state address of a Sawtooth on-chain setting.

    Settings addresses always use sha256, independently of any injected hash
    provider, so they match the settings transaction family.
    """
    if not isinstance(key, str) or not key:
        raise InvalidInput('setting key must be a non-empty string: {!r}'.format(key))

    parts = key.split('.', SETTING_KEY_PARTS - 1)
    parts.extend([''] * (SETTING_KEY_PARTS - len(parts)))

    hashed = [
        hashlib.sha256(part.encode('utf-8')).digest()[:SETTING_PART_HASH_LENGTH]
        for part in parts
    ]
    return _compose('setting', SETTING_ADDRESS_PREFIX, *hashed)


def address_to_hex(address):
    _check_length(address)
    return bytes(address).hex()


def hex_to_address(hex_str):
    address = parse_hex(hex_str)
    _check_length(address)
    return address


def get_address_type(address):
    """
    Return the `AddressType` of an address given as bytes or hex, or None if
    its prefix belongs to no known entity type.
    """
    if isinstance(address, str):
        address = hex_to_address(address)
    else:
        _check_length(address)

    # Longest prefix first.
    for address_type in sorted(AddressType, key=lambda t: -len(t.value)):
        if bytes(address).startswith(parse_hex(address_type.value)):
            return address_type

    return None


def _encode(value, field):
    if isinstance(value, str):
        try:
            return value.encode('utf-8')
        except UnicodeEncodeError as err:
            raise InvalidInput('{} is not valid UTF-8: {!r}'.format(field, value)) from err
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise InvalidInput(
        '{} must be str or bytes, got {}'.format(field, type(value).__name__)
    )


def _compose(kind, prefix, *parts):
    address = b''.join([parse_hex(prefix)] + list(parts))
    if len(address) != ADDRESS_LENGTH:
        raise ValueError(
            '{} address is {} bytes, expected {}'.format(kind, len(address), ADDRESS_LENGTH)
        )

    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug('derived %s address %s', kind, address.hex())
    return address


def _check_length(address):
    if not isinstance(address, (bytes, bytearray)):
        raise InvalidInput('address must be bytes, got {}'.format(type(address).__name__))
    if len(address) != ADDRESS_LENGTH:
        raise InvalidInput(
            'address is {} bytes long, expected {}'.format(len(address), ADDRESS_LENGTH)
        )


_DEFAULT_DERIVER = AddressDeriver()

compute_namespace_registry_address = _DEFAULT_DERIVER.compute_namespace_registry_address
compute_contract_registry_address = _DEFAULT_DERIVER.compute_contract_registry_address
compute_contract_address = _DEFAULT_DERIVER.compute_contract_address
compute_smart_permission_address = _DEFAULT_DERIVER.compute_smart_permission_address
compute_agent_address = _DEFAULT_DERIVER.compute_agent_address
compute_org_address = _DEFAULT_DERIVER.compute_org_address
