from addressing.addresser import (
    ADDRESS_LENGTH,
    AddressDeriver,
    AddressType,
    address_to_hex,
    compute_agent_address,
    compute_contract_address,
    compute_contract_registry_address,
    compute_namespace_registry_address,
    compute_org_address,
    compute_setting_address,
    compute_smart_permission_address,
    get_address_type,
    hex_to_address,
    parse_hex,
)
from addressing.errors import AddressingError, HashError, InvalidInput
from addressing.hashing import (
    CallableHashProvider,
    CryptoSha512HashProvider,
    HashProvider,
    Sha512HashProvider,
)
