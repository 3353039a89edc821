"""
hashing.py

This file contains the hash providers that the addresser hashes identifiers
with. A provider is any object exposing `name`, `digest_size` and
`hash(data) -> bytes`; it must be safe to call from several threads at once.
"""
import hashlib

from Crypto.Hash import SHA512


class HashProvider():
    """
    Only `hash` is required. `name` and `digest_size` are optional; when
    `digest_size` is set the deriver rejects digests too short for an address
    up front instead of at slicing time.
    """

    name = None
    digest_size = None

    def hash(self, data):
        raise NotImplementedError()


class Sha512HashProvider(HashProvider):

    name = 'sha512'
    digest_size = hashlib.sha512().digest_size

    def hash(self, data):
        _check_bytes(data)
        return hashlib.sha512(data).digest()


class CryptoSha512HashProvider(HashProvider):
    """SHA-512 through pycryptodome. Digests match `Sha512HashProvider`."""

    name = 'pycryptodome'
    digest_size = SHA512.digest_size

    def hash(self, data):
        _check_bytes(data)
        return SHA512.new(data).digest()


class CallableHashProvider(HashProvider):

    def __init__(self, func, digest_size, name='callable'):
        self._func = func
        self.digest_size = digest_size
        self.name = name

    def hash(self, data):
        _check_bytes(data)
        return bytes(self._func(data))


PROVIDERS = {
    Sha512HashProvider.name: Sha512HashProvider,
    CryptoSha512HashProvider.name: CryptoSha512HashProvider,
}


def get_provider(name):
    try:
        return PROVIDERS[name]()
    except KeyError:
        raise ValueError('unknown hash provider: {}'.format(name)) from None


def _check_bytes(data):
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError('expected bytes, got {}'.format(type(data).__name__))
