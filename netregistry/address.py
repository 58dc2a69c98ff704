"""
Copyright (c) Hathor Labs and its affiliates.

This source code is licensed under the MIT license found in the
LICENSE file in the root directory of this source tree.
"""
import hashlib
from typing import TYPE_CHECKING, NamedTuple, Tuple

import base58

from netregistry.network import Network

if TYPE_CHECKING:
    from netregistry.registry import NetworkRegistry

# Version fields that can prefix an address, in the order they are tried when decoding.
ADDRESS_KINDS: Tuple[str, ...] = ('pubkeyhash', 'scripthash')

# Size of a hash160 (sha256 and then ripemd160).
HASH160_SIZE = 20

# Version byte + hash160 + checksum.
ADDRESS_SIZE = 1 + HASH160_SIZE + 4


class InvalidAddress(Exception):
    """Raised when decoding an invalid address."""


class DecodedAddress(NamedTuple):
    network: Network
    kind: str
    hash: bytes


def get_checksum(address_bytes: bytes) -> bytes:
    """ Calculate double sha256 of address and gets first 4 bytes

        :param address_bytes: address before checksum
        :type address_bytes: bytes

        :return: checksum of the address
        :rtype: bytes
    """
    return hashlib.sha256(hashlib.sha256(address_bytes).digest()).digest()[:4]


def get_address_from_hash(hash160: bytes, version_byte: int) -> bytes:
    """Gets the address in bytes from a public key hash or a redeem script hash

        :param hash160: hash of public key or redeem script (sha256 and ripemd160)
        :param hash160: bytes

        :param version_byte: first byte of address to define the version of this address
        :param version_byte: int

        :return: address in bytes
        :rtype: bytes
    """
    address = bytes([version_byte])
    address += hash160
    address += get_checksum(address)
    return address


def encode_address(hash160: bytes, network: Network, kind: str = 'pubkeyhash') -> str:
    """Encode a hash160 as a base58 address of `network`.

    `kind` is the version field of the network to use, `pubkeyhash` or `scripthash`.
    """
    if kind not in ADDRESS_KINDS:
        raise ValueError(f'invalid address kind: {kind}')
    if len(hash160) != HASH160_SIZE:
        raise ValueError(f'hash must have {HASH160_SIZE} bytes')
    address = get_address_from_hash(hash160, getattr(network, kind))
    return base58.b58encode(address).decode('utf-8')


def decode_address(address58: str, registry: 'NetworkRegistry') -> DecodedAddress:
    """ Decode address in base58 and find the network it belongs to

    :param address58: Wallet address in base58
    :type address58: string

    :param registry: networks the address may belong to

    :raises InvalidAddress: if address58 is not a valid base58 string, has invalid size or checksum,
                            or its version byte is not used by any network of the registry

    :return: network, version field and hash of the address
    :rtype: DecodedAddress
    """
    try:
        decoded_address = base58.b58decode(address58)
    except ValueError:
        # Invalid base58 string
        raise InvalidAddress('Invalid base58 address')
    # Validate address size [25 bytes]
    if len(decoded_address) != ADDRESS_SIZE:
        raise InvalidAddress(f'Address size must have {ADDRESS_SIZE} bytes')
    # Validate the checksum
    address_checksum = decoded_address[-4:]
    valid_checksum = get_checksum(decoded_address[:-4])
    if address_checksum != valid_checksum:
        raise InvalidAddress('Invalid checksum of address')

    version_byte = decoded_address[0]
    for kind in ADDRESS_KINDS:
        network = registry.get(version_byte, kind)
        if network is not None:
            return DecodedAddress(network=network, kind=kind, hash=decoded_address[1:-4])
    raise InvalidAddress(f'Unknown address version: {version_byte:#04x}')
