# Copyright (c) Hathor Labs and its affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.
from typing import Optional, Union

from netregistry.exceptions import InvalidNetwork

# Size of the magic number that prefixes every p2p message.
NETWORK_MAGIC_SIZE = 4


def int_to_bytes(number: int, size: int, signed: bool = False) -> bytes:
    return number.to_bytes(size, byteorder='big', signed=signed)


def normalize_magic(value: Union[int, bytes, bytearray, str]) -> bytes:
    """Return the network magic as a fixed-length byte buffer.

    Accepted inputs are an int (`0xf9beb4d9`), raw bytes, or a hex string with or
    without the `0x` prefix. It raises `InvalidNetwork` when the value does not
    fit in `NETWORK_MAGIC_SIZE` bytes.
    """
    if isinstance(value, bool):
        raise InvalidNetwork(f'invalid network magic: {value!r}')
    if isinstance(value, int):
        try:
            return int_to_bytes(value, NETWORK_MAGIC_SIZE)
        except OverflowError:
            raise InvalidNetwork(f'network magic does not fit in {NETWORK_MAGIC_SIZE} bytes: {value:#x}')
    if isinstance(value, str):
        text = value[2:] if value.lower().startswith('0x') else value
        try:
            value = bytes.fromhex(text)
        except ValueError:
            raise InvalidNetwork(f'invalid network magic: {value!r}')
    if isinstance(value, (bytes, bytearray)):
        if len(value) != NETWORK_MAGIC_SIZE:
            raise InvalidNetwork(f'network magic must have {NETWORK_MAGIC_SIZE} bytes: {bytes(value).hex()}')
        return bytes(value)
    raise InvalidNetwork(f'invalid network magic: {value!r}')


def parse_int(text: str) -> Optional[int]:
    """Parse a decimal or prefixed (`0x`, `0o`, `0b`) integer. Return None if it is not a number."""
    try:
        return int(text, 0)
    except ValueError:
        return None
