"""
Copyright (c) Hathor Labs and its affiliates.

This source code is licensed under the MIT license found in the
LICENSE file in the root directory of this source tree.
"""

from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

from netregistry.exceptions import InvalidNetwork
from netregistry.utils import normalize_magic

# camelCase input names, mapped to attribute names.
FIELD_ALIASES: Dict[str, str] = {
    'networkMagic': 'network_magic',
    'dnsSeeds': 'dns_seeds',
    'coinName': 'coin_name',
    'shortName': 'short_name',
    'skipSignTime': 'skip_sign_time',
}

REQUIRED_FIELDS: Tuple[str, ...] = ('name', 'pubkeyhash', 'privatekey', 'scripthash', 'xpubkey', 'xprivkey')

VERSION_BYTE_FIELDS: Tuple[str, ...] = ('pubkeyhash', 'privatekey', 'scripthash')

EXTENDED_KEY_FIELDS: Tuple[str, ...] = ('xpubkey', 'xprivkey')

STRING_FIELDS: Tuple[str, ...] = ('name', 'alias', 'coin', 'coin_name', 'short_name', 'url', 'algorithm', 'prefix')

FLAG_FIELDS: Tuple[str, ...] = ('txtimestamp', 'skip_sign_time', 'pos')

MAX_VERSION_BYTE = 0xff

MAX_EXTENDED_KEY_VERSION = 0xffffffff

MAX_PORT = 65535


def field_name(name: str) -> str:
    """Return the attribute name for `name`, accepting the camelCase spelling."""
    return FIELD_ALIASES.get(name, name)


class NetworkParams(NamedTuple):
    """Parameters that change when a test network runs in regtest mode."""

    port: Optional[int] = None
    network_magic: Optional[bytes] = None
    dns_seeds: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'NetworkParams':
        fields: Dict[str, Any] = {}
        for key, value in data.items():
            name = field_name(key)
            if name not in cls._fields:
                raise InvalidNetwork(f'unknown regtest field: {key}')
            fields[name] = value
        return cls(
            port=_check_port(fields.get('port')),
            network_magic=_check_magic(fields.get('network_magic')),
            dns_seeds=_check_seeds(fields.get('dns_seeds')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'port': self.port,
            'network_magic': self.network_magic.hex() if self.network_magic is not None else None,
            'dns_seeds': list(self.dns_seeds),
        }


class Network(NamedTuple):
    """Parameter set that identifies a blockchain network.

    Records are immutable. Use `Network.from_dict()` to build one from loosely typed data, it
    normalizes the values and validates them.
    """

    # Name of the network: "livenet", "testnet", "litecoin", ...
    name: str

    # Version byte of pay-to-pubkey-hash addresses
    pubkeyhash: int

    # Version byte of WIF private keys
    privatekey: int

    # Version byte of pay-to-script-hash addresses
    scripthash: int

    # Version bytes of serialized BIP32 extended keys
    xpubkey: int
    xprivkey: int

    # Secondary name: "mainnet" for "livenet", ...
    alias: Optional[str] = None

    coin: Optional[str] = None
    coin_name: Optional[str] = None
    short_name: Optional[str] = None
    url: Optional[str] = None

    # Proof-of-work algorithm: "scrypt", ...
    algorithm: Optional[str] = None

    # First character of the network's addresses
    prefix: Optional[str] = None

    # Bytes that prefix every p2p message
    network_magic: Optional[bytes] = None

    # Default p2p port
    port: Optional[int] = None

    dns_seeds: Tuple[str, ...] = ()

    # Flags used by transaction builders, not interpreted here
    txtimestamp: Optional[bool] = None
    skip_sign_time: Optional[bool] = None
    pos: Optional[bool] = None

    # Alternative parameters used when the registry runs in regtest mode
    regtest: Optional[NetworkParams] = None

    def __str__(self) -> str:
        return self.name

    @property
    def params(self) -> NetworkParams:
        """Return the parameters currently in use (port, magic and seeds)."""
        return NetworkParams(port=self.port, network_magic=self.network_magic, dns_seeds=self.dns_seeds)

    def with_params(self, params: NetworkParams) -> 'Network':
        """Return a copy of this network using `params` for port, magic and seeds."""
        return self._replace(port=params.port, network_magic=params.network_magic, dns_seeds=params.dns_seeds)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Network':
        """Create a network from a dict.

        Keys may use camelCase names (`networkMagic`, `dnsSeeds`, ...).
        Keys with a None value are treated as missing.

        :raises InvalidNetwork: if a required field is missing, a field is unknown or a value is out of range
        """
        fields: Dict[str, Any] = {}
        for key, value in data.items():
            name = field_name(key)
            if name not in cls._fields:
                raise InvalidNetwork(f'unknown network field: {key}')
            if name in fields:
                raise InvalidNetwork(f'network field given twice: {name}')
            if value is not None:
                fields[name] = value

        for name in REQUIRED_FIELDS:
            if name not in fields:
                raise InvalidNetwork(f'missing network field: {name}')

        for name in STRING_FIELDS:
            if name in fields and not isinstance(fields[name], str):
                raise InvalidNetwork(f'{name} must be a string: {fields[name]!r}')
        if not fields['name']:
            raise InvalidNetwork('network name cannot be empty')
        if 'prefix' in fields and len(fields['prefix']) != 1:
            raise InvalidNetwork(f'prefix must be a single character: {fields["prefix"]!r}')

        for name in VERSION_BYTE_FIELDS:
            _check_int(name, fields[name], MAX_VERSION_BYTE)
        for name in EXTENDED_KEY_FIELDS:
            _check_int(name, fields[name], MAX_EXTENDED_KEY_VERSION)

        for name in FLAG_FIELDS:
            if name in fields:
                fields[name] = bool(fields[name])

        fields['network_magic'] = _check_magic(fields.get('network_magic'))
        fields['port'] = _check_port(fields.get('port'))
        fields['dns_seeds'] = _check_seeds(fields.get('dns_seeds'))

        regtest = fields.get('regtest')
        if regtest is not None and not isinstance(regtest, NetworkParams):
            if not isinstance(regtest, Mapping):
                raise InvalidNetwork(f'regtest must be an object: {regtest!r}')
            fields['regtest'] = NetworkParams.from_dict(regtest)

        return cls(**fields)

    def to_dict(self) -> Dict[str, Any]:
        """Return a json serializable dict."""
        data = self._asdict()
        data['network_magic'] = self.network_magic.hex() if self.network_magic is not None else None
        data['dns_seeds'] = list(self.dns_seeds)
        data['regtest'] = self.regtest.to_dict() if self.regtest is not None else None
        return data


def _check_int(name: str, value: Any, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidNetwork(f'{name} must be an integer: {value!r}')
    if not 0 <= value <= maximum:
        raise InvalidNetwork(f'{name} out of range: {value:#x}')


def _check_port(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or not 0 < value <= MAX_PORT:
        raise InvalidNetwork(f'invalid port: {value!r}')
    return value


def _check_magic(value: Any) -> Optional[bytes]:
    if value is None:
        return None
    return normalize_magic(value)


def _check_seeds(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)) or not all(isinstance(seed, str) for seed in value):
        raise InvalidNetwork(f'dns seeds must be a list of hostnames: {value!r}')
    return tuple(value)
