# Copyright (c) Hathor Labs and its affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.
import json
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from structlog import get_logger

from netregistry.constants import (
    BUILTIN_NETWORKS,
    DEFAULT_NETWORK_NAME,
    LIVENET_NETWORK_NAME,
    TESTNET_NETWORK_NAME,
)
from netregistry.exceptions import InvalidNetwork, NetworkCollision
from netregistry.network import Network, field_name
from netregistry.utils import NETWORK_MAGIC_SIZE, int_to_bytes, normalize_magic, parse_int

logger = get_logger()

# Lookup indexes kept by the registry. The `name` index also holds aliases.
INDEXES: Tuple[str, ...] = ('name', 'prefix', 'network_magic', 'port')

NetworkKey = Union[Network, str, bytes, int]
FieldNames = Union[str, Sequence[str]]


class NetworkMode(Enum):
    """Which parameter set networks with a regtest variant are presented with."""

    DEFAULT = 'default'
    REGTEST = 'regtest'


class NetworkRegistry:
    """Ordered collection of networks with lookups by name, prefix, magic number and port.

    Networks keep their insertion order. Every lookup key is owned by a single network and adding
    a network that reuses a key owned by another one raises `NetworkCollision`.
    """

    mode: NetworkMode

    def __init__(self, networks: Iterable[Network] = ()) -> None:
        """Init the registry and add `networks` in order."""
        self.log = logger.new()
        self.mode = NetworkMode.DEFAULT
        self._networks: List[Network] = []
        self._indexes: Dict[str, Dict[Any, Network]] = {index: {} for index in INDEXES}
        # Regtest views by network name, so repeated lookups return the same object.
        self._regtest_views: Dict[str, Network] = {}
        for network in networks:
            self.add_network(network)

    def __len__(self) -> int:
        return len(self._networks)

    def __iter__(self) -> Iterator[Network]:
        return iter(self.networks)

    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None  # type: ignore[arg-type]

    @property
    def networks(self) -> Tuple[Network, ...]:
        """Return all networks in insertion order, as seen in the current mode."""
        return tuple(self._resolve(network) for network in self._networks)

    @property
    def livenet(self) -> Optional[Network]:
        return self.get(LIVENET_NETWORK_NAME)

    @property
    def mainnet(self) -> Optional[Network]:
        return self.get(LIVENET_NETWORK_NAME)

    @property
    def testnet(self) -> Optional[Network]:
        return self.get(TESTNET_NETWORK_NAME)

    @property
    def default_network(self) -> Optional[Network]:
        return self.get(DEFAULT_NETWORK_NAME)

    @property
    def regtest_enabled(self) -> bool:
        return self.mode is NetworkMode.REGTEST

    def enable_regtest(self) -> None:
        """Present networks that have a regtest variant with their regtest parameters."""
        self.mode = NetworkMode.REGTEST
        self.log.info('regtest-enabled')

    def disable_regtest(self) -> None:
        """Go back to the default parameters."""
        self.mode = NetworkMode.DEFAULT
        self.log.info('regtest-disabled')

    def add(self, **data: Any) -> Network:
        """Create a network from keyword arguments and add it.

        :raises InvalidNetwork: if the data does not describe a valid network
        :raises NetworkCollision: if a lookup key is already used by another network
        """
        return self.add_network(Network.from_dict(data))

    def add_network(self, network: Network) -> Network:
        """Add a network that was already created.

        Nothing is changed when a collision is found. Adding a network that is already registered
        does nothing.
        """
        keys = self._index_keys(network)
        for index, value in keys:
            owner = self._indexes[index].get(value)
            if owner is network:
                self.log.debug('network-already-added', name=network.name)
                return network
            if owner is not None:
                self.log.warning('network-collision', name=network.name, index=index, owner=owner.name)
                raise NetworkCollision(index, value, owner.name)

        for index, value in keys:
            self._indexes[index][value] = network
        self._networks.append(network)
        return network

    def remove(self, network: Network) -> None:
        """Remove a network and all of its lookup keys. It does nothing if the network is not registered."""
        base = self._find_base(network)
        if base is None:
            return
        self._networks = [x for x in self._networks if x is not base]
        for index in self._indexes.values():
            for key in [key for key, value in index.items() if value is base]:
                del index[key]
        self._regtest_views.pop(base.name, None)
        self.log.info('network-removed', name=base.name)

    def get(self, key: NetworkKey, fields: Optional[FieldNames] = None) -> Optional[Network]:
        """Return the network associated with `key`, or None.

        A registered network is returned unchanged, even if the mode changed since it was obtained:
        a testnet record taken before `enable_regtest()` keeps its default port and magic, while
        `get('testnet')` returns the regtest view. When `fields` is given (a field name or a list
        of them), networks are scanned in order and the first one with `key` in any of those fields
        is returned. Otherwise `key` is searched in the indexes: a str as name, alias or prefix,
        bytes as network magic, an int as port and then as network magic.
        """
        if isinstance(key, Network):
            if self._find_base(key) is not None:
                return key
            return None

        if fields is not None:
            return self._scan(key, fields)

        network = self._lookup(key)
        if network is None:
            return None
        return self._resolve(network)

    def lookup(self, text: str, fields: Optional[FieldNames] = None) -> Optional[Network]:
        """Return the network for a key typed by a user.

        `text` is tried as a string first and then as a number (`8333`, `0xf9beb4d9`).
        """
        network = self.get(text, fields)
        if network is not None:
            return network
        number = parse_int(text)
        if number is None:
            return None
        return self.get(number, fields)

    def load_from_file(self, filename: str) -> List[Network]:
        """Add the networks described in a json file and return them.

        The file must contain a list of objects accepted by `Network.from_dict()`. All networks are
        validated before any of them is added.
        """
        with open(filename, 'r') as fp:
            try:
                data = json.load(fp)
            except json.decoder.JSONDecodeError as e:
                raise InvalidNetwork(f'cannot decode {filename}: {e}') from e
        if not isinstance(data, list):
            raise InvalidNetwork(f'{filename} must contain a list of networks')

        networks: List[Network] = []
        for item in data:
            if not isinstance(item, dict):
                raise InvalidNetwork(f'{filename}: network must be an object: {item!r}')
            networks.append(Network.from_dict(item))

        self._check_collisions(networks)
        for network in networks:
            self.add_network(network)
            self.log.info('Loaded network from file', name=network.name, filename=filename)
        return networks

    def _check_collisions(self, networks: List[Network]) -> None:
        """Raise NetworkCollision if a key of `networks` is taken, by the registry or by another one of them."""
        pending: Dict[Tuple[str, Any], Network] = {}
        for network in networks:
            for index, value in self._index_keys(network):
                owner = self._indexes[index].get(value)
                if owner is None:
                    owner = pending.get((index, value))
                if owner is not None and owner is not network:
                    self.log.warning('network-collision', name=network.name, index=index, owner=owner.name)
                    raise NetworkCollision(index, value, owner.name)
                pending[(index, value)] = network

    def _index_keys(self, network: Network) -> List[Tuple[str, Any]]:
        keys: List[Tuple[str, Any]] = [('name', network.name)]
        if network.alias is not None and network.alias != network.name:
            keys.append(('name', network.alias))
        if network.prefix is not None:
            keys.append(('prefix', network.prefix))
        for params in (network.params, network.regtest):
            if params is None:
                continue
            if params.network_magic is not None and ('network_magic', params.network_magic) not in keys:
                keys.append(('network_magic', params.network_magic))
            if params.port is not None and ('port', params.port) not in keys:
                keys.append(('port', params.port))
        return keys

    def _lookup(self, key: Any) -> Optional[Network]:
        if isinstance(key, str):
            network = self._indexes['name'].get(key)
            if network is None:
                network = self._indexes['prefix'].get(key)
            return network
        if isinstance(key, (bytes, bytearray)):
            return self._indexes['network_magic'].get(bytes(key))
        if isinstance(key, int) and not isinstance(key, bool):
            network = self._indexes['port'].get(key)
            if network is None and 0 <= key < 2 ** (8 * NETWORK_MAGIC_SIZE):
                network = self._indexes['network_magic'].get(int_to_bytes(key, NETWORK_MAGIC_SIZE))
            return network
        return None

    def _scan(self, key: Any, fields: FieldNames) -> Optional[Network]:
        if isinstance(fields, str):
            fields = [fields]
        names = [field_name(name) for name in fields]
        for network in self.networks:
            for name in names:
                value = key
                if name == 'network_magic' and key is not None:
                    try:
                        value = normalize_magic(key)
                    except InvalidNetwork:
                        continue
                if name not in Network._fields:
                    continue
                stored = getattr(network, name)
                # bools only match bools, never 0 or 1
                if isinstance(stored, bool) != isinstance(value, bool):
                    continue
                if stored == value:
                    return network
        return None

    def _find_base(self, network: Network) -> Optional[Network]:
        """Return the registered network that is `network` or has `network` as its regtest view."""
        for base in self._networks:
            if base is network or self._regtest_views.get(base.name) is network:
                return base
        return None

    def _resolve(self, network: Network) -> Network:
        if self.mode is not NetworkMode.REGTEST or network.regtest is None:
            return network
        view = self._regtest_views.get(network.name)
        if view is None:
            view = network.with_params(network.regtest)
            self._regtest_views[network.name] = view
        return view


def create_default_registry() -> NetworkRegistry:
    """Return a new registry with the built-in networks."""
    return NetworkRegistry(Network.from_dict(data) for data in BUILTIN_NETWORKS)
