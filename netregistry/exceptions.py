# Copyright (c) Hathor Labs and its affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.


class NetworkRegistryError(Exception):
    """Base class for errors raised by the network registry."""

    pass


class InvalidNetwork(NetworkRegistryError, ValueError):
    """Exception raised when network data is missing fields or has values out of range."""

    pass


class NetworkCollision(NetworkRegistryError):
    """Exception raised when a new network reuses a lookup key owned by another network."""

    def __init__(self, field: str, value: object, owner: str) -> None:
        """Init exception with the colliding field, its value and the name of the current owner."""
        super().__init__(f'{field}={value!r} is already used by network {owner!r}')
        self.field = field
        self.value = value
        self.owner = owner
