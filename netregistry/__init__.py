# Copyright (c) Hathor Labs and its affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from netregistry.exceptions import InvalidNetwork, NetworkCollision, NetworkRegistryError
from netregistry.network import Network, NetworkParams
from netregistry.registry import NetworkMode, NetworkRegistry, create_default_registry

__all__ = [
    'InvalidNetwork',
    'Network',
    'NetworkCollision',
    'NetworkMode',
    'NetworkParams',
    'NetworkRegistry',
    'NetworkRegistryError',
    'create_default_registry',
]
