"""
Copyright (c) Hathor Labs and its affiliates.

This source code is licensed under the MIT license found in the
LICENSE file in the root directory of this source tree.
"""
import unittest

from netregistry.exceptions import InvalidNetwork
from netregistry.network import Network, NetworkParams

BASE = {
    'name': 'samplenet',
    'pubkeyhash': 0x1e,
    'privatekey': 0x9e,
    'scripthash': 0x16,
    'xpubkey': 0x02fe52cc,
    'xprivkey': 0x02fe52f8,
}


class NetworkTestCase(unittest.TestCase):
    def test_from_dict_defaults(self):
        network = Network.from_dict(BASE)
        self.assertEqual(network.name, 'samplenet')
        self.assertIsNone(network.alias)
        self.assertIsNone(network.network_magic)
        self.assertIsNone(network.port)
        self.assertEqual(network.dns_seeds, ())
        self.assertIsNone(network.regtest)

    def test_from_dict_camel_case(self):
        network = Network.from_dict(dict(
            BASE, networkMagic=0xc0c0c0c0, dnsSeeds=['seed.example.com'], coinName='SAMPLE',
            shortName='SMP', skipSignTime=1,
        ))
        self.assertEqual(network.network_magic, b'\xc0\xc0\xc0\xc0')
        self.assertEqual(network.dns_seeds, ('seed.example.com',))
        self.assertEqual(network.coin_name, 'SAMPLE')
        self.assertEqual(network.short_name, 'SMP')
        self.assertIs(network.skip_sign_time, True)

    def test_magic_formats(self):
        for magic in [0x0000beef, b'\x00\x00\xbe\xef', '0000beef', '0x0000beef']:
            network = Network.from_dict(dict(BASE, network_magic=magic))
            self.assertEqual(network.network_magic, bytes.fromhex('0000beef'))

    def test_immutable(self):
        network = Network.from_dict(BASE)
        with self.assertRaises(AttributeError):
            network.port = 1234

    def test_invalid(self):
        cases = [
            dict(BASE, pubkeyhash=256),
            dict(BASE, privatekey=-1),
            dict(BASE, scripthash='05'),
            dict(BASE, xpubkey=0x100000000),
            dict(BASE, xprivkey=True),
            dict(BASE, network_magic=0x100000000),
            dict(BASE, network_magic=b'\x01\x02'),
            dict(BASE, network_magic='nothex'),
            dict(BASE, port=0),
            dict(BASE, port=70000),
            dict(BASE, port='8333'),
            dict(BASE, dns_seeds='seed.example.com'),
            dict(BASE, prefix='ab'),
            dict(BASE, name=''),
            dict(BASE, alias=1),
            dict(BASE, unknown=1),
            dict(BASE, network_magic=1, networkMagic=1),
            dict(BASE, regtest=[18444]),
            dict(BASE, regtest={'height': 1}),
        ]
        for data in cases:
            with self.assertRaises(InvalidNetwork, msg=repr(data)):
                Network.from_dict(data)

    def test_missing_required(self):
        for field in BASE:
            data = dict(BASE)
            del data[field]
            with self.assertRaises(InvalidNetwork):
                Network.from_dict(data)
        with self.assertRaises(InvalidNetwork):
            Network.from_dict(dict(BASE, name=None))

    def test_with_params(self):
        network = Network.from_dict(dict(BASE, port=1000, network_magic=1, dns_seeds=['a']))
        params = NetworkParams(port=2000, network_magic=b'\x00\x00\x00\x02', dns_seeds=())
        other = network.with_params(params)
        self.assertEqual(other.params, params)
        self.assertEqual(other.name, network.name)
        self.assertEqual(network.port, 1000)

    def test_to_dict(self):
        network = Network.from_dict(dict(
            BASE, network_magic=0xf9beb4d9, dns_seeds=['a', 'b'],
            regtest={'port': 2000, 'network_magic': 2},
        ))
        data = network.to_dict()
        self.assertEqual(data['name'], 'samplenet')
        self.assertEqual(data['network_magic'], 'f9beb4d9')
        self.assertEqual(data['dns_seeds'], ['a', 'b'])
        self.assertEqual(data['regtest'], {'port': 2000, 'network_magic': '00000002', 'dns_seeds': []})
        self.assertEqual(Network.from_dict(data), network)
