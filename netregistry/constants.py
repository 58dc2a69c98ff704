# Copyright (c) Hathor Labs and its affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.
from typing import Any, Dict, List

LIVENET_NETWORK_NAME = 'livenet'

TESTNET_NETWORK_NAME = 'testnet'

# Network returned by `NetworkRegistry.default_network`.
DEFAULT_NETWORK_NAME = LIVENET_NETWORK_NAME

# Parameters of the public bitcoin test network.
TESTNET: Dict[str, Any] = {
    'port': 18333,
    'network_magic': 0x0b110907,
    'dns_seeds': [
        'testnet-seed.bitcoin.petertodd.org',
        'testnet-seed.bluematt.me',
        'testnet-seed.alexykot.me',
        'testnet-seed.bitcoin.schildbach.de',
    ],
}

# Parameters of a local regression test network. There are no seeds, peers are added by hand.
REGTEST: Dict[str, Any] = {
    'port': 18444,
    'network_magic': 0xfabfb5da,
    'dns_seeds': [],
}

# Networks loaded by `create_default_registry()`, in this order.
BUILTIN_NETWORKS: List[Dict[str, Any]] = [
    {
        'name': LIVENET_NETWORK_NAME,
        'alias': 'mainnet',
        'coin': 'btc',
        'url': 'bitcoin',
        'coin_name': 'BITCOIN',
        'short_name': 'BTC',
        'prefix': '1',
        'pubkeyhash': 0x00,
        'privatekey': 0x80,
        'scripthash': 0x05,
        'xpubkey': 0x0488b21e,
        'xprivkey': 0x0488ade4,
        'network_magic': 0xf9beb4d9,
        'port': 8333,
        'dns_seeds': [
            'seed.bitcoin.sipa.be',
            'dnsseed.bluematt.me',
            'dnsseed.bitcoin.dashjr.org',
            'seed.bitcoinstats.com',
            'seed.bitnodes.io',
            'bitseed.xf2.org',
        ],
    },
    {
        'name': TESTNET_NETWORK_NAME,
        'alias': 'regtest',
        'prefix': 't',
        'pubkeyhash': 0x6f,
        'privatekey': 0xef,
        'scripthash': 0xc4,
        'xpubkey': 0x043587cf,
        'xprivkey': 0x04358394,
        'regtest': REGTEST,
        **TESTNET,
    },
    {
        'name': 'ventas',
        'alias': 'ventas',
        'coin': 'venc',
        'coin_name': 'VENTAS',
        'url': 'ventas',
        'short_name': 'VENC',
        'algorithm': 'scrypt',
        'txtimestamp': True,
        'skip_sign_time': True,
        'prefix': 'V',
        'pubkeyhash': 0x46,
        'privatekey': 0xcc,
        'scripthash': 0x84,
        'xpubkey': 0x0488b21e,
        'xprivkey': 0x0488ade4,
        'network_magic': 0x76656e74,
        'port': 13101,
        'dns_seeds': ['chain001.bitchk.com'],
    },
    {
        'name': 'yangcoin',
        'alias': 'yangcoin',
        'coin': 'yng',
        'url': 'yangcoin',
        'coin_name': 'YANGCOIN',
        'short_name': 'YNG',
        'prefix': 'Y',
        'txtimestamp': True,
        'skip_sign_time': False,
        'algorithm': 'scrypt',
        'pubkeyhash': 0x4e,
        'privatekey': 0x8c,
        'scripthash': 0xcc,
        'xpubkey': 0x0488b21e,
        'xprivkey': 0x0488ade4,
        'network_magic': 0x59414e47,
        'port': 23001,
        'dns_seeds': ['chain001.bitchk.com'],
    },
    {
        'name': 'quasar',
        'alias': 'quasar',
        'coin': 'qac',
        'url': 'quasar',
        'coin_name': 'Quasar',
        'short_name': 'QAC',
        'prefix': 'Q',
        'txtimestamp': True,
        'algorithm': 'scrypt',
        'pubkeyhash': 0x3a,
        'privatekey': 0x78,
        'scripthash': 0xcc,
        'xpubkey': 0x0488b21e,
        'xprivkey': 0x0488ade4,
        'network_magic': 0x51554153,
        'port': 13201,
        'dns_seeds': ['qac001.bitchk.com'],
    },
    {
        'name': 'paxcoin',
        'alias': 'paxcoin',
        'coin': 'pax',
        'url': 'paxcoin',
        'coin_name': 'PAXCOIN',
        'short_name': 'PAX',
        'prefix': 'P',
        'txtimestamp': True,
        'algorithm': 'scrypt',
        'pubkeyhash': 0x37,
        'privatekey': 0x75,
        'scripthash': 0xcc,
        'xpubkey': 0x0488b21e,
        'xprivkey': 0x0488ade4,
        'network_magic': 0x50415843,
        'port': 13501,
        'dns_seeds': ['pax001.bitchk.com'],
    },
    {
        'name': 'qctcoin',
        'alias': 'qctcoin',
        'coin': 'qct',
        'url': 'qcity',
        'coin_name': 'QCITYCOIN',
        'short_name': 'QCT',
        'prefix': 'C',
        'txtimestamp': True,
        'algorithm': 'scrypt',
        'pubkeyhash': 0x1c,
        'privatekey': 0x57,
        'scripthash': 0xcc,
        'xpubkey': 0x0488b21e,
        'xprivkey': 0x0488ade4,
        'network_magic': 0x71746379,
        'port': 13301,
        'dns_seeds': ['qct001.bitchk.com'],
    },
    {
        'name': 'searchcoin',
        'alias': 'searchcoin',
        'coin': 'ssc',
        'url': 'searchcoin',
        'coin_name': 'Searchcoin',
        'short_name': 'SSC',
        'prefix': 'S',
        'txtimestamp': True,
        'algorithm': 'scrypt',
        'pubkeyhash': 0x3f,
        'privatekey': 0x7d,
        'scripthash': 0xcc,
        'xpubkey': 0x0488b21e,
        'xprivkey': 0x0488ade4,
        'network_magic': 0x53454152,
        'port': 13401,
        'dns_seeds': ['ssc001.bitchk.com'],
    },
    {
        'name': 'litecoin',
        'alias': 'litecoin',
        'coin': 'ltc',
        'url': 'litecoin',
        'coin_name': 'LITECOIN',
        'short_name': 'LTC',
        'algorithm': 'scrypt',
        'txtimestamp': False,
        'prefix': 'L',
        'pubkeyhash': 0x30,
        'privatekey': 0xb0,
        'scripthash': 0x32,
        'xpubkey': 0x019da462,
        'xprivkey': 0x019d9cfe,
        'network_magic': 0xfbc0b6db,
        'port': 9333,
        'dns_seeds': ['dnsseed.litecointools.com'],
    },
    {
        'name': 'terabit',
        'alias': 'terabit',
        'coin': 'tbc',
        'url': 'terabit',
        'coin_name': 'TERABIT',
        'short_name': 'TBC',
        'txtimestamp': True,
        'pubkeyhash': 0x41,
        'privatekey': 0xcc,
        'scripthash': 0x10,
        'xpubkey': 0x0488b21e,
        'xprivkey': 0x0488abe4,
        'network_magic': 0x70352205,
        'port': 13001,
        'algorithm': 'scrypt',
        'prefix': 'T',
        'dns_seeds': ['tera001.bitchk.com'],
    },
    {
        'name': 'jbcoin',
        'alias': 'jbcoin',
        'coin': 'jbc',
        'url': 'jbcoin',
        'coin_name': 'JinBioCoin',
        'short_name': 'JBC',
        'prefix': 'J',
        'txtimestamp': True,
        'skip_sign_time': False,
        'pos': True,
        'algorithm': 'scrypt',
        'pubkeyhash': 0x2b,
        'privatekey': 0x69,
        'scripthash': 0xcc,
        'xpubkey': 0x0488b21e,
        'xprivkey': 0x0488ade4,
        'network_magic': 0xa4424343,
        'port': 13701,
        'dns_seeds': ['jbc001.bitchk.com'],
    },
]
