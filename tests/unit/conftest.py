"""
Fixtures para testes unitários do nodeprobe
"""

import socket
from types import SimpleNamespace

from unittest.mock import patch

import psutil
import pytest

from nodeprobe.config import DEFAULT_EPHEMERAL_RANGE
from nodeprobe.models import ExecutionConfig, NodeConfig, Transaction


@pytest.fixture
def make_if_addr():
    """Factory para entradas no formato de psutil.net_if_addrs()"""
    def _make(address: str, family=socket.AF_INET):
        return SimpleNamespace(
            family=family,
            address=address,
            netmask=None,
            broadcast=None,
            ptp=None,
        )
    return _make


@pytest.fixture
def mac_addr():
    """Entrada de camada de enlace (psutil.AF_LINK)"""
    return SimpleNamespace(
        family=psutil.AF_LINK,
        address="02:42:ac:11:00:02",
        netmask=None,
        broadcast=None,
        ptp=None,
    )


@pytest.fixture
def genesis_txn():
    """Transação genesis de teste"""
    return Transaction(payload=b"\x01\x02genesis-blob")


@pytest.fixture
def node_config_with_genesis(genesis_txn):
    """Config de nó com genesis carregada"""
    return NodeConfig(execution=ExecutionConfig(genesis=genesis_txn))


@pytest.fixture
def node_config_without_genesis():
    """Config de nó sem genesis"""
    return NodeConfig()


@pytest.fixture
def iana_ephemeral_range():
    """Faixa efêmera fixa (IANA), independente do kernel do host"""
    with patch('nodeprobe.ports.get_ephemeral_range', return_value=DEFAULT_EPHEMERAL_RANGE):
        yield DEFAULT_EPHEMERAL_RANGE
