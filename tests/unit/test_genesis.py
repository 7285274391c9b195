# tests/unit/test_genesis.py

"""
Testes do acesso à transação genesis e do modelo NodeConfig
"""

import copy

import pytest

from nodeprobe.genesis import get_genesis_txn
from nodeprobe.models import ExecutionConfig, NodeConfig, Transaction


@pytest.mark.unit
class TestGetGenesisTxn:
    """Testes para get_genesis_txn"""

    def test_returns_same_object(self, node_config_with_genesis, genesis_txn):
        assert get_genesis_txn(node_config_with_genesis) is genesis_txn

    def test_none_when_absent(self, node_config_without_genesis):
        assert get_genesis_txn(node_config_without_genesis) is None

    def test_does_not_mutate(self, node_config_with_genesis):
        before = copy.deepcopy(node_config_with_genesis)
        get_genesis_txn(node_config_with_genesis)
        assert node_config_with_genesis == before


@pytest.mark.unit
class TestNodeConfig:
    """Testes para NodeConfig/ExecutionConfig/Transaction"""

    def test_default_has_no_genesis(self):
        config = NodeConfig()
        assert config.execution.genesis is None
        assert config.execution.genesis_file_location is None

    def test_dict_roundtrip(self, genesis_txn):
        config = NodeConfig(execution=ExecutionConfig(
            genesis=genesis_txn,
            genesis_file_location="/app/genesis.blob",
        ))

        data = config.to_dict()
        assert data['execution']['genesis']['payload'] == genesis_txn.payload.hex()

        assert NodeConfig.from_dict(data) == config

    def test_from_empty_dict(self):
        assert NodeConfig.from_dict({}) == NodeConfig()

    def test_transaction_requires_bytes(self):
        with pytest.raises(ValueError):
            Transaction(payload="not-bytes")
