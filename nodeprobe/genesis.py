# nodeprobe/genesis.py

"""
Acesso à transação genesis da configuração do nó
"""

from typing import Optional

from nodeprobe.models import NodeConfig, Transaction


def get_genesis_txn(config: NodeConfig) -> Optional[Transaction]:
    """Transação genesis da seção de execução (o próprio objeto), ou None"""
    return config.execution.genesis
