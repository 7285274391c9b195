# nodeprobe/models/__init__.py
"""
Modelos de dados para nodeprobe
Estruturas dataclass para endereços de rede e configuração do nó
"""

from .network_address import (
    Protocol,
    NetworkAddress,
)
from .node_config import (
    Transaction,
    ExecutionConfig,
    NodeConfig,
)

__all__ = [
    'Protocol',
    'NetworkAddress',
    'Transaction',
    'ExecutionConfig',
    'NodeConfig',
]
