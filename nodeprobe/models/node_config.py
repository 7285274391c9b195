# nodeprobe/models/node_config.py

"""
Modelo de configuração do nó
Apenas a seção de execução, de onde se lê a transação genesis
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from nodeprobe.utils import get_logger

logger = get_logger('models.node_config')


@dataclass
class Transaction:
    """
    Transação opaca (ex: genesis)

    Attributes:
        payload: Bytes serializados da transação
        kind: Tipo da transação
    """
    payload: bytes
    kind: str = "genesis"

    def __post_init__(self):
        if not isinstance(self.payload, (bytes, bytearray)):
            raise ValueError(f"Transaction payload must be bytes, got {type(self.payload).__name__}")
        self.payload = bytes(self.payload)

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind, 'payload': self.payload.hex()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transaction':
        return cls(
            payload=bytes.fromhex(data['payload']),
            kind=data.get('kind', 'genesis'),
        )


@dataclass
class ExecutionConfig:
    """
    Seção de execução da configuração do nó

    Attributes:
        genesis: Transação genesis carregada (opcional)
        genesis_file_location: Caminho para o genesis.blob (opcional)
    """
    genesis: Optional[Transaction] = None
    genesis_file_location: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'genesis': self.genesis.to_dict() if self.genesis else None,
            'genesis_file_location': self.genesis_file_location,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExecutionConfig':
        genesis = data.get('genesis')
        return cls(
            genesis=Transaction.from_dict(genesis) if genesis else None,
            genesis_file_location=data.get('genesis_file_location'),
        )


@dataclass
class NodeConfig:
    """Configuração do nó (subconjunto consumido pelo nodeprobe)"""
    execution: ExecutionConfig = field(default_factory=ExecutionConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Converte config para dicionário"""
        return {'execution': self.execution.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NodeConfig':
        """Cria config a partir de dicionário"""
        logger.debug(f"Creating NodeConfig from dict: {data}")
        return cls(execution=ExecutionConfig.from_dict(data.get('execution', {})))
