# nodeprobe/__init__.py

"""
nodeprobe - sondagem do host para configuração de nós

Porta TCP livre e reservada, IP local não-loopback, endereço multiaddr
de escuta e acesso à transação genesis.
"""

from nodeprobe.ports import (
    get_available_port,
    reserve_port,
    get_available_port_in_multiaddr,
)
from nodeprobe.interfaces import (
    InterfaceRecord,
    list_interfaces,
    get_local_ip,
    get_local_network_address,
)
from nodeprobe.genesis import get_genesis_txn
from nodeprobe.models import (
    Protocol,
    NetworkAddress,
    Transaction,
    ExecutionConfig,
    NodeConfig,
)
from nodeprobe.exceptions import (
    NodeProbeError,
    PortExhaustedError,
    AddressConstructionError,
    InterfaceEnumerationError,
)

__version__ = "0.1.0"

__all__ = [
    # Ports
    "get_available_port",
    "reserve_port",
    "get_available_port_in_multiaddr",

    # Interfaces
    "InterfaceRecord",
    "list_interfaces",
    "get_local_ip",
    "get_local_network_address",

    # Genesis
    "get_genesis_txn",

    # Models
    "Protocol",
    "NetworkAddress",
    "Transaction",
    "ExecutionConfig",
    "NodeConfig",

    # Exceptions
    "NodeProbeError",
    "PortExhaustedError",
    "AddressConstructionError",
    "InterfaceEnumerationError",
]
