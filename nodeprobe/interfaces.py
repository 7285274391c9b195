# nodeprobe/interfaces.py

"""
Descoberta do IP local

Enumera as interfaces de rede do host (psutil) e escolhe o primeiro
endereço não-loopback para anunciar.
"""

import socket
from dataclasses import dataclass
from ipaddress import ip_address, IPv4Address, IPv6Address
from typing import List, Optional, Union

import psutil

from nodeprobe.exceptions import InterfaceEnumerationError
from nodeprobe.models import NetworkAddress
from nodeprobe.utils import get_logger

logger = get_logger('interfaces')

_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


@dataclass(frozen=True)
class InterfaceRecord:
    """
    Um endereço IP de uma interface local

    Attributes:
        name: Nome da interface (ex: eth0)
        ip: Endereço IP
        is_loopback: True se o endereço é de loopback
    """
    name: str
    ip: Union[IPv4Address, IPv6Address]
    is_loopback: bool


def list_interfaces() -> List[InterfaceRecord]:
    """
    Lista os endereços IP das interfaces, na ordem informada pelo SO

    Returns:
        list: InterfaceRecord por endereço IPv4/IPv6

    Raises:
        InterfaceEnumerationError: Se o SO falhar ao enumerar
    """
    try:
        if_addrs = psutil.net_if_addrs()
    except OSError as e:
        raise InterfaceEnumerationError(f"Failed to enumerate interfaces: {e}") from e

    records = []
    for name, addrs in if_addrs.items():
        for addr in addrs:
            if addr.family not in _IP_FAMILIES:
                continue

            # fe80::1%eth0 -> fe80::1
            try:
                ip = ip_address(addr.address.split('%', 1)[0])
            except ValueError:
                logger.debug(f"Skipping unparseable address on {name}: {addr.address!r}")
                continue

            records.append(InterfaceRecord(name=name, ip=ip, is_loopback=ip.is_loopback))

    logger.debug(f"Found {len(records)} interface address(es)")
    return records


def get_local_ip() -> Optional[Union[IPv4Address, IPv6Address]]:
    """
    Retorna um IP local não-loopback, se existir. Caso contrário None.

    Se houver várias interfaces qualificadas, vale a primeira na ordem do SO.
    """
    try:
        records = list_interfaces()
    except InterfaceEnumerationError as e:
        logger.warning(f"⚠️  {e}")
        return None

    for record in records:
        if not record.is_loopback:
            logger.debug(f"Local IP: {record.ip} ({record.name})")
            return record.ip

    logger.debug("No non-loopback interface found")
    return None


def get_local_network_address() -> Optional[NetworkAddress]:
    """IP local como NetworkAddress (/ip4/... ou /ip6/...)"""
    ip = get_local_ip()
    if ip is None:
        return None
    return NetworkAddress.from_ip(ip)
