# nodeprobe/models/network_address.py

"""
Modelo de endereço de rede (multiaddr)
Sequência tipada de componentes: IP/DNS seguido opcionalmente de transporte
"""

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Iterable, Optional, Tuple, Union, Dict, Any

from nodeprobe.exceptions import AddressConstructionError
from nodeprobe.utils import get_logger

logger = get_logger('models.network_address')

IpAddress = Union[IPv4Address, IPv6Address]

NETWORK_PROTOCOLS = ("ip4", "ip6", "dns")
TRANSPORT_PROTOCOLS = ("tcp", "udp")


@dataclass(frozen=True)
class Protocol:
    """
    Um componente de endereço de rede

    Attributes:
        name: Tipo do componente (ip4, ip6, dns, tcp, udp)
        value: IPv4Address, IPv6Address, porta (int) ou hostname (str)
    """
    name: str
    value: Union[IPv4Address, IPv6Address, int, str]

    def __post_init__(self):
        """Valida o valor contra o tipo do componente"""
        if self.name == "ip4":
            ok = isinstance(self.value, IPv4Address)
        elif self.name == "ip6":
            ok = isinstance(self.value, IPv6Address)
        elif self.name in TRANSPORT_PROTOCOLS:
            ok = (
                isinstance(self.value, int)
                and not isinstance(self.value, bool)
                and 0 <= self.value <= 65535
            )
        elif self.name == "dns":
            ok = isinstance(self.value, str) and bool(self.value) and "/" not in self.value
        else:
            raise AddressConstructionError(f"Unknown protocol: {self.name}")

        if not ok:
            raise AddressConstructionError(
                f"Invalid value for /{self.name}: {self.value!r}"
            )

    @classmethod
    def ip4(cls, addr) -> 'Protocol':
        return cls("ip4", _parse_ip(addr, IPv4Address))

    @classmethod
    def ip6(cls, addr) -> 'Protocol':
        return cls("ip6", _parse_ip(addr, IPv6Address))

    @classmethod
    def tcp(cls, port: int) -> 'Protocol':
        return cls("tcp", port)

    @classmethod
    def udp(cls, port: int) -> 'Protocol':
        return cls("udp", port)

    @classmethod
    def dns(cls, name: str) -> 'Protocol':
        return cls("dns", name)

    @classmethod
    def from_ip(cls, ip: IpAddress) -> 'Protocol':
        """Escolhe ip4 ou ip6 pela versão do endereço"""
        if isinstance(ip, IPv4Address):
            return cls("ip4", ip)
        return cls("ip6", ip)

    @property
    def is_network(self) -> bool:
        return self.name in NETWORK_PROTOCOLS

    @property
    def is_transport(self) -> bool:
        return self.name in TRANSPORT_PROTOCOLS

    def __str__(self):
        return f"/{self.name}/{self.value}"


def _parse_ip(addr, expected):
    if isinstance(addr, expected):
        return addr
    try:
        parsed = ip_address(addr)
    except ValueError as e:
        raise AddressConstructionError(f"Invalid IP address: {addr!r}") from e
    if not isinstance(parsed, expected):
        raise AddressConstructionError(
            f"Expected {expected.__name__}, got {addr!r}"
        )
    return parsed


@dataclass(frozen=True)
class NetworkAddress:
    """
    Endereço de rede estruturado (formato multiaddr)

    Attributes:
        protocols: Componente de rede seguido de no máximo um transporte
    """
    protocols: Tuple[Protocol, ...]

    def __post_init__(self):
        """Valida a estrutura da sequência"""
        try:
            protocols = tuple(self.protocols)
        except TypeError as e:
            raise AddressConstructionError(f"Not a protocol sequence: {self.protocols!r}") from e
        object.__setattr__(self, 'protocols', protocols)

        if not protocols:
            raise AddressConstructionError("Empty protocol sequence")

        for proto in protocols:
            if not isinstance(proto, Protocol):
                raise AddressConstructionError(f"Not a protocol: {proto!r}")

        head, rest = protocols[0], protocols[1:]
        if not head.is_network:
            raise AddressConstructionError(
                f"Address must start with {'/'.join(NETWORK_PROTOCOLS)}, got /{head.name}"
            )

        if any(p.is_network for p in rest):
            raise AddressConstructionError(
                f"More than one network component: {''.join(map(str, protocols))}"
            )

        if len(rest) > 1:
            raise AddressConstructionError(
                f"More than one transport component: {''.join(map(str, protocols))}"
            )

        logger.debug(f"NetworkAddress built: {self}")

    @classmethod
    def from_protocols(cls, protocols: Iterable[Protocol]) -> 'NetworkAddress':
        """
        Cria endereço a partir de uma sequência de componentes

        Returns:
            NetworkAddress: Endereço validado

        Raises:
            AddressConstructionError: Se a sequência é estruturalmente inválida
        """
        return cls(tuple(protocols))

    @classmethod
    def from_ip(cls, ip: IpAddress) -> 'NetworkAddress':
        return cls.from_protocols([Protocol.from_ip(ip)])

    @classmethod
    def parse(cls, text: str) -> 'NetworkAddress':
        """
        Interpreta a forma textual (ex: /ip4/10.0.0.1/tcp/2001)

        Raises:
            AddressConstructionError: Se o texto é malformado
        """
        if not text.startswith("/"):
            raise AddressConstructionError(f"Address must start with '/': {text!r}")

        parts = text.strip("/").split("/")
        if len(parts) % 2 != 0:
            raise AddressConstructionError(f"Dangling component in {text!r}")

        protocols = []
        for name, raw in zip(parts[0::2], parts[1::2]):
            if name == "ip4":
                protocols.append(Protocol.ip4(raw))
            elif name == "ip6":
                protocols.append(Protocol.ip6(raw))
            elif name == "dns":
                protocols.append(Protocol.dns(raw))
            elif name in TRANSPORT_PROTOCOLS:
                # isdigit() sozinho aceita dígitos unicode ("²")
                if not (raw.isascii() and raw.isdigit()):
                    raise AddressConstructionError(f"Invalid port: {raw!r}")
                protocols.append(Protocol(name, int(raw)))
            else:
                raise AddressConstructionError(f"Unknown protocol: {name}")

        return cls.from_protocols(protocols)

    @property
    def ip(self) -> Optional[IpAddress]:
        """IP do componente de rede (None para /dns)"""
        head = self.protocols[0]
        if head.name in ("ip4", "ip6"):
            return head.value
        return None

    @property
    def port(self) -> Optional[int]:
        """Porta do componente de transporte, se houver"""
        for proto in self.protocols:
            if proto.is_transport:
                return proto.value
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Converte endereço para dicionário"""
        return {
            'address': str(self),
            'ip': str(self.ip) if self.ip is not None else None,
            'port': self.port,
        }

    def __str__(self):
        return "".join(str(p) for p in self.protocols)
