# tests/unit/test_network_address.py

"""
Testes do modelo NetworkAddress/Protocol
"""

from ipaddress import IPv4Address, IPv6Address

import pytest

from nodeprobe.exceptions import AddressConstructionError
from nodeprobe.models import NetworkAddress, Protocol


@pytest.mark.unit
class TestProtocol:
    """Testes para Protocol"""

    def test_ip_constructors(self):
        assert Protocol.ip4("10.0.0.1").value == IPv4Address("10.0.0.1")
        assert Protocol.ip6("::1").value == IPv6Address("::1")

    def test_from_ip_picks_version(self):
        assert Protocol.from_ip(IPv4Address("10.0.0.1")).name == "ip4"
        assert Protocol.from_ip(IPv6Address("fe80::1")).name == "ip6"

    @pytest.mark.parametrize("factory,value", [
        (Protocol.ip4, "999.999.999.999"),
        (Protocol.ip4, "::1"),
        (Protocol.ip6, "10.0.0.1"),
        (Protocol.tcp, 65536),
        (Protocol.tcp, -1),
        (Protocol.tcp, True),
        (Protocol.udp, "2001"),
        (Protocol.dns, ""),
    ])
    def test_invalid_values_rejected(self, factory, value):
        with pytest.raises(AddressConstructionError):
            factory(value)

    def test_unknown_protocol(self):
        with pytest.raises(AddressConstructionError):
            Protocol("quic", 443)

    def test_construction_error_is_value_error(self):
        with pytest.raises(ValueError):
            Protocol.tcp(70000)


@pytest.mark.unit
class TestNetworkAddress:
    """Testes para NetworkAddress"""

    def test_from_protocols(self):
        address = NetworkAddress.from_protocols([Protocol.ip4("0.0.0.0"), Protocol.tcp(2001)])

        assert str(address) == "/ip4/0.0.0.0/tcp/2001"
        assert address.ip == IPv4Address("0.0.0.0")
        assert address.port == 2001
        assert address.to_dict() == {
            'address': "/ip4/0.0.0.0/tcp/2001",
            'ip': "0.0.0.0",
            'port': 2001,
        }

    def test_dns_has_no_ip(self):
        address = NetworkAddress.from_protocols([Protocol.dns("validator1"), Protocol.udp(2001)])
        assert address.ip is None
        assert address.port == 2001

    @pytest.mark.parametrize("protocols", [
        [],
        [Protocol.tcp(2001)],
        [Protocol.tcp(2001), Protocol.ip4("10.0.0.1")],
        [Protocol.ip4("10.0.0.1"), Protocol.ip6("::1")],
        [Protocol.ip4("10.0.0.1"), Protocol.tcp(1), Protocol.udp(2)],
        ["/ip4/10.0.0.1"],
    ])
    def test_invalid_sequences(self, protocols):
        with pytest.raises(AddressConstructionError):
            NetworkAddress.from_protocols(protocols)

    def test_direct_constructor_validates(self):
        """O construtor da dataclass aplica as mesmas regras de from_protocols"""
        with pytest.raises(AddressConstructionError):
            NetworkAddress(())

        with pytest.raises(AddressConstructionError):
            NetworkAddress((Protocol.tcp(1), Protocol.tcp(2)))

        with pytest.raises(AddressConstructionError):
            NetworkAddress(None)

    def test_direct_constructor_normalizes_to_tuple(self):
        address = NetworkAddress([Protocol.ip4("10.0.0.1"), Protocol.udp(2001)])
        assert isinstance(address.protocols, tuple)
        assert str(address) == "/ip4/10.0.0.1/udp/2001"

    def test_parse(self):
        address = NetworkAddress.parse("/ip6/::1/tcp/12345")
        assert address.protocols == (Protocol.ip6("::1"), Protocol.tcp(12345))
        assert address == NetworkAddress.from_protocols(address.protocols)

    @pytest.mark.parametrize("text", [
        "ip4/10.0.0.1",
        "/ip4/10.0.0.1/tcp",
        "/ip4/10.0.0.1/tcp/abc",
        "/ip4/10.0.0.1/tcp/\u00b2",
        "/ip4/10.0.0.1/tcp/-1",
        "/sctp/10",
    ])
    def test_parse_invalid(self, text):
        with pytest.raises(AddressConstructionError):
            NetworkAddress.parse(text)

    def test_is_immutable(self):
        address = NetworkAddress.from_ip(IPv4Address("10.0.0.1"))
        with pytest.raises(AttributeError):
            address.protocols = ()
