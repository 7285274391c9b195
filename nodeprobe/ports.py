# nodeprobe/ports.py

"""
Alocação de portas TCP livres

Sorteia uma porta fora da faixa efêmera, confirma que está livre e força
a porta para TIME_WAIT, deixando-a reservada por um período de graça.
"""

import os
import random
import socket
import sys

from nodeprobe.config import (
    MAX_PORT_RETRIES,
    RANDOM_PORT_RANGE,
    LOCALHOST,
    IPV4_ANY,
    IPV6_LOOPBACK,
)
from nodeprobe.exceptions import PortExhaustedError
from nodeprobe.models import NetworkAddress, Protocol
from nodeprobe.utils import (
    get_ephemeral_range,
    get_logger,
    is_ephemeral_port,
    ranges_overlap,
)

logger = get_logger('ports')

# SystemRandom lê do os.urandom: sem estado compartilhado entre threads
_rng = random.SystemRandom()


def get_available_port():
    """
    Retorna uma porta não-efêmera disponível.

    Em sistemas unix a porta retornada fica em TIME_WAIT, então o SO não a
    entrega a outro processo durante algum tempo (cerca de 60s no Linux).
    O chamador consegue fazer bind nela desde que use SO_REUSEADDR.

    Returns:
        int: Porta em RANDOM_PORT_RANGE

    Raises:
        SystemExit: Se nenhuma porta for encontrada após MAX_PORT_RETRIES
    """
    try:
        return reserve_port()
    except PortExhaustedError as e:
        logger.critical(f"❌ Error: could not find an available port ({e})")
        sys.exit(f"Error: could not find an available port: {e}")


def reserve_port(max_retries=MAX_PORT_RETRIES):
    """
    Mesmo algoritmo de get_available_port, com erro tipado na exaustão.

    Args:
        max_retries: Número de tentativas de bind

    Returns:
        int: Porta reservada

    Raises:
        PortExhaustedError: Se todas as tentativas falharem
    """
    ephemeral = get_ephemeral_range()
    if ranges_overlap(ephemeral, RANDOM_PORT_RANGE):
        logger.warning(
            f"⚠️  Ephemeral range [{ephemeral.start}, {ephemeral.stop}) overlaps "
            f"[{RANDOM_PORT_RANGE.start}, {RANDOM_PORT_RANGE.stop}); skipping ephemeral candidates"
        )

    for attempt in range(1, max_retries + 1):
        port = _rng.randrange(RANDOM_PORT_RANGE.start, RANDOM_PORT_RANGE.stop)
        if is_ephemeral_port(port, ephemeral):
            logger.debug(f"Attempt {attempt}/{max_retries}: port {port} is ephemeral")
            continue

        try:
            reserved = _reserve_random_port(port)
        except OSError as e:
            logger.debug(f"Attempt {attempt}/{max_retries}: port {port} unavailable ({e})")
            continue

        logger.debug(f"✅ Reserved port {reserved} (attempt {attempt})")
        return reserved

    logger.error(f"No available port after {max_retries} attempts")
    raise PortExhaustedError(max_retries, RANDOM_PORT_RANGE)


def _reserve_random_port(port):
    """Faz bind em (localhost, port) e passa a porta por TIME_WAIT"""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        if os.name == "posix":
            # O socket aceito herda a flag, e o TIME_WAIT dele aceita o rebind do chamador
            listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((LOCALHOST, port))
        listener.listen(1)
        addr = listener.getsockname()

        # Cria e aceita uma conexão, descartada logo em seguida: o lado aceito
        # fecha primeiro e fica em TIME_WAIT, segurando a porta
        with socket.create_connection(addr) as _sender:
            incoming, _ = listener.accept()
            incoming.close()

    return addr[1]


def get_available_port_in_multiaddr(is_ipv4):
    """
    Endereço de escuta com porta reservada

    Args:
        is_ipv4: True para /ip4/0.0.0.0, False para /ip6/::1

    Returns:
        NetworkAddress: ex. /ip4/0.0.0.0/tcp/12345
    """
    if is_ipv4:
        ip_proto = Protocol.ip4(IPV4_ANY)
    else:
        ip_proto = Protocol.ip6(IPV6_LOOPBACK)

    # Literais fixos: falha aqui é bug, deixa propagar
    address = NetworkAddress.from_protocols([ip_proto, Protocol.tcp(get_available_port())])
    logger.info(f"Listen address: {address}")
    return address
