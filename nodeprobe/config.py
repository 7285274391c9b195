# nodeprobe/config.py

"""
Constantes e configuração do nodeprobe

Valores fixos do alocador de portas e overrides via variáveis de ambiente
para o logging.
"""

import os

# Tentativas de bind antes de desistir
MAX_PORT_RETRIES = 1000

# Portas não-efêmeras, para não colidir com portas escolhidas pelo SO (bind na porta 0)
RANDOM_PORT_RANGE = range(10000, 30000)

LOCALHOST = "localhost"
IPV4_ANY = "0.0.0.0"
IPV6_LOOPBACK = "::1"

# Faixa efêmera padrão IANA, usada quando o kernel não informa a sua
DEFAULT_EPHEMERAL_RANGE = range(49152, 65536)
EPHEMERAL_RANGE_FILE = "/proc/sys/net/ipv4/ip_local_port_range"

LOG_LEVEL = os.getenv("NODEPROBE_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("NODEPROBE_LOG_FILE")
