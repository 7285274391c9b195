# nodeprobe/utils/validation.py
"""
Validação de portas contra a faixa efêmera do SO
"""

from pathlib import Path

from nodeprobe.config import DEFAULT_EPHEMERAL_RANGE, EPHEMERAL_RANGE_FILE
from nodeprobe.utils.logging import get_logger

logger = get_logger('validation')


def get_ephemeral_range():
    """
    Faixa de portas efêmeras do SO
    
    Lê ip_local_port_range no Linux; nos demais casos usa a faixa IANA.
    
    Returns:
        range: Faixa efêmera (fim exclusivo)
    """
    path = Path(EPHEMERAL_RANGE_FILE)
    try:
        low, high = path.read_text().split()
        return range(int(low), int(high) + 1)
    except (OSError, ValueError):
        logger.debug(f"Ephemeral range not readable from {path}, using IANA default")
        return DEFAULT_EPHEMERAL_RANGE


def is_ephemeral_port(port, ephemeral_range=None):
    """
    Verifica se a porta cai na faixa efêmera do SO
    
    Args:
        port: Número da porta
        ephemeral_range: Faixa já lida (evita reler o kernel a cada porta)
    
    Returns:
        bool: True se a porta é efêmera
    """
    if ephemeral_range is None:
        ephemeral_range = get_ephemeral_range()
    return int(port) in ephemeral_range


def ranges_overlap(a, b):
    """Verifica se dois range() de portas se sobrepõem"""
    return max(a.start, b.start) < min(a.stop, b.stop)
