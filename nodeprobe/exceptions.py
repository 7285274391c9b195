# nodeprobe/exceptions.py

"""
Exceções específicas do nodeprobe
"""


class NodeProbeError(Exception):
    """Exceção base para erros do nodeprobe"""
    pass


class PortExhaustedError(NodeProbeError):
    """Nenhuma porta livre encontrada dentro do limite de tentativas"""
    def __init__(self, attempts: int, port_range: range):
        self.attempts = attempts
        self.port_range = port_range
        super().__init__(
            f"Could not find an available port in "
            f"[{port_range.start}, {port_range.stop}) after {attempts} attempts"
        )


class AddressConstructionError(NodeProbeError, ValueError):
    """Componente ou sequência de endereço de rede malformada"""
    pass


class InterfaceEnumerationError(NodeProbeError):
    """Falha ao enumerar as interfaces de rede do host"""
    pass
