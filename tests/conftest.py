# tests/conftest.py

"""
Configuração global de testes do projeto nodeprobe
"""

import sys
from pathlib import Path

# Adiciona raiz do projeto ao PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def pytest_configure(config):
    """Configuração executada antes dos testes"""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test using real loopback sockets"
    )
