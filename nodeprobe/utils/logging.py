# nodeprobe/utils/logging.py
"""
Logging centralizado para nodeprobe
Fornece logger estruturado com suporte a múltiplos níveis
"""

import logging
import sys
from pathlib import Path

from nodeprobe.config import LOG_LEVEL, LOG_FILE


class ColoredFormatter(logging.Formatter):
    """Formatter com cores para terminal"""
    
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[92m',       # Green
        'WARNING': '\033[93m',    # Yellow
        'ERROR': '\033[91m',      # Red
        'CRITICAL': '\033[41m',   # Red background
    }
    RESET = '\033[0m'
    
    def format(self, record):
        # Copia para não contaminar o levelname visto pelo file handler
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}[{levelname}]{self.RESET}"
        return super().format(record)


def setup_logging(name='nodeprobe', level=logging.INFO, log_file=None):
    """
    Configurar logger centralizado
    
    Args:
        name: Nome do logger
        level: Nível de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Arquivo para salvar logs (opcional)
    
    Returns:
        logger: Logger configurado
    """
    
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Remover handlers anteriores (evitar duplicação)
    logger.handlers.clear()
    
    # ===== Console Handler (Colorido) =====
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    
    console_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    console_handler.setFormatter(ColoredFormatter(console_format, datefmt='%H:%M:%S'))
    
    logger.addHandler(console_handler)
    
    # ===== File Handler (Completo) =====
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        
        file_format = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
        file_handler.setFormatter(logging.Formatter(file_format))
        
        logger.addHandler(file_handler)
    
    return logger


def resolve_level(level_name):
    """Nível numérico para o nome dado; INFO se o nome for desconhecido"""
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        return logging.INFO
    return level


# Logger global padrão
logger = setup_logging(level=resolve_level(LOG_LEVEL), log_file=LOG_FILE)
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    logger.warning(f"⚠️  Unknown NODEPROBE_LOG_LEVEL {LOG_LEVEL!r}, using INFO")


def get_logger(name):
    """Obter logger para um módulo específico"""
    return logging.getLogger(f'nodeprobe.{name}')
