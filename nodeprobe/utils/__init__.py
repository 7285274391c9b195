# nodeprobe/utils/__init__.py
"""
Utilities para nodeprobe
"""

from .logging import setup_logging, resolve_level, get_logger, logger
from .validation import get_ephemeral_range, is_ephemeral_port, ranges_overlap

__all__ = [
    # Logging
    'setup_logging',
    'resolve_level',
    'get_logger',
    'logger',

    # Validation
    'get_ephemeral_range',
    'is_ephemeral_port',
    'ranges_overlap',
]
