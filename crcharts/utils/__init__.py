"""
Utility functions and helpers.
"""

from .logger import setup_logger, LoggerMixin
from .config_loader import ConfigLoader
from .helpers import *

__all__ = ['setup_logger', 'LoggerMixin', 'ConfigLoader', 'to_numeric', 'is_number',
           'number_to_str', 'px', 'translate']
