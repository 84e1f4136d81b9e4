"""
Utility functions and helpers
"""

from .dump import ExchangeDump
from .logging import get_logger, setup_logging
from .throttle import Throttle

__all__ = [
    "ExchangeDump",
    "Throttle",
    "get_logger",
    "setup_logging",
]
