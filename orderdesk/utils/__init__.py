"""
Utility module for OrderDesk
"""

from .custom_logger import get_logger, setup_logger

__all__ = [
    "get_logger",
    "setup_logger",
]
