"""Utilities module for jumphash."""

from jumphash.utils.log import get_logger
from jumphash.utils.timing import Timer

__all__ = [
    "get_logger",
    "Timer",
]
