"""Utility exports for the mastergames package."""

from .hasher import Hasher
from .logger import get_logger, set_level
from .normalize_string import normalize_string
from .now import Now
from .to_int import to_int

__all__ = [
    "Hasher",
    "Now",
    "get_logger",
    "normalize_string",
    "set_level",
    "to_int",
]
