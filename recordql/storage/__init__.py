"""
Storage backends consumed by generated resolvers.
"""

from .base import BaseStorage, get_record_value
from .memory import InMemoryStorage

__all__ = ["BaseStorage", "InMemoryStorage", "get_record_value"]
