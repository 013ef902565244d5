"""Token/plaintext stores."""

from cryptograms.services.store.base import TokenStore
from cryptograms.services.store.memory import MemoryTokenStore
from cryptograms.services.store.sql import SqlTokenStore

__all__ = [
    "TokenStore",
    "MemoryTokenStore",
    "SqlTokenStore",
]
