"""Repository layer modules."""

from assetlens.repositories.memory_store import InMemoryStore
from assetlens.repositories.sql_store import SQLStore
from assetlens.repositories.store import BaseStore

__all__ = [
    "BaseStore",
    "InMemoryStore",
    "SQLStore",
]
